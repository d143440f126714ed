import json

import pytest

from route_atlas.selection import SelectionResolver, SelectionState
from route_atlas.sources.json_dataset import JsonDatasetSource


class TestJsonDatasetSource:

    def test_save_and_load(self, model, tmp_path):
        JsonDatasetSource.save_model(model, tmp_path)
        loaded = JsonDatasetSource(tmp_path).load_model()

        assert loaded.get_statistics() == model.get_statistics()
        assert loaded.aircraft_types == model.aircraft_types
        assert [r.key for r in loaded.routes] == [r.key for r in model.routes]

    def test_written_files(self, model, tmp_path):
        JsonDatasetSource.save_model(model, tmp_path)

        with open(tmp_path / 'routes-by-airport.json') as f:
            by_airport = json.load(f)
        assert sorted(by_airport) == ['BOS', 'JFK', 'LAX', 'LHR', 'NRT']
        assert by_airport['LAX'][0] == {
            'origin': 'LAX', 'destination': 'NRT', 'operators': ['AA'], 'codeshares': ['JL'], 'aircraft': ['788', '77W'],
        }

    def test_aircraft_types_optional(self, model, tmp_path):
        JsonDatasetSource.save_model(model, tmp_path)
        (tmp_path / 'aircraft-types.json').unlink()

        assert JsonDatasetSource(tmp_path).load_model().aircraft_types == model.aircraft_types

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonDatasetSource(tmp_path).load_model()

    def test_loaded_model_resolves(self, model, tmp_path):
        JsonDatasetSource.save_model(model, tmp_path)
        loaded = JsonDatasetSource(tmp_path).load_model()
        state = SelectionState(airport='JFK')

        assert SelectionResolver(loaded).resolve(state) == SelectionResolver(model).resolve(state)

    def test_bad_airport_record_skipped(self, model, tmp_path):
        JsonDatasetSource.save_model(model, tmp_path)
        with open(tmp_path / 'airports.json') as f:
            airports = json.load(f)
        airports[1]['lat'] = 200.0
        with open(tmp_path / 'airports.json', 'w') as f:
            json.dump(airports, f)

        loaded = JsonDatasetSource(tmp_path).load_model()

        assert loaded.get_airport('LHR') is None
        assert loaded.get_airport('JFK') is not None
        assert [i.record for i in loaded.validation.errors] == ['LHR']
