import pytest

from route_atlas.models import (
    Airport,
    Airline,
    Route,
    RouteNetworkModel,
    ModelValidationError,
)


class TestRouteNetworkModel:

    def test_lookups(self, model):
        assert model.get_airport('JFK').city == 'New York'
        assert model.get_airport('ZZZ') is None
        assert model.get_airline('BA').name == 'British Airways'
        assert model.get_airline('ZZ') is None

    def test_airline_name_falls_back_to_code(self, model):
        assert model.airline_name('AA') == 'American Airlines'
        assert model.airline_name('Q9') == 'Q9'

    def test_routes_from(self, model):
        assert len(model.routes_from('JFK')) == 4
        assert model.routes_from('CDG') == ()

    def test_aircraft_types_derived_and_sorted(self, model):
        assert model.aircraft_types == ['321', '332', '738', '744', '757', '777', '77W', '788', 'A380']

    def test_explicit_aircraft_types(self, airports, airlines, routes):
        model = RouteNetworkModel.build(airports, airlines, routes, aircraft_types=['777', '788'])

        assert model.aircraft_types == ['777', '788']

    def test_airports_with_routes(self, model):
        codes = model.airports_with_routes().map(lambda a: a.iata).all()

        assert set(codes) == {'JFK', 'LHR', 'NRT', 'LAX', 'BOS'}

    def test_unknown_endpoint_is_a_warning(self, model):
        assert model.validation.is_valid
        assert not model.validation.is_clean
        assert model.validation.errors == []
        assert len(model.validation.warnings) == 1
        assert 'ZZZ' in str(model.validation.warnings[0])
        assert model.validation.warnings[0].severity == 'warning'
        # kept in the model, the resolver skips it
        assert len(model.routes) == 8
        assert model.get_statistics()['data_issues'] == 1

    def test_duplicates_are_errors_and_unknown_endpoints_warnings(self, airports, airlines):
        routes = [
            Route('JFK', 'LHR', operators=['AA']),
            Route('JFK', 'LHR', operators=['BA']),
            Route('JFK', 'QQQ', operators=['AA']),
        ]
        model = RouteNetworkModel.build(airports + airports[:1], airlines, routes)
        validation = model.validation

        assert [(i.kind, i.record) for i in validation.errors] == [('airport', 'JFK'), ('route', 'JFK → LHR')]
        assert [(i.kind, i.record) for i in validation.warnings] == [('route', 'JFK → QQQ')]
        assert validation.issue_count == 3
        assert str(validation) == '2 dropped, 1 undrawable'

    def test_duplicate_route_first_wins(self, airports, airlines):
        routes = [
            Route('JFK', 'LHR', operators=['AA']),
            Route('JFK', 'LHR', operators=['BA']),
        ]
        model = RouteNetworkModel.build(airports, airlines, routes)

        assert len(model.routes) == 1
        assert model.routes.first().operators == ('AA',)
        assert model.get_statistics()['data_issues'] == 1

    def test_strict_build_raises(self, airports, airlines, routes):
        with pytest.raises(ModelValidationError) as excinfo:
            RouteNetworkModel.build(airports, airlines, routes, strict=True)

        assert excinfo.value.validation_result is not None
        assert '[warning] route JFK → ZZZ: Unknown airport ZZZ' in str(excinfo.value)

    def test_strict_build_raises_on_duplicate(self, airports, airlines):
        routes = [Route('JFK', 'LHR', operators=['AA']), Route('JFK', 'LHR', operators=['BA'])]

        with pytest.raises(ModelValidationError) as excinfo:
            RouteNetworkModel.build(airports, airlines, routes, strict=True)

        assert len(excinfo.value.validation_result.errors) == 1
        assert '[error] route JFK → LHR: Duplicate route' in str(excinfo.value)

    def test_strict_build_valid_dataset(self, airports, airlines):
        model = RouteNetworkModel.build(airports, airlines, [Route('JFK', 'LHR', operators=['AA'])], strict=True)

        assert model.validation.is_clean
        assert str(model.validation) == 'Clean'

    def test_duplicate_airport(self, airlines):
        airports = [
            Airport(iata='JFK', latitude_deg=40.64, longitude_deg=-73.78, name='First'),
            Airport(iata='JFK', latitude_deg=0.0, longitude_deg=0.0, name='Second'),
        ]
        model = RouteNetworkModel.build(airports, airlines, [])

        assert model.get_airport('JFK').name == 'First'
        assert len(model.validation.errors) == 1

    def test_available_airlines_at_airport(self, model):
        names = model.available_airlines('JFK').map(lambda a: a.name).all()

        assert names == ['Air France', 'American Airlines', 'British Airways', 'Delta Air Lines']

    def test_available_airlines_with_codeshares(self, model):
        codes = model.available_airlines('LAX', include_codeshares=True).map(lambda a: a.iata).all()

        assert codes == ['AA', 'JL']
        assert model.available_airlines('LAX').map(lambda a: a.iata).all() == ['AA']

    def test_available_airlines_without_airport(self, model):
        assert model.available_airlines().count() == 5

    def test_available_aircraft(self, model):
        assert model.available_aircraft('LAX') == ['77W', '788']
        assert model.available_aircraft('CDG') == []
        assert model.available_aircraft() == model.aircraft_types

    def test_statistics(self, model):
        stats = model.get_statistics()

        assert stats['total_airports'] == 6
        assert stats['total_airlines'] == 5
        assert stats['total_routes'] == 8
        assert stats['airports_with_routes'] == 5

    def test_from_records(self):
        model = RouteNetworkModel.from_records(
            airports=[
                {'iata': 'JFK', 'icao': 'KJFK', 'name': 'JFK', 'city': 'New York', 'country': 'US', 'lat': 40.64, 'lon': -73.78, 'type': 'large_airport'},
                {'iata': 'LHR', 'icao': 'EGLL', 'name': 'Heathrow', 'city': 'London', 'country': 'GB', 'lat': 51.47, 'lon': -0.45, 'type': 'large_airport'},
            ],
            airlines=[{'iata': 'BA', 'icao': 'BAW', 'name': 'British Airways', 'country': 'United Kingdom'}],
            routes=[{'origin': 'JFK', 'destination': 'LHR', 'operators': ['BA'], 'codeshares': [], 'aircraft': ['777']}],
        )

        assert model.get_airport('LHR').icao == 'EGLL'
        assert model.routes_from('JFK')[0].aircraft == ('777',)

    def test_from_records_skips_bad_coordinates(self):
        model = RouteNetworkModel.from_records(
            airports=[
                {'iata': 'JFK', 'lat': 40.64, 'lon': -73.78},
                {'iata': 'BAD', 'lat': 123.0, 'lon': 0.0},
                {'iata': 'NAN', 'lat': float('nan'), 'lon': 0.0},
                {'iata': 'NUL', 'lat': None, 'lon': 0.0},
                {'iata': 'LHR', 'lat': 51.47, 'lon': -0.45},
            ],
            airlines=[],
            routes=[{'origin': 'JFK', 'destination': 'LHR', 'operators': ['BA']}],
        )

        assert model.airports.map(lambda a: a.iata).all() == ['JFK', 'LHR']
        assert [i.record for i in model.validation.errors] == ['BAD', 'NAN', 'NUL']
        assert model.validation.warnings == []
        assert len(model.routes_from('JFK')) == 1

    def test_from_records_strict_bad_coordinates(self):
        with pytest.raises(ModelValidationError):
            RouteNetworkModel.from_records(
                airports=[{'iata': 'BAD', 'lat': -91.0, 'lon': 0.0}],
                airlines=[],
                routes=[],
                strict=True,
            )

    def test_to_dict(self, model):
        data = model.to_dict()

        assert len(data['routes']) == 8
        assert [r['destination'] for r in data['routes_by_airport']['JFK']] == ['LHR', 'CDG', 'LAX', 'ZZZ']
        assert data['airports'][0]['lat'] == 40.64


class TestEntities:

    def test_route_deduplicates_lists(self):
        route = Route('JFK', 'LHR', operators=['AA', 'BA', 'AA'], aircraft=['777', '777', ''])

        assert route.operators == ('AA', 'BA')
        assert route.aircraft == ('777',)
        assert route.key == ('JFK', 'LHR')

    def test_route_round_trip(self):
        data = {'origin': 'JFK', 'destination': 'LHR', 'operators': ['AA'], 'codeshares': ['IB'], 'aircraft': ['777']}

        assert Route.from_dict(data).to_dict() == data

    def test_route_airlines(self):
        route = Route('JFK', 'LHR', operators=['AA', 'BA'], codeshares=['IB', 'AA'])

        assert route.airlines == ('AA', 'BA', 'IB')

    def test_airport_display_name(self, airports):
        jfk = airports[0]
        bos = airports[-1]

        assert jfk.display_name == 'JFK - New York'
        assert bos.display_name == 'BOS - Logan International Airport'

    def test_airport_navpoint(self, airports):
        navpoint = airports[0].navpoint

        assert navpoint.name == 'JFK'
        assert navpoint.coordinates == (40.64, -73.78)

    def test_airport_invalid_latitude(self):
        with pytest.raises(ValueError):
            Airport(iata='BAD', latitude_deg=95.0, longitude_deg=0.0)

    def test_airline_from_dict_missing_fields(self):
        airline = Airline.from_dict({'iata': 'ZZ'})

        assert airline.name == ''
        assert airline.country == ''
