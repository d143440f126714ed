import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .base import SourceInterface
from ..models.route_network_model import RouteNetworkModel

logger = logging.getLogger(__name__)


class JsonDatasetSource(SourceInterface):
    """
    Source for the processed JSON dataset.

    Expects ``airports.json``, ``airlines.json`` and ``routes.json`` in one
    directory, plus an optional ``aircraft-types.json``.
    """

    AIRPORTS_FILE = 'airports.json'
    AIRLINES_FILE = 'airlines.json'
    ROUTES_FILE = 'routes.json'
    AIRCRAFT_FILE = 'aircraft-types.json'

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def _read(self, filename: str) -> Any:
        path = self.data_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Dataset file not found: {path}")
        with open(path, encoding='utf-8') as f:
            return json.load(f)

    def _read_aircraft_types(self) -> Optional[List[str]]:
        if not (self.data_dir / self.AIRCRAFT_FILE).exists():
            return None
        return self._read(self.AIRCRAFT_FILE)

    def load_model(self, strict: bool = False) -> RouteNetworkModel:
        logger.info(f"Loading JSON dataset from {self.data_dir}")
        return RouteNetworkModel.from_records(
            airports=self._read(self.AIRPORTS_FILE),
            airlines=self._read(self.AIRLINES_FILE),
            routes=self._read(self.ROUTES_FILE),
            aircraft_types=self._read_aircraft_types(),
            strict=strict,
        )

    @staticmethod
    def save_model(model: RouteNetworkModel, data_dir: Union[str, Path]) -> None:
        """Write a model in the processed JSON format, including ``routes-by-airport.json``."""
        data_dir = Path(data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)
        data = model.to_dict()
        outputs = {
            JsonDatasetSource.AIRPORTS_FILE: data['airports'],
            JsonDatasetSource.AIRLINES_FILE: data['airlines'],
            JsonDatasetSource.ROUTES_FILE: data['routes'],
            'routes-by-airport.json': data['routes_by_airport'],
            JsonDatasetSource.AIRCRAFT_FILE: data['aircraft_types'],
        }
        for filename, content in outputs.items():
            with open(data_dir / filename, 'w', encoding='utf-8') as f:
                json.dump(content, f, indent=2)
        logger.info(f"Wrote dataset to {data_dir}")
