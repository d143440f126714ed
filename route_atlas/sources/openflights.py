import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pandas as pd

from .base import SourceInterface
from ..models.airport import Airport
from ..models.airline import Airline
from ..models.route import Route
from ..models.route_network_model import RouteNetworkModel

logger = logging.getLogger(__name__)

AIRLINE_COLUMNS = ['id', 'name', 'alias', 'iata', 'icao', 'callsign', 'country', 'active']
ROUTE_COLUMNS = ['airline', 'airline_id', 'source', 'source_id', 'dest', 'dest_id', 'codeshare', 'stops', 'equipment']


class OpenFlightsSource(SourceInterface):
    """
    Source reading the raw flat files.

    - ``airports.csv`` from OurAirports (with header)
    - ``airlines.dat`` and ``routes.dat`` from OpenFlights (no header, ``\\N`` for null)

    Only airports with a 3-letter IATA code and scheduled service are kept,
    airlines need a 2-letter IATA code and to be active, and routes need both
    endpoints among the kept airports. Rows of the same (source, dest) pair
    are merged into one Route.
    """

    def __init__(self, airports_file: Union[str, Path], airlines_file: Union[str, Path], routes_file: Union[str, Path]):
        self.airports_file = Path(airports_file)
        self.airlines_file = Path(airlines_file)
        self.routes_file = Path(routes_file)

    @classmethod
    def from_directory(cls, data_dir: Union[str, Path]) -> 'OpenFlightsSource':
        data_dir = Path(data_dir)
        return cls(data_dir / 'airports.csv', data_dir / 'airlines.dat', data_dir / 'routes.dat')

    def _check_exists(self, path: Path) -> None:
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

    def _read_dat(self, path: Path, columns: List[str]) -> pd.DataFrame:
        """Read a headerless OpenFlights file, mapping ``\\N`` to empty strings."""
        self._check_exists(path)
        df = pd.read_csv(path, header=None, names=columns, dtype=str, keep_default_na=False, encoding='utf-8')
        return df.replace({'\\N': ''})

    def fetch_airports(self) -> pd.DataFrame:
        """
        Read airports with a 3-letter IATA code and scheduled service.

        Returns:
            DataFrame of the kept OurAirports rows with numeric coordinates
        """
        self._check_exists(self.airports_file)
        df = pd.read_csv(self.airports_file, dtype=str, keep_default_na=False, encoding='utf-8-sig')
        df['latitude_deg'] = pd.to_numeric(df['latitude_deg'], errors='coerce')
        df['longitude_deg'] = pd.to_numeric(df['longitude_deg'], errors='coerce')
        mask = (
            (df['iata_code'].str.len() == 3)
            & (df['scheduled_service'] == 'yes')
            & df['latitude_deg'].notna()
            & df['longitude_deg'].notna()
        )
        return df[mask]

    def fetch_airlines(self) -> pd.DataFrame:
        """Read active airlines with a 2-letter IATA code."""
        df = self._read_dat(self.airlines_file, AIRLINE_COLUMNS)
        return df[(df['iata'].str.len() == 2) & (df['active'] == 'Y')]

    def fetch_routes(self) -> pd.DataFrame:
        """Read the raw route rows."""
        return self._read_dat(self.routes_file, ROUTE_COLUMNS)

    def _make_airports(self, df: pd.DataFrame) -> List[Airport]:
        icao_column = 'icao_code' if 'icao_code' in df.columns else 'gps_code'
        airports = []
        for row in df.itertuples(index=False):
            airports.append(Airport(
                iata=row.iata_code,
                latitude_deg=float(row.latitude_deg),
                longitude_deg=float(row.longitude_deg),
                icao=getattr(row, icao_column, '') or '',
                name=row.name,
                city=row.municipality,
                country=row.iso_country,
                type=row.type,
            ))
        return airports

    def _make_airlines(self, df: pd.DataFrame) -> List[Airline]:
        return [
            Airline(iata=row.iata, name=row.name, icao=row.icao, country=row.country)
            for row in df.itertuples(index=False)
        ]

    def _make_routes(self, df: pd.DataFrame, airport_codes: set) -> List[Route]:
        """
        Merge route rows by (source, dest).

        Codeshare rows add the airline to ``codeshares``, other rows to
        ``operators``. Equipment only comes from operating rows.
        """
        df = df[
            (df['source'].str.len() == 3)
            & (df['dest'].str.len() == 3)
            & df['source'].isin(airport_codes)
            & df['dest'].isin(airport_codes)
        ]

        merged: Dict[Tuple[str, str], Dict[str, Dict[str, None]]] = {}
        for row in df.itertuples(index=False):
            key = (row.source, row.dest)
            if key not in merged:
                merged[key] = {'operators': {}, 'codeshares': {}, 'aircraft': {}}
            entry = merged[key]
            is_codeshare = row.codeshare == 'Y'

            if len(row.airline) == 2:
                entry['codeshares' if is_codeshare else 'operators'][row.airline] = None

            if row.equipment and not is_codeshare:
                for equipment in row.equipment.split(' '):
                    if equipment:
                        entry['aircraft'][equipment] = None

        return [
            Route(
                origin=origin,
                destination=destination,
                operators=tuple(entry['operators']),
                codeshares=tuple(entry['codeshares']),
                aircraft=tuple(entry['aircraft']),
            )
            for (origin, destination), entry in merged.items()
        ]

    def load_model(self, strict: bool = False) -> RouteNetworkModel:
        airports = self._make_airports(self.fetch_airports())
        logger.info(f"Processed {len(airports)} airports with scheduled service")

        airlines = self._make_airlines(self.fetch_airlines())
        logger.info(f"Processed {len(airlines)} active airlines")

        routes = self._make_routes(self.fetch_routes(), {a.iata for a in airports})
        logger.info(f"Processed {len(routes)} unique routes")

        return RouteNetworkModel.build(airports, airlines, routes, strict=strict)
