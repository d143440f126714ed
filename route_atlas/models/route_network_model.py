from typing import Dict, List, Optional, Any, Iterable, Mapping, Tuple
import logging

from .airport import Airport
from .airline import Airline
from .route import Route
from .route_index import RouteIndex
from .airport_collection import AirportCollection, AirlineCollection
from .route_collection import RouteCollection
from .validation import ValidationResult, ModelValidationError

logger = logging.getLogger(__name__)


class RouteNetworkModel:
    """
    In-memory model of the loaded route network.

    Holds the airport and airline lookup maps, the route list and the route
    index. Everything is built once by ``build`` and read-only afterwards;
    a dataset reload builds a new model.

    Examples:
        model = RouteNetworkModel.build(airports, airlines, routes)
        model.get_airport('JFK')
        model.routes_from('JFK')
        model.airports.search('london').all()
        model.available_airlines('JFK').all()
    """

    def __init__(
        self,
        airports: Mapping[str, Airport],
        airlines: Mapping[str, Airline],
        routes: Tuple[Route, ...],
        route_index: RouteIndex,
        aircraft_types: Tuple[str, ...],
        validation: Optional[ValidationResult] = None,
    ):
        self._airports = dict(airports)
        self._airlines = dict(airlines)
        self._routes = tuple(routes)
        self._route_index = route_index
        self._aircraft_types = tuple(aircraft_types)
        self._validation = validation or ValidationResult()

    @classmethod
    def build(
        cls,
        airports: Iterable[Airport],
        airlines: Iterable[Airline],
        routes: Iterable[Route],
        aircraft_types: Optional[Iterable[str]] = None,
        strict: bool = False,
        validation: Optional[ValidationResult] = None,
    ) -> 'RouteNetworkModel':
        """
        Build the lookup maps and the route index from entity lists.

        Duplicate airports, airlines and (origin, destination) routes keep
        their first occurrence and are reported as errors. Routes with unknown
        endpoints are kept and reported as warnings; the selection resolver
        skips them.

        Args:
            airports: Airport entities
            airlines: Airline entities
            routes: Route entities
            aircraft_types: Known aircraft type codes; derived from the routes when None
            strict: Raise ModelValidationError on any error or warning instead of logging
            validation: Issues already found while reading the records, extended here

        Returns:
            The built model

        Raises:
            ModelValidationError: if strict and the dataset has issues
        """
        result = validation if validation is not None else ValidationResult()

        airports_by_code: Dict[str, Airport] = {}
        for airport in airports:
            if airport.iata in airports_by_code:
                result.add_error('airport', 'Duplicate airport code', airport.iata)
                continue
            airports_by_code[airport.iata] = airport

        airlines_by_code: Dict[str, Airline] = {}
        for airline in airlines:
            if airline.iata in airlines_by_code:
                result.add_error('airline', 'Duplicate airline code', airline.iata)
                continue
            airlines_by_code[airline.iata] = airline

        unique_routes: Dict[Tuple[str, str], Route] = {}
        for route in routes:
            if route.key in unique_routes:
                result.add_error('route', 'Duplicate route', str(route))
                continue
            unique_routes[route.key] = route
            for code in (route.origin, route.destination):
                if code not in airports_by_code:
                    result.add_warning('route', f'Unknown airport {code}', str(route))

        if not result.is_clean:
            if strict:
                raise ModelValidationError("Route network dataset failed validation", result)
            logger.warning(
                f"Route network dataset has {len(result.errors)} dropped records and "
                f"{len(result.warnings)} routes that cannot be drawn"
            )
            for issue in result.issues:
                logger.debug(str(issue))

        route_list = tuple(unique_routes.values())
        if aircraft_types is None:
            aircraft_types = RouteCollection(list(route_list)).aircraft_types()

        model = cls(
            airports=airports_by_code,
            airlines=airlines_by_code,
            routes=route_list,
            route_index=RouteIndex.build(route_list),
            aircraft_types=tuple(aircraft_types),
            validation=result,
        )
        logger.info(
            f"Built route network: {len(airports_by_code)} airports, {len(airlines_by_code)} airlines, "
            f"{len(route_list)} routes, {len(model._aircraft_types)} aircraft types"
        )
        return model

    @classmethod
    def from_records(
        cls,
        airports: Iterable[Dict[str, Any]],
        airlines: Iterable[Dict[str, Any]],
        routes: Iterable[Dict[str, Any]],
        aircraft_types: Optional[Iterable[str]] = None,
        strict: bool = False,
    ) -> 'RouteNetworkModel':
        """
        Build from plain record dictionaries (the processed JSON format).

        An airport record with missing or out-of-range coordinates is
        skipped and reported as an error, like a duplicate.
        """
        result = ValidationResult()
        airport_list = []
        for record in airports:
            try:
                airport_list.append(Airport.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                result.add_error('airport', f'Invalid record: {e}', record.get('iata'))

        return cls.build(
            airport_list,
            [Airline.from_dict(a) for a in airlines],
            [Route.from_dict(r) for r in routes],
            aircraft_types=aircraft_types,
            strict=strict,
            validation=result,
        )

    # ========================================================================
    # Query API
    # ========================================================================

    @property
    def airports(self) -> AirportCollection:
        """Queryable collection of all airports."""
        return AirportCollection(list(self._airports.values()))

    @property
    def airlines(self) -> AirlineCollection:
        """Queryable collection of all airlines."""
        return AirlineCollection(list(self._airlines.values()))

    @property
    def routes(self) -> RouteCollection:
        """Queryable collection of all routes, in dataset order."""
        return RouteCollection(list(self._routes))

    @property
    def route_index(self) -> RouteIndex:
        return self._route_index

    @property
    def aircraft_types(self) -> List[str]:
        return list(self._aircraft_types)

    @property
    def validation(self) -> ValidationResult:
        """Data issues found while building the model."""
        return self._validation

    def get_airport(self, code: str) -> Optional[Airport]:
        """Get an airport by IATA code, None if unknown."""
        return self._airports.get(code)

    def get_airline(self, code: str) -> Optional[Airline]:
        return self._airlines.get(code)

    def airline_name(self, code: str) -> str:
        """Airline name, or the code itself for an unknown airline."""
        airline = self._airlines.get(code)
        return airline.name if airline and airline.name else code

    def routes_from(self, code: str) -> Tuple[Route, ...]:
        return self._route_index.routes_from(code)

    def airports_with_routes(self) -> AirportCollection:
        """Airports that are the origin of at least one route."""
        return AirportCollection([a for a in self._airports.values() if a.iata in self._route_index])

    def available_airlines(self, airport_code: Optional[str] = None, include_codeshares: bool = False) -> AirlineCollection:
        """
        Airlines flying from an airport, sorted by name.

        Without an airport, all airlines. Codeshare-only airlines are included
        when ``include_codeshares`` is set.
        """
        if airport_code is None:
            return self.airlines.sorted_by_name()
        codes = RouteCollection(list(self.routes_from(airport_code))).airline_codes(include_codeshares)
        return self.airlines.by_codes(codes).sorted_by_name()

    def available_aircraft(self, airport_code: Optional[str] = None) -> List[str]:
        """Aircraft types seen on routes from an airport, in model order. All types without an airport."""
        if airport_code is None:
            return list(self._aircraft_types)
        types = set(RouteCollection(list(self.routes_from(airport_code))).aircraft_types())
        return [t for t in self._aircraft_types if t in types]

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics about the model."""
        return {
            'total_airports': len(self._airports),
            'total_airlines': len(self._airlines),
            'total_routes': len(self._routes),
            'airports_with_routes': len(self._route_index),
            'aircraft_types': len(self._aircraft_types),
            'data_issues': self._validation.issue_count,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to the processed record format."""
        return {
            'airports': [a.to_dict() for a in self._airports.values()],
            'airlines': [a.to_dict() for a in self._airlines.values()],
            'routes': [r.to_dict() for r in self._routes],
            'routes_by_airport': {
                origin: [r.to_dict() for r in bucket]
                for origin, bucket in self._route_index.as_dict().items()
            },
            'aircraft_types': list(self._aircraft_types),
        }

    def __repr__(self):
        return (f"RouteNetworkModel(airports={len(self._airports)}, "
                f"airlines={len(self._airlines)}, routes={len(self._routes)})")
