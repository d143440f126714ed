import pytest
from pathlib import Path

from route_atlas.models import Airport, Airline, Route, RouteNetworkModel


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def airports() -> list:
    return [
        Airport(iata='JFK', latitude_deg=40.64, longitude_deg=-73.78, name='John F Kennedy International Airport', city='New York', country='US', type='large_airport'),
        Airport(iata='LHR', latitude_deg=51.47, longitude_deg=-0.45, name='London Heathrow Airport', city='London', country='GB', type='large_airport'),
        Airport(iata='NRT', latitude_deg=35.76, longitude_deg=140.39, name='Narita International Airport', city='Tokyo', country='JP', type='large_airport'),
        Airport(iata='LAX', latitude_deg=33.94, longitude_deg=-118.41, name='Los Angeles International Airport', city='Los Angeles', country='US', type='large_airport'),
        Airport(iata='CDG', latitude_deg=49.01, longitude_deg=2.55, name='Charles de Gaulle International Airport', city='Paris', country='FR', type='large_airport'),
        Airport(iata='BOS', latitude_deg=42.36, longitude_deg=-71.01, name='Logan International Airport', city='', country='US', type='large_airport'),
    ]


@pytest.fixture
def airlines() -> list:
    return [
        Airline(iata='AA', name='American Airlines', icao='AAL', country='United States'),
        Airline(iata='BA', name='British Airways', icao='BAW', country='United Kingdom'),
        Airline(iata='AF', name='Air France', icao='AFR', country='France'),
        Airline(iata='JL', name='Japan Airlines', icao='JAL', country='Japan'),
        Airline(iata='DL', name='Delta Air Lines', icao='DAL', country='United States'),
    ]


@pytest.fixture
def routes() -> list:
    return [
        Route('JFK', 'LHR', operators=['AA', 'BA'], aircraft=['777', 'A380']),
        Route('JFK', 'CDG', operators=['AF', 'DL'], codeshares=['AA'], aircraft=['332']),
        Route('JFK', 'LAX', operators=['DL'], codeshares=['AA'], aircraft=['321', '757']),
        Route('LHR', 'JFK', operators=['BA'], codeshares=['AA'], aircraft=['777']),
        Route('NRT', 'LAX', operators=['JL', 'AA'], aircraft=['788']),
        Route('LAX', 'NRT', operators=['AA'], codeshares=['JL'], aircraft=['788', '77W']),
        Route('BOS', 'LHR', operators=['BA'], aircraft=['744']),
        # endpoint not in the airport list
        Route('JFK', 'ZZZ', operators=['AA'], aircraft=['738']),
    ]


@pytest.fixture
def model(airports, airlines, routes) -> RouteNetworkModel:
    return RouteNetworkModel.build(airports, airlines, routes)
