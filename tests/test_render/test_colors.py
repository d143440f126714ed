from route_atlas import config
from route_atlas.models import FilterState, Route
from route_atlas.render.colors import airline_color, airline_hue, color_airline_for, route_color


class TestAirlineColor:

    def test_known_hues(self):
        assert airline_hue('AA') == 140
        assert airline_hue('BA') == 277

    def test_color_string(self):
        assert airline_color('AA') == 'hsl(140, 70%, 60%)'

    def test_deterministic(self):
        assert airline_color('AA') == airline_color('AA')
        assert all(airline_color('DL') == airline_color('DL') for _ in range(10))

    def test_hue_range(self):
        codes = [a + b for a in 'AZ09' for b in 'AZ09']

        assert all(0 <= airline_hue(code) < 360 for code in codes)

    def test_short_codes(self):
        assert airline_hue('A') == 265
        assert airline_hue('') == 0

    def test_only_first_two_characters(self):
        assert airline_color('AAL') == airline_color('AA')


class TestColorAirline:

    def test_first_operator_without_filter(self):
        route = Route('JFK', 'LHR', operators=['BA', 'AA'])

        assert color_airline_for(route, FilterState()) == 'BA'

    def test_selected_operator_preferred(self):
        route = Route('JFK', 'LHR', operators=['BA', 'AA'])

        assert color_airline_for(route, FilterState(airlines=['AA'])) == 'AA'

    def test_first_operator_when_only_codeshare_selected(self):
        route = Route('JFK', 'LHR', operators=['BA'], codeshares=['AA'])

        assert color_airline_for(route, FilterState(airlines=['AA'], include_codeshares=True)) == 'BA'

    def test_no_operator_uses_sentinel(self):
        route = Route('JFK', 'LHR', codeshares=['AA'])

        assert color_airline_for(route, FilterState()) == config.UNKNOWN_AIRLINE
        assert color_airline_for(route, FilterState(airlines=['AA'], include_codeshares=True)) == config.UNKNOWN_AIRLINE

    def test_route_color(self):
        route = Route('JFK', 'LHR', operators=['BA', 'AA'])

        assert route_color(route, FilterState(airlines=['AA'])) == airline_color('AA')
