import pytest

from dumpogn.messages import OgnAddressType, OgnAircraftType, OgnSymbol
from dumpogn.messages.extensions import parse_ogn_extension
from dumpogn.messages.identity import AIRCRAFT_CATEGORIES, decode_aircraft_id
from dumpogn.messages.symbols import (
    APRS_SYMBOLS,
    DEFAULT_AIRCRAFT_SYMBOL,
    aircraft_type_symbol,
    lookup_symbol,
)


def test_decode_aircraft_id():
    assert decode_aircraft_id('0ADDE626') == {
        'stealth_mode': False,
        'no_tracking': False,
        'aircraft_type': OgnAircraftType.tow_plane,
        'address_type': OgnAddressType.flarm,
        'address': 'DDE626',
    }


def test_decode_flags():
    decoded = decode_aircraft_id('C0123456')

    assert decoded['stealth_mode']
    assert decoded['no_tracking']
    assert decoded['aircraft_type'] == OgnAircraftType.unknown
    assert decoded['address_type'] == OgnAddressType.unknown
    assert decoded['address'] == '123456'


def test_decode_lowercase_address():
    decoded = decode_aircraft_id('06ddf0f4')

    assert decoded['aircraft_type'] == OgnAircraftType.glider
    assert decoded['address_type'] == OgnAddressType.flarm
    assert decoded['address'] == 'DDF0F4'


@pytest.mark.parametrize('category', range(16))
def test_aircraft_categories(category):
    aircraft_id = f'{(category << 26) | (3 << 24) | 0xABCDEF:08X}'
    decoded = decode_aircraft_id(aircraft_id)

    assert decoded['aircraft_type'] == AIRCRAFT_CATEGORIES[category]
    assert decoded['address_type'] == OgnAddressType.ogn_tracker
    assert decoded['address'] == 'ABCDEF'


def test_category_table():
    assert AIRCRAFT_CATEGORIES[0x3] == OgnAircraftType.copter
    assert AIRCRAFT_CATEGORIES[0x9] == OgnAircraftType.jet
    assert AIRCRAFT_CATEGORIES[0xB] == OgnAircraftType.balloon
    assert AIRCRAFT_CATEGORIES[0xD] == OgnAircraftType.drone
    assert AIRCRAFT_CATEGORIES[0xF] == OgnAircraftType.static_obstacle


def test_short_aircraft_id():
    decoded = decode_aircraft_id('ABC')

    assert decoded['aircraft_type'] == OgnAircraftType.unknown
    assert 'address' not in decoded


@pytest.mark.parametrize('aircraft_id', ['', 'XYZ', '1FFFFFFFF'])
def test_invalid_aircraft_id(aircraft_id):
    assert decode_aircraft_id(aircraft_id) == {}


def test_parse_ogn_extension():
    fields = parse_ogn_extension('id0ADDE626 -019fpm +0.0rot 5.5dB 3e -4.3kHz')

    assert fields['aircraft_id'] == '0ADDE626'
    assert fields['vertical_speed'] == pytest.approx(-0.09652)
    assert fields['rotation_rate'] == '+0.0rot'
    assert fields['signal_strength'] == '5.5dB'
    assert fields['error_count'] == '3e'
    assert fields['frequency_offset'] == '-4.3kHz'


def test_parse_ogn_extension_aircraft():
    fields = parse_ogn_extension('!W91!  id254D21C2 +128fpm FL350.00 A3:AXY547M Sq2244 gps:2x3')

    assert fields == {
        'aircraft_id': '254D21C2',
        'vertical_speed': pytest.approx(0.65024),
        'flight_level': 'FL350.00',
        'flight_number': 'AXY547M',
        'squawk': '2244',
        'gps_info': '2x3',
    }


def test_parse_ogn_extension_weather():
    fields = parse_ogn_extension(' t-05 h45 b10132 ')

    assert fields['temperature'] == -5
    assert fields['humidity'] == 45
    assert fields['pressure'] == pytest.approx(1013.2)


def test_parse_ogn_extension_ignores_unknown_tokens():
    assert parse_ogn_extension('') == {}
    assert parse_ogn_extension('xyz 123 tfoo A3') == {}


def test_lookup_symbol():
    assert lookup_symbol('/', "'") == OgnSymbol.glider
    assert lookup_symbol('/', '_') == OgnSymbol.weather_station
    assert lookup_symbol('\\', 'n') == OgnSymbol.static_object
    assert lookup_symbol('\\', '^') == OgnSymbol.aircraft
    assert lookup_symbol('/', '!') == OgnSymbol.unknown


@pytest.mark.parametrize(
    'aircraft_type, symbol',
    [
        (OgnAircraftType.unknown, '/z'),
        (OgnAircraftType.glider, "/'"),
        (OgnAircraftType.copter, '/X'),
        (OgnAircraftType.paraglider, '/g'),
        (OgnAircraftType.aircraft, '\\^'),
        (OgnAircraftType.jet, '/^'),
        (OgnAircraftType.balloon, '/O'),
        (OgnAircraftType.static_obstacle, '\\n'),
        (OgnAircraftType.tow_plane, DEFAULT_AIRCRAFT_SYMBOL),
        (OgnAircraftType.skydiver, DEFAULT_AIRCRAFT_SYMBOL),
    ],
)
def test_aircraft_type_symbol(aircraft_type, symbol):
    assert aircraft_type_symbol(aircraft_type) == symbol
    # repeated lookups are served from the last result
    assert aircraft_type_symbol(aircraft_type) == symbol


def test_symbol_tables_are_read_only():
    with pytest.raises(TypeError):
        APRS_SYMBOLS['/!'] = OgnSymbol.unknown
