"""
APRS symbols used by OGN, see http://wiki.glidernet.org/wiki:ogn-flavoured-aprs

A symbol is two characters: the symbol table (`/` or `\\`) followed by the symbol code.
"""

from functools import lru_cache
from types import MappingProxyType

from dumpogn.messages.base import OgnAircraftType, OgnSymbol

APRS_SYMBOLS = MappingProxyType(
    {
        '/z': OgnSymbol.unknown,
        "/'": OgnSymbol.glider,
        '/X': OgnSymbol.helicopter,
        '/g': OgnSymbol.parachute,  # parachute, hang glider, paraglider
        '\\^': OgnSymbol.aircraft,  # drop plane, powered aircraft
        '/^': OgnSymbol.jet,
        '/O': OgnSymbol.balloon,  # balloon, airship
        '\\n': OgnSymbol.static_object,
        '/_': OgnSymbol.weather_station,
    }
)

AIRCRAFT_TYPE_SYMBOLS = MappingProxyType(
    {
        '/z': OgnAircraftType.unknown,
        "/'": OgnAircraftType.glider,
        '/X': OgnAircraftType.copter,
        '/g': OgnAircraftType.paraglider,
        '\\^': OgnAircraftType.aircraft,
        '/^': OgnAircraftType.jet,
        '/O': OgnAircraftType.balloon,
        '\\n': OgnAircraftType.static_obstacle,
    }
)

DEFAULT_AIRCRAFT_SYMBOL = '\\^'


def lookup_symbol(symbol_table: str, symbol_code: str) -> OgnSymbol:
    return APRS_SYMBOLS.get(f'{symbol_table}{symbol_code}', OgnSymbol.unknown)


@lru_cache(maxsize=1)
def aircraft_type_symbol(aircraft_type: OgnAircraftType) -> str:
    """
    APRS symbol (table and code characters) to report the given aircraft type with

    position reports are usually sent for the same aircraft type over and over, so the last lookup is kept

    :param aircraft_type: aircraft category
    :return: two-character symbol, the generic aircraft symbol if the category has none
    """

    for symbol, symbol_aircraft_type in AIRCRAFT_TYPE_SYMBOLS.items():
        if symbol_aircraft_type is aircraft_type:
            return symbol
    return DEFAULT_AIRCRAFT_SYMBOL
