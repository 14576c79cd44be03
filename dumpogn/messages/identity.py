from types import MappingProxyType
from typing import Any, Dict

from dumpogn.messages.base import OgnAddressType, OgnAircraftType
from dumpogn.messages.numbers import parse_hexadecimal

STEALTH_MODE_BIT = 0x80000000
NO_TRACKING_BIT = 0x40000000

# http://wiki.glidernet.org/wiki:ogn-flavoured-aprs
AIRCRAFT_CATEGORIES = MappingProxyType(
    {
        0x0: OgnAircraftType.unknown,  # reserved
        0x1: OgnAircraftType.glider,  # glider / motor glider / TMG
        0x2: OgnAircraftType.tow_plane,  # tow plane / tug plane
        0x3: OgnAircraftType.copter,  # helicopter / gyrocopter / rotorcraft
        0x4: OgnAircraftType.skydiver,  # skydiver / parachute
        0x5: OgnAircraftType.aircraft,  # drop plane for skydivers
        0x6: OgnAircraftType.hang_glider,  # hard
        0x7: OgnAircraftType.paraglider,  # soft
        0x8: OgnAircraftType.aircraft,  # reciprocating engine(s)
        0x9: OgnAircraftType.jet,  # jet / turboprop engine(s)
        0xA: OgnAircraftType.unknown,
        0xB: OgnAircraftType.balloon,  # hot, gas, weather, static
        0xC: OgnAircraftType.airship,  # airship / blimp / zeppelin
        0xD: OgnAircraftType.drone,  # UAV / RPAS / drone
        0xE: OgnAircraftType.unknown,  # reserved
        0xF: OgnAircraftType.static_obstacle,
    }
)


def decode_aircraft_id(aircraft_id: str) -> Dict[str, Any]:
    """
    decode the hexadecimal aircraft ID of an `id` token (`STttttaa aaaaaaaa`)

        S - stealth mode
        T - no tracking
        tttt - aircraft category
        aa - address type
        a... - address

    :param aircraft_id: token text after the `id` prefix, like `0ADDE626`
    :return: message fields, empty if the ID is not hexadecimal
    """

    code = parse_hexadecimal(aircraft_id)
    if code is None:
        return {}

    decoded = {
        'stealth_mode': bool(code & STEALTH_MODE_BIT),
        'no_tracking': bool(code & NO_TRACKING_BIT),
        'aircraft_type': AIRCRAFT_CATEGORIES[(code >> 26) & 0xF],
        'address_type': OgnAddressType((code >> 24) & 0x3),
    }
    if len(aircraft_id) >= 8:
        decoded['address'] = aircraft_id[2:8].upper()

    return decoded
