from dataclasses import dataclass, fields
from enum import Enum
import math
from typing import Any


class OgnMessageType(Enum):
    unknown = 'unknown'
    traffic_report = 'traffic_report'
    comment = 'comment'
    status = 'status'
    weather = 'weather'


class OgnAircraftType(Enum):
    """ aircraft categories, modeled after the FLARM / NMEA specification """

    unknown = 'unknown'
    aircraft = 'aircraft'  # fixed wing aircraft
    airship = 'airship'  # zeppelin or blimp
    balloon = 'balloon'
    copter = 'copter'  # helicopter, gyrocopter or rotorcraft
    drone = 'drone'
    glider = 'glider'  # including powered gliders and touring motor gliders
    hang_glider = 'hang_glider'
    jet = 'jet'
    paraglider = 'paraglider'
    skydiver = 'skydiver'
    static_obstacle = 'static_obstacle'
    tow_plane = 'tow_plane'


class OgnAddressType(Enum):
    """ http://wiki.glidernet.org/wiki:ogn-flavoured-aprs """

    unknown = 0
    icao = 1
    flarm = 2
    ogn_tracker = 3


class OgnSymbol(Enum):
    """ symbol that should be shown on a map """

    unknown = 'unknown'
    glider = 'glider'
    helicopter = 'helicopter'
    parachute = 'parachute'
    aircraft = 'aircraft'
    jet = 'jet'
    balloon = 'balloon'
    static_object = 'static_object'
    weather_station = 'weather_station'


@dataclass(frozen=True)
class OgnMessage:
    """
    decoded OGN APRS-IS sentence, for instance

        FLRDDE626>APRS,qAS,EGHL:/074548h5111.32N/00102.04W'086/007/A=000607 id0ADDE626 -019fpm +0.0rot 5.5dB 3e -4.3kHz

    Fields are only meaningful for some message types: kinematics and identity for traffic reports,
    wind / temperature / humidity / pressure for weather reports.
    """

    sentence: str
    type: OgnMessageType = OgnMessageType.unknown

    source_id: str = ''  # like FLRDDE626
    timestamp: str = ''  # hhmmss
    latitude: float = math.nan  # degrees (WGS84)
    longitude: float = math.nan  # degrees (WGS84)
    altitude: float = math.nan  # meters (MSL)
    symbol: OgnSymbol = OgnSymbol.unknown

    course: float = 0.0  # degrees
    speed: float = 0.0  # knots
    vertical_speed: float = 0.0  # m/s
    aircraft_id: str = ''  # like 0ADDE626
    rotation_rate: str = ''  # like +0.0rot
    signal_strength: str = ''  # like 5.5dB
    error_count: str = ''  # like 3e
    frequency_offset: str = ''  # like -4.3kHz
    squawk: str = ''  # like 2244
    flight_level: str = ''  # like FL350.00
    flight_number: str = ''  # like AXY547M
    gps_info: str = ''  # like 0.0
    aircraft_type: OgnAircraftType = OgnAircraftType.unknown
    address_type: OgnAddressType = OgnAddressType.unknown
    address: str = ''  # like DDE626
    stealth_mode: bool = False
    no_tracking: bool = False

    wind_direction: int = 0  # degrees
    wind_speed: int = 0
    wind_gust_speed: int = 0
    temperature: int = 0  # degrees C
    humidity: int = 0  # percent
    pressure: float = 0.0  # hPa

    @property
    def has_position(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)

    def __getitem__(self, field: str) -> Any:
        if field not in self:
            raise KeyError(f'"{field}" not in message')
        return getattr(self, field)

    def __contains__(self, field: str) -> bool:
        return field in FIELD_NAMES

    def __str__(self) -> str:
        return self.sentence


FIELD_NAMES = frozenset(field.name for field in fields(OgnMessage))
