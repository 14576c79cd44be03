"""
lines sent to an OGN APRS-IS server

    user ENR12345 pass 379 vers Enroute 1.99 filter r/-48.0000/7.8512/99 t/o
    # filter r/-48.0000/7.8512/99 t/o
    ENR12345>APRS,TCPIP*: /074548h5111.32N/00102.04W'086/007/A=000607

Python string formatting does not depend on the locale, so decimals always use a point.
"""

from datetime import datetime, timezone
import math

from dumpogn.messages.base import OgnAircraftType
from dumpogn.messages.coordinates import format_latitude, format_longitude
from dumpogn.messages.symbols import aircraft_type_symbol

METERS_TO_FEET = 3.28084


def calculate_password(callsign: str) -> str:
    """
    passcode of the OGN APRS-IS server: sum of the first 6 characters of the callsign, modulo 10000

    :param callsign: callsign, like `ENR12345`
    :return: passcode, like `379`
    """

    return str(sum(ord(character) for character in callsign[:6]) % 10000)


def format_filter(latitude: float, longitude: float, receive_radius: int) -> str:
    """ server-side range filter for traffic (`t/o`) around the given location, radius in kilometers """

    return f'filter r/{latitude:.4f}/{longitude:.4f}/{int(receive_radius)} t/o'


def format_login_string(
    callsign: str,
    latitude: float,
    longitude: float,
    receive_radius: int,
    app_name: str,
    app_version: str,
) -> str:
    """
    login line, sent right after connecting

    :param callsign: callsign to log in with
    :param latitude: latitude of the filter center
    :param longitude: longitude of the filter center
    :param receive_radius: filter radius in kilometers
    :param app_name: name of the client software
    :param app_version: version of the client software
    :return: login line, with line terminator
    """

    return (
        f'user {callsign} pass {calculate_password(callsign)} vers {app_name} {app_version} '
        f'{format_filter(latitude, longitude, receive_radius)}\n'
    )


def format_filter_command(latitude: float, longitude: float, receive_radius: int) -> str:
    """ command updating the filter of an established connection """

    return f'# {format_filter(latitude, longitude, receive_radius)}\n'


def format_position_report(
    callsign: str,
    latitude: float,
    longitude: float,
    altitude: float,
    course: float,
    speed: float,
    aircraft_type: OgnAircraftType,
    time: datetime = None,
) -> str:
    """
    position report of the own aircraft

    :param callsign: callsign of the sender
    :param latitude: latitude in degrees
    :param longitude: longitude in degrees
    :param altitude: altitude in meters
    :param course: course in degrees
    :param speed: speed in knots
    :param aircraft_type: aircraft category, selects the map symbol
    :param time: time of the report, defaults to now
    :return: position report, with line terminator
    """

    if time is None:
        time = datetime.now(timezone.utc)
    elif time.tzinfo is not None:
        time = time.astimezone(timezone.utc)

    symbol = aircraft_type_symbol(aircraft_type)
    altitude_feet = _truncate(altitude * METERS_TO_FEET)

    return (
        f'{callsign}>APRS,TCPIP*: /{time:%H%M%S}h'
        f'{format_latitude(latitude)}{symbol[0]}{format_longitude(longitude)}{symbol[1]}'
        f'{_truncate(course):03d}/{_truncate(speed):03d}/A={altitude_feet:06d}\n'
    )


def _truncate(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return int(value)
