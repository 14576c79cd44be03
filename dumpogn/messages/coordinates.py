import math

from dumpogn.messages.numbers import parse_decimal

# one digit of precision enhancement is a thousandth of an arc minute
ENHANCEMENT_DEGREES = 0.001 / 60


def decode_latitude(nmea_latitude: str, direction: str, enhancement: str = None) -> float:
    """
    decode APRS latitude text (`DDMM.mm`, like `5111.32`) to decimal degrees

    :param nmea_latitude: degrees and minutes
    :param direction: `N` or `S`
    :param enhancement: optional precision enhancement digit from a `!Wxy!` token
    :return: latitude in degrees, NaN if the text cannot be decoded
    """

    return _decode_coordinate(nmea_latitude, 2, direction == 'S', enhancement)


def decode_longitude(nmea_longitude: str, direction: str, enhancement: str = None) -> float:
    """
    decode APRS longitude text (`DDDMM.mm`, like `00102.04`) to decimal degrees

    :param nmea_longitude: degrees and minutes
    :param direction: `E` or `W`
    :param enhancement: optional precision enhancement digit from a `!Wxy!` token
    :return: longitude in degrees, NaN if the text cannot be decoded
    """

    return _decode_coordinate(nmea_longitude, 3, direction == 'W', enhancement)


def _decode_coordinate(text: str, degree_digits: int, negative: bool, enhancement: str) -> float:
    if len(text) < degree_digits + 5:
        return math.nan

    degrees = parse_decimal(text[:degree_digits])
    minutes = parse_decimal(text[degree_digits:])
    if degrees is None or minutes is None:
        return math.nan

    value = degrees + minutes / 60
    if enhancement is not None and len(enhancement) == 1 and '0' <= enhancement <= '9':
        value += int(enhancement) * ENHANCEMENT_DEGREES

    return -value if negative else value


def format_latitude(latitude: float) -> str:
    """ latitude in APRS format, like `5111.32N` """

    return _format_coordinate(latitude, 2, 'N', 'S')


def format_longitude(longitude: float) -> str:
    """ longitude in APRS format, like `00102.04W` """

    return _format_coordinate(longitude, 3, 'E', 'W')


def _format_coordinate(value: float, degree_digits: int, positive: str, negative: str) -> str:
    if not math.isfinite(value):
        value = 0.0
    direction = positive if value >= 0 else negative
    value = abs(value)

    degrees = int(value)
    minutes = round((value - degrees) * 60, 2)
    if minutes >= 60:
        degrees += 1
        minutes = 0.0

    return f'{degrees:0{degree_digits}d}{minutes:05.2f}{direction}'
