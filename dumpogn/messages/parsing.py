"""
decoder for sentences of the OGN glidernet.org APRS-IS feed

    FLRDDE626>APRS,qAS,EGHL:/074548h5111.32N/00102.04W'086/007/A=000607 id0ADDE626 -019fpm +0.0rot 5.5dB 3e -4.3kHz

see http://wiki.glidernet.org/wiki:subscribe-to-ogn-data and http://wiki.glidernet.org/wiki:ogn-flavoured-aprs

Decoding never raises: sentences without the minimal structure are returned as `unknown` messages,
and fields that cannot be read keep their default values.
"""

from typing import Any, Dict, Optional

from dumpogn.messages.base import OgnMessage, OgnMessageType, OgnSymbol
from dumpogn.messages.coordinates import decode_latitude, decode_longitude
from dumpogn.messages.extensions import parse_ogn_extension
from dumpogn.messages.identity import decode_aircraft_id
from dumpogn.messages.numbers import parse_integer
from dumpogn.messages.symbols import lookup_symbol

MINIMUM_HEADER_LENGTH = 5
MINIMUM_BODY_LENGTH = 5
MINIMUM_POSITION_LENGTH = 30
MINIMUM_COURSE_SPEED_LENGTH = 34

# offset of the symbol code, right after the longitude block
SYMBOL_CODE_INDEX = 26

FEET_TO_METERS = 0.3048


def parse_aprsis_message(sentence: str) -> OgnMessage:
    """
    decode a single line of the OGN APRS-IS feed

    :param sentence: line of text, with or without line terminator
    :return: decoded message
    """

    sentence = sentence.rstrip('\r\n')

    if sentence.startswith('#'):
        return OgnMessage(sentence, type=OgnMessageType.comment)

    if ':' not in sentence:
        return OgnMessage(sentence)
    header, body = sentence.split(':', 1)

    if len(header) < MINIMUM_HEADER_LENGTH or len(body) < MINIMUM_BODY_LENGTH:
        return OgnMessage(sentence)

    if body.startswith('/'):
        fields = parse_traffic_report(header, body)
    elif body.startswith('>'):
        fields = parse_status_message(header, body)
    else:
        fields = None

    if fields is None:
        return OgnMessage(sentence)
    return OgnMessage(sentence, **fields)


def parse_status_message(header: str, body: str) -> Dict[str, Any]:
    """ receiver status, like `LFNW>APRS,TCPIP*,qAC,GLIDERN5:>183804h v0.2.6.ARM CPU:0.7 ...` """

    return {'type': OgnMessageType.status, 'source_id': header.split('>', 1)[0]}


def parse_traffic_report(header: str, body: str) -> Optional[Dict[str, Any]]:
    """
    decode the body of a traffic report or weather report, for instance

        /074548h5111.32N/00102.04W'086/007/A=000607 id0ADDE626 -019fpm +0.0rot 5.5dB 3e -4.3kHz
        /001140h4741.90N/01104.20E^/A=034868 !W91! id254D21C2 +128fpm FL350.00 A3:AXY547M Sq2244
        /222245h4803.92N/00800.93E_292/005g010t030h00b65526 5.2dB

    :param header: source, destination and path, like `FLRDDE626>APRS,qAS,EGHL`
    :param body: text after the first colon
    :return: message fields, or `None` if the body does not have the layout of a position report
    """

    if not body.startswith('/') or '>' not in header:
        return None

    aprs_part, _, ogn_part = body.partition(' ')
    if not aprs_part.startswith('/') or len(aprs_part) < MINIMUM_POSITION_LENGTH:
        return None

    fields = {
        'type': OgnMessageType.traffic_report,
        'source_id': header.split('>', 1)[0],
        'timestamp': aprs_part[1:7],
    }

    latitude_enhancement, longitude_enhancement = precision_enhancement(body)
    fields['latitude'] = decode_latitude(aprs_part[8:15], aprs_part[15], latitude_enhancement)
    fields['longitude'] = decode_longitude(
        aprs_part[17:25], aprs_part[25], longitude_enhancement
    )

    fields['symbol'] = lookup_symbol(aprs_part[16], aprs_part[SYMBOL_CODE_INDEX])

    if fields['symbol'] is OgnSymbol.weather_station:
        fields['type'] = OgnMessageType.weather
        fields.update(parse_weather_report(aprs_part))
    else:
        fields.update(parse_course_speed_altitude(aprs_part))

    fields.update(parse_ogn_extension(ogn_part))

    if 'aircraft_id' in fields and len(fields['aircraft_id']) > 0:
        fields.update(decode_aircraft_id(fields['aircraft_id']))

    return fields


def precision_enhancement(body: str) -> (Optional[str], Optional[str]):
    """
    latitude and longitude digits of a `!Wxy!` precision enhancement token

    the token is searched after the longitude block only, so position text cannot be mistaken for it
    """

    index = body.find('!W', SYMBOL_CODE_INDEX)
    if index == -1 or len(body) <= index + 4:
        return None, None
    return body[index + 2], body[index + 3]


def parse_course_speed_altitude(aprs_part: str) -> Dict[str, Any]:
    """ course, speed and altitude from the position block of a traffic report, like `'086/007/A=000607` """

    fields = {}

    if len(aprs_part) >= MINIMUM_COURSE_SPEED_LENGTH and aprs_part[30] == '/':
        course = parse_integer(aprs_part[27:30])
        if course is not None:
            fields['course'] = float(course)
        speed = parse_integer(aprs_part[31:34])
        if speed is not None:
            fields['speed'] = float(speed)

    altitude_index = aprs_part.find('/A=')
    if altitude_index != -1:
        altitude = parse_integer(aprs_part[altitude_index + 3 : altitude_index + 9])
        if altitude is not None:
            fields['altitude'] = altitude * FEET_TO_METERS

    return fields


def parse_weather_report(aprs_part: str) -> Dict[str, Any]:
    """
    weather data following the weather station symbol, like `_292/005g010t030h00b65526`

    every value is optional and read independently of the others
    """

    fields = {}

    wind_direction = parse_integer(
        aprs_part[SYMBOL_CODE_INDEX + 1 : SYMBOL_CODE_INDEX + 4], signed=False
    )
    if wind_direction is not None:
        fields['wind_direction'] = wind_direction

    for field, marker, length, signed in (
        ('wind_speed', '/', 3, False),
        ('wind_gust_speed', 'g', 3, False),
        ('temperature', 't', 3, True),
        ('humidity', 'h', 2, False),
    ):
        index = aprs_part.find(marker, SYMBOL_CODE_INDEX)
        if index != -1:
            value = parse_integer(aprs_part[index + 1 : index + 1 + length], signed=signed)
            if value is not None:
                fields[field] = value

    pressure_index = aprs_part.find('b', SYMBOL_CODE_INDEX)
    if pressure_index != -1:
        pressure = aprs_part[pressure_index + 1 :].split(' ', 1)[0]
        pressure = parse_integer(pressure, signed=False)
        if pressure is not None:
            # tenths of hectopascal
            fields['pressure'] = pressure / 10

    return fields
