from typing import Any, Dict

from dumpogn.messages.numbers import parse_integer

FEET_PER_MINUTE_TO_METERS_PER_SECOND = 0.00508


def parse_ogn_extension(ogn_part: str) -> Dict[str, Any]:
    """
    parse the free-form OGN part of a traffic report, for instance

        id0ADDE626 -019fpm +0.0rot 5.5dB 3e -4.3kHz
        !W91! id254D21C2 +128fpm FL350.00 A3:AXY547M Sq2244

    Tokens are classified by prefix or suffix, regardless of their order; the first matching rule
    wins and unrecognized tokens are ignored.

    :param ogn_part: text after the first blank of the message body
    :return: message fields
    """

    fields = {}

    for token in ogn_part.split(' '):
        if len(token) == 0:
            continue

        if token.startswith('id'):
            fields['aircraft_id'] = token[2:]
        elif token.startswith('t'):
            temperature = parse_integer(token[1:])
            if temperature is not None:
                fields['temperature'] = temperature
        elif token.startswith('h'):
            humidity = parse_integer(token[1:], signed=False)
            if humidity is not None:
                fields['humidity'] = humidity
        elif token.startswith('b'):
            pressure = parse_integer(token[1:], signed=False)
            if pressure is not None:
                # tenths of hectopascal
                fields['pressure'] = pressure / 10
        elif token.endswith('fpm'):
            vertical_speed = token[: token.index('f')]
            if vertical_speed.startswith('+'):
                vertical_speed = vertical_speed[1:]
            vertical_speed = parse_integer(vertical_speed)
            if vertical_speed is not None:
                fields['vertical_speed'] = (
                    vertical_speed * FEET_PER_MINUTE_TO_METERS_PER_SECOND
                )
        elif token.endswith('rot'):
            fields['rotation_rate'] = token
        elif token.endswith('dB'):
            fields['signal_strength'] = token
        elif token.endswith('e'):
            fields['error_count'] = token
        elif token.endswith('kHz'):
            fields['frequency_offset'] = token
        elif token.startswith('FL'):
            fields['flight_level'] = token
        elif token.startswith('A') and len(token) > 2 and token[2] == ':':
            fields['flight_number'] = token[3:]
        elif token.startswith('Sq'):
            fields['squawk'] = token[2:]
        elif token.startswith('gps:'):
            fields['gps_info'] = token[4:]

    return fields
