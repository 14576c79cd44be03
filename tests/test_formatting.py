from datetime import datetime, timedelta, timezone
import math

import pytest

from dumpogn.messages import (
    OgnAircraftType,
    format_filter_command,
    format_login_string,
    format_position_report,
)
from dumpogn.messages.formatting import calculate_password, format_filter

REPORT_TIME = datetime(2020, 10, 18, 7, 45, 48, tzinfo=timezone.utc)
LATITUDE = 51 + 11.32 / 60
LONGITUDE = -(1 + 2.04 / 60)
ALTITUDE = 607 * 0.3048


def test_calculate_password():
    assert calculate_password('ENR12345') == '379'
    assert calculate_password('ENR123') == '379'
    assert calculate_password('') == '0'


def test_format_filter():
    assert format_filter(-48.0, 7.85123456, 99) == 'filter r/-48.0000/7.8512/99 t/o'
    assert format_filter(48.3537, 11.786, 50.9) == 'filter r/48.3537/11.7860/50 t/o'


def test_format_login_string():
    assert (
        format_login_string('ENR12345', -48.0, 7.85123456, 99, 'Enroute', '1.99')
        == 'user ENR12345 pass 379 vers Enroute 1.99 filter r/-48.0000/7.8512/99 t/o\n'
    )


def test_format_filter_command():
    assert format_filter_command(-48.0, 7.85123456, 99) == '# filter r/-48.0000/7.8512/99 t/o\n'


def test_format_position_report():
    report = format_position_report(
        'ENR12345', LATITUDE, LONGITUDE, ALTITUDE, 86, 7, OgnAircraftType.glider, REPORT_TIME
    )

    assert report == "ENR12345>APRS,TCPIP*: /074548h5111.32N/00102.04W'086/007/A=000607\n"


@pytest.mark.parametrize(
    'aircraft_type, expected',
    [
        (OgnAircraftType.unknown, '5111.32N/00102.04Wz086'),
        (OgnAircraftType.balloon, '5111.32N/00102.04WO086'),
        (OgnAircraftType.skydiver, '5111.32N\\00102.04W^086'),
    ],
)
def test_format_position_report_symbol(aircraft_type, expected):
    report = format_position_report(
        'ENR12345', LATITUDE, LONGITUDE, ALTITUDE, 86, 7, aircraft_type, REPORT_TIME
    )

    assert expected in report


def test_format_position_report_time():
    local_time = REPORT_TIME.astimezone(timezone(timedelta(hours=2)))
    report = format_position_report(
        'ENR12345', LATITUDE, LONGITUDE, ALTITUDE, 86, 7, OgnAircraftType.glider, local_time
    )

    assert ': /074548h' in report

    report = format_position_report(
        'ENR12345', LATITUDE, LONGITUDE, ALTITUDE, 86, 7, OgnAircraftType.glider
    )
    assert report.endswith("/A=000607\n")


def test_format_position_report_non_finite():
    report = format_position_report(
        'ENR12345', math.nan, math.nan, math.nan, math.nan, math.inf, OgnAircraftType.glider,
        REPORT_TIME,
    )

    assert report == "ENR12345>APRS,TCPIP*: /074548h0000.00N/00000.00E'000/000/A=000000\n"
