from abc import ABC, abstractmethod
from datetime import datetime, timezone
import math
from os import PathLike
from pathlib import Path
from typing import Any, Dict, Iterable

import geojson

from dumpogn.messages.base import OgnMessage, OgnMessageType
from dumpogn.messages.formatting import METERS_TO_FEET

METERS_PER_SECOND_TO_FEET_PER_MINUTE = 196.85

CAPTURE_TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OutputFormatter(ABC):
    """
    conversion of decoded messages to an output format
    """

    name: str = None

    @abstractmethod
    def format(self, message: OgnMessage) -> str:
        """
        :param message: decoded message
        :return: formatted output, or an empty string if the message should be skipped
        """

        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'


class OgnFormatter(OutputFormatter):
    """ raw APRS-IS sentences as received, for forwarding to other APRS-IS clients """

    name = 'ogn'

    def format(self, message: OgnMessage) -> str:
        return message.sentence


class SBS1Formatter(OutputFormatter):
    """
    SBS-1 BaseStation format, as written by dump1090 and read by tar1090, Virtual Radar Server and others

    Every traffic report becomes a transmission type 8 (all data) line of 22 fields:

        MSG,8,session,aircraft,hex ident,flight,date generated,time generated,date logged,time logged,
        callsign,altitude,ground speed,track,latitude,longitude,vertical rate,squawk,alert,emergency,spi,on ground
    """

    name = 'sbs1'

    def __init__(self, clock=None):
        """
        :param clock: function returning the current time, defaults to UTC now
        """

        if clock is None:
            clock = utc_now
        self.clock = clock

    def format(self, message: OgnMessage) -> str:
        if message.type != OgnMessageType.traffic_report or not message.has_position:
            return ''

        now = self.clock()
        date = f'{now:%Y/%m/%d}'
        time = f'{now:%H:%M:%S}.{now.microsecond // 1000:03d}'

        hex_ident = message.address.upper().rjust(6, '0')
        callsign = message.flight_number if len(message.flight_number) > 0 else hex_ident

        if math.isfinite(message.altitude):
            altitude = str(int(message.altitude * METERS_TO_FEET))
        else:
            altitude = ''

        vertical_rate = int(message.vertical_speed * METERS_PER_SECOND_TO_FEET_PER_MINUTE)

        return (
            f'MSG,8,111,11111,{hex_ident},111111,{date},{time},{date},{time},{callsign},'
            f'{altitude},{int(message.speed)},{int(message.course)},'
            f'{message.latitude:.6f},{message.longitude:.6f},{vertical_rate},,,,,'
        )


class GeoJSONFormatter(OutputFormatter):
    """ one GeoJSON feature per line for each traffic or weather report with a position """

    name = 'geojson'

    traffic_fields = [
        'source_id',
        'timestamp',
        'course',
        'speed',
        'vertical_speed',
        'aircraft_id',
        'address',
        'flight_number',
        'flight_level',
        'squawk',
        'signal_strength',
        'stealth_mode',
        'no_tracking',
    ]
    weather_fields = [
        'source_id',
        'timestamp',
        'wind_direction',
        'wind_speed',
        'wind_gust_speed',
        'temperature',
        'humidity',
        'pressure',
    ]

    def format(self, message: OgnMessage) -> str:
        if not message.has_position:
            return ''
        return geojson.dumps(self.feature(message))

    def feature(self, message: OgnMessage) -> geojson.Feature:
        if message.type == OgnMessageType.traffic_report:
            properties = self.__properties(message, self.traffic_fields)
            properties['aircraft_type'] = message.aircraft_type.value
            properties['address_type'] = message.address_type.name
        elif message.type == OgnMessageType.weather:
            properties = self.__properties(message, self.weather_fields)
        else:
            raise ValueError(f'no position in {message.type.value} message')

        properties['type'] = message.type.value
        properties['symbol'] = message.symbol.value

        coordinates = [message.longitude, message.latitude]
        if math.isfinite(message.altitude):
            coordinates.append(message.altitude)

        return geojson.Feature(geometry=geojson.Point(coordinates), properties=properties)

    @staticmethod
    def __properties(message: OgnMessage, fields: [str]) -> Dict[str, Any]:
        return {
            field: message[field]
            for field in fields
            if not isinstance(message[field], str) or len(message[field]) > 0
        }


FORMATTERS = {
    formatter.name: formatter for formatter in (OgnFormatter, SBS1Formatter, GeoJSONFormatter)
}


class RawCaptureWriter:
    """
    capture of received sentences, one `YYYY-MM-DD HH:MM:SS: <sentence>` line each

    the capture can be replayed with `RawOGNTextFile`
    """

    def __init__(self, filename: PathLike):
        if not isinstance(filename, Path):
            filename = Path(filename)
        self.filename = filename
        self.__file = None

    def write(self, message: OgnMessage, time: datetime = None):
        if time is None:
            time = datetime.now()
        if self.__file is None:
            self.__file = open(self.filename, 'a', encoding='latin-1', errors='replace')
        self.__file.write(f'{time:{CAPTURE_TIME_FORMAT}}: {message.sentence}\n')
        self.__file.flush()

    def close(self):
        if self.__file is not None:
            self.__file.close()
            self.__file = None

    def __enter__(self) -> 'RawCaptureWriter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({repr(self.filename)})'


def write_raw_capture(messages: Iterable[OgnMessage], filename: PathLike):
    """
    write received sentences to a text file

    :param messages: decoded messages
    :param filename: path to text file
    """

    with RawCaptureWriter(filename) as writer:
        for message in messages:
            writer.write(message)
