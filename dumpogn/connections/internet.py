import random
from typing import Callable, List

import aprslib
from aprslib.exceptions import ConnectionDrop, LoginError
from aprslib.exceptions import ConnectionError as APRSConnectionError

from dumpogn import __version__
from dumpogn.connections.base import LOGGER, MessageSource
from dumpogn.messages import OgnMessage, format_filter_command, format_login_string
from dumpogn.messages.formatting import calculate_password

DEFAULT_HOSTNAME = 'aprs.glidernet.org'
# port 14580 applies the filter of the login line, port 10152 sends the full feed
DEFAULT_PORT = 14580
DEFAULT_RADIUS = 50

APP_NAME = 'dumpOGN'


def random_callsign() -> str:
    """ read-only callsign for anonymous clients, like `DMP123456` """

    return f'DMP{random.randint(100000, 999999)}'


class OGNis(MessageSource):
    """
    connection to an OGN APRS-IS server, filtered to traffic within a radius around a location
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        radius: int = None,
        callsign: str = None,
        hostname: str = None,
        port: int = None,
        callsigns: List[str] = None,
        app_version: str = None,
    ):
        """
        :param latitude: latitude of the filter center
        :param longitude: longitude of the filter center
        :param radius: filter radius in kilometers
        :param callsign: callsign to log in with, random if not given
        :param hostname: server hostname
        :param port: server port
        :param callsigns: list of source IDs to deliver messages from
        :param app_version: client version sent with the login line
        """

        if radius is None:
            radius = DEFAULT_RADIUS
        if callsign is None:
            callsign = random_callsign()
        if hostname is None:
            hostname = DEFAULT_HOSTNAME
        if port is None:
            port = DEFAULT_PORT
        if app_version is None:
            app_version = __version__

        self.__hostname = hostname
        self.__port = int(port)
        self.callsign = callsign
        self.latitude = latitude
        self.longitude = longitude
        self.radius = radius
        self.app_version = app_version

        MessageSource.__init__(self, f'{self.hostname}:{self.port}', callsigns)

        self.__aprs_is = aprslib.IS(
            self.callsign,
            passwd=calculate_password(self.callsign),
            host=self.hostname,
            port=self.port,
            skip_login=True,
        )
        self.__connected = False

    @property
    def hostname(self) -> str:
        return self.__hostname

    @property
    def port(self) -> int:
        return self.__port

    @property
    def connected(self) -> bool:
        return self.__connected

    @property
    def login_string(self) -> str:
        return format_login_string(
            self.callsign,
            self.latitude,
            self.longitude,
            self.radius,
            APP_NAME,
            self.app_version,
        )

    def connect(self):
        """ open the connection and log in with the current filter """

        if self.connected:
            return

        LOGGER.info(f'connecting to {self.location}')
        try:
            self.__aprs_is.connect()
            self.__aprs_is.sendall(self.login_string)
        except (APRSConnectionError, LoginError) as error:
            self.__aprs_is.close()
            raise ConnectionError(f'could not connect to {self.location} - {error}')
        self.__connected = True

        LOGGER.info(
            f'logged in as {self.callsign} (filter: {self.latitude}, {self.longitude}, radius {self.radius} km)'
        )

    def update_filter(self, latitude: float, longitude: float, radius: int = None):
        """
        move the traffic filter, also on an established connection

        :param latitude: latitude of the filter center
        :param longitude: longitude of the filter center
        :param radius: filter radius in kilometers, unchanged if not given
        """

        self.latitude = latitude
        self.longitude = longitude
        if radius is not None:
            self.radius = radius

        if self.connected:
            try:
                self.__aprs_is.sendall(
                    format_filter_command(self.latitude, self.longitude, self.radius)
                )
            except APRSConnectionError as error:
                self.__connected = False
                raise ConnectionError(f'disconnected from {self.location} - {error}')
            LOGGER.info(
                f'updated filter to {self.latitude}, {self.longitude}, radius {self.radius} km'
            )

    def consume(self, callback: Callable[[OgnMessage], None]):
        """
        pass decoded messages to the given callback until the server disconnects

        :param callback: function receiving each decoded message
        """

        self.connect()

        def consume_line(line: bytes):
            message = self.parse_line(line)
            if self.accepts(message):
                callback(message)

        try:
            self.__aprs_is.consumer(consume_line, blocking=True, immortal=False, raw=True)
        except (ConnectionDrop, APRSConnectionError) as error:
            self.__connected = False
            raise ConnectionError(f'disconnected from {self.location} - {error}')

    def close(self):
        self.__aprs_is.close()
        self.__connected = False

    def __repr__(self):
        return (
            f'{self.__class__.__name__}({repr(self.latitude)}, {repr(self.longitude)}, {repr(self.radius)}, '
            f'callsign={repr(self.callsign)}, hostname={repr(self.hostname)}, port={repr(self.port)})'
        )
