from abc import ABC, abstractmethod
from typing import Callable, List, Union

from dumpogn.messages import OgnMessage, parse_aprsis_message
from dumpogn.utilities import get_logger

LOGGER = get_logger('dumpogn.connection')

# the OGN APRS-IS servers send ISO 8859-1 text
ENCODING = 'latin-1'


class Connection(ABC):
    """
    abstraction of a generic connection
    """

    def __init__(self, location: str):
        self.location = location

    @abstractmethod
    def close(self):
        raise NotImplementedError

    def __enter__(self) -> 'Connection':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class MessageSource(Connection, ABC):
    """
    abstraction of a connection that delivers lines of the OGN feed
    """

    def __init__(self, location: str, callsigns: List[str] = None):
        """
        :param location: location of OGN sentences
        :param callsigns: list of source IDs to deliver messages from, all if not given
        """

        if callsigns is not None and len(callsigns) == 0:
            callsigns = None
        self.callsigns = callsigns
        super().__init__(location)

    @abstractmethod
    def consume(self, callback: Callable[[OgnMessage], None]):
        """
        pass decoded messages to the given callback, one per received line

        :param callback: function receiving each decoded message
        """

        raise NotImplementedError

    def parse_line(self, line: Union[str, bytes]) -> OgnMessage:
        if isinstance(line, bytes):
            line = line.decode(ENCODING)
        return parse_aprsis_message(line)

    def accepts(self, message: OgnMessage) -> bool:
        """ whether the message passes the source ID filter of this connection """

        return self.callsigns is None or message.source_id in self.callsigns
