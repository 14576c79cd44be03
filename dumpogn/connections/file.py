from os import PathLike
from pathlib import Path
from typing import Callable, List

from dateutil.parser import parse as parse_date

from dumpogn.connections.base import ENCODING, LOGGER, MessageSource
from dumpogn.messages import OgnMessage


class WatchedFile:
    def __init__(self, file: PathLike):
        if not isinstance(file, Path):
            if isinstance(file, str):
                file = file.strip('"')
            file = Path(file)

        self.file = file.expanduser()
        self.__parsed_lines = []

    def new_lines(self) -> List[str]:
        """ non-empty lines that were not returned by a previous call """

        try:
            with open(self.file, encoding=ENCODING) as file_connection:
                lines = file_connection.read().splitlines()
        except OSError as error:
            raise ConnectionError(f'{error.__class__.__name__} - {error}')

        new_lines = []
        for line in lines[len(self.__parsed_lines) :]:
            self.__parsed_lines.append(line)
            if len(line.strip()) > 0:
                new_lines.append(line)

        return new_lines


class RawOGNTextFile(MessageSource, WatchedFile):
    def __init__(self, filename: PathLike, callsigns: List[str] = None):
        """
        replay OGN sentences from a given text file where each line consists of the raw sentence,
        optionally preceded by the time it was received (`YYYY-MM-DD HH:MM:SS`) and `: `

        :param filename: path to text file
        :param callsigns: list of source IDs to deliver messages from
        """

        WatchedFile.__init__(self, filename)
        MessageSource.__init__(self, str(self.file), callsigns)

    def consume(self, callback: Callable[[OgnMessage], None]):
        for line in self.new_lines():
            message = self.parse_line(strip_capture_time(line))
            if self.accepts(message):
                callback(message)

    def close(self):
        pass

    def __repr__(self):
        return f'{self.__class__.__name__}({repr(self.location)}, {repr(self.callsigns)})'


def strip_capture_time(line: str) -> str:
    """ remove a leading `YYYY-MM-DD HH:MM:SS: ` receive time from a captured line """

    if ': ' in line:
        capture_time, sentence = line.split(': ', 1)
        try:
            parse_date(capture_time)
        except (ValueError, OverflowError):
            return line
        LOGGER.debug(f'replaying sentence received at {capture_time}')
        return sentence
    return line
