from dumpogn.connections.base import Connection, MessageSource
from dumpogn.connections.file import RawOGNTextFile
from dumpogn.connections.internet import OGNis

__all__ = [
    'Connection',
    'MessageSource',
    'OGNis',
    'RawOGNTextFile',
]
