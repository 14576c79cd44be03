import os

from dumpogn.configuration.base import ConfigurationSection, ConfigurationYAML
from dumpogn.connections.internet import DEFAULT_HOSTNAME, DEFAULT_PORT, OGNis


class ServerConfiguration(ConfigurationYAML, ConfigurationSection):
    name = 'server'
    fields = {
        'hostname': str,
        'port': int,
    }
    defaults = {
        'hostname': os.getenv('OGN_HOSTNAME', DEFAULT_HOSTNAME),
        'port': int(os.getenv('OGN_PORT', DEFAULT_PORT)),
    }

    def message_source(
        self,
        latitude: float,
        longitude: float,
        radius: int = None,
        callsign: str = None,
        callsigns: [str] = None,
    ) -> OGNis:
        return OGNis(
            latitude,
            longitude,
            radius,
            callsign=callsign,
            hostname=self['hostname'],
            port=self['port'],
            callsigns=callsigns,
        )
