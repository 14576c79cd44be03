from pathlib import Path

from dumpogn.configuration.base import ConfigurationSection, ConfigurationYAML
from dumpogn.connections.file import RawOGNTextFile


class TextStreamConfiguration(ConfigurationYAML, ConfigurationSection):
    name = 'text'
    fields = {
        'locations': [Path],
    }
    defaults = {
        'locations': [],
    }

    def message_sources(self, callsigns: [str] = None) -> [RawOGNTextFile]:
        return [RawOGNTextFile(location, callsigns) for location in self['locations']]
