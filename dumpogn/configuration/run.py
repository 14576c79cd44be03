from pathlib import Path
from typing import Any

from dumpogn.configuration.base import ConfigurationSection, ConfigurationYAML
from dumpogn.configuration.credentials import ServerConfiguration
from dumpogn.configuration.text import TextStreamConfiguration
from dumpogn.connections.internet import DEFAULT_RADIUS
from dumpogn.messages.writer import FORMATTERS


class FilterConfiguration(ConfigurationYAML, ConfigurationSection):
    name = 'filter'
    fields = {
        'latitude': float,
        'longitude': float,
        'radius': int,
    }
    defaults = {
        'radius': DEFAULT_RADIUS,
    }


class RunConfiguration(ConfigurationYAML):
    fields = {
        'callsign': str,
        'server': ServerConfiguration,
        'filter': FilterConfiguration,
        'callsigns': [str],
        'text': TextStreamConfiguration,
        'output': {'format': str, 'filename': Path},
        'log': {'filename': Path},
    }

    defaults = {
        'callsigns': [],
        'output': {'format': 'ogn', 'filename': None},
        'log': {'filename': None},
    }

    def __init__(self, **configuration):
        for section in [ServerConfiguration, FilterConfiguration, TextStreamConfiguration]:
            if configuration.get(section.name) is None:
                configuration[section.name] = {}
        super().__init__(**configuration)

    def __setitem__(self, key: str, value: Any):
        super().__setitem__(key, value)

        if key == 'callsigns' and self['callsigns'] is not None:
            callsigns = []
            for entry in self['callsigns']:
                callsigns.extend(
                    callsign.strip() for callsign in entry.split(',') if len(callsign.strip()) > 0
                )
            super().__setitem__('callsigns', callsigns)

        if key == 'output' and self['output'] is not None:
            output_format = self['output'].get('format')
            if output_format is not None and output_format not in FORMATTERS:
                raise ValueError(
                    f'unknown output format "{output_format}" - choose from {list(FORMATTERS)}'
                )
            output_filename = self['output'].get('filename')
            if output_filename is not None:
                output_filename = Path(output_filename).expanduser()
                if not output_filename.parent.exists():
                    output_filename.parent.mkdir(parents=True, exist_ok=True)
                self['output']['filename'] = output_filename

        if key == 'log' and self['log'] is not None:
            log_filename = self['log'].get('filename')
            if log_filename is not None:
                log_filename = Path(log_filename).expanduser()
                if not log_filename.parent.exists():
                    log_filename.parent.mkdir(parents=True, exist_ok=True)
                self['log']['filename'] = log_filename
