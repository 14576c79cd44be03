from dumpogn.configuration.credentials import ServerConfiguration
from dumpogn.configuration.run import FilterConfiguration, RunConfiguration
from dumpogn.configuration.text import TextStreamConfiguration

__all__ = [
    'FilterConfiguration',
    'RunConfiguration',
    'ServerConfiguration',
    'TextStreamConfiguration',
]
