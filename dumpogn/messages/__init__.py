from dumpogn.messages.base import (
    OgnAddressType,
    OgnAircraftType,
    OgnMessage,
    OgnMessageType,
    OgnSymbol,
)
from dumpogn.messages.formatting import (
    format_filter_command,
    format_login_string,
    format_position_report,
)
from dumpogn.messages.parsing import parse_aprsis_message

__all__ = [
    'OgnAddressType',
    'OgnAircraftType',
    'OgnMessage',
    'OgnMessageType',
    'OgnSymbol',
    'format_filter_command',
    'format_login_string',
    'format_position_report',
    'parse_aprsis_message',
]
