"""
prefix number parsing for fixed-width APRS fields

Each function reads the longest number at the start of the text and ignores whatever follows,
so `parse_integer('005g010')` is `5`. Text without a leading number gives `None`.
"""

import re
from typing import Optional

UNSIGNED_INTEGER = re.compile(r'\d+')
SIGNED_INTEGER = re.compile(r'-?\d+')
DECIMAL = re.compile(r'-?(?:\d+(?:\.\d*)?|\.\d+)')
HEXADECIMAL = re.compile(r'[0-9a-fA-F]+')

UINT32_MAX = 0xFFFFFFFF
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF

# enough digits for any 32-bit value
MAXIMUM_INTEGER_DIGITS = len(str(UINT32_MAX))


def parse_integer(text: str, signed: bool = True) -> Optional[int]:
    """ 32-bit integer from leading decimal digits; `None` on overflow """

    match = (SIGNED_INTEGER if signed else UNSIGNED_INTEGER).match(text)
    if match is None:
        return None
    digits = match.group()
    if len(digits.lstrip('-').lstrip('0')) > MAXIMUM_INTEGER_DIGITS:
        return None
    value = int(digits)
    if signed:
        if not INT32_MIN <= value <= INT32_MAX:
            return None
    elif value > UINT32_MAX:
        return None
    return value


def parse_decimal(text: str) -> Optional[float]:
    match = DECIMAL.match(text)
    if match is None:
        return None
    return float(match.group())


def parse_hexadecimal(text: str) -> Optional[int]:
    """ unsigned 32-bit value from leading hex digits; `None` on overflow """

    match = HEXADECIMAL.match(text)
    if match is None:
        return None
    value = int(match.group(), 16)
    if value > UINT32_MAX:
        return None
    return value
