"""
Intel HEX Checksum Calculations
===============================

This module provides the numeric helpers shared by every record.

Record Checksum
---------------
The checksum byte is the two's complement of the 8-bit sum of all other
bytes in the record (length, address high, address low, type, data):

    checksum = (0x100 - (sum & 0xFF)) & 0xFF

so that the sum of every byte in the record, checksum included, is 0x00
modulo 256.

Field Formatting
----------------
Numeric fields are rendered as uppercase hexadecimal with no prefix,
zero-padded to the field width. Values wider than the field keep only their
low-order digits (a 16-bit address field of 0x10002 renders as "0002").
"""

from typing import Iterable


def normalize_hex(value: int, width: int) -> str:
    """
    Render an integer as a fixed-width hex field.

    Args:
        value: Non-negative integer to render
        width: Field width in hex digits (2 for bytes, 4 for addresses)

    Returns:
        Exactly `width` uppercase hex digits

    Example:
        >>> normalize_hex(0x2, 4)
        '0002'
        >>> normalize_hex(0x10002, 4)
        '0002'
        >>> normalize_hex(0x1ED, 2)
        'ED'
    """
    if value < 0:
        raise ValueError(f"Cannot render negative value {value} as hex")
    if width < 1:
        raise ValueError(f"Field width must be positive, got {width}")

    return f"{value:0{width}X}"[-width:]


def calculate_checksum(data: Iterable[int]) -> int:
    """
    Calculate the Intel HEX checksum of a record body.

    Args:
        data: The record bytes excluding the leading ':' and the checksum

    Returns:
        Checksum byte (0x00 - 0xFF)

    Example:
        >>> calculate_checksum(bytes([0x02, 0x00, 0x00, 0x04, 0x00, 0x00]))
        250
    """
    return -sum(data) & 0xFF


def verify_record_checksum(line: str) -> bool:
    """
    Check that a rendered record sums to zero.

    Args:
        line: A single record line such as ':00000001FF' (surrounding
            whitespace is ignored)

    Returns:
        True if the line is well-formed and all of its bytes, checksum
        included, sum to 0x00 modulo 256
    """
    line = line.strip()
    if not line.startswith(":") or len(line) < 11 or len(line) % 2 == 0:
        return False

    try:
        data = bytes.fromhex(line[1:])
    except ValueError:
        return False

    # Declared length must match the bytes actually present
    if data[0] != len(data) - 5:
        return False

    return sum(data) & 0xFF == 0
