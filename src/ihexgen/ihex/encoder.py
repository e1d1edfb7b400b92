"""
Intel HEX Encoder
=================

This module converts a payload given as a string of hex digits into Intel
HEX text.

Output Layout
-------------
    :020000040000FA             <- segment 0000 preamble
    :10000000...                <- data records, `record_length` bytes each
    :10FFF000...
    :020000040001F9             <- emitted when the 16-bit offset overflows
    :10000000...
    :00000001FF                 <- end of file

The load address is tracked as a (major, minor) pair: `minor` is the 16-bit
offset written into each data record and `major` the upper 16 bits written
into extended segment address records. Both start at zero for every call.

Usage
-----
    >>> from ihexgen.ihex import encode
    >>> print(encode("00112233", record_length=2), end="")
    :020000040000FA
    :020000000011ED
    :020002002233A7
    :00000001FF
"""

from typing import Iterable, Iterator, Optional
import logging
import re

from ihexgen.errors import ConfigurationError, InvalidInputError
from ihexgen.ihex.records import (
    ADDRESS_SPACE,
    DEFAULT_RECORD_LENGTH,
    MAX_RECORD_LENGTH,
    IHexRecord,
)

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Validation Helpers
# =============================================================================

HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")
NON_HEX_PATTERN = re.compile(r"[^0-9A-Fa-f]")


def validate_hex_string(hex_digits: str) -> str:
    """
    Validate a payload hex string.

    The string must be non-empty, contain only hex digits, and hold a
    whole number of bytes (an even number of digits).

    Args:
        hex_digits: Payload as hex digits, case-insensitive

    Returns:
        The payload digits in uppercase

    Raises:
        InvalidInputError: If the string is empty, not hex, or odd-length
    """
    if not isinstance(hex_digits, str):
        raise InvalidInputError(
            f"Input must be a string of hex digits, got {type(hex_digits).__name__}"
        )

    if not hex_digits:
        logger.debug("Hex validation failed: empty input")
        raise InvalidInputError("Input is empty", hint="supply at least one byte")

    if not HEX_PATTERN.fullmatch(hex_digits):
        match = NON_HEX_PATTERN.search(hex_digits)
        position = match.start() if match else len(hex_digits) - 1
        logger.debug(f"Hex validation failed: invalid character at position {position}")
        raise InvalidInputError(
            f"Input is not a valid hex string: {hex_digits!r}",
            hint=f"unexpected character {hex_digits[position]!r} at position {position}",
            position=position,
        )

    if len(hex_digits) % 2:
        logger.debug(f"Hex validation failed: odd length ({len(hex_digits)} digits)")
        raise InvalidInputError(
            f"Input has an odd number of hex digits ({len(hex_digits)})",
            hint="each byte needs two hex digits",
            position=len(hex_digits) - 1,
        )

    return hex_digits.upper()


def validate_record_length(record_length: Optional[int]) -> int:
    """
    Validate the number of data bytes per record.

    Args:
        record_length: Bytes per data record, or None for the default (16)

    Returns:
        The record length to use

    Raises:
        ConfigurationError: If the value is not an integer in 1-255
    """
    if record_length is None:
        return DEFAULT_RECORD_LENGTH

    if isinstance(record_length, bool) or not isinstance(record_length, int):
        raise ConfigurationError(
            f"Record length must be an integer, got {record_length!r}"
        )

    if not 1 <= record_length <= MAX_RECORD_LENGTH:
        raise ConfigurationError(
            f"Record length {record_length} out of range",
            hint=f"use a value between 1 and {MAX_RECORD_LENGTH}",
        )

    return record_length


# =============================================================================
# Encoder
# =============================================================================

class IHexEncoder:
    """
    Encodes hex digit payloads as Intel HEX text.

    The encoder only holds its configuration; address state lives inside
    each call, so one instance can be shared freely.

    Attributes:
        record_length: Data bytes per data record (1-255)

    Example:
        >>> encoder = IHexEncoder(record_length=1)
        >>> encoder.encode("AB").splitlines()
        [':020000040000FA', ':01000000AB54', ':00000001FF']
    """

    def __init__(self, record_length: Optional[int] = DEFAULT_RECORD_LENGTH):
        self.record_length = validate_record_length(record_length)

    def __repr__(self) -> str:
        return f"IHexEncoder(record_length={self.record_length})"

    def iter_records(self, hex_digits: str) -> Iterator[IHexRecord]:
        """
        Yield the records for a payload in output order.

        The payload is validated before the first record is yielded.

        Args:
            hex_digits: Payload as hex digits

        Yields:
            Preamble, data and extended segment address records, then EOF

        Raises:
            InvalidInputError: If the payload is malformed
        """
        digits = validate_hex_string(hex_digits)
        return self._generate(digits)

    def _generate(self, digits: str) -> Iterator[IHexRecord]:
        nibble_length = self.record_length * 2
        major = 0
        minor = 0

        yield IHexRecord.extended_segment_address(major)

        for idx in range(0, len(digits), nibble_length):
            chunk = bytes.fromhex(digits[idx:idx + nibble_length])
            yield IHexRecord.data_record(minor, chunk)

            minor += self.record_length
            if minor >= ADDRESS_SPACE:
                major += 1
                minor -= ADDRESS_SPACE
                logger.debug(f"Address rollover at byte {idx // 2 + len(chunk)}: segment {major:04X}")
                yield IHexRecord.extended_segment_address(major)

        yield IHexRecord.end_of_file()

    def encode(self, hex_digits: str) -> str:
        """
        Encode a payload as Intel HEX text.

        Args:
            hex_digits: Payload as hex digits, case-insensitive

        Returns:
            The complete file contents, one record per line, with a
            trailing newline after the EOF record

        Raises:
            InvalidInputError: If the payload is malformed
        """
        lines = [record.to_line() for record in self.iter_records(hex_digits)]
        logger.debug(
            f"Encoded {len(hex_digits) // 2} bytes into {len(lines)} records "
            f"({self.record_length} bytes per record)"
        )
        return "\n".join(lines) + "\n"


# =============================================================================
# Convenience Functions
# =============================================================================

def encode(hex_digits: str, record_length: Optional[int] = DEFAULT_RECORD_LENGTH) -> str:
    """
    Encode a hex digit payload as Intel HEX text.

    Args:
        hex_digits: Payload as hex digits, case-insensitive
        record_length: Data bytes per record (default 16)

    Returns:
        Intel HEX text with a trailing newline

    Raises:
        InvalidInputError: If the payload is empty, not hex, or odd-length
        ConfigurationError: If record_length is not in 1-255
    """
    return IHexEncoder(record_length).encode(hex_digits)


def encode_fragments(
    fragments: Iterable[str],
    record_length: Optional[int] = DEFAULT_RECORD_LENGTH,
) -> str:
    """
    Concatenate hex fragments and encode the result.

    Validation applies to the joined string, so a byte may be split
    across two fragments.

    Args:
        fragments: Hex digit strings, joined in order
        record_length: Data bytes per record (default 16)

    Returns:
        Intel HEX text with a trailing newline

    Raises:
        InvalidInputError: If no fragments are given or the joined
            payload is malformed
    """
    fragments = list(fragments)
    if not fragments:
        raise InvalidInputError("At least 1 input fragment is required")

    for fragment in fragments:
        if not isinstance(fragment, str):
            raise InvalidInputError(
                f"Input fragments must be strings, got {type(fragment).__name__}"
            )

    return encode("".join(fragments), record_length)


def encode_bytes(data: bytes, record_length: Optional[int] = DEFAULT_RECORD_LENGTH) -> str:
    """
    Encode raw bytes as Intel HEX text.

    Args:
        data: Payload bytes
        record_length: Data bytes per record (default 16)

    Returns:
        Intel HEX text with a trailing newline
    """
    return encode(bytes(data).hex(), record_length)
