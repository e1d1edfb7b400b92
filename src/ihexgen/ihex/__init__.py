"""
Intel HEX Encoding
==================

This module turns a byte payload, given as a string of hex digits, into
Intel HEX text suitable for EEPROM/flash programmers and `objcopy`.

This module provides:
- **encode / encode_fragments / encode_bytes**: One-call encoding
- **IHexEncoder**: Reusable encoder bound to a record length
- **IHexRecord / RecordType**: The record data structure
- **Checksum utilities**: Field formatting and record checksums

Quick Start
-----------
    >>> from ihexgen.ihex import encode
    >>> encode("DEADBEEF").splitlines()
    [':020000040000FA', ':04000000DEADBEEFC4', ':00000001FF']

Joining fragments first:

    >>> from ihexgen.ihex import encode_fragments
    >>> text = encode_fragments(["DEAD", "BEEF"], record_length=2)
"""

# =============================================================================
# Public API Exports
# =============================================================================

from ihexgen.ihex.checksum import (
    normalize_hex,
    calculate_checksum,
    verify_record_checksum,
)

from ihexgen.ihex.records import (
    RecordType,
    IHexRecord,
    DEFAULT_RECORD_LENGTH,
    MAX_RECORD_LENGTH,
    ADDRESS_SPACE,
    PREAMBLE_RECORD,
    EOF_RECORD,
)

from ihexgen.ihex.encoder import (
    IHexEncoder,
    validate_hex_string,
    validate_record_length,
    encode,
    encode_fragments,
    encode_bytes,
)

__all__ = [
    # Checksum
    "normalize_hex",
    "calculate_checksum",
    "verify_record_checksum",
    # Records
    "RecordType",
    "IHexRecord",
    "DEFAULT_RECORD_LENGTH",
    "MAX_RECORD_LENGTH",
    "ADDRESS_SPACE",
    "PREAMBLE_RECORD",
    "EOF_RECORD",
    # Encoder
    "IHexEncoder",
    "validate_hex_string",
    "validate_record_length",
    "encode",
    "encode_fragments",
    "encode_bytes",
]
