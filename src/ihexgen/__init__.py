"""
ihexgen - Intel HEX Encoder
===========================

This package converts arbitrary byte payloads into the Intel HEX text
format used by EEPROM/flash programmers and binary tools such as
`objcopy -I ihex`.

Main Components
---------------
- **ihex**: Record definitions, checksums and the encoder
- **cli**: The `ihex` command-line tool

Quick Start
-----------
Encode a payload given as hex digits:
    >>> from ihexgen import encode
    >>> print(encode("00112233", record_length=2), end="")
    :020000040000FA
    :020000000011ED
    :020002002233A7
    :00000001FF

Or use the command-line tool:
    $ ihex -r 2 00112233
    $ ihex -o payload.hex DEAD BEEF

Version History
---------------
1.0.0 - Initial release with data, extended segment address and EOF records
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from ihexgen.errors import (
    IHexError,
    InvalidInputError,
    ConfigurationError,
)

from ihexgen.ihex import (
    RecordType,
    IHexRecord,
    IHexEncoder,
    DEFAULT_RECORD_LENGTH,
    MAX_RECORD_LENGTH,
    encode,
    encode_fragments,
    encode_bytes,
    calculate_checksum,
    normalize_hex,
    verify_record_checksum,
)

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "IHexError",
    "InvalidInputError",
    "ConfigurationError",
    # Encoder
    "RecordType",
    "IHexRecord",
    "IHexEncoder",
    "DEFAULT_RECORD_LENGTH",
    "MAX_RECORD_LENGTH",
    "encode",
    "encode_fragments",
    "encode_bytes",
    "calculate_checksum",
    "normalize_hex",
    "verify_record_checksum",
]
