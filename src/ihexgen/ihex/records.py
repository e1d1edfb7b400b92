"""
Intel HEX Record Definitions
============================

This module defines the record types and the record data structure used
by the encoder.

Record Layout
-------------
Every record is one line of ASCII text:

    :LLAAAATT[DD...]CC

    Field   Size    Description
    -----   ----    -----------
    LL      1       Number of data bytes
    AAAA    2       16-bit load offset (big-endian)
    TT      1       Record type
    DD      LL      Data bytes
    CC      1       Checksum (two's complement of the byte sum)

Record Types
------------
Only three types are produced:

- **00 Data**: payload bytes at the given 16-bit offset
- **01 End Of File**: zero data bytes, always the last line
- **04 Extended Segment Address**: two data bytes holding the upper 16
  bits of the address for all following data records

Reference
---------
- Intel Hexadecimal Object File Format Specification, Rev. A (1988)
"""

from dataclasses import dataclass
from enum import IntEnum
import struct

from ihexgen.ihex.checksum import calculate_checksum, normalize_hex


# =============================================================================
# Constants
# =============================================================================

# Default number of data bytes per data record
DEFAULT_RECORD_LENGTH = 16

# The length field is a single byte
MAX_RECORD_LENGTH = 0xFF

# Size of the 16-bit offset space addressed by one segment
ADDRESS_SPACE = 0x10000

# Fixed first and last lines of every encoded file
PREAMBLE_RECORD = ":020000040000FA"
EOF_RECORD = ":00000001FF"


# =============================================================================
# Record Types
# =============================================================================

class RecordType(IntEnum):
    """Intel HEX record type identifiers."""
    DATA = 0x00                         # Data bytes
    END_OF_FILE = 0x01                  # End of file marker
    EXTENDED_SEGMENT_ADDRESS = 0x04     # Upper 16 address bits

    def get_description(self) -> str:
        """Get a human-readable name for this record type."""
        return {
            RecordType.DATA: "Data",
            RecordType.END_OF_FILE: "End Of File",
            RecordType.EXTENDED_SEGMENT_ADDRESS: "Extended Segment Address",
        }[self]


# =============================================================================
# Record
# =============================================================================

@dataclass(frozen=True)
class IHexRecord:
    """
    A single Intel HEX record.

    Attributes:
        record_type: Type of record (data, EOF, extended segment address)
        address: 16-bit load offset (0x0000 - 0xFFFF)
        data: Record payload (at most 255 bytes)

    Example:
        >>> IHexRecord.data_record(0x0002, bytes([0x22, 0x33])).to_line()
        ':020002002233A7'
    """
    record_type: RecordType
    address: int = 0
    data: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.address < ADDRESS_SPACE:
            raise ValueError(f"Record address out of range: 0x{self.address:X}")
        if len(self.data) > MAX_RECORD_LENGTH:
            raise ValueError(
                f"Record data too long: {len(self.data)} bytes "
                f"(max {MAX_RECORD_LENGTH})"
            )

    @classmethod
    def data_record(cls, address: int, data: bytes) -> "IHexRecord":
        """Create a type 00 data record."""
        return cls(RecordType.DATA, address, bytes(data))

    @classmethod
    def extended_segment_address(cls, segment: int) -> "IHexRecord":
        """Create a type 04 record selecting the given upper 16 address bits."""
        return cls(
            RecordType.EXTENDED_SEGMENT_ADDRESS,
            0,
            struct.pack(">H", segment & 0xFFFF),
        )

    @classmethod
    def end_of_file(cls) -> "IHexRecord":
        """Create the type 01 end of file record."""
        return cls(RecordType.END_OF_FILE)

    @property
    def length(self) -> int:
        """Number of data bytes in this record."""
        return len(self.data)

    def body(self) -> bytes:
        """All record bytes covered by the checksum."""
        return struct.pack(">BHB", self.length, self.address, self.record_type) + self.data

    @property
    def checksum(self) -> int:
        """Checksum byte for this record."""
        return calculate_checksum(self.body())

    def to_line(self) -> str:
        """Render the record as a line of text, without a newline."""
        return (
            ":"
            + normalize_hex(self.length, 2)
            + normalize_hex(self.address, 4)
            + normalize_hex(self.record_type, 2)
            + self.data.hex().upper()
            + normalize_hex(self.checksum, 2)
        )

    def __str__(self) -> str:
        return self.to_line()
