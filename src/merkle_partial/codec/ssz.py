"""SSZ encoding helpers for basic (scalar) types.

Conventions
- Unsigned integers are encoded little-endian in exactly ``size`` bytes.
- Booleans are a single byte, 0x00 or 0x01; any other byte is invalid.
- "write_*" functions return encoded bytes for the given value.
- "read_*" functions take a buffer and an offset, and return a tuple of
  (decoded_value, new_offset). They raise SSZDecodeError if the buffer
  does not contain enough data starting at the given offset.
- "decode_*" functions consume a whole buffer and reject any length other
  than the type's fixed size.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import SSZDecodeError
from ..overlay.registry import get_basic_overlay

Scalar = Union[int, bool]


def _require_length(buf: bytes, need: int) -> None:
    """Ensure that the provided buffer contains at least 'need' bytes.

    Parameters
    - buf: Bytes-like object to check.
    - need: Minimum number of bytes required.

    Raises
    - SSZDecodeError: If len(buf) < need.
    """
    if len(buf) < need:
        raise SSZDecodeError(f"buffer too short: need {need}, have {len(buf)}")


def write_uint(x: int, size: int) -> bytes:
    """Encode an unsigned integer little-endian in exactly 'size' bytes.

    Parameters
    - x: Integer in range [0, 2^(8*size) - 1].
    - size: Encoded width in bytes.

    Returns
    - 'size'-byte little-endian encoding.

    Raises
    - ValueError: If x is negative or does not fit in 'size' bytes.
    """
    if x < 0 or x >= 1 << (8 * size):
        raise ValueError(f"{x} does not fit in {size} bytes")
    return x.to_bytes(size, "little")


def read_uint(buf: bytes, offset: int, size: int) -> tuple[int, int]:
    """Decode a 'size'-byte little-endian unsigned integer.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.
    - size: Encoded width in bytes.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data.
    """
    _require_length(buf[offset:], size)
    return int.from_bytes(buf[offset:offset + size], "little"), offset + size


def write_uint8(x: int) -> bytes:
    """Encode an unsigned 8-bit integer.

    Parameters
    - x: Integer in range [0, 255].

    Returns
    - Encoded single-byte representation.
    """
    return write_uint(x, 1)


def write_uint16(x: int) -> bytes:
    """Encode an unsigned 16-bit integer in little-endian format.

    Parameters
    - x: Integer in range [0, 65535].

    Returns
    - 2-byte little-endian encoding.
    """
    return write_uint(x, 2)


def write_uint32(x: int) -> bytes:
    """Encode an unsigned 32-bit integer in little-endian format.

    Parameters
    - x: Integer in range [0, 2^32 - 1].

    Returns
    - 4-byte little-endian encoding.
    """
    return write_uint(x, 4)


def write_uint64(x: int) -> bytes:
    """Encode an unsigned 64-bit integer in little-endian format.

    Parameters
    - x: Integer in range [0, 2^64 - 1].

    Returns
    - 8-byte little-endian encoding.
    """
    return write_uint(x, 8)


def write_uint128(x: int) -> bytes:
    """Encode an unsigned 128-bit integer in little-endian format.

    Parameters
    - x: Integer in range [0, 2^128 - 1].

    Returns
    - 16-byte little-endian encoding.
    """
    return write_uint(x, 16)


def write_uint256(x: int) -> bytes:
    """Encode an unsigned 256-bit integer in little-endian format.

    Parameters
    - x: Integer in range [0, 2^256 - 1].

    Returns
    - 32-byte little-endian encoding (one full chunk).
    """
    return write_uint(x, 32)


def read_uint8(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 8-bit integer.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data.
    """
    return read_uint(buf, offset, 1)


def read_uint16(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 16-bit little-endian integer.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data.
    """
    return read_uint(buf, offset, 2)


def read_uint32(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 32-bit little-endian integer.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data.
    """
    return read_uint(buf, offset, 4)


def read_uint64(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 64-bit little-endian integer.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data.
    """
    return read_uint(buf, offset, 8)


def read_uint128(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 128-bit little-endian integer.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data.
    """
    return read_uint(buf, offset, 16)


def read_uint256(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 256-bit little-endian integer.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data.
    """
    return read_uint(buf, offset, 32)


def write_bool(x: bool) -> bytes:
    """Encode a boolean as a single 0x00/0x01 byte.

    Parameters
    - x: Value to encode.

    Returns
    - Encoded single-byte representation.
    """
    return b"\x01" if x else b"\x00"


def read_bool(buf: bytes, offset: int = 0) -> tuple[bool, int]:
    """Decode a boolean byte.

    Parameters
    - buf: Source buffer.
    - offset: Starting offset within buf.

    Returns
    - (value, new_offset)

    Raises
    - SSZDecodeError: If insufficient data or the byte is neither 0x00 nor 0x01.
    """
    _require_length(buf[offset:], 1)
    b = buf[offset]
    if b > 1:
        raise SSZDecodeError(f"invalid boolean byte: 0x{b:02x}")
    return b == 1, offset + 1


def decode_uint(data: bytes, size: int) -> int:
    """Decode a buffer holding exactly one ``size``-byte unsigned integer."""
    if len(data) != size:
        raise SSZDecodeError(f"invalid length: expected {size}, have {len(data)}")
    value, _ = read_uint(data, 0, size)
    return value


def decode_bool(data: bytes) -> bool:
    """Decode a buffer holding exactly one boolean byte.

    Raises
    - SSZDecodeError: If the length is not 1 or the byte is invalid.
    """
    if len(data) != 1:
        raise SSZDecodeError(f"invalid length: expected 1, have {len(data)}")
    value, _ = read_bool(data, 0)
    return value


def decode_scalar(type_name: str, data: bytes) -> Scalar:
    """Decode ``data`` as the basic type named ``type_name``.

    Raises UnknownTypeError for unsupported names and SSZDecodeError for
    malformed bytes.
    """
    overlay = get_basic_overlay(type_name)
    if overlay.name == "bool":
        return decode_bool(data)
    return decode_uint(data, overlay.byte_size)


def encode_scalar(type_name: str, value: Scalar) -> bytes:
    """Encode 'value' as the basic type named 'type_name'.

    Raises
    - UnknownTypeError: For unsupported names.
    - ValueError: If value does not fit the type.
    """
    overlay = get_basic_overlay(type_name)
    if overlay.name == "bool":
        return write_bool(bool(value))
    return write_uint(int(value), overlay.byte_size)


def parse_value(type_name: str, text: str) -> Scalar:
    """Parse a textual literal into a value of the basic type ``type_name``.

    Integers may be decimal or ``0x``-prefixed hex; booleans are ``true`` or
    ``false``. Malformed or out-of-range literals raise ValueError.
    """
    overlay = get_basic_overlay(type_name)
    literal = text.strip()
    if overlay.name == "bool":
        lowered = literal.lower()
        if lowered not in ("true", "false"):
            raise ValueError(f"invalid boolean literal: {text!r}")
        return lowered == "true"

    if literal.lower().startswith("0x"):
        value = int(literal[2:], 16)
    else:
        value = int(literal, 10)
    if value < 0 or value >= 1 << overlay.bit_width:
        raise ValueError(f"{text} out of range for {type_name}")
    return value
