"""eVic VTC Mini firmware codec.

Firmware images for the eVic VTC Mini are obfuscated with a single XOR
keystream whose value at each position depends on the byte index and the
total image length. XOR is its own inverse, so `transform` both decrypts a
vendor image and encrypts a patched one.
"""

import errno
import io
import os
import typing

import numpy as np

from .errors import FirmwareEmpty, FirmwareTooLarge

# Capacity of the ROM in the eVic VTC Mini.
ROM_CAPACITY = 120 * 1024

KEY_CONSTANT = 408376

# Buffers at least this long go through numpy instead of the byte loop.
FAST_MIN_BYTES = 4096


def _env_int(name: str) -> typing.Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    if parsed <= 0:
        return None
    return parsed


def _fast_min_bytes() -> int:
    return _env_int("EVIC_FAST_MIN_BYTES") or FAST_MIN_BYTES


def _key_base(size: int) -> int:
    return (KEY_CONSTANT + size - size // KEY_CONSTANT) & 0xFF


def key_byte(index: int, size: int) -> int:
    """Keystream value for position `index` of an image `size` bytes long."""
    return (index + KEY_CONSTANT + size - size // KEY_CONSTANT) & 0xFF


def _xor_keystream_inplace(buf: bytearray, size: int) -> None:
    n = len(buf)
    if not n:
        return
    base = _key_base(size)
    if n >= _fast_min_bytes():
        arr = np.frombuffer(memoryview(buf), dtype=np.uint8)
        index = np.arange(n, dtype=np.uint64)
        keystream = ((index + np.uint64(base)) & np.uint64(0xFF)).astype(np.uint8)
        np.bitwise_xor(arr, keystream, out=arr)
        return
    for i in range(n):
        buf[i] ^= (i + base) & 0xFF


def _source_size(source: typing.BinaryIO) -> int:
    size = source.seek(0, io.SEEK_END)
    source.seek(0, io.SEEK_SET)
    return size


def _read_exact(source: typing.BinaryIO, size: int) -> bytearray:
    buf = bytearray(size)
    view = memoryview(buf)
    offset = 0
    while offset < size:
        chunk = source.read(size - offset)
        if not chunk:
            raise OSError(
                errno.EIO,
                f"short read: expected {size} bytes of firmware, got {offset}",
            )
        view[offset:offset + len(chunk)] = chunk
        offset += len(chunk)
    return buf


class FirmwareImage:
    """An owned firmware buffer, ciphertext or plaintext depending on direction."""

    def __init__(self, buffer: bytearray):
        self._buffer = buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __repr__(self) -> str:
        return f"FirmwareImage(size={len(self._buffer)})"

    @property
    def size(self) -> int:
        return len(self._buffer)

    @property
    def data(self) -> bytes:
        return bytes(self._buffer)

    @classmethod
    def transform(cls, source: typing.BinaryIO) -> "FirmwareImage":
        """Read `source` completely and apply the keystream to it.

        The source must be seekable: its length is taken before anything
        is read so that oversized or empty images are rejected up front.
        Raises FirmwareTooLarge, FirmwareEmpty, or OSError from the
        underlying stream.
        """
        size = _source_size(source)
        if size > ROM_CAPACITY:
            raise FirmwareTooLarge(size, ROM_CAPACITY)
        if size == 0:
            raise FirmwareEmpty()
        buf = _read_exact(source, size)
        _xor_keystream_inplace(buf, size)
        return cls(buf)

    def save(self, sink: typing.BinaryIO) -> None:
        """Write the whole buffer to `sink`."""
        written = sink.write(self._buffer)
        # Raw (unbuffered) streams may accept less than they were given.
        if written is not None and written != len(self._buffer):
            raise OSError(
                errno.EIO,
                f"short write: wrote {written} of {len(self._buffer)} firmware bytes",
            )


def transform(source: typing.BinaryIO) -> FirmwareImage:
    return FirmwareImage.transform(source)


def save(image: FirmwareImage, sink: typing.BinaryIO) -> None:
    image.save(sink)


__all__ = [
    "FAST_MIN_BYTES",
    "FirmwareImage",
    "KEY_CONSTANT",
    "ROM_CAPACITY",
    "key_byte",
    "save",
    "transform",
]
