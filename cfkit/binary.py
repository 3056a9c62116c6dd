"""Byte-order helpers plus bounded readers and writers for binary buffers."""

from __future__ import annotations

import struct
import sys

_NATIVE = sys.byteorder


def _swap(value: int, size: int) -> int:
    mask = (1 << (8 * size)) - 1
    return int.from_bytes((value & mask).to_bytes(size, "little"), "big")


def swap16(value: int) -> int:
    """Reverse the byte order of a 16-bit value."""
    return _swap(value, 2)


def swap32(value: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return _swap(value, 4)


def swap64(value: int) -> int:
    """Reverse the byte order of a 64-bit value."""
    return _swap(value, 8)


def _encode_int(value: int, size: int, byteorder: str) -> bytes:
    """Encode an integer, truncating it to ``size`` bytes like a C cast."""
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, byteorder)


class ByteReader:
    """Reads native-order values from a byte buffer without running past its end."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.position = 0

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self.position

    def get(self, size: int) -> bytes:
        """Read ``size`` raw bytes; raise EOFError if fewer remain."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > self.remaining():
            raise EOFError(f"need {size} bytes, only {self.remaining()} remain")
        chunk = self._data[self.position:self.position + size]
        self.position += size
        return chunk

    def _get_int(self, size: int, signed: bool) -> int:
        return int.from_bytes(self.get(size), _NATIVE, signed=signed)

    def get_u8(self) -> int:
        return self._get_int(1, False)

    def get_i8(self) -> int:
        return self._get_int(1, True)

    def get_u16(self) -> int:
        return self._get_int(2, False)

    def get_i16(self) -> int:
        return self._get_int(2, True)

    def get_u32(self) -> int:
        return self._get_int(4, False)

    def get_i32(self) -> int:
        return self._get_int(4, True)

    def get_u64(self) -> int:
        return self._get_int(8, False)

    def get_i64(self) -> int:
        return self._get_int(8, True)

    def get_float(self) -> float:
        return struct.unpack("=f", self.get(4))[0]

    def get_double(self) -> float:
        return struct.unpack("=d", self.get(8))[0]


class ByteWriter:
    """Writes native-order values into a buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def data(self) -> bytes:
        """The bytes written so far."""
        return bytes(self._buffer)

    def put(self, data: bytes) -> None:
        """Append raw bytes; raise OverflowError if they do not fit."""
        data = bytes(data)
        if len(data) > self.capacity - len(self._buffer):
            raise OverflowError(
                f"cannot write {len(data)} bytes, only "
                f"{self.capacity - len(self._buffer)} free"
            )
        self._buffer += data

    def put_u8(self, value: int) -> None:
        self.put(_encode_int(value, 1, _NATIVE))

    def put_i8(self, value: int) -> None:
        self.put(_encode_int(value, 1, _NATIVE))

    def put_u16(self, value: int) -> None:
        self.put(_encode_int(value, 2, _NATIVE))

    def put_i16(self, value: int) -> None:
        self.put(_encode_int(value, 2, _NATIVE))

    def put_u32(self, value: int) -> None:
        self.put(_encode_int(value, 4, _NATIVE))

    def put_i32(self, value: int) -> None:
        self.put(_encode_int(value, 4, _NATIVE))

    def put_u64(self, value: int) -> None:
        self.put(_encode_int(value, 8, _NATIVE))

    def put_i64(self, value: int) -> None:
        self.put(_encode_int(value, 8, _NATIVE))

    def put_float(self, value: float) -> None:
        self.put(struct.pack("=f", value))

    def put_double(self, value: float) -> None:
        self.put(struct.pack("=d", value))


def _byteorder(net: bool) -> str:
    return "big" if net else _NATIVE


class StreamReader:
    """Reads unsigned integers in network (big-endian) or native order."""

    def __init__(self, data: bytes, net: bool = True) -> None:
        self._data = bytes(data)
        self.net = net
        self.position = 0

    def remaining(self) -> int:
        return len(self._data) - self.position

    def read(self, size: int) -> bytes:
        """Read ``size`` raw bytes; raise EOFError if fewer remain."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > self.remaining():
            raise EOFError(f"need {size} bytes, only {self.remaining()} remain")
        chunk = self._data[self.position:self.position + size]
        self.position += size
        return chunk

    def skip(self, size: int) -> None:
        """Advance the read position by ``size`` bytes."""
        self.read(size)

    def _read_int(self, size: int) -> int:
        return int.from_bytes(self.read(size), _byteorder(self.net))

    def read8(self) -> int:
        return self._read_int(1)

    def read16(self) -> int:
        return self._read_int(2)

    def read32(self) -> int:
        return self._read_int(4)

    def read64(self) -> int:
        return self._read_int(8)


class StreamWriter:
    """Writes unsigned integers in network (big-endian) or native order."""

    def __init__(self, capacity: int, net: bool = True) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.net = net
        self._buffer = bytearray()

    @property
    def position(self) -> int:
        return len(self._buffer)

    def remaining(self) -> int:
        return self.capacity - len(self._buffer)

    def data(self) -> bytes:
        return bytes(self._buffer)

    def write(self, data: bytes) -> None:
        """Append raw bytes; raise OverflowError if they do not fit."""
        data = bytes(data)
        if len(data) > self.remaining():
            raise OverflowError(
                f"cannot write {len(data)} bytes, only {self.remaining()} free"
            )
        self._buffer += data

    def _write_int(self, value: int, size: int) -> None:
        self.write(_encode_int(value, size, _byteorder(self.net)))

    def write8(self, value: int) -> None:
        self._write_int(value, 1)

    def write16(self, value: int) -> None:
        self._write_int(value, 2)

    def write32(self, value: int) -> None:
        self._write_int(value, 4)

    def write64(self, value: int) -> None:
        self._write_int(value, 8)