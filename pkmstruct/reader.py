"""Little-endian field access over raw record buffers.

Reads never fail: a field that runs past the end of the buffer (the party
stats of a boxed record, say) simply reads as zero.  Higher layers treat a
missing field exactly like a zeroed one.
"""

import construct as c


def read(data, fmt, offset, default=0):
    """Decodes the construct primitive `fmt` (e.g. `Int16ul`) at `offset`.

    Returns `default` if the field doesn't fit inside `data`.
    """
    size = fmt.sizeof()
    if offset < 0 or offset + size > len(data):
        return default
    try:
        return fmt.parse(bytes(data[offset:offset + size]))
    except c.ConstructError:
        return default


def read_bytes(data, offset, length):
    """Returns `length` bytes at `offset`, zero-padded if the buffer is short
    """
    if offset < 0:
        return b'\x00' * length
    return bytes(data[offset:offset + length]).ljust(length, b'\x00')


class Reader(object):
    """Mixin for anything that wraps a byte buffer in `self.data`"""

    def read(self, fmt, offset, default=0):
        return read(self.data, fmt, offset, default)

    def read_bytes(self, offset, length):
        return read_bytes(self.data, offset, length)


def field(offset, fmt=c.Int8ul):
    """Makes a read-only property for one entry of a record's offset table"""
    def getter(self):
        return self.read(fmt, offset)

    return property(getter)


def bits_field(offset, fmt=c.Int8ul, shift=0, mask=0xFF):
    """Like `field`, but for a value packed into part of a wider field"""
    def getter(self):
        return (self.read(fmt, offset) >> shift) & mask

    return property(getter)
