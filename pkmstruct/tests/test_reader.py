# Encoding: utf8

import construct as c
import pytest
parametrize = pytest.mark.parametrize

from pkmstruct.reader import Reader, bits_field, field, read, read_bytes

DATA = b'\x01\x02\x03\x04\x05'


@parametrize(('fmt', 'offset', 'expected'), [
    (c.Int8ul, 0, 0x01),
    (c.Int8ul, 4, 0x05),
    (c.Int16ul, 0, 0x0201),
    (c.Int16ul, 3, 0x0504),
    (c.Int32ul, 1, 0x05040302),
])
def test_read(fmt, offset, expected):
    assert read(DATA, fmt, offset) == expected


@parametrize(('fmt', 'offset'), [
    (c.Int8ul, 5),
    (c.Int16ul, 4),
    (c.Int32ul, 2),
    (c.Int32ul, 1000),
    (c.Int8ul, -1),
])
def test_read_out_of_range(fmt, offset):
    assert read(DATA, fmt, offset) == 0


def test_read_default():
    assert read(b'', c.Int16ul, 0, default=None) is None


def test_read_bytes():
    assert read_bytes(DATA, 1, 2) == b'\x02\x03'
    assert read_bytes(DATA, 3, 4) == b'\x04\x05\x00\x00'
    assert read_bytes(DATA, 10, 2) == b'\x00\x00'
    assert read_bytes(DATA, -3, 2) == b'\x00\x00'


class Thing(Reader):
    word = field(0x01, c.Int16ul)
    high_nybble = bits_field(0x04, shift=4, mask=0xF)
    low_bits = bits_field(0x04, mask=0x3)
    past_the_end = field(0x04, c.Int32ul)

    def __init__(self, data):
        self.data = data


def test_fields():
    thing = Thing(b'\x00\x34\x12\x00\xA7')
    assert thing.word == 0x1234
    assert thing.high_nybble == 0xA
    assert thing.low_bits == 0x3
    assert thing.past_the_end == 0
