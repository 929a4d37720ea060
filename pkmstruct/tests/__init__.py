
import struct

from pkmstruct import crypto


# test support code
def make_record(cls, fields=(), party=False):
    """Builds a decrypted record of format `cls` with a valid checksum

    `fields` is a list of (offset, struct format, value...) tuples; anything
    not mentioned is zero.

    Example:
    make_record(Pk8, [(0x08, 'H', 25), (0x1C, 'I', 0xDEADBEEF)])
    """
    data = bytearray(cls.PARTY_SIZE if party else cls.STORED_SIZE)
    for offset, fmt, *values in fields:
        struct.pack_into('<' + fmt, data, offset, *values)
    checksum = crypto.calculate_checksum(data, cls.STORED_SIZE)
    struct.pack_into('<H', data, 0x06, checksum)
    return bytes(data)


def pack_ivs(hp=0, attack=0, defense=0, speed=0, special_attack=0,
             special_defense=0, is_egg=False, is_nicknamed=False):
    """Packs IVs (and the two flags) into an IV word"""
    return (
        hp
        | attack << 5
        | defense << 10
        | speed << 15
        | special_attack << 20
        | special_defense << 25
        | int(is_egg) << 30
        | int(is_nicknamed) << 31
    )


def utf16_name(text):
    return (text + u'\x00').encode('utf-16-le').ljust(26, b'\x00')
