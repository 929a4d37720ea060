# encoding: utf8
"""Handles encryption/decryption and checksums of Pokémon records.

Every record starts with an 8-byte header that is never encrypted: the
encryption constant (a u32 that doubles as the PRNG seed), a sanity word and
the checksum.  Everything after it is XORed with the output of the main
Pokémon PRNG and split into four equally-sized blocks, which are shuffled
around in an order picked by the encryption constant.

Kudos to Kaphotics for PKHeX's PokeCrypto, where the block tables come from.
"""

import struct

import attr
import construct as c

from pkmstruct.reader import read

HEADER_SIZE = 8
BLOCK_COUNT = 4


class RecordSizeError(ValueError):
    pass


def pokemon_prng(seed):
    """Creates a generator that simulates the main Pokémon PRNG."""
    while True:
        seed = 0x41C64E6D * seed + 0x6073
        seed &= 0xFFFFFFFF
        yield seed >> 16


def shuffle_index(seed):
    """Which row of the block tables a given encryption constant uses"""
    return (seed >> 13) & 0x1F


def _unpack_words(data):
    return list(struct.unpack('<%dH' % (len(data) // 2), data))


def _pack_words(words):
    return struct.pack('<%dH' % len(words), *words)


def reciprocal_crypt(data, stored_size):
    """Applies the reciprocal Pokémon cipher to a record, returning the result.

    The stored part of the record is XORed with the PRNG seeded by the
    encryption constant.  Party stats past `stored_size`, if any, are XORed
    with a fresh PRNG from the same seed.
    """
    seed = read(data, c.Int32ul, 0)
    words = _unpack_words(data)
    stored_words = stored_size // 2

    prng = pokemon_prng(seed)
    for i in range(HEADER_SIZE // 2, stored_words):
        words[i] ^= next(prng)

    if len(words) > stored_words:
        prng = pokemon_prng(seed)
        for i in range(stored_words, len(words)):
            words[i] ^= next(prng)

    return _pack_words(words)


# The order the four blocks end up in after decryption: for shuffle index
# `sv`, block `i` of the decrypted record is block BLOCK_POSITION[4 * sv + i]
# of the encrypted one.  Only 24 orders exist; the last eight rows repeat the
# first eight so the 5-bit index never needs a modulus.
BLOCK_POSITION = (
    0, 1, 2, 3,
    0, 1, 3, 2,
    0, 2, 1, 3,
    0, 3, 1, 2,
    0, 2, 3, 1,
    0, 3, 2, 1,
    1, 0, 2, 3,
    1, 0, 3, 2,
    2, 0, 1, 3,
    3, 0, 1, 2,
    2, 0, 3, 1,
    3, 0, 2, 1,
    1, 2, 0, 3,
    1, 3, 0, 2,
    2, 1, 0, 3,
    3, 1, 0, 2,
    2, 3, 0, 1,
    3, 2, 0, 1,
    1, 2, 3, 0,
    1, 3, 2, 0,
    2, 1, 3, 0,
    3, 1, 2, 0,
    2, 3, 1, 0,
    3, 2, 1, 0,

    0, 1, 2, 3,
    0, 1, 3, 2,
    0, 2, 1, 3,
    0, 3, 1, 2,
    0, 2, 3, 1,
    0, 3, 2, 1,
    1, 0, 2, 3,
    1, 0, 3, 2,
)

# The shuffle index whose order undoes the order of each shuffle index
BLOCK_POSITION_INVERT = (
    0, 1, 2, 4, 3, 5, 6, 7, 12, 18, 13, 19, 8, 10, 14, 20, 16, 22, 9, 11, 15,
    21, 17, 23,
    0, 1, 2, 4, 3, 5, 6, 7,
)


def _swap_sequence(order):
    """Yields, for each of the first three slots, the slot to swap it with so
    that the blocks end up in `order`.
    """
    blocks = list(range(BLOCK_COUNT))
    for dest in range(BLOCK_COUNT - 1):
        source = blocks.index(order[dest])
        blocks[dest], blocks[source] = blocks[source], blocks[dest]
        yield source


# The same orders as BLOCK_POSITION, expressed as three in-place swaps per
# shuffle index: swap `i` exchanges slot i with slot BLOCK_SWAPS[3 * sv + i].
BLOCK_SWAPS = tuple(
    source
    for sv in range(32)
    for source in _swap_sequence(BLOCK_POSITION[sv * 4:sv * 4 + 4])
)


def _permute_blocks(table, data, sv, block_size):
    shuffled = bytearray(data)
    for block in range(BLOCK_COUNT):
        source = table[sv * BLOCK_COUNT + block]
        source_start = HEADER_SIZE + block_size * source
        dest_start = HEADER_SIZE + block_size * block
        shuffled[dest_start:dest_start + block_size] = \
            data[source_start:source_start + block_size]
    return bytes(shuffled)


def _swap_blocks(table, data, sv, block_size):
    shuffled = bytearray(data)
    for block in range(BLOCK_COUNT - 1):
        other = table[sv * (BLOCK_COUNT - 1) + block]
        if other == block:
            continue
        a = HEADER_SIZE + block_size * block
        b = HEADER_SIZE + block_size * other
        shuffled[a:a + block_size], shuffled[b:b + block_size] = (
            shuffled[b:b + block_size], shuffled[a:a + block_size])
    return bytes(shuffled)


@attr.s(frozen=True)
class ShuffleStrategy(object):
    """One way of reordering the blocks for a given shuffle index.

    Call it with a record, the shuffle index and the block size.  Bytes
    outside the four blocks are left alone.
    """
    name = attr.ib()
    table = attr.ib(repr=False)
    shuffler = attr.ib(repr=False)

    def __call__(self, data, sv, block_size):
        return self.shuffler(self.table, data, sv, block_size)


BLOCK_PERMUTATION = ShuffleStrategy(
    'permutation', BLOCK_POSITION, _permute_blocks)
BLOCK_SWAP = ShuffleStrategy('swap', BLOCK_SWAPS, _swap_blocks)


def _check_size(data, block_size):
    size = HEADER_SIZE + BLOCK_COUNT * block_size
    if len(data) < size or len(data) % 2:
        raise RecordSizeError(
            "Expected at least {0} bytes (and an even count), got {1}"
            .format(size, len(data)))
    return size


def decrypt(data, block_size, strategy=BLOCK_PERMUTATION):
    """Decrypts an on-disk record: undoes the cipher, then the shuffle"""
    size = _check_size(data, block_size)
    seed = read(data, c.Int32ul, 0)
    plain = reciprocal_crypt(bytes(data), size)
    return strategy(plain, shuffle_index(seed), block_size)


def encrypt(data, block_size, strategy=BLOCK_PERMUTATION):
    """Encrypts a decrypted record into the form the games store"""
    size = _check_size(data, block_size)
    seed = read(data, c.Int32ul, 0)
    sv = BLOCK_POSITION_INVERT[shuffle_index(seed)]
    shuffled = strategy(bytes(data), sv, block_size)
    return reciprocal_crypt(shuffled, size)


def calculate_checksum(data, stored_size):
    """Sums the u16 words between the header and `stored_size`, mod 2**16"""
    region = bytes(data[HEADER_SIZE:stored_size])
    region = region[:len(region) // 2 * 2]
    return sum(_unpack_words(region)) & 0xFFFF
