# encoding: utf8
u"""Gen 9 records, as used by Scarlet/Violet (.pk9)

Same geometry as .pk8; a few fields moved.

Scarlet/Violet number the Paldean species in their own order, so the species
stored at 0x08 is converted to the national dex number on the way out.
"""

import construct as c

from pkmstruct.pk8 import Pk8
from pkmstruct.reader import bits_field, field

# Stored species IDs below this are national dex numbers
FIRST_UNALIGNED_SPECIES = 917

# National dex number minus stored species ID, from FIRST_UNALIGNED_SPECIES on
INTERNAL_TO_NATIONAL_DIFF = (
    65, -1, -1, -1, -1, 31, 31, 47, 47, 29,
    29, 53, 31, 31, 46, 44, 30, 30, -7, -7,
    -7, 13, 13, -2, -2, 23, 23, 24, -21, -21,
    27, 27, 47, 47, 47, 26, 14, -33, -33, -33,
    -17, -17, 3, -29, 12, -12, -31, -31, -31, 3,
    3, -24, -24, -44, -44, -30, -30, -28, -28, 23,
    23, 6, 7, 29, 8, 3, 4, 4, 20, 4,
    23, 6, 3, 3, 4, -1, 13, 9, 7, 5,
    7, 9, 9, -43, -43, -43, -68, -68, -68, -58,
    -58, -25, -29, -31, 6, -1, 6,
    # The Teal Mask and The Indigo Disk
    -2, -2, -2, -2, -2, -1, 0, 0, 0, 0,
    0, 0,
)

_NATIONAL_TO_INTERNAL = dict(
    (internal + diff, internal)
    for internal, diff in enumerate(INTERNAL_TO_NATIONAL_DIFF,
                                    FIRST_UNALIGNED_SPECIES))


def national_species(internal):
    """Converts a stored Scarlet/Violet species ID to a national dex number"""
    shift = internal - FIRST_UNALIGNED_SPECIES
    if 0 <= shift < len(INTERNAL_TO_NATIONAL_DIFF):
        return internal + INTERNAL_TO_NATIONAL_DIFF[shift]
    return internal


def internal_species(national):
    """Converts a national dex number to the species ID Scarlet/Violet store"""
    return _NATIONAL_TO_INTERNAL.get(national, national)


class Pk9(Pk8):
    format = 'pk9'
    generation = 9

    stored_species_id = field(0x08, c.Int16ul)

    @property
    def species_id(self):
        return national_species(self.stored_species_id)

    gender_id = bits_field(0x22, shift=1, mask=0x3)
    status_condition = field(0x90, c.Int32ul)
    language_id = field(0xD5)
