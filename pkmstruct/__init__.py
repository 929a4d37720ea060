# encoding: utf8
u"""
Handles reading and encryption/decryption of Pokémon records from the 3DS,
Switch and later games: .pk6, .pk7, .pk8, .pa8 and .pk9.

See: https://projectpokemon.org/home/docs/

Kudos to Kaphotics and the PKHeX contributors, whose documentation of these
formats this package is based on.
"""

from pkmstruct.crypto import RecordSizeError
from pkmstruct.pa8 import Pa8
from pkmstruct.pk6 import Pk6
from pkmstruct.pk7 import Pk7
from pkmstruct.pk8 import Pk8
from pkmstruct.pk9 import Pk9
from pkmstruct.pkx import Pkx

pokemon_classes = {
    'pk6': Pk6,
    'pk7': Pk7,
    'pk8': Pk8,
    'pa8': Pa8,
    'pk9': Pk9,
}


def pokemon_class(format):
    """Returns the record class for a format name like ``'pk7'``

    Raises KeyError for formats this package doesn't know.
    """
    return pokemon_classes[format.lower()]
