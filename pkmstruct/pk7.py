# encoding: utf8
u"""Gen 7 records, as used by Sun/Moon and Ultra Sun/Ultra Moon (.pk7)

The layout is the gen 6 one; only the meaning of some fields this package
doesn't read has changed.
"""

from pkmstruct.pk6 import Pk6
from pkmstruct.strings import PokemonStringAdapterGen7


class Pk7(Pk6):
    format = 'pk7'
    generation = 7

    string_adapter = PokemonStringAdapterGen7()
