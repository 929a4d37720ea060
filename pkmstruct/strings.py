# encoding: utf8
u"""Text fields: nicknames and trainer names.

Names are stored as fixed-size UTF-16LE buffers, NUL-terminated, with
whatever junk the game left behind after the terminator.
"""

import construct as c

NAME_LENGTH = 26

# Gens 6 and 7 draw the gender symbols from private-use code points
character_table_gen6 = {
    0xE08E: u'♂',
    0xE08F: u'♀',
    0x246D: u'♂',
    0x246E: u'♀',
}


class StringWithOriginal(str):
    pass


class PokemonStringAdapter(c.Adapter):
    u"""Base adapter for names

    Decodes up to the first NUL code unit; unpaired surrogates are dropped.

    Returns a str subclass that has an ``original`` attribute with the
    original unencoded value, complete with trash bytes.
    On write, if the ``original`` is found, it is written with no regard to the
    string value.
    """
    character_table = {}

    def __init__(self, length=NAME_LENGTH):
        super(PokemonStringAdapter, self).__init__(c.Bytes(length))
        self.length = length

    def _decode(self, obj, context, path):
        end = len(obj) // 2 * 2
        for i in range(0, end, 2):
            if obj[i:i + 2] == b'\x00\x00':
                end = i
                break
        decoded_text = obj[:end].decode('utf-16-le', 'ignore')

        result = StringWithOriginal(
            decoded_text.translate(self.character_table))
        result.original = obj  # save original with "trash bytes"
        return result

    def _encode(self, obj, context, path):
        try:
            original = obj.original
        except AttributeError:
            inverse = dict((ord(v), k) for k, v in
                           sorted(self.character_table.items()))
            encoded = (obj.translate(inverse) + u'\x00').encode('utf-16-le')
            return encoded[:self.length].ljust(self.length, b'\x00')
        else:
            if self._decode(original, context, path) != obj:
                raise ValueError("String and original don't match")
            return original


def make_pokemon_string_adapter(table, generation):
    class _SpecificAdapter(PokemonStringAdapter):
        character_table = table
    _SpecificAdapter.__name__ = 'PokemonStringAdapterGen%s' % generation
    return _SpecificAdapter


PokemonStringAdapterGen6 = make_pokemon_string_adapter(character_table_gen6, 6)
PokemonStringAdapterGen7 = make_pokemon_string_adapter(character_table_gen6, 7)
PokemonStringAdapterGen8 = make_pokemon_string_adapter({}, 8)
