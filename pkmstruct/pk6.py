# encoding: utf8
u"""Gen 6 records, as used by X/Y and Omega Ruby/Alpha Sapphire (.pk6)

See: https://projectpokemon.org/docs/gen-6/pkm-structure-r65/
"""

import construct as c

from pkmstruct import crypto
from pkmstruct.pkx import Pkx, name_field
from pkmstruct.reader import bits_field, field
from pkmstruct.strings import PokemonStringAdapterGen6


class Pk6(Pkx):
    format = 'pk6'
    generation = 6

    STORED_SIZE = 0xE8
    PARTY_SIZE = 0x104
    BLOCK_SIZE = 0x38
    shuffle_strategy = crypto.BLOCK_PERMUTATION

    encrypted_marker_offsets = (0xC8, 0x58)
    string_adapter = PokemonStringAdapterGen6()

    # Block A
    ability_id = field(0x14)
    ability_number_id = field(0x15)
    personality = field(0x18, c.Int32ul)
    nature_id = field(0x1C)
    # No mints before gen 8
    stat_nature_id = field(0x1C)
    fateful_encounter = bits_field(0x1D, mask=1)
    gender_id = bits_field(0x1D, shift=1, mask=0x3)
    form = bits_field(0x1D, shift=3, mask=0x1F)
    ev_hp = field(0x1E)
    ev_attack = field(0x1F)
    ev_defense = field(0x20)
    ev_speed = field(0x21)
    ev_special_attack = field(0x22)
    ev_special_defense = field(0x23)

    # Block B
    nickname = name_field(0x40)
    move1_id = field(0x5A, c.Int16ul)
    move2_id = field(0x5C, c.Int16ul)
    move3_id = field(0x5E, c.Int16ul)
    move4_id = field(0x60, c.Int16ul)
    move1_pp = field(0x62)
    move2_pp = field(0x63)
    move3_pp = field(0x64)
    move4_pp = field(0x65)
    move1_pp_ups = field(0x66)
    move2_pp_ups = field(0x67)
    move3_pp_ups = field(0x68)
    move4_pp_ups = field(0x69)
    iv32 = field(0x74, c.Int32ul)

    # Block C
    ht_name = name_field(0x78)
    current_handler = field(0x93)
    ht_friendship = field(0xA2)

    # Block D
    ot_name = name_field(0xB0)
    ot_friendship = field(0xCA)
    ball_id = field(0xDC)
    met_level = bits_field(0xDD, mask=0x7F)
    ot_gender_id = bits_field(0xDD, shift=7, mask=0x1)
    language_id = field(0xE3)

    # Party only
    status_condition = field(0xE8, c.Int32ul)
    stat_level = field(0xEC)
    stat_hp_current = field(0xF0, c.Int16ul)
    stat_hp_max = field(0xF2, c.Int16ul)
    stat_attack = field(0xF4, c.Int16ul)
    stat_defense = field(0xF6, c.Int16ul)
    stat_speed = field(0xF8, c.Int16ul)
    stat_special_attack = field(0xFA, c.Int16ul)
    stat_special_defense = field(0xFC, c.Int16ul)
