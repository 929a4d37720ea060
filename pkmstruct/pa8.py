# encoding: utf8
u"""Legends: Arceus records (.pa8)

Block A matches .pk8; the rest of the record was rearranged to make room for
the move shop and the bigger party region.
"""

import construct as c

from pkmstruct import crypto
from pkmstruct.pkx import Pkx, name_field
from pkmstruct.reader import bits_field, field
from pkmstruct.strings import PokemonStringAdapterGen8


class Pa8(Pkx):
    format = 'pa8'
    generation = 8

    STORED_SIZE = 0x168
    PARTY_SIZE = 0x178
    BLOCK_SIZE = 0x58
    shuffle_strategy = crypto.BLOCK_SWAP

    encrypted_marker_offsets = (0x78, 0x128)
    string_adapter = PokemonStringAdapterGen8()

    # Block A
    ability_id = field(0x14, c.Int16ul)
    ability_number_id = bits_field(0x16, mask=0x7)
    personality = field(0x1C, c.Int32ul)
    nature_id = field(0x20)
    stat_nature_id = field(0x21)
    fateful_encounter = bits_field(0x22, mask=1)
    gender_id = bits_field(0x22, shift=2, mask=0x3)
    form = field(0x24, c.Int16ul)
    ev_hp = field(0x26)
    ev_attack = field(0x27)
    ev_defense = field(0x28)
    ev_speed = field(0x29)
    ev_special_attack = field(0x2A)
    ev_special_defense = field(0x2B)

    # Block B
    move1_id = field(0x54, c.Int16ul)
    move2_id = field(0x56, c.Int16ul)
    move3_id = field(0x58, c.Int16ul)
    move4_id = field(0x5A, c.Int16ul)
    move1_pp = field(0x5C)
    move2_pp = field(0x5D)
    move3_pp = field(0x5E)
    move4_pp = field(0x5F)
    nickname = name_field(0x60)
    move1_pp_ups = field(0x86)
    move2_pp_ups = field(0x87)
    move3_pp_ups = field(0x88)
    move4_pp_ups = field(0x89)
    stat_hp_current = field(0x92, c.Int16ul)
    iv32 = field(0x94, c.Int32ul)
    status_condition = field(0x9C, c.Int32ul)

    # Block C
    ht_name = name_field(0xB8)
    current_handler = field(0xD4)
    ht_friendship = field(0xD8)
    language_id = field(0xF2)

    # Block D
    ot_name = name_field(0x110)
    ot_friendship = field(0x12A)
    ball_id = field(0x13C)
    met_level = bits_field(0x13D, mask=0x7F)
    ot_gender_id = bits_field(0x13D, shift=7, mask=0x1)

    # Party only
    stat_level = field(0x168)
    stat_hp_max = field(0x16A, c.Int16ul)
    stat_attack = field(0x16C, c.Int16ul)
    stat_defense = field(0x16E, c.Int16ul)
    stat_speed = field(0x170, c.Int16ul)
    stat_special_attack = field(0x172, c.Int16ul)
    stat_special_defense = field(0x174, c.Int16ul)
