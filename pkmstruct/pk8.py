# encoding: utf8
u"""Gen 8 records, as used by Sword/Shield (.pk8)"""

import construct as c

from pkmstruct import crypto
from pkmstruct.pkx import Pkx, name_field
from pkmstruct.reader import bits_field, field
from pkmstruct.strings import PokemonStringAdapterGen8


class Pk8(Pkx):
    format = 'pk8'
    generation = 8

    STORED_SIZE = 0x148
    PARTY_SIZE = 0x158
    BLOCK_SIZE = 0x50
    shuffle_strategy = crypto.BLOCK_SWAP

    encrypted_marker_offsets = (0x70, 0x110)
    string_adapter = PokemonStringAdapterGen8()

    # Block A
    ability_id = field(0x14, c.Int16ul)
    ability_number_id = bits_field(0x16, mask=0x7)
    personality = field(0x1C, c.Int32ul)
    nature_id = field(0x20)
    # Changed by mints
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
    nickname = name_field(0x58)
    move1_id = field(0x72, c.Int16ul)
    move2_id = field(0x74, c.Int16ul)
    move3_id = field(0x76, c.Int16ul)
    move4_id = field(0x78, c.Int16ul)
    move1_pp = field(0x7A)
    move2_pp = field(0x7B)
    move3_pp = field(0x7C)
    move4_pp = field(0x7D)
    move1_pp_ups = field(0x7E)
    move2_pp_ups = field(0x7F)
    move3_pp_ups = field(0x80)
    move4_pp_ups = field(0x81)
    stat_hp_current = field(0x8A, c.Int16ul)
    iv32 = field(0x8C, c.Int32ul)
    status_condition = field(0x94, c.Int32ul)

    # Block C
    ht_name = name_field(0xA8)
    current_handler = field(0xC4)
    ht_friendship = field(0xC8)
    language_id = field(0xE2)

    # Block D
    ot_name = name_field(0xF8)
    ot_friendship = field(0x112)
    ball_id = field(0x124)
    met_level = bits_field(0x125, mask=0x7F)
    ot_gender_id = bits_field(0x125, shift=7, mask=0x1)

    # Party only
    stat_level = field(0x148)
    stat_hp_max = field(0x14A, c.Int16ul)
    stat_attack = field(0x14C, c.Int16ul)
    stat_defense = field(0x14E, c.Int16ul)
    stat_speed = field(0x150, c.Int16ul)
    stat_special_attack = field(0x152, c.Int16ul)
    stat_special_defense = field(0x154, c.Int16ul)
