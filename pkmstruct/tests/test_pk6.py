# Encoding: utf8

import pytest
parametrize = pytest.mark.parametrize

from pkmstruct import Pk6, RecordSizeError
from pkmstruct.types import (
    Ability, AbilityNumber, Ball, Gender, HiddenPower, Language, Move, Nature,
    Shiny, Species, Stats)

# A shiny Ditto, boxed, as stored on the cartridge and decrypted
DITTO_EKX = bytes(bytearray([
    0x80, 0x5c, 0x86, 0x02, 0x00, 0x00, 0xd6, 0x41, 0x20, 0x0e, 0x56, 0x4f, 0xaa, 0xf1, 0xf4,
    0x2f, 0xa5, 0x9e, 0xcc, 0xfe, 0x8b, 0xf2, 0x32, 0x20, 0x51, 0xd1, 0x99, 0xdd, 0x42, 0xd2,
    0x55, 0xe5, 0x05, 0x1f, 0x85, 0x2a, 0x62, 0xe2, 0x2a, 0x14, 0x5a, 0x21, 0x96, 0xdb, 0x76,
    0x2e, 0xd6, 0x4e, 0x72, 0xa0, 0x72, 0x08, 0xa0, 0x2b, 0x59, 0x35, 0xf9, 0x56, 0xba, 0xc6,
    0x92, 0x55, 0x0c, 0x01, 0xf9, 0x2b, 0xdb, 0x58, 0xbd, 0x84, 0x5a, 0xc9, 0x94, 0x77, 0x96,
    0x72, 0x1d, 0x5b, 0x13, 0xd1, 0x8a, 0x7b, 0x7e, 0x07, 0x93, 0xec, 0xe2, 0x81, 0x08, 0x4b,
    0x13, 0xfa, 0xda, 0x5f, 0x4a, 0x6c, 0x0a, 0xcb, 0x50, 0x90, 0xb9, 0x48, 0x37, 0x99, 0x68,
    0x9b, 0x51, 0xe9, 0xe7, 0x1b, 0xfe, 0x80, 0xcb, 0x56, 0xad, 0x23, 0xb8, 0x56, 0x50, 0x60,
    0x47, 0xf4, 0x59, 0x27, 0xee, 0x49, 0xb3, 0x76, 0xcb, 0xa7, 0xef, 0x77, 0xe7, 0x59, 0xdb,
    0xd8, 0xe9, 0x1e, 0x4e, 0xe9, 0xf5, 0xa9, 0xf3, 0xb7, 0x77, 0x93, 0x7c, 0x45, 0x86, 0x5e,
    0xef, 0x41, 0x3f, 0x0d, 0xb1, 0xb6, 0x66, 0xf2, 0xd8, 0x86, 0x98, 0x64, 0xf2, 0xf2, 0x7f,
    0x4b, 0x86, 0xf6, 0x46, 0xda, 0x44, 0x7f, 0xec, 0x75, 0x34, 0xd4, 0xcd, 0x58, 0x4b, 0x7a,
    0x33, 0x21, 0x3e, 0xdf, 0x68, 0xb1, 0xe9, 0xbd, 0x55, 0x11, 0x91, 0x28, 0x53, 0x6e, 0xfb,
    0x5a, 0xc1, 0xcf, 0x38, 0x72, 0xec, 0x04, 0xd1, 0xac, 0xe1, 0x8c, 0x5a, 0x51, 0x30, 0xb4,
    0x8b, 0xa4, 0xec, 0x45, 0xbc, 0x43, 0x6d, 0x14, 0xb8, 0x8e, 0x93, 0x80, 0x91, 0x1e, 0x91,
    0xca, 0x14, 0xb7, 0xdf, 0xf2, 0xb3, 0x26,
]))

DITTO_PKX = bytes(bytearray([
    0x80, 0x5c, 0x86, 0x02, 0x00, 0x00, 0xd6, 0x41, 0x84, 0x00, 0x18, 0x01, 0x56, 0xf6, 0x42,
    0xc8, 0x40, 0x42, 0x0f, 0x00, 0x96, 0x04, 0x00, 0x00, 0x23, 0x0f, 0x37, 0x31, 0x03, 0x04,
    0xfc, 0x00, 0x06, 0xfc, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3f, 0x31, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x41, 0x00, 0x64, 0x00, 0x61, 0x00, 0x6d, 0x00, 0x61, 0x00, 0x6e,
    0x00, 0x74, 0x00, 0x20, 0x00, 0x36, 0x00, 0x49, 0x00, 0x56, 0x00, 0x73, 0x00, 0x00, 0x00,
    0x90, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x10, 0x00, 0x00, 0x00, 0x03, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xff, 0xff, 0xff, 0xbf,
    0x45, 0x00, 0x56, 0x00, 0x92, 0xe0, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x2c, 0x31,
    0x0a, 0x12, 0x2c, 0x31, 0x10, 0x31, 0x00, 0x31, 0x00, 0x00, 0x00, 0x00, 0x46, 0x00, 0x03,
    0x04, 0x00, 0x00, 0x09, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x44, 0x00, 0x69, 0x00,
    0x74, 0x00, 0x74, 0x00, 0x6f, 0x00, 0x20, 0x00, 0x69, 0x00, 0x73, 0x00, 0x20, 0x00, 0x92,
    0xe0, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x46, 0x03, 0x07, 0x0f, 0x97, 0x00, 0x02, 0x00,
    0x00, 0x00, 0x0c, 0x0c, 0x19, 0x00, 0x00, 0x00, 0x94, 0x00, 0x0b, 0x1e, 0x00, 0x18, 0x12,
    0x0a, 0x01, 0x03, 0x00, 0x00, 0x00, 0x00,
]))


def test_is_encrypted():
    assert Pk6.is_encrypted(DITTO_EKX)
    assert not Pk6.is_encrypted(DITTO_PKX)


def test_decrypt():
    assert Pk6.decrypt(DITTO_EKX) == DITTO_PKX


def test_encrypt():
    assert Pk6.encrypt(DITTO_PKX) == DITTO_EKX


@parametrize('data', [DITTO_EKX, DITTO_PKX])
def test_new(data):
    pkx = Pk6.new(data)
    assert pkx.data == DITTO_PKX
    assert pkx.encrypted == DITTO_EKX


def test_new_ekx():
    assert Pk6.new_ekx(DITTO_EKX).data == DITTO_PKX


@pytest.fixture
def ditto():
    return Pk6.new(DITTO_EKX)


def test_identity(ditto):
    assert ditto.encryption_constant == 0x02865C80
    assert ditto.sanity == 0
    assert ditto.checksum == 0x41D6
    assert ditto.species == Species.DITTO
    assert ditto.species_id == 132
    assert ditto.held_item_id == 280
    assert ditto.trainer_id == 63062
    assert ditto.secret_id == 51266
    assert ditto.exp == 1000000
    assert ditto.personality == 0x31370F23
    assert ditto.form == 0
    assert not ditto.fateful_encounter


def test_validity(ditto):
    assert ditto.calculate_checksum() == 0x41D6
    assert ditto.valid_checksum
    assert ditto.is_valid


def test_shiny(ditto):
    assert ditto.tsv == 993
    assert ditto.psv == 993
    assert ditto.shiny_xor == 0
    assert ditto.shiny_type == Shiny.SQUARE
    assert ditto.is_shiny


def test_traits(ditto):
    assert ditto.ability == Ability.IMPOSTER
    assert ditto.ability_number == AbilityNumber.HIDDEN
    assert ditto.nature == Nature.ADAMANT
    assert ditto.stat_nature == Nature.ADAMANT
    assert ditto.gender == Gender.GENDERLESS
    assert ditto.language == Language.FRENCH
    assert ditto.ball == Ball.LUXURY
    assert ditto.met_level == 30
    assert ditto.ot_gender == Gender.MALE


def test_stats(ditto):
    assert ditto.ivs == Stats(31, 31, 31, 31, 31, 31)
    assert ditto.evs == Stats(
        hp=252, attack=0, defense=6,
        special_attack=0, special_defense=0, speed=252)
    assert not ditto.is_egg
    assert ditto.is_nicknamed
    assert ditto.hidden_power_num == 15
    assert ditto.hidden_power == HiddenPower.DARK


def test_moves(ditto):
    assert ditto.moves == (Move.TRANSFORM, Move.NONE, Move.NONE, Move.NONE)
    assert ditto.move_pp == (16, 0, 0, 0)
    assert ditto.move_pp_ups == (3, 0, 0, 0)


def test_names(ditto):
    assert ditto.nickname == u'Adamant 6IVs'
    assert ditto.ot_name == u'Ditto is \ue092'
    assert ditto.ht_name == u'EV\ue092'


def test_friendship(ditto):
    assert ditto.current_handler == 1
    assert ditto.ot_friendship == 70
    assert ditto.ht_friendship == 70
    assert ditto.current_friendship == 70


def test_not_party(ditto):
    assert not ditto.is_party
    assert ditto.party_stats == Stats()
    assert ditto.stat_level == 0


def test_repr(ditto):
    assert repr(ditto) == '<Pk6 Ditto (0x31370f23)>'


def test_party_record_round_trip():
    party = bytearray(DITTO_PKX + b'\x00' * 0x1C)
    party[0xEC] = 100
    party[0xF2:0xF4] = b'\x9f\x00'
    pkx = Pk6(bytes(party))
    assert pkx.is_party
    assert pkx.stat_level == 100
    assert pkx.party_stats.hp == 159
    assert Pk6.new(pkx.encrypted).data == bytes(party)
    assert pkx.encrypted[:0xE8] == DITTO_EKX


def test_party_stats_encryption():
    # The party stats start over from the first output of the PRNG
    party = bytearray(DITTO_PKX + b'\x00' * 0x1C)
    party[0xEC] = 100
    party[0xF2:0xF4] = b'\x9f\x00'
    assert Pk6.encrypt(bytes(party))[0xE8:] == bytes(bytearray([
        0x64, 0x0e, 0x3f, 0x4f, 0xba, 0xf1, 0x80, 0x2f, 0xca, 0x9e, 0x73,
        0xfe, 0xe2, 0xf2, 0x41, 0x20, 0x71, 0xd1, 0x0b, 0x3d, 0x42, 0xd2,
        0x55, 0xe5, 0x05, 0x1f, 0xc3, 0x29,
    ]))


@parametrize('size', [0, 0xE7, 0xE9, 0x148])
def test_bad_size(size):
    with pytest.raises(RecordSizeError):
        Pk6(b'\x00' * size)
    with pytest.raises(RecordSizeError):
        Pk6.new(b'\x01' * size)


def test_default():
    pkx = Pk6.default()
    assert pkx.data == b'\x00' * 0xE8
    assert pkx.species == Species.NONE
    assert not pkx.is_valid
    assert not pkx.is_shiny
    assert pkx.shiny_type == Shiny.NONE


def test_new_or_default():
    assert Pk6.new_or_default(DITTO_EKX).data == DITTO_PKX

    bad_sanity = bytearray(DITTO_PKX)
    bad_sanity[0x04] = 1
    assert Pk6.new_or_default(bytes(bad_sanity)).data == b'\x00' * 0xE8

    bad_checksum = bytearray(DITTO_PKX)
    bad_checksum[0x06] ^= 0xFF
    assert Pk6.new_or_default(bytes(bad_checksum)).data == b'\x00' * 0xE8

    assert Pk6.new_or_default(b'\x00' * 10).data == b'\x00' * 0xE8


def test_export_dict(ditto):
    result = ditto.export_dict()
    assert result['format'] == 'pk6'
    assert result['species'] == dict(id=132, name=u'Ditto')
    assert result['ability'] == dict(id=150, name=u'Imposter')
    assert result['ability number'] == 'hidden'
    assert result['held item'] == 280
    assert result['pokeball'] == dict(id=11, name='Luxury')
    assert result['nature'] == dict(id=3, name='Adamant')
    assert 'stat nature' not in result
    assert 'gender' not in result
    assert result['language'] == dict(id=3, name='French')
    assert result['original trainer'] == dict(
        id=63062, secret=51266, gender='male', name=u'Ditto is \ue092')
    assert result['nickname'] == u'Adamant 6IVs'
    assert 'nickname trash' not in result
    assert result['nicknamed'] is True
    assert 'is egg' not in result
    assert result['shiny'] == 'square'
    assert result['moves'] == [
        {'id': 144, 'name': u'Transform', 'pp ups': 3, 'pp': 16}]
    assert result['genes'] == {
        'hp': 31, 'attack': 31, 'defense': 31, 'speed': 31,
        'special attack': 31, 'special defense': 31}
    assert result['effort']['special defense'] == 0
    assert result['effort']['speed'] == 252
    assert 'level' not in result
