# Encoding: utf8

import pytest
parametrize = pytest.mark.parametrize

from pkmstruct import Pk8, Pk9
from pkmstruct.pk9 import internal_species, national_species
from pkmstruct.tests import make_record, pack_ivs, utf16_name
from pkmstruct.types import (
    Ability, Ball, Gender, Language, Move, Nature, Species, Stats)

SPRIGATITO_FIELDS = [
    (0x00, 'I', 0x5EED5EED),
    # The starters keep their national dex numbers
    (0x08, 'H', 906),
    (0x0C, 'H', 1111),
    (0x0E, 'H', 2222),
    (0x14, 'H', 65),
    (0x16, 'B', 0x01),
    (0x1C, 'I', 0x89ABCDEF),
    (0x20, 'B', 13),
    (0x21, 'B', 13),
    # Fateful encounter, female
    (0x22, 'B', 0x03),
    (0x58, '26s', utf16_name(u'Sprigatito')),
    (0x72, '4H', 10, 39, 0, 0),
    (0x7A, '4B', 35, 30, 0, 0),
    (0x8A, 'H', 20),
    (0x8C, 'I', pack_ivs(31, 0, 31, 31, 31, 31)),
    (0x90, 'I', 0x08),
    (0xD5, 'B', 1),
    (0xF8, '26s', utf16_name(u'Nemona')),
    (0x112, 'B', 75),
    (0x124, 'B', 4),
    (0x125, 'B', 0x80 | 5),
]


@pytest.fixture
def sprigatito():
    return Pk9(make_record(Pk9, SPRIGATITO_FIELDS))


def test_round_trip(sprigatito):
    encrypted = sprigatito.encrypted
    assert len(encrypted) == 0x148
    assert Pk9.is_encrypted(encrypted)
    assert Pk9.new(encrypted).data == sprigatito.data


def test_same_geometry_as_pk8(sprigatito):
    assert Pk8.encrypt(sprigatito.data) == sprigatito.encrypted


def test_fields(sprigatito):
    assert sprigatito.format == 'pk9'
    assert sprigatito.generation == 9
    assert sprigatito.is_valid
    assert sprigatito.species == Species.SPRIGATITO
    assert sprigatito.ability == Ability.OVERGROW
    assert sprigatito.nature == Nature.JOLLY
    assert sprigatito.fateful_encounter
    assert sprigatito.gender == Gender.FEMALE
    assert sprigatito.language == Language.JAPANESE
    assert sprigatito.ball == Ball.POKE
    assert sprigatito.met_level == 5
    assert sprigatito.ot_gender == Gender.FEMALE
    assert sprigatito.nickname == u'Sprigatito'
    assert sprigatito.ot_name == u'Nemona'
    assert sprigatito.current_friendship == 75
    assert sprigatito.stat_hp_current == 20
    assert sprigatito.status_condition == 0x08


def test_moves(sprigatito):
    assert sprigatito.moves == (
        Move.SCRATCH, Move.TAIL_WHIP, Move.NONE, Move.NONE)
    assert sprigatito.move_pp == (35, 30, 0, 0)


def test_ivs(sprigatito):
    assert sprigatito.ivs == Stats(31, 0, 31, 31, 31, 31)


def test_moved_fields_differ_from_pk8(sprigatito):
    pk8 = Pk8(sprigatito.data)
    assert pk8.gender == Gender.MALE
    assert pk8.language == Language.NONE
    assert pk8.status_condition == 0


@parametrize(('stored', 'species'), [
    (25, Species.PIKACHU),
    (906, Species.SPRIGATITO),
    (916, Species.OINKOLOGNE),
    (917, Species.DUDUNSPARCE),
    (918, Species.TAROUNTULA),
    (924, Species.GREAVARD),
    (998, Species.KORAIDON),
    (1002, Species.TINKATON),
    (1003, Species.CHARCADET),
    (1013, Species.HYDRAPPLE),
    (1025, Species.PECHARUNT),
])
def test_stored_species(stored, species):
    pkx = Pk9(make_record(Pk9, [(0x08, 'H', stored)]))
    assert pkx.stored_species_id == stored
    assert pkx.species_id == species
    assert pkx.species == species
    assert pkx.is_valid
    assert internal_species(species) == stored


def test_species_conversion_is_one_to_one():
    nationals = [national_species(internal) for internal in range(1, 1026)]
    assert sorted(nationals) == list(range(1, 1026))
    for internal in range(1, 1026):
        assert internal_species(national_species(internal)) == internal


def test_species_in_other_formats_is_national(sprigatito):
    data = bytearray(sprigatito.data)
    data[0x08:0x0A] = b'\xe6\x03'
    assert Pk9(bytes(data)).species == Species.KORAIDON
    assert Pk8(bytes(data)).species == Species.BAXCALIBUR


def test_export_dict_uses_national_species():
    pkx = Pk9(make_record(Pk9, [(0x08, 'H', 998)]))
    assert pkx.export_dict()['species'] == dict(id=1007, name=u'Koraidon')
    assert repr(pkx).startswith('<Pk9 Koraidon ')
