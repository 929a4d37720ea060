# Encoding: utf8

import pytest
parametrize = pytest.mark.parametrize

from pkmstruct.types import (
    Ability, AbilityNumber, Ball, Gender, HiddenPower, Language, Move, Nature,
    Shiny, Species, Stats)


@parametrize(('enum', 'code', 'sentinel'), [
    (Species, 5000, Species.NONE),
    (Move, 0xFFFF, Move.NONE),
    (Ability, 400, Ability.NONE),
    (Gender, 3, Gender.GENDERLESS),
    (Nature, 99, Nature.NONE),
    (AbilityNumber, 3, AbilityNumber.NONE),
    (Language, 6, Language.NONE),
    (HiddenPower, 16, HiddenPower.NONE),
    (Shiny, 7, Shiny.NONE),
    (Ball, 38, Ball.NONE),
])
def test_unknown_code(enum, code, sentinel):
    assert enum(code) is sentinel


@parametrize(('member', 'code', 'display_name'), [
    (Species.BULBASAUR, 1, u'Bulbasaur'),
    (Species.NIDORAN_F, 29, u'Nidoran♀'),
    (Species.NIDORAN_M, 32, u'Nidoran♂'),
    (Species.MR_MIME, 122, u'Mr. Mime'),
    (Species.FARFETCHD, 83, u"Farfetch'd"),
    (Species.HO_OH, 250, u'Ho-Oh'),
    (Species.FLABEBE, 669, u'Flabébé'),
    (Species.TYPE_NULL, 772, u'Type: Null'),
    (Move.MOVE_10000000_VOLT_THUNDERBOLT, 719,
     u'10,000,000 Volt Thunderbolt'),
    (Ability.IMPOSTER, 150, u'Imposter'),
    (Nature.ADAMANT, 3, u'Adamant'),
    (Language.CHINESE_SIMPLIFIED, 9, u'Chinese Simplified'),
    (Ball.HISUI_POKE, 28, u'Hisui Poke'),
])
def test_members(member, code, display_name):
    assert member == code
    assert member.display_name == display_name
    assert str(member) == display_name


def test_none_is_falsy():
    assert not Species(0)
    assert not Move.NONE
    assert Species.DITTO


def test_stats():
    stats = Stats(hp=1, attack=2, defense=3, special_attack=4,
                  special_defense=5, speed=6)
    assert list(stats) == [1, 2, 3, 4, 5, 6]
    assert stats == Stats(1, 2, 3, 4, 5, 6)
    assert Stats() == Stats(0, 0, 0, 0, 0, 0)
    with pytest.raises(AttributeError):
        stats.hp = 3
