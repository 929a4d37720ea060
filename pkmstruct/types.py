# encoding: utf8
"""Closed sets of values found in records.

Every enum here is total: looking up a code the games never use gives the
enum's sentinel member instead of raising.
"""

from enum import IntEnum

import attr

from pkmstruct import names


class CodeEnum(IntEnum):
    """IntEnum that maps unknown codes to a sentinel member (`NONE`)"""

    @classmethod
    def _missing_(cls, value):
        return cls._sentinel()

    @classmethod
    def _sentinel(cls):
        return cls['NONE']

    @property
    def display_name(self):
        return self.name.replace('_', ' ').title()

    def __str__(self):
        return self.display_name


def _identifier(display_name):
    """Turns e.g. "Mr. Mime" or "Farfetch'd" into an enum member name"""
    cleaned = []
    for char in display_name.upper():
        if char.isalnum() and char.isascii():
            cleaned.append(char)
        elif char == u'É':
            cleaned.append('E')
        elif char == u'♀':
            cleaned.append('_F')
        elif char == u'♂':
            cleaned.append('_M')
        elif char in u' -':
            cleaned.append('_')
    return ''.join(cleaned).strip('_').replace('__', '_')


class _NamedCodeEnum(CodeEnum):
    """CodeEnum whose display names come from one of the `names` tables"""

    @property
    def display_name(self):
        return self._display_names[self.value]


def _named_enum(enum_name, display_names):
    members = [('NONE', 0)]
    for code, display_name in enumerate(display_names):
        if not code:
            continue
        identifier = _identifier(display_name)
        if identifier[0].isdigit():
            # 10,000,000 Volt Thunderbolt
            identifier = '{0}_{1}'.format(enum_name.upper(), identifier)
        members.append((identifier, code))
    enum = _NamedCodeEnum(enum_name, members, module=__name__)
    enum._display_names = display_names
    return enum


Species = _named_enum('Species', names.SPECIES)
Move = _named_enum('Move', names.MOVES)
Ability = _named_enum('Ability', names.ABILITIES)


class Gender(CodeEnum):
    MALE = 0
    FEMALE = 1
    GENDERLESS = 2

    @classmethod
    def _sentinel(cls):
        return cls.GENDERLESS


class Nature(CodeEnum):
    HARDY = 0
    LONELY = 1
    BRAVE = 2
    ADAMANT = 3
    NAUGHTY = 4
    BOLD = 5
    DOCILE = 6
    RELAXED = 7
    IMPISH = 8
    LAX = 9
    TIMID = 10
    HASTY = 11
    SERIOUS = 12
    JOLLY = 13
    NAIVE = 14
    MODEST = 15
    MILD = 16
    QUIET = 17
    BASHFUL = 18
    RASH = 19
    CALM = 20
    GENTLE = 21
    SASSY = 22
    CAREFUL = 23
    QUIRKY = 24
    NONE = 25


class AbilityNumber(CodeEnum):
    """Which of the species' ability slots the Pokémon's ability is from"""
    NONE = 0
    FIRST = 1
    SECOND = 2
    HIDDEN = 4


class Language(CodeEnum):
    NONE = 0
    JAPANESE = 1
    ENGLISH = 2
    FRENCH = 3
    ITALIAN = 4
    GERMAN = 5
    SPANISH = 7
    KOREAN = 8
    CHINESE_SIMPLIFIED = 9
    CHINESE_TRADITIONAL = 10


class HiddenPower(CodeEnum):
    FIGHTING = 0
    FLYING = 1
    POISON = 2
    GROUND = 3
    ROCK = 4
    BUG = 5
    GHOST = 6
    STEEL = 7
    FIRE = 8
    WATER = 9
    GRASS = 10
    ELECTRIC = 11
    PSYCHIC = 12
    ICE = 13
    DRAGON = 14
    DARK = 15
    NONE = 16


class Shiny(CodeEnum):
    NONE = 0
    STAR = 1
    SQUARE = 2


class Ball(CodeEnum):
    NONE = 0
    MASTER = 1
    ULTRA = 2
    GREAT = 3
    POKE = 4
    SAFARI = 5
    NET = 6
    DIVE = 7
    NEST = 8
    REPEAT = 9
    TIMER = 10
    LUXURY = 11
    PREMIER = 12
    DUSK = 13
    HEAL = 14
    QUICK = 15
    CHERISH = 16
    FAST = 17
    LEVEL = 18
    LURE = 19
    HEAVY = 20
    LOVE = 21
    FRIEND = 22
    MOON = 23
    SPORT = 24
    DREAM = 25
    BEAST = 26
    STRANGE = 27
    HISUI_POKE = 28
    HISUI_GREAT = 29
    HISUI_ULTRA = 30
    FEATHER = 31
    WING = 32
    JET = 33
    HISUI_HEAVY = 34
    LEADEN = 35
    GIGATON = 36
    ORIGIN = 37


@attr.s(frozen=True)
class Stats(object):
    """One number per stat, in the order the games display them"""
    hp = attr.ib(default=0)
    attack = attr.ib(default=0)
    defense = attr.ib(default=0)
    special_attack = attr.ib(default=0)
    special_defense = attr.ib(default=0)
    speed = attr.ib(default=0)

    def __iter__(self):
        return iter(attr.astuple(self))
