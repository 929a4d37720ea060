# encoding: utf8
u"""The format-independent part of a Pokémon record.

`Pkx` knows how to get a record into and out of its encrypted form and how to
derive everything interesting (shininess, validity, IVs, hidden power...) from
a handful of raw fields.  Each format subclass only says where those raw
fields live.
"""

import base64
import logging

import attr
import construct as c

from pkmstruct import crypto
from pkmstruct.reader import Reader, field, read
from pkmstruct.strings import NAME_LENGTH
from pkmstruct.types import (
    Ability, AbilityNumber, Ball, Gender, HiddenPower, Language, Move, Nature,
    Shiny, Species, Stats)

log = logging.getLogger(__name__)


def LittleEndianBitStruct(*subcons):
    """Construct's bit structs read each byte from most to least significant,
    which doesn't work for a little-endian 32-bit bit field.

    So this acts as a bit struct, but reverses the order of bytes first, so ALL
    the bits are read from most to least significant.
    """
    return c.ByteSwapped(c.BitStruct(*subcons))


# The IV word.  The two flags use the bits left over by the six 5-bit IVs,
# which are stored in hp, atk, def, spe, spa, spd order starting from bit 0.
iv_struct = LittleEndianBitStruct(
    'is_nicknamed' / c.Flag,
    'is_egg' / c.Flag,
    'special_defense' / c.BitsInteger(5),
    'special_attack' / c.BitsInteger(5),
    'speed' / c.BitsInteger(5),
    'defense' / c.BitsInteger(5),
    'attack' / c.BitsInteger(5),
    'hp' / c.BitsInteger(5),
)

# Stat order used by hidden power, and by the games internally
STORAGE_ORDER = (
    'hp', 'attack', 'defense', 'speed', 'special_attack', 'special_defense')


def name_field(offset):
    """Makes a property decoding the name stored at `offset`"""
    def getter(self):
        return self.string_adapter.parse(self.read_bytes(offset, NAME_LENGTH))

    return property(getter)


def iv_field(stat):
    def getter(self):
        return getattr(self._iv_bits, stat)

    return property(getter)


def enum_field(enum, raw_name):
    """Makes a property turning the raw code in `raw_name` into an `enum`"""
    def getter(self):
        return enum(getattr(self, raw_name))

    return property(getter)


def _stats_dict(stats):
    return dict((name.replace('_', ' '), value)
                for name, value in attr.asdict(stats).items())


class Pkx(Reader):
    u"""Base class for a single Pokémon record, as stored by the games.

    Wraps a decrypted ("pkx") buffer of either the stored or the party size.
    Use `new` or `new_ekx` to wrap a buffer straight out of a save file, or
    `new_or_default` when any garbage should quietly become an empty record.
    """

    format = None
    generation = None

    STORED_SIZE = None
    PARTY_SIZE = None
    BLOCK_SIZE = None
    shuffle_strategy = crypto.BLOCK_PERMUTATION

    # u16 fields that are always zero in a decrypted record
    encrypted_marker_offsets = ()
    string_adapter = None

    def __init__(self, data=None):
        u"""Wraps a decrypted record; an all-zero one if `data` is omitted."""
        if self.format is None:
            raise NotImplementedError(
                "Use a format-specific subclass of Pkx")

        if data is None:
            data = b'\x00' * self.STORED_SIZE
        self._check_size(data)
        self.data = bytes(data)

    def __repr__(self):
        return '<{0} {1} ({2:#010x})>'.format(
            type(self).__name__, self.species.display_name, self.personality)

    ### Encryption

    @classmethod
    def is_valid_size(cls, data):
        return len(data) in (cls.STORED_SIZE, cls.PARTY_SIZE)

    @classmethod
    def _check_size(cls, data):
        if not cls.is_valid_size(data):
            raise crypto.RecordSizeError(
                "{0} records are {1} or {2} bytes long, got {3}".format(
                    cls.format, cls.STORED_SIZE, cls.PARTY_SIZE, len(data)))

    @classmethod
    def is_encrypted(cls, data):
        """Guesses whether a buffer is encrypted.

        The marker fields are zero in every decrypted record, and almost
        certainly not in an encrypted one.
        """
        return any(read(data, c.Int16ul, offset)
                   for offset in cls.encrypted_marker_offsets)

    @classmethod
    def decrypt(cls, data):
        cls._check_size(data)
        return crypto.decrypt(data, cls.BLOCK_SIZE, cls.shuffle_strategy)

    @classmethod
    def encrypt(cls, data):
        cls._check_size(data)
        return crypto.encrypt(data, cls.BLOCK_SIZE, cls.shuffle_strategy)

    @classmethod
    def decrypt_if_needed(cls, data):
        if cls.is_encrypted(data):
            return cls.decrypt(data)
        return bytes(data)

    @classmethod
    def encrypt_if_needed(cls, data):
        if cls.is_encrypted(data):
            return bytes(data)
        return cls.encrypt(data)

    @classmethod
    def new(cls, data):
        """Wraps a record that may or may not be encrypted"""
        return cls(cls.decrypt_if_needed(data))

    @classmethod
    def new_ekx(cls, data):
        """Wraps an encrypted record"""
        return cls(cls.decrypt(data))

    @classmethod
    def default(cls):
        return cls()

    @classmethod
    def new_or_default(cls, data):
        """Like `new`, but gives the default record instead of a record that
        has the wrong size or isn't valid.  Never raises.
        """
        if not cls.is_valid_size(data):
            log.debug("%s: %d bytes is not a record; using the default",
                      cls.format, len(data))
            return cls.default()

        pkx = cls.new(data)
        if not pkx.is_valid:
            log.debug(
                "%s: invalid record (sanity %#06x, checksum %#06x, "
                "expected %#06x, species %d); using the default",
                cls.format, pkx.sanity, pkx.checksum,
                pkx.calculate_checksum(), pkx.species_id)
            return cls.default()
        return pkx

    @property
    def encrypted(self):
        u"""Returns the encrypted record the game expects in a save file."""
        return self.encrypt(self.data)

    @property
    def is_party(self):
        return len(self.data) == self.PARTY_SIZE

    ### Fields shared by every format

    encryption_constant = field(0x00, c.Int32ul)
    sanity = field(0x04, c.Int16ul)
    checksum = field(0x06, c.Int16ul)
    species_id = field(0x08, c.Int16ul)
    held_item_id = field(0x0A, c.Int16ul)
    trainer_id = field(0x0C, c.Int16ul)
    secret_id = field(0x0E, c.Int16ul)
    exp = field(0x10, c.Int32ul)

    ### Validity

    def calculate_checksum(self):
        return crypto.calculate_checksum(self.data, self.STORED_SIZE)

    @property
    def valid_checksum(self):
        return self.checksum == self.calculate_checksum()

    @property
    def is_valid(self):
        return (
            self.sanity == 0
            and self.valid_checksum
            and self.species != Species.NONE
        )

    ### Shininess

    @property
    def tsv(self):
        """Trainer shiny value"""
        return (self.trainer_id ^ self.secret_id) >> 4

    @property
    def psv(self):
        """Personality shiny value"""
        pid = self.personality
        return ((pid >> 16) ^ (pid & 0xFFFF)) >> 4

    @property
    def shiny_xor(self):
        pid = self.personality
        return self.trainer_id ^ self.secret_id ^ (pid >> 16) ^ (pid & 0xFFFF)

    @property
    def shiny_type(self):
        if not self.is_valid:
            return Shiny.NONE

        xor = self.shiny_xor
        if xor == 0:
            return Shiny.SQUARE
        elif xor < 16:
            return Shiny.STAR
        return Shiny.NONE

    @property
    def is_shiny(self):
        u"""Returns true iff this Pokémon is shiny."""
        return self.shiny_type != Shiny.NONE

    ### IVs and friends

    @property
    def _iv_bits(self):
        return iv_struct.parse(c.Int32ul.build(self.iv32))

    iv_hp = iv_field('hp')
    iv_attack = iv_field('attack')
    iv_defense = iv_field('defense')
    iv_speed = iv_field('speed')
    iv_special_attack = iv_field('special_attack')
    iv_special_defense = iv_field('special_defense')
    is_egg = iv_field('is_egg')
    is_nicknamed = iv_field('is_nicknamed')

    @property
    def ivs(self):
        bits = self._iv_bits
        return Stats(**dict((stat, bits[stat]) for stat in STORAGE_ORDER))

    @property
    def evs(self):
        return Stats(
            hp=self.ev_hp,
            attack=self.ev_attack,
            defense=self.ev_defense,
            speed=self.ev_speed,
            special_attack=self.ev_special_attack,
            special_defense=self.ev_special_defense,
        )

    @property
    def party_stats(self):
        """Battle stats; all zero unless this is a party record"""
        return Stats(
            hp=self.stat_hp_max,
            attack=self.stat_attack,
            defense=self.stat_defense,
            speed=self.stat_speed,
            special_attack=self.stat_special_attack,
            special_defense=self.stat_special_defense,
        )

    @property
    def hidden_power_num(self):
        ivs = self.ivs
        bits = sum((getattr(ivs, stat) & 1) << i
                   for i, stat in enumerate(STORAGE_ORDER))
        return bits * 15 // 63

    @property
    def hidden_power(self):
        return HiddenPower(self.hidden_power_num)

    @property
    def current_friendship(self):
        if self.current_handler == 0:
            return self.ot_friendship
        return self.ht_friendship

    ### Typed views of the raw codes

    species = enum_field(Species, 'species_id')
    ability = enum_field(Ability, 'ability_id')
    ability_number = enum_field(AbilityNumber, 'ability_number_id')
    nature = enum_field(Nature, 'nature_id')
    stat_nature = enum_field(Nature, 'stat_nature_id')
    gender = enum_field(Gender, 'gender_id')
    language = enum_field(Language, 'language_id')
    ball = enum_field(Ball, 'ball_id')
    ot_gender = enum_field(Gender, 'ot_gender_id')
    move1 = enum_field(Move, 'move1_id')
    move2 = enum_field(Move, 'move2_id')
    move3 = enum_field(Move, 'move3_id')
    move4 = enum_field(Move, 'move4_id')

    @property
    def moves(self):
        return (self.move1, self.move2, self.move3, self.move4)

    @property
    def move_pp(self):
        return (self.move1_pp, self.move2_pp, self.move3_pp, self.move4_pp)

    @property
    def move_pp_ups(self):
        return (
            self.move1_pp_ups,
            self.move2_pp_ups,
            self.move3_pp_ups,
            self.move4_pp_ups,
        )

    def export_dict(self):
        """Exports the record as a YAML/JSON-compatible dict
        """
        NO_VALUE = object()

        def save(target_dict, key, value=NO_VALUE, transform=None,
                 condition=lambda x: x):
            """Set a dict key to a value, if a condition is true

            If value is not given, it is looked up on self.
            The value can be transformed by a function before setting.
            """
            if value is NO_VALUE:
                attrname = key.replace(' ', '_')
                value = getattr(self, attrname)
            if condition(value):
                if transform:
                    value = transform(value)
                target_dict[key] = value

        def save_string(target_dict, string_key, trash_key, string):
            """Save a string, including trash bytes"""
            target_dict[string_key] = str(string)
            trash = getattr(string, 'original', None)
            if trash and trash != self.string_adapter.build(str(string)):
                target_dict[trash_key] = base64.b64encode(trash).decode('ascii')

        def save_object(target_dict, key, value=NO_VALUE, **kwargs):
            """Codes are represented as dicts with "id" and "name"

            The name is for humans. The ID is the number from the record.
            """
            save(target_dict, key, value=value, transform=lambda value:
                 dict(id=int(value), name=value.display_name), **kwargs)

        result = dict(
            format=self.format,
            species=dict(id=self.species_id,
                         name=self.species.display_name),
        )
        save(result, 'form')
        save_object(result, 'ability')
        save(result, 'ability number', self.ability_number,
             transform=lambda n: n.display_name.lower())
        save(result, 'held item', self.held_item_id)
        save_object(result, 'pokeball', self.ball)
        save_object(result, 'nature', condition=lambda n: n != Nature.NONE)
        save_object(result, 'stat nature',
                    condition=lambda n: n != self.nature)

        trainer = dict(
            id=self.trainer_id,
            secret=self.secret_id,
            gender=self.ot_gender.display_name.lower(),
        )
        save_string(trainer, 'name', 'name trash', self.ot_name)
        if (trainer['id'] or trainer['secret'] or trainer['name'] or
                trainer['gender'] != 'male'):
            result['original trainer'] = trainer

        save(result, 'exp')
        save(result, 'personality')
        save(result, 'encryption constant')
        save(result, 'gender', transform=lambda g: g.display_name.lower(),
             condition=lambda g: g != Gender.GENDERLESS)
        save_object(result, 'language')
        save_string(result, 'nickname', 'nickname trash', self.nickname)
        save(result, 'nicknamed', self.is_nicknamed)
        save(result, 'is egg')
        save(result, 'met at level', self.met_level)
        save(result, 'ot friendship')
        save(result, 'ht friendship')
        save(result, 'current handler')
        save(result, 'shiny', self.shiny_type,
             transform=lambda s: s.display_name.lower())

        moves = result['moves'] = []
        for move_object, pp, pp_ups in zip(
                self.moves, self.move_pp, self.move_pp_ups):
            move = {}
            if move_object:
                move.update(id=int(move_object),
                            name=move_object.display_name)
            save(move, 'pp ups', pp_ups)
            if move or pp:
                move['pp'] = pp
                moves.append(move)

        save(result, 'effort', _stats_dict(self.evs),
             condition=lambda d: any(d.values()))
        save(result, 'genes', _stats_dict(self.ivs),
             condition=lambda d: any(d.values()))
        if self.is_party:
            save(result, 'level', self.stat_level)
            save(result, 'status condition')
            save(result, 'current hp', self.stat_hp_current)
            save(result, 'stats', _stats_dict(self.party_stats),
                 condition=lambda d: any(d.values()))

        return result
