"""Title settings of the online profile: eyes character, colour and text."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import BinaryIO, TypeVar

_U32 = struct.Struct("<I")

_E = TypeVar("_E", bound=IntEnum)


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


def read_u32_enum(enum_cls: type[_E], stream: BinaryIO) -> _E:
    """Read a little-endian u32 and map it to a member of ``enum_cls``."""
    data = stream.read(_U32.size) or b""
    if len(data) != _U32.size:
        raise ValueError(
            f"unexpected end of data: needed {_U32.size} bytes, got {len(data)}"
        )
    (value,) = _U32.unpack(data)
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"{value:#x} is not a valid {enum_cls.__name__}") from None


class TitleCharacter(IntEnum):
    """Character eyes peeking from the title background."""

    NONE = 0x00
    SORA = 0x01
    ALTE = 0x02
    TSIH = 0x03
    MIRA = 0x04
    SHAM = 0x05
    NATH = 0x06
    STAR_BREAKER = 0x07
    SUGURI = 0x08
    SAKI = 0x09
    IRU = 0x0A
    NANAKO = 0x0B
    KAE = 0x0C
    KYOKO = 0x0D
    HIME = 0x0E
    SUMIKA = 0x0F
    OJ_ALTE = 0x10
    OJ_HIME = 0x11
    OJ_HIME_WINTER = 0x12
    OJ_KAE = 0x13
    OJ_KYOKO = 0x14
    OJ_NANAKO = 0x15
    OJ_NATH = 0x16
    OJ_SAKI = 0x17
    OJ_SHAM = 0x18
    OJ_SORA = 0x19
    OJ_SORA_MILITARY = 0x1A
    OJ_STAR_BREAKER = 0x1B
    OJ_SUGURI = 0x1C
    OJ_SUGURI_WINTER = 0x1D
    OJ_IRU = 0x1E
    OJ_MIRA = 0x1F
    DISABLE_TITLE = 0xFF

    def __str__(self) -> str:
        return _CHARACTER_NAMES.get(self.name) or _camel(self.name)

    @classmethod
    def default(cls) -> TitleCharacter:
        return cls.NONE


_CHARACTER_NAMES = {
    "NONE": "<No character>",
    "STAR_BREAKER": "Star Breaker",
    "OJ_ALTE": "OJ Alte",
    "OJ_HIME": "OJ Hime",
    "OJ_HIME_WINTER": "OJ Winter Hime",
    "OJ_KAE": "OJ Kae",
    "OJ_KYOKO": "OJ Kyoko",
    "OJ_NANAKO": "OJ Nanako",
    "OJ_NATH": "OJ Nath",
    "OJ_SAKI": "OJ Saki",
    "OJ_SHAM": "OJ Sham",
    "OJ_SORA": "OJ Sora",
    "OJ_SORA_MILITARY": "OJ Military Sora",
    "OJ_STAR_BREAKER": "OJ Star Breaker",
    "OJ_SUGURI": "OJ Suguri",
    "OJ_SUGURI_WINTER": "OJ Winter Suguri",
    "OJ_IRU": "OJ Iru",
    "OJ_MIRA": "OJ Mira",
    "DISABLE_TITLE": "<Disable Title>",
}


class TitleColor(IntEnum):
    """Local-only background colour for all titles in the lobby."""

    YELLOW = 0x00
    BLUE = 0x01
    GREEN = 0x02
    RED = 0x03

    def __str__(self) -> str:
        return _camel(self.name)

    @classmethod
    def default(cls) -> TitleColor:
        return cls.YELLOW


class TitleText(IntEnum):
    """Title text shown to everyone in the lobby."""

    NONE = 0
    HELLO_WORLD = 1
    AOS2_PLAYER = 2
    OJ_PLAYER = 3
    RUSHDOWN_PLAYER = 4
    ZONING_PLAYER = 5
    OFFENSIVE_PLAYER = 6
    DEFENSIVE_PLAYER = 7
    CASUAL_PLAYER = 8
    COMPETITIVE_PLAYER = 9
    HEATING_UP = 10
    GOING_FOR_WIN = 11
    NICE_TO_MEET_YOU = 12
    FAIR_FIGHT = 13
    GRIND_TIME = 14
    LITTLE_WAR = 15
    GLHF = 16
    FIGHTING_GAME_FAN = 17
    ORANGE_JUICE_FAN = 18
    ON_THE_UP_AND_AP = 19
    TEACH_LESSON = 20
    GOOD_MORNING = 21
    GOOD_AFTERNOON = 22
    GOOD_EVENING = 23
    NEWBIE = 24
    VETERAN = 25
    PLAY_ON_WEEKENDS = 26
    PLAY_ON_WEEKDAYS = 27
    PLAY_AT_NIGHT = 28
    PLAY_AT_DAY = 29
    DANGER_ZONE = 30
    BLAME_THE_LAG = 31
    BRING_IT_ON = 32
    BODY_MIND_AND_SOUL = 33
    PHD_IN_METER_MANAGEMENT = 34
    WARMUP = 35
    BUTTON_MASHER = 36
    ACCELERATING = 37
    NEVER_LOSE = 38
    DIE_A_HERO = 39
    PART_TIMER = 40
    FULL_TIMER = 41
    LOOKING_FOR_FRIENDS = 42
    LOOKING_FOR_RIVALS = 43
    LOOKING_FOR_GOOD_CHALLENGE = 44
    TRAINING_FOR_TOURNAMENT = 45
    WANNA_GET_GOOD = 46
    NEWBIES_ONLY = 47
    VETERANS_ONLY = 48
    NO_LUCK_BUT_STILL = 49
    LUCK_IS_SKILL = 50
    COMEBACK_MASTER = 51
    BREAKING_A_SWEAT = 52
    DASH = 53
    ATTACK = 54
    CANCEL = 55
    HYPER = 56
    GUARD = 57
    PLAY100_OJ_TOO = 58
    CASUAL_MATCH = 59
    SERIOUS_MATCH = 60
    NORTH_AMERICA = 61
    EUROPE = 62
    ASIA = 63
    JAPAN = 64
    OCEANIA = 65
    AFRICA = 66
    MIDDLE_EAST = 67
    LATIN_AMERICA = 68
    SORA_ULTIMATE_WEAPON_GIRL = 69
    SORA_ULTIMATE_BEATDOWN = 70
    SORA_SKY_IS_THE_LIMIT = 71
    SORA_CANT_LET_YOU_DO_THAT_STAR_BREAKER = 72
    SORA_COMMENCING_MISSION = 73
    SORA_MISSION_ACCOMPLISHED = 74
    SORA_NEWBIE = 75
    SORA_MASTER = 76
    SORA_FAN = 77
    SORA_TRAINING = 78
    SORA_SPECIALIST = 79
    SORA_PLAYER = 80
    SORA_WAIFU = 81
    ALTE_SEARCH_PARTY = 82
    ALTE_LIGHTNING_ROD = 83
    ALTE_SUPREME_LOYALTY = 84
    ALTE_PRETTY_IN_PINK = 85
    ALTE_LAMBDA = 86
    ALTE_FREE_HUGS = 87
    ALTE_NEWBIE = 88
    ALTE_MASTER = 89
    ALTE_FAN = 90
    ALTE_TRAINING = 91
    ALTE_SPECIALIST = 92
    ALTE_PLAYER = 93
    ALTE_WAIFU = 94
    TSIH_TACTITAL_ESPYONYAGE_NANORACTION = 95
    TSIH_CHAMELEON = 96
    TSIH_ROCK_AND_ROLL = 97
    TSIH_GAMMA = 98
    TSIH_PIGYAMOOOH = 99
    TSIH_NORA = 100
    TSIH_NANORA = 101
    TSIH_NEWBIE = 102
    TSIH_MASTER = 103
    TSIH_FAN = 104
    TSIH_TRAINING = 105
    TSIH_SPECIALIST = 106
    TSIH_PLAYER = 107
    TSIH_WAIFU = 108
    MIRA_LET_IT_RIP = 109
    MIRA_NINJA_MASTER = 110
    MIRA_SUPREME_FOUR = 111
    MIRA_MASTER_OF_SPINNING_BLADES = 112
    MIRA_OMICRON = 113
    MIRA_TWIN_DRAGON_TORNADO = 114
    MIRA_TWO_IN_ONE = 115
    MIRA_WONDERFUL = 116
    MIRA_NEWBIE = 117
    MIRA_MASTER = 118
    MIRA_FAN = 119
    MIRA_TRAINING = 120
    MIRA_SPECIALIST = 121
    MIRA_PLAYER = 122
    MIRA_WAIFU = 123
    SHAM_MASTER_IDOL = 124
    SHAM_ALPHA = 125
    SHAM_WARLAND_SAGE = 126
    SHAM_HIVE_QUEEN = 127
    SHAM_INSTRUCTOR = 128
    SHAM_ROBOT_SWARM = 129
    SHAM_NEWBIE = 130
    SHAM_MASTER = 131
    SHAM_FAN = 132
    SHAM_TRAINING = 133
    SHAM_SPECIALIST = 134
    SHAM_PLAYER = 135
    SHAM_WAIFU = 136
    NATH_CHOP_SUEY = 137
    NATH_BETA = 138
    NATH_TRIFECTA = 139
    NATH_MECH3 = 140
    NATH_EXTENSION = 141
    NATH_GET_IN_THE_ROBOT = 142
    NATH_NATTO = 143
    NATH_ANOTHER_ULTIMATE_WEAPON = 144
    NATH_NEWBIE = 145
    NATH_MASTER = 146
    NATH_FAN = 147
    NATH_TRAINING = 148
    NATH_SPECIALIST = 149
    NATH_PLAYER = 150
    NATH_WAIFU = 151
    STAR_BREAKER_BLASTING_FUSE = 152
    STAR_BREAKER_PYROMANIAC = 153
    STAR_BREAKER_LIKES_WELL_DONE = 154
    STAR_BREAKER_KABOOM = 155
    STAR_BREAKER_SUPER_NOVE = 156
    STAR_BREAKER_STARDUST = 157
    STAR_BREAKER_NEWBIE = 158
    STAR_BREAKER_MASTER = 159
    STAR_BREAKER_FAN = 160
    STAR_BREAKER_TRAINING = 161
    STAR_BREAKER_SPECIALIST = 162
    STAR_BREAKER_PLAYER = 163
    STAR_BREAKER_WAIFU = 164
    SUGURI_YEARS_OF_EXPERIENCE = 165
    SUGURI_PROJECT_ONE = 166
    SUGURI_YEARS_TOO_EARLY_TO_DEFEAT = 167
    SUGURI_ICARUS = 168
    SUGURI_PROTAGONIST = 169
    SUGURI_LITTLE_WAR = 170
    SUGURI_GAIA = 171
    SUGURI_NEWBIE = 172
    SUGURI_MASTER = 173
    SUGURI_FAN = 174
    SUGURI_TRAINING = 175
    SUGURI_SPECIALIST = 176
    SUGURI_PLAYER = 177
    SUGURI_WAIFU = 178
    SAKI_SWEET_MAKER = 179
    SAKI_PERCUSSIONIST = 180
    SAKI_BIG_BANG_BELL = 181
    SAKI_SAMBA = 182
    SAKI_MAURYAH = 183
    SAKI_PLEASE_DIE = 184
    SAKI_NEWBIE = 185
    SAKI_MASTER = 186
    SAKI_FAN = 187
    SAKI_TRAINING = 188
    SAKI_SPECIALIST = 189
    SAKI_PLAYER = 190
    SAKI_WAIFU = 191
    IRU_MARKSMAN = 192
    IRU_TOMBOY = 193
    IRU_MINESWEEPER = 194
    IRU_LONG_DISTANCE_RELATIONSHIP = 195
    IRU_FASTEST_GUN = 196
    IRU_ROCKETEER = 197
    IRU_CONFIRMED_KILLER = 198
    IRU_NEWBIE = 199
    IRU_MASTER = 200
    IRU_FAN = 201
    IRU_TRAINING = 202
    IRU_SPECIALIST = 203
    IRU_PLAYER = 204
    IRU_WAIFU = 205
    NANAKO_IN_FORMATION = 206
    NANAKO_SEVEN_BIT_ERA = 207
    NANAKO_SHORTY = 208
    NANAKO_PRO75 = 209
    NANAKO_LUCKY_SEVEN = 210
    NANAKO_BEATS_BY_BIT = 211
    NANAKO_NEWBIE = 212
    NANAKO_MASTER = 213
    NANAKO_FAN = 214
    NANAKO_TRAINING = 215
    NANAKO_SPECIALIST = 216
    NANAKO_PLAYER = 217
    NANAKO_WAIFU = 218
    KAE_HEAT300 = 219
    KAE_SUMMER_NIGHT = 220
    KAE_BURNING_HEART = 221
    KAE_CHILDISH_SPIRIT = 222
    KAE_SPEED_OF_SOUND = 223
    KAE_HEATWAVE = 224
    KAE_NEWBIE = 225
    KAE_MASTER = 226
    KAE_FAN = 227
    KAE_TRAINING = 228
    KAE_SPECIALIST = 229
    KAE_PLAYER = 230
    KAE_WAIFU = 231
    KYOKO_DEEP_FREEZE = 232
    KYOKO_ABSOLUTE_ZERO = 233
    KYOKO_BIPOLAR = 234
    KYOKO_BRITTLE = 235
    KYOKO_MOTHER_KNOWS_BEST = 236
    KYOKO_ICE_QUEEN = 237
    KYOKO_AVALANCHE = 238
    KYOKO_IMMOVABLE_OBJECT = 239
    KYOKO_STREAMS_OF_SORROW = 240
    KYOKO_NEWBIE = 241
    KYOKO_MASTER = 242
    KYOKO_FAN = 243
    KYOKO_TRAINING = 244
    KYOKO_SPECIALIST = 245
    KYOKO_PLAYER = 246
    KYOKO_WAIFU = 247
    HIME_GUARDIAN = 248
    HIME_TIES_THAT_BIND = 249
    HIME_BOUND_BY_DESTINY = 250
    HIME_PRINCESS = 251
    HIME_ELEGANT_DANCER = 252
    HIME_NEWBIE = 253
    HIME_MASTER = 254
    HIME_FAN = 255
    HIME_TRAINING = 256
    HIME_SPECIALIST = 257
    HIME_PLAYER = 258
    HIME_WAIFU = 259
    SUMIKA_BARREL_CRAZY = 260
    SUMIKA_SHIP_GIRL = 261
    SUMIKA_FEATHER_DANCE = 262
    SUMIKA_WATER_AND_MELON = 263
    SUMIKA_TOYS_MEISTER = 264
    SUMIKA_CARNIVAL = 265
    SUMIKA_NEWBIE = 266
    SUMIKA_MASTER = 267
    SUMIKA_FAN = 268
    SUMIKA_TRAINING = 269
    SUMIKA_SPECIALIST = 270
    SUMIKA_PLAYER = 271
    SUMIKA_WAIFU = 272
    BLANK = 273
    DISABLED = 0xFFFF_FFFF

    def __str__(self) -> str:
        return _TEXT_NAMES.get(self.name) or _camel(self.name)

    @classmethod
    def default(cls) -> TitleText:
        return cls.NONE


_TEXT_NAMES = {
    "NONE": '"None"',
    "BLANK": "<Invisible text>",
    "DISABLED": "<Disable Title>",
}