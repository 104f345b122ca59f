"""Avatar character and background of the online profile."""

from __future__ import annotations

from enum import IntEnum


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


class AvatarBackground(IntEnum):
    LIGHT_BLUE = 0x00
    PINK = 0x01
    GREEN = 0x02
    RED = 0x03
    YELLOW = 0x04
    PURPLE = 0x05
    BLACK = 0x06
    DARK_ORANGE = 0x07
    LIGHT_ORANGE = 0x08
    BLUE = 0x09
    DARK_BROWN = 0x0A
    SILVER = 0x0B
    PEACH = 0x0C
    LIGHT_GREEN = 0x0D
    LIGHT_BROWN = 0x0E
    TURQUOISE = 0x0F
    RASPBERRY = 0x10
    DARK_GREEN = 0x11
    DEEP_BLUE = 0x12
    AURORA = 0x13
    SUNSET = 0x14
    TEAL = 0x15
    RED_AND_BLUE = 0x16
    ORANGE = 0x17
    LAVENDER = 0x18
    CYAN = 0x19
    SEA_WATER = 0x1A
    OLIVE = 0x1B
    SKY = 0x1C
    STRAWBERRY_CHOCOLATE = 0x1D
    DEEP_PINK = 0x1E
    BEACH = 0x1F
    BEIGE = 0x20
    AQUAMARINE = 0x21
    TROPIC = 0x22
    QUARANTINED_RAPPORT = 0x23
    BULLET_ORANGE = 0x24
    # An image that resembles the character silhouette, but slightly differs.
    LIGHT_GRAY_BACKGROUND_WITH_SILHOUETTE = 0xFF

    def __str__(self) -> str:
        return _BACKGROUND_NAMES.get(self.name) or _camel(self.name)

    @classmethod
    def default(cls) -> AvatarBackground:
        return cls.LIGHT_BLUE


_BACKGROUND_NAMES = {
    "LIGHT_GRAY_BACKGROUND_WITH_SILHOUETTE": "<Default Silhouette>",
}


class AvatarCharacter(IntEnum):
    SILHOUETTE = 0x00
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
    OJ_NATH_EXTENSION = 0x17
    OJ_SAKI = 0x18
    OJ_SHAM = 0x19
    OJ_SORA = 0x1A
    OJ_SORA_MILITARY = 0x1B
    OJ_STAR_BREAKER = 0x1C
    OJ_SUGURI = 0x1D
    OJ_SUGURI_WINTER = 0x1E
    OJ_IRU = 0x1F
    OJ_MIRA = 0x20
    OJ_TSIH = 0x21
    OJ_SUGURI_46_BIL_YEARS = 0x22
    OJ_SUMIKA = 0x23
    OJ_SUGURI_SUMMER = 0x24
    OJ_SORA_SUMMER = 0x25
    OJ_HIME_SUMMER = 0x26
    OJ_SAKI_SUMMER = 0x27
    OJ_KAE_SUMMER = 0x28
    OJ_NATH_SUMMER = 0x29
    QUARANTINED_RAPPORT = 0x2A
    SUGURI_BULLET_ORANGE = 0x2B
    SORA_BULLET_ORANGE = 0x2C
    SUGURI_ANNIVERSARY = 0x2D
    SORA_ANNIVERSARY = 0x2E
    INVISIBLE = 0xFF

    def __str__(self) -> str:
        return _CHARACTER_NAMES.get(self.name) or _camel(self.name)

    @classmethod
    def default(cls) -> AvatarCharacter:
        return cls.SUGURI


_CHARACTER_NAMES = {
    "STAR_BREAKER": "Star Breaker",
    "OJ_ALTE": "100% Alte",
    "OJ_HIME": "100% Hime",
    "OJ_HIME_WINTER": "100% Hime Winter",
    "OJ_KAE": "100% Kae",
    "OJ_KYOKO": "100% Kyoko",
    "OJ_NANAKO": "100% Nanako",
    "OJ_NATH": "100% Nath",
    "OJ_NATH_EXTENSION": "100% Nath Armor",
    "OJ_SAKI": "100% Saki",
    "OJ_SHAM": "100% Sham",
    "OJ_SORA": "100% Sora",
    "OJ_SORA_MILITARY": "100% Sora Military",
    "OJ_STAR_BREAKER": "100% Star Breaker",
    "OJ_SUGURI": "100% Suguri",
    "OJ_SUGURI_WINTER": "100% Suguri Winter",
    "OJ_IRU": "100% Iru",
    "OJ_MIRA": "100% Mira",
    "OJ_TSIH": "100% Tsih",
    "OJ_SUGURI_46_BIL_YEARS": "100% Suguri 46 Billion Years Old",
    "OJ_SUMIKA": "100% Sumika",
    "OJ_SUGURI_SUMMER": "100% Suguri Summer",
    "OJ_SORA_SUMMER": "100% Sora Summer",
    "OJ_HIME_SUMMER": "100% Hime Summer",
    "OJ_SAKI_SUMMER": "100% Saki Summer",
    "OJ_KAE_SUMMER": "100% Kae Summer",
    "OJ_NATH_SUMMER": "100% Nath Summer",
    "QUARANTINED_RAPPORT": "Quarantined Rapport",
    "SUGURI_BULLET_ORANGE": "Bullet Orange Suguri",
    "SORA_BULLET_ORANGE": "Bullet Orange Sora",
    "SUGURI_ANNIVERSARY": "AoS2 10th Anniversary Suguri",
    "SORA_ANNIVERSARY": "AoS2 10th Anniversary Sora",
    "INVISIBLE": "<Invisible avatar>",
}