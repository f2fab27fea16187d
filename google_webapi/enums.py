"""
Enumerations shared by the Maps and Search requests.

Each member's value is its wire token, so the class body doubles as the
lookup table used during encoding.
"""

from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    """Language codes accepted by the ``language`` / ``hl`` parameters."""

    ARABIC = "ar"
    BULGARIAN = "bg"
    BENGALI = "bn"
    CATALAN = "ca"
    CZECH = "cs"
    DANISH = "da"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    ENGLISH_AUSTRALIAN = "en-AU"
    ENGLISH_GREAT_BRITAIN = "en-GB"
    SPANISH = "es"
    BASQUE = "eu"
    FARSI = "fa"
    FINNISH = "fi"
    FILIPINO = "fil"
    FRENCH = "fr"
    GALICIAN = "gl"
    GUJARATI = "gu"
    HINDI = "hi"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    HEBREW = "iw"
    JAPANESE = "ja"
    KANNADA = "kn"
    KOREAN = "ko"
    LITHUANIAN = "lt"
    LATVIAN = "lv"
    MALAYALAM = "ml"
    MARATHI = "mr"
    DUTCH = "nl"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt-BR"
    PORTUGUESE_PORTUGAL = "pt-PT"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SERBIAN = "sr"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TAGALOG = "tl"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"
    CHINESE_SIMPLIFIED = "zh-CN"
    CHINESE_TRADITIONAL = "zh-TW"


class Country(StrEnum):
    """Two-letter country codes used by ``gl`` and ``cr``."""

    AUSTRALIA = "au"
    AUSTRIA = "at"
    BELGIUM = "be"
    BRAZIL = "br"
    CANADA = "ca"
    CHINA = "cn"
    DENMARK = "dk"
    FINLAND = "fi"
    FRANCE = "fr"
    GERMANY = "de"
    INDIA = "in"
    IRELAND = "ie"
    ITALY = "it"
    JAPAN = "jp"
    MEXICO = "mx"
    NETHERLANDS = "nl"
    NEW_ZEALAND = "nz"
    NORWAY = "no"
    POLAND = "pl"
    PORTUGAL = "pt"
    SOUTH_AFRICA = "za"
    SPAIN = "es"
    SWEDEN = "se"
    SWITZERLAND = "ch"
    UNITED_KINGDOM = "uk"
    UNITED_STATES = "us"

    @property
    def collection(self) -> str:
        """Return the ``cr`` country collection token, e.g. ``countryUS``."""
        return f"country{self.value.upper()}"
