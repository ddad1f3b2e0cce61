"""Enumerations shared by the API's data documents."""

from __future__ import annotations

from enum import Enum

from .errors import DeserializeError


def _unknown_variant(enum_cls: type[Enum], value: str) -> DeserializeError:
    return DeserializeError(f"unknown variant `{value}` for {enum_cls.__name__}")


class AnimeType(Enum):
    """Kind of an anime entry."""

    MOVIE = "Movie"
    MUSIC_VIDEO = "Music Video"
    OTHER = "Other"
    OVA = "OVA"
    TV_SERIES = "TV Series"
    TV_SPECIAL = "TV Special"
    UNKNOWN = "unknown"
    WEB = "Web"

    @classmethod
    def from_xml(cls, value: str) -> AnimeType:
        """Read the value as written in the API's documents."""
        try:
            return cls(value)
        except ValueError:
            raise _unknown_variant(cls, value) from None


class TitleType(Enum):
    """Role of a title among the titles of an entry."""

    KANA_READING = "kanareading"
    MAIN = "main"
    OFFICIAL = "official"
    SHORT = "short"
    SYNONYM = "synonym"
    TITLE_CARD = "titlecard"

    @classmethod
    def from_xml(cls, value: str) -> TitleType:
        """Read the value as written in the API's documents."""
        try:
            return cls(value)
        except ValueError:
            raise _unknown_variant(cls, value) from None


class TitleLanguage(Enum):
    """Language of a title; codes the API uses map onto members."""

    JAPANESE = "ja"
    ROMAJI = "x-jat"
    ENGLISH = "en"
    AFRIKAANS = "af"
    ALBANIAN = "al"
    ARABIC = "ar"
    BASQUE = "es-pv"
    BENGALI = "bd"
    BULGARIAN = "bg"
    BOSNIAN = "bs"
    MYANMAR_BURMESE = "bur"
    CATALAN = "es-ca"
    PINYIN = "x-zht"
    CHINESE = "zh"
    CHINESE_TRADITIONAL = "zh-hant"
    CHINESE_SIMPLIFIED = "zh-hans"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ESPERANTO = "eo"
    ESTONIAN = "et"
    FILIPINO = "tl"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "es-ga"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    HAITIAN_CREOLE = "ht"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAVANESE = "jv"
    KOREAN = "ko"
    KOREAN_TRANSCRIPTION = "x-kot"
    LATIN = "la"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MALAYSIAN = "my"
    MONGOLIAN = "mn"
    NEPALI = "ne"
    NORWEGIAN = "no"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    BRAZILIAN_PORTUGUESE = "pt-br"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SINHALA = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    TAMIL = "ta"
    TATAR = "tt"
    TELUGU = "te"
    THAI = "th"
    THAI_TRANSCRIPTION = "x-tht"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    VIETNAMESE = "vi"
    OTHER = "x-other"
    UNKNOWN = "Unknown"

    @classmethod
    def from_xml(cls, value: str) -> TitleLanguage:
        """Read a language code; codes that are not known map to UNKNOWN."""
        alias = _LANGUAGE_ALIASES.get(value)
        if alias is not None:
            return alias
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


_LANGUAGE_ALIASES: dict[str, TitleLanguage] = {
    "Chinese": TitleLanguage.CHINESE,
    "zh-cmn": TitleLanguage.CHINESE,
    "zh-nan": TitleLanguage.CHINESE,
    "zh-yue": TitleLanguage.CHINESE,
    "Greek": TitleLanguage.GREEK,
    "grc": TitleLanguage.GREEK,
    "Spanish": TitleLanguage.SPANISH,
    "es-419": TitleLanguage.SPANISH,
}