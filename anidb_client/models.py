"""Parts of an anime document: relations, characters, episodes, resources and tags."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum

from .common import Title, _parse_float, _parse_u32
from .enums import _unknown_variant
from .errors import DeserializeError, ParseError


def _optional(element: ET.Element, name: str) -> str | None:
    """Value of an attribute or, failing that, the text of a child element."""
    raw = element.get(name)
    if raw is not None:
        return raw
    child = element.find(name)
    if child is None:
        return None
    return (child.text or "").strip()


def _required(element: ET.Element, name: str) -> str:
    value = _optional(element, name)
    if value is None:
        raise DeserializeError(f"missing field `{name}`")
    return value


def _optional_content(element: ET.Element) -> str | None:
    text = (element.text or "").strip()
    return text or None


def _required_content(element: ET.Element) -> str:
    text = _optional_content(element)
    if text is None:
        raise DeserializeError("missing field `$value`")
    return text


def _parse_bool(raw: str | None, name: str) -> bool:
    if raw is None:
        raise DeserializeError(f"missing field `{name}`")
    value = raw.strip()
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    raise DeserializeError(f"invalid value for `{name}`: {raw!r}")


def _optional_child(element: ET.Element, name: str, reader):
    child = element.find(name)
    return None if child is None else reader(child)


def _from_wire(enum_type, value: str):
    """Member of an enumeration whose values are the strings the API writes."""
    try:
        return enum_type(value)
    except ValueError:
        raise _unknown_variant(enum_type, value) from None


class AnimeRelationType(Enum):
    """How a related anime relates to the anime it is listed under."""

    PREQUEL = "Prequel"
    ALTERNATIVE_VERSION = "Alternative Version"
    CHARACTER = "Character"
    OTHER = "Other"
    ALTERNATIVE_SETTING = "Alternative Setting"
    FULL_STORY = "Full Story"
    SUMMARY = "Summary"
    SAME_SETTING = "Same Setting"
    SIDE_STORY = "Side Story"
    PARENT_STORY = "Parent Story"
    SEQUEL = "Sequel"

    @classmethod
    def from_xml(cls, value: str) -> AnimeRelationType:
        """Read the value as written in the API's documents."""
        return _from_wire(cls, value)


@dataclass(frozen=True)
class AnimeRelated:
    """An anime related to another one."""

    anime_id: str
    anime_type: AnimeRelationType
    name: str

    @classmethod
    def from_element(cls, element: ET.Element) -> AnimeRelated:
        """Read an ``<anime>`` element of a ``<relatedanime>`` list."""
        return cls(
            anime_id=_required(element, "id"),
            anime_type=AnimeRelationType.from_xml(_required(element, "type")),
            name=_required_content(element),
        )


@dataclass(frozen=True)
class AnimeSimilar:
    """An anime users consider similar, with the votes for that."""

    anime_id: str
    approval: int
    total: int
    name: str

    @classmethod
    def from_element(cls, element: ET.Element) -> AnimeSimilar:
        """Read an ``<anime>`` element of a ``<similaranime>`` list."""
        return cls(
            anime_id=_required(element, "id"),
            approval=_parse_u32(_optional(element, "approval"), "approval"),
            total=_parse_u32(_optional(element, "total"), "total"),
            name=_required_content(element),
        )


class CharacterCastType(Enum):
    """Role a character plays in an anime."""

    CHARACTER = "main character in"
    SECONDARY = "secondary cast in"
    APPEARS_IN = "appears in"
    CAMEO = "cameo appearance in"

    @classmethod
    def from_xml(cls, value: str) -> CharacterCastType:
        """Read the value as written in the API's documents."""
        return _from_wire(cls, value)


@dataclass(frozen=True)
class CharacterRating:
    """Average rating of a character and the number of votes."""

    votes: int
    value: float

    @classmethod
    def from_element(cls, element: ET.Element) -> CharacterRating:
        """Read a ``<rating votes="...">`` element."""
        return cls(
            votes=_parse_u32(_optional(element, "votes"), "votes"),
            value=_parse_float(element.text, "$value"),
        )


@dataclass(frozen=True)
class Seiyuu:
    """Voice actor of a character."""

    creator_id: str
    picture: str | None
    name: str | None

    @classmethod
    def from_element(cls, element: ET.Element) -> Seiyuu:
        """Read a ``<seiyuu>`` element."""
        return cls(
            creator_id=_required(element, "id"),
            picture=_optional(element, "picture"),
            name=_optional_content(element),
        )


@dataclass(frozen=True)
class Character:
    """A character appearing in an anime."""

    character_id: str
    cast_type: CharacterCastType | None
    updated: str | None
    rating: CharacterRating | None
    name: str | None
    gender: str | None
    character_type: str | None
    description: str | None
    picture: str | None
    seiyuu: Seiyuu | None

    @classmethod
    def from_element(cls, element: ET.Element) -> Character:
        """Read a ``<character>`` element."""
        raw_cast = _optional(element, "type")
        return cls(
            character_id=_required(element, "id"),
            cast_type=None if raw_cast is None else CharacterCastType.from_xml(raw_cast),
            updated=_optional(element, "update"),
            rating=_optional_child(element, "rating", CharacterRating.from_element),
            name=_optional(element, "name"),
            gender=_optional(element, "gender"),
            character_type=_optional(element, "charactertype"),
            description=_optional(element, "description"),
            picture=_optional(element, "picture"),
            seiyuu=_optional_child(element, "seiyuu", Seiyuu.from_element),
        )


@dataclass(frozen=True)
class Creator:
    """A person or company credited for an anime."""

    creator_id: str
    creator_type: str
    name: str

    @classmethod
    def from_element(cls, element: ET.Element) -> Creator:
        """Read a ``<name>`` element of a ``<creators>`` list."""
        return cls(
            creator_id=_required(element, "id"),
            creator_type=_required(element, "type"),
            name=_required_content(element),
        )


class EpisodeType(Enum):
    """Kind of an episode."""

    EPISODE = 1
    CREDITS = 2
    SPECIAL = 3
    TRAILER = 4
    PARODY = 5
    OTHER = 6

    @classmethod
    def parse(cls, value: str) -> EpisodeType:
        """Read the numeric code the API writes; raise ParseError if unknown."""
        for member in cls:
            if str(member.value) == value:
                return member
        raise ParseError("Error parse &str to EpisodeType")

    def __str__(self) -> str:
        return self.name.title()


@dataclass
class Episode:
    """An episode of an anime."""

    episode_id: str
    episode_num: str | None
    episode_type: EpisodeType | None
    length: str | None
    updated: str | None
    titles: list[Title] = field(default_factory=list)
    description: str | None = None
    air_date: str | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> Episode:
        """Read an ``<episode>`` element."""
        epno = element.find("epno")
        if epno is None:
            episode_num, raw_type = None, None
        else:
            episode_num, raw_type = _optional_content(epno), epno.get("type")
        return cls(
            episode_id=_required(element, "id"),
            episode_num=episode_num,
            episode_type=None if raw_type is None else EpisodeType.parse(raw_type),
            length=_optional(element, "length"),
            updated=_optional(element, "update"),
            titles=[Title.from_element(child) for child in element.findall("title")],
            description=_optional(element, "description"),
            air_date=_optional(element, "airdate"),
        )


class RecommendationType(Enum):
    """Strength of a user's recommendation."""

    FOR_FANS = "For Fans"
    MUST_SEE = "Must See"
    RECOMMENDED = "Recommended"

    @classmethod
    def from_xml(cls, value: str) -> RecommendationType:
        """Read the value as written in the API's documents."""
        return _from_wire(cls, value)


@dataclass(frozen=True)
class Recommendation:
    """A user's recommendation of an anime."""

    recommendation_type: RecommendationType
    user_id: str
    text: str

    @classmethod
    def from_element(cls, element: ET.Element) -> Recommendation:
        """Read a ``<recommendation>`` element."""
        return cls(
            recommendation_type=RecommendationType.from_xml(_required(element, "type")),
            user_id=_required(element, "uid"),
            text=_required_content(element),
        )


class ResourceType(Enum):
    """External site a resource points to, by the API's numeric code."""

    DOT_LAIN = 11
    ALLCINEMA = 9
    AMAZON_PRIME_VIDEO = 48
    AMAZON_VIDEO = 32
    ANIMEMORIAL = 16
    ANIME_NEWS_NETWORK = 1
    ANIME_NFO = 3
    ANISON = 10
    BAIDU_BAIKE = 33
    BANGUMI = 38
    BILIBILI = 47
    CHINESE_WIKIPEDIA = 20
    CRUNCHYROLL = 28
    DOUBAN = 39
    ENGLISH_WIKIPEDIA = 6
    FACEBOOK = 22
    FUNIMATION = 45
    HIDIVE = 42
    IMDB = 43
    JAPANESE_WIKIPEDIA = 7
    KOREAN_WIKIPEDIA = 19
    MARUMEGANE = 15
    MEDIA_ART_DATABASE = 31
    MY_ANIME_LIST = 2
    NETFLIX = 41
    OFFICIAL_BLOG = 35
    OFFICIAL_ENGLISH_WEBSITE = 5
    OFFICIAL_STREAM = 34
    OFFICIAL_WEBSITE = 4
    QQ = 46
    SYOBOI = 8
    TMDB = 44
    TV_ANIMATION_MUSEUM = 17
    TWITTER = 23
    VISUAL_NOVEL_DATABASE = 14
    YOUTUBE = 26

    @classmethod
    def parse(cls, value: str) -> ResourceType:
        """Read the numeric code the API writes; raise DeserializeError if unknown."""
        for member in cls:
            if str(member.value) == value:
                return member
        raise _unknown_variant(cls, value)


@dataclass
class ExternalEntity:
    """Identifiers or a URL on an external site."""

    identifiers: list[str] | None = None
    url: str | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> ExternalEntity:
        """Read an ``<externalentity>`` element."""
        found = [(child.text or "").strip() for child in element.findall("identifier")]
        return cls(identifiers=found or None, url=_optional(element, "url"))


@dataclass
class Resource:
    """Entries for an anime on one external site."""

    resource_type: ResourceType
    external_entity: list[ExternalEntity]

    @classmethod
    def from_element(cls, element: ET.Element) -> Resource:
        """Read a ``<resource>`` element."""
        entities = element.findall("externalentity")
        if not entities:
            raise DeserializeError("missing field `externalentity`")
        return cls(
            resource_type=ResourceType.parse(_required(element, "type")),
            external_entity=[ExternalEntity.from_element(child) for child in entities],
        )


@dataclass(frozen=True)
class Tag:
    """A tag attached to an anime."""

    tag_id: str
    parent_id: str | None
    weight: int
    local_spoiler: bool
    global_spoiler: bool
    verified: bool
    updated: str | None
    name: str | None
    description: str | None
    picture_url: str | None

    @classmethod
    def from_element(cls, element: ET.Element) -> Tag:
        """Read a ``<tag>`` element."""
        return cls(
            tag_id=_required(element, "id"),
            parent_id=_optional(element, "parentid"),
            weight=_parse_u32(_optional(element, "weight"), "weight"),
            local_spoiler=_parse_bool(_optional(element, "localspoiler"), "localspoiler"),
            global_spoiler=_parse_bool(_optional(element, "globalspoiler"), "globalspoiler"),
            verified=_parse_bool(_optional(element, "verified"), "verified"),
            updated=_optional(element, "update"),
            name=_optional(element, "name"),
            description=_optional(element, "description"),
            picture_url=_optional(element, "picurl"),
        )