"""Titles and ratings shared by the API's data documents."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .enums import TitleType
from .errors import DeserializeError

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u32(raw: str | None, field: str) -> int:
    if raw is None:
        raise DeserializeError(f"missing field `{field}`")
    text = raw.strip()
    if not _UNSIGNED.fullmatch(text):
        raise DeserializeError(f"invalid value for `{field}`: {raw!r}")
    value = int(text)
    if value > _U32_MAX:
        raise DeserializeError(f"value for `{field}` out of range: {raw!r}")
    return value


def _parse_float(raw: str | None, field: str) -> float:
    if raw is None or not raw.strip():
        raise DeserializeError(f"missing field `{field}`")
    try:
        return float(raw.strip().replace("_", "!"))
    except ValueError:
        raise DeserializeError(f"invalid value for `{field}`: {raw!r}") from None


def _lang_attribute(element: ET.Element) -> str | None:
    return next(
        (value for key, value in element.attrib.items() if key == "lang" or key.endswith("}lang")),
        None,
    )


@dataclass(frozen=True)
class Title:
    """A title of an anime or episode in one language."""

    lang: str | None
    title_type: TitleType | None
    name: str

    @classmethod
    def from_element(cls, element: ET.Element) -> Title:
        """Read a ``<title>`` element."""
        raw_type = element.get("type")
        return cls(
            lang=_lang_attribute(element),
            title_type=None if raw_type is None else TitleType.from_xml(raw_type),
            name=(element.text or "").strip(),
        )


@dataclass(frozen=True)
class AnimeRating:
    """An average rating and the number of votes behind it."""

    votes: int
    value: float

    @classmethod
    def from_element(cls, element: ET.Element) -> AnimeRating:
        """Read a rating element such as ``<permanent count="...">8.16</permanent>``."""
        return cls(
            votes=_parse_u32(element.get("count"), "count"),
            value=_parse_float(element.text, "$value"),
        )


@dataclass(frozen=True)
class Ratings:
    """The permanent, temporary and review ratings of an anime."""

    permanent: AnimeRating | None = None
    temporary: AnimeRating | None = None
    review: AnimeRating | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> Ratings:
        """Read a ``<ratings>`` element; absent ratings become None."""

        def rating(tag: str) -> AnimeRating | None:
            child = element.find(tag)
            return None if child is None else AnimeRating.from_element(child)

        return cls(
            permanent=rating("permanent"),
            temporary=rating("temporary"),
            review=rating("review"),
        )