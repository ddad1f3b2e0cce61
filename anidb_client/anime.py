"""The anime document returned by the API's ``anime`` request."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from .common import AnimeRating, Ratings, Title, _parse_u32
from .enums import AnimeType, TitleType
from .errors import DeserializeError, _read_root
from .models import (
    AnimeRelated,
    AnimeSimilar,
    Character,
    CharacterRating,
    Creator,
    Episode,
    EpisodeType,
    ExternalEntity,
    Recommendation,
    Resource,
    ResourceType,
    Seiyuu,
    Tag,
    _optional,
    _parse_bool,
    _required,
)

_T = TypeVar("_T")

# Member names whose serialized form is not the plain camel-cased name.
_VARIANT_NAMES: dict[Enum, str] = {
    ResourceType.ANIME_NFO: "AnimeNFO",
    ResourceType.BILIBILI: "BiliBili",
    ResourceType.HIDIVE: "HiDive",
    ResourceType.IMDB: "IMDB",
    ResourceType.QQ: "QQ",
    ResourceType.TMDB: "TMDB",
    ResourceType.YOUTUBE: "YouTube",
}


def _variant(member: Enum | None) -> str | None:
    """Serialized name of an enumeration member."""
    if member is None:
        return None
    if isinstance(member, (TitleType, EpisodeType, ResourceType)):
        named = _VARIANT_NAMES.get(member)
        if named is not None:
            return named
        return "".join(part.capitalize() for part in member.name.split("_"))
    return member.value


def _wrapped_list(
    element: ET.Element, wrapper: str, item: str, reader: Callable[[ET.Element], _T]
) -> list[_T]:
    container = element.find(wrapper)
    if container is None:
        return []
    return [reader(child) for child in container.findall(item)]


def _title_dict(title: Title) -> dict[str, Any]:
    return {"lang": title.lang, "type": _variant(title.title_type), "name": title.name}


def _rating_dict(rating: AnimeRating | None) -> dict[str, Any] | None:
    if rating is None:
        return None
    return {"count": rating.votes, "value": rating.value}


def _ratings_dict(ratings: Ratings | None) -> dict[str, Any] | None:
    if ratings is None:
        return None
    return {
        "permanent": _rating_dict(ratings.permanent),
        "temporary": _rating_dict(ratings.temporary),
        "review": _rating_dict(ratings.review),
    }


def _character_rating_dict(rating: CharacterRating | None) -> dict[str, Any] | None:
    if rating is None:
        return None
    return {"votes": rating.votes, "value": rating.value}


def _seiyuu_dict(seiyuu: Seiyuu | None) -> dict[str, Any] | None:
    if seiyuu is None:
        return None
    return {"id": seiyuu.creator_id, "picture": seiyuu.picture, "name": seiyuu.name}


def _character_dict(character: Character) -> dict[str, Any]:
    return {
        "id": character.character_id,
        "type": _variant(character.cast_type),
        "update": character.updated,
        "rating": _character_rating_dict(character.rating),
        "name": character.name,
        "gender": character.gender,
        "charactertype": character.character_type,
        "description": character.description,
        "picture": character.picture,
        "seiyuu": _seiyuu_dict(character.seiyuu),
    }


def _entity_dict(entity: ExternalEntity) -> dict[str, Any]:
    identifiers = None if entity.identifiers is None else list(entity.identifiers)
    return {"identifier": identifiers, "url": entity.url}


def _resource_dict(resource: Resource) -> dict[str, Any]:
    return {
        "type": _variant(resource.resource_type),
        "externalentity": [_entity_dict(entity) for entity in resource.external_entity],
    }


def _tag_dict(tag: Tag) -> dict[str, Any]:
    return {
        "id": tag.tag_id,
        "parentid": tag.parent_id,
        "weight": tag.weight,
        "localspoiler": tag.local_spoiler,
        "globalspoiler": tag.global_spoiler,
        "verified": tag.verified,
        "update": tag.updated,
        "name": tag.name,
        "description": tag.description,
        "picurl": tag.picture_url,
    }


def _episode_dict(episode: Episode) -> dict[str, Any]:
    return {
        "episode_id": episode.episode_id,
        "episode_num": episode.episode_num,
        "episode_type": _variant(episode.episode_type),
        "length": episode.length,
        "updated": episode.updated,
        "titles": [_title_dict(title) for title in episode.titles],
        "description": episode.description,
        "air_date": episode.air_date,
    }


@dataclass
class Anime:
    """Everything the API reports about one anime."""

    anime_id: str
    restricted: bool
    anime_type: AnimeType
    episode_count: int
    start_date: str | None = None
    end_date: str | None = None
    titles: list[Title] = field(default_factory=list)
    related_animes: list[AnimeRelated] = field(default_factory=list)
    similar_animes: list[AnimeSimilar] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    url: str | None = None
    creators: list[Creator] = field(default_factory=list)
    description: str | None = None
    ratings: Ratings | None = None
    picture: str | None = None
    resources: list[Resource] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    characters: list[Character] = field(default_factory=list)
    episodes: list[Episode] = field(default_factory=list)

    @classmethod
    def from_element(cls, element: ET.Element) -> Anime:
        """Read an ``<anime>`` element; absent lists become empty."""
        recommendations_element = element.find("recommendations")
        if recommendations_element is not None:
            _required(recommendations_element, "total")
        ratings_element = element.find("ratings")
        return cls(
            anime_id=_required(element, "id"),
            restricted=_parse_bool(_optional(element, "restricted"), "restricted"),
            anime_type=AnimeType.from_xml(_required(element, "type")),
            episode_count=_parse_u32(_optional(element, "episodecount"), "episodecount"),
            start_date=_optional(element, "startdate"),
            end_date=_optional(element, "enddate"),
            titles=_wrapped_list(element, "titles", "title", Title.from_element),
            related_animes=_wrapped_list(
                element, "relatedanime", "anime", AnimeRelated.from_element
            ),
            similar_animes=_wrapped_list(
                element, "similaranime", "anime", AnimeSimilar.from_element
            ),
            recommendations=_wrapped_list(
                element, "recommendations", "recommendation", Recommendation.from_element
            ),
            url=_optional(element, "url"),
            creators=_wrapped_list(element, "creators", "name", Creator.from_element),
            description=_optional(element, "description"),
            ratings=None if ratings_element is None else Ratings.from_element(ratings_element),
            picture=_optional(element, "picture"),
            resources=_wrapped_list(element, "resources", "resource", Resource.from_element),
            tags=_wrapped_list(element, "tags", "tag", Tag.from_element),
            characters=_wrapped_list(
                element, "characters", "character", Character.from_element
            ),
            episodes=_wrapped_list(element, "episodes", "episode", Episode.from_element),
        )

    @classmethod
    def from_xml(cls, text: str) -> Anime:
        """Read an anime document; raise DeserializeError if it is malformed."""
        return cls.from_element(_read_root(text))

    def to_dict(self) -> dict[str, Any]:
        """Plain data form of the anime, suitable for JSON."""
        return {
            "anime_id": self.anime_id,
            "restricted": self.restricted,
            "anime_type": _variant(self.anime_type),
            "episode_count": self.episode_count,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "titles": [_title_dict(title) for title in self.titles],
            "related_animes": [
                {"id": item.anime_id, "type": _variant(item.anime_type), "name": item.name}
                for item in self.related_animes
            ],
            "similar_animes": [
                {
                    "id": item.anime_id,
                    "approval": item.approval,
                    "total": item.total,
                    "name": item.name,
                }
                for item in self.similar_animes
            ],
            "recommendations": [
                {
                    "type": _variant(item.recommendation_type),
                    "uid": item.user_id,
                    "text": item.text,
                }
                for item in self.recommendations
            ],
            "url": self.url,
            "creators": [
                {"id": item.creator_id, "type": item.creator_type, "name": item.name}
                for item in self.creators
            ],
            "description": self.description,
            "ratings": _ratings_dict(self.ratings),
            "picture": self.picture,
            "resources": [_resource_dict(resource) for resource in self.resources],
            "tags": [_tag_dict(tag) for tag in self.tags],
            "characters": [_character_dict(character) for character in self.characters],
            "episodes": [_episode_dict(episode) for episode in self.episodes],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """The anime as a JSON document."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)