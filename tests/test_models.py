import xml.etree.ElementTree as ET

import pytest

from anidb_client.common import Title
from anidb_client.errors import DeserializeError, ParseError
from anidb_client.models import (
    AnimeRelated,
    AnimeRelationType,
    AnimeSimilar,
    Character,
    CharacterCastType,
    CharacterRating,
    Creator,
    Episode,
    EpisodeType,
    ExternalEntity,
    Recommendation,
    RecommendationType,
    Resource,
    ResourceType,
    Seiyuu,
    Tag,
)


def el(text):
    return ET.fromstring(text)


def test_anime_related():
    related = AnimeRelated.from_element(el('<anime id="4" type="Sequel">Seikai no Senki</anime>'))
    assert related == AnimeRelated(
        anime_id="4", anime_type=AnimeRelationType.SEQUEL, name="Seikai no Senki"
    )


def test_anime_related_missing_id():
    with pytest.raises(DeserializeError):
        AnimeRelated.from_element(el('<anime type="Sequel">Seikai no Senki</anime>'))


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Alternative Version", AnimeRelationType.ALTERNATIVE_VERSION),
        ("Side Story", AnimeRelationType.SIDE_STORY),
        ("Prequel", AnimeRelationType.PREQUEL),
    ],
)
def test_relation_type_from_xml(raw, expected):
    assert AnimeRelationType.from_xml(raw) is expected


def test_relation_type_unknown():
    with pytest.raises(DeserializeError):
        AnimeRelationType.from_xml("Cousin")


def test_anime_similar():
    similar = AnimeSimilar.from_element(
        el('<anime id="584" approval="75" total="89">Ginga Eiyuu Densetsu</anime>')
    )
    assert similar == AnimeSimilar(
        anime_id="584", approval=75, total=89, name="Ginga Eiyuu Densetsu"
    )


def test_anime_similar_negative_approval():
    with pytest.raises(DeserializeError):
        AnimeSimilar.from_element(el('<anime id="584" approval="-1" total="89">X</anime>'))


CHARACTER_XML = """<character id="28" type="main character in" update="2012-07-25">
    <rating votes="1196">9.15</rating>
    <name>Abriel Nei Debrusc Borl Paryun Lafiel</name>
    <gender>female</gender>
    <charactertype id="1">Character</charactertype>
    <description>Viscountess Paryunu Abriel Nei Dobrusk Lafiel"</description>
    <picture>14304.jpg</picture>
    <seiyuu id="12" picture="184301.jpg">Kawasumi Ayako</seiyuu>
</character>"""


def test_character():
    character = Character.from_element(el(CHARACTER_XML))
    assert character == Character(
        character_id="28",
        cast_type=CharacterCastType.CHARACTER,
        updated="2012-07-25",
        rating=CharacterRating(votes=1196, value=9.15),
        name="Abriel Nei Debrusc Borl Paryun Lafiel",
        gender="female",
        character_type="Character",
        description='Viscountess Paryunu Abriel Nei Dobrusk Lafiel"',
        picture="14304.jpg",
        seiyuu=Seiyuu(creator_id="12", picture="184301.jpg", name="Kawasumi Ayako"),
    )


def test_character_minimal():
    character = Character.from_element(el('<character id="7501"/>'))
    assert character.character_id == "7501"
    assert character.cast_type is None
    assert character.rating is None
    assert character.seiyuu is None


@pytest.mark.parametrize("member", list(CharacterCastType))
def test_cast_type_round_trip(member):
    assert CharacterCastType.from_xml(member.value) is member


def test_character_rating_bad_value():
    with pytest.raises(DeserializeError):
        CharacterRating.from_element(el('<rating votes="1">high</rating>'))


def test_creator():
    creator = Creator.from_element(el('<name id="4303" type="Music">Hattori Katsuhisa</name>'))
    assert creator == Creator(creator_id="4303", creator_type="Music", name="Hattori Katsuhisa")


def test_creator_missing_type():
    with pytest.raises(DeserializeError):
        Creator.from_element(el('<name id="4303">Hattori Katsuhisa</name>'))


EPISODE_XML = """<episode id="1012" update="2011-07-01">
    <epno type="1">3</epno>
    <length>25</length>
    <airdate>1999-01-17</airdate>
    <rating votes="19">7.31</rating>
    <title xml:lang="ja">愛の娘</title>
    <title xml:lang="en">Daughter of Love</title>
</episode>"""


def test_episode_with_number():
    episode = Episode.from_element(el(EPISODE_XML))
    assert episode == Episode(
        episode_id="1012",
        episode_num="3",
        episode_type=EpisodeType.EPISODE,
        length="25",
        updated="2011-07-01",
        titles=[
            Title(lang="ja", title_type=None, name="愛の娘"),
            Title(lang="en", title_type=None, name="Daughter of Love"),
        ],
        description=None,
        air_date="1999-01-17",
    )


def test_episode_without_number_or_titles():
    episode = Episode.from_element(el('<episode id="1"><length>25</length></episode>'))
    assert episode.episode_num is None
    assert episode.episode_type is None
    assert episode.titles == []
    assert episode.length == "25"


def test_episode_bad_type():
    with pytest.raises(ParseError):
        Episode.from_element(el('<episode id="1"><epno type="9">1</epno></episode>'))


@pytest.mark.parametrize("member", list(EpisodeType))
def test_episode_type_round_trip(member):
    assert EpisodeType.parse(str(member.value)) is member


@pytest.mark.parametrize("code, shown", [("1", "Episode"), ("3", "Special"), ("6", "Other")])
def test_episode_type_display(code, shown):
    assert str(EpisodeType.parse(code)) == shown


def test_episode_type_rejects_unknown():
    with pytest.raises(ParseError):
        EpisodeType.parse("7")


def test_recommendation():
    recommendation = Recommendation.from_element(
        el('<recommendation type="Must See" uid="691547">An awesome space opera</recommendation>')
    )
    assert recommendation == Recommendation(
        recommendation_type=RecommendationType.MUST_SEE,
        user_id="691547",
        text="An awesome space opera",
    )


def test_recommendation_type_unknown():
    with pytest.raises(DeserializeError):
        RecommendationType.from_xml("Avoid")


@pytest.mark.parametrize("member", list(ResourceType))
def test_resource_type_round_trip(member):
    assert ResourceType.parse(str(member.value)) is member


def test_resource_type_unknown():
    with pytest.raises(DeserializeError):
        ResourceType.parse("99")


RESOURCE_XML = """<resource type="1">
    <externalentity>
        <identifier>14</identifier>
    </externalentity>
    <externalentity>
        <identifier>376</identifier>
        <identifier>xzudnt</identifier>
    </externalentity>
</resource>"""


def test_resource_identifiers():
    resource = Resource.from_element(el(RESOURCE_XML))
    assert resource == Resource(
        resource_type=ResourceType.ANIME_NEWS_NETWORK,
        external_entity=[
            ExternalEntity(identifiers=["14"], url=None),
            ExternalEntity(identifiers=["376", "xzudnt"], url=None),
        ],
    )


def test_resource_url():
    resource = Resource.from_element(
        el(
            '<resource type="4"><externalentity>'
            "<url>http://www.sunrise-inc.co.jp/seikai/</url>"
            "</externalentity></resource>"
        )
    )
    assert resource.resource_type is ResourceType.OFFICIAL_WEBSITE
    assert resource.external_entity == [
        ExternalEntity(identifiers=None, url="http://www.sunrise-inc.co.jp/seikai/")
    ]


def test_resource_without_entities():
    with pytest.raises(DeserializeError):
        Resource.from_element(el('<resource type="4"/>'))


TAG_XML = """<tag id="36" parentid="2607" weight="300" localspoiler="false" globalspoiler="false"
    verified="true" update="2018-01-21">
    <name>military</name>
    <description>The military, ...</description>
    <picurl>212184.jpg</picurl>
</tag>"""


def test_tag():
    tag = Tag.from_element(el(TAG_XML))
    assert tag == Tag(
        tag_id="36",
        parent_id="2607",
        weight=300,
        local_spoiler=False,
        global_spoiler=False,
        verified=True,
        updated="2018-01-21",
        name="military",
        description="The military, ...",
        picture_url="212184.jpg",
    )


def test_tag_numeric_booleans():
    tag = Tag.from_element(
        el('<tag id="1" weight="0" localspoiler="1" globalspoiler="0" verified="1"/>')
    )
    assert tag.local_spoiler is True
    assert tag.global_spoiler is False
    assert tag.verified is True
    assert tag.parent_id is None


def test_tag_bad_boolean():
    with pytest.raises(DeserializeError):
        Tag.from_element(
            el('<tag id="1" weight="0" localspoiler="yes" globalspoiler="0" verified="1"/>')
        )


def test_tag_missing_weight():
    with pytest.raises(DeserializeError):
        Tag.from_element(el('<tag id="1" localspoiler="0" globalspoiler="0" verified="1"/>'))