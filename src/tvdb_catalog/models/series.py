"""Series and episode records decoded from catalog XML.

Field aliases are the XML tag names, so the decoder can map a record
element onto a model without any per-field code.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .fields import DelimitedList, UInt


class CatalogRecord(BaseModel):
    """Base for records whose field aliases are XML tag names."""

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def xml_tags(cls) -> dict[str, str]:
        """Map each XML tag to the field it populates."""
        return {
            (info.alias or name): name
            for name, info in cls.model_fields.items()
            if info.alias is not None
        }


class Episode(CatalogRecord):
    """A single episode, scoped to one season of one series."""

    id: UInt = Field(0, alias="id")
    combined_episode_number: str = Field("", alias="Combined_episodenumber")
    combined_season: UInt = Field(0, alias="Combined_season")
    dvd_chapter: str = Field("", alias="DVD_chapter")
    dvd_disc_id: str = Field("", alias="DVD_discid")
    dvd_episode_number: str = Field("", alias="DVD_episodenumber")
    dvd_season: str = Field("", alias="DVD_season")
    director: DelimitedList = Field(default_factory=list, alias="Director")
    ep_img_flag: str = Field("", alias="EpImgFlag")
    episode_name: str = Field("", alias="EpisodeName")
    episode_number: UInt = Field(0, alias="EpisodeNumber")
    first_aired: str = Field("", alias="FirstAired")
    guest_stars: str = Field("", alias="GuestStars")
    imdb_id: str = Field("", alias="IMDB_ID")
    language: str = Field("", alias="Language")
    overview: str = Field("", alias="Overview")
    production_code: str = Field("", alias="ProductionCode")
    rating: str = Field("", alias="Rating")
    rating_count: str = Field("", alias="RatingCount")
    season_number: UInt = Field(0, alias="SeasonNumber")
    writer: DelimitedList = Field(default_factory=list, alias="Writer")
    absolute_number: str = Field("", alias="absolute_number")
    filename: str = Field("", alias="filename")
    last_updated: str = Field("", alias="lastupdated")
    season_id: UInt = Field(0, alias="seasonid")
    series_id: UInt = Field(0, alias="seriesid")
    thumb_added: str = Field("", alias="thumb_added")
    thumb_height: str = Field("", alias="thumb_height")
    thumb_width: str = Field("", alias="thumb_width")


class Series(CatalogRecord):
    """A TV series.

    ``seasons`` maps season number to episodes in decode order. It stays
    ``None`` until the series is enriched with a full-record fetch.
    """

    id: UInt = Field(0, alias="id")
    actors: DelimitedList = Field(default_factory=list, alias="Actors")
    airs_day_of_week: str = Field("", alias="Airs_DayOfWeek")
    airs_time: str = Field("", alias="Airs_Time")
    content_rating: str = Field("", alias="ContentRating")
    first_aired: str = Field("", alias="FirstAired")
    genre: DelimitedList = Field(default_factory=list, alias="Genre")
    imdb_id: str = Field("", alias="IMDB_ID")
    language: str = Field("", alias="Language")
    network: str = Field("", alias="Network")
    network_id: str = Field("", alias="NetworkID")
    overview: str = Field("", alias="Overview")
    rating: str = Field("", alias="Rating")
    rating_count: str = Field("", alias="RatingCount")
    runtime: str = Field("", alias="Runtime")
    series_id: str = Field("", alias="SeriesID")  # Legacy ID, not the catalog ID
    series_name: str = Field("", alias="SeriesName")
    status: str = Field("", alias="Status")
    added: str = Field("", alias="added")
    added_by: str = Field("", alias="addedBy")
    banner: str = Field("", alias="banner")
    fanart: str = Field("", alias="fanart")
    last_updated: str = Field("", alias="lastupdated")
    poster: str = Field("", alias="poster")
    zap2it_id: str = Field("", alias="zap2it_id")

    # Not part of the wire format
    seasons: Optional[dict[int, list[Episode]]] = Field(default=None, exclude=True)

    @property
    def episode_count(self) -> int:
        """Total number of episodes attached across all seasons."""
        if not self.seasons:
            return 0
        return sum(len(episodes) for episodes in self.seasons.values())


class SeriesList(BaseModel):
    """Decode target for responses listing several series."""

    series: list[Series] = Field(default_factory=list)


class EpisodeList(BaseModel):
    """Decode target for responses listing episodes."""

    episodes: list[Episode] = Field(default_factory=list)
