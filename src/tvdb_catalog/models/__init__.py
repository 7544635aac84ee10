"""Pydantic models for catalog records."""

from .fields import DelimitedList, UInt, decode_delimited_list
from .series import CatalogRecord, Episode, EpisodeList, Series, SeriesList

__all__ = [
    "CatalogRecord",
    "DelimitedList",
    "Episode",
    "EpisodeList",
    "Series",
    "SeriesList",
    "UInt",
    "decode_delimited_list",
]
