"""Tests for the delimited list and unsigned integer field types."""

import pytest
from pydantic import ValidationError

from tvdb_catalog.models import Episode, Series, decode_delimited_list


def test_delimited_list_splits_wrapped_values():
    """Test a standard pipe-wrapped list."""
    assert decode_delimited_list("|Dan Castellaneta|Julie Kavner|") == [
        "Dan Castellaneta",
        "Julie Kavner",
    ]


@pytest.mark.parametrize("raw", ["", "|", "||"])
def test_delimited_list_empty_yields_single_empty_item(raw):
    """Test that empty content is not special-cased."""
    assert decode_delimited_list(raw) == [""]


@pytest.mark.parametrize("inner", ["x", "x|y", "|x|", "a||b", " spaced | out "])
def test_delimited_list_strips_only_one_wrapper(inner):
    """Test that exactly one leading and trailing delimiter are removed."""
    assert decode_delimited_list("|" + inner + "|") == inner.split("|")


def test_delimited_list_without_wrapper():
    """Test content that is not wrapped is still split."""
    assert decode_delimited_list("Drama|Comedy") == ["Drama", "Comedy"]


def test_delimited_list_custom_delimiter():
    """Test a delimiter other than the pipe."""
    assert decode_delimited_list(",a,b,", delimiter=",") == ["a", "b"]


def test_model_decodes_delimited_alias():
    """Test that list fields accept raw strings by tag name."""
    series = Series.model_validate({"Genre": "|Animation|Comedy|"})

    assert series.genre == ["Animation", "Comedy"]
    assert series.actors == []


def test_unsigned_fields_trim_and_default():
    """Test whitespace and empty handling of numeric tags."""
    episode = Episode.model_validate({"SeasonNumber": " 3 ", "EpisodeNumber": ""})

    assert episode.season_number == 3
    assert episode.episode_number == 0


@pytest.mark.parametrize("raw", ["-1", "abc", "1.5", "18446744073709551616"])
def test_unsigned_fields_reject_invalid_text(raw):
    """Test that non-numeric and out of range values fail validation."""
    with pytest.raises(ValidationError):
        Episode.model_validate({"id": raw})


def test_fields_populate_by_name():
    """Test that models can be built with Python field names."""
    series = Series(id=71663, series_name="The Simpsons")

    assert series.id == 71663
    assert series.series_name == "The Simpsons"
    assert series.seasons is None
    assert series.episode_count == 0


def test_catalog_id_limit_matches_field_limit():
    """Test that the largest unsigned 64-bit ID decodes and scrapes alike."""
    from tvdb_catalog.models.fields import UINT64_MAX
    from tvdb_catalog.services.catalog_client import _parse_catalog_id

    assert Episode.model_validate({"id": str(UINT64_MAX)}).id == UINT64_MAX
    assert _parse_catalog_id(str(UINT64_MAX)) == UINT64_MAX
