"""Tests for endpoint construction."""

import pytest

from tvdb_catalog.core.config import CatalogConfig
from tvdb_catalog.core.errors import ConfigurationError
from tvdb_catalog.services.endpoints import CatalogEndpoints


@pytest.fixture
def endpoints():
    return CatalogEndpoints(CatalogConfig(api_key="KEY", language="de"))


def test_keyed_endpoints(endpoints):
    """Test paths that embed the API key and language."""
    assert endpoints.series_by_id(71663).path == "/api/KEY/series/71663/de.xml"
    assert endpoints.series_full_record(71663).path == "/api/KEY/series/71663/all/de.xml"


def test_query_endpoints(endpoints):
    """Test endpoints that pass the query as parameters."""
    by_name = endpoints.series_by_name("The Simpsons")
    assert by_name.path == "/api/GetSeries.php"
    assert by_name.params == {"seriesname": "The Simpsons"}

    by_imdb = endpoints.series_by_imdb_id("tt0096697")
    assert by_imdb.path == "/api/GetSeriesByRemoteID.php"
    assert by_imdb.params == {"imdbid": "tt0096697"}


def test_web_search_endpoint(endpoints):
    """Test the HTML search page parameters."""
    endpoint = endpoints.web_search("Dexter")

    assert endpoint.path == "/"
    assert endpoint.params["string"] == "Dexter"
    assert endpoint.params["tab"] == "listseries"
    assert endpoint.params["function"] == "Search"
    assert endpoint.params["searchseriesid"] == ""


def test_keyed_endpoint_requires_api_key():
    """Test that lookups needing a key fail without one."""
    endpoints = CatalogEndpoints(CatalogConfig())

    with pytest.raises(ConfigurationError):
        endpoints.series_by_id(1)

    # Keyless endpoints still work
    assert endpoints.series_by_name("x").path == "/api/GetSeries.php"


def test_endpoints_are_hashable(endpoints):
    """Test that descriptors can be used as set members and dict keys."""
    first = endpoints.series_by_name("Dexter")
    again = endpoints.series_by_name("Dexter")

    assert hash(first) == hash(again)
    assert {first: "cached"}[again] == "cached"
    assert len({first, again, endpoints.series_by_id(1)}) == 2
