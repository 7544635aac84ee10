"""Endpoint descriptors for the catalog's XML API and search page."""

from dataclasses import dataclass, field

from tvdb_catalog.core.config import CatalogConfig
from tvdb_catalog.core.errors import ConfigurationError


@dataclass(frozen=True)
class Endpoint:
    """A request path relative to the catalog base URL, plus query params."""

    path: str
    params: dict[str, str] = field(default_factory=dict, hash=False)


class CatalogEndpoints:
    """Builds the endpoint for each logical catalog query."""

    def __init__(self, config: CatalogConfig):
        self.config = config

    def _keyed_prefix(self) -> str:
        if not self.config.api_key:
            raise ConfigurationError("An API key is required for this lookup")
        return f"/api/{self.config.api_key}/series"

    def series_by_name(self, name: str) -> Endpoint:
        return Endpoint("/api/GetSeries.php", {"seriesname": name})

    def series_by_id(self, series_id: int) -> Endpoint:
        return Endpoint(f"{self._keyed_prefix()}/{series_id}/{self.config.language}.xml")

    def series_by_imdb_id(self, imdb_id: str) -> Endpoint:
        return Endpoint("/api/GetSeriesByRemoteID.php", {"imdbid": imdb_id})

    def series_full_record(self, series_id: int) -> Endpoint:
        """Series metadata together with its whole episode roster."""
        return Endpoint(f"{self._keyed_prefix()}/{series_id}/all/{self.config.language}.xml")

    def web_search(self, name: str) -> Endpoint:
        return Endpoint(
            "/",
            {
                "string": name,
                "searchseriesid": "",
                "tab": "listseries",
                "function": "Search",
            },
        )
