"""Catalog client: series search, lookup and episode enrichment."""

from collections.abc import Iterable
from typing import Optional

import structlog

from tvdb_catalog.core.errors import InvalidCatalogID, MalformedDocument, UnexpectedResultCount
from tvdb_catalog.models import Series
from tvdb_catalog.models.fields import UINT64_MAX

from .aggregator import attach_seasons
from .decoder import decode_episode_list, decode_series_into, decode_series_list
from .endpoints import CatalogEndpoints, Endpoint
from .search_page import AnchorPatternExtractor, SearchPageExtractor
from .transport import Fetcher

logger = structlog.get_logger()


def _parse_catalog_id(raw: str) -> int:
    series_id = int(raw)
    if series_id > UINT64_MAX:
        raise InvalidCatalogID(raw)
    return series_id


class CatalogClient:
    """Client for the catalog's XML API and HTML search page.

    Every operation is blocking and issues its requests one at a time.
    Errors from the fetcher or decoder reach the caller unchanged.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        endpoints: CatalogEndpoints,
        extractor: Optional[SearchPageExtractor] = None,
    ):
        """
        Initialize the catalog client.

        Args:
            fetcher: Transport used for every request
            endpoints: Builds the endpoint for each query
            extractor: Search page ID extractor, anchor pattern by default
        """
        self.fetcher = fetcher
        self.endpoints = endpoints
        self.extractor = extractor or AnchorPatternExtractor()

    def _fetch_single(self, endpoint: Endpoint) -> Series:
        data = self.fetcher.fetch(endpoint)
        series_list = decode_series_list(data)

        if len(series_list.series) != 1:
            raise UnexpectedResultCount(len(series_list.series))

        return series_list.series[0]

    def search_by_name(self, name: str) -> list[Series]:
        """
        Search for series by name.

        Args:
            name: Show name to search for

        Returns:
            Matching series without seasons, empty if nothing matched
        """
        logger.info("series_search", name=name)
        data = self.fetcher.fetch(self.endpoints.series_by_name(name))
        results = decode_series_list(data).series
        logger.info("series_search_complete", name=name, count=len(results))
        return results

    def get_by_catalog_id(self, series_id: int) -> Series:
        """
        Get a series by its catalog ID.

        Raises:
            UnexpectedResultCount: If the response does not hold exactly one series
        """
        logger.info("series_lookup", series_id=series_id)
        return self._fetch_single(self.endpoints.series_by_id(series_id))

    def get_by_external_id(self, external_id: str) -> Series:
        """
        Get a series by its IMDb ID.

        Raises:
            UnexpectedResultCount: If the response does not hold exactly one series
        """
        logger.info("series_lookup_external", external_id=external_id)
        return self._fetch_single(self.endpoints.series_by_imdb_id(external_id))

    def enrich_series(self, series: Series) -> None:
        """
        Fetch the full record of a series and attach its episodes in place.

        The full record carries the series metadata and its episode roster
        in one document, so the same body is decoded twice. Episodes are
        appended to any seasons already attached.

        Args:
            series: Series to update, identified by its ``id``
        """
        data = self.fetcher.fetch(self.endpoints.series_full_record(series.id))

        decode_series_into(data, series)
        episodes = decode_episode_list(data).episodes
        attach_seasons(series, episodes)

        logger.info(
            "series_enriched",
            series_id=series.id,
            seasons=len(series.seasons or {}),
            episodes=len(episodes),
        )

    def enrich_all(self, series_list: Iterable[Series]) -> None:
        """
        Enrich each series in order, stopping at the first failure.

        Series enriched before the failure keep their new data.
        """
        for series in series_list:
            self.enrich_series(series)

    def search_web(self, name: str, max_results: Optional[int] = None) -> list[Series]:
        """
        Search the catalog's web page and resolve each hit by ID.

        Candidate IDs are taken in page order and each distinct ID is looked
        up once. Candidates whose lookup returns a malformed document are
        skipped; any other error aborts the search.

        Args:
            name: Show name to search for
            max_results: Stop once this many series are collected; None or
                0 and below mean no limit

        Returns:
            Series in the order their IDs first appear on the page
        """
        logger.info("web_search", name=name, max_results=max_results)
        page = self.fetcher.fetch(self.endpoints.web_search(name))

        results: list[Series] = []
        seen: set[int] = set()

        for raw_id in self.extractor.extract_ids(page):
            # Parsed before the duplicate check, so a bad duplicate still aborts
            series_id = _parse_catalog_id(raw_id)
            if series_id in seen:
                continue
            seen.add(series_id)

            try:
                series = self.get_by_catalog_id(series_id)
            except MalformedDocument as e:
                logger.debug("search_candidate_skipped", series_id=series_id, error=str(e))
                continue

            results.append(series)
            if max_results is not None and max_results > 0 and len(results) == max_results:
                break

        logger.info("web_search_complete", name=name, count=len(results))
        return results
