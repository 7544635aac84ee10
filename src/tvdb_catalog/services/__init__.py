"""Catalog services - transport, decoding, season grouping and the client."""

from .aggregator import attach_seasons
from .catalog_client import CatalogClient
from .decoder import decode_episode_list, decode_series_into, decode_series_list
from .endpoints import CatalogEndpoints, Endpoint
from .search_page import AnchorPatternExtractor, SearchPageExtractor
from .transport import Fetcher, HttpFetcher

__all__ = [
    "AnchorPatternExtractor",
    "CatalogClient",
    "CatalogEndpoints",
    "Endpoint",
    "Fetcher",
    "HttpFetcher",
    "SearchPageExtractor",
    "attach_seasons",
    "decode_episode_list",
    "decode_series_into",
    "decode_series_list",
]
