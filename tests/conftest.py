"""Shared fixtures for catalog client tests."""

import pytest
from catalog_fixtures import API_KEY, FakeFetcher

from tvdb_catalog.core.config import CatalogConfig
from tvdb_catalog.services import CatalogClient, CatalogEndpoints


@pytest.fixture
def catalog_config():
    """Catalog config with an API key set."""
    return CatalogConfig(api_key=API_KEY)


@pytest.fixture
def fetcher():
    """Empty fake fetcher; tests fill in responses."""
    return FakeFetcher()


@pytest.fixture
def client(fetcher, catalog_config):
    """Catalog client wired to the fake fetcher."""
    return CatalogClient(fetcher, CatalogEndpoints(catalog_config))
