"""Series ID extraction from the catalog's HTML search page."""

import re
from typing import Protocol


class SearchPageExtractor(Protocol):
    """Pulls candidate series IDs out of a search results page."""

    def extract_ids(self, page: bytes) -> list[str]:
        """Return raw decimal IDs in page order, duplicates included."""
        ...


class AnchorPatternExtractor:
    """Finds series links of the form ``/?tab=series&amp;id=N&amp;lid=M``."""

    PATTERN = re.compile(rb'<a href="/\?tab=series&amp;id=(?P<series_id>\d+)&amp;lid=\d*">')

    def extract_ids(self, page: bytes) -> list[str]:
        return [
            match.group("series_id").decode("ascii")
            for match in self.PATTERN.finditer(page)
        ]
