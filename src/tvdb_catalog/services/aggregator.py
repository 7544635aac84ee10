"""Group a flat episode roster into a series' seasons."""

from collections.abc import Iterable

from tvdb_catalog.models import Episode, Series


def attach_seasons(series: Series, episodes: Iterable[Episode]) -> None:
    """
    Append episodes to ``series.seasons`` keyed by season number.

    Episodes keep the order they were given in. Existing entries are never
    replaced or deduplicated, so attaching the same roster twice lists every
    episode twice.

    Args:
        series: Series to update in place
        episodes: Episodes in decode order
    """
    if series.seasons is None:
        series.seasons = {}

    for episode in episodes:
        series.seasons.setdefault(episode.season_number, []).append(episode)
