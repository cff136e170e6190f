"""
Utilities for enriching parsed episode identities with TheTVDB metadata.

Functions:
- enrich: Resolve a RawIdentity to an EnrichedIdentity, raising on failure.
- try_enrich: Same lookup, but failures are returned instead of raised.
- enrich_and_build: Lookup followed by templating, for callers that only need the RenameOp.
"""
from typing import Callable

from telenamer.rename import formatter
from telenamer.rename.models import EnrichedIdentity, Enrichment, RawIdentity, RenameOp
from telenamer.utils import LogLevel, logger
from telenamer.utils.config import TVDBLogin
from telenamer.utils.errors import EnrichmentError
from telenamer.utils.tvdb import TVDBClient

ClientFactory = Callable[[TVDBLogin], TVDBClient]


def enrich(raw: RawIdentity, login: TVDBLogin, client_factory: ClientFactory = TVDBClient) -> EnrichedIdentity:
    """
    Look up the series and episode for `raw` on TheTVDB.

    Every call builds its own client and logs in on its own, so it is safe to
    run from many threads at once.

    Parameters:
    - raw (RawIdentity): Guess produced by the parser.
    - login (TVDBLogin): Credentials passed through verbatim.
    - client_factory: Builds the API client; replaced in tests.

    Returns:
    - EnrichedIdentity with the canonical series name, aired episode number and title.

    Raises:
    - AuthFailed, SeriesNotFound, EpisodeListFailed or EpisodeNotFound.
    """
    logger.log(
        "enrich.lookup",
        LogLevel.DEBUG,
        file=raw.file_name,
        search_term=raw.series,
        season=f"S{raw.season:02d}",
        episode=f"E{raw.episode:02d}",
    )
    client = client_factory(login)
    client.login()

    series = client.best_search(raw.series)
    # TheTVDB's spelling gives the correct capitalisation
    series_name = series.get("seriesName") or raw.series

    episode = client.get_episode(series, raw.season, raw.episode)
    return EnrichedIdentity(
        file_name=raw.file_name,
        container=raw.container,
        season=raw.season,
        episode=episode.get("airedEpisodeNumber", raw.episode),
        episode_title=episode.get("episodeName") or "",
        series=series_name,
    )


def try_enrich(raw: RawIdentity, login: TVDBLogin, client_factory: ClientFactory = TVDBClient) -> Enrichment:
    """Run `enrich` and report an EnrichmentError as part of the result instead of raising it."""
    try:
        return Enrichment(raw=raw, identity=enrich(raw, login, client_factory))
    except EnrichmentError as e:
        logger.log("enrich.fail", LogLevel.WARN, file=raw.file_name, error=e.__class__.__name__, msg=e.message)
        return Enrichment(raw=raw, error=e)


def enrich_and_build(
        raw: RawIdentity, login: TVDBLogin, template: str, client_factory: ClientFactory = TVDBClient
) -> RenameOp:
    """Enrich `raw` and build its RenameOp; raises EnrichmentError."""
    return formatter.build_rename(enrich(raw, login, client_factory), template)
