from datetime import datetime, timezone
from typing import Any, Optional

import httpx
import logging

from app.core.exceptions import UpstreamDataError
from app.logic.auth import TokenCache
from app.models.games import CompanyRoles, GameSummary, GenreGame, MediaUrl, PopularGame


logger = logging.getLogger(__name__)

IGDB_GAMES_URL = "https://api.igdb.com/v4/games"
IGDB_LIMIT = 50
POPULAR_MIN_RATING_COUNT = 50

UNKNOWN = "Desconhecido"

AGE_RATINGS = {
    1: "PEGI 3",
    2: "PEGI 7",
    3: "PEGI 12",
    4: "PEGI 16",
    5: "PEGI 18",
    6: "RP (Classificação Pendente)",
    7: "EC (Primeira Infância)",
    8: "E (Todos)",
    9: "E10+ (Todos +10)",
    10: "T (Adolescentes)",
    11: "M (Maduro 17+)",
    12: "AO (Apenas Adultos)",
}

GAME_DETAIL_FIELDS = (
    "name, summary, first_release_date, category, age_ratings.rating, "
    "cover.url, artworks.url, screenshots.url, platforms.name, "
    "involved_companies.company.name, involved_companies.developer, "
    "involved_companies.publisher"
)


# ============== QUERY BUILDERS ==============

def build_game_query(game_id: int) -> str:
    return f"fields {GAME_DETAIL_FIELDS}; where id = {game_id};"


def build_popular_query() -> str:
    return (
        "fields name, cover.url, screenshots.url; "
        f"where total_rating_count > {POPULAR_MIN_RATING_COUNT} & (cover != null | screenshots != null); "
        "sort total_rating_count desc; "
        f"limit {IGDB_LIMIT};"
    )


def build_genre_query(genre_id: int) -> str:
    return (
        "fields name, cover.url; "
        f"where genres = ({genre_id}) & cover != null; "
        "sort total_rating_count desc; "
        f"limit {IGDB_LIMIT};"
    )


# ============== EXTRACT FUNCTIONS ==============

async def query_igdb_games(client: httpx.AsyncClient, token_cache: TokenCache, query: str) -> list[dict]:
    """POST an IGDB query-language body to the games endpoint and return the records."""
    token = await token_cache.get_access_token()
    response = await client.post(
        IGDB_GAMES_URL,
        content=query,
        headers={
            "Client-ID": token_cache.client_id,
            "Authorization": f"Bearer {token}",
            "Content-Type": "text/plain",
        },
    )
    response.raise_for_status()

    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamDataError("IGDB returned a non-JSON body") from e

    if not isinstance(data, list):
        logger.warning(f"Expected list from IGDB but got {type(data).__name__}")
        raise UpstreamDataError(f"Unexpected IGDB response type: {type(data).__name__}")
    return data


async def fetch_game(client: httpx.AsyncClient, token_cache: TokenCache, game_id: int) -> Optional[dict]:
    """Fetch a single game record, or None when IGDB has no such id."""
    data = await query_igdb_games(client, token_cache, build_game_query(game_id))
    return data[0] if data else None


async def fetch_popular_games(client: httpx.AsyncClient, token_cache: TokenCache) -> list[dict]:
    return await query_igdb_games(client, token_cache, build_popular_query())


async def fetch_games_by_genre(client: httpx.AsyncClient, token_cache: TokenCache, genre_id: int) -> list[dict]:
    return await query_igdb_games(client, token_cache, build_genre_query(genre_id))


# ============== TRANSFORM FUNCTIONS ==============

def resolve_age_rating(code: Any) -> str:
    """Map an IGDB age rating code (1-12) to its label. Anything else is unknown."""
    if isinstance(code, bool) or not isinstance(code, int):
        return UNKNOWN
    return AGE_RATINGS.get(code, UNKNOWN)


def split_company_roles(involved_companies: Optional[list[dict]]) -> CompanyRoles:
    """
    Partition involved companies into developer and publisher names.

    Duplicates are dropped keeping first-occurrence order. A company flagged
    as both developer and publisher lands in both lists.
    """
    if not involved_companies:
        return CompanyRoles()

    developers: dict[str, None] = {}
    publishers: dict[str, None] = {}
    for entry in involved_companies:
        name = (entry.get("company") or {}).get("name")
        if name is None:
            continue
        if entry.get("developer"):
            developers.setdefault(name)
        if entry.get("publisher"):
            publishers.setdefault(name)

    return CompanyRoles(developers=list(developers), publishers=list(publishers))


def format_release_date(timestamp: Optional[float]) -> str:
    """Format an epoch-seconds release date as M/D/YYYY (UTC)."""
    if not timestamp:
        return UNKNOWN
    released = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return f"{released.month}/{released.day}/{released.year}"


def extract_cover(record: dict) -> Optional[MediaUrl]:
    cover = record.get("cover")
    return MediaUrl(url=cover.get("url")) if cover else None


def extract_media_urls(items: Optional[list[dict]]) -> list[MediaUrl]:
    return [MediaUrl(url=item.get("url")) for item in items or []]


def build_game_summary(record: dict) -> GameSummary:
    """Transform an IGDB game record into the GameSummary contract."""
    age_ratings = record.get("age_ratings") or []
    first_rating = age_ratings[0] if age_ratings else None
    age_rating = resolve_age_rating(first_rating.get("rating") if isinstance(first_rating, dict) else None)

    return GameSummary(
        id=record.get("id"),
        name=record.get("name"),
        summary=record.get("summary"),
        releaseDate=format_release_date(record.get("first_release_date")),
        cover=extract_cover(record),
        artworks=extract_media_urls(record.get("artworks")),
        screenshots=extract_media_urls(record.get("screenshots")),
        platforms=[p["name"] for p in record.get("platforms") or [] if p.get("name")],
        ageRating=age_rating,
        genres=record.get("genres") or [],
        companies=split_company_roles(record.get("involved_companies")),
    )


def build_popular_game(record: dict) -> PopularGame:
    return PopularGame(
        id=record.get("id"),
        name=record.get("name"),
        cover=extract_cover(record),
        screenshots=extract_media_urls(record.get("screenshots")),
    )


def build_genre_game(record: dict) -> GenreGame:
    return GenreGame(
        id=record.get("id"),
        name=record.get("name"),
        cover=extract_cover(record),
    )
