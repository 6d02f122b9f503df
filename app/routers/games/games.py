import logging

from fastapi import APIRouter, HTTPException, status

from app.dependencies import ActiveClient, ActiveTokenCache
from app.logic.games import (
    build_game_summary,
    build_genre_game,
    build_popular_game,
    fetch_game,
    fetch_games_by_genre,
    fetch_popular_games,
)
from app.models.games import GameSummary, GenreGame, PopularGame

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["games"],
    responses={404: {"description": "Not found"}},
)

INTERNAL_ERROR = "Internal server error"


@router.get("/game/{game_id}", response_model=GameSummary, status_code=status.HTTP_200_OK)
async def get_game(game_id: int, client: ActiveClient, token_cache: ActiveTokenCache):
    """Get one game from IGDB reshaped into a GameSummary."""
    try:
        record = await fetch_game(client, token_cache, game_id)
        summary = build_game_summary(record) if record else None
    except Exception:
        logger.exception(f"Error fetching game data for {game_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR,
        )

    if summary is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found",
        )
    return summary


@router.get("/popular", response_model=list[PopularGame], status_code=status.HTTP_200_OK)
async def get_popular_games(client: ActiveClient, token_cache: ActiveTokenCache):
    """
    Get the most rated games that have a cover or screenshots.

    Sorted by total_rating_count descending, at most 50 games.
    """
    try:
        records = await fetch_popular_games(client, token_cache)
        return [build_popular_game(record) for record in records]
    except Exception:
        logger.exception("Error fetching popular games")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR,
        )


@router.get("/genre/{genre_id}", response_model=list[GenreGame], status_code=status.HTTP_200_OK)
async def get_games_by_genre(genre_id: int, client: ActiveClient, token_cache: ActiveTokenCache):
    """Get the most rated games with a cover in one IGDB genre."""
    try:
        records = await fetch_games_by_genre(client, token_cache, genre_id)
        return [build_genre_game(record) for record in records]
    except Exception:
        logger.exception(f"Error fetching games for genre {genre_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR,
        )
