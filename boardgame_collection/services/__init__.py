from __future__ import annotations

from boardgame_collection.services.filter_service import FilterCriteria, FilterService, filter_games
from boardgame_collection.services.recommendation_service import RecommendationService, recommended_games
from boardgame_collection.services.statistics_service import (
    CollectionStatistics,
    average_session_rating,
    collection_statistics,
    cost_per_session,
    count_by_genre,
    count_by_status,
    total_count,
    unplayed_games,
)

__all__: list[str] = [
    "CollectionStatistics",
    "FilterCriteria",
    "FilterService",
    "RecommendationService",
    "average_session_rating",
    "collection_statistics",
    "cost_per_session",
    "count_by_genre",
    "count_by_status",
    "filter_games",
    "recommended_games",
    "total_count",
    "unplayed_games",
]
