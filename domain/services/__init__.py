"""
Domain services containing pure business logic.
"""

from domain.services.rating_statistics_service import RatingStatistics, RatingStatisticsService
from domain.services.squad_validation_service import (
    SquadCheck,
    SquadValidationService,
    ValidationReport,
)

__all__ = [
    "RatingStatistics",
    "RatingStatisticsService",
    "SquadCheck",
    "SquadValidationService",
    "ValidationReport",
]
