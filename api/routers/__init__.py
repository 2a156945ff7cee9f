"""
Router package for the training tracker API.

This package contains all API routers organized by domain:
- health: Liveness and readiness checks
- climbing: Grade histograms and per-grade climbing performance
- workouts: Scheduled workout completion statistics
- exercises: Per-exercise progress and hand imbalance
- goals: Quarterly grade goal progress
- calendar: Event display states and deload windows
- athletes: Profile metrics and urgency triage
"""

from api.routers.health import router as health_router
from api.routers.climbing import router as climbing_router
from api.routers.workouts import router as workouts_router
from api.routers.exercises import router as exercises_router
from api.routers.goals import router as goals_router
from api.routers.calendar import router as calendar_router
from api.routers.athletes import router as athletes_router

__all__ = [
    "health_router",
    "climbing_router",
    "workouts_router",
    "exercises_router",
    "goals_router",
    "calendar_router",
    "athletes_router",
]
