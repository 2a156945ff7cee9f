"""
Climbing domain models.

Climb types, grade families and the climbing log entry as parsed from the
ClimbingLog table.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ClimbType(str, Enum):
    """Discipline a climb was logged under."""

    BOULDER = "Boulder"
    BOARD = "Board"
    LEAD = "Lead"


class GradeFamily(str, Enum):
    """
    Ordinal grading scale.

    Boulder and Board share the V-scale; Lead uses the French scale.
    Grade ids are only comparable within a family.
    """

    BOULDER = "boulder"
    LEAD = "lead"


def family_for(climb_type: ClimbType) -> GradeFamily:
    """Return the grade family a climb type is graded on."""
    if climb_type == ClimbType.LEAD:
        return GradeFamily.LEAD
    return GradeFamily.BOULDER


class GradeDefinition(BaseModel):
    """A single grade in a family (e.g. V4 / 6C+, or 6a / 5.10b)."""

    family: GradeFamily
    grade_id: int
    label: str
    alt_label: Optional[str] = Field(
        default=None,
        description="Secondary notation (Font grade for boulder, Yosemite for lead)",
    )

    @property
    def display(self) -> str:
        """Label with the secondary notation, e.g. 'V4 (6B+)'."""
        if self.alt_label:
            return f"{self.label} ({self.alt_label})"
        return self.label


class ClimbingLogEntry(BaseModel):
    """One logged route or problem."""

    log_id: Optional[int] = None
    owner: str
    climb_type: ClimbType
    grade_id: Optional[int] = None
    attempts: int = Field(default=1, ge=1)
    successful: bool = False
    logged_at: Optional[datetime] = None
    route_name: Optional[str] = None
    notes: Optional[str] = None
