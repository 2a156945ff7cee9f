"""
Quarterly grade goals.

Goal rows store one integer column per grade. Boulder and Board rows use
``V0``..``V17`` where the number is the boulder grade id; Lead rows use the
French grade label as the column name.
"""

from typing import Dict, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.climbing import ClimbType, GradeDefinition, GradeFamily, family_for


BOULDER_GOAL_COLUMNS: Tuple[str, ...] = tuple(f"V{i}" for i in range(18))

LEAD_GOAL_COLUMNS: Tuple[str, ...] = (
    "5c",
    "6a", "6a+", "6b", "6b+", "6c", "6c+",
    "7a", "7a+", "7b", "7b+", "7c", "7c+",
    "8a", "8a+", "8b", "8b+", "8c", "8c+",
    "9a", "9a+", "9b", "9b+",
)

# Lead grades below 5c (LeadGradeID 8) are not tracked as goals
LEAD_GOAL_MIN_GRADE_ID = 8


def goal_columns_for(climb_type: ClimbType) -> Tuple[str, ...]:
    """Return the goal columns stored for a climb type."""
    if family_for(climb_type) == GradeFamily.LEAD:
        return LEAD_GOAL_COLUMNS
    return BOULDER_GOAL_COLUMNS


class QuarterlyGoal(BaseModel):
    """Target climb counts per grade for one owner, quarter and climb type."""

    owner: str
    year: int
    quarter: int = Field(ge=1, le=4)
    climb_type: ClimbType
    targets: Dict[str, int] = Field(default_factory=dict)

    @field_validator("targets")
    @classmethod
    def validate_targets(cls, v: Dict[str, int]) -> Dict[str, int]:
        for column, target in v.items():
            if target < 0:
                raise ValueError(f"Goal target for {column} must be >= 0, got {target}")
        return v

    @model_validator(mode="after")
    def validate_columns(self) -> "QuarterlyGoal":
        allowed = set(goal_columns_for(self.climb_type))
        unknown = sorted(set(self.targets) - allowed)
        if unknown:
            raise ValueError(
                f"Unknown {self.climb_type.value} goal columns: {', '.join(unknown)}"
            )
        return self

    def target_for(self, grade: GradeDefinition) -> int:
        """Target count for a grade definition, 0 when no goal is set."""
        if grade.family == GradeFamily.LEAD:
            key = grade.label
        else:
            key = f"V{grade.grade_id}"
        return self.targets.get(key, 0)
