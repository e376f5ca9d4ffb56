# teams_core/models.py
from __future__ import annotations
import math
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import (
    REFINE_MAX_ITER, MIN_RUNS, MAX_RUNS,
    SPICE_FRACTION, SPICE_TRIES, SPICE_TOLERANCE, SPICE_BASE_EPSILON,
)

Position = Literal["GK", "DEF", "MID", "ATT", "Any"]


class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    rating: float
    position: Position = "Any"
    is_gk: bool = False        # dedicated goalkeeper
    can_play_gk: bool = False  # outfielder who can cover GK

    @field_validator("rating")
    @classmethod
    def _finite(cls, v):
        if not math.isfinite(v):
            raise ValueError("rating must be a finite number")
        return v


class OptimizerConfig(BaseModel):
    refine_max_iter: int = Field(default=REFINE_MAX_ITER, ge=1)
    spice_enabled: bool = True
    spice_fraction: float = Field(default=SPICE_FRACTION, gt=0.0, le=1.0)
    spice_tries: int = Field(default=SPICE_TRIES, ge=0)
    spice_tolerance: float = Field(default=SPICE_TOLERANCE, ge=0.0)
    spice_base_epsilon: float = Field(default=SPICE_BASE_EPSILON, ge=0.0)
    min_runs: int = Field(default=MIN_RUNS, ge=1)
    max_runs: int = Field(default=MAX_RUNS, ge=1)
    random_seed: Optional[int] = None

    @model_validator(mode="after")
    def _runs_ordered(self):
        if self.max_runs < self.min_runs:
            raise ValueError("max_runs must be >= min_runs")
        return self


class TeamsResult(BaseModel):
    teams: List[List[Player]] = Field(default_factory=list)
    score: Optional[float] = None
    strengths: List[float] = Field(default_factory=list)
    run_scores: List[float] = Field(default_factory=list)
    error: Optional[str] = None
