"""TrustPolicy — tunable constants for antecedent replay.

The defaults reproduce the reference dynamics: negative evidence counts
2.5x, positive evidence is discounted to 0.7x for six months after a
negative event, and evidence older than six months counts half.
"""
from __future__ import annotations

import datetime

from pydantic import BaseModel, Field


class TrustPolicy(BaseModel):
    """Configurable antecedent replay policy.

    Parameters
    ----------
    smoothing_alpha:
        EMA smoothing factor. Higher values let recent antecedents dominate.
    negative_weight:
        Multiplier applied to every negative antecedent.
    rebuilding_positive_weight:
        Multiplier applied to positive antecedents inside the rebuilding
        window that follows a negative antecedent.
    rebuilding_window_days:
        Length of the rebuilding window, in days.
    antecedent_half_life_days:
        Age at which an antecedent contributes half as much as a fresh one.
    max_history:
        Maximum number of antecedents retained per direction.
    """

    smoothing_alpha: float = Field(default=0.4, gt=0.0, le=1.0)
    negative_weight: float = Field(default=2.5, ge=0.0)
    rebuilding_positive_weight: float = Field(default=0.7, ge=0.0)
    rebuilding_window_days: float = Field(default=180.0, ge=0.0)
    antecedent_half_life_days: float = Field(default=180.0, gt=0.0)
    max_history: int = Field(default=100, ge=1)

    @property
    def rebuilding_window(self) -> datetime.timedelta:
        """The rebuilding window as a timedelta."""
        return datetime.timedelta(days=self.rebuilding_window_days)

    def validate_rebuilding(self) -> None:
        """Raise ValueError if the rebuilding weight would amplify positives."""
        if not 0.0 < self.rebuilding_positive_weight <= 1.0:
            raise ValueError(
                "rebuilding_positive_weight must be in (0, 1], "
                f"got {self.rebuilding_positive_weight:.6f}"
            )


DEFAULT_POLICY = TrustPolicy()
