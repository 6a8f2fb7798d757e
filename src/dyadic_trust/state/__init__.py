"""Decaying bounded state primitives."""
from __future__ import annotations

from dyadic_trust.state.decaying_value import DEFAULT_HALF_LIFE, DecayingValue

__all__ = [
    "DEFAULT_HALF_LIFE",
    "DecayingValue",
]
