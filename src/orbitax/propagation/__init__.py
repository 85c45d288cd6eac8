"""Spacecraft states and analytical keplerian propagation."""

from .keplerian import KeplerianPropagator, propagate
from .spacecraft_state import SpacecraftState

__all__ = [
    "SpacecraftState",
    "KeplerianPropagator",
    "propagate",
]
