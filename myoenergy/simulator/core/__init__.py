"""
Core components for the simulator package.

This module contains the core classes and functions that are used across
the simulator package, organized to eliminate circular dependencies.
"""

from .metabolics import (
    MetabolicConfiguration,
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    MuscleState,
    Umberger2003MetabolicPowerProbe,
)

__all__ = [
    "MetabolicConfiguration",
    "MetabolicMuscleParameter",
    "MetabolicMuscleParameterSet",
    "MuscleState",
    "Umberger2003MetabolicPowerProbe",
]
