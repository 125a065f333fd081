"""
MyoEnergy Simulator Module

This module provides the high-level API to estimate the metabolic power of
simulated muscles.
"""

from myoenergy.simulator.core.metabolics import (
    ConstantSystemMass,
    MetabolicConfiguration,
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    MuscleState,
    StaticMuscleStateProvider,
    TabulatedMuscleStateProvider,
    Umberger2003MetabolicPowerProbe,
    minimum_total_rate_policy,
)

__all__ = [
    "ConstantSystemMass",
    "MetabolicConfiguration",
    "MetabolicMuscleParameter",
    "MetabolicMuscleParameterSet",
    "MuscleState",
    "StaticMuscleStateProvider",
    "TabulatedMuscleStateProvider",
    "Umberger2003MetabolicPowerProbe",
    "minimum_total_rate_policy",
]
