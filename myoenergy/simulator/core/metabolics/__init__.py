"""
Metabolic energy models.

This module contains the muscle metabolic power model of Umberger et al. (2003),
its parameter containers and the collaborators it reads muscle states from.
"""

from .configuration import MetabolicConfiguration
from .errors import (
    ConfigurationError,
    DomainError,
    MetabolicRateWarning,
    MetabolicsError,
    MuscleReferenceError,
)
from .parameters import MetabolicMuscleParameter, MetabolicMuscleParameterSet
from .probe import (
    MetabolicPowerBreakdown,
    Umberger2003MetabolicPowerProbe,
    aggregate_metabolic_power,
    compute_basal_rate,
    minimum_total_rate_policy,
)
from .providers import (
    ConstantSystemMass,
    StaticMuscleStateProvider,
    TabulatedMuscleStateProvider,
)
from .resolver import BoundMetabolicMuscle, resolve_metabolic_muscles
from .state import MuscleState, MuscleStateProvider, SystemMassProvider
from .umberger2003 import MuscleEnergyRates, compute_muscle_energy_rates

__all__ = [
    "MetabolicConfiguration",
    "ConfigurationError",
    "DomainError",
    "MetabolicRateWarning",
    "MetabolicsError",
    "MuscleReferenceError",
    "MetabolicMuscleParameter",
    "MetabolicMuscleParameterSet",
    "MetabolicPowerBreakdown",
    "Umberger2003MetabolicPowerProbe",
    "aggregate_metabolic_power",
    "compute_basal_rate",
    "minimum_total_rate_policy",
    "ConstantSystemMass",
    "StaticMuscleStateProvider",
    "TabulatedMuscleStateProvider",
    "BoundMetabolicMuscle",
    "resolve_metabolic_muscles",
    "MuscleState",
    "MuscleStateProvider",
    "SystemMassProvider",
    "MuscleEnergyRates",
    "compute_muscle_energy_rates",
]
