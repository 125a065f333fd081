import matplotlib

matplotlib.use("Agg")

import pytest

from myoenergy.simulator.core.metabolics import (
    ConstantSystemMass,
    MetabolicConfiguration,
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    MuscleState,
    StaticMuscleStateProvider,
)


def make_state(**overrides) -> MuscleState:
    """Concentric reference state, with selected fields replaced."""
    values = dict(
        max_isometric_force__N=1000.0,
        max_contraction_velocity=10.0,
        activation=0.8,
        excitation=0.8,
        passive_fiber_force__N=0.0,
        active_fiber_force__N=500.0,
        fiber_force__N=500.0,
        normalized_fiber_length=1.0,
        fiber_velocity__m_s=-0.1,
        normalized_fiber_velocity=-0.05,
        force_velocity_multiplier=1.0,
    )
    values.update(overrides)
    return MuscleState(**values)


@pytest.fixture
def reference_state() -> MuscleState:
    return make_state()


@pytest.fixture
def reference_parameter() -> MetabolicMuscleParameter:
    return MetabolicMuscleParameter(
        name="soleus", muscle_mass__kg=0.5, ratio_slow_twitch_fibers=0.5
    )


@pytest.fixture
def no_basal() -> MetabolicConfiguration:
    return MetabolicConfiguration(basal_rate_on=False)


@pytest.fixture
def reference_provider(reference_state) -> StaticMuscleStateProvider:
    return StaticMuscleStateProvider({"soleus": reference_state})


@pytest.fixture
def reference_parameter_set(reference_parameter) -> MetabolicMuscleParameterSet:
    return MetabolicMuscleParameterSet([reference_parameter])


@pytest.fixture
def body_mass() -> ConstantSystemMass:
    return ConstantSystemMass(70.0)


@pytest.fixture
def state_factory():
    return make_state
