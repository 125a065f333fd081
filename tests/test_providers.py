import pandas as pd
import pytest

from myoenergy.simulator.core.metabolics import (
    ConfigurationError,
    ConstantSystemMass,
    MuscleReferenceError,
    MuscleStateProvider,
    StaticMuscleStateProvider,
    SystemMassProvider,
    TabulatedMuscleStateProvider,
)
from myoenergy.simulator.core.metabolics.state import MUSCLE_STATE_FIELDS


@pytest.fixture
def state_table(reference_state):
    values = {f: getattr(reference_state, f) for f in MUSCLE_STATE_FIELDS}
    later = dict(values, activation=0.4, fiber_velocity__m_s=0.1)
    return pd.DataFrame([values, later], index=pd.Index([0.0, 2.0], name="time"))


def test_providers_satisfy_protocols(reference_state, state_table):
    assert isinstance(StaticMuscleStateProvider({}), MuscleStateProvider)
    assert isinstance(
        TabulatedMuscleStateProvider({"soleus": state_table}), MuscleStateProvider
    )
    assert isinstance(ConstantSystemMass(70.0), SystemMassProvider)


def test_static_provider(reference_state):
    provider = StaticMuscleStateProvider({"soleus": reference_state})
    assert "soleus" in provider
    assert "gasmed" not in provider
    assert provider.get_muscle_state("soleus", 12.0) is reference_state
    with pytest.raises(MuscleReferenceError):
        provider.get_muscle_state("gasmed", 0.0)


def test_tabulated_provider_interpolates(state_table):
    provider = TabulatedMuscleStateProvider({"soleus": state_table})

    state = provider.get_muscle_state("soleus", 0.5)
    assert state.activation == pytest.approx(0.7)
    assert state.fiber_velocity__m_s == pytest.approx(-0.05)
    assert state.max_isometric_force__N == 1000.0

    assert provider.get_muscle_state("soleus", -1.0).activation == 0.8
    assert provider.get_muscle_state("soleus", 5.0).activation == 0.4
    assert provider.time_range == (0.0, 2.0)


def test_tabulated_provider_unknown_muscle(state_table):
    provider = TabulatedMuscleStateProvider({"soleus": state_table})
    assert "gasmed" not in provider
    with pytest.raises(MuscleReferenceError):
        provider.get_muscle_state("gasmed", 0.0)


def test_tabulated_provider_missing_columns(state_table):
    with pytest.raises(ConfigurationError) as excinfo:
        TabulatedMuscleStateProvider(
            {"soleus": state_table.drop(columns=["excitation"])}
        )
    assert excinfo.value.field == "columns"
    assert "excitation" in str(excinfo.value)


def test_tabulated_provider_requires_increasing_time(state_table):
    with pytest.raises(ConfigurationError) as excinfo:
        TabulatedMuscleStateProvider({"soleus": state_table.iloc[::-1]})
    assert excinfo.value.field == "time"


def test_constant_system_mass():
    assert ConstantSystemMass(81.5).calc_system_mass(3.0) == 81.5
