import pytest

from myoenergy.simulator.core.metabolics import (
    ConfigurationError,
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    MetabolicsError,
    MuscleReferenceError,
    StaticMuscleStateProvider,
    resolve_metabolic_muscles,
)


@pytest.fixture
def provider(reference_state):
    return StaticMuscleStateProvider(
        {"soleus": reference_state, "gasmed": reference_state}
    )


def test_resolve_binds_in_order(provider, reference_state):
    parameter_set = MetabolicMuscleParameterSet(
        [
            MetabolicMuscleParameter("gasmed", 0.3, 0.5),
            MetabolicMuscleParameter("soleus", 0.5, 0.8),
        ]
    )
    bound = resolve_metabolic_muscles(parameter_set, provider)

    assert list(bound) == ["gasmed", "soleus"]
    assert bound["soleus"].parameter is parameter_set["soleus"]
    assert bound["soleus"].name == "soleus"
    assert bound["soleus"].state_at(0.3) == reference_state


def test_missing_muscle_raises_reference_error(provider):
    parameter_set = MetabolicMuscleParameterSet(
        [MetabolicMuscleParameter("tibant", 0.3, 0.5)]
    )
    with pytest.raises(MuscleReferenceError) as excinfo:
        resolve_metabolic_muscles(parameter_set, provider)
    assert excinfo.value.muscle_name == "tibant"
    assert isinstance(excinfo.value, MetabolicsError)


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan")])
def test_non_positive_mass_raises(provider, mass):
    parameter_set = MetabolicMuscleParameterSet(
        [MetabolicMuscleParameter("soleus", mass, 0.5)]
    )
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_metabolic_muscles(parameter_set, provider)
    assert excinfo.value.field == "mass"


@pytest.mark.parametrize("ratio", [-0.01, 1.01])
def test_out_of_range_ratio_raises(provider, ratio):
    parameter_set = MetabolicMuscleParameterSet(
        [MetabolicMuscleParameter("soleus", 0.5, ratio)]
    )
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_metabolic_muscles(parameter_set, provider)
    assert excinfo.value.field == "ratio"


@pytest.mark.parametrize("ratio", [0.0, 1.0])
def test_ratio_bounds_are_valid(provider, ratio):
    parameter_set = MetabolicMuscleParameterSet(
        [MetabolicMuscleParameter("soleus", 0.5, ratio)]
    )
    assert "soleus" in resolve_metabolic_muscles(parameter_set, provider)


def test_reference_is_checked_before_values(provider):
    parameter_set = MetabolicMuscleParameterSet(
        [MetabolicMuscleParameter("tibant", -1.0, 2.0)]
    )
    with pytest.raises(MuscleReferenceError):
        resolve_metabolic_muscles(parameter_set, provider)
