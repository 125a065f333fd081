import pytest
from beartype.roar import BeartypeCallHintParamViolation

from myoenergy.simulator.core.metabolics import (
    ConfigurationError,
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
)


def test_parameter_accepts_int_values():
    parameter = MetabolicMuscleParameter("vasti", 2, 1)
    assert parameter.muscle_mass__kg == 2
    assert parameter.ratio_fast_twitch_fibers == 0


def test_parameter_is_immutable():
    parameter = MetabolicMuscleParameter("vasti", 2.0, 0.5)
    with pytest.raises(AttributeError):
        parameter.muscle_mass__kg = 3.0


def test_parameter_rejects_wrong_types():
    with pytest.raises(BeartypeCallHintParamViolation):
        MetabolicMuscleParameter(1, 2.0, 0.5)


def test_parameter_set_keeps_insertion_order():
    names = ["tibant", "soleus", "gasmed", "vasti"]
    parameter_set = MetabolicMuscleParameterSet(
        MetabolicMuscleParameter(n, 1.0, 0.5) for n in names
    )
    assert list(parameter_set) == names
    assert parameter_set.names == tuple(names)
    assert [p.name for p in parameter_set.parameters] == names
    assert len(parameter_set) == 4
    assert parameter_set["gasmed"].name == "gasmed"
    assert "vasti" in parameter_set
    assert "hamstrings" not in parameter_set


def test_parameter_set_membership_of_other_key_types():
    parameter_set = MetabolicMuscleParameterSet(
        [MetabolicMuscleParameter("soleus", 1.0, 0.5)]
    )
    assert (1 in parameter_set) is False
    assert (None in parameter_set) is False
    assert parameter_set.get(1) is None
    with pytest.raises(KeyError):
        parameter_set[1]


def test_parameter_set_rejects_duplicates():
    with pytest.raises(ConfigurationError) as excinfo:
        MetabolicMuscleParameterSet(
            [
                MetabolicMuscleParameter("soleus", 1.0, 0.5),
                MetabolicMuscleParameter("soleus", 2.0, 0.8),
            ]
        )
    assert excinfo.value.field == "name"


def test_empty_parameter_set():
    parameter_set = MetabolicMuscleParameterSet()
    assert len(parameter_set) == 0
    assert parameter_set.parameters == ()
