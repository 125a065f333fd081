from dataclasses import dataclass

from myoenergy.simulator.core.metabolics.errors import (
    ConfigurationError,
    MuscleReferenceError,
)
from myoenergy.simulator.core.metabolics.parameters import (
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
)
from myoenergy.simulator.core.metabolics.state import MuscleState, MuscleStateProvider
from myoenergy.utils.types import beartowertype


@beartowertype
@dataclass(frozen=True)
class BoundMetabolicMuscle:
    """
    A validated metabolic parameter together with the provider of its muscle states.

    Instances are created by :func:`resolve_metabolic_muscles` only.
    """

    parameter: MetabolicMuscleParameter
    provider: MuscleStateProvider

    @property
    def name(self) -> str:
        return self.parameter.name

    def state_at(self, time: float) -> MuscleState:
        return self.provider.get_muscle_state(self.parameter.name, time)


@beartowertype
def check_valid_metabolic_muscle(
    parameter: MetabolicMuscleParameter, muscle_state_provider: MuscleStateProvider
) -> BoundMetabolicMuscle:
    """
    Check a single metabolic parameter and bind it to its muscle.

    Parameters
    ----------
    parameter : MetabolicMuscleParameter
        Parameter to check.
    muscle_state_provider : MuscleStateProvider
        Model that must contain the muscle.

    Returns
    -------
    BoundMetabolicMuscle
        The parameter bound to the muscle state provider.

    Raises
    ------
    MuscleReferenceError
        If the muscle does not exist in the model.
    ConfigurationError
        If the muscle mass is not positive (``field="mass"``) or the slow-twitch
        ratio is outside [0, 1] (``field="ratio"``).
    """
    if parameter.name not in muscle_state_provider:
        raise MuscleReferenceError(parameter.name)

    if not parameter.muscle_mass__kg > 0:
        raise ConfigurationError(
            "mass",
            f"MetabolicMuscleParameter: Invalid muscle_mass__kg for muscle: {parameter.name}. "
            "muscle_mass__kg must be positive.",
        )

    if not 0 <= parameter.ratio_slow_twitch_fibers <= 1:
        raise ConfigurationError(
            "ratio",
            f"MetabolicMuscleParameter: Invalid ratio_slow_twitch_fibers for muscle: {parameter.name}. "
            "ratio_slow_twitch_fibers must be between 0 and 1.",
        )

    return BoundMetabolicMuscle(parameter=parameter, provider=muscle_state_provider)


@beartowertype
def resolve_metabolic_muscles(
    parameter_set: MetabolicMuscleParameterSet,
    muscle_state_provider: MuscleStateProvider,
) -> dict[str, BoundMetabolicMuscle]:
    """
    Bind every parameter of a set to its muscle, validating the static parameters.

    This is meant to run once, when the model is set up, so that invalid
    parameters are reported before any evaluation.

    Parameters
    ----------
    parameter_set : MetabolicMuscleParameterSet
        Parameters to bind.
    muscle_state_provider : MuscleStateProvider
        Model that provides the muscle states.

    Returns
    -------
    dict[str, BoundMetabolicMuscle]
        Bound muscles keyed by name, in the order of ``parameter_set``.

    Raises
    ------
    MuscleReferenceError
        If a named muscle does not exist in the model.
    ConfigurationError
        If a muscle mass or slow-twitch ratio is invalid.
    """
    return {
        name: check_valid_metabolic_muscle(parameter, muscle_state_provider)
        for name, parameter in parameter_set.items()
    }
