from dataclasses import dataclass, fields
from typing import Protocol, runtime_checkable

from myoenergy.utils.types import beartowertype


@beartowertype
@dataclass(frozen=True)
class MuscleState:
    """
    Snapshot of the mechanical and activation state of one muscle at one time instant.

    Values are produced by the muscle-contraction model and read fresh for every
    evaluation. Velocities follow the convention that negative values mean
    shortening (concentric) and positive values mean lengthening (eccentric).

    Parameters
    ----------
    max_isometric_force__N : float
        Maximum isometric force of the muscle in N.
    max_contraction_velocity : float
        Maximum contraction velocity in optimal fiber lengths per second.
    activation : float
        Normalized activation in [0, 1].
    excitation : float
        Normalized excitation (control) in [0, 1].
    passive_fiber_force__N : float
        Passive fiber force in N.
    active_fiber_force__N : float
        Active fiber force in N.
    fiber_force__N : float
        Total fiber force in N.
    normalized_fiber_length : float
        Fiber length divided by the optimal fiber length.
    fiber_velocity__m_s : float
        Fiber velocity in m/s.
    normalized_fiber_velocity : float
        Fiber velocity divided by the maximum contraction velocity.
    force_velocity_multiplier : float
        Force-velocity multiplier of the active fiber force.
    """

    max_isometric_force__N: float
    max_contraction_velocity: float
    activation: float
    excitation: float
    passive_fiber_force__N: float
    active_fiber_force__N: float
    fiber_force__N: float
    normalized_fiber_length: float
    fiber_velocity__m_s: float
    normalized_fiber_velocity: float
    force_velocity_multiplier: float


MUSCLE_STATE_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(MuscleState))


@runtime_checkable
class MuscleStateProvider(Protocol):
    """Source of muscle states, usually the muscle-contraction model."""

    def __contains__(self, name: object) -> bool: ...

    def get_muscle_state(self, name: str, time: float) -> MuscleState: ...


@runtime_checkable
class SystemMassProvider(Protocol):
    """Source of the whole-body mass of the model."""

    def calc_system_mass(self, time: float) -> float: ...
