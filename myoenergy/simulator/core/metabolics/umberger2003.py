r"""
Per-muscle metabolic energy rates of Umberger et al. (2003) [1]_.

The model splits the metabolic power of a muscle into an activation and
maintenance heat rate :math:`\dot{A}M`, a shortening and lengthening heat rate
:math:`\dot{S}` and a mechanical work rate :math:`\dot{W}`, all in W/kg of
muscle. The whole-body basal rate is added once per model by the aggregator
(see :mod:`myoenergy.simulator.core.metabolics.probe`).

Velocities follow the convention :math:`V_m < 0` for shortening (concentric)
and :math:`V_m > 0` for lengthening (eccentric).

References
----------
.. [1] Umberger, B.R., Gerritsen, K.G.M., Martin, P.E., 2003.
    A model of human muscle energy expenditure.
    Computer Methods in Biomechanics and Biomedical Engineering 6, 99–111.
    https://doi.org/10.1080/1025584031000091678
"""

import warnings
from dataclasses import dataclass
from typing import Optional

import numpy as np

from myoenergy.simulator.core.metabolics.configuration import MetabolicConfiguration
from myoenergy.simulator.core.metabolics.errors import DomainError, MetabolicRateWarning
from myoenergy.simulator.core.metabolics.parameters import MetabolicMuscleParameter
from myoenergy.simulator.core.metabolics.state import MuscleState
from myoenergy.utils.types import beartowertype

MAX_SHORTENING_RATE__W_kg = 100.0  # per fiber type, Umberger et al. (2003)


@beartowertype
@dataclass(frozen=True)
class MuscleEnergyRates:
    """
    Metabolic energy rates of one muscle at one time instant, in W/kg.

    Disabled terms are exactly zero.
    """

    name: str
    activation_maintenance_rate: float
    shortening_rate: float
    mechanical_work_rate: float

    @property
    def total(self) -> float:
        return (
            self.activation_maintenance_rate
            + self.shortening_rate
            + self.mechanical_work_rate
        )


def _at(time: Optional[float]) -> str:
    return "" if time is None else f" (t = {time})"


def activation_scaling(excitation: float, activation: float) -> float:
    """
    Activation dependence scaling parameter A.

    Excitation is used while the muscle is activating, the mean of excitation and
    activation while it is deactivating.
    """
    if excitation > activation:
        return excitation
    return (excitation + activation) / 2


@beartowertype
def compute_muscle_energy_rates(
    parameter: MetabolicMuscleParameter,
    state: MuscleState,
    configuration: MetabolicConfiguration,
    time: Optional[float] = None,
    probe_name: str = "metabolic_power",
) -> MuscleEnergyRates:
    r"""
    Compute the activation-maintenance, shortening and mechanical work rates of one muscle.

    Parameters
    ----------
    parameter : MetabolicMuscleParameter
        Physiological parameters of the muscle. Assumed to be validated already
        (see :func:`resolve_metabolic_muscles`).
    state : MuscleState
        Current state of the muscle.
    configuration : MetabolicConfiguration
        Which terms to compute and how to scale them.
    time : float, optional
        Simulation time, only used in diagnostic messages.
    probe_name : str, optional
        Name of the calling probe, only used in diagnostic messages.

    Returns
    -------
    MuscleEnergyRates
        The three rate terms in W/kg. The basal rate is not included.

    Raises
    ------
    DomainError
        If the maximum isometric force or the force-velocity multiplier is zero.

    Warns
    -----
    MetabolicRateWarning
        If the normalized fiber length is negative, if a fiber-type shortening
        rate is clamped to 100 W/kg, or if any of the terms is NaN. NaN values are
        returned unchanged.

    Notes
    -----
    With :math:`r` the slow-twitch ratio, :math:`S` the scaling factor,
    :math:`\tilde{l}` the normalized fiber length and :math:`\tilde{v}` the
    normalized fiber velocity:

    .. math::
        F_{iso} = \frac{F_{active} / f_v}{F_{max}}

    .. math::
        \dot{A}M = S A^{0.6} u \quad (\tilde{l} \le 1), \qquad
        \dot{A}M = S A^{0.6} (0.4 u + 0.6 u F_{iso}) \quad (\tilde{l} > 1),
        \qquad u = 128 (1 - r) + 25

    The concentric shortening rate is clamped per fiber type to 100 W/kg when the
    term is greater than 100. Because :math:`\tilde{v} \le 0` in that branch, the
    terms are never positive and the clamp does not trigger for finite inputs;
    it is kept as published.
    """
    name = parameter.name
    ratio_slow = parameter.ratio_slow_twitch_fibers
    ratio_fast = 1 - ratio_slow

    A = np.float64(activation_scaling(state.excitation, state.activation))

    # Normalized active force the fiber would produce isometrically (V_m = 0)
    if state.max_isometric_force__N == 0:
        raise DomainError(name, "zero isometric force")
    if state.force_velocity_multiplier == 0:
        raise DomainError(name, "zero force-velocity multiplier")

    F_iso = (
        state.active_fiber_force__N / state.force_velocity_multiplier
    ) / state.max_isometric_force__N

    fiber_length_normalized = state.normalized_fiber_length
    if fiber_length_normalized < 0:
        warnings.warn(
            f"{probe_name}{_at(time)}: muscle '{name}' has negative normalized fiber-length.",
            MetabolicRateWarning,
            stacklevel=2,
        )

    AMdot = 0.0
    Sdot = 0.0
    Wdot = 0.0

    # Invalid states (e.g. zero contraction velocity) propagate as inf/NaN
    with np.errstate(divide="ignore", invalid="ignore"):
        # Activation & maintenance heat rate
        if configuration.activation_maintenance_rate_on:
            unscaled_AMdot = 128 * ratio_fast + 25

            if fiber_length_normalized <= 1.0:
                AMdot = configuration.scaling_factor * A**0.6 * unscaled_AMdot
            else:
                AMdot = (
                    configuration.scaling_factor
                    * A**0.6
                    * ((0.4 * unscaled_AMdot) + (0.6 * unscaled_AMdot * F_iso))
                )

        # Shortening & lengthening heat rate
        if configuration.shortening_rate_on:
            Vmax_slow_twitch = np.float64(state.max_contraction_velocity) / (
                1 + 1.5 * ratio_fast
            )
            Vmax_fast_twitch = 2.5 * Vmax_slow_twitch
            alpha_shortening_fast_twitch = 153 / Vmax_fast_twitch
            alpha_shortening_slow_twitch = 100 / Vmax_slow_twitch
            fiber_velocity_normalized = state.normalized_fiber_velocity

            if fiber_velocity_normalized <= 0:  # concentric
                slow_twitch = (
                    alpha_shortening_slow_twitch * fiber_velocity_normalized * ratio_slow
                )
                if slow_twitch > MAX_SHORTENING_RATE__W_kg:
                    warnings.warn(
                        f"{probe_name}{_at(time)}: slow twitch shortening heat rate of muscle '{name}' "
                        f"exceeds the max value of {MAX_SHORTENING_RATE__W_kg} W/kg. "
                        f"Setting to {MAX_SHORTENING_RATE__W_kg} W/kg.",
                        MetabolicRateWarning,
                        stacklevel=2,
                    )
                    slow_twitch = MAX_SHORTENING_RATE__W_kg

                fast_twitch = (
                    alpha_shortening_fast_twitch * fiber_velocity_normalized * ratio_fast
                )
                if fast_twitch > MAX_SHORTENING_RATE__W_kg:
                    warnings.warn(
                        f"{probe_name}{_at(time)}: fast twitch shortening heat rate of muscle '{name}' "
                        f"exceeds the max value of {MAX_SHORTENING_RATE__W_kg} W/kg. "
                        f"Setting to {MAX_SHORTENING_RATE__W_kg} W/kg.",
                        MetabolicRateWarning,
                        stacklevel=2,
                    )
                    fast_twitch = MAX_SHORTENING_RATE__W_kg

                unscaled_Sdot = -slow_twitch - fast_twitch
                Sdot = configuration.scaling_factor * A**2 * unscaled_Sdot
            else:  # eccentric
                unscaled_Sdot = (
                    -0.3 * alpha_shortening_slow_twitch * fiber_velocity_normalized
                )
                Sdot = configuration.scaling_factor * A * unscaled_Sdot

            if fiber_length_normalized > 1.0:
                Sdot *= F_iso

        # Mechanical work rate
        if configuration.mechanical_work_rate_on:
            if state.fiber_velocity__m_s <= 0:  # concentric
                Wdot = -state.active_fiber_force__N * state.fiber_velocity__m_s
            else:
                Wdot = 0.0

            Wdot /= parameter.muscle_mass__kg

    for label, value in (("AMdot", AMdot), ("Sdot", Sdot), ("Wdot", Wdot)):
        if np.isnan(value):
            warnings.warn(
                f"{probe_name}{_at(time)}: {label} ({name}) = NaN!",
                MetabolicRateWarning,
                stacklevel=2,
            )

    return MuscleEnergyRates(
        name=name,
        activation_maintenance_rate=float(AMdot),
        shortening_rate=float(Sdot),
        mechanical_work_rate=float(Wdot),
    )
