import warnings
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from myoenergy.simulator.core.metabolics.configuration import MetabolicConfiguration
from myoenergy.simulator.core.metabolics.errors import MetabolicRateWarning
from myoenergy.simulator.core.metabolics.parameters import MetabolicMuscleParameterSet
from myoenergy.simulator.core.metabolics.resolver import resolve_metabolic_muscles
from myoenergy.simulator.core.metabolics.state import (
    MuscleStateProvider,
    SystemMassProvider,
)
from myoenergy.simulator.core.metabolics.umberger2003 import (
    MuscleEnergyRates,
    compute_muscle_energy_rates,
)
from myoenergy.utils.types import (
    PROBE_OUTPUT__VECTOR,
    RATE__VECTOR,
    beartowertype,
)

MINIMUM_TOTAL_RATE__W_kg = 1.0


@beartowertype
def compute_basal_rate(
    configuration: MetabolicConfiguration,
    system_mass__kg: float,
    probe_name: str = "metabolic_power",
) -> float:
    """
    Whole-body basal metabolic rate, ``basal_coefficient * system_mass ** basal_exponent``.

    Returns 0 if the basal rate is disabled.
    """
    if not configuration.basal_rate_on:
        return 0.0

    with np.errstate(divide="ignore", invalid="ignore"):
        Bdot = float(
            configuration.basal_coefficient
            * np.power(np.float64(system_mass__kg), configuration.basal_exponent)
        )
    if np.isnan(Bdot):
        warnings.warn(
            f"{probe_name}: Bdot = NaN!", MetabolicRateWarning, stacklevel=2
        )
    return Bdot


@beartowertype
def minimum_total_rate_policy(
    total: float, configuration: MetabolicConfiguration
) -> float:
    """
    Do not let the net metabolic rate fall below 1.0 W/kg.

    Umberger et al. (2003, p. 104) bound the net rate from below. The bound is
    only applied when the activation-maintenance, shortening and mechanical work
    rates are all enabled. It is not applied by default, pass it as
    ``MetabolicConfiguration(total_rate_policy=minimum_total_rate_policy)``.
    """
    if configuration.all_muscle_rates_on and total < MINIMUM_TOTAL_RATE__W_kg:
        warnings.warn(
            f"The model has a net metabolic energy rate of less than "
            f"{MINIMUM_TOTAL_RATE__W_kg} W/kg. Setting to {MINIMUM_TOTAL_RATE__W_kg} W/kg.",
            MetabolicRateWarning,
            stacklevel=2,
        )
        return MINIMUM_TOTAL_RATE__W_kg
    return total


@beartowertype
def aggregate_metabolic_power(
    muscle_rates: Iterable[MuscleEnergyRates],
    configuration: MetabolicConfiguration,
    system_mass__kg: float,
    probe_name: str = "metabolic_power",
    basal_rate: Optional[float] = None,
) -> float:
    """
    Sum the per-muscle energy rates and add the whole-body basal rate once.

    Parameters
    ----------
    muscle_rates : Iterable[MuscleEnergyRates]
        Per-muscle rates, summed in the given order.
    configuration : MetabolicConfiguration
        Basal rate settings and the optional total rate policy.
    system_mass__kg : float
        Whole-body mass of the model in kg.
    probe_name : str, optional
        Name of the calling probe, only used in diagnostic messages.
    basal_rate : float, optional
        Basal rate already computed with :func:`compute_basal_rate`. Computed
        from ``system_mass__kg`` if not given.

    Returns
    -------
    float
        Total metabolic power in W/kg.
    """
    if basal_rate is None:
        basal_rate = compute_basal_rate(configuration, system_mass__kg, probe_name)

    total = 0.0
    for rates in muscle_rates:
        total += rates.total
    total += basal_rate

    if configuration.total_rate_policy is not None:
        total = configuration.total_rate_policy(total, configuration)

    return total


@beartowertype
@dataclass(frozen=True)
class MetabolicPowerBreakdown:
    """
    Every term of one probe evaluation.

    ``total`` is the value :meth:`Umberger2003MetabolicPowerProbe.evaluate` returns
    for the same time, including the total rate policy if one is configured.
    """

    time: float
    muscle_rates: tuple[MuscleEnergyRates, ...]
    basal_rate: float
    total: float

    def as_dataframe(self) -> pd.DataFrame:
        """One row per muscle with the three rate terms and their sum, in W/kg."""
        return pd.DataFrame(
            {
                "activation_maintenance_rate": [
                    r.activation_maintenance_rate for r in self.muscle_rates
                ],
                "shortening_rate": [r.shortening_rate for r in self.muscle_rates],
                "mechanical_work_rate": [
                    r.mechanical_work_rate for r in self.muscle_rates
                ],
                "total": [r.total for r in self.muscle_rates],
            },
            index=pd.Index([r.name for r in self.muscle_rates], name="muscle"),
        )


@beartowertype
class Umberger2003MetabolicPowerProbe:
    """
    Whole-body metabolic power probe based on Umberger et al. (2003) [1]_.

    Reports a single value, the metabolic power of all listed muscles plus the
    whole-body basal rate, in W/kg.

    Parameters
    ----------
    name : str
        Name of the probe, used as its output label.
    parameter_set : MetabolicMuscleParameterSet
        Muscles to include and their physiological parameters.
    muscle_state_provider : MuscleStateProvider
        Provides the muscle states, usually the muscle-contraction model.
    system_mass_provider : SystemMassProvider
        Provides the whole-body mass of the model.
    configuration : MetabolicConfiguration, optional
        Model settings. Defaults to all terms enabled with the published constants.

    Raises
    ------
    MuscleReferenceError
        If a muscle of ``parameter_set`` does not exist in ``muscle_state_provider``.
    ConfigurationError
        If a muscle mass or slow-twitch ratio is invalid.

    Notes
    -----
    Muscles are bound and validated once, here. Errors that depend on the
    instantaneous muscle state (:class:`DomainError`) are raised by
    :meth:`evaluate`, which then returns nothing.

    References
    ----------
    .. [1] Umberger, B.R., Gerritsen, K.G.M., Martin, P.E., 2003.
        A model of human muscle energy expenditure.
        Computer Methods in Biomechanics and Biomedical Engineering 6, 99–111.
        https://doi.org/10.1080/1025584031000091678
    """

    def __init__(
        self,
        name: str,
        parameter_set: MetabolicMuscleParameterSet,
        muscle_state_provider: MuscleStateProvider,
        system_mass_provider: SystemMassProvider,
        configuration: Optional[MetabolicConfiguration] = None,
    ):
        self.name = name
        self.parameter_set = parameter_set
        self.configuration = (
            configuration if configuration is not None else MetabolicConfiguration()
        )
        self._system_mass_provider = system_mass_provider
        self._muscles = resolve_metabolic_muscles(parameter_set, muscle_state_provider)

    @classmethod
    def from_flags(
        cls,
        name: str,
        parameter_set: MetabolicMuscleParameterSet,
        muscle_state_provider: MuscleStateProvider,
        system_mass_provider: SystemMassProvider,
        activation_maintenance_rate_on: bool = True,
        shortening_rate_on: bool = True,
        basal_rate_on: bool = True,
        mechanical_work_rate_on: bool = True,
    ) -> "Umberger2003MetabolicPowerProbe":
        """Create a probe with the default constants and the given terms enabled."""
        return cls(
            name,
            parameter_set,
            muscle_state_provider,
            system_mass_provider,
            MetabolicConfiguration(
                activation_maintenance_rate_on=activation_maintenance_rate_on,
                shortening_rate_on=shortening_rate_on,
                basal_rate_on=basal_rate_on,
                mechanical_work_rate_on=mechanical_work_rate_on,
            ),
        )

    def output_count(self) -> int:
        return 1

    def output_labels(self) -> list[str]:
        return [self.name]

    def compute_muscle_rates(self, time: float) -> tuple[MuscleEnergyRates, ...]:
        """Energy rates of every muscle at ``time``, in parameter set order."""
        return tuple(
            compute_muscle_energy_rates(
                muscle.parameter,
                muscle.state_at(time),
                self.configuration,
                time=time,
                probe_name=self.name,
            )
            for muscle in self._muscles.values()
        )

    def evaluate(self, time: float) -> PROBE_OUTPUT__VECTOR:
        """
        Metabolic power of the model at ``time``.

        Parameters
        ----------
        time : float
            Simulation time in s. The muscle-contraction model must already be at
            this time.

        Returns
        -------
        PROBE_OUTPUT__VECTOR
            Array of shape (1,) holding the total metabolic power in W/kg.

        Raises
        ------
        DomainError
            If the maximum isometric force or force-velocity multiplier of any
            muscle is zero.
        """
        total = aggregate_metabolic_power(
            self.compute_muscle_rates(time),
            self.configuration,
            self._system_mass_provider.calc_system_mass(time),
            probe_name=self.name,
        )
        return np.array([total], dtype=float)

    def evaluate_breakdown(self, time: float) -> MetabolicPowerBreakdown:
        """Evaluate the probe at ``time`` and keep every intermediate term."""
        muscle_rates = self.compute_muscle_rates(time)
        system_mass__kg = self._system_mass_provider.calc_system_mass(time)
        basal_rate = compute_basal_rate(self.configuration, system_mass__kg, self.name)

        return MetabolicPowerBreakdown(
            time=time,
            muscle_rates=muscle_rates,
            basal_rate=basal_rate,
            total=aggregate_metabolic_power(
                muscle_rates,
                self.configuration,
                system_mass__kg,
                self.name,
                basal_rate=basal_rate,
            ),
        )

    def evaluate_trajectory(
        self, times: Sequence[float] | np.ndarray, show_progress: bool = False
    ) -> RATE__VECTOR:
        """
        Evaluate the probe at several time instants.

        Each instant is evaluated independently, nothing is integrated over time.

        Parameters
        ----------
        times : Sequence[float] | np.ndarray
            Time instants in s.
        show_progress : bool, optional
            Show a progress bar, by default False.

        Returns
        -------
        RATE__VECTOR
            Total metabolic power in W/kg for each time instant.
        """
        return np.array(
            [
                self.evaluate(float(t))[0]
                for t in tqdm(
                    times,
                    desc=f"{self.name} evaluated",
                    disable=not show_progress,
                )
            ],
            dtype=float,
        )
