from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from myoenergy.utils.types import beartowertype


@beartowertype
@dataclass(frozen=True)
class MetabolicConfiguration:
    """
    Simulation-wide settings of the Umberger et al. (2003) metabolic energy model.

    Parameters
    ----------
    activation_maintenance_rate_on : bool, default=True
        Include the activation and maintenance heat rate.
    shortening_rate_on : bool, default=True
        Include the shortening and lengthening heat rate.
    basal_rate_on : bool, default=True
        Include the whole-body basal metabolic rate.
    mechanical_work_rate_on : bool, default=True
        Include the mechanical work rate.
    scaling_factor : float, default=1.0
        Scales the activation-maintenance and shortening heat rates. Umberger
        et al. (2003) use 1.5 for primarily anaerobic and 1.0 for primarily
        aerobic conditions.
    basal_coefficient : float, default=1.51
        Basal rate coefficient in W/kg.
    basal_exponent : float, default=1.0
        Exponent applied to the whole-body mass in the basal rate.
    total_rate_policy : Callable[[float, MetabolicConfiguration], float], optional
        Hook applied to the aggregated total before it is returned. ``None`` by
        default, meaning the total is returned as computed. See
        :func:`minimum_total_rate_policy`.
    """

    activation_maintenance_rate_on: bool = True
    shortening_rate_on: bool = True
    basal_rate_on: bool = True
    mechanical_work_rate_on: bool = True
    scaling_factor: float = 1.0
    basal_coefficient: float = 1.51
    basal_exponent: float = 1.0
    total_rate_policy: Optional[Callable[..., float]] = None

    @property
    def all_muscle_rates_on(self) -> bool:
        return (
            self.activation_maintenance_rate_on
            and self.shortening_rate_on
            and self.mechanical_work_rate_on
        )
