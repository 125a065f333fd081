import logging
import warnings
from typing import Any

import numpy as np
import seaborn as sns
from beartype import beartype
from matplotlib.axes import Axes

from myoenergy.simulator.core.metabolics import MetabolicPowerBreakdown
from myoenergy.utils.types import RATE__VECTOR, TIME__VECTOR

logging.getLogger("matplotlib.font_manager").setLevel(logging.ERROR)

BREAKDOWN_TERMS = {
    "activation_maintenance_rate": ("Activation & maintenance", "#90b8e0"),
    "shortening_rate": ("Shortening & lengthening", "#af8bff"),
    "mechanical_work_rate": ("Mechanical work", "#f4a582"),
}


@beartype
def plot_metabolic_power(
    times__s: TIME__VECTOR,
    metabolic_power__W_kg: RATE__VECTOR,
    ax: Axes,
    label: str | None = None,
    apply_default_formatting: bool = True,
    **kwargs: Any,
) -> Axes:
    """
    Plot the metabolic power reported by a probe over time.

    Parameters
    ----------
    times__s : TIME__VECTOR
        Time instants in s.
    metabolic_power__W_kg : RATE__VECTOR
        Metabolic power at each time instant in W/kg
        (see ``Umberger2003MetabolicPowerProbe.evaluate_trajectory``).
    ax : Axes
        The axes to plot on.
    label : str | None, optional
        Legend label of the line, by default None.
    apply_default_formatting : bool, optional
        Whether to apply default formatting to the plot, by default True.
    **kwargs : Any
        Additional keyword arguments to pass to the plot function. Only used if apply_default_formatting is False.

    Returns
    -------
    Axes
        The axes with the plot.

    Raises
    ------
    ValueError
        If the time and power vectors have different lengths.
    """
    if times__s.shape != metabolic_power__W_kg.shape:
        raise ValueError(
            f"Times and metabolic power must have the same length. Got {times__s.shape[0]} times, but {metabolic_power__W_kg.shape[0]} values."
        )

    warnings.filterwarnings("ignore", message=".*Font family.*not found.*")
    warnings.filterwarnings("ignore", message=".*findfont.*")

    if apply_default_formatting:
        ax.plot(times__s, metabolic_power__W_kg, color="#90b8e0", lw=2, label=label)
        ax.set_xlabel("Time (s)")
        ax.set_ylabel("Metabolic power (W/kg)")
        sns.despine(ax=ax, top=True, right=True, trim=True, offset=0)
    else:
        ax.plot(times__s, metabolic_power__W_kg, label=label, **kwargs)

    return ax


@beartype
def plot_metabolic_breakdown(
    breakdown: MetabolicPowerBreakdown,
    ax: Axes,
    apply_default_formatting: bool = True,
    **kwargs: Any,
) -> Axes:
    """
    Plot the per-muscle metabolic rate terms of one evaluation as stacked bars.

    Parameters
    ----------
    breakdown : MetabolicPowerBreakdown
        Result of ``Umberger2003MetabolicPowerProbe.evaluate_breakdown``.
    ax : Axes
        The axes to plot on.
    apply_default_formatting : bool, optional
        Whether to apply default formatting to the plot, by default True.
    **kwargs : Any
        Additional keyword arguments to pass to the bar function. Only used if apply_default_formatting is False.

    Returns
    -------
    Axes
        The axes with the plot.
    """
    df = breakdown.as_dataframe()
    x = np.arange(len(df))

    # Negative terms (e.g. lengthening heat) are stacked downwards
    positive_bottom = np.zeros(len(df))
    negative_bottom = np.zeros(len(df))
    for column, (term_label, color) in BREAKDOWN_TERMS.items():
        values = df[column].to_numpy(dtype=float)
        bottom = np.where(values >= 0, positive_bottom, negative_bottom)

        if apply_default_formatting:
            ax.bar(x, values, bottom=bottom, color=color, label=term_label)
        else:
            ax.bar(x, values, bottom=bottom, label=term_label, **kwargs)

        positive_bottom += np.clip(values, 0, None)
        negative_bottom += np.clip(values, None, 0)

    ax.set_xticks(x)
    ax.set_xticklabels(df.index.tolist())

    if apply_default_formatting:
        ax.set_title(
            f"t = {breakdown.time} s, basal {breakdown.basal_rate:.2f} W/kg, "
            f"total {breakdown.total:.2f} W/kg"
        )
        ax.set_ylabel("Metabolic rate (W/kg)")
        ax.legend(frameon=False)
        sns.despine(ax=ax, top=True, right=True, trim=True, offset=0)

    return ax
