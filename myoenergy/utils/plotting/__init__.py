from myoenergy.utils.plotting.metabolics import (
    plot_metabolic_breakdown,
    plot_metabolic_power,
)

__all__ = [
    "plot_metabolic_power",
    "plot_metabolic_breakdown",
]
