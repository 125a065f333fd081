import matplotlib.pyplot as plt
import numpy as np
import pytest

from myoenergy.simulator.core.metabolics import Umberger2003MetabolicPowerProbe
from myoenergy.utils.plotting import plot_metabolic_breakdown, plot_metabolic_power


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def test_plot_metabolic_power(ax):
    times = np.linspace(0.0, 1.0, 11)
    rates = np.full(11, 105.7)

    returned = plot_metabolic_power(times, rates, ax, label="basal")

    assert returned is ax
    assert len(ax.lines) == 1
    np.testing.assert_allclose(ax.lines[0].get_ydata(), rates)
    assert ax.get_ylabel() == "Metabolic power (W/kg)"


def test_plot_metabolic_power_length_mismatch(ax):
    with pytest.raises(ValueError):
        plot_metabolic_power(np.zeros(3), np.zeros(4), ax)


def test_plot_metabolic_breakdown(
    ax, reference_parameter_set, reference_provider, body_mass
):
    probe = Umberger2003MetabolicPowerProbe(
        "metabolic_power", reference_parameter_set, reference_provider, body_mass
    )
    plot_metabolic_breakdown(probe.evaluate_breakdown(0.0), ax)

    # one bar per muscle and term
    assert len(ax.patches) == 3
    assert list(ax.get_xticks()) == [0]
