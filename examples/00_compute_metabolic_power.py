"""
Metabolic Power of a Single Muscle
==================================

The **metabolic power probe** estimates how much energy the muscles of a model spend at a given instant.

**MyoEnergy** implements the phenomenological model of Umberger et al. (2003), which splits the
metabolic power into four terms:

* **Activation & maintenance heat**: depends on activation and fiber length
* **Shortening & lengthening heat**: depends on fiber velocity and fiber type composition
* **Mechanical work**: positive work done by the contractile element
* **Basal rate**: whole-body resting metabolism, added once per model

References
----------
.. [1] Umberger, B.R., Gerritsen, K.G.M., Martin, P.E., 2003.
    A model of human muscle energy expenditure.
    Computer Methods in Biomechanics and Biomedical Engineering 6, 99–111.
"""

##############################################################################
# Import Libraries
# ----------------

import matplotlib.pyplot as plt

from myoenergy import simulator
from myoenergy.utils.plotting import plot_metabolic_breakdown

##############################################################################
# Define Muscle Parameters
# ------------------------
#
# Every muscle needs two physiological parameters:
#
# - ``muscle_mass__kg``: Mass of the muscle in kg
# - ``ratio_slow_twitch_fibers``: Fraction of slow-twitch fibers, between 0 and 1
#
# The order of the parameter set fixes the order in which the muscle rates are summed.

parameter_set = simulator.MetabolicMuscleParameterSet(
    [
        simulator.MetabolicMuscleParameter(
            "soleus", muscle_mass__kg=0.5, ratio_slow_twitch_fibers=0.8
        ),
        simulator.MetabolicMuscleParameter(
            "tibialis_anterior", muscle_mass__kg=0.3, ratio_slow_twitch_fibers=0.7
        ),
    ]
)

##############################################################################
# Provide Muscle States
# ---------------------
#
# The probe does not simulate contraction dynamics. Muscle states come from a
# **muscle state provider**, usually your musculoskeletal simulation. Here we use
# fixed snapshots: the soleus shortens, the tibialis anterior is stretched.

soleus = simulator.MuscleState(
    max_isometric_force__N=3549.0,
    max_contraction_velocity=10.0,
    activation=0.6,
    excitation=0.7,
    passive_fiber_force__N=0.0,
    active_fiber_force__N=1800.0,
    fiber_force__N=1800.0,
    normalized_fiber_length=0.95,
    fiber_velocity__m_s=-0.08,
    normalized_fiber_velocity=-0.16,
    force_velocity_multiplier=0.7,
)
tibialis_anterior = simulator.MuscleState(
    max_isometric_force__N=905.0,
    max_contraction_velocity=10.0,
    activation=0.2,
    excitation=0.1,
    passive_fiber_force__N=40.0,
    active_fiber_force__N=150.0,
    fiber_force__N=190.0,
    normalized_fiber_length=1.1,
    fiber_velocity__m_s=0.05,
    normalized_fiber_velocity=0.05,
    force_velocity_multiplier=1.2,
)

provider = simulator.StaticMuscleStateProvider(
    {"soleus": soleus, "tibialis_anterior": tibialis_anterior}
)

##############################################################################
# Create the Probe
# ----------------
#
# Muscles are validated once, when the probe is created. A missing muscle, a
# non-positive mass or a slow-twitch ratio outside [0, 1] raise an error here.

probe = simulator.Umberger2003MetabolicPowerProbe(
    "metabolic_power",
    parameter_set,
    provider,
    simulator.ConstantSystemMass(75.0),
)

print(f"{probe.output_labels()[0]}: {probe.evaluate(0.0)[0]:.2f} W/kg")

##############################################################################
# Inspect Every Term
# ------------------

breakdown = probe.evaluate_breakdown(0.0)
print(breakdown.as_dataframe())

plt.figure(figsize=(6, 4))
plot_metabolic_breakdown(breakdown, ax=plt.gca())
plt.tight_layout()
plt.show()
