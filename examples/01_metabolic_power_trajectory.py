"""
Metabolic Power over a Movement
===============================

Muscle states are usually recorded during a forward simulation. The
**TabulatedMuscleStateProvider** interpolates such recordings so the probe can be
evaluated at any instant.

.. note::
    Each instant is evaluated independently. The probe reports metabolic **power**,
    integrate it yourself if you need the metabolic **energy** of the movement.
"""

##############################################################################
# Import Libraries
# ----------------

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from myoenergy import simulator
from myoenergy.utils.plotting import plot_metabolic_power

##############################################################################
# Create Recorded States
# ----------------------
#
# We emulate one second of cyclic contraction of a soleus muscle, sampled at 100 Hz.
# Every column of the table is a field of **MuscleState**.

t = np.linspace(0.0, 1.0, 101)
activation = 0.5 + 0.4 * np.sin(2 * np.pi * t)
normalized_fiber_velocity = -0.2 * np.cos(2 * np.pi * t)

soleus_table = pd.DataFrame(
    {
        "max_isometric_force__N": 3549.0,
        "max_contraction_velocity": 10.0,
        "activation": activation,
        "excitation": np.clip(activation + 0.05, 0, 1),
        "passive_fiber_force__N": 0.0,
        "active_fiber_force__N": 3549.0 * activation,
        "fiber_force__N": 3549.0 * activation,
        "normalized_fiber_length": 1.0 + 0.1 * np.sin(2 * np.pi * t),
        "fiber_velocity__m_s": normalized_fiber_velocity * 10.0 * 0.05,
        "normalized_fiber_velocity": normalized_fiber_velocity,
        "force_velocity_multiplier": 1.0 + 0.5 * normalized_fiber_velocity,
    },
    index=pd.Index(t, name="time"),
)

provider = simulator.TabulatedMuscleStateProvider({"soleus": soleus_table})

##############################################################################
# Evaluate the Probe
# ------------------
#
# We compare the metabolic power of the muscle alone with the total that also
# includes the whole-body basal rate.

parameter_set = simulator.MetabolicMuscleParameterSet(
    [simulator.MetabolicMuscleParameter("soleus", 0.5, 0.8)]
)
body_mass = simulator.ConstantSystemMass(75.0)

probes = {
    "muscle only": simulator.MetabolicConfiguration(basal_rate_on=False),
    "with basal rate": simulator.MetabolicConfiguration(),
}

times = np.linspace(0.0, 1.0, 501)

fig, ax = plt.subplots(figsize=(8, 4))
for label, configuration in probes.items():
    probe = simulator.Umberger2003MetabolicPowerProbe(
        label, parameter_set, provider, body_mass, configuration
    )
    plot_metabolic_power(
        times,
        probe.evaluate_trajectory(times, show_progress=True),
        ax=ax,
        label=label,
        apply_default_formatting=False,
    )

ax.set_xlabel("Time (s)")
ax.set_ylabel("Metabolic power (W/kg)")
ax.legend(frameon=False)
plt.tight_layout()
plt.show()
