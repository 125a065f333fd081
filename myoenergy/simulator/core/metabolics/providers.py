"""
Ready-made collaborators for the metabolic power probes.

The probes only need something that answers muscle states and the whole-body
mass for a given time. These classes cover the common offline cases: a single
snapshot, recorded state tables (e.g. exported from a forward simulation) and
a constant body mass.
"""

from collections.abc import Mapping

import numpy as np
import pandas as pd

from myoenergy.simulator.core.metabolics.errors import (
    ConfigurationError,
    MuscleReferenceError,
)
from myoenergy.simulator.core.metabolics.state import MUSCLE_STATE_FIELDS, MuscleState
from myoenergy.utils.types import beartowertype


@beartowertype
class StaticMuscleStateProvider:
    """
    Muscle states that do not change over time.

    Parameters
    ----------
    states : Mapping[str, MuscleState]
        Muscle state for each muscle name. Returned unchanged for every time.
    """

    def __init__(self, states: Mapping[str, MuscleState]):
        self._states = dict(states)

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def get_muscle_state(self, name: str, time: float) -> MuscleState:
        try:
            return self._states[name]
        except KeyError:
            raise MuscleReferenceError(name) from None


@beartowertype
class TabulatedMuscleStateProvider:
    """
    Muscle states interpolated from recorded tables.

    Each table is indexed by time in seconds and has one column per
    :class:`MuscleState` field. States between two samples are linearly
    interpolated. Outside the recorded range the first or last sample is used.

    Parameters
    ----------
    tables : Mapping[str, pd.DataFrame]
        Recorded state table for each muscle name.

    Raises
    ------
    ConfigurationError
        If a table misses one of the state columns (``field="columns"``) or its
        time index is empty or not strictly increasing (``field="time"``).
    """

    def __init__(self, tables: Mapping[str, pd.DataFrame]):
        self._times: dict[str, np.ndarray] = {}
        self._columns: dict[str, dict[str, np.ndarray]] = {}

        for name, table in tables.items():
            missing = [c for c in MUSCLE_STATE_FIELDS if c not in table.columns]
            if missing:
                raise ConfigurationError(
                    "columns",
                    f"State table for muscle '{name}' is missing columns: {', '.join(missing)}",
                )
            if table.empty or not (
                table.index.is_monotonic_increasing and table.index.is_unique
            ):
                raise ConfigurationError(
                    "time",
                    f"State table for muscle '{name}' must have a non-empty, strictly increasing time index.",
                )

            self._times[name] = table.index.to_numpy(dtype=float)
            self._columns[name] = {
                c: table[c].to_numpy(dtype=float) for c in MUSCLE_STATE_FIELDS
            }

    def __contains__(self, name: object) -> bool:
        return name in self._times

    @property
    def time_range(self) -> tuple[float, float]:
        """Earliest and latest time covered by all tables."""
        if not self._times:
            raise ValueError("No state tables were given.")
        return (
            max(float(t[0]) for t in self._times.values()),
            min(float(t[-1]) for t in self._times.values()),
        )

    def get_muscle_state(self, name: str, time: float) -> MuscleState:
        if name not in self._times:
            raise MuscleReferenceError(name)

        times = self._times[name]
        return MuscleState(
            **{
                c: float(np.interp(time, times, values))
                for c, values in self._columns[name].items()
            }
        )


@beartowertype
class ConstantSystemMass:
    """
    Whole-body mass that does not change over time.

    Parameters
    ----------
    mass__kg : float
        Mass of the whole model in kg.
    """

    def __init__(self, mass__kg: float):
        self.mass__kg = mass__kg

    def calc_system_mass(self, time: float) -> float:
        return self.mass__kg
