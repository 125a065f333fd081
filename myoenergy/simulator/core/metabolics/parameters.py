from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from myoenergy.simulator.core.metabolics.errors import ConfigurationError
from myoenergy.utils.types import beartowertype


@beartowertype
@dataclass(frozen=True)
class MetabolicMuscleParameter:
    """
    Physiological parameters of one muscle used by the metabolic energy models.

    Parameters
    ----------
    name : str
        Name of the muscle in the musculoskeletal model.
    muscle_mass__kg : float
        Mass of the muscle in kg. Must be positive.
    ratio_slow_twitch_fibers : float
        Fraction of the muscle cross-sectional area made of slow-twitch fibers.
        Must be in [0, 1].

    Notes
    -----
    Value ranges are not checked here. They are checked once, when the parameter
    is bound to a muscle (see :func:`resolve_metabolic_muscles`).
    """

    name: str
    muscle_mass__kg: float
    ratio_slow_twitch_fibers: float

    @property
    def ratio_fast_twitch_fibers(self) -> float:
        return 1 - self.ratio_slow_twitch_fibers


@beartowertype
class MetabolicMuscleParameterSet(Mapping):
    """
    Ordered, read-only collection of :class:`MetabolicMuscleParameter`, keyed by muscle name.

    The iteration order is the order in which the parameters were given. It fixes
    the summation order of the per-muscle rates so that totals are reproducible.

    Parameters
    ----------
    parameters : Iterable[MetabolicMuscleParameter], optional
        Parameters of the muscles to include. Empty by default.

    Raises
    ------
    ConfigurationError
        If two parameters share the same muscle name.
    """

    def __init__(self, parameters: Iterable[MetabolicMuscleParameter] = ()):
        entries: dict[str, MetabolicMuscleParameter] = {}
        for parameter in parameters:
            if parameter.name in entries:
                raise ConfigurationError(
                    "name",
                    f"MetabolicMuscleParameterSet: Duplicate muscle '{parameter.name}'.",
                )
            entries[parameter.name] = parameter

        self._entries = entries

    def __getitem__(self, name: object) -> MetabolicMuscleParameter:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._entries.values())!r})"

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def parameters(self) -> tuple[MetabolicMuscleParameter, ...]:
        return tuple(self._entries.values())
