"""
Error and warning types raised by the metabolic power models.

``MetabolicsError`` is the common base class. Every error is fatal for the
evaluation that raised it, no partial totals are returned. Non-fatal
diagnostics (NaN terms, clamped rates, ...) are emitted as
``MetabolicRateWarning`` through the :mod:`warnings` module.
"""


class MetabolicsError(Exception):
    """Base class for all errors raised by the metabolic power models."""


class ConfigurationError(MetabolicsError, ValueError):
    """
    A static metabolic parameter is invalid.

    Parameters
    ----------
    field : str
        Which parameter is invalid, e.g. ``"mass"`` or ``"ratio"``.
    message : str
        Human readable description of the problem.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class MuscleReferenceError(MetabolicsError, LookupError):
    """A metabolic parameter names a muscle the model does not contain."""

    def __init__(self, muscle_name: str):
        super().__init__(
            f"MetabolicMuscleParameter: Invalid muscle '{muscle_name}' specified."
        )
        self.muscle_name = muscle_name


class DomainError(MetabolicsError, ArithmeticError):
    """
    The instantaneous muscle state makes the energy model undefined.

    Parameters
    ----------
    muscle_name : str
        Muscle whose state triggered the error.
    reason : str
        Short reason, ``"zero isometric force"`` or ``"zero force-velocity multiplier"``.
    """

    def __init__(self, muscle_name: str, reason: str):
        super().__init__(f"{reason} for muscle '{muscle_name}'")
        self.muscle_name = muscle_name
        self.reason = reason


class MetabolicRateWarning(RuntimeWarning):
    """Non-fatal diagnostic emitted while computing metabolic rates."""
