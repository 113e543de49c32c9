"""
Solver options for geodesic computations.

This module defines the iteration budget of the inverse solver. The
defaults are sufficient for any ellipsoid with |f| up to a few percent;
smaller budgets trade accuracy for a hard bound on the work per call.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..errors import InvalidParameterError
from ..geometry.angles import DIGITS


@dataclass(frozen=True)
class SolverOptions:
    """
    Configuration options for the inverse geodesic solver.

    Attributes:
        max_newton_iterations: Newton steps allowed before switching to
            pure bisection (default: 20)
        max_bisection_iterations: Additional bisection steps allowed after
            the Newton budget (default: 63, one per bit of precision plus 10)
    """

    max_newton_iterations: int = 20
    max_bisection_iterations: int = DIGITS + 10

    def __post_init__(self):
        """Validate options after initialization."""
        if self.max_newton_iterations < 1:
            raise InvalidParameterError("max_newton_iterations must be at least 1")

        if self.max_bisection_iterations < 0:
            raise InvalidParameterError("max_bisection_iterations cannot be negative")

    @property
    def max_iterations(self) -> int:
        """Total iteration budget of the inverse solver."""
        return self.max_newton_iterations + self.max_bisection_iterations

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "max_newton_iterations": self.max_newton_iterations,
            "max_bisection_iterations": self.max_bisection_iterations,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SolverOptions':
        """
        Create SolverOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New SolverOptions instance
        """
        return cls(
            max_newton_iterations=int(data.get("max_newton_iterations", 20)),
            max_bisection_iterations=int(data.get("max_bisection_iterations", DIGITS + 10)),
        )

    @classmethod
    def default(cls) -> 'SolverOptions':
        """
        Create options with default values.

        Returns:
            SolverOptions with default settings
        """
        return cls()

    def __repr__(self) -> str:
        return (
            f"SolverOptions("
            f"newton={self.max_newton_iterations}, "
            f"bisection={self.max_bisection_iterations})"
        )
