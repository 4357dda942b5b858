"""Configuration classes for routegraph components."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class SolverConfig:
    """Defaults for the route solver."""

    # Node selection strategy used when a caller does not pass one
    method: str = "scan"

    # Strategies understood by routegraph.algorithms.spf.solve
    supported_methods: Tuple[str, ...] = ("scan", "heap")

    def validate_method(self, method: str) -> str:
        """Return ``method`` normalized to lower case.

        Raises:
            ValueError: If the method is not one of ``supported_methods``.
        """
        name = str(method).strip().lower()
        if name not in self.supported_methods:
            supported = ", ".join(self.supported_methods)
            raise ValueError(
                f"Unknown solver method '{method}'. Supported methods: {supported}"
            )
        return name


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
