"""Typed failures raised by orbitax.

Every failure detected while converting, solving or propagating is raised
immediately as one of the classes below; nothing is clamped or retried.

- :class:`InvalidOrbitGeometry`: the parameters do not describe a bounded
  (elliptical) orbit, or they hit the equinoctial singularity at i = pi.
- :class:`NonConvergence`: the Kepler equation solver ran out of iterations.
- :class:`AttitudeFailure`: the attitude law failed while a propagated state
  was being assembled.
"""

from __future__ import annotations

from typing import Any


class OrbitaxError(Exception):
    """Base class for all orbitax failures."""


class InvalidOrbitGeometry(OrbitaxError, ValueError):
    """Raised when orbital parameters do not describe an elliptical orbit."""


class NonConvergence(OrbitaxError, ArithmeticError):
    """Raised when the Kepler equation solver exceeds its iteration cap.

    Attributes:
        eccentricity: Eccentricity the solver was given.
        mean_anomaly: Mean anomaly (or mean latitude argument) the solver was given. Units: *rad*
        last_estimate: Last eccentric anomaly iterate. Units: *rad*
        iterations: Number of iterations performed.
    """

    def __init__(
        self,
        eccentricity: float,
        mean_anomaly: float,
        last_estimate: float,
        iterations: int,
    ) -> None:
        self.eccentricity = eccentricity
        self.mean_anomaly = mean_anomaly
        self.last_estimate = last_estimate
        self.iterations = iterations
        super().__init__(
            f"Kepler equation did not converge after {iterations} iterations "
            f"(e={eccentricity!r}, M={mean_anomaly!r}, last E={last_estimate!r})"
        )


class AttitudeFailure(OrbitaxError):
    """Raised when the attitude law fails during propagation.

    The original exception is chained as ``__cause__``.

    Attributes:
        date: Target date at which the attitude law was queried.
    """

    def __init__(self, date: Any, message: str) -> None:
        self.date = date
        super().__init__(f"attitude law failed at {date}: {message}")
