"""Orbital state representations.

This sub-module provides:

- **Parameter representations**: cartesian, keplerian, equinoctial and
  circular orbital parameters sharing one accessor contract, and the
  :class:`Orbit` value pairing them with a date.
- **Conversion formulas**: pure, traceable conversions between raw element
  tuples, all routed through equinoctial elements.
- **Anomaly conversions**: true, eccentric and mean anomalies and latitude
  arguments, including a bounded, JAX-traceable Kepler equation solver.
- **Two-body quantities**: period, mean motion and apsidal distances.
"""

from ._types import (
    CircularElements,
    EquinoctialElements,
    KeplerianElements,
    KeplerSolution,
    KeplerSolverConfig,
    OrbitType,
    PositionAngle,
    PVCoordinates,
)
from .anomaly import (
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_eccentric,
    anomaly_mean_to_true,
    anomaly_true_to_eccentric,
    anomaly_true_to_mean,
    latitude_eccentric_to_mean,
    latitude_eccentric_to_true,
    latitude_mean_to_eccentric,
    latitude_mean_to_true,
    latitude_true_to_eccentric,
    latitude_true_to_mean,
    solve_kepler,
    solve_kepler_equinoctial,
)
from .conversions import (
    circular_to_equinoctial,
    equinoctial_to_circular,
    equinoctial_to_keplerian,
    equinoctial_to_pv,
    keplerian_to_equinoctial,
    pv_to_equinoctial,
)
from .keplerian import (
    apoapsis_distance,
    mean_motion,
    orbital_period,
    periapsis_distance,
    semimajor_axis_from_orbital_period,
)
from .orbit import Orbit
from .parameters import (
    AnyParameters,
    CartesianParameters,
    CircularParameters,
    EquinoctialParameters,
    KeplerianParameters,
    OrbitalParameters,
    convert_parameters,
)

__all__ = [
    "PVCoordinates",
    "PositionAngle",
    "OrbitType",
    "KeplerSolution",
    "KeplerSolverConfig",
    "EquinoctialElements",
    "KeplerianElements",
    "CircularElements",
    "solve_kepler",
    "solve_kepler_equinoctial",
    "anomaly_eccentric_to_mean",
    "anomaly_mean_to_eccentric",
    "anomaly_true_to_eccentric",
    "anomaly_eccentric_to_true",
    "anomaly_true_to_mean",
    "anomaly_mean_to_true",
    "latitude_eccentric_to_true",
    "latitude_true_to_eccentric",
    "latitude_eccentric_to_mean",
    "latitude_mean_to_eccentric",
    "latitude_true_to_mean",
    "latitude_mean_to_true",
    "pv_to_equinoctial",
    "equinoctial_to_pv",
    "keplerian_to_equinoctial",
    "equinoctial_to_keplerian",
    "circular_to_equinoctial",
    "equinoctial_to_circular",
    "orbital_period",
    "semimajor_axis_from_orbital_period",
    "mean_motion",
    "periapsis_distance",
    "apoapsis_distance",
    "OrbitalParameters",
    "AnyParameters",
    "CartesianParameters",
    "KeplerianParameters",
    "EquinoctialParameters",
    "CircularParameters",
    "convert_parameters",
    "Orbit",
]
