"""
orbitax is an orbital state representation and analytical keplerian propagation library implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    JD_MJD_OFFSET,
    JD_J2000,
    SECONDS_PER_DAY,
    R_EARTH,
    GM_EARTH,
    DEFAULT_MASS,
)

from .config import set_dtype, get_dtype
from .epoch import Epoch
from .errors import (
    OrbitaxError,
    InvalidOrbitGeometry,
    NonConvergence,
    AttitudeFailure,
)
from .frames import Frame, Transform, GCRF, EME2000
from .utils import normalize_angle

from .orbits import (
    PVCoordinates,
    PositionAngle,
    OrbitType,
    KeplerSolverConfig,
    CartesianParameters,
    KeplerianParameters,
    EquinoctialParameters,
    CircularParameters,
    Orbit,
    solve_kepler,
    anomaly_eccentric_to_mean,
    anomaly_mean_to_eccentric,
    anomaly_true_to_eccentric,
    anomaly_eccentric_to_true,
    anomaly_true_to_mean,
    anomaly_mean_to_true,
    orbital_period,
    mean_motion,
)

from .attitudes import Attitude, AttitudeLaw, InertialLaw, LofAlignedLaw

from .propagation import SpacecraftState, KeplerianPropagator, propagate

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "JD_MJD_OFFSET",
    "JD_J2000",
    "SECONDS_PER_DAY",
    "R_EARTH",
    "GM_EARTH",
    "DEFAULT_MASS",
    # Config
    "set_dtype",
    "get_dtype",
    # Epoch
    "Epoch",
    # Errors
    "OrbitaxError",
    "InvalidOrbitGeometry",
    "NonConvergence",
    "AttitudeFailure",
    # Frames
    "Frame",
    "Transform",
    "GCRF",
    "EME2000",
    # Utils
    "normalize_angle",
    # Orbits
    "PVCoordinates",
    "PositionAngle",
    "OrbitType",
    "KeplerSolverConfig",
    "CartesianParameters",
    "KeplerianParameters",
    "EquinoctialParameters",
    "CircularParameters",
    "Orbit",
    "solve_kepler",
    "anomaly_eccentric_to_mean",
    "anomaly_mean_to_eccentric",
    "anomaly_true_to_eccentric",
    "anomaly_eccentric_to_true",
    "anomaly_true_to_mean",
    "anomaly_mean_to_true",
    "orbital_period",
    "mean_motion",
    # Attitudes
    "Attitude",
    "AttitudeLaw",
    "InertialLaw",
    "LofAlignedLaw",
    # Propagation
    "SpacecraftState",
    "KeplerianPropagator",
    "propagate",
]
