"""Orbital parameter representations.

Four interchangeable representations of the same physical orbit state:

| Class                    | Native elements                           | Singular for        |
|--------------------------|-------------------------------------------|---------------------|
| :class:`CartesianParameters`   | position, velocity                  | never               |
| :class:`KeplerianParameters`   | a, e, i, w, RAAN, anomaly           | e ~ 0, i ~ 0 or pi  |
| :class:`EquinoctialParameters` | a, ex, ey, hx, hy, latitude argument | i ~ pi            |
| :class:`CircularParameters`    | a, ex, ey, i, RAAN, latitude argument | i ~ 0 or pi        |

Whatever its native storage, every representation answers the same
accessors (``a``, ``e``, ``i``, ``ex``, ``ey``, ``hx``, ``hy``, ``lv``,
``le``, ``lm``, ``frame`` and ``pv_coordinates(mu)``).  Non-equinoctial
representations answer them through an equinoctial copy of themselves,
built on first access and cached.  ``ex``/``ey`` are always the
*equinoctial* eccentricity-vector components; the circular ones are
``circular_ex``/``circular_ey``.

Instances are immutable.  Constructors validate their input and raise
:class:`~orbitax.errors.InvalidOrbitGeometry` for anything that is not an
elliptical orbit (``a <= 0`` or ``e`` outside ``[0, 1)``) or that hits the
equinoctial singularity (``i = pi``).  Constructors taking a mean anomaly
solve Kepler's equation and may raise :class:`~orbitax.errors.NonConvergence`.

Only the unambiguous classical elements (``e`` and ``i``) are offered by the
uniform accessors.  Argument of perigee and node are available after an
explicit conversion to :class:`KeplerianParameters` or
:class:`CircularParameters`, with the caveat that they are arbitrary for
near-circular or near-equatorial orbits.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol, Union

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.errors import InvalidOrbitGeometry
from orbitax.orbits._types import (
    CircularElements,
    EquinoctialElements,
    KeplerianElements,
    KeplerSolverConfig,
    OrbitType,
    PositionAngle,
    PVCoordinates,
)
from orbitax.orbits.anomaly import (
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_true,
    anomaly_true_to_eccentric,
    latitude_eccentric_to_mean,
    latitude_eccentric_to_true,
    latitude_mean_to_true,
    latitude_true_to_eccentric,
)
from orbitax.orbits.conversions import (
    circular_to_equinoctial,
    equinoctial_to_circular,
    equinoctial_to_keplerian,
    equinoctial_to_pv,
    keplerian_to_equinoctial,
    pv_to_equinoctial,
)

if TYPE_CHECKING:
    from orbitax.frames import Frame


def _scalar(x: ArrayLike) -> Array:
    return jnp.asarray(x, dtype=get_dtype())


def _check_shape(a: ArrayLike, e: ArrayLike) -> None:
    a = float(a)
    e = float(e)
    if not (a > 0.0 and math.isfinite(a)):
        raise InvalidOrbitGeometry(
            f"Semi-major axis must be positive and finite for an elliptical orbit, got {a}"
        )
    if not 0.0 <= e < 1.0:
        raise InvalidOrbitGeometry(
            f"Eccentricity must be in [0, 1) for an elliptical orbit, got {e}"
        )


def _check_inclination(i: ArrayLike) -> None:
    i = float(i)
    if not 0.0 <= i < math.pi:
        raise InvalidOrbitGeometry(f"Inclination must be in [0, pi), got {i}")


def _check_inclination_vector(hx: ArrayLike, hy: ArrayLike) -> None:
    if not (math.isfinite(float(hx)) and math.isfinite(float(hy))):
        raise InvalidOrbitGeometry(
            "Equinoctial inclination vector is singular (retrograde equatorial orbit, i = pi)"
        )


def _check_angles(**angles: ArrayLike) -> None:
    for name, value in angles.items():
        value = float(value)
        if not math.isfinite(value):
            raise InvalidOrbitGeometry(f"Angle {name!r} must be finite, got {value}")


def _check_mu(mu: ArrayLike) -> float:
    """Return ``mu`` as a float, or raise ``ValueError`` if it is not positive and finite."""
    mu = float(mu)
    if not (mu > 0.0 and math.isfinite(mu)):
        raise ValueError(
            f"Central attraction coefficient must be positive and finite, got {mu}"
        )
    return mu


class OrbitalParameters(Protocol):
    """Accessor contract shared by every orbital parameter representation."""

    orbit_type: OrbitType

    @property
    def frame(self) -> Frame | None: ...

    @property
    def equinoctial(self) -> EquinoctialParameters: ...

    @property
    def a(self) -> Array: ...

    @property
    def e(self) -> Array: ...

    @property
    def i(self) -> Array: ...

    @property
    def ex(self) -> Array: ...

    @property
    def ey(self) -> Array: ...

    @property
    def hx(self) -> Array: ...

    @property
    def hy(self) -> Array: ...

    @property
    def lv(self) -> Array: ...

    @property
    def le(self) -> Array: ...

    @property
    def lm(self) -> Array: ...

    def pv_coordinates(self, mu: ArrayLike) -> PVCoordinates: ...


class _EquinoctialView:
    """Uniform accessors answered from the ``equinoctial`` form of an instance."""

    __slots__ = ()

    @property
    def a(self) -> Array:
        """Semi-major axis. Units: *m*"""
        return self.equinoctial.elements.a

    @property
    def e(self) -> Array:
        """Eccentricity."""
        el = self.equinoctial.elements
        return jnp.sqrt(el.ex * el.ex + el.ey * el.ey)

    @property
    def i(self) -> Array:
        """Inclination. Units: *rad*"""
        el = self.equinoctial.elements
        return 2.0 * jnp.arctan(jnp.sqrt(el.hx * el.hx + el.hy * el.hy))

    @property
    def ex(self) -> Array:
        """``e cos(w + RAAN)``, first equinoctial eccentricity-vector component."""
        return self.equinoctial.elements.ex

    @property
    def ey(self) -> Array:
        """``e sin(w + RAAN)``, second equinoctial eccentricity-vector component."""
        return self.equinoctial.elements.ey

    @property
    def hx(self) -> Array:
        """``tan(i/2) cos(RAAN)``, first inclination-vector component."""
        return self.equinoctial.elements.hx

    @property
    def hy(self) -> Array:
        """``tan(i/2) sin(RAAN)``, second inclination-vector component."""
        return self.equinoctial.elements.hy

    @property
    def lv(self) -> Array:
        """True latitude argument ``v + w + RAAN``. Units: *rad*"""
        return self.equinoctial.elements.lv

    @property
    def le(self) -> Array:
        """Eccentric latitude argument ``E + w + RAAN``. Units: *rad*"""
        el = self.equinoctial.elements
        return latitude_true_to_eccentric(el.lv, el.ex, el.ey)

    @property
    def lm(self) -> Array:
        """Mean latitude argument ``M + w + RAAN``. Units: *rad*"""
        el = self.equinoctial.elements
        return latitude_eccentric_to_mean(self.le, el.ex, el.ey)

    def pv_coordinates(self, mu: ArrayLike) -> PVCoordinates:
        """Position and velocity for central attraction coefficient ``mu``.

        Args:
            mu: Central attraction coefficient. Units: *m^3/s^2*

        Returns:
            PVCoordinates: Position (*m*) and velocity (*m/s*) in ``frame``.

        Raises:
            ValueError: If ``mu`` is not positive and finite.
        """
        return equinoctial_to_pv(self.equinoctial.elements, _check_mu(mu))


# ──────────────────────────────────────────────
# Equinoctial
# ──────────────────────────────────────────────


class EquinoctialParameters(_EquinoctialView):
    """Equinoctial orbital parameters.

    Well defined for every elliptical orbit except retrograde equatorial
    ones, which makes them the pivot of every conversion.

    Args:
        a (float): Semi-major axis. Units: *m*
        ex (float): ``e cos(w + RAAN)``.
        ey (float): ``e sin(w + RAAN)``.
        hx (float): ``tan(i/2) cos(RAAN)``.
        hy (float): ``tan(i/2) sin(RAAN)``.
        l (float): Latitude argument of kind ``position_angle``. Units: *rad*
        position_angle (PositionAngle): Kind of ``l``. Default: ``TRUE``.
        frame (Frame | None): Frame the parameters are expressed in.
        config (KeplerSolverConfig | None): Solver tuning for a MEAN ``l``.

    Raises:
        InvalidOrbitGeometry: If ``a <= 0``, ``e >= 1`` or the inclination
            vector is not finite.
        NonConvergence: If ``l`` is MEAN and Kepler's equation does not converge.
    """

    __slots__ = ("_elements", "_frame")

    orbit_type = OrbitType.EQUINOCTIAL

    def __init__(
        self,
        a: float,
        ex: float,
        ey: float,
        hx: float,
        hy: float,
        l: float,
        position_angle: PositionAngle = PositionAngle.TRUE,
        frame: Frame | None = None,
        config: KeplerSolverConfig | None = None,
    ) -> None:
        a, ex, ey, hx, hy, l = (_scalar(x) for x in (a, ex, ey, hx, hy, l))
        _check_shape(a, jnp.sqrt(ex * ex + ey * ey))
        _check_inclination_vector(hx, hy)
        _check_angles(l=l)

        if position_angle == PositionAngle.MEAN:
            lv = latitude_mean_to_true(l, ex, ey, config)
        elif position_angle == PositionAngle.ECCENTRIC:
            lv = latitude_eccentric_to_true(l, ex, ey)
        else:
            lv = l

        self._elements = EquinoctialElements(a, ex, ey, hx, hy, lv)
        self._frame = frame

    @classmethod
    def _from_internal(cls, elements: EquinoctialElements, frame: Frame | None) -> EquinoctialParameters:
        """Create from already validated elements."""
        obj = object.__new__(cls)
        obj._elements = elements
        obj._frame = frame
        return obj

    @classmethod
    def from_parameters(cls, params: OrbitalParameters) -> EquinoctialParameters:
        """Return the equinoctial form of any orbital parameters."""
        return params.equinoctial

    @property
    def elements(self) -> EquinoctialElements:
        """Raw elements, with the true latitude argument."""
        return self._elements

    @property
    def equinoctial(self) -> EquinoctialParameters:
        return self

    @property
    def frame(self) -> Frame | None:
        """Frame the parameters are expressed in."""
        return self._frame

    def __str__(self) -> str:
        a, ex, ey, hx, hy, lv = (float(x) for x in self._elements)
        return (f"equinoctial parameters: {{a: {a}; ex: {ex}; ey: {ey}; "
                f"hx: {hx}; hy: {hy}; lv: {math.degrees(lv)};}}")

    def __repr__(self) -> str:
        return self.__str__()


# ──────────────────────────────────────────────
# Keplerian
# ──────────────────────────────────────────────


class KeplerianParameters(_EquinoctialView):
    """Classical keplerian orbital parameters.

    Args:
        a (float): Semi-major axis. Units: *m*
        e (float): Eccentricity, in ``[0, 1)``.
        i (float): Inclination, in ``[0, pi)``. Units: *rad*
        pa (float): Argument of perigee ``w``. Units: *rad*
        raan (float): Right ascension of the ascending node. Units: *rad*
        anomaly (float): Anomaly of kind ``position_angle``. Units: *rad*
        position_angle (PositionAngle): Kind of ``anomaly``. Default: ``TRUE``.
        frame (Frame | None): Frame the parameters are expressed in.
        config (KeplerSolverConfig | None): Solver tuning for a MEAN anomaly.

    Raises:
        InvalidOrbitGeometry: If ``a <= 0``, ``e`` is outside ``[0, 1)`` or
            ``i`` is outside ``[0, pi)``.
        NonConvergence: If ``anomaly`` is MEAN and Kepler's equation does not converge.

    Examples:
        ```python
        from orbitax.orbits import KeplerianParameters, PositionAngle
        kep = KeplerianParameters(7209668.0, 0.5e-4, 1.7, 2.1, 2.9, 6.2,
                                  PositionAngle.TRUE)
        pv = kep.pv_coordinates(3.9860047e14)
        ```
    """

    __slots__ = ("_elements", "_frame", "_equinoctial")

    orbit_type = OrbitType.KEPLERIAN

    def __init__(
        self,
        a: float,
        e: float,
        i: float,
        pa: float,
        raan: float,
        anomaly: float,
        position_angle: PositionAngle = PositionAngle.TRUE,
        frame: Frame | None = None,
        config: KeplerSolverConfig | None = None,
    ) -> None:
        a, e, i, pa, raan, anomaly = (_scalar(x) for x in (a, e, i, pa, raan, anomaly))
        _check_shape(a, e)
        _check_inclination(i)
        _check_angles(pa=pa, raan=raan, anomaly=anomaly)

        if position_angle == PositionAngle.MEAN:
            v = anomaly_mean_to_true(anomaly, e, config=config)
        elif position_angle == PositionAngle.ECCENTRIC:
            v = anomaly_eccentric_to_true(anomaly, e)
        else:
            v = anomaly

        self._elements = KeplerianElements(a, e, i, pa, raan, v)
        self._frame = frame
        self._equinoctial = None

    @classmethod
    def _from_internal(cls, elements: KeplerianElements, frame: Frame | None) -> KeplerianParameters:
        obj = object.__new__(cls)
        obj._elements = elements
        obj._frame = frame
        obj._equinoctial = None
        return obj

    @classmethod
    def from_parameters(cls, params: OrbitalParameters) -> KeplerianParameters:
        """Convert any orbital parameters to keplerian parameters.

        ``pa`` and ``raan`` of the result are arbitrary for near-circular
        or near-equatorial orbits.
        """
        if isinstance(params, KeplerianParameters):
            return params
        eq = params.equinoctial
        return cls._from_internal(equinoctial_to_keplerian(eq.elements), eq.frame)

    @property
    def elements(self) -> KeplerianElements:
        """Raw elements, with the true anomaly."""
        return self._elements

    @property
    def equinoctial(self) -> EquinoctialParameters:
        eq = self._equinoctial
        if eq is None:
            eq = EquinoctialParameters._from_internal(
                keplerian_to_equinoctial(self._elements), self._frame
            )
            self._equinoctial = eq
        return eq

    @property
    def frame(self) -> Frame | None:
        return self._frame

    @property
    def e(self) -> Array:
        """Eccentricity."""
        return self._elements.e

    @property
    def i(self) -> Array:
        """Inclination. Units: *rad*"""
        return self._elements.i

    @property
    def pa(self) -> Array:
        """Argument of perigee. Units: *rad*"""
        return self._elements.pa

    @property
    def raan(self) -> Array:
        """Right ascension of the ascending node. Units: *rad*"""
        return self._elements.raan

    @property
    def true_anomaly(self) -> Array:
        """True anomaly. Units: *rad*"""
        return self._elements.v

    @property
    def eccentric_anomaly(self) -> Array:
        """Eccentric anomaly. Units: *rad*"""
        return anomaly_true_to_eccentric(self._elements.v, self._elements.e)

    @property
    def mean_anomaly(self) -> Array:
        """Mean anomaly. Units: *rad*"""
        return anomaly_eccentric_to_mean(self.eccentric_anomaly, self._elements.e)

    def anomaly(self, position_angle: PositionAngle) -> Array:
        """Anomaly of the requested kind. Units: *rad*"""
        if position_angle == PositionAngle.MEAN:
            return self.mean_anomaly
        if position_angle == PositionAngle.ECCENTRIC:
            return self.eccentric_anomaly
        return self.true_anomaly

    def __str__(self) -> str:
        a, e, i, pa, raan, v = (float(x) for x in self._elements)
        return (f"keplerian parameters: {{a: {a}; e: {e}; i: {math.degrees(i)}; "
                f"pa: {math.degrees(pa)}; raan: {math.degrees(raan)}; v: {math.degrees(v)};}}")

    def __repr__(self) -> str:
        return self.__str__()


# ──────────────────────────────────────────────
# Circular
# ──────────────────────────────────────────────


class CircularParameters(_EquinoctialView):
    """Circular orbital parameters.

    Suited to near-circular, non-equatorial orbits: the perigee is folded
    into the eccentricity vector ``(ex, ey) = e (cos w, sin w)`` and the
    position is the latitude argument ``alpha = anomaly + w``.

    Args:
        a (float): Semi-major axis. Units: *m*
        ex (float): ``e cos(w)``.
        ey (float): ``e sin(w)``.
        i (float): Inclination, in ``[0, pi)``. Units: *rad*
        raan (float): Right ascension of the ascending node. Units: *rad*
        alpha (float): Latitude argument of kind ``position_angle``. Units: *rad*
        position_angle (PositionAngle): Kind of ``alpha``. Default: ``TRUE``.
        frame (Frame | None): Frame the parameters are expressed in.
        config (KeplerSolverConfig | None): Solver tuning for a MEAN ``alpha``.

    Raises:
        InvalidOrbitGeometry: If ``a <= 0``, ``e >= 1`` or ``i`` is outside ``[0, pi)``.
        NonConvergence: If ``alpha`` is MEAN and Kepler's equation does not converge.
    """

    __slots__ = ("_elements", "_frame", "_equinoctial")

    orbit_type = OrbitType.CIRCULAR

    def __init__(
        self,
        a: float,
        ex: float,
        ey: float,
        i: float,
        raan: float,
        alpha: float,
        position_angle: PositionAngle = PositionAngle.TRUE,
        frame: Frame | None = None,
        config: KeplerSolverConfig | None = None,
    ) -> None:
        a, ex, ey, i, raan, alpha = (_scalar(x) for x in (a, ex, ey, i, raan, alpha))
        _check_shape(a, jnp.sqrt(ex * ex + ey * ey))
        _check_inclination(i)
        _check_angles(raan=raan, alpha=alpha)

        # w + v is shaped like w + RAAN + v, so the latitude formulas apply
        if position_angle == PositionAngle.MEAN:
            alpha_v = latitude_mean_to_true(alpha, ex, ey, config)
        elif position_angle == PositionAngle.ECCENTRIC:
            alpha_v = latitude_eccentric_to_true(alpha, ex, ey)
        else:
            alpha_v = alpha

        self._elements = CircularElements(a, ex, ey, i, raan, alpha_v)
        self._frame = frame
        self._equinoctial = None

    @classmethod
    def _from_internal(cls, elements: CircularElements, frame: Frame | None) -> CircularParameters:
        obj = object.__new__(cls)
        obj._elements = elements
        obj._frame = frame
        obj._equinoctial = None
        return obj

    @classmethod
    def from_parameters(cls, params: OrbitalParameters) -> CircularParameters:
        """Convert any orbital parameters to circular parameters.

        ``raan`` of the result is arbitrary for near-equatorial orbits.
        """
        if isinstance(params, CircularParameters):
            return params
        eq = params.equinoctial
        return cls._from_internal(equinoctial_to_circular(eq.elements), eq.frame)

    @property
    def elements(self) -> CircularElements:
        """Raw elements, with the true latitude argument."""
        return self._elements

    @property
    def equinoctial(self) -> EquinoctialParameters:
        eq = self._equinoctial
        if eq is None:
            eq = EquinoctialParameters._from_internal(
                circular_to_equinoctial(self._elements), self._frame
            )
            self._equinoctial = eq
        return eq

    @property
    def frame(self) -> Frame | None:
        return self._frame

    @property
    def i(self) -> Array:
        """Inclination. Units: *rad*"""
        return self._elements.i

    @property
    def circular_ex(self) -> Array:
        """``e cos(w)``."""
        return self._elements.ex

    @property
    def circular_ey(self) -> Array:
        """``e sin(w)``."""
        return self._elements.ey

    @property
    def raan(self) -> Array:
        """Right ascension of the ascending node. Units: *rad*"""
        return self._elements.raan

    @property
    def alpha_v(self) -> Array:
        """True latitude argument ``v + w``. Units: *rad*"""
        return self._elements.alpha_v

    @property
    def alpha_e(self) -> Array:
        """Eccentric latitude argument ``E + w``. Units: *rad*"""
        el = self._elements
        return latitude_true_to_eccentric(el.alpha_v, el.ex, el.ey)

    @property
    def alpha_m(self) -> Array:
        """Mean latitude argument ``M + w``. Units: *rad*"""
        el = self._elements
        return latitude_eccentric_to_mean(self.alpha_e, el.ex, el.ey)

    def alpha(self, position_angle: PositionAngle) -> Array:
        """Latitude argument of the requested kind. Units: *rad*"""
        if position_angle == PositionAngle.MEAN:
            return self.alpha_m
        if position_angle == PositionAngle.ECCENTRIC:
            return self.alpha_e
        return self.alpha_v

    def __str__(self) -> str:
        a, ex, ey, i, raan, alpha_v = (float(x) for x in self._elements)
        return (f"circular parameters: {{a: {a}; ex: {ex}; ey: {ey}; i: {math.degrees(i)}; "
                f"raan: {math.degrees(raan)}; alpha_v: {math.degrees(alpha_v)};}}")

    def __repr__(self) -> str:
        return self.__str__()


# ──────────────────────────────────────────────
# Cartesian
# ──────────────────────────────────────────────


class CartesianParameters(_EquinoctialView):
    """Cartesian orbital parameters: a position/velocity pair.

    Turning a position and velocity into elements needs a central
    attraction coefficient, so the ``mu`` the pair was produced under is
    kept with it.  ``pv_coordinates`` returns the stored pair for that
    ``mu``; for any other ``mu`` it rebuilds the pair from the elements.

    The equinoctial form is computed at construction, since it is needed to
    reject non-elliptical states.

    Args:
        pv (PVCoordinates): Position (*m*) and velocity (*m/s*).
        mu (float): Central attraction coefficient. Units: *m^3/s^2*
        frame (Frame | None): Frame the coordinates are expressed in.

    Raises:
        InvalidOrbitGeometry: If the state is parabolic or hyperbolic, or its
            angular momentum points exactly along -z.
        ValueError: If ``mu`` is not positive and finite.
    """

    __slots__ = ("_pv", "_mu", "_frame", "_equinoctial")

    orbit_type = OrbitType.CARTESIAN

    def __init__(self, pv: PVCoordinates, mu: float, frame: Frame | None = None) -> None:
        mu = _check_mu(mu)
        dtype = get_dtype()
        pv = PVCoordinates(
            jnp.asarray(pv.position, dtype=dtype), jnp.asarray(pv.velocity, dtype=dtype)
        )
        elements = pv_to_equinoctial(pv, mu)
        _check_shape(elements.a, jnp.sqrt(elements.ex ** 2 + elements.ey ** 2))
        _check_inclination_vector(elements.hx, elements.hy)

        self._pv = pv
        self._mu = mu
        self._frame = frame
        self._equinoctial = EquinoctialParameters._from_internal(elements, frame)

    @classmethod
    def from_parameters(cls, params: OrbitalParameters, mu: float) -> CartesianParameters:
        """Convert any orbital parameters to cartesian parameters under ``mu``."""
        mu = _check_mu(mu)
        if isinstance(params, CartesianParameters) and params.mu == mu:
            return params
        obj = object.__new__(cls)
        obj._pv = params.pv_coordinates(mu)
        obj._mu = mu
        obj._frame = params.frame
        obj._equinoctial = params.equinoctial
        return obj

    @property
    def equinoctial(self) -> EquinoctialParameters:
        return self._equinoctial

    @property
    def frame(self) -> Frame | None:
        return self._frame

    @property
    def mu(self) -> float:
        """Central attraction coefficient the stored pair belongs to. Units: *m^3/s^2*"""
        return self._mu

    @property
    def position(self) -> Array:
        """Position. Units: *m*"""
        return self._pv.position

    @property
    def velocity(self) -> Array:
        """Velocity. Units: *m/s*"""
        return self._pv.velocity

    def pv_coordinates(self, mu: ArrayLike) -> PVCoordinates:
        mu = _check_mu(mu)
        if mu == self._mu:
            return self._pv
        return equinoctial_to_pv(self._equinoctial.elements, mu)

    def __str__(self) -> str:
        p = [float(x) for x in self._pv.position]
        v = [float(x) for x in self._pv.velocity]
        return f"cartesian parameters: {{P({p[0]}, {p[1]}, {p[2]}), V({v[0]}, {v[1]}, {v[2]})}}"

    def __repr__(self) -> str:
        return self.__str__()


AnyParameters = Union[
    CartesianParameters, KeplerianParameters, EquinoctialParameters, CircularParameters
]
"""Closed union of the orbital parameter representations."""


def convert_parameters(
    params: OrbitalParameters,
    orbit_type: OrbitType,
    mu: float | None = None,
) -> AnyParameters:
    """Convert orbital parameters to the representation ``orbit_type``.

    Args:
        params: Parameters to convert.
        orbit_type: Target representation.
        mu: Central attraction coefficient, required for ``CARTESIAN``.
            Units: *m^3/s^2*

    Returns:
        Parameters of the requested representation describing the same state.

    Raises:
        ValueError: If ``orbit_type`` is ``CARTESIAN`` and ``mu`` is not given.
    """
    if orbit_type == OrbitType.CARTESIAN:
        if mu is None:
            raise ValueError("Converting to cartesian parameters requires mu")
        return CartesianParameters.from_parameters(params, mu)
    if orbit_type == OrbitType.KEPLERIAN:
        return KeplerianParameters.from_parameters(params)
    if orbit_type == OrbitType.CIRCULAR:
        return CircularParameters.from_parameters(params)
    return EquinoctialParameters.from_parameters(params)
