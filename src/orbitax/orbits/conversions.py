"""Conversion formulas between orbital parameter representations.

Every conversion goes through equinoctial elements: cartesian, keplerian
and circular elements each have one formula to and one formula from
:class:`~orbitax.orbits._types.EquinoctialElements`, and any other pair is
the composition of two of them.

Equinoctial elements are singular only for retrograde equatorial orbits
(``i = pi``), where the inclination vector ``tan(i/2) (cos RAAN, sin RAAN)``
is unbounded.  Extracting ``w`` and ``RAAN`` from them is ill-posed for
``e ~ 0`` or ``i ~ 0``: the two-argument arctangent then returns an
arbitrary split of ``w + RAAN`` between the two angles.

All functions here are pure and traceable under ``jax.jit``; they do no
validation.  The parameter classes in :mod:`orbitax.orbits.parameters`
validate their inputs before calling them.

References:
    1. R. A. Broucke and P. J. Cefola, *On the Equinoctial Orbit Elements*,
       Celestial Mechanics 5, 1972.
    2. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, Springer, 2012, Sec. 2.2.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.orbits._types import (
    CircularElements,
    EquinoctialElements,
    KeplerianElements,
    PVCoordinates,
)
from orbitax.orbits.anomaly import latitude_true_to_eccentric
from orbitax.utils import normalize_angle

# ──────────────────────────────────────────────
# Cartesian <-> equinoctial
# ──────────────────────────────────────────────


def pv_to_equinoctial(pv: PVCoordinates, mu: ArrayLike) -> EquinoctialElements:
    """Convert a position/velocity pair to equinoctial elements.

    The inclination vector comes from the direction of the angular momentum
    ``w = r x v / |r x v|`` as ``(hx, hy) = (-w_y, w_x) / (1 + w_z)``.  The
    true latitude argument comes from the position resolved on the in-plane
    basis built from ``(hx, hy)``, and the eccentricity vector from the
    eccentric-anomaly terms ``e cos E = r v^2 / mu - 1`` and
    ``e sin E = r.v / sqrt(mu a)``.  ``w`` and ``RAAN`` are never computed.

    Args:
        pv: Position (*m*) and velocity (*m/s*) in a pseudo-inertial frame.
        mu: Central attraction coefficient. Units: *m^3/s^2*

    Returns:
        EquinoctialElements: ``a`` is negative or infinite for unbound
            trajectories; the caller is responsible for rejecting them.
    """
    dtype = get_dtype()
    p = jnp.asarray(pv.position, dtype=dtype)
    v = jnp.asarray(pv.velocity, dtype=dtype)
    mu = jnp.asarray(mu, dtype=dtype)

    r = jnp.linalg.norm(p)
    v2 = jnp.dot(v, v)
    r_v2_on_mu = r * v2 / mu

    # Semi-major axis (vis-viva)
    a = r / (2.0 - r_v2_on_mu)

    # Inclination vector
    h = jnp.cross(p, v)
    w = h / jnp.linalg.norm(h)
    d = 1.0 / (1.0 + w[2])
    hx = -d * w[1]
    hy = d * w[0]

    # True latitude argument
    cos_lv = (p[0] - d * p[2] * w[0]) / r
    sin_lv = (p[1] - d * p[2] * w[1]) / r
    lv = jnp.arctan2(sin_lv, cos_lv)

    # Eccentricity vector
    e_sin_E = jnp.dot(p, v) / jnp.sqrt(mu * a)
    e_cos_E = r_v2_on_mu - 1.0
    e2 = e_cos_E * e_cos_E + e_sin_E * e_sin_E
    f = e_cos_E - e2
    g = jnp.sqrt(1.0 - e2) * e_sin_E
    ex = a * (f * cos_lv + g * sin_lv) / r
    ey = a * (f * sin_lv - g * cos_lv) / r

    return EquinoctialElements(a, ex, ey, hx, hy, lv)


def equinoctial_to_pv(eq: EquinoctialElements, mu: ArrayLike) -> PVCoordinates:
    """Convert equinoctial elements to a position/velocity pair.

    The orbital-plane basis ``U`` (towards the ascending node direction
    rotated by the node) and ``V`` is built directly from ``(hx, hy)`` with
    half-angle tangent identities.  In-plane coordinates use the eccentric
    latitude argument ``LE`` and ``beta = 1 / (1 + sqrt(1 - ex^2 - ey^2))``.

    Args:
        eq: Equinoctial elements.
        mu: Central attraction coefficient. Units: *m^3/s^2*

    Returns:
        PVCoordinates: Position (*m*) and velocity (*m/s*).
    """
    dtype = get_dtype()
    a, ex, ey, hx, hy, lv = (jnp.asarray(x, dtype=dtype) for x in eq)
    mu = jnp.asarray(mu, dtype=dtype)

    lat_ecc = latitude_true_to_eccentric(lv, ex, ey)

    # Orbital-plane basis
    hx2 = hx * hx
    hy2 = hy * hy
    fact_h = 1.0 / (1.0 + hx2 + hy2)
    U = jnp.array([(1.0 + hx2 - hy2) * fact_h, 2.0 * hx * hy * fact_h, -2.0 * hy * fact_h])
    V = jnp.array([2.0 * hx * hy * fact_h, (1.0 - hx2 + hy2) * fact_h, 2.0 * hx * fact_h])

    # In-plane position and velocity
    ex_ey = ex * ey
    ex2 = ex * ex
    ey2 = ey * ey
    beta = 1.0 / (1.0 + jnp.sqrt(1.0 - ex2 - ey2))

    cos_le = jnp.cos(lat_ecc)
    sin_le = jnp.sin(lat_ecc)
    ex_cos_ey_sin = ex * cos_le + ey * sin_le

    x = a * ((1.0 - beta * ey2) * cos_le + beta * ex_ey * sin_le - ex)
    y = a * ((1.0 - beta * ex2) * sin_le + beta * ex_ey * cos_le - ey)

    factor = jnp.sqrt(mu / a) / (1.0 - ex_cos_ey_sin)
    x_dot = factor * (-sin_le + beta * ey * ex_cos_ey_sin)
    y_dot = factor * (cos_le - beta * ex * ex_cos_ey_sin)

    return PVCoordinates(x * U + y * V, x_dot * U + y_dot * V)


# ──────────────────────────────────────────────
# Keplerian <-> equinoctial
# ──────────────────────────────────────────────


def keplerian_to_equinoctial(kep: KeplerianElements) -> EquinoctialElements:
    """Convert keplerian elements to equinoctial elements.

    Args:
        kep: Keplerian elements with a true anomaly.

    Returns:
        EquinoctialElements: Equivalent equinoctial elements.
    """
    a, e, i, pa, raan, v = kep
    varpi = pa + raan
    tan_half_i = jnp.tan(i / 2.0)
    return EquinoctialElements(
        a=a,
        ex=e * jnp.cos(varpi),
        ey=e * jnp.sin(varpi),
        hx=tan_half_i * jnp.cos(raan),
        hy=tan_half_i * jnp.sin(raan),
        lv=v + varpi,
    )


def equinoctial_to_keplerian(eq: EquinoctialElements) -> KeplerianElements:
    """Convert equinoctial elements to keplerian elements.

    For ``e ~ 0`` the split between ``w`` and ``v`` is arbitrary, and for
    ``i ~ 0`` so is the split between ``RAAN`` and ``w``: the principal
    values of the arctangents are returned and only the sums are meaningful.

    ``RAAN`` is in ``(-pi, pi]``; ``w`` and ``v`` are normalized to
    ``[0, 2pi)``, so the revolution count of ``lv`` is not kept.

    Args:
        eq: Equinoctial elements.

    Returns:
        KeplerianElements: Equivalent keplerian elements (true anomaly).
    """
    a, ex, ey, hx, hy, lv = eq
    raan = jnp.arctan2(hy, hx)
    varpi = jnp.arctan2(ey, ex)
    return KeplerianElements(
        a=a,
        e=jnp.sqrt(ex * ex + ey * ey),
        i=2.0 * jnp.arctan(jnp.sqrt(hx * hx + hy * hy)),
        pa=normalize_angle(varpi - raan),
        raan=raan,
        v=normalize_angle(lv - varpi),
    )


# ──────────────────────────────────────────────
# Circular <-> equinoctial
# ──────────────────────────────────────────────


def circular_to_equinoctial(circ: CircularElements) -> EquinoctialElements:
    """Convert circular elements to equinoctial elements.

    The circular eccentricity vector ``e (cos w, sin w)`` is rotated by the
    node to give the equinoctial one ``e (cos(w + RAAN), sin(w + RAAN))``.

    Args:
        circ: Circular elements with a true latitude argument.

    Returns:
        EquinoctialElements: Equivalent equinoctial elements.
    """
    a, ex, ey, i, raan, alpha_v = circ
    cos_raan = jnp.cos(raan)
    sin_raan = jnp.sin(raan)
    tan_half_i = jnp.tan(i / 2.0)
    return EquinoctialElements(
        a=a,
        ex=ex * cos_raan - ey * sin_raan,
        ey=ey * cos_raan + ex * sin_raan,
        hx=tan_half_i * cos_raan,
        hy=tan_half_i * sin_raan,
        lv=alpha_v + raan,
    )


def equinoctial_to_circular(eq: EquinoctialElements) -> CircularElements:
    """Convert equinoctial elements to circular elements.

    ``RAAN`` is arbitrary for ``i ~ 0``; the principal value in ``(-pi, pi]``
    is returned.  ``alpha_v`` is normalized to ``[0, 2pi)``.

    Args:
        eq: Equinoctial elements.

    Returns:
        CircularElements: Equivalent circular elements (true latitude argument).
    """
    a, ex, ey, hx, hy, lv = eq
    raan = jnp.arctan2(hy, hx)
    cos_raan = jnp.cos(raan)
    sin_raan = jnp.sin(raan)
    return CircularElements(
        a=a,
        ex=ex * cos_raan + ey * sin_raan,
        ey=ey * cos_raan - ex * sin_raan,
        i=2.0 * jnp.arctan(jnp.sqrt(hx * hx + hy * hy)),
        raan=raan,
        alpha_v=normalize_angle(lv - raan),
    )
