"""Anomaly and latitude-argument conversions, including Kepler's equation.

Two families of conversions are provided:

- **Anomalies** (true ``v``, eccentric ``E``, mean ``M``) for a given
  eccentricity ``e``.
- **Latitude arguments** (true ``Lv``, eccentric ``LE``, mean ``LM``), the
  equinoctial generalization where every anomaly is offset by the
  longitude of periapsis ``w + RAAN`` and the eccentricity is the vector
  ``(ex, ey)``.  These stay well defined for circular orbits.

True <-> eccentric conversions are closed form.  They use the half-angle
tangent identity with the scale factor ``beta = e / (1 + sqrt(1 - e^2))``,
which avoids the ``1 / (1 + cos E)`` cancellation of the textbook form.
Eccentric -> mean is a direct evaluation of Kepler's equation.

Mean -> eccentric requires solving Kepler's equation ``M = E - e sin(E)``.
:func:`solve_kepler` does so with Newton-Raphson iteration inside a
``jax.lax.while_loop`` that stops on convergence or at the iteration cap,
and returns a :class:`~orbitax.orbits._types.KeplerSolution` either way, so
it stays traceable under ``jax.jit``.  The eager wrappers
(:func:`anomaly_mean_to_eccentric`, :func:`latitude_mean_to_eccentric` and
their composites) raise :class:`~orbitax.errors.NonConvergence` instead.

Angles returned by the solvers keep the revolution count of their input:
solving for ``M + 2 pi k`` gives ``E + 2 pi k``.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype, get_kepler_tolerance
from orbitax.errors import InvalidOrbitGeometry, NonConvergence
from orbitax.orbits._types import KeplerSolution, KeplerSolverConfig
from orbitax.utils import from_radians, to_radians

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────
# Kepler's equation
# ──────────────────────────────────────────────


def solve_kepler(
    anm_mean: ArrayLike,
    e: ArrayLike,
    config: KeplerSolverConfig | None = None,
) -> KeplerSolution:
    """Solve Kepler's equation ``M = E - e sin(E)`` for ``E``.

    Newton-Raphson iteration ``E <- E - (E - e sin E - M) / (1 - e cos E)``
    on the mean anomaly reduced to ``[0, 2pi)``.  The initial guess is ``M``
    for ``e < 0.8`` and ``pi`` otherwise; starting from ``pi`` keeps Newton's
    method convergent for eccentricities close to one.  Iteration stops once
    the magnitude of the Newton correction drops below the tolerance, or
    after ``config.max_iterations`` iterations.

    Traceable under ``jax.jit`` and ``jax.vmap``; no validation is done.

    Args:
        anm_mean: Mean anomaly. Units: *rad*
        e: Eccentricity, expected in ``[0, 1)``. Dimensionless.
        config: Solver tuning. Default: ``KeplerSolverConfig()``.

    Returns:
        KeplerSolution: Eccentric anomaly (same revolution as ``anm_mean``),
            iteration count, convergence flag and residual.

    Examples:
        ```python
        from orbitax.orbits import solve_kepler
        sol = solve_kepler(1.0, 0.1)
        bool(sol.converged)
        ```
    """
    if config is None:
        config = KeplerSolverConfig()
    tol = get_kepler_tolerance() if config.tolerance is None else config.tolerance
    max_iter = config.max_iterations

    dtype = get_dtype()
    M = jnp.asarray(anm_mean, dtype=dtype)
    e = jnp.asarray(e, dtype=dtype)

    two_pi = 2.0 * jnp.pi
    M_red = M % two_pi
    E0 = jnp.where(e < 0.8, M_red, jnp.pi).astype(dtype)

    def keep_going(carry):
        _, delta, k = carry
        return (k < max_iter) & (jnp.abs(delta) >= tol)

    def newton_step(carry):
        E, _, k = carry
        f = E - e * jnp.sin(E) - M_red
        delta = f / (1.0 - e * jnp.cos(E))
        return E - delta, delta, k + 1

    E, delta, k = jax.lax.while_loop(
        keep_going, newton_step, (E0, jnp.asarray(jnp.inf, dtype=dtype), jnp.int32(0))
    )

    residual = E - e * jnp.sin(E) - M_red
    return KeplerSolution(
        anomaly=E + (M - M_red),
        iterations=k,
        converged=jnp.abs(delta) < tol,
        residual=residual,
    )


def solve_kepler_equinoctial(
    lat_mean: ArrayLike,
    ex: ArrayLike,
    ey: ArrayLike,
    config: KeplerSolverConfig | None = None,
) -> KeplerSolution:
    """Solve the equinoctial Kepler equation ``LM = LE - ex sin(LE) + ey cos(LE)``.

    The equation is shifted by the longitude of periapsis
    ``atan2(ey, ex)`` into the classical form and solved with
    :func:`solve_kepler`, so both share one convergence behaviour.  For a
    circular orbit the shift is zero and ``LE = LM``.

    Traceable under ``jax.jit`` and ``jax.vmap``; no validation is done.

    Args:
        lat_mean: Mean latitude argument ``LM``. Units: *rad*
        ex: First eccentricity-vector component ``e cos(w + RAAN)``.
        ey: Second eccentricity-vector component ``e sin(w + RAAN)``.
        config: Solver tuning. Default: ``KeplerSolverConfig()``.

    Returns:
        KeplerSolution: ``anomaly`` holds the eccentric latitude argument ``LE``.
    """
    dtype = get_dtype()
    ex = jnp.asarray(ex, dtype=dtype)
    ey = jnp.asarray(ey, dtype=dtype)
    e = jnp.sqrt(ex * ex + ey * ey)
    varpi = jnp.arctan2(ey, ex)

    sol = solve_kepler(jnp.asarray(lat_mean, dtype=dtype) - varpi, e, config)
    return sol._replace(anomaly=sol.anomaly + varpi)


def _check_eccentricity(e: ArrayLike) -> None:
    e = float(e)
    if not 0.0 <= e < 1.0:
        raise InvalidOrbitGeometry(
            f"Eccentricity must be in [0, 1) for an elliptical orbit, got {e}"
        )


def _require_converged(sol: KeplerSolution, e: ArrayLike, anm_mean: ArrayLike) -> Array:
    if not bool(sol.converged):
        logger.warning(
            "Kepler equation did not converge: e=%s M=%s after %d iterations",
            float(e), float(anm_mean), int(sol.iterations),
        )
        raise NonConvergence(
            float(e), float(anm_mean), float(sol.anomaly), int(sol.iterations)
        )
    return sol.anomaly


# ──────────────────────────────────────────────
# Anomaly conversions
# ──────────────────────────────────────────────


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to mean anomaly.

    Applies Kepler's equation: ``M = E - e * sin(E)``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*

    References:
        O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
        Applications*, 2012. Eq. 2.65.
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    M = E - e * jnp.sin(E)
    return from_radians(M, use_degrees)


def anomaly_mean_to_eccentric(
    anm_mean: ArrayLike,
    e: ArrayLike,
    use_degrees: bool = False,
    config: KeplerSolverConfig | None = None,
) -> Array:
    """Convert mean anomaly to eccentric anomaly.

    Eager wrapper around :func:`solve_kepler`; not traceable under ``jax.jit``.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.
        config: Solver tuning. Default: ``KeplerSolverConfig()``.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*

    Raises:
        InvalidOrbitGeometry: If ``e`` is outside ``[0, 1)``.
        NonConvergence: If the solver reaches its iteration cap.

    Examples:
        ```python
        from orbitax.orbits import anomaly_mean_to_eccentric
        E = anomaly_mean_to_eccentric(84.27, 0.1, use_degrees=True)
        ```
    """
    _check_eccentricity(e)
    M = to_radians(jnp.asarray(anm_mean, dtype=get_dtype()), use_degrees)
    E = _require_converged(solve_kepler(M, e, config), e, M)
    return from_radians(E, use_degrees)


def anomaly_true_to_eccentric(anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert true anomaly to eccentric anomaly.

    ``E = v - 2 atan(beta sin(v) / (1 + beta cos(v)))`` with
    ``beta = e / (1 + sqrt(1 - e^2))``.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*
    """
    anm_true = jnp.asarray(anm_true, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    v = to_radians(anm_true, use_degrees)
    beta = e / (1.0 + jnp.sqrt((1.0 - e) * (1.0 + e)))
    E = v - 2.0 * jnp.arctan(beta * jnp.sin(v) / (1.0 + beta * jnp.cos(v)))
    return from_radians(E, use_degrees)


def anomaly_eccentric_to_true(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to true anomaly.

    ``v = E + 2 atan(beta sin(E) / (1 - beta cos(E)))`` with
    ``beta = e / (1 + sqrt(1 - e^2))``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    beta = e / (1.0 + jnp.sqrt((1.0 - e) * (1.0 + e)))
    v = E + 2.0 * jnp.arctan(beta * jnp.sin(E) / (1.0 - beta * jnp.cos(E)))
    return from_radians(v, use_degrees)


def anomaly_true_to_mean(anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert true anomaly to mean anomaly.

    Composite conversion: true -> eccentric -> mean.
    """
    return anomaly_eccentric_to_mean(
        anomaly_true_to_eccentric(anm_true, e, use_degrees),
        e,
        use_degrees,
    )


def anomaly_mean_to_true(
    anm_mean: ArrayLike,
    e: ArrayLike,
    use_degrees: bool = False,
    config: KeplerSolverConfig | None = None,
) -> Array:
    """Convert mean anomaly to true anomaly.

    Composite conversion: mean -> eccentric -> true.

    Raises:
        InvalidOrbitGeometry: If ``e`` is outside ``[0, 1)``.
        NonConvergence: If the solver reaches its iteration cap.
    """
    return anomaly_eccentric_to_true(
        anomaly_mean_to_eccentric(anm_mean, e, use_degrees, config),
        e,
        use_degrees,
    )


# ──────────────────────────────────────────────
# Latitude-argument conversions
# ──────────────────────────────────────────────


def latitude_eccentric_to_true(lat_ecc: ArrayLike, ex: ArrayLike, ey: ArrayLike) -> Array:
    """Convert eccentric latitude argument ``LE`` to true latitude argument ``Lv``.

    Args:
        lat_ecc: Eccentric latitude argument. Units: *rad*
        ex: First eccentricity-vector component.
        ey: Second eccentricity-vector component.

    Returns:
        True latitude argument. Units: *rad*
    """
    dtype = get_dtype()
    lat_ecc = jnp.asarray(lat_ecc, dtype=dtype)
    ex = jnp.asarray(ex, dtype=dtype)
    ey = jnp.asarray(ey, dtype=dtype)

    epsilon = jnp.sqrt(1.0 - ex * ex - ey * ey)
    cos_le = jnp.cos(lat_ecc)
    sin_le = jnp.sin(lat_ecc)
    num = ex * sin_le - ey * cos_le
    den = epsilon + 1.0 - ex * cos_le - ey * sin_le
    return lat_ecc + 2.0 * jnp.arctan(num / den)


def latitude_true_to_eccentric(lat_true: ArrayLike, ex: ArrayLike, ey: ArrayLike) -> Array:
    """Convert true latitude argument ``Lv`` to eccentric latitude argument ``LE``.

    Args:
        lat_true: True latitude argument. Units: *rad*
        ex: First eccentricity-vector component.
        ey: Second eccentricity-vector component.

    Returns:
        Eccentric latitude argument. Units: *rad*
    """
    dtype = get_dtype()
    lat_true = jnp.asarray(lat_true, dtype=dtype)
    ex = jnp.asarray(ex, dtype=dtype)
    ey = jnp.asarray(ey, dtype=dtype)

    epsilon = jnp.sqrt(1.0 - ex * ex - ey * ey)
    cos_lv = jnp.cos(lat_true)
    sin_lv = jnp.sin(lat_true)
    num = ey * cos_lv - ex * sin_lv
    den = epsilon + 1.0 + ex * cos_lv + ey * sin_lv
    return lat_true + 2.0 * jnp.arctan(num / den)


def latitude_eccentric_to_mean(lat_ecc: ArrayLike, ex: ArrayLike, ey: ArrayLike) -> Array:
    """Convert eccentric latitude argument to mean latitude argument.

    ``LM = LE - ex sin(LE) + ey cos(LE)``
    """
    dtype = get_dtype()
    lat_ecc = jnp.asarray(lat_ecc, dtype=dtype)
    return lat_ecc - ex * jnp.sin(lat_ecc) + ey * jnp.cos(lat_ecc)


def latitude_mean_to_eccentric(
    lat_mean: ArrayLike,
    ex: ArrayLike,
    ey: ArrayLike,
    config: KeplerSolverConfig | None = None,
) -> Array:
    """Convert mean latitude argument to eccentric latitude argument.

    Eager wrapper around :func:`solve_kepler_equinoctial`.

    Raises:
        InvalidOrbitGeometry: If the eccentricity vector norm is outside ``[0, 1)``.
        NonConvergence: If the solver reaches its iteration cap.
    """
    e = jnp.sqrt(jnp.asarray(ex, dtype=get_dtype()) ** 2 + jnp.asarray(ey, dtype=get_dtype()) ** 2)
    _check_eccentricity(e)
    return _require_converged(solve_kepler_equinoctial(lat_mean, ex, ey, config), e, lat_mean)


def latitude_true_to_mean(lat_true: ArrayLike, ex: ArrayLike, ey: ArrayLike) -> Array:
    """Convert true latitude argument to mean latitude argument."""
    return latitude_eccentric_to_mean(latitude_true_to_eccentric(lat_true, ex, ey), ex, ey)


def latitude_mean_to_true(
    lat_mean: ArrayLike,
    ex: ArrayLike,
    ey: ArrayLike,
    config: KeplerSolverConfig | None = None,
) -> Array:
    """Convert mean latitude argument to true latitude argument.

    Raises:
        InvalidOrbitGeometry: If the eccentricity vector norm is outside ``[0, 1)``.
        NonConvergence: If the solver reaches its iteration cap.
    """
    return latitude_eccentric_to_true(latitude_mean_to_eccentric(lat_mean, ex, ey, config), ex, ey)
