"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout orbitax.  The default is ``jnp.float32`` for GPU/TPU
compatibility.  Switching to ``jnp.float64`` automatically enables
JAX's 64-bit mode (``jax_enable_x64``).

Call ``set_dtype`` **before** building any orbit or epoch you intend to
compare at high precision: values already created keep the dtype they
were built with.

The tolerance helpers in this module scale with the active dtype so that
equality checks and iterative solvers stay meaningful at any precision.
Under the float32 default the Kepler solver stops at 1e-5 rad, which
leaves metre-level errors on LEO positions.  Call
``set_dtype(jnp.float64)`` for the 1e-12 rad solver tolerance and
sub-millimetre conversions.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for orbitax.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float32``).
    """
    return _dtype


def get_epoch_eq_tolerance() -> float:
    """Return the dtype-adaptive tolerance for Epoch equality comparisons.

    - ``float64``:  1e-9 s
    - ``float32``:  1e-3 s
    - ``float16`` / ``bfloat16``: 0.1 s

    Returns:
        float: Tolerance in seconds.
    """
    if _dtype == jnp.float64:
        return 1e-9
    if _dtype == jnp.float32:
        return 1e-3
    return 0.1


def get_kepler_tolerance() -> float:
    """Return the dtype-adaptive convergence tolerance of the Kepler solver.

    The solver stops once the Newton correction drops below this value.
    Below float64 the correction bottoms out at the rounding noise of the
    anomaly, so the tolerance is relaxed accordingly.

    - ``float64``:  1e-12 rad
    - ``float32``:  1e-5 rad
    - ``float16`` / ``bfloat16``: 1e-2 rad

    Returns:
        float: Tolerance in radians.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-5
    return 1e-2
