import jax.numpy as jnp
import pytest

from orbitax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Each test process starts with the default float32.  This fixture gives
    every test float64 unless it explicitly overrides it (test_config.py has
    its own autouse fixture that sets float32).
    """
    set_dtype(jnp.float64)
