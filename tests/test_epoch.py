import jax
import jax.numpy as jnp
import pytest

from orbitax.epoch import Epoch

_SEC_TOL = 1e-6


# ──────────────────────────────────────────────
# Construction
# ──────────────────────────────────────────────


class TestEpochConstruction:
    def test_from_date_components(self):
        epc = Epoch(2024, 3, 15, 6, 30, 45.25)
        year, month, day, hour, minute, second = epc.caldate()
        assert (year, month, day, hour, minute) == (2024, 3, 15, 6, 30)
        assert second == pytest.approx(45.25, abs=_SEC_TOL)

    def test_from_date_defaults_to_midnight(self):
        year, month, day, hour, minute, second = Epoch(2000, 1, 1).caldate()
        assert (year, month, day, hour, minute) == (2000, 1, 1, 0, 0)
        assert second == pytest.approx(0.0, abs=_SEC_TOL)

    def test_caldate_returns_python_ints(self):
        year, month, day, hour, minute, _ = Epoch(2010, 12, 31, 23, 59, 0.0).caldate()
        assert all(isinstance(x, int) for x in (year, month, day, hour, minute))

    def test_from_string_date_only(self):
        assert Epoch("2020-06-15") == Epoch(2020, 6, 15)

    def test_from_string_with_time(self):
        assert Epoch("2024-03-15T06:30:45Z") == Epoch(2024, 3, 15, 6, 30, 45.0)

    def test_from_string_fractional_seconds(self):
        _, _, _, _, _, second = Epoch("2020-06-15T10:30:15.5Z").caldate()
        assert second == pytest.approx(15.5, abs=_SEC_TOL)

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="not ISO 8601"):
            Epoch("not-a-date")

    def test_copy(self):
        original = Epoch(2000, 1, 1, 12, 0, 0.0)
        copy = Epoch(original)
        assert copy == original
        assert copy is not original

    def test_j2000(self):
        assert Epoch.j2000() == Epoch(2000, 1, 1, 12, 0, 0.0)

    @pytest.mark.parametrize("args", [(), (12345,), (2000, 1), (2000, 1, 1, 12, 0, 0.0, 0.0)])
    def test_invalid_arguments(self, args):
        with pytest.raises(ValueError):
            Epoch(*args)


# ──────────────────────────────────────────────
# Julian Date
# ──────────────────────────────────────────────


class TestEpochJulianDate:
    def test_jd_j2000(self):
        assert float(Epoch(2000, 1, 1, 12, 0, 0.0).jd()) == pytest.approx(2451545.0, abs=1e-9)

    def test_jd_midnight(self):
        assert float(Epoch(2000, 1, 1).jd()) == pytest.approx(2451544.5, abs=1e-9)

    def test_mjd(self):
        assert float(Epoch(2000, 1, 1).mjd()) == pytest.approx(51544.0, abs=1e-9)


# ──────────────────────────────────────────────
# Arithmetic
# ──────────────────────────────────────────────


class TestEpochArithmetic:
    def test_add_day_rollover(self):
        year, month, day, hour, _, _ = (Epoch(2000, 12, 31, 23, 0, 0.0) + 7200.0).caldate()
        assert (year, month, day, hour) == (2001, 1, 1, 1)

    def test_add_negative(self):
        assert Epoch(2000, 1, 2) + (-86400.0) == Epoch(2000, 1, 1)

    def test_subtract_seconds(self):
        assert Epoch(2000, 1, 1, 1, 0, 0.0) - 3600.0 == Epoch(2000, 1, 1)

    def test_difference_is_signed(self):
        a = Epoch(2000, 1, 1, 0, 0, 30.5)
        b = Epoch(2000, 1, 1)
        assert float(a - b) == pytest.approx(30.5, abs=_SEC_TOL)
        assert float(b - a) == pytest.approx(-30.5, abs=_SEC_TOL)

    def test_difference_across_years(self):
        diff = Epoch(2001, 1, 1) - Epoch(2000, 1, 1)
        assert float(diff) == pytest.approx(366 * 86400.0, abs=_SEC_TOL)

    def test_add_then_difference(self):
        start = Epoch(2024, 1, 1)
        assert float((start + 100000.0) - start) == pytest.approx(100000.0, abs=_SEC_TOL)

    def test_iadd_returns_new_epoch(self):
        original = Epoch(2000, 1, 1)
        epc = original
        epc += 100.0
        assert epc != original
        assert float(epc - original) == pytest.approx(100.0, abs=_SEC_TOL)

    def test_kahan_add_subtract_roundtrip(self):
        epc = Epoch(2000, 1, 1)
        for _ in range(1000):
            epc += 0.001
        for _ in range(1000):
            epc -= 0.001
        assert abs(float(epc - Epoch(2000, 1, 1))) < 1e-9


# ──────────────────────────────────────────────
# Comparison
# ──────────────────────────────────────────────


class TestEpochComparison:
    def test_equality(self):
        assert Epoch(2000, 1, 1) == Epoch(2000, 1, 1)

    def test_inequality(self):
        assert Epoch(2000, 1, 1) != Epoch(2000, 1, 2)

    def test_ordering(self):
        e1 = Epoch(2000, 1, 1)
        e2 = Epoch(2000, 1, 1, 0, 0, 1.0)
        e3 = Epoch(2001, 1, 1)
        assert e1 < e2 < e3
        assert e3 > e2 > e1
        assert e1 <= e1
        assert e3 >= e3

    def test_not_equal_to_non_epoch(self):
        assert (Epoch(2000, 1, 1) == 42) is False


# ──────────────────────────────────────────────
# String and hash
# ──────────────────────────────────────────────


class TestEpochString:
    def test_str_format(self):
        assert str(Epoch(2000, 1, 1, 12, 0, 0.0)) == "2000-01-01T12:00:00.000Z"

    def test_repr(self):
        assert repr(Epoch(2000, 1, 1)).startswith("Epoch(_jd=")

    def test_hash_usable_as_dict_key(self):
        d = {Epoch(2000, 1, 1): "start"}
        assert d[Epoch(2000, 1, 1)] == "start"


# ──────────────────────────────────────────────
# JAX compatibility
# ──────────────────────────────────────────────


class TestEpochJAXCompatibility:
    def test_jit_add(self):
        epc = Epoch(2000, 1, 1)
        result = jax.jit(lambda e: e + 60.0)(epc)
        assert float(result - epc) == pytest.approx(60.0, abs=_SEC_TOL)

    def test_jit_difference(self):
        diff = jax.jit(lambda a, b: a - b)(Epoch(2000, 1, 2), Epoch(2000, 1, 1))
        assert float(diff) == pytest.approx(86400.0, abs=_SEC_TOL)

    def test_vmap_add(self):
        epc = Epoch(2000, 1, 1)
        deltas = jnp.array([0.0, 60.0, 3600.0, 86400.0, -86400.0])
        results = jax.vmap(lambda dt: (epc + dt) - epc)(deltas)
        assert jnp.allclose(results, deltas, atol=_SEC_TOL)

    def test_pytree_roundtrip(self):
        epc = Epoch(2000, 1, 1, 6, 30, 15.5)
        leaves, treedef = jax.tree_util.tree_flatten(epc)
        assert treedef.unflatten(leaves) == epc

    def test_lax_scan(self):
        epc0 = Epoch(2000, 1, 1)

        def step(epc, _):
            epc_next = epc + 60.0
            return epc_next, epc_next - epc0

        final_epc, elapsed = jax.lax.scan(step, epc0, None, length=60)
        assert final_epc == Epoch(2000, 1, 1, 1, 0, 0.0)
        assert elapsed.shape == (60,)
        assert jnp.all(jnp.diff(elapsed) > 0)
