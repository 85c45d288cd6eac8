"""The epoch module provides the ``Epoch`` class, the date type used by orbitax.

An ``Epoch`` is a totally ordered instant supporting the two operations the
orbit and propagation layers need: adding a signed offset in seconds and
taking the signed difference of two epochs in seconds.  No time-scale
conversion is performed; an epoch is a plain count of uniform seconds.

Internally an epoch is split into an integer Julian Day number (days start
at noon) and the seconds elapsed since that noon.  A Kahan compensator keeps
repeated additions (e.g. stepping through a trajectory) from accumulating
rounding error.  The seconds component uses the module-wide float dtype
(see :func:`orbitax.config.set_dtype`): float32 gives ~8 ms resolution,
float64 gives ~10 ps.

The Epoch class is registered as a JAX pytree, so it can be passed through
``jax.jit`` and ``jax.vmap``; its arithmetic and comparisons use JAX
operations.
"""

from __future__ import annotations

import math
import re

import jax
import jax.numpy as jnp

from .config import get_dtype, get_epoch_eq_tolerance
from .constants import JD_J2000, JD_MJD_OFFSET, SECONDS_PER_DAY

_HALF_DAY = SECONDS_PER_DAY / 2.0

# YYYY-MM-DD with an optional THH:MM:SS[.fff]Z time part
_EPOCH_PATTERN = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})'
    r'(?:T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?Z)?$'
)


def _gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Julian Day number of the noon of a Gregorian calendar date.

    References:
        H. F. Fliegel and T. C. Van Flandern, *A Machine Algorithm for
        Processing Calendar Dates*, Comm. ACM 11(10), 1968.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (day + (153 * m + 2) // 5 + 365 * y
            + y // 4 - y // 100 + y // 400 - 32045)


def _jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Gregorian calendar date of a Julian Day number."""
    f = jdn + 1401 + (((4 * jdn + 274277) // 146097) * 3) // 4 - 38
    e = 4 * f + 3
    g = (e % 1461) // 4
    h = 5 * g + 2
    day = (h % 153) // 5 + 1
    month = (h // 153 + 2) % 12 + 1
    year = e // 1461 - 4716 + (14 - month) // 12
    return year, month, day


class Epoch:
    """Represents a single instant in time.

    Constructors:
        Epoch(2018, 1, 1)
        Epoch(2018, 1, 1, 12, 0, 0.0)
        Epoch("2018-01-01T12:00:00Z")
        Epoch(other_epoch)

    Supported arithmetic:
        ``epoch + seconds`` and ``epoch - seconds`` return new epochs,
        ``epoch_a - epoch_b`` returns the signed difference in seconds.
    """

    __slots__ = ('_jd', '_seconds', '_kahan_c')

    def __init__(self, *args: int | float | str | Epoch) -> None:
        """Initialize Epoch. Supports multiple constructor forms.

        Args:
            *args: Either (year, month, day[, hour, minute, second]),
                a string in ISO 8601 format, or another Epoch instance.

        Raises:
            ValueError: If the arguments match none of the constructor forms.
        """
        if len(args) == 1 and isinstance(args[0], Epoch):
            other = args[0]
            self._jd = other._jd
            self._seconds = other._seconds
            self._kahan_c = other._kahan_c
            return

        if len(args) == 1 and isinstance(args[0], str):
            components = self._parse(args[0])
        elif 3 <= len(args) <= 6:
            components = args
        else:
            raise ValueError(
                "Epoch requires date components (3-6 args), a string, or an Epoch"
            )
        self._init_date(*components)

    @classmethod
    def _from_internal(cls, jd, seconds, kahan_c):
        """Create an Epoch from raw JAX arrays without normalization.

        Args:
            jd (jnp.int32): Julian Day number.
            seconds (jax.Array): Seconds since the noon of ``jd``, in [0, 86400).
            kahan_c (jax.Array): Kahan summation compensator.

        Returns:
            Epoch: New Epoch instance.
        """
        obj = object.__new__(cls)
        obj._jd = jd
        obj._seconds = seconds
        obj._kahan_c = kahan_c
        return obj

    @classmethod
    def j2000(cls) -> Epoch:
        """Return the J2000.0 reference epoch, 2000-01-01T12:00:00."""
        dtype = get_dtype()
        return cls._from_internal(
            jnp.int32(JD_J2000), jnp.asarray(0.0, dtype=dtype), jnp.asarray(0.0, dtype=dtype)
        )

    @staticmethod
    def _parse(string):
        m = _EPOCH_PATTERN.match(string)
        if m is None:
            raise ValueError(
                f'Invalid Epoch string: "{string}" is not ISO 8601 compliant'
            )
        year, month, day, hour, minute, second, fraction = m.groups()
        components = [int(year), int(month), int(day)]
        if hour is not None:
            seconds = float(second)
            if fraction is not None:
                seconds += float(f"0.{fraction}")
            components += [int(hour), int(minute), seconds]
        return components

    def _init_date(self, year, month, day, hour=0, minute=0, second=0.0):
        jdn = _gregorian_to_jdn(int(year), int(month), int(day))
        civil = hour * 3600.0 + minute * 60.0 + second

        # Julian days start at noon
        seconds = civil - _HALF_DAY
        day_offset = math.floor(seconds / SECONDS_PER_DAY)
        seconds -= day_offset * SECONDS_PER_DAY

        dtype = get_dtype()
        self._jd = jnp.int32(jdn + day_offset)
        self._seconds = jnp.asarray(seconds, dtype=dtype)
        self._kahan_c = jnp.asarray(0.0, dtype=dtype)

    def _compensated_seconds(self):
        return self._seconds - self._kahan_c

    # Arithmetic operators

    def __add__(self, delta: float) -> Epoch:
        """Return a new Epoch advanced by ``delta`` seconds.

        Uses Kahan compensated summation, then renormalizes the seconds into
        ``[0, 86400)`` with a single floor division.

        Args:
            delta (float): Signed offset in seconds.

        Returns:
            Epoch: Shifted epoch.
        """
        dtype = self._seconds.dtype
        y = jnp.asarray(delta, dtype=dtype) - self._kahan_c
        t = self._seconds + y
        kahan_c = (t - self._seconds) - y

        day_offset = jnp.floor(t / SECONDS_PER_DAY)
        seconds = t - day_offset * SECONDS_PER_DAY
        jd = self._jd + day_offset.astype(jnp.int32)

        return Epoch._from_internal(jd, seconds, kahan_c)

    def __sub__(self, other: Epoch | float) -> Epoch | jax.Array:
        """Subtract seconds or compute the difference between two epochs.

        Args:
            other: If Epoch, returns ``self - other`` in seconds.
                If numeric, returns a new Epoch shifted back by ``other`` seconds.

        Returns:
            jax.Array or Epoch: Signed time difference in seconds, or new Epoch.
        """
        if isinstance(other, Epoch):
            dtype = self._seconds.dtype
            return ((self._jd - other._jd).astype(dtype) * SECONDS_PER_DAY
                    + (self._compensated_seconds() - other._compensated_seconds()))
        return self.__add__(-jnp.asarray(other, dtype=self._seconds.dtype))

    # Comparison operators

    def __eq__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return jnp.abs(self - other) < get_epoch_eq_tolerance()

    def __ne__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return ~self.__eq__(other)

    def __lt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return (self - other) < 0.0

    def __le__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.__lt__(other) | self.__eq__(other)

    def __gt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return (self - other) > 0.0

    def __ge__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.__gt__(other) | self.__eq__(other)

    # Time properties

    def caldate(self) -> tuple[int, int, int, int, int, float]:
        """Return the calendar date components.

        Extracts concrete Python values, so it is not traceable under
        ``jax.jit``.

        Returns:
            tuple: (year, month, day, hour, minute, second) where second
                includes fractional part.
        """
        civil = float(self._compensated_seconds()) + _HALF_DAY
        day_offset = math.floor(civil / SECONDS_PER_DAY)
        civil -= day_offset * SECONDS_PER_DAY

        year, month, day = _jdn_to_gregorian(int(self._jd) + day_offset)
        hour = int(civil // 3600)
        civil -= hour * 3600
        minute = int(civil // 60)
        second = civil - minute * 60

        return year, month, day, hour, minute, second

    def jd(self) -> jax.Array:
        """Return the Julian Date as a single float (lossy below float64)."""
        dtype = self._seconds.dtype
        return self._jd.astype(dtype) + self._compensated_seconds() / SECONDS_PER_DAY

    def mjd(self) -> jax.Array:
        """Return the Modified Julian Date as a single float."""
        return self.jd() - JD_MJD_OFFSET

    # String representations

    def __str__(self):
        year, month, day, hour, minute, second = self.caldate()
        return (f'{year:04d}-{month:02d}-{day:02d}T'
                f'{hour:02d}:{minute:02d}:{second:06.3f}Z')

    def __repr__(self):
        return (f'Epoch(_jd={int(self._jd)}, _seconds={float(self._seconds)}, '
                f'_kahan_c={float(self._kahan_c)})')

    def __hash__(self):
        return hash((int(self._jd), round(float(self._compensated_seconds()), 3)))


jax.tree_util.register_pytree_node(
    Epoch,
    lambda e: ((e._jd, e._seconds, e._kahan_c), None),
    lambda _, children: Epoch._from_internal(*children),
)
