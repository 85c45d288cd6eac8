"""Analytical keplerian (two-body) propagation.

The orbit is taken in equinoctial form.  Under two-body motion the
semi-major axis, eccentricity vector and inclination vector are constant
and only the mean latitude argument moves, linearly at the mean motion:

    LM(t) = LM(t0) + sqrt(mu / a^3) (t - t0)

The new true latitude argument follows from Kepler's equation, solved with
the bounded solver of :mod:`orbitax.orbits.anomaly`.  ``t - t0`` is signed,
so states can be propagated backward as well as forward.

The propagator is immutable: it holds the initial state, the attitude law
and ``mu``, and every :meth:`KeplerianPropagator.propagate` call builds a
fresh :class:`SpacecraftState`.  Calls are independent and may run
concurrently on one instance.

The orbit frame must be pseudo-inertial; this is not checked.

The solver tolerance follows the active dtype (see :mod:`orbitax.config`):
with the float32 default a round trip over one LEO revolution can drift
by about a metre, so use ``set_dtype(jnp.float64)`` for precise work.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from orbitax.attitudes import AttitudeLaw, InertialLaw
from orbitax.constants import GM_EARTH
from orbitax.epoch import Epoch
from orbitax.errors import AttitudeFailure
from orbitax.orbits._types import KeplerSolverConfig
from orbitax.orbits.anomaly import latitude_mean_to_true
from orbitax.orbits.keplerian import mean_motion
from orbitax.orbits.orbit import Orbit
from orbitax.orbits.parameters import EquinoctialParameters, _check_mu
from orbitax.propagation.spacecraft_state import SpacecraftState

logger = logging.getLogger(__name__)


class KeplerianPropagator:
    """Two-body analytical propagator.

    Args:
        initial_state (SpacecraftState): State propagation starts from.
        attitude_law (AttitudeLaw | None): Law queried for the attitude of
            every propagated state. Default: :class:`~orbitax.attitudes.InertialLaw`.
        mu (float): Central attraction coefficient. Units: *m^3/s^2*
        config (KeplerSolverConfig | None): Kepler solver tuning.

    Raises:
        TypeError: If ``initial_state`` is not a :class:`SpacecraftState`.
        ValueError: If ``mu`` is not positive and finite.

    Examples:
        ```python
        from orbitax import Epoch, GCRF
        from orbitax.orbits import KeplerianParameters, Orbit
        from orbitax.propagation import KeplerianPropagator, SpacecraftState
        orbit = Orbit(Epoch(2024, 1, 1),
                      KeplerianParameters(7.0e6, 0.01, 1.0, 0.5, 0.2, 0.1, frame=GCRF))
        propagator = KeplerianPropagator(SpacecraftState(orbit))
        state = propagator.propagate(Epoch(2024, 1, 1, 1, 0, 0.0))
        ```
    """

    __slots__ = ('_initial_state', '_attitude_law', '_mu', '_config')

    def __init__(
        self,
        initial_state: SpacecraftState,
        attitude_law: AttitudeLaw | None = None,
        mu: float = GM_EARTH,
        config: KeplerSolverConfig | None = None,
    ) -> None:
        if not isinstance(initial_state, SpacecraftState):
            raise TypeError(
                f"KeplerianPropagator requires a SpacecraftState, got {type(initial_state).__name__}"
            )
        self._initial_state = initial_state
        self._attitude_law = InertialLaw() if attitude_law is None else attitude_law
        self._mu = _check_mu(mu)
        self._config = config

    @property
    def initial_state(self) -> SpacecraftState:
        return self._initial_state

    @property
    def attitude_law(self) -> AttitudeLaw:
        return self._attitude_law

    @property
    def mu(self) -> float:
        """Central attraction coefficient. Units: *m^3/s^2*"""
        return self._mu

    def with_initial_state(self, state: SpacecraftState) -> KeplerianPropagator:
        """Return a propagator starting from ``state`` with the same law, ``mu`` and config."""
        return KeplerianPropagator(state, self._attitude_law, self._mu, self._config)

    def propagate(self, target: Epoch) -> SpacecraftState:
        """Propagate the initial state to ``target``.

        Args:
            target (Epoch): Target date, before or after the initial date.

        Returns:
            SpacecraftState: State at ``target``, in the initial orbit's frame,
                with the initial mass and the attitude given by the law.

        Raises:
            NonConvergence: If Kepler's equation does not converge.
            AttitudeFailure: If the attitude law fails at ``target``.
        """
        if not isinstance(target, Epoch):
            raise TypeError(f"Propagation target must be an Epoch, got {type(target).__name__}")

        state = self._initial_state
        orbit = state.orbit
        elements = orbit.equinoctial.elements

        dt = target - orbit.date
        logger.debug("Propagating from %s to %s (dt=%s s)", orbit.date, target, dt)

        lm = orbit.lm + mean_motion(elements.a, self._mu) * dt
        lv = latitude_mean_to_true(lm, elements.ex, elements.ey, self._config)

        # a, (ex, ey) and (hx, hy) are constants of two-body motion
        params = EquinoctialParameters._from_internal(elements._replace(lv=lv), orbit.frame)
        new_orbit = Orbit(target, params)

        pv = new_orbit.pv_coordinates(self._mu)
        try:
            attitude = self._attitude_law.attitude_at(target, pv, new_orbit.frame)
        except Exception as exc:
            logger.error("Attitude law failed at %s", target, exc_info=True)
            raise AttitudeFailure(target, str(exc)) from exc

        return SpacecraftState(new_orbit, attitude, state.mass)

    def propagate_many(self, targets: Iterable[Epoch]) -> list[SpacecraftState]:
        """Propagate the initial state to each date of ``targets``, in order."""
        return [self.propagate(target) for target in targets]


def propagate(
    state: SpacecraftState,
    target: Epoch,
    attitude_law: AttitudeLaw | None = None,
    mu: float = GM_EARTH,
    config: KeplerSolverConfig | None = None,
) -> SpacecraftState:
    """Propagate ``state`` to ``target`` under two-body dynamics.

    Shorthand for ``KeplerianPropagator(state, attitude_law, mu, config).propagate(target)``.

    Args:
        state (SpacecraftState): Initial state.
        target (Epoch): Target date.
        attitude_law (AttitudeLaw | None): Attitude law. Default: inertial.
        mu (float): Central attraction coefficient. Units: *m^3/s^2*
        config (KeplerSolverConfig | None): Kepler solver tuning.

    Returns:
        SpacecraftState: State at ``target``.

    Raises:
        NonConvergence: If Kepler's equation does not converge.
        AttitudeFailure: If the attitude law fails at ``target``.
    """
    return KeplerianPropagator(state, attitude_law, mu, config).propagate(target)
