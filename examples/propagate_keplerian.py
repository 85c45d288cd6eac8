# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "orbitax"]
#
# [tool.uv.sources]
# orbitax = { path = ".." }
# ///
"""Propagate a keplerian orbit and print its state over time.

Builds an orbit from classical elements, propagates it analytically under
two-body dynamics and prints position, velocity and mean latitude argument
at regular steps.

Requires orbitax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/propagate_keplerian.py [OPTIONS]

Examples:
    # One LEO revolution at 10 minute steps
    uv run examples/propagate_keplerian.py --a 7000e3 --e 0.01 --step 600 --duration 6000

    # Propagate backward in time with an LOF-aligned attitude
    uv run examples/propagate_keplerian.py --duration -3600 --lof
"""

from typing import Annotated

import jax.numpy as jnp
import typer

from orbitax import (
    GCRF,
    GM_EARTH,
    Epoch,
    InertialLaw,
    KeplerianParameters,
    KeplerianPropagator,
    LofAlignedLaw,
    Orbit,
    PositionAngle,
    SpacecraftState,
    set_dtype,
)

set_dtype(jnp.float64)


def main(
    a: Annotated[float, typer.Option(help="Semi-major axis [m]")] = 7000e3,
    e: Annotated[float, typer.Option(help="Eccentricity")] = 0.01,
    i: Annotated[float, typer.Option(help="Inclination [deg]")] = 51.6,
    raan: Annotated[float, typer.Option(help="Right ascension of the ascending node [deg]")] = 0.0,
    pa: Annotated[float, typer.Option(help="Argument of perigee [deg]")] = 0.0,
    mean_anomaly: Annotated[float, typer.Option(help="Mean anomaly [deg]")] = 0.0,
    epoch: Annotated[str, typer.Option(help="Initial epoch (ISO 8601)")] = "2024-01-01T00:00:00Z",
    step: Annotated[float, typer.Option(help="Output step [s]")] = 600.0,
    duration: Annotated[float, typer.Option(help="Propagation span [s], negative for backward")] = 6000.0,
    lof: Annotated[bool, typer.Option(help="Use an LOF-aligned attitude law")] = False,
) -> None:
    start = Epoch(epoch)
    params = KeplerianParameters(
        a, e, jnp.deg2rad(i), jnp.deg2rad(pa), jnp.deg2rad(raan), jnp.deg2rad(mean_anomaly),
        PositionAngle.MEAN, frame=GCRF,
    )
    state = SpacecraftState(Orbit(start, params))
    law = LofAlignedLaw() if lof else InertialLaw()
    propagator = KeplerianPropagator(state, law, GM_EARTH)

    n_steps = int(abs(duration) // step)
    sign = 1.0 if duration >= 0 else -1.0
    targets = [start + sign * k * step for k in range(n_steps + 1)]

    typer.echo(f"{'epoch':<26}{'x [km]':>12}{'y [km]':>12}{'z [km]':>12}{'|v| [km/s]':>12}{'LM [deg]':>12}")
    for st in propagator.propagate_many(targets):
        pv = st.pv_coordinates(GM_EARTH)
        x, y, z = (float(c) / 1e3 for c in pv.position)
        speed = float(jnp.linalg.norm(pv.velocity)) / 1e3
        lm = float(jnp.rad2deg(st.lm)) % 360.0
        typer.echo(f"{str(st.date):<26}{x:>12.3f}{y:>12.3f}{z:>12.3f}{speed:>12.5f}{lm:>12.4f}")


if __name__ == "__main__":
    typer.run(main)
