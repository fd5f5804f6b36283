from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import typer

from velocity_sampler.settings import build_sampler, load_settings
from velocity_sampler.tracking.vector import Vector3

app = typer.Typer(help="Replay recorded position traces through a velocity sampler")

logger = logging.getLogger(__name__)


def _load_trace(path: Path) -> np.ndarray:
    """Load a `t,x,y[,z]` CSV trace as an (N, 4) float array with z filled in."""
    with path.open("r", encoding="utf-8") as f:
        lines = [ln for ln in f if ln.strip() and not ln.lstrip().startswith("#")]
    # Optional column header
    if lines and lines[0].strip().lower().startswith("t,"):
        lines = lines[1:]
    if not lines:
        return np.zeros((0, 4), dtype=np.float64)

    try:
        data = np.loadtxt(lines, delimiter=",", dtype=np.float64, ndmin=2)
    except ValueError as e:
        raise typer.BadParameter(f"Could not parse trace {path.name}: {e}") from e

    if data.shape[1] not in (3, 4):
        raise typer.BadParameter(
            f"Trace {path.name} must have 3 (t,x,y) or 4 (t,x,y,z) columns, got {data.shape[1]}"
        )
    if data.shape[1] == 3:
        data = np.column_stack([data, np.zeros(len(data))])
    return data


def _format_row(t: float, v: Vector3, has_velocity: bool) -> str:  # noqa: FBT001
    return f"{t:.6f} {v.x:.6f} {v.y:.6f} {v.z:.6f} {int(has_velocity)}"


@app.command()
def replay(
    trace: Path = typer.Argument(
        ..., exists=True, dir_okay=False, resolve_path=True, help="CSV trace with columns t,x,y[,z]"
    ),
    capacity: Optional[int] = typer.Option(
        None, min=0, help="Window size in samples. Defaults to the settings value."
    ),
    settings: Optional[Path] = typer.Option(
        None, dir_okay=False, help="Settings JSON file. Defaults to ./velocity_sampler.json"
    ),
    final_only: bool = typer.Option(False, "--final-only", help="Only print the final velocity"),  # noqa: FBT001, FBT003
):
    """Feed every row of TRACE to a sampler and print `t vx vy vz has_velocity`."""
    s = load_settings(settings)
    logging.basicConfig(level=str(s.get("log_level", "INFO")).upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if capacity is not None:
        s["capacity"] = capacity

    data = _load_trace(trace)
    sampler = build_sampler(s)
    logger.info("Replaying %d samples from %s (capacity=%d)", len(data), trace, sampler.capacity)

    t = 0.0
    for t, x, y, z in data:
        sampler.add_sample_at(Vector3(float(x), float(y), float(z)), float(t))
        if not final_only:
            typer.echo(_format_row(float(t), sampler.velocity_3d, sampler.has_velocity))

    if final_only:
        typer.echo(_format_row(float(t), sampler.velocity_3d, sampler.has_velocity))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
