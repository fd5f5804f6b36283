"""Rolling-window velocity sampling for pointer and touch tracking.

The sampler keeps the most recent N timestamped positions and reports the
mean of the finite-difference velocities between consecutive samples:

    v = mean_i (p[i] - p[i-1]) / (t[i] - t[i-1])

Every step in the window has the same weight regardless of its duration.
Steps with identical timestamps are skipped and the next step is measured
from the earlier sample, so duplicated timestamps never divide by zero.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from velocity_sampler.tracking.clock import Clock, monotonic_seconds
from velocity_sampler.tracking.vector import Vector3

DEFAULT_CAPACITY = 10

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample:
    """A single observed position at a point in time (seconds)."""

    position: Vector3
    timestamp: float


class RollingVelocitySampler:
    """Moving-average velocity over the last `capacity` samples.

    Example:
        sampler = RollingVelocitySampler()
        # for every pointer move event
        sampler.add_planar_sample((event.x, event.y))
        vx, vy = sampler.velocity

    Samples must arrive with non-decreasing timestamps; a sample older than
    the newest one in the window is dropped. Queries never raise: with fewer
    than two samples the velocity is the zero vector.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, clock: Clock | None = None) -> None:
        """Initialize the sampler.

        capacity: number of samples kept in the window. Values below 2 are
            accepted but never produce a velocity.
        clock: zero-argument callable returning monotonic seconds, used by the
            entry points that take no timestamp.
        """
        if capacity < 0:
            msg: str = f"capacity must be non-negative, got {capacity}"
            raise ValueError(msg)
        self._capacity = int(capacity)
        self._clock: Clock = clock if clock is not None else monotonic_seconds
        self._samples: deque[Sample] = deque(maxlen=self._capacity)
        self._start_position: Vector3 | None = None

    @property
    def capacity(self) -> int:
        """Maximum number of samples in the window."""
        return self._capacity

    @property
    def samples(self) -> tuple[Sample, ...]:
        """Snapshot of the window, oldest first."""
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def add_sample(self, position: Vector3) -> None:
        """Add a sample timestamped by the sampler's clock."""
        self.add_sample_at(position, self._clock())

    def add_sample_at(self, position: Vector3, timestamp: float) -> None:
        """Add a sample observed at `timestamp` seconds.

        Timestamps must be non-decreasing; a sample older than the newest one
        in the window is ignored.
        """
        timestamp = float(timestamp)

        if not self._samples:
            self._start_position = position
        elif timestamp < self._samples[-1].timestamp:
            logger.debug("Dropping out-of-order sample at t=%s (newest t=%s)",
                         timestamp, self._samples[-1].timestamp)
            return

        # deque(maxlen=capacity) evicts the oldest sample once full
        self._samples.append(Sample(position, timestamp))

    def add_planar_sample(self, point: Sequence[float]) -> None:
        """Add an (x, y) sample on the z = 0 plane, timestamped by the clock."""
        self.add_sample(Vector3.from_planar(point))

    def add_planar_sample_at(self, point: Sequence[float], timestamp: float) -> None:
        """Add an (x, y) sample on the z = 0 plane observed at `timestamp`."""
        self.add_sample_at(Vector3.from_planar(point), timestamp)

    @property
    def has_velocity(self) -> bool:
        """Whether a velocity can be computed. When False, velocity is zero."""
        return len(self._samples) >= 2  # noqa: PLR2004

    @property
    def velocity_3d(self) -> Vector3:
        """Mean step velocity over the window, in position units per second."""
        if not self.has_velocity:
            return Vector3.zero()

        times = np.fromiter((s.timestamp for s in self._samples), dtype=np.float64,
                            count=len(self._samples))
        points = np.array([tuple(s.position) for s in self._samples], dtype=np.float64)

        # Timestamps are non-decreasing, so a run of equal times collapses onto
        # its first sample: later samples in the run are never a step origin.
        keep = np.ones(len(times), dtype=bool)
        keep[1:] = times[1:] != times[:-1]
        times = times[keep]
        points = points[keep]
        if len(times) < 2:  # noqa: PLR2004
            return Vector3.zero()

        dt = np.diff(times)
        velocities = np.diff(points, axis=0) / dt[:, np.newaxis]
        return Vector3.from_array(velocities.mean(axis=0))

    @property
    def velocity(self) -> tuple[float, float]:
        """Mean step velocity projected onto the x/y plane."""
        return self.velocity_3d.xy

    @property
    def start_position_3d(self) -> Vector3 | None:
        """Position of the first sample since construction or the last reset."""
        return self._start_position

    @property
    def start_position(self) -> tuple[float, float] | None:
        """Planar start position."""
        if self._start_position is None:
            return None
        return self._start_position.xy

    @property
    def position_3d(self) -> Vector3 | None:
        """Position of the newest sample in the window."""
        if not self._samples:
            return None
        return self._samples[-1].position

    @property
    def position(self) -> tuple[float, float] | None:
        """Planar position of the newest sample in the window."""
        position = self.position_3d
        if position is None:
            return None
        return position.xy

    def reset(self) -> None:
        """Forget all samples and the start position."""
        self._samples.clear()
        self._start_position = None
