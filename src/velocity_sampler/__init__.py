"""Rolling-window velocity sampling for pointer, touch and hand tracking."""
from velocity_sampler.tracking.clock import ManualClock, monotonic_seconds
from velocity_sampler.tracking.sampler import DEFAULT_CAPACITY, RollingVelocitySampler, Sample
from velocity_sampler.tracking.vector import Vector3

__all__ = [
    "DEFAULT_CAPACITY",
    "ManualClock",
    "RollingVelocitySampler",
    "Sample",
    "Vector3",
    "monotonic_seconds",
]
