"""TerrainSample and TerrainProfile - elevation samples along a path.

A TerrainProfile is produced by a terrain profile provider and consumed,
read-only, by the LOS evaluator and the constraint segmenter.
"""

from dataclasses import dataclass
from math import isnan
from typing import Iterator


@dataclass(frozen=True)
class TerrainSample:
    """A single elevation sample along the path.

    Attributes:
        distance_m: Distance from the path start in meters
        elevation_m: Terrain elevation in meters above sea level
    """

    distance_m: float
    elevation_m: float

    def __post_init__(self) -> None:
        if isnan(self.distance_m) or isnan(self.elevation_m):
            raise ValueError(f"TerrainSample cannot contain NaN ({self.distance_m}, {self.elevation_m})")
        if self.distance_m < 0:
            raise ValueError(f"TerrainSample distance must be non-negative, got {self.distance_m}")


@dataclass(frozen=True)
class TerrainProfile:
    """Ordered elevation samples between two endpoints.

    Attributes:
        samples: Samples in increasing distance order, first at distance 0
        total_distance_m: Great-circle length of the path in meters

    Example:
        profile = TerrainProfile(
            samples=(TerrainSample(0, 120.0), TerrainSample(500, 180.0), TerrainSample(1000, 95.0)),
            total_distance_m=1000.0,
        )
    """

    samples: tuple[TerrainSample, ...]
    total_distance_m: float

    def __post_init__(self) -> None:
        if len(self.samples) < 2:
            raise ValueError(f"TerrainProfile needs at least 2 samples, got {len(self.samples)}")
        if self.samples[0].distance_m != 0:
            raise ValueError(f"First sample must be at distance 0, got {self.samples[0].distance_m}")
        for prev, cur in zip(self.samples, self.samples[1:]):
            if cur.distance_m < prev.distance_m:
                raise ValueError(
                    f"Sample distances must be non-decreasing ({prev.distance_m} -> {cur.distance_m})"
                )

    @classmethod
    def from_elevations(cls, elevations: list[float], total_distance_m: float) -> "TerrainProfile":
        """Build a profile from evenly spaced elevations covering the whole path.

        Sample i of n+1 sits at distance i / n * total_distance_m.
        """
        steps = len(elevations) - 1
        if steps < 1:
            raise ValueError(f"TerrainProfile needs at least 2 elevations, got {len(elevations)}")
        samples = tuple(
            TerrainSample(distance_m=(i / steps) * total_distance_m, elevation_m=float(elev))
            for i, elev in enumerate(elevations)
        )
        return cls(samples=samples, total_distance_m=total_distance_m)

    @property
    def distances(self) -> list[float]:
        return [s.distance_m for s in self.samples]

    @property
    def elevations(self) -> list[float]:
        return [s.elevation_m for s in self.samples]

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[TerrainSample]:
        return iter(self.samples)

    def __getitem__(self, index: int) -> TerrainSample:
        return self.samples[index]
