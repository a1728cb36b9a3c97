# surfmod/modulation.py
"""
Surface modulations: normalized height offsets at surface coordinates (u, v).

Every modulation is an immutable value. ``offset`` accepts python floats and
returns a float, or numpy arrays and returns an array of the broadcast shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union
import math
import warnings

import numpy as np
from numba import vectorize, float64

ArrayLike = Union[float, np.ndarray]

TWO_PI = 2.0 * np.pi


@vectorize([float64(float64, float64)], cache=True)
def _harmonic_series(x, count):
    """Sum of ``count`` sine harmonics with amplitude 1/n, each mapped to [0, 0.5/n]"""
    # fractional counts round up: harmonic n runs while n - 1 < count
    total = 0.0
    n = 1.0
    while n - 1.0 < count:
        total += (math.sin(x * 2.0 * math.pi * n) + 1.0) * 0.25 / n
        n += 1.0
    return total


def _as_offset(value) -> ArrayLike:
    if np.ndim(value) == 0:
        return float(value)
    return value


class SurfaceModulation:
    """Encapsulates a modulation of a surface.

    Coordinates and the returned offset are normalized (0..1). ``u`` usually
    runs along the width of a surface, ``v`` along its height.
    """

    kind: ClassVar[str] = ""

    def offset(self, u: ArrayLike, v: ArrayLike) -> ArrayLike:
        raise NotImplementedError

    def __add__(self, other):
        if not isinstance(other, SurfaceModulation):
            return NotImplemented
        return Composite(self, other)

    def __radd__(self, other):
        # lets sum() start from its default 0
        if isinstance(other, (int, float)) and other == 0:
            return self
        return NotImplemented


@dataclass(frozen=True)
class NoOp(SurfaceModulation):
    """Surface modulation that does nothing"""

    kind: ClassVar[str] = "noop"

    def offset(self, u: ArrayLike, v: ArrayLike) -> ArrayLike:
        if np.ndim(u) == 0 and np.ndim(v) == 0:
            return 0.0
        return np.zeros(np.broadcast(u, v).shape)


@dataclass(frozen=True)
class SineWaveUV(SurfaceModulation):
    """Sine wave in both U and V, ``repeat_*`` full cycles across 0..1"""

    kind: ClassVar[str] = "sine"

    repeat_u: int = 1
    repeat_v: int = 1

    def offset(self, u: ArrayLike, v: ArrayLike) -> ArrayLike:
        with np.errstate(invalid="ignore"):
            angle_u = np.multiply(u, TWO_PI) * self.repeat_u
            angle_v = np.multiply(v, TWO_PI) * self.repeat_v
            return _as_offset((np.sin(angle_u) + 1.0) * 0.25 + (np.sin(angle_v) + 1.0) * 0.25)


@dataclass(frozen=True)
class CosineWaveUV(SurfaceModulation):
    """Cosine wave in both U and V; peaks at the surface edges"""

    kind: ClassVar[str] = "cosine"

    repeat_u: int = 1
    repeat_v: int = 1

    def offset(self, u: ArrayLike, v: ArrayLike) -> ArrayLike:
        with np.errstate(invalid="ignore"):
            angle_u = np.multiply(u, TWO_PI) * self.repeat_u
            angle_v = np.multiply(v, TWO_PI) * self.repeat_v
            return _as_offset((np.cos(angle_u) + 1.0) * 0.25 + (np.cos(angle_v) + 1.0) * 0.25)


@dataclass(frozen=True)
class TriangleWaveUV(SurfaceModulation):
    """
    Triangle-like wave built from ``abs(sin)``.

    Each axis contributes 0.25..0.5, so the offset stays within 0.5..1.0.
    """

    kind: ClassVar[str] = "triangle"

    repeat_u: int = 1
    repeat_v: int = 1

    def offset(self, u: ArrayLike, v: ArrayLike) -> ArrayLike:
        with np.errstate(invalid="ignore"):
            angle_u = np.multiply(u, TWO_PI) * self.repeat_u
            angle_v = np.multiply(v, TWO_PI) * self.repeat_v
            return _as_offset(
                (np.abs(np.sin(angle_u)) + 1.0) * 0.25 + (np.abs(np.sin(angle_v)) + 1.0) * 0.25
            )


@dataclass(frozen=True)
class Composite(SurfaceModulation):
    """Sum of two modulations. Both children may be shared with other owners."""

    mod_a: SurfaceModulation
    mod_b: SurfaceModulation

    def offset(self, u: ArrayLike, v: ArrayLike) -> ArrayLike:
        return _as_offset(self.mod_a.offset(u, v) + self.mod_b.offset(u, v))


@dataclass(frozen=True)
class CombinedSineWaveUV(SurfaceModulation):
    """
    Harmonic series of sine waves per axis.

    Harmonic ``n`` (1..repeat_u along U, 1..repeat_v along V) has amplitude
    1/n. The terms are not renormalized, so for repeat counts above 1 the
    offset can exceed 1.

    ``repeat_u2`` and ``repeat_v2`` are stored but do not take part in the
    series.
    """

    kind: ClassVar[str] = "combined_sine"

    repeat_u: int = 1
    repeat_v: int = 1
    repeat_u2: int = 1
    repeat_v2: int = 1

    def __post_init__(self):
        if self.repeat_u2 != 1 or self.repeat_v2 != 1:
            warnings.warn(
                f"CombinedSineWaveUV ignores repeat_u2={self.repeat_u2} and "
                f"repeat_v2={self.repeat_v2}; only repeat_u/repeat_v shape the series",
                stacklevel=3,
            )

    def offset(self, u: ArrayLike, v: ArrayLike) -> ArrayLike:
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)
        with np.errstate(invalid="ignore"):
            return _as_offset(
                _harmonic_series(u, float(self.repeat_u))
                + _harmonic_series(v, float(self.repeat_v))
            )
