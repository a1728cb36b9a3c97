"""Sampling modulations over a regular UV grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .modulation import SurfaceModulation


@dataclass
class SamplingConfig:
    width: int = 64
    height: int = 64

    @classmethod
    def from_args(cls, args) -> "SamplingConfig":
        return cls(
            width=getattr(args, "width", 64),
            height=getattr(args, "height", 64),
        )


@dataclass
class OffsetStats:
    """Summary of an offset field"""
    minimum: float
    maximum: float
    mean: float
    width: int
    height: int

    @property
    def normalized(self) -> bool:
        return 0.0 <= self.minimum and self.maximum <= 1.0

    @classmethod
    def from_field(cls, field: np.ndarray) -> "OffsetStats":
        height, width = field.shape
        return cls(
            minimum=float(field.min()),
            maximum=float(field.max()),
            mean=float(field.mean()),
            width=width,
            height=height,
        )


def uv_grid(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Regular grid of surface coordinates covering 0..1 inclusive.

    Returns:
        (u, v) arrays of shape (height, width); u varies along columns,
        v along rows.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Grid size must be positive, got {width}x{height}")
    u = np.linspace(0.0, 1.0, width)
    v = np.linspace(0.0, 1.0, height)
    grid_u, grid_v = np.meshgrid(u, v)
    return grid_u, grid_v


def sample_grid(modulation: SurfaceModulation, width: int, height: int) -> np.ndarray:
    """Evaluate a modulation at every point of a ``width`` x ``height`` UV grid."""
    u, v = uv_grid(width, height)
    values = modulation.offset(u, v)
    return np.broadcast_to(np.asarray(values, dtype=np.float64), u.shape).copy()


def describe(modulation: SurfaceModulation, width: int = 64, height: int = 64) -> OffsetStats:
    return OffsetStats.from_field(sample_grid(modulation, width, height))
