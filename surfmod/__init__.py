"""Surfmod public API."""

from .modulation import (
    SurfaceModulation,
    NoOp,
    SineWaveUV,
    CosineWaveUV,
    TriangleWaveUV,
    Composite,
    CombinedSineWaveUV,
)
from .registry import (
    available_modulations,
    create_modulation,
    parse_modulation,
    format_modulation,
)
from .sampling import SamplingConfig, OffsetStats, uv_grid, sample_grid, describe

__all__ = [
    "SurfaceModulation",
    "NoOp",
    "SineWaveUV",
    "CosineWaveUV",
    "TriangleWaveUV",
    "Composite",
    "CombinedSineWaveUV",
    "available_modulations",
    "create_modulation",
    "parse_modulation",
    "format_modulation",
    "SamplingConfig",
    "OffsetStats",
    "uv_grid",
    "sample_grid",
    "describe",
]

__version__ = "0.1.0"
