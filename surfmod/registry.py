"""Named modulations and a compact text form for building them."""

from __future__ import annotations

from dataclasses import astuple, fields, is_dataclass
from typing import Dict, List, Type

from .modulation import (
    SurfaceModulation,
    NoOp,
    SineWaveUV,
    CosineWaveUV,
    TriangleWaveUV,
    Composite,
    CombinedSineWaveUV,
)

_REGISTRY: Dict[str, Type[SurfaceModulation]] = {
    cls.kind: cls
    for cls in (NoOp, SineWaveUV, CosineWaveUV, TriangleWaveUV, CombinedSineWaveUV)
}


def available_modulations() -> List[str]:
    return list(_REGISTRY)


def create_modulation(name: str, *repeats: int) -> SurfaceModulation:
    """Build a registered modulation from positional repeat counts."""
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown modulation '{name}'. Available: {', '.join(available_modulations())}"
        )
    arity = len(fields(cls))
    if len(repeats) > arity:
        raise ValueError(
            f"Modulation '{name}' takes at most {arity} repeat counts, got {len(repeats)}"
        )
    return cls(*(int(r) for r in repeats))


def _parse_term(term: str) -> SurfaceModulation:
    term = "".join(term.split())
    if not term:
        raise ValueError("Empty term in modulation expression.")
    name, sep, counts = term.partition(":")
    repeats: List[int] = []
    if sep:
        try:
            repeats = [int(c) for c in counts.split(",")]
        except ValueError as exc:
            raise ValueError(f"Invalid repeat counts '{counts}' for '{name}'") from exc
    return create_modulation(name, *repeats)


def parse_modulation(text: str) -> SurfaceModulation:
    """
    Parse an expression such as ``"sine:2,1 + cosine"``.

    Terms joined with ``+`` fold left into composites, so ``a+b+c`` becomes
    ``Composite(Composite(a, b), c)``.
    """
    if not text or not text.strip():
        raise ValueError("Empty modulation expression.")
    result = None
    for term in text.split("+"):
        modulation = _parse_term(term)
        result = modulation if result is None else Composite(result, modulation)
    return result


def format_modulation(modulation: SurfaceModulation) -> str:
    if isinstance(modulation, Composite):
        return f"{format_modulation(modulation.mod_a)}+{format_modulation(modulation.mod_b)}"
    if not modulation.kind or not is_dataclass(modulation):
        raise ValueError(f"{type(modulation).__name__} cannot be written as a modulation expression")
    repeats = astuple(modulation)
    if not repeats:
        return modulation.kind
    return f"{modulation.kind}:{','.join(str(r) for r in repeats)}"
