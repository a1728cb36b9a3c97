"""Tests for named modulations and the text form."""

import pytest

from surfmod.modulation import (
    SurfaceModulation,
    NoOp,
    SineWaveUV,
    CosineWaveUV,
    TriangleWaveUV,
    Composite,
    CombinedSineWaveUV,
)
from surfmod.registry import (
    available_modulations,
    create_modulation,
    parse_modulation,
    format_modulation,
)


def test_available_modulations_in_registration_order():
    """Every leaf variant is registered under its short name."""
    assert available_modulations() == ["noop", "sine", "cosine", "triangle", "combined_sine"]


def test_create_modulation_passes_repeats():
    """Positional repeat counts go to the constructor."""
    assert create_modulation("sine", 2, 3) == SineWaveUV(2, 3)
    assert create_modulation("triangle", 4) == TriangleWaveUV(4, 1)
    assert create_modulation("combined_sine", 3, 2) == CombinedSineWaveUV(3, 2)
    assert create_modulation("noop") == NoOp()


def test_create_modulation_unknown_name():
    """Unknown names list the alternatives."""
    with pytest.raises(ValueError, match="Unknown modulation 'wobble'.*sine"):
        create_modulation("wobble")


def test_create_modulation_too_many_repeats():
    """Extra repeat counts are rejected."""
    with pytest.raises(ValueError, match="at most 2"):
        create_modulation("cosine", 1, 2, 3)
    with pytest.raises(ValueError, match="at most 0"):
        create_modulation("noop", 1)


def test_parse_single_term():
    """A bare name uses default repeat counts."""
    assert parse_modulation("cosine") == CosineWaveUV(1, 1)
    assert parse_modulation("sine:3,2") == SineWaveUV(3, 2)


def test_parse_ignores_whitespace():
    """Spaces around names, separators and counts are ignored."""
    assert parse_modulation(" sine : 2 , 1 + cosine ") == Composite(SineWaveUV(2, 1), CosineWaveUV())


def test_parse_folds_left():
    """Three terms nest as Composite(Composite(a, b), c)."""
    mod = parse_modulation("sine+cosine:2,2+noop")
    assert mod == Composite(Composite(SineWaveUV(), CosineWaveUV(2, 2)), NoOp())
    assert mod.offset(0, 0) == pytest.approx(1.5)


@pytest.mark.parametrize("text", ["", "   ", "sine+", "+cosine", "sine:", "sine:1,x", "bogus"])
def test_parse_rejects_malformed_text(text):
    """Malformed expressions raise ValueError."""
    with pytest.raises(ValueError):
        parse_modulation(text)


def test_format_writes_all_repeats():
    """The text form spells out every stored repeat count."""
    assert format_modulation(NoOp()) == "noop"
    assert format_modulation(SineWaveUV(2, 1)) == "sine:2,1"
    assert format_modulation(CombinedSineWaveUV()) == "combined_sine:1,1,1,1"
    assert format_modulation(SineWaveUV() + TriangleWaveUV(3, 3)) == "sine:1,1+triangle:3,3"


@pytest.mark.parametrize(
    "text",
    ["noop", "sine:2,5", "cosine+triangle:4,1", "combined_sine:3,2+sine+noop"],
)
def test_format_inverts_parse(text):
    """Parsing the formatted text rebuilds an equal modulation."""
    mod = parse_modulation(text)
    assert parse_modulation(format_modulation(mod)) == mod


def test_format_rejects_non_dataclass_modulation():
    """A named modulation without dataclass fields cannot be written as text."""

    class Flat(SurfaceModulation):
        kind = "flat"

        def offset(self, u, v):
            return 0.25

    with pytest.raises(ValueError, match="cannot be written"):
        format_modulation(Flat())
    with pytest.raises(ValueError, match="cannot be written"):
        format_modulation(Composite(SineWaveUV(), Flat()))
