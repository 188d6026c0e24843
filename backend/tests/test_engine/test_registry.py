"""Tests for the layer registry."""

import pytest

from glyphsmith.engine import layers  # noqa: F401  (registers generators)
from glyphsmith.engine.context import GlyphContext, Layer
from glyphsmith.engine.registry import LayerKind, LayerRegistry, LayerSpec, get_registry


def _noop(ctx: GlyphContext, index: int, use_attractors: bool) -> Layer:
    return Layer(kind=LayerKind.BLOB, index=index)


def test_register_and_get():
    reg = LayerRegistry()
    spec = LayerSpec(kind=LayerKind.BLOB, fn=_noop, cutoff=0.5)
    reg.register(spec)
    assert reg.get(LayerKind.BLOB) is spec
    assert reg.count == 1


def test_duplicate_kind_rejected():
    reg = LayerRegistry()
    reg.register(LayerSpec(kind=LayerKind.HATCH, fn=_noop, cutoff=1.0))
    with pytest.raises(ValueError):
        reg.register(LayerSpec(kind=LayerKind.HATCH, fn=_noop, cutoff=1.0))


def test_choose_on_empty_registry():
    with pytest.raises(LookupError):
        LayerRegistry().choose(0.5)


def test_all_sorted_by_kind():
    reg = LayerRegistry()
    reg.register(LayerSpec(kind=LayerKind.HATCH, fn=_noop, cutoff=1.0))
    reg.register(LayerSpec(kind=LayerKind.BLOB, fn=_noop, cutoff=0.3))
    assert [s.kind for s in reg.all()] == [LayerKind.BLOB, LayerKind.HATCH]


@pytest.mark.parametrize(
    "draw,kind",
    [
        (0.0, LayerKind.BLOB),
        (0.2999, LayerKind.BLOB),
        (0.30, LayerKind.POLYLINE),
        (0.6499, LayerKind.POLYLINE),
        (0.65, LayerKind.HATCH),
        (0.9999, LayerKind.HATCH),
    ],
)
def test_default_cutoffs(draw, kind):
    assert get_registry().choose(draw).kind is kind


def test_only_shapes_carry_accents():
    reg = get_registry()
    assert reg.count == 3
    assert reg.get(LayerKind.BLOB).accents
    assert reg.get(LayerKind.POLYLINE).accents
    assert not reg.get(LayerKind.HATCH).accents
