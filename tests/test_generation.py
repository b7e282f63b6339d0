import pytest

from curves3d.model.curves import Circle, CurveKind, Ellipse, Helix
from curves3d.model.generation import generate_curves


def test_same_seed_gives_same_collection():
    assert generate_curves(count=30, seed=7).curves == generate_curves(count=30, seed=7).curves


def test_different_seeds_differ():
    assert generate_curves(count=30, seed=1).curves != generate_curves(count=30, seed=2).curves


def test_variants_cycle():
    collection = generate_curves(count=7, seed=0)
    kinds = [curve.kind for curve in collection]
    assert kinds == [
        CurveKind.ELLIPSE, CurveKind.CIRCLE, CurveKind.HELIX,
        CurveKind.ELLIPSE, CurveKind.CIRCLE, CurveKind.HELIX,
        CurveKind.ELLIPSE,
    ]


def test_parameters_lie_in_range():
    collection = generate_curves(count=60, seed=3, low=1, high=100)
    for curve in collection:
        values = [curve.origin.x, curve.origin.y]
        if isinstance(curve, Ellipse):
            assert curve.origin.z == 0.0
            values += [curve.a, curve.b]
        elif isinstance(curve, Circle):
            assert curve.origin.z == 0.0
            values += [curve.radius]
        elif isinstance(curve, Helix):
            assert curve.a == curve.b
            assert curve.angle_start == 0.0
            values += [curve.origin.z, curve.a, curve.step]
        assert all(1.0 <= v <= 100.0 and v == int(v) for v in values)


def test_degenerate_range():
    collection = generate_curves(count=6, seed=0, low=5, high=5)
    assert collection.total_radius() == 10.0


def test_default_count():
    assert len(generate_curves(seed=0)) == 100


def test_zero_count():
    assert len(generate_curves(count=0, seed=0)) == 0


@pytest.mark.parametrize("kwargs", [{"count": -1}, {"low": 10, "high": 1}])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        generate_curves(seed=0, **kwargs)
