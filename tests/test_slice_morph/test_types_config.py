import pytest

from slice_morph.config import AnimationConfig, MorphConfig
from slice_morph.types import SEED_INTERVAL, Interval, MatchPair, as_slice_map


def test_interval_geometry():
    seg = Interval(0.2, 0.6)
    assert seg.center == pytest.approx(0.4)
    assert seg.height == pytest.approx(0.4)
    assert seg.to_dict() == {"top": 0.2, "bottom": 0.6}


def test_seed_interval_is_small_and_centered():
    assert SEED_INTERVAL.center == pytest.approx(0.5)
    assert SEED_INTERVAL.height == pytest.approx(0.03)


@pytest.mark.parametrize(
    "value",
    [Interval(0.1, 0.2), {"top": 0.1, "bottom": 0.2}, (0.1, 0.2), [0.1, 0.2]],
)
def test_coerce_accepts_common_shapes(value):
    assert Interval.coerce(value) == Interval(0.1, 0.2)


@pytest.mark.parametrize("value", [0.1, "ab", (0.1, 0.2, 0.3), None])
def test_coerce_rejects_other_values(value):
    with pytest.raises(TypeError):
        Interval.coerce(value)


def test_as_slice_map_converts_every_column():
    assert as_slice_map([[{"top": 0.0, "bottom": 1.0}], []]) == [[Interval(0.0, 1.0)], []]


def test_match_pair_requires_equal_lengths():
    with pytest.raises(ValueError, match="same length"):
        MatchPair([Interval(0.1, 0.2)], [])


def test_match_pair_pairs():
    pair = MatchPair([Interval(0.1, 0.2)], [Interval(0.3, 0.4)], slice_index=2)
    assert len(pair) == 1
    assert pair.pairs() == [(Interval(0.1, 0.2), Interval(0.3, 0.4))]


def test_morph_config_defaults():
    config = MorphConfig().validate()
    assert config.slice_count == 40
    assert config.column_width == pytest.approx(10.0)
    assert config.raster_width == 160
    assert config.animation == AnimationConfig(duration=800.0, easing="ease-in-out")


@pytest.mark.parametrize(
    "config",
    [
        MorphConfig(slice_count=0),
        MorphConfig(svg_width=0),
        MorphConfig(svg_height=-1),
        MorphConfig(animation=AnimationConfig(duration=-5)),
    ],
)
def test_morph_config_rejects_bad_values(config):
    with pytest.raises(ValueError):
        config.validate()
