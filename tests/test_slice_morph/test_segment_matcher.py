from __future__ import annotations

import pytest

from slice_morph.interpolate import interpolate_pairs
from slice_morph.matching import match_segments, match_slice_maps, resolve_weights
from slice_morph.matching.scoring import pair_score, score_matrix
from slice_morph.types import SEED_INTERVAL, Interval, MatchPair
from slice_morph.validation import validate_morphing_segments, validate_slice_map


def test_both_empty_gives_empty_pair() -> None:
    result = match_segments([], [])
    assert result.current_segments == []
    assert result.target_segments == []


def test_empty_current_appears_from_seed() -> None:
    target = [Interval(0.3, 0.7)]
    result = match_segments([], target)

    assert result.current_segments == [SEED_INTERVAL]
    assert result.target_segments == target


def test_empty_target_collapses_into_seed() -> None:
    current = [Interval(0.3, 0.7)]
    result = match_segments(current, [])

    assert result.current_segments == current
    assert result.target_segments == [SEED_INTERVAL]


def test_three_to_one_converges_on_single_target(converging_column) -> None:
    current = converging_column["current"]
    target = converging_column["target"]

    result = match_segments(current, target)

    assert len(result.current_segments) == len(result.target_segments) == 3
    assert result.current_segments == current
    assert result.target_segments == [target[0]] * 3


def test_one_to_three_diverges_without_center_collapse() -> None:
    current = [Interval(0.4, 0.6)]
    target = [Interval(0.1, 0.3), Interval(0.45, 0.55), Interval(0.7, 0.9)]

    result = match_segments(current, target)

    assert result.current_segments == current * 3
    assert result.target_segments == target
    for step in range(11):
        assert validate_morphing_segments([result], step / 10)


def test_five_to_two_uses_both_targets() -> None:
    current = [
        Interval(0.1, 0.2),
        Interval(0.25, 0.35),
        Interval(0.4, 0.6),
        Interval(0.65, 0.75),
        Interval(0.8, 0.9),
    ]
    target = [Interval(0.2, 0.4), Interval(0.6, 0.8)]

    result = match_segments(current, target)

    assert result.current_segments == current
    assert len(result.target_segments) == 5
    assert set(result.target_segments) == set(target)
    assert result.target_segments[0] == target[0]
    assert result.target_segments[1] == target[0]
    assert result.target_segments[3] == target[1]
    assert result.target_segments[4] == target[1]


def test_equal_counts_pair_by_nearest_center() -> None:
    current = [Interval(0.1, 0.2), Interval(0.7, 0.8)]
    target = [Interval(0.65, 0.85), Interval(0.05, 0.25)]

    result = match_segments(current, target)

    assert result.current_segments == current
    assert result.target_segments == [target[1], target[0]]


def test_diverging_reuses_nearest_current() -> None:
    a = Interval(0.1, 0.3)
    b = Interval(0.6, 0.8)
    target = [Interval(0.1, 0.2), Interval(0.25, 0.35), Interval(0.65, 0.75)]

    result = match_segments([a, b], target)

    assert result.target_segments == target
    assert result.current_segments == [a, a, b]


def test_usage_weight_spreads_surplus_targets() -> None:
    a = Interval(0.1, 0.3)
    b = Interval(0.7, 0.9)
    target = [
        Interval(0.1, 0.2),
        Interval(0.15, 0.25),
        Interval(0.2, 0.3),
        Interval(0.25, 0.35),
    ]

    no_penalty = match_segments([a, b], target, weights={"usage": 0.0})
    heavy_penalty = match_segments([a, b], target, weights={"usage": 10.0})

    assert no_penalty.current_segments == [a, a, a, b]
    assert heavy_penalty.current_segments == [a, a, b, b]


def test_single_to_single_keeps_both_intervals() -> None:
    tiny = Interval(0.495, 0.505)
    large = Interval(0.2, 0.8)

    result = match_segments([tiny], [large])

    assert result.current_segments == [tiny]
    assert result.target_segments == [large]


def test_accepts_mapping_intervals() -> None:
    result = match_segments([{"top": 0.2, "bottom": 0.4}], [(0.5, 0.6)])
    assert result.current_segments == [Interval(0.2, 0.4)]
    assert result.target_segments == [Interval(0.5, 0.6)]


def test_unknown_weight_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown scoring weights"):
        match_segments([Interval(0.1, 0.2)], [Interval(0.3, 0.4)], weights={"speed": 1.0})


def test_resolve_weights_direction_defaults() -> None:
    assert resolve_weights(True) == {"distance": 0.7, "size": 0.3, "usage": 0.0}
    assert resolve_weights(False) == {"distance": 0.5, "size": 0.3, "usage": 0.2}
    assert resolve_weights(False, {"distance": 1.0})["distance"] == 1.0


def test_length_and_membership_invariants(random_columns) -> None:
    for current, target in random_columns:
        result = match_segments(current, target)
        expected = max(len(current), len(target))

        assert len(result.current_segments) == len(result.target_segments) == expected
        allowed_current = set(current) if current else {SEED_INTERVAL}
        allowed_target = set(target) if target else {SEED_INTERVAL}
        assert set(result.current_segments) <= allowed_current
        assert set(result.target_segments) <= allowed_target
        # Every input interval on both sides takes part.
        assert set(current) <= set(result.current_segments)
        assert set(target) <= set(result.target_segments)


def test_interpolated_random_morphs_stay_valid(random_columns) -> None:
    pairs = [
        match_segments(current, target, slice_index=i)
        for i, (current, target) in enumerate(random_columns)
    ]
    for step in range(21):
        progress = step / 20
        assert validate_slice_map(interpolate_pairs(pairs, progress))
        assert validate_morphing_segments(pairs, progress)


def test_match_slice_maps_sets_indices_and_pads_missing_columns() -> None:
    current_map = [[Interval(0.1, 0.5)], [Interval(0.2, 0.3)]]
    target_map = [[Interval(0.4, 0.9)]]

    pairs = match_slice_maps(current_map, target_map)

    assert [p.slice_index for p in pairs] == [0, 1]
    assert pairs[0].target_segments == [Interval(0.4, 0.9)]
    assert pairs[1].current_segments == [Interval(0.2, 0.3)]
    assert pairs[1].target_segments == [SEED_INTERVAL]


def test_match_slice_maps_explicit_column_count() -> None:
    pairs = match_slice_maps([], [], column_count=3)
    assert len(pairs) == 3
    assert all(isinstance(p, MatchPair) and len(p) == 0 for p in pairs)


def test_score_matrix_agrees_with_pair_score() -> None:
    current = [Interval(0.1, 0.3), Interval(0.5, 0.9)]
    target = [Interval(0.2, 0.25), Interval(0.6, 0.7), Interval(0.0, 1.0)]
    weights = resolve_weights(False)

    scores = score_matrix(current, target, weights)

    assert scores.shape == (2, 3)
    for i, a in enumerate(current):
        for j, b in enumerate(target):
            assert scores[i, j] == pytest.approx(pair_score(a, b, weights))


def test_global_pass_pairs_by_center_distance_without_crossing() -> None:
    a = Interval(0.2, 0.4)
    b = Interval(0.54, 0.56)
    x = Interval(0.39, 0.41)
    y = Interval(0.52, 0.72)
    z = Interval(0.89, 0.91)

    result = match_segments([a, b], [x, y, z])

    assert result.target_segments == [x, y, z]
    assert result.current_segments == [a, b, b]
