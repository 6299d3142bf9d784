"""Unit tests for distance to similarity conversions."""

import pytest

from profanity_backend.boundary.vdb.vector_schemas import (
    score_from_cosine_distance,
    score_from_squared_l2,
)


@pytest.mark.parametrize(
    ("cosine", "expected"),
    [(1.0, 1.0), (0.0, 0.5), (-1.0, 0.0)],
)
def test_both_distances_map_to_the_same_scale(cosine, expected):
    cosine_distance = 1.0 - cosine
    squared_l2 = 2.0 - 2.0 * cosine

    assert score_from_cosine_distance(cosine_distance) == pytest.approx(expected)
    assert score_from_squared_l2(squared_l2) == pytest.approx(expected)


def test_smaller_distance_scores_higher():
    assert score_from_squared_l2(0.1) > score_from_squared_l2(0.5)
    assert score_from_cosine_distance(0.1) > score_from_cosine_distance(0.5)
