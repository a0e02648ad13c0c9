"""Tests for expected/observed distribution helpers."""

import pytest

from priority_balancer import Resource, build, deterministic_random_source
from priority_balancer.errors import NoMatchingPriorityError
from priority_balancer.metrics.distribution import (
    empirical_frequencies,
    expected_probabilities,
    max_deviation,
)


def _make_balancer():
    return build(
        [
            Resource(20, 0, "d"),
            Resource(20, 0, "e"),
            Resource(10, 60, "a"),
            Resource(10, 20, "b"),
            Resource(10, 20, "c"),
        ],
        deterministic_random_source(11),
    )


def _as_dict(pairs):
    return {r.target: p for r, p in pairs}


def test_expected_priority_weighted():
    lb = _make_balancer()
    assert _as_dict(expected_probabilities(lb, "priority_weighted", 0)) == pytest.approx(
        {"a": 0.6, "b": 0.2, "c": 0.2}
    )
    assert _as_dict(expected_probabilities(lb, "priority_weighted", 15)) == pytest.approx(
        {"d": 0.5, "e": 0.5}
    )


def test_expected_priority_random():
    lb = _make_balancer()
    probs = _as_dict(expected_probabilities(lb, "priority_random", 0))
    assert probs == pytest.approx({"a": 1 / 3, "b": 1 / 3, "c": 1 / 3})


def test_expected_random_is_group_uniform():
    lb = _make_balancer()
    probs = _as_dict(expected_probabilities(lb, "random"))
    assert probs == pytest.approx(
        {"a": 1 / 6, "b": 1 / 6, "c": 1 / 6, "d": 0.25, "e": 0.25}
    )
    assert sum(probs.values()) == pytest.approx(1.0)


def test_expected_random_weighted():
    lb = _make_balancer()
    probs = _as_dict(expected_probabilities(lb, "random_weighted"))
    assert probs == pytest.approx({"a": 0.3, "b": 0.1, "c": 0.1, "d": 0.25, "e": 0.25})


def test_expected_matches_observed():
    lb = _make_balancer()
    expected = _as_dict(expected_probabilities(lb, "random"))
    observed = empirical_frequencies(lb.random, 100_000)
    assert max_deviation(observed, expected) < 1.0e-2


def test_expected_unknown_mode():
    with pytest.raises(ValueError, match="Unknown selection mode"):
        expected_probabilities(_make_balancer(), "round_robin")


def test_expected_floor_too_high():
    with pytest.raises(NoMatchingPriorityError):
        expected_probabilities(_make_balancer(), "priority_random", 21)


def test_empirical_frequencies_counts():
    draws = iter(["x", "y", "x", "x"])
    assert empirical_frequencies(lambda: next(draws), 4) == {"x": 0.75, "y": 0.25}


def test_empirical_frequencies_requires_positive_n():
    with pytest.raises(ValueError, match="positive"):
        empirical_frequencies(lambda: 1, 0)


def test_max_deviation_covers_missing_keys():
    assert max_deviation({"a": 0.5, "b": 0.5}, {"a": 0.5, "c": 0.5}) == 0.5
    assert max_deviation({}, {}) == 0.0
