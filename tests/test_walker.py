# -*- coding: utf-8 -*-
"""Tests for RouteWalker."""

import dataclasses

import pytest

from locate_along_line.walker import RouteWalker


class TestRouteWalker:
    """Tests for RouteWalker state transitions."""

    def test_starts_at_zero(self):
        walker = RouteWalker()
        assert walker.distance == 0.0
        assert walker.pre_distance == 0.0

    def test_advance_accumulates_length(self):
        walker = RouteWalker().advance(100.0).advance(50.0)
        assert walker.distance == pytest.approx(150.0)
        assert walker.pre_distance == pytest.approx(100.0)

    def test_advance_uses_end_measure(self):
        walker = RouteWalker().advance(100.0, end_measure=40.0).advance(
            100.0, end_measure=75.0
        )
        assert walker.distance == 75.0
        assert walker.pre_distance == 40.0

    def test_zero_end_measure_is_used(self):
        walker = RouteWalker(distance=10.0).advance(100.0, end_measure=0.0)
        assert walker.distance == 0.0
        assert walker.pre_distance == 10.0

    def test_advance_returns_new_walker(self):
        walker = RouteWalker()
        advanced = walker.advance(10.0)
        assert walker.distance == 0.0
        assert advanced is not walker

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RouteWalker().distance = 3.0

    @pytest.mark.parametrize(
        ("measure", "expected"),
        [(-1.0, True), (0.0, True), (99.9, True), (100.0, True), (100.1, False)],
    )
    def test_contains(self, measure, expected):
        assert RouteWalker(distance=100.0, pre_distance=50.0).contains(measure) is expected

    def test_segment_distance_remainder(self):
        walker = RouteWalker(distance=100.0, pre_distance=40.0)
        assert walker.segment_distance(55.0) == pytest.approx(15.0)

    def test_segment_distance_first_segment(self):
        """With nothing accumulated yet the raw measure is walked."""
        walker = RouteWalker(distance=100.0, pre_distance=0.0)
        assert walker.segment_distance(55.0) == 55.0

    def test_segment_distance_negative_measure(self):
        walker = RouteWalker(distance=100.0, pre_distance=0.0)
        assert walker.segment_distance(-5.0) == -5.0
