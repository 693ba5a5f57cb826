#!/usr/bin/env python3
"""Tests for multistroke permutation and direction combinatorics."""

import math

import pytest

from stroke_recognizer.config.settings import RecognitionConfig
from stroke_recognizer.gestures import multistroke
from stroke_recognizer.utils.errors import DegenerateInputError, InvalidGestureError, TooManyStrokesError
from stroke_recognizer.utils.gesture_utils import Point


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_heap_permutations_yields_every_ordering_once(n):
    orders = list(multistroke.heap_permutations(n))
    assert len(orders) == math.factorial(n)
    assert len(set(orders)) == len(orders)
    assert all(sorted(order) == list(range(n)) for order in orders)


def test_heap_permutations_is_restartable():
    assert list(multistroke.heap_permutations(3)) == list(multistroke.heap_permutations(3))
    assert list(multistroke.heap_permutations(0)) == []


def test_make_unistrokes_covers_orders_and_directions():
    a = [Point(0, 0), Point(1, 0)]
    b = [Point(5, 5), Point(5, 6), Point(5, 7)]
    unistrokes = list(multistroke.make_unistrokes([a, b], multistroke.heap_permutations(2)))
    assert len(unistrokes) == 2 * 2 ** 2
    assert all(len(u) == 5 for u in unistrokes)

    as_tuples = {tuple((p.x, p.y) for p in u) for u in unistrokes}
    assert len(as_tuples) == 8
    # b reversed, then a forward
    assert ((5, 7), (5, 6), (5, 5), (0, 0), (1, 0)) in as_tuples


def test_prepare_strokes_accepts_single_stroke_and_validates():
    assert len(multistroke.prepare_strokes([(0, 0), (10, 10)])) == 1
    assert len(multistroke.prepare_strokes([[(0, 0), (10, 10)], [(5, 0), (5, 10)]])) == 2
    with pytest.raises(DegenerateInputError):
        multistroke.prepare_strokes([[(0, 0), (10, 10)], [(3, 3)]])
    with pytest.raises(InvalidGestureError):
        multistroke.prepare_strokes([])


def test_generate_variants_count_and_vectors():
    strokes = multistroke.prepare_strokes([[(0, 0), (0, 100)], [(0, 50), (60, 50)], [(60, 0), (60, 100)]])
    variants = multistroke.generate_variants(strokes)
    assert len(variants) == math.factorial(3) * 2 ** 3
    for variant in variants:
        assert len(variant.points) == 96
        assert math.hypot(variant.vector.x, variant.vector.y) == pytest.approx(1.0)


def test_generate_variants_respects_stroke_cap():
    strokes = multistroke.prepare_strokes([[(i, 0), (i, 10)] for i in range(3)])
    with pytest.raises(TooManyStrokesError):
        multistroke.generate_variants(strokes, RecognitionConfig(max_strokes=2))
