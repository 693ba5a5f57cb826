#!/usr/bin/env python3
"""Tests for the template library and the unistroke/multistroke recognizer."""

import math

import pytest

from stroke_recognizer import Recognizer, RecognitionConfig, UNISTROKE, MULTISTROKE
from stroke_recognizer.gestures import best_match, TemplateLibrary
from stroke_recognizer.gestures.shapes import default_templates, transform, t_shape, h_shape, arrowhead
from stroke_recognizer.utils.errors import DegenerateInputError, InvalidGestureError


def _reverse(stroke):
    return list(reversed(stroke))


def test_check_scenario():
    recognizer = Recognizer(UNISTROKE)
    recognizer.add_template("check", [[(0, 0), (50, 50)]])
    result = recognizer.recognize([[(0, 0), (50, 50)]])
    assert result.name == "check"
    assert result.score > 0.95


def test_empty_library_is_no_match():
    for mode in (UNISTROKE, MULTISTROKE):
        result = Recognizer(mode).recognize([[(0, 0), (50, 50), (100, 0)]])
        assert not result.matched
        assert result.name is None
        assert result.score == 0.0
        assert result.comparisons == 0


@pytest.mark.parametrize("mode", [UNISTROKE, MULTISTROKE])
def test_single_point_stroke_is_degenerate(mode):
    recognizer = Recognizer(mode)
    with pytest.raises(DegenerateInputError):
        recognizer.add_template("dot", [[(10, 10)]])
    with pytest.raises(DegenerateInputError):
        recognizer.recognize([[(10, 10)]])
    with pytest.raises(DegenerateInputError):
        recognizer.recognize([[(10, 10), (10, 10)]])
    assert len(recognizer.library) == 0


def test_unistroke_mode_rejects_multiple_strokes():
    recognizer = Recognizer(UNISTROKE)
    with pytest.raises(InvalidGestureError):
        recognizer.add_template("x", [[(0, 0), (1, 1)], [(1, 0), (0, 1)]])


@pytest.mark.parametrize("name", sorted(default_templates(UNISTROKE)))
def test_unistroke_translation_and_scale_invariance(unistroke_recognizer, name):
    strokes = default_templates(UNISTROKE)[name]
    for scale, offset in [(1.0, (0, 0)), (3.5, (400, -250)), (0.2, (-30, 80))]:
        result = unistroke_recognizer.recognize(transform(strokes, scale=scale, offset=offset))
        assert result.name == name
        assert result.score > 0.9


def test_unistroke_small_rotation_still_recognized(unistroke_recognizer):
    strokes = transform(default_templates(UNISTROKE)['triangle'], angle=0.3, offset=(50, 50))
    assert unistroke_recognizer.recognize(strokes).name == 'triangle'


def test_multistroke_order_and_direction_invariance(multistroke_recognizer):
    a, b = t_shape()
    forward = multistroke_recognizer.recognize([a, b])
    shuffled = multistroke_recognizer.recognize([_reverse(b), a])
    assert forward.name == 'T'
    assert shuffled.name == forward.name
    assert shuffled.score > 0.9


def test_multistroke_translation_and_scale_invariance(multistroke_recognizer):
    strokes = transform(h_shape(), scale=0.4, offset=(-100, 20))
    strokes = [strokes[2], _reverse(strokes[0]), strokes[1]]
    assert multistroke_recognizer.recognize(strokes).name == 'H'


def test_single_stroke_template_in_multistroke_mode():
    recognizer = Recognizer(MULTISTROKE)
    assert recognizer.add_template("zig", [[(0, 0), (30, 60), (60, 0), (90, 60)]]) == 2
    result = recognizer.recognize([[(90, 60), (60, 0), (30, 60), (0, 0)]])
    assert result.name == "zig"


@pytest.mark.parametrize("gesture", [
    t_shape(),
    [_reverse(s) for s in h_shape()],
    list(reversed(arrowhead())),
])
def test_pruning_never_changes_the_winner(trained, gesture):
    pruned = trained(MULTISTROKE)
    unpruned_config = RecognitionConfig()
    unpruned_config.disable_pruning()
    unpruned = trained(MULTISTROKE, unpruned_config)

    with_pruning = pruned.recognize(gesture)
    without_pruning = unpruned.recognize(gesture)

    assert with_pruning.name == without_pruning.name
    assert without_pruning.comparisons == unpruned.library.variant_count()
    assert with_pruning.comparisons < without_pruning.comparisons


def test_everything_pruned_is_no_match():
    config = RecognitionConfig()
    config.set_pruning_threshold(0.0)
    recognizer = Recognizer(MULTISTROKE, config)
    recognizer.add_template("right", [[(0, 0), (100, 0)]])
    result = recognizer.recognize([[(0, 0), (100, 0), (100, 100)]])
    assert not result.matched


def test_bounded_rotation_invariance_distinguishes_orientation():
    config = RecognitionConfig(use_bounded_rotation_invariance=True)
    recognizer = Recognizer(MULTISTROKE, config)
    recognizer.add_template("horizontal", [[(0, 0), (100, 0)]])
    recognizer.add_template("vertical", [[(0, 0), (0, 100)]])
    assert recognizer.recognize([[(10, 10), (10, 200)]]).name == "vertical"
    assert recognizer.recognize([[(300, 10), (20, 10)]]).name == "horizontal"


def test_similarity_threshold_turns_weak_match_into_no_match(unistroke_recognizer):
    unistroke_recognizer.config.set_similarity_threshold(1.0)
    result = unistroke_recognizer.recognize(default_templates(UNISTROKE)['circle'])
    assert not result.matched


def test_best_match_fold():
    assert best_match([]) == (None, math.inf)
    assert best_match([("a", 3.0), ("b", 1.0), ("c", 2.0)]) == ("b", 1.0)
    # first seen wins ties
    assert best_match([("a", 1.0), ("b", 1.0)]) == ("a", 1.0)


def test_library_replaces_in_place():
    library = TemplateLibrary(UNISTROKE)
    library.add_template("a", [[(0, 0), (10, 10)]])
    library.add_template("b", [[(0, 0), (10, 0), (10, 10)]])
    replacement = library.add_template("a", [[(0, 0), (0, 10), (10, 10)]])
    assert library.names() == ["a", "b"]
    assert len(library) == 2
    assert library.get("a") is replacement
    assert "b" in library and "c" not in library
    assert [t.name for t in library] == ["a", "b"]


def test_library_variant_counts():
    library = TemplateLibrary(MULTISTROKE)
    template = library.add_template("H", h_shape())
    assert template.stroke_count == 3
    assert len(template.paths) == len(template.vectors) == 48
    assert library.variant_count() == 48

    unistroke = TemplateLibrary(UNISTROKE).add_template("check", [[(0, 0), (50, 50)]])
    assert len(unistroke.variants) == 1


def test_library_rejects_unknown_mode_and_empty_name():
    with pytest.raises(ValueError):
        TemplateLibrary("sideways")
    with pytest.raises(InvalidGestureError):
        TemplateLibrary(UNISTROKE).add_template("  ", [[(0, 0), (1, 1)]])
