"""Shared pytest fixtures for the stroke recognizer tests.

Fixtures:
    unistroke_recognizer: Recognizer trained on the built-in unistroke shapes
    multistroke_recognizer: Recognizer trained on the built-in multistroke shapes
"""

import pytest

from stroke_recognizer import Recognizer, UNISTROKE, MULTISTROKE
from stroke_recognizer.gestures.shapes import default_templates


def _trained(mode, config=None):
    recognizer = Recognizer(mode, config)
    for name, strokes in default_templates(mode).items():
        recognizer.add_template(name, strokes)
    return recognizer


@pytest.fixture
def unistroke_recognizer():
    return _trained(UNISTROKE)


@pytest.fixture
def multistroke_recognizer():
    return _trained(MULTISTROKE)


@pytest.fixture
def trained():
    """Factory for recognizers trained on the built-in shapes."""
    return _trained
