"""
Named collection of trained gesture templates.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..config.settings import RecognitionConfig, MODES, UNISTROKE
from ..utils.errors import InvalidGestureError
from .multistroke import generate_variants, prepare_strokes
from .normalizer import normalize_unistroke
from .types import Template, TemplateVariant

logger = logging.getLogger(__name__)


class TemplateLibrary:
    """
    Insertion-ordered mapping from template name to Template.

    In unistroke mode each template stores one canonical path. In multistroke
    mode every stroke order and direction is normalized once at add time.
    """

    def __init__(self, mode: str = UNISTROKE, config: Optional[RecognitionConfig] = None):
        if mode not in MODES:
            raise ValueError(f"Unknown recognition mode: {mode}")
        self.mode = mode
        self.config = config or RecognitionConfig()
        self._templates: Dict[str, Template] = {}

    def add_template(self, name: str, strokes: Sequence[Any]) -> Template:
        """Normalize and store a template, replacing any entry with the same name."""
        name = str(name).strip()
        if not name:
            raise InvalidGestureError("Template name cannot be empty")

        stroke_points = prepare_strokes(strokes)

        if self.mode == UNISTROKE:
            if len(stroke_points) != 1:
                raise InvalidGestureError(
                    f"Unistroke templates take exactly one stroke, got {len(stroke_points)}"
                )
            canonical = normalize_unistroke(stroke_points[0], self.config)
            variants = [TemplateVariant(canonical, None)]
        else:
            variants = generate_variants(stroke_points, self.config)

        template = Template(name, variants, len(stroke_points))
        replaced = name in self._templates
        # Replacing keeps the original position so iteration stays deterministic
        self._templates[name] = template

        logger.info(f"{'Replaced' if replaced else 'Added'} template '{name}' "
                    f"({len(variants)} variant(s))")
        return template

    def get(self, name: str) -> Optional[Template]:
        return self._templates.get(name)

    def names(self) -> List[str]:
        return list(self._templates)

    def variant_count(self) -> int:
        """Total number of stored canonical paths."""
        return sum(len(t.variants) for t in self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[Template]:
        return iter(list(self._templates.values()))
