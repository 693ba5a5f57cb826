#!/usr/bin/env python3
"""Shape Recognition Demo with Visual Feedback.

Draw with the mouse to recognize shapes against the built-in templates.
In unistroke mode every completed stroke is recognized immediately; in
multistroke mode strokes accumulate until R is pressed.
"""

import logging
from typing import Tuple

import pygame

from stroke_recognizer import Recognizer, GestureCapture, UNISTROKE, MULTISTROKE
from stroke_recognizer.gestures.shapes import default_templates
from stroke_recognizer.utils.errors import RecognitionError
from stroke_recognizer.utils.logger import RecognitionLogger


class ShapeRecognitionDemo:
    """Interactive demo for unistroke and multistroke recognition."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1200, 800))
        pygame.display.set_caption("$1 / $N Shape Recognition Demo")

        self.result_logger = RecognitionLogger()
        self.mode = UNISTROKE
        self.custom_count = 0
        self._build_recognizer()

        self.recognition_result: str | None = None
        self.similarity_score = 0.0

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.RED = (255, 0, 0)
        self.GREEN = (0, 160, 0)
        self.BLUE = (0, 0, 255)
        self.GRAY = (128, 128, 128)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 30)

    def _build_recognizer(self) -> None:
        """Create a recognizer for the current mode seeded with built-in shapes."""
        self.recognizer = Recognizer(self.mode)
        for name, strokes in default_templates(self.mode).items():
            self.recognizer.add_template(name, strokes)
        self.capture = GestureCapture(self.recognizer, self.result_logger)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:  # Left click
                        self.start_stroke(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.capture.is_drawing:
                        self.add_point(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1:
                        self.finish_stroke()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_c:
                        self.clear_screen()
                    elif event.key == pygame.K_r:
                        self.recognize_gesture()
                    elif event.key == pygame.K_t:
                        self.train_gesture()
                    elif event.key == pygame.K_m:
                        self.toggle_mode()

            self.draw()
            clock.tick(60)

    def start_stroke(self, pos: Tuple[int, int]) -> None:
        if self.mode == UNISTROKE:
            self.capture.reset()
        self.capture.begin_stroke()
        self.add_point(pos)

    def add_point(self, pos: Tuple[int, int]) -> None:
        x, y = pos
        self.capture.add_point(x, y, float(pygame.time.get_ticks()))

    def finish_stroke(self) -> None:
        self.capture.end_stroke()
        if self.mode == UNISTROKE:
            self.recognize_gesture()

    def recognize_gesture(self) -> None:
        """Recognize the captured strokes."""
        try:
            self.capture.detect(self.show_result)
        except RecognitionError as e:
            self.recognition_result = f"Error: {e}"
            self.similarity_score = 0.0

    def show_result(self, result) -> None:
        self.recognition_result = result.name if result.matched else "No match"
        self.similarity_score = result.score

    def train_gesture(self) -> None:
        """Store the captured strokes as a new template."""
        self.custom_count += 1
        name = f"custom_{self.custom_count}"
        try:
            self.capture.train(name)
            self.recognition_result = f"Trained {name}"
        except RecognitionError as e:
            self.recognition_result = f"Error: {e}"
        self.similarity_score = 0.0

    def toggle_mode(self) -> None:
        self.mode = MULTISTROKE if self.mode == UNISTROKE else UNISTROKE
        self._build_recognizer()
        self.clear_screen()

    def clear_screen(self) -> None:
        """Clear the drawing and results."""
        self.capture.reset()
        self.recognition_result = None
        self.similarity_score = 0.0

    def draw(self) -> None:
        """Render the UI and current drawing."""
        self.screen.fill(self.WHITE)
        instructions = [
            f"Mode: {self.mode}   Templates: {', '.join(self.recognizer.library.names())}",
            "C: Clear   R: Recognize   T: Train as new template   M: Switch mode",
        ]
        y = 10
        for line in instructions:
            self.screen.blit(self.small_font.render(line, True, self.BLACK), (10, y))
            y += 30

        for stroke in self.capture.strokes:
            pts = [(p.x, p.y) for p in stroke]
            if len(pts) > 1:
                pygame.draw.lines(self.screen, self.RED, False, pts, 4)
            for pt in pts[:1]:
                pygame.draw.circle(self.screen, self.BLUE, (int(pt[0]), int(pt[1])), 6)

        if self.recognition_result:
            self.screen.blit(
                self.font.render(f"Recognized: {self.recognition_result}", True, self.GREEN), (10, 700)
            )
            self.screen.blit(
                self.font.render(f"Similarity: {self.similarity_score:.2f}", True, self.GREEN), (10, 745)
            )
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    logging.basicConfig(level=logging.INFO)
    demo = ShapeRecognitionDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        demo.result_logger.close()
        pygame.quit()


if __name__ == "__main__":
    main()
