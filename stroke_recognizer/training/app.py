"""Gesture trainer window.

Draw with the mouse while holding a key:

    Space       record a template
    Left Shift  attempt a gesture
    Enter       save all templates
    O           load templates
"""

from typing import List, Optional, Tuple

import pygame

from .session import RecordMode, TrainerSession


class TrainerApp:
    """Interactive pygame front end for a TrainerSession."""

    def __init__(self, session: Optional[TrainerSession] = None,
                 size: Tuple[int, int] = (1280, 800)) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Gesture trainer")

        self.session = session or TrainerSession()
        self.status: Optional[str] = None

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.GREEN = (0, 255, 0)
        self.BLUE = (60, 120, 255)
        self.GOLD = (255, 215, 0)
        self.GRAY = (128, 128, 128)

        # Fonts
        self.font = pygame.font.Font(None, 50)
        self.small_font = pygame.font.Font(None, 28)

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                self.handle_event(event)
            self.draw()
            clock.tick(60)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            if self.session.is_recording:
                x, y = event.pos
                self.session.add_point(float(x), float(y))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE and not self.session.is_recording:
                self.status = self.session.begin(RecordMode.TEMPLATE)
            elif event.key == pygame.K_LSHIFT and not self.session.is_recording:
                self.status = self.session.begin(RecordMode.ATTEMPT)
        elif event.type == pygame.KEYUP:
            if event.key in (pygame.K_SPACE, pygame.K_LSHIFT):
                self.status = self.session.finish() or None
            elif event.key == pygame.K_RETURN:
                self.status = self.session.save()
            elif event.key == pygame.K_o:
                self.status = self.session.load()

    def _path_color(self) -> Tuple[int, int, int]:
        if self.session.last_mode is RecordMode.TEMPLATE:
            return self.BLUE
        return self.GREEN if self.session.last_matched else self.GRAY

    def _draw_path(self, points: List[Tuple[float, float]], color: Tuple[int, int, int]) -> None:
        if len(points) > 1:
            pygame.draw.lines(self.screen, color, False, points, 4)
        for pt in points:
            pygame.draw.circle(self.screen, color, (int(pt[0]), int(pt[1])), 5)

    def draw(self) -> None:
        """Render instructions, the current stroke and the last result."""
        self.screen.fill(self.BLACK)

        instructions = [
            "Space: record a template",
            "Shift: attempt a gesture",
            "Enter: save all templates",
            "O: load templates",
            f"Templates: {len(self.session.recognizer.templates)}",
        ]
        y = 5
        for line in instructions:
            self.screen.blit(self.small_font.render(line, True, self.WHITE), (15, y))
            y += 24

        recorder = self.session.recorder
        if recorder.is_recording:
            self._draw_path(recorder.current_points(), self.GOLD)
        elif self.session.last_path:
            self._draw_path(self.session.last_path, self._path_color())

        if self.status:
            height = self.screen.get_height()
            self.screen.blit(self.font.render(self.status, True, self.GOLD), (15, height - 55))

        pygame.display.flip()


def main() -> None:
    """Entry point for the trainer."""
    app = TrainerApp()
    try:
        app.run()
    except KeyboardInterrupt:
        pass
    finally:
        app.session.match_logger.close()
        pygame.quit()
