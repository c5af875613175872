"""
client.py: pygame front end. Drives the session from the frame clock and
draws whatever the session currently shows.
"""

from typing import Optional

import pygame

from .data_models import RoundState, RoundSummary
from .input import InputTranslator
from .session import GameSession, Phase


RENDER_FPS = 60
MAX_FRAME_MS = 100  # a stalled window must not teleport the round forward

SKY = (2, 138, 248)
PIPE_COLOR = (0, 150, 0)
BIRD_COLOR = (255, 215, 0)
WHITE = (255, 255, 255)
RED = (255, 69, 0)
GOLD = (255, 215, 0)


class FlappyClient:
    """Presentation collaborator: score display, pause overlay, game-over screen."""

    def __init__(self, session: GameSession):
        pygame.init()
        self.session = session
        session.hooks = self
        profile = session.profile
        self.screen = pygame.display.set_mode((int(profile.field_width), int(profile.field_height)))
        pygame.display.set_caption("Flappy")

        self.input = InputTranslator(session)
        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

        self.score_shown = 0
        self.paused = False
        self.summary: Optional[RoundSummary] = None
        self.save_warning = False

    # ---------- Presentation hooks ----------

    def on_score_changed(self, score: int):
        self.score_shown = score

    def on_pause_changed(self, paused: bool):
        self.paused = paused

    def on_round_over(self, summary: RoundSummary):
        self.summary = summary
        self.save_warning = not summary.best_saved
        self.paused = False

    # ---------- Main loop ----------

    def run(self):
        running = True
        while running:
            dt_ms = min(self.clock.tick(RENDER_FPS), MAX_FRAME_MS)

            for event in pygame.event.get():
                before = self.session.phase
                if self.input.handle(event, pygame.time.get_ticks()) == "quit":
                    running = False
                if before is not Phase.PLAYING and self.session.phase is Phase.PLAYING:
                    self.score_shown = 0
                    self.summary = None

            self.session.advance(dt_ms)
            self._draw()

        pygame.quit()

    # ---------- Drawing ----------

    def _blit_centered(self, text: str, font: pygame.font.Font, color, y: float):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (self.screen.get_width() // 2 - surf.get_width() // 2, int(y)))

    def _draw(self):
        self.screen.fill(SKY)
        height = self.screen.get_height()
        phase = self.session.phase

        if phase is Phase.MENU:
            self._blit_centered("FLAPPY", self.large_font, WHITE, height * 0.3)
            self._blit_centered(f"Best Score: {self.session.best_score}", self.font, GOLD, height * 0.45)
            self._blit_centered("Tap / Space to start", self.font, WHITE, height * 0.6)
        else:
            self._draw_round()
            if phase is Phase.GAME_OVER and self.summary is not None:
                self._draw_game_over(self.summary)

        pygame.display.flip()

    def _draw_round(self):
        game = self.session.round
        for pair in game.pairs:
            for rect in pair.rects():
                pygame.draw.rect(self.screen, PIPE_COLOR,
                                 pygame.Rect(rect.left, rect.top, rect.width, rect.height))

        player = game.player
        body = pygame.Surface((int(player.width), int(player.height)), pygame.SRCALPHA)
        body.fill(BIRD_COLOR)
        rotated = pygame.transform.rotate(body, -player.angle)
        self.screen.blit(rotated, rotated.get_rect(center=(int(player.x), int(player.y))))

        self._blit_centered(str(self.score_shown), self.large_font, WHITE, 20)

        height = self.screen.get_height()
        if game.state is RoundState.NOT_STARTED:
            self._blit_centered("Get ready: tap / Space to flap", self.font, WHITE, height * 0.65)
        elif self.paused:
            overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 120))
            self.screen.blit(overlay, (0, 0))
            self._blit_centered("PAUSED", self.large_font, WHITE, height * 0.4)
            self._blit_centered("Press P to resume", self.font, WHITE, height * 0.5)

    def _draw_game_over(self, summary: RoundSummary):
        height = self.screen.get_height()
        self._blit_centered("GAME OVER", self.large_font, RED, height * 0.25)
        self._blit_centered(f"Score: {summary.score}", self.font, GOLD, height * 0.4)
        self._blit_centered(f"Best: {summary.best_score}", self.font, WHITE, height * 0.47)
        if summary.new_record:
            self._blit_centered("NEW RECORD!", self.font, GOLD, height * 0.54)
        if self.save_warning:
            self._blit_centered("(best score not saved)", self.font, WHITE, height * 0.61)
        self._blit_centered("Tap / Space to play again, M for menu", self.font, WHITE, height * 0.72)
