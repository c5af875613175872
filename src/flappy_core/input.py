"""
input.py: Turns pygame events into flap / pause / menu signals.
"""

from typing import Optional, Protocol

import pygame

from .constants import TOUCH_COOLDOWN

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
FLAP_BUTTONS = (1, 2, 3)  # 4 and 5 are the wheel
PAUSE_KEYS = (pygame.K_p,)
MENU_KEYS = (pygame.K_m,)


class InputTarget(Protocol):
    def flap(self) -> None:
        ...

    def toggle_pause(self) -> None:
        ...

    def to_menu(self) -> None:
        ...


class InputTranslator:
    """
    Keyboard input is applied as-is. Pointer and touch presses closer than
    cooldown_ms to the previous one are dropped.
    """

    def __init__(self, target: InputTarget, cooldown_ms: int = TOUCH_COOLDOWN):
        self.target = target
        self.cooldown_ms = cooldown_ms
        self._last_pointer_ms: Optional[int] = None

    def _pointer_ready(self, now_ms: int) -> bool:
        if self._last_pointer_ms is not None and now_ms - self._last_pointer_ms < self.cooldown_ms:
            return False
        self._last_pointer_ms = now_ms
        return True

    def handle(self, event: pygame.event.Event, now_ms: int) -> Optional[str]:
        """Applies one event to the target. Returns the action taken, if any."""
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "quit"
            if event.key in FLAP_KEYS:
                self.target.flap()
                return "flap"
            if event.key in PAUSE_KEYS:
                self.target.toggle_pause()
                return "pause"
            if event.key in MENU_KEYS:
                self.target.to_menu()
                return "menu"
            return None

        # pygame mirrors touches as mouse events flagged with .touch
        is_mouse = (event.type == pygame.MOUSEBUTTONDOWN
                    and event.button in FLAP_BUTTONS
                    and not getattr(event, "touch", False))
        if is_mouse or event.type == pygame.FINGERDOWN:
            if self._pointer_ready(now_ms):
                self.target.flap()
                return "flap"
        return None
