import pygame
import pytest

from flappy_core.input import InputTranslator


class FakeTarget:
    def __init__(self):
        self.calls = []

    def flap(self):
        self.calls.append("flap")

    def toggle_pause(self):
        self.calls.append("pause")

    def to_menu(self):
        self.calls.append("menu")


@pytest.fixture
def target():
    return FakeTarget()


@pytest.fixture
def translator(target):
    return InputTranslator(target, cooldown_ms=100)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_keys_map_to_actions(translator, target):
    assert translator.handle(key(pygame.K_SPACE), 0) == "flap"
    assert translator.handle(key(pygame.K_p), 0) == "pause"
    assert translator.handle(key(pygame.K_m), 0) == "menu"
    assert translator.handle(key(pygame.K_a), 0) is None
    assert target.calls == ["flap", "pause", "menu"]


def test_keyboard_flaps_are_not_throttled(translator, target):
    for _ in range(3):
        translator.handle(key(pygame.K_SPACE), 10)
    assert target.calls == ["flap"] * 3


def test_touch_cooldown_drops_fast_repeats(translator, target):
    finger = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5)
    assert translator.handle(finger, 0) == "flap"
    assert translator.handle(finger, 50) is None
    assert translator.handle(finger, 150) == "flap"
    assert target.calls == ["flap", "flap"]


def test_mouse_copy_of_touch_is_ignored(translator, target):
    mirrored = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True)
    assert translator.handle(mirrored, 0) is None
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=False)
    assert translator.handle(click, 0) == "flap"


def test_quit_and_escape(translator, target):
    assert translator.handle(pygame.event.Event(pygame.QUIT), 0) == "quit"
    assert translator.handle(key(pygame.K_ESCAPE), 0) == "quit"
    assert target.calls == []


@pytest.mark.parametrize("button", [4, 5])
def test_mouse_wheel_does_not_flap(translator, target, button):
    wheel = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(10, 10), touch=False)
    assert translator.handle(wheel, 0) is None
    assert target.calls == []


def test_right_click_flaps(translator, target):
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10), touch=False)
    assert translator.handle(click, 0) == "flap"
