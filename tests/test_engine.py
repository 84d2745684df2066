import pygame
import pytest

from florakit.apps import ApplicationState, create_window, destroy_window
from florakit.constants import ENGINE_FATAL
from florakit.engine import application_loop, main, parse_args
from florakit.screens import Screen


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.quit()
    yield
    pygame.display.quit()


def test_parse_args_defaults_with_too_few(capsys):
    assert parse_args(["1024", "768"]) == (800, 600, "Flora Engine")
    out = capsys.readouterr().out
    assert "Usage" in out


def test_parse_args_reads_values():
    assert parse_args(["1024", "768", "My Window"]) == (1024, 768, "My Window")


def test_parse_args_reads_leading_digits_only():
    assert parse_args(["12abc", "nope", "t"]) == (12, 0, "t")


def test_parse_args_keeps_sign():
    assert parse_args([" -5", "+7", "t"]) == (-5, 7, "t")


def test_application_loop_not_running_returns_at_once():
    state = ApplicationState()
    state.current_screen = Screen(on_screen_create=None)
    application_loop(state)
    assert state.last_frame_time == 0


def test_application_loop_stops_on_quit(headless):
    state = ApplicationState(window_width=64, window_height=48)
    create_window(state, "loop")
    state.current_screen = Screen(on_screen_create=None)
    state.running = True
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    application_loop(state)
    assert state.running is False
    assert state.last_frame_time > 0
    assert state.delta_time >= 0
    destroy_window(state)


def test_main_returns_fatal_when_window_fails(monkeypatch):
    pygame.display.quit()
    monkeypatch.setenv("SDL_VIDEODRIVER", "no_such_driver")
    assert main(["64", "48", "x"]) == ENGINE_FATAL