import sys

import pytest

import main
from app.errors import ChannelClosedError, TerminalError
from app.state import Screen
from core.events import Key, KeyInput, Tick


class RecordingRenderer:
    def __init__(self):
        self.views = []

    def draw(self, view):
        self.views.append(view)


def keys(text):
    return [KeyInput(Key.of(ch)) for ch in text]


def test_quit_from_home_returns_zero(controller):
    renderer = RecordingRenderer()
    assert main.run_session(controller, keys("q"), renderer) == 0
    assert [v.screen for v in renderer.views] == [Screen.HOME]


def test_session_loop_plays_a_race(controller, clock):
    renderer = RecordingRenderer()

    def events():
        yield KeyInput(Key.of("s"))
        clock.advance(3)
        yield Tick()
        yield from keys(controller.state.words[0])
        yield Tick()
        clock.advance(60)
        yield Tick()
        yield KeyInput(Key.of("q"))

    assert main.run_session(controller, events(), renderer) == 0
    screens = [v.screen for v in renderer.views]
    assert screens[0] is Screen.HOME
    assert Screen.GAME in screens
    assert screens[-1] is Screen.GAME_OVER
    assert renderer.views[-1].top.text.endswith("Score: 1")


def test_exhausted_channel_propagates(controller):
    def events():
        yield Tick()
        raise ChannelClosedError("producer died")

    with pytest.raises(ChannelClosedError):
        main.run_session(controller, events(), RecordingRenderer())


@pytest.fixture()
def isolated_logging(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    return tmp_path


def test_main_returns_one_when_terminal_fails(isolated_logging, monkeypatch, capsys):
    class BrokenTerminal:
        def __init__(self, *args, **kwargs):
            pass

        def __enter__(self):
            raise TerminalError("cannot enable raw mode: not a tty")

        def __exit__(self, *exc):
            return False

    monkeypatch.setattr(main, "RawTerminal", BrokenTerminal)
    assert main.main() == 1
    assert "not a tty" in capsys.readouterr().err


def test_main_returns_zero_on_quit(isolated_logging, monkeypatch):
    entered = []

    class FakeTerminal:
        def __init__(self, *args, **kwargs):
            pass

        def __enter__(self):
            entered.append("raw")
            return self

        def __exit__(self, *exc):
            entered.append("restored")
            return False

    class FakeSource:
        def __init__(self, *args, **kwargs):
            pass

        def __enter__(self):
            return iter(keys("xq"))

        def __exit__(self, *exc):
            entered.append("closed")
            return False

    class NullRenderer(RecordingRenderer):
        def __init__(self, console=None):
            super().__init__()

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

    monkeypatch.setattr(main, "RawTerminal", FakeTerminal)
    monkeypatch.setattr(main, "EventSource", FakeSource)
    monkeypatch.setattr(main, "Renderer", NullRenderer)
    assert main.main() == 0
    assert entered == ["raw", "closed", "restored"]
