# ui/renderer.py
from __future__ import annotations
from typing import Optional

from rich import box
from rich.console import Console, RenderableType
from rich.layout import Layout
from rich.live import Live
from rich.padding import Padding
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.style import Style
from rich.text import Text

from app.config import THEME, Theme
from ui.view import (
    TITLE_LINE, Banner, Gauge, InputEcho, MenuTabs, ViewModel, Welcome, WordLines,
)

MARGIN = 2


class Renderer:
    """Draws view models on a full-screen rich Live display."""

    def __init__(self, console: Optional[Console] = None, theme: Theme = THEME):
        self.console = console or Console()
        self.theme = theme
        self._live: Optional[Live] = None

    # ---------------- lifecycle ----------------
    def __enter__(self) -> "Renderer":
        self._live = Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        self._live.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._live is not None:
            self._live.stop()
            self._live = None
        return False

    def draw(self, view: ViewModel):
        renderable = self.build(view)
        if self._live is None:
            self.console.print(renderable)
        else:
            self._live.update(renderable, refresh=True)

    # ---------------- layout ----------------
    def build(self, view: ViewModel) -> RenderableType:
        body = Layout(name="body")
        body.split_column(
            Layout(self._top(view.top), name="top", size=3),
            Layout(self._middle(view.middle), name="middle", ratio=1, minimum_size=2),
            Layout(self._bottom(view.bottom), name="bottom", size=3),
        )
        root = Layout(name="root")
        root.split_column(
            Layout(Text(""), name="margin_top", size=MARGIN),
            Layout(Padding(body, (0, MARGIN)), name="frame", ratio=1),
            Layout(Text(""), name="margin_bottom", size=MARGIN),
        )
        return root

    def _top(self, pane) -> RenderableType:
        if isinstance(pane, MenuTabs):
            return self._tabs(pane)
        if isinstance(pane, InputEcho):
            return Panel(Text(pane.text), title=pane.title, title_align="left", box=box.SQUARE)
        if isinstance(pane, Banner):
            return Panel(Text(pane.text), box=box.SQUARE)
        return Text("")

    def _tabs(self, tabs: MenuTabs) -> Panel:
        accent = Style(color=self.theme.accent, underline=True)
        plain = Style(color=self.theme.primary)
        strip = Text(" ")
        for i, title in enumerate(tabs.titles):
            if i:
                strip.append(" | ", style=plain)
            strip.append(title[:1], style=accent)
            strip.append(title[1:], style=plain)
        return Panel(strip, title=tabs.title, title_align="left", box=box.SQUARE)

    def _middle(self, pane) -> RenderableType:
        if isinstance(pane, Welcome):
            text = Text(justify="center")
            for i, line in enumerate(pane.lines):
                if i:
                    text.append("\n")
                style = Style(color=self.theme.title) if line == TITLE_LINE else None
                text.append(line, style=style)
            return Panel(
                text,
                title=pane.title,
                title_align="left",
                box=box.SQUARE,
                style=Style(color=self.theme.primary),
            )
        if isinstance(pane, WordLines):
            return Text("\n".join(pane.lines), no_wrap=True, overflow="crop")
        return Text("")

    def _bottom(self, gauge: Optional[Gauge]) -> RenderableType:
        if gauge is None:
            return Text("")
        bar = ProgressBar(
            total=100,
            completed=gauge.percent,
            style=Style(color=self.theme.gauge_background),
            complete_style=Style(color=self.theme.gauge),
            finished_style=Style(color=self.theme.gauge),
        )
        return Panel(bar, title=gauge.title, title_align="left", box=box.SQUARE)
