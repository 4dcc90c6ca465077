# tui_app.py — Weighted Autocomplete TUI Application
# -------------------------------------------------------
# Text based terminal UI on top of a prefix index.
# Features:
#  - Live top-k suggestions re-queried on every keystroke
#  - Optional weight column (ctrl+w)
#  - Enter, or picking a suggestion, searches the web for that term
#  - Latency + match count readout
# The index itself is never touched; the app just calls matching(prefix)
# again whenever the input changes.
# -------------------------------------------------------

from __future__ import annotations

import time
import webbrowser
from typing import List, Optional
from urllib.parse import quote_plus

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, OptionList, Static

from weighted_autocomplete.core import PrefixIndexProtocol, Term
from weighted_autocomplete.utils.config_manager import Config
from weighted_autocomplete.utils.logger_utils import Log


def format_suggestion(term: Term, show_weights: bool = True) -> Text:
    """One suggestion row: weight (dim) then the term, no markup parsing of the term."""
    row = Text()
    if show_weights:
        row.append(f"{term.weight:>10}  ", style="dim")
    row.append(term.text)
    return row


def search_url(term: Term, base: str) -> str:
    return base + quote_plus(term.text)


class StatusLine(Static):
    """
    Bottom readout showing how long the last query took and how many terms matched.
    """
    def set_status(self, seconds: float, shown: int, total: int):
        ms = round(seconds * 1000, 2)
        self.update(f"[dim]Latency:[/dim] {ms}ms  [dim]Showing[/dim] {shown} of {total}")


# Main Application -----------------------------------------------------------------
class TUIAutocomplete(App):
    """
    The main Textual app.
    Architecture:
     - input change -> index.matching(prefix)
     - results -> reactive `suggestions`
     - watcher -> option list refresh
    """

    DEFAULT_CSS = """
    #query { margin: 1 1 0 1; }
    #suggestions { height: 1fr; margin: 0 1; }
    #bottom { height: 1; margin: 0 1; }
    """

    # keyboard shortcuts for user
    # priority: the focused Input binds ctrl+w to delete-word itself
    BINDINGS = [
        Binding("ctrl+w", "toggle_weights", "Toggle Weights", priority=True),
        Binding("escape", "clear", "Clear", priority=True),
    ]

    suggestions = reactive(list)  # most recent top-k matches
    show_weights = reactive(True)

    # swapped out in tests so nothing launches a browser
    open_url = staticmethod(webbrowser.open)

    def __init__(self, index: PrefixIndexProtocol, cfg: Optional[Config] = None):
        super().__init__()
        self.index = index
        self.cfg = cfg or Config(path=None)
        self.k = int(self.cfg.data["max_suggestions"])
        self.set_reactive(TUIAutocomplete.show_weights, bool(self.cfg.data["show_weights"]))

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Start typing…", id="query")
        yield OptionList(id="suggestions")
        with Horizontal(id="bottom"):
            yield StatusLine(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Autocomplete"
        self.sub_title = f"{len(self.index)} terms"
        self.query_one(Input).focus()

    # Handle typing: Input has changed so update predictions
    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the prefix query every time the user types."""
        self.refresh_suggestions(event.value)

    def refresh_suggestions(self, prefix: str) -> List[Term]:
        if not prefix:
            self.suggestions = []
            self.query_one(StatusLine).update("")
            return []
        start = time.perf_counter()
        matches = self.index.matching(prefix)
        elapsed = time.perf_counter() - start
        top = matches[: max(self.k, 0)]
        self.suggestions = top
        self.query_one(StatusLine).set_status(elapsed, len(top), len(matches))
        return top

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions: List[Term]) -> None:
        self._render_options()

    def watch_show_weights(self, show: bool) -> None:
        self._render_options()

    def _render_options(self) -> None:
        try:
            options = self.query_one(OptionList)
        except NoMatches:
            # not composed yet
            return
        options.clear_options()
        options.add_options([format_suggestion(t, self.show_weights) for t in self.suggestions])

    # Actions ----------------------------------------------------------------------
    def action_toggle_weights(self) -> None:
        self.show_weights = not self.show_weights

    def action_clear(self) -> None:
        self.query_one(Input).value = ""

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter = search for the top suggestion."""
        if self.suggestions:
            self.select(self.suggestions[0])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        idx = event.option_index
        if 0 <= idx < len(self.suggestions):
            self.select(self.suggestions[idx])

    def select(self, term: Term) -> str:
        """Open a web search for the chosen term."""
        url = search_url(term, self.cfg.data["search_url"])
        Log.write(f"selected: {term.text}")
        self.open_url(url)
        return url
