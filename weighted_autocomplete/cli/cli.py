"""
cli.py - command line front end for the weighted autocompleter
Features:
- Streaming mode: pipe prefixes on stdin, get the top k matches back as weight<TAB>text
- Interactive mode: prompt loop with rich tables and slash commands
- Optional TUI (--tui) with live suggestions
- Query latency tracked in Metrics, dictionary load time logged through Log
"""

import argparse
import logging
import shlex
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from weighted_autocomplete.core import Autocomplete, InvalidArgument, PrefixIndexProtocol, Term
from weighted_autocomplete.utils.cache_utils import timed
from weighted_autocomplete.utils.config_manager import Config
from weighted_autocomplete.utils.logger_utils import Log
from weighted_autocomplete.utils.metrics_tracker import Metrics
from weighted_autocomplete.utils.term_loader import load_terms

logger = logging.getLogger(__name__)

HELP = (
    "cmds: <prefix> to search, /count <prefix>, /k <n>, /weights,\n"
    "      /config [key val], /stats, /help, /quit"
)


class CLI:
    """Prints ranked completions for prefixes read from a prompt or a stream."""

    def __init__(
        self,
        index: PrefixIndexProtocol,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        metrics: Optional[Metrics] = None,
    ):
        self.index = index
        self.cfg = cfg or Config(path=None)
        self.console = console or Console()
        self.metrics = metrics or Metrics()
        self.running = True
        self._matching = timed(index.matching)

    @property
    def k(self) -> int:
        return int(self.cfg.data["max_suggestions"])

    @property
    def show_weights(self) -> bool:
        return bool(self.cfg.data["show_weights"])

    # querying -----------------------------------------------------------------
    def top_matches(self, prefix: str) -> Tuple[List[Term], int]:
        """Top k matches for prefix plus the total number of matches."""
        matches, dt = self._matching(prefix)
        self.metrics.record("query", dt)
        logger.debug("query %r: %d matches in %.6fs", prefix, len(matches), dt)
        return matches[: max(self.k, 0)], len(matches)

    def stream(self, lines: Iterable[str], out: TextIO = None) -> None:
        """One prefix per input line, top k printed as weight<TAB>text."""
        out = out or sys.stdout
        for line in lines:
            prefix = line.rstrip("\r\n")
            top, _ = self.top_matches(prefix)
            for term in top:
                out.write(f"{term}\n")

    # interactive ---------------------------------------------------------------
    def run(self) -> None:
        """
        Main interactive loop:
        - plain input is a prefix to complete
        - /commands change settings or show stats
        """
        self.console.rule("[bold magenta]Weighted Autocomplete[/bold magenta]")
        self.console.print(f"[cyan]{len(self.index)} terms loaded.[/cyan] /help for commands\n")
        while self.running:
            try:
                line = Prompt.ask("[green]prefix[/green]", console=self.console, default="")
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle_line(line)

    def handle_line(self, line: str) -> None:
        if not line:
            return
        if line.startswith("/"):
            self._handle_command(line)
            return
        self._show_matches(line)

    def _show_matches(self, prefix: str) -> None:
        top, total = self.top_matches(prefix)
        if not top:
            self.console.print(f"[dim]no matches for[/dim] {escape(prefix)}")
            return

        self.console.print(f"[dim]{len(top)} of {total} matches[/dim]")
        table = Table(box=box.SIMPLE)
        table.add_column("#", justify="right", style="dim")
        if self.show_weights:
            table.add_column("weight", justify="right", style="cyan")
        table.add_column("term")
        for i, term in enumerate(top, 1):
            row = [str(i)]
            if self.show_weights:
                row.append(str(term.weight))
            row.append(Text(term.text))
            table.add_row(*row)
        self.console.print(table)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str) -> None:
        cmd, _, rest = line.partition(" ")
        cmd = cmd.lower()

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
            return

        if cmd == "/help":
            self.console.print(HELP)
            return

        if cmd == "/count":
            # keep the prefix verbatim, it may contain spaces
            n = self.index.count_matching(rest)
            self.console.print(f"{n} terms start with {escape(repr(rest))}")
            return

        if cmd == "/k":
            try:
                val = self.cfg.set("max_suggestions", rest.strip())
            except ValueError:
                self.console.print("[red]usage: /k <n>[/red]")
                return
            self.console.print(f"k = {val}")
            return

        if cmd == "/weights":
            val = self.cfg.set("show_weights", not self.show_weights)
            self.console.print(f"show weights: {val}")
            return

        if cmd == "/stats":
            self.metrics.show(self.console)
            return

        if cmd == "/config":
            args = shlex.split(rest)
            if not args:
                self.cfg.show(self.console)
            elif len(args) == 2:
                try:
                    self.cfg.set(args[0], args[1])
                except (KeyError, ValueError) as e:
                    self.console.print(f"[red]{e}[/red]")
            else:
                self.console.print("usage: /config [key val]")
            return

        self.console.print(f"[red]unknown cmd[/red] {cmd}")


# entry point ---------------------------------------------------------------------
def non_negative_int(raw: str) -> int:
    """argparse type for -k."""
    try:
        val = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}") from None
    if val < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {val}")
    return val


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weighted-autocomplete",
        description="Ranked prefix search over a weighted dictionary.",
    )
    parser.add_argument("dictionary", help="file of <weight>\\t<text> records")
    parser.add_argument("-k", type=non_negative_int, default=None, help="number of suggestions to show")
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument("--metrics", default=None, help="JSON file to accumulate query latency in")
    parser.add_argument("--no-weights", action="store_true", help="hide weights")
    parser.add_argument("--tui", action="store_true", help="launch the text UI")
    parser.add_argument("-v", "--verbose", action="store_true", help="echo log lines to the console")
    return parser


def main(argv: Optional[List[str]] = None, stdin: TextIO = None, stdout: TextIO = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    Log.echo = args.verbose
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        with Log.time_block(f"load {args.dictionary}"):
            terms = load_terms(args.dictionary)
        index = Autocomplete.build(terms)
    except (OSError, InvalidArgument) as e:
        Log().error(f"cannot load dictionary {args.dictionary}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    Log.write(f"dictionary {args.dictionary}: {len(index)} terms")

    cfg = Config(path=args.config, autosave=False)
    if args.k is not None:
        cfg.data["max_suggestions"] = args.k
    if args.no_weights:
        cfg.data["show_weights"] = False

    if args.tui:
        from weighted_autocomplete.tui_app import TUIAutocomplete

        TUIAutocomplete(index, cfg).run()
        return 0

    cli = CLI(index, cfg, metrics=Metrics(path=args.metrics))
    try:
        if stdin.isatty():
            cli.run()
        else:
            cli.stream(stdin, stdout)
    finally:
        cli.metrics.save()
    return 0


if __name__ == "__main__":
    sys.exit(main())
