"""
cli.py - interactive word search menu
Features:
- Loads a word file (path from argv, config, or prompt)
- Menu: search, ranked auto-complete, increment rank, get rank, exit
- Uses Rich for tables and formatting
- Load timings and errors go to the Log file
"""

import argparse
import logging
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from word_search.core.errors import ConfigError, DictionaryLoadError
from word_search.core.ranked_dictionary import RankedDictionary, UNKNOWN_RANK
from word_search.utils.config_manager import Config
from word_search.utils.logger_utils import Log

MENU = [
    ("1", "Search Word"),
    ("2", "Auto-complete with Ranking"),
    ("3", "Increment Word Rank"),
    ("4", "Get Word Rank"),
    ("5", "Exit"),
]
EXIT_CHOICE = "5"


class CLI:
    """Menu-driven front end over a RankedDictionary."""

    def __init__(
        self,
        dictionary: Optional[RankedDictionary] = None,
        config: Optional[Config] = None,
        console: Optional[Console] = None,
        stream=None,
        log: Optional[Log] = None,
        limit: Optional[int] = None,
    ):
        """
        stream: file-like object to read answers from (stdin when None).
        limit: max suggestions shown; falls back to config max_suggestions, 0 means all.
        """
        self.dictionary = dictionary if dictionary is not None else RankedDictionary()
        self.cfg = config if config is not None else Config()
        self.console = console or Console()
        self.stream = stream
        self.log = log or Log(self.cfg.get("log_path"), echo=False)
        if limit is None:
            limit = self.cfg.get("max_suggestions") or 0
        self.limit = limit if limit > 0 else None
        self.running = True
        self._handlers = {
            "1": self._search,
            "2": self._auto_complete,
            "3": self._increment,
            "4": self._rank,
        }

    # INPUT ---------------------------------------------------------------
    def _ask(self, label: str) -> str:
        """Read one answer. Raises EOFError once the input is exhausted."""
        raw = self.console.input(label, stream=self.stream)
        if self.stream is not None and raw == "":
            raise EOFError
        return raw.rstrip("\r\n")

    def ask_path(self) -> str:
        return self._ask("[cyan]Enter the path to the file containing words:[/cyan] ").strip()

    # LOADING ---------------------------------------------------------------
    def load(self, path: str) -> int:
        """
        Load a word file. Failures are reported, not raised: the menu keeps
        running with whatever was loaded before the error.
        """
        try:
            with self.log.time_block("load"):
                added = self.dictionary.load_file(path)
        except DictionaryLoadError as e:
            self.log.error(str(e))
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return 0
        self.log.info(f"loaded {added} words from {path}")
        self.console.print(f"[green]Loaded {added} words from {escape(path)}[/green]")
        return added

    # MAIN LOOP ---------------------------------------------------------------
    def run(self):
        """Show the menu until the user exits or input runs out."""
        self.console.rule("[bold magenta]Word Search[/bold magenta]")
        while self.running:
            try:
                self._show_menu()
                choice = self._ask("Enter your choice (1-5): ").strip()
                self.console.print()
                self._dispatch(choice)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

    def _dispatch(self, choice: str):
        if choice == EXIT_CHOICE:
            self._exit()
            return
        if not choice.isdigit():
            self.console.print("[yellow]Please enter a valid number between 1 and 5.[/yellow]")
            return
        handler = self._handlers.get(choice)
        if handler is None:
            self.console.print("[yellow]Invalid choice. Please enter a number between 1 and 5.[/yellow]")
            return
        handler()
        self.console.rule(style="dim")

    def _show_menu(self):
        table = Table(title="Main Menu", box=box.SIMPLE, show_header=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Action")
        for key, label in MENU:
            table.add_row(key, label)
        self.console.print(table)

    # ACTIONS ---------------------------------------------------------------
    def _search(self):
        word = self._ask("Enter word to search: ")
        if self.dictionary.search_word(word):
            self.console.print("[green]Word found![/green]")
        else:
            self.console.print("[red]Word not found.[/red]")

    def _auto_complete(self):
        prefix = self._ask("Enter prefix for auto-complete: ")
        if not self.dictionary.has_prefix(prefix):
            self.console.print("[red]No suggestions found.[/red]")
            return
        suggestions = self.dictionary.auto_complete(prefix, limit=self.limit)
        self._display_suggestions(suggestions)

    def _increment(self):
        word = self._ask("Enter word to increment rank: ")
        if word not in self.dictionary:
            self.console.print("[red]Word not found.[/red]")
            return
        self.dictionary.increment_rank(word)
        self.console.print(f"[green]Rank incremented for '{escape(word)}'[/green]")

    def _rank(self):
        word = self._ask("Enter word to get rank: ")
        rank = self.dictionary.get_rank(word)
        if rank == UNKNOWN_RANK:
            self.console.print("[red]Word not found.[/red]")
        else:
            self.console.print(f"Rank of '{escape(word)}': [bold]{rank}[/bold]")

    # DISPLAY -------------------------------------------------------------------------------
    def _display_suggestions(self, suggestions: List[str]):
        show_ranks = bool(self.cfg.get("show_ranks", True))
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        if show_ranks:
            table.add_column("Rank", justify="right", style="magenta")

        for i, word in enumerate(suggestions, 1):
            row = [str(i), Text(word)]
            if show_ranks:
                row.append(str(self.dictionary.get_rank(word)))
            table.add_row(*row)
        self.console.print(table)

    def _exit(self):
        self.console.print("Exiting... Goodbye!")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="word-search",
        description="Word lookup and rank-ordered auto-complete over a word list.",
    )
    p.add_argument("path", nargs="?", help="file with one word per line")
    p.add_argument("--config", default="config.json", help="JSON config file")
    p.add_argument("--limit", type=int, default=None, help="max suggestions to show (0 = all)")
    p.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="change a config option and save it (repeatable)",
    )
    return p


def main(argv=None, console: Optional[Console] = None, stream=None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        cfg = Config(args.config)
        for item in args.set:
            key, sep, val = item.partition("=")
            if not sep:
                raise ConfigError(f"expected KEY=VALUE, got {item!r}")
            cfg.set(key.strip(), val.strip())
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 2

    level = getattr(logging, str(cfg.get("log_level", "WARNING")).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    cli = CLI(config=cfg, console=console, stream=stream, limit=args.limit)
    path = args.path or cfg.get("word_file")
    if not path:
        try:
            path = cli.ask_path()
        except (EOFError, KeyboardInterrupt):
            return 0
    if path:
        cli.load(path)
    cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
