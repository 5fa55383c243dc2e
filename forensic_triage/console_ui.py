#!/usr/bin/env python3
"""
Console UI for Forensic Triage
Plain menu + rich tables, monochrome friendly (works when piped)
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .directory_lister import DirectoryListing
from .hasher import HashResult
from .keyword_searcher import SearchResult
from .metadata_inspector import FileMetadataSnapshot
from .recovery_copier import RecoveryResult

MENU_TITLE = "===== DIGITAL FORENSICS & DATA RECOVERY TOOL ====="

MENU_ITEMS = [
    "Scan Directory (list files)",
    "View File Metadata",
    "Generate File Hash (MD5 / SHA-256)",
    "Recover Files (copy from a folder)",
    "Search Keyword Inside Files",
    "Generate Forensic Report from Log",
    "Clear Current Session Log",
    "Exit",
]


class TriageUI:
    """All operator-facing output goes through here"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    # --- generic messages ---------------------------------------------------

    def info(self, message: str):
        self.console.print(escape(message))

    def success(self, message: str):
        self.console.print(f"[green]{escape(message)}[/green]")

    def warn(self, message: str):
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str):
        self.console.print(f"[bold red]{escape(message)}[/bold red]")

    def read_line(self, prompt: str) -> str:
        return self.console.input(escape(prompt))

    # --- menu ---------------------------------------------------------------

    def render_menu(self):
        menu = Text()
        menu.append("\n" + MENU_TITLE + "\n", style="bold")
        for i, label in enumerate(MENU_ITEMS, start=1):
            menu.append(f"{i}. {label}\n")
        self.console.print(menu, end="")

    # --- operation results --------------------------------------------------

    def _numbered(self, items: List[str]):
        for i, item in enumerate(items, start=1):
            self.console.print(f"{i}. {escape(item)}")

    def show_listing(self, listing: DirectoryListing):
        self.console.print(f"\n[bold]Files in:[/bold] {escape(listing.path)}")
        self._numbered(listing.entries)

    def show_metadata(self, meta: FileMetadataSnapshot):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan bold", justify="right")
        table.add_column()

        table.add_row("Name:", escape(meta.name))
        table.add_row("Path:", escape(meta.path))
        table.add_row("Size:", f"{meta.size} bytes")
        table.add_row("Readable:", str(meta.readable))
        table.add_row("Writable:", str(meta.writable))
        table.add_row("Executable:", str(meta.executable))
        table.add_row("Hidden:", str(meta.hidden))
        table.add_row("Last Modified:", meta.modified_display)
        table.add_row("Extension:", escape(meta.extension_display))

        self.console.print(Panel(table, title="[bold]FILE METADATA[/bold]", expand=False))

    def show_hash(self, result: HashResult):
        self.console.print(f"{result.kind.label} hash: [bold]{result.digest}[/bold]")

    def show_recovery_progress(self, name: str, error: Optional[str]):
        if error is None:
            self.success(f"Recovered: {name}")
        else:
            self.error(f"Failed: {name} -> {error}")

    def show_recovery(self, result: RecoveryResult):
        self.console.print(
            f"Recovered [bold]{result.recovered_count}[/bold] file(s) into "
            f"{escape(result.destination)}"
            + (f" ([red]{len(result.failures)} failed[/red])" if result.failures else "")
        )

    def show_hits(self, result: SearchResult):
        if not result.hits:
            self.info("No matches found.")
            return
        self.console.print("\n[bold]Matches:[/bold]")
        self._numbered(result.hits)
