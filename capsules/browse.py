"""
browse.py
---------
Terminal view of the capsules block: loads one page through the proxy,
applies an optional filter and prints the table plus the page bar.

usage: python -m capsules.browse [page] [query]
"""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from capsules.block import CapsuleBlock
from capsules.render import COLUMNS, status_chip_interactive
from capsules.state import BlockState
from capsules.utils import setup_logging

console = Console()

CHIP_STYLE = {"active": "green", "inactive": "red"}


def capsule_table(state: BlockState) -> Table:
    table = Table(title=f"TOTAL CAPSULES: {len(state.listing.view)}")
    for col in COLUMNS:
        table.add_column(col)
    for c in state.listing.view:
        chip = status_chip_interactive(c.status)
        table.add_row(
            escape(c.capsule_serial),
            escape(c.capsule_id),
            escape(c.type or ""),
            escape(c.original_launch or ""),
            str(len(c.missions)),
            str(c.landings),
            Text(c.status, style=CHIP_STYLE[chip]),
        )
    return table


def page_bar(block: CapsuleBlock) -> str:
    return " ".join(
        f"[reverse]{b.number}[/reverse]" if b.active else str(b.number)
        for b in block.pagination.page_buttons()
    )


def browse(page: int = 1, query: str = "", block: Optional[CapsuleBlock] = None) -> CapsuleBlock:
    block = block or CapsuleBlock()
    console.print(f"Fetching page [cyan]{page}[/cyan] ...")
    result = block.go_to_page(page)
    if not result.ok:
        raise RuntimeError(block.state.listing.error)
    if result.rejected:
        console.print(f"[yellow]Skipped {result.rejected} malformed record(s)[/yellow]")

    if query:
        block.filter(query)
    if not block.state.listing.view:
        console.print("[yellow]No capsules to show.[/yellow]")
    else:
        console.print(capsule_table(block.state))
    console.print(page_bar(block))
    return block


def main(argv: List[str]) -> None:
    if len(argv) > 2:
        sys.exit("usage: python -m capsules.browse [page] [query]")
    try:
        page = int(argv[0]) if argv else 1
    except ValueError:
        sys.exit("usage: python -m capsules.browse [page] [query]")
    query = argv[1] if len(argv) > 1 else ""
    browse(page, query)


if __name__ == "__main__":
    setup_logging("browse")
    try:
        main(sys.argv[1:])
    except SystemExit:
        raise
    except Exception as e:
        logging.exception("Browse failed: %s", e)
        console.print(f"[red]Browse failed:[/red] {e}")
        raise SystemExit(1)
