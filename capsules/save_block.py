"""
save_block.py
-------------
Renders the static (published) variant of the block for one page and
writes the markup plus the block attributes next to it.

usage: python -m capsules.save_block <page> <out.html>
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from capsules.block import CapsuleBlock
from capsules.utils import setup_logging

console = Console()


def save_block(page: int, out_path: Path, block: Optional[CapsuleBlock] = None) -> Path:
    block = block or CapsuleBlock()
    result = block.go_to_page(page)
    if not result.ok:
        raise RuntimeError(block.state.listing.error)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(block.save(), encoding="utf-8")

    attrs_path = out_path.with_suffix(".json")
    with open(attrs_path, "w", encoding="utf-8") as f:
        json.dump(block.to_attributes(), f, indent=2)

    logging.info("Saved page %d: %s (%d capsules)", page, out_path, len(block.state.listing.view))
    console.print(f"[green]Block saved:[/green]      {out_path.name} ({len(block.state.listing.view)} capsules)")
    console.print(f"[green]Attributes saved:[/green] {attrs_path.name}")
    return out_path


if __name__ == "__main__":
    if len(sys.argv) != 3 or not sys.argv[1].isdigit():
        sys.exit("usage: python -m capsules.save_block <page> <out.html>")
    setup_logging("save_block")
    try:
        save_block(int(sys.argv[1]), Path(sys.argv[2]))
    except Exception as e:
        logging.exception("Save failed: %s", e)
        console.print(f"[red]Save failed:[/red] {e}")
        raise SystemExit(1)
