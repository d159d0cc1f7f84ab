"""
render.py
---------
HTML for the two block variants. Both are pure functions of BlockState.

- interactive: filter input, View buttons, page bar, modal when open
- static: the table only, as saved into published content
"""
from __future__ import annotations

import html
from typing import List

from capsules.config import BLOCK_CLASS_NAME
from capsules.pagination import page_buttons
from capsules.schema import Capsule
from capsules.state import ERROR, BlockState

FILTER_PLACEHOLDER = "Filter by Status, Original Launch, Type"
LOADER_URL = "https://icaengineeringacademy.com/wp-content/uploads/2019/01/ajax-loading-gif-transparent-background-2.gif"
COLUMNS = ["Serial No", "Id", "Type", "Original Launch", "Missions", "Landings", "Status"]


def _e(value) -> str:
    return html.escape("" if value is None else str(value))


# The two variants disagree for any status outside {"active", "retired"}.
def status_chip_interactive(status: str) -> str:
    return "inactive" if status == "retired" else "active"


def status_chip_static(status: str) -> str:
    return "active" if status == "active" else "inactive"


def _header(columns: List[str]) -> str:
    cells = "".join(f"<th> {c}</th>" for c in columns)
    return f"<thead><tr>{cells}</tr></thead>"


def _row(capsule: Capsule, interactive: bool) -> str:
    chip = status_chip_interactive(capsule.status) if interactive else status_chip_static(capsule.status)
    cells = [
        capsule.capsule_serial,
        capsule.capsule_id,
        capsule.type,
        capsule.original_launch,
        len(capsule.missions),
        capsule.landings,
    ]
    out = "".join(f"<td>{_e(v)}</td>" for v in cells)
    out += f'<td><div class="chip {chip}">{_e(capsule.status)}</div></td>'
    if interactive:
        out += (
            f'<td><button class="view-btn" data-capsule-serial="{_e(capsule.capsule_serial)}">View</button></td>'
        )
    return f'<tr data-key="{_e(capsule.capsule_serial)}">{out}</tr>'


def _table(capsules: List[Capsule], interactive: bool) -> str:
    columns = COLUMNS + (["Action"] if interactive else [])
    body = "".join(_row(c, interactive) for c in capsules)
    return f'<table class="styled-table">{_header(columns)}<tbody>{body}</tbody></table>'


def _pagination(current_page: int) -> str:
    buttons = [
        f'<button class="{"active" if b.active else ""}" data-page="{b.number}">{b.number}</button>'
        for b in page_buttons(current_page)
    ]
    return f'<div class="pagination">{"".join(buttons)}</div>'


def _modal(capsule: Capsule) -> str:
    parts = [
        '<div class="modal-cont"><div class="modal-card"><div class="modal-dialog modal-sm">',
        '<div class="modal-content"><div class="modal-header">',
        f'<h4 class="modal-title">Capsule {_e(capsule.capsule_id)}</h4>',
        '<button type="button" class="close" aria-label="Close"><span aria-hidden="true">&times;</span></button>',
        "</div>",
        f'<div class="modal-body mt-0"><span>{_e(capsule.details)}</span><div class="mt-3">',
    ]
    for label, value in [
        ("Type", capsule.type),
        ("Landings", capsule.landings),
        ("Reuse Count", capsule.reuse_count),
        ("Date of Original Launch", capsule.original_launch),
    ]:
        parts.append(f'<div class="p-2 rounded checkbox-form"><label>{label}: {_e(value)}</label></div>')

    if capsule.missions:
        items = "".join(
            f'<li class="text-white"><span class="ml-2">{_e(m.name)}: {m.flight} Flights</span></li>'
            for m in capsule.missions
        )
        parts.append(
            f'<div class="p-2 rounded checkbox-form"><label>Missions: {len(capsule.missions)}'
            f"<ul>{items}</ul></label></div>"
        )

    parts.append('<button type="button" class="p-2 close-btn rounded checkbox-form">CLOSE</button>')
    parts.append("</div></div></div></div></div></div>")
    return "".join(parts)


def render_interactive(state: BlockState) -> str:
    listing, modal = state.listing, state.modal
    out = [
        f'<div class="{BLOCK_CLASS_NAME}">',
        f"<div>TOTAL CAPSULES: {len(listing.view)} </div>",
        f'<input class="search" placeholder="{FILTER_PLACEHOLDER}" type="text" value="{_e(listing.query)}"/>',
    ]
    # a failed page change keeps the previous rows, so the error shows above them
    if listing.status == ERROR:
        out.append(f'<div class="text-center error">{_e(listing.error)}</div>')
    if listing.view:
        out.append(f"<div>{_table(listing.view, interactive=True)}")
        out.append(_pagination(listing.current_page))
        if modal.is_open and modal.selected is not None:
            out.append(_modal(modal.selected))
        out.append("</div>")
    elif listing.status != ERROR:
        out.append(f'<div class="text-center"><img class="loader" src="{LOADER_URL}"/></div>')
    out.append("</div>")
    return "".join(out)


def render_static(state: BlockState) -> str:
    view = state.listing.view
    out = [
        f'<div class="{BLOCK_CLASS_NAME}">',
        f"<div>TOTAL CAPSULES: {len(view)} </div>",
    ]
    if view:
        out.append(f"<div>{_table(view, interactive=False)}</div>")
    out.append("</div>")
    return "".join(out)
