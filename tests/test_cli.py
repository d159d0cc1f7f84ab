"""Smoke tests for the browse and save_block command-line tools."""

import io
import json

import pytest
from rich.console import Console

from capsules.block import CapsuleBlock
from capsules.browse import browse, capsule_table, main
from capsules.client import CapsuleClient
from capsules.save_block import save_block
from capsules.schema import Capsule
from capsules.state import BlockState, ListState


@pytest.fixture
def block(session_factory, raw_capsules):
    return CapsuleBlock(client=CapsuleClient(base_url="http://wp.test", session=session_factory(raw_capsules)))


class TestBrowse:
    def test_browse_page_and_filter(self, block):
        browse(2, "retired", block=block)
        assert block.state.listing.current_page == 2
        assert [c.capsule_serial for c in block.state.listing.view] == ["C101"]

    def test_table_rows(self, block):
        block.mount()
        table = capsule_table(block.state)
        assert table.row_count == 3
        assert len(table.columns) == 7

    def test_bracketed_values_print_literally(self):
        capsule = Capsule(capsule_id="dragon1", capsule_serial="C[1]", status="[bold]x", type="Dragon [/red] 1.0")
        state = BlockState(listing=ListState(full=[capsule], view=[capsule]))
        out = io.StringIO()

        Console(file=out, width=200).print(capsule_table(state))

        text = out.getvalue()
        assert "Dragon [/red] 1.0" in text
        assert "[bold]x" in text
        assert "C[1]" in text

    def test_failed_fetch_raises(self, session_factory):
        block = CapsuleBlock(client=CapsuleClient(base_url="http://wp.test", session=session_factory(None)))
        with pytest.raises(RuntimeError):
            browse(1, block=block)

    @pytest.mark.parametrize("argv", [["x"], ["1", "q", "extra"]])
    def test_usage_errors(self, argv):
        with pytest.raises(SystemExit):
            main(argv)


class TestSaveBlock:
    def test_writes_markup_and_attributes(self, block, tmp_path):
        out = save_block(1, tmp_path / "capsules.html", block=block)

        markup = out.read_text(encoding="utf-8")
        assert "<table" in markup
        assert "<input" not in markup

        attrs = json.loads((tmp_path / "capsules.json").read_text(encoding="utf-8"))
        assert attrs["totalPages"] == 3
        assert len(attrs["allcapsules"]) == 3


class TestLogging:
    def test_setup_logging_creates_log_dir(self, tmp_path):
        from capsules.utils import setup_logging

        path = setup_logging("browse", log_dir=tmp_path / "logs")
        assert path == tmp_path / "logs" / "browse.log"
        assert path.parent.is_dir()
