"""End-to-end tests for the extraction pipeline."""

import shutil
from pathlib import Path

import pytest

from zstack.config import ZStackConfig
from zstack.errors import ParseError
from zstack.pipeline import run, run_file
from zstack.topology import RulesOnly, RulesWithGeometry

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def sheet(tmp_path: Path) -> Path:
    shutil.copy(FIXTURES / "stacking.css", tmp_path / "stacking.css")
    shutil.copy(FIXTURES / "stacking.html", tmp_path / "stacking.html")
    return tmp_path / "stacking.css"


class TestRun:
    def test_rules_only(self):
        model = run(".a { z-index: 1; }")
        assert isinstance(model, RulesOnly)

    def test_with_markup(self):
        model = run(".a { z-index: 1; }", "<p class='a'></p><p></p>")
        assert isinstance(model, RulesWithGeometry)
        assert [e.geometry.z_index for e in model.entries] == [1, 0]

    def test_correlation_disabled(self):
        config = ZStackConfig(correlate_document=False)
        model = run(".a { z-index: 1; }", "<p class='a'></p>", config)
        assert isinstance(model, RulesOnly)

    def test_css_parse_error_aborts(self):
        with pytest.raises(ParseError):
            run(".a { z-index: 1;", "<p></p>")

    def test_document_parse_error_aborts(self):
        with pytest.raises(ParseError):
            run(".a { z-index: 1; }", b"\xff<p>")


class TestRunFile:
    def test_companion_found(self, sheet: Path):
        model = run_file(sheet)
        assert isinstance(model, RulesWithGeometry)
        assert len(model.rules) == 5
        assert len(model.entries) == 6
        by_tag = {e.entry.element.matched_selector: e for e in model.entries}
        modal = by_tag["#modal"]
        assert modal.entry.matched
        assert modal.geometry.effective_width == 430
        assert modal.geometry.effective_height == 320
        assert modal.geometry.elevation == pytest.approx(200.01)
        assert not by_tag["span"].entry.matched

    def test_missing_companion_degrades(self, tmp_path: Path, caplog):
        css = tmp_path / "orphan.css"
        shutil.copy(FIXTURES / "orphan.css", css)
        with caplog.at_level("WARNING", logger="zstack.pipeline"):
            model = run_file(css)
        assert isinstance(model, RulesOnly)
        assert model.ranked()[0].z_index == "3"
        assert "No companion document" in caplog.text

    def test_explicit_html_path(self, sheet: Path, tmp_path: Path):
        other = tmp_path / "other.html"
        other.write_text("<nav class='menu open'></nav>")
        model = run_file(sheet, html_path=other)
        assert isinstance(model, RulesWithGeometry)
        (entry,) = model.entries
        assert entry.geometry.z_index == 50
        assert entry.geometry.effective_width == 8

    def test_custom_suffix(self, sheet: Path):
        sheet.with_suffix(".html").rename(sheet.with_suffix(".htm"))
        model = run_file(sheet, ZStackConfig(companion_suffix=".htm"))
        assert isinstance(model, RulesWithGeometry)

    def test_bad_companion_raises(self, sheet: Path):
        sheet.with_suffix(".html").write_bytes(b"<div>\xff</div>")
        with pytest.raises(ParseError):
            run_file(sheet)

    def test_undecodable_sheet_raises(self, tmp_path: Path):
        css = tmp_path / "latin.css"
        css.write_bytes(b".a { content: \"\xff\"; z-index: 1; }")
        with pytest.raises(ParseError, match="not valid utf-8"):
            run_file(css)

    def test_independent_runs(self, sheet: Path):
        first = run_file(sheet)
        second = run_file(sheet)
        assert first is not second
        assert first.rules[0] is not second.rules[0]
