"""Tests for selector matching."""

from zstack.document import DocumentElementRecord, parse_document
from zstack.stylesheet import extract_rules
from zstack.topology import derive_selector, match_elements


class _Elements:
    """Minimal element source for matcher tests."""

    def __init__(self, *elements: DocumentElementRecord) -> None:
        self._elements = elements

    def iter_elements(self):
        return iter(self._elements)


class TestTotalCoverage:
    def test_one_entry_per_element(self):
        doc = parse_document("<div><p class='a'></p><p></p><span id='s'></span></div>")
        rules = extract_rules(".a { z-index: 1; }")
        entries = match_elements(doc, rules)
        assert len(entries) == 4

    def test_no_rules(self):
        doc = parse_document("<div><p></p></div>")
        entries = match_elements(doc, [])
        assert len(entries) == 2
        assert all(not e.matched for e in entries)

    def test_unmatched_gets_zero_rule(self):
        entries = match_elements(_Elements(DocumentElementRecord(tag="span")), [])
        (entry,) = entries
        assert entry.rule.selector == "span"
        assert entry.rule.z_index == "0"
        assert entry.rule.is_synthesized


class TestSelectorPriority:
    def test_id_over_class(self):
        el = DocumentElementRecord(tag="div", id="a", class_list=("b",))
        rules = extract_rules(".b { z-index: 2; } #a { z-index: 7; }")
        (entry,) = match_elements(_Elements(el), rules)
        assert derive_selector(el) == "#a"
        assert entry.rule.z_index == "7"

    def test_id_without_rule_does_not_fall_back_to_class(self):
        el = DocumentElementRecord(tag="div", id="a", class_list=("b",))
        rules = extract_rules(".b { z-index: 2; }")
        (entry,) = match_elements(_Elements(el), rules)
        assert not entry.matched
        assert entry.rule.selector == "#a"

    def test_compound_class_selector(self):
        el = DocumentElementRecord(tag="nav", class_list=("menu", "open"))
        rules = extract_rules(".menu { z-index: 1; } .menu.open { z-index: 3; }")
        (entry,) = match_elements(_Elements(el), rules)
        assert entry.rule.z_index == "3"

    def test_tag_selector(self):
        el = DocumentElementRecord(tag="header")
        rules = extract_rules("header { z-index: 4; }")
        (entry,) = match_elements(_Elements(el), rules)
        assert entry.matched
        assert entry.rule is rules[0]


class TestFirstMatchWins:
    def test_duplicate_selectors(self):
        el = DocumentElementRecord(tag="div", class_list=("x",))
        rules = extract_rules(".x { z-index: 1; } .x { z-index: 2; }")
        (entry,) = match_elements(_Elements(el), rules)
        assert entry.rule is rules[0]

    def test_document_order(self):
        doc = parse_document("<i class='a'></i><b class='b'></b>")
        rules = extract_rules(".b { z-index: 2; } .a { z-index: 1; }")
        entries = match_elements(doc, rules)
        assert [e.element.tag for e in entries] == ["i", "b"]
        assert [e.rule.z_index for e in entries] == ["1", "2"]
