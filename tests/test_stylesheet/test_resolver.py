"""Tests for effective-style resolution."""

from framesmith.model.style import RuleTable
from framesmith.stylesheet.resolver import matched_declarations, resolve_style


def _rules() -> RuleTable:
    return RuleTable(
        {
            "p": {"color": "tag", "width": "10px"},
            ".c1": {"color": "c1", "height": "5px"},
            ".c2": {"color": "c2"},
            "#main": {"color": "id"},
        }
    )


class TestPrecedence:
    def test_id_beats_class_and_tag(self):
        style = resolve_style("p", {"class": "c1 c2", "id": "main"}, _rules(), {})
        assert style["color"] == "id"

    def test_later_class_wins_without_id(self):
        style = resolve_style("p", {"class": "c1 c2"}, _rules(), {})
        assert style["color"] == "c2"

    def test_class_order_follows_attribute(self):
        style = resolve_style("p", {"class": "c2 c1"}, _rules(), {})
        assert style["color"] == "c1"

    def test_class_beats_tag(self):
        style = resolve_style("p", {"class": "c1"}, _rules(), {})
        assert style["color"] == "c1"

    def test_tag_only(self):
        style = resolve_style("p", {}, _rules(), {})
        assert style == {"color": "tag", "width": "10px"}

    def test_merges_properties_from_every_source(self):
        own = matched_declarations("p", {"class": "c1", "id": "main"}, _rules())
        assert own == {"color": "id", "width": "10px", "height": "5px"}

    def test_unknown_class_and_id_ignored(self):
        style = resolve_style("span", {"class": "nope", "id": "missing"}, _rules(), {})
        assert style == {}

    def test_extra_whitespace_in_class_list(self):
        style = resolve_style("span", {"class": "  c1   c2 "}, _rules(), {})
        assert style["color"] == "c2"


class TestInheritance:
    def test_inheritable_flows_down(self):
        parent = {"color": "#ff0000", "font-family": "Roboto"}
        style = resolve_style("span", {}, RuleTable(), parent)
        assert style == parent

    def test_non_inheritable_never_flows_down(self):
        parent = {"background-color": "#ff0000", "width": "100px", "display": "flex", "color": "red"}
        style = resolve_style("span", {}, RuleTable(), parent)
        assert style == {"color": "red"}

    def test_own_rule_overrides_inherited(self):
        rules = RuleTable({"span": {"color": "blue"}})
        style = resolve_style("span", {}, rules, {"color": "red"})
        assert style["color"] == "blue"

    def test_non_inheritable_set_directly(self):
        rules = RuleTable({"span": {"background-color": "blue"}})
        style = resolve_style("span", {}, rules, {"background-color": "red"})
        assert style["background-color"] == "blue"

    def test_inputs_not_mutated(self):
        rules = _rules()
        parent = {"color": "red", "gap": "4px"}
        resolve_style("p", {"class": "c1", "id": "main"}, rules, parent)
        assert parent == {"color": "red", "gap": "4px"}
        assert rules.get("p") == {"color": "tag", "width": "10px"}

    def test_deterministic(self):
        args = ("p", {"class": "c1 c2", "id": "main"}, _rules(), {"font-size": "12px"})
        assert resolve_style(*args) == resolve_style(*args)
