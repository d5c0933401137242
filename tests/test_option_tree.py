"""
Tests for the option arena
"""

import pytest

from core.errors import InvalidOptionTreeError
from core.services.models import Option
from core.services.option_tree import OptionTree


def _row(id, name, parent_id=None, position=0, price=None):
    return {"id": id, "name": name, "price": price, "parent_id": parent_id, "position": position}


class TestFromRows:
    """Tests for building the arena from flat rows."""

    def test_links_children_in_position_order(self):
        tree = OptionTree.from_rows([
            _row(3, "빨강", parent_id=1, position=1),
            _row(1, "색상"),
            _row(2, "검정", parent_id=1, position=0),
        ])

        assert tree.roots == [1]
        assert [c.name for c in tree.children(1)] == ["검정", "빨강"]
        assert len(tree) == 3

    def test_to_options_nests_children(self):
        tree = OptionTree.from_rows([
            _row(1, "색상"),
            _row(2, "검정", parent_id=1),
            _row(3, "무광", parent_id=2, price=500),
        ])

        options = tree.to_options()

        assert len(options) == 1
        assert options[0].children[0].name == "검정"
        assert options[0].children[0].children[0].price == 500

    def test_empty_rows(self):
        tree = OptionTree.from_rows([])

        assert len(tree) == 0
        assert tree.to_options() == []

    def test_missing_parent_rejected(self):
        with pytest.raises(InvalidOptionTreeError):
            OptionTree.from_rows([_row(1, "검정", parent_id=99)])

    def test_duplicate_id_rejected(self):
        with pytest.raises(InvalidOptionTreeError):
            OptionTree.from_rows([_row(1, "색상"), _row(1, "사이즈")])

    def test_cycle_rejected(self):
        with pytest.raises(InvalidOptionTreeError):
            OptionTree.from_rows([
                _row(1, "루트"),
                _row(2, "a", parent_id=3),
                _row(3, "b", parent_id=2),
            ])

    def test_self_parent_rejected(self):
        with pytest.raises(InvalidOptionTreeError):
            OptionTree.from_rows([_row(1, "a", parent_id=1)])


class TestFromOptions:
    """Tests for flattening nested input."""

    def test_rows_list_parents_before_children(self):
        options = [
            Option(name="색상", children=[Option(name="검정"), Option(name="빨강", price=1000)]),
            Option(name="각인", price=5000),
        ]

        rows = OptionTree.from_options(options).to_rows()

        assert [r["name"] for r in rows] == ["색상", "검정", "빨강", "각인"]
        refs = {r["name"]: r["ref"] for r in rows}
        assert rows[0]["parent_ref"] is None
        assert rows[1]["parent_ref"] == refs["색상"]
        assert rows[2]["parent_ref"] == refs["색상"]
        assert rows[2]["position"] == 1
        assert rows[3]["parent_ref"] is None
        assert rows[3]["position"] == 1

    def test_ignores_ids_on_input(self):
        tree = OptionTree.from_options([Option(id=77, name="색상")])

        assert tree.roots == [1]
        assert tree.to_options()[0].id == 1
