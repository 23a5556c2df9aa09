"""Unit tests for core.formatting – capitalization, tenths, table rows."""
from core.formatting import (
    COMPARE_SEPARATOR,
    bullet,
    capitalize,
    join_types,
    table_row,
    tenths,
)


class TestCapitalize:
    def test_first_letter_only(self):
        assert capitalize("pikachu") == "Pikachu"
        assert capitalize("mr-mime") == "Mr-mime"

    def test_rest_untouched(self):
        assert capitalize("hO-oh") == "HO-oh"

    def test_empty(self):
        assert capitalize("") == ""

    def test_join_types(self):
        assert join_types(["grass", "poison"]) == "Grass, Poison"
        assert join_types(["electric"]) == "Electric"


class TestTenths:
    def test_fraction(self):
        assert tenths(7) == "0.7"
        assert tenths(35) == "3.5"
        assert tenths(905) == "90.5"

    def test_whole_number_has_no_decimal(self):
        assert tenths(60) == "6"
        assert tenths(1300) == "130"
        assert tenths(0) == "0"


class TestTableRow:
    def test_left_justified(self):
        assert table_row(["ab", 1], [4, 3]) == "ab  1  "

    def test_extra_cells_unpadded(self):
        assert table_row(["ab", 1, 318], [4, 3]) == "ab  1  318"

    def test_overlong_cell_not_truncated(self):
        assert table_row(["abcdef", "x"], [3, 2]) == "abcdefx "

    def test_separator(self):
        assert COMPARE_SEPARATOR == "-" * 80


class TestBullet:
    def test_depths(self):
        assert bullet("Bulbasaur") == "• Bulbasaur"
        assert bullet("Ivysaur", 1) == "  • Ivysaur"
        assert bullet("Venusaur", 2) == "    • Venusaur"
