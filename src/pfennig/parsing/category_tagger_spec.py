from __future__ import annotations

"""
Tests for category keyword detection.
"""

from pfennig.parsing.category_tagger import extract_category


class DescribeExtractCategory:
    class DescribeDefaultKeyword:
        def it_should_detect_lebensmittel_case_insensitively(self):
            m = extract_category("Lebensmittel Kaffee")
            assert m.category_tag == "lebensmittel"
            assert m.remainder.split() == ["Kaffee"]

        def it_should_remove_every_occurrence(self):
            m = extract_category("lebensmittel und LEBENSMITTEL")
            assert m.remainder.split() == ["und"]

        def it_should_respect_word_boundaries(self):
            m = extract_category("Lebensmittelmarkt")
            assert m.category_tag is None
            assert m.remainder == "Lebensmittelmarkt"

        def it_should_ignore_other_category_names(self):
            assert extract_category("Transport Bus").category_tag is None

    class DescribeCategoryList:
        def it_should_match_any_known_category(self):
            m = extract_category("Transport Bus", ["Lebensmittel", "Transport"])
            assert m.category_tag == "transport"
            assert m.remainder.split() == ["Bus"]

        def it_should_prefer_the_longest_name(self):
            m = extract_category("essen gehen Pizza", ["Essen", "Essen gehen"])
            assert m.category_tag == "essen gehen"
            assert m.remainder.split() == ["Pizza"]

        def it_should_handle_names_with_punctuation(self):
            m = extract_category("Café & Bar Latte", ["café & bar"])
            assert m.category_tag == "café & bar"
            assert m.remainder.split() == ["Latte"]

        def it_should_find_nothing_in_an_empty_list(self):
            m = extract_category("Lebensmittel", [])
            assert m.category_tag is None
            assert m.remainder == "Lebensmittel"

        def it_should_skip_blank_names(self):
            m = extract_category("Brot", ["", "  "])
            assert m.category_tag is None
