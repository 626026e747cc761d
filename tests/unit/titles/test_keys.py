"""Tests for bibsort.titles.keys."""

import logging
from unittest import mock

import pytest

import bibsort.titles.keys as keys_module
from bibsort.titles.keys import (
    drop_article,
    key,
    spell_leading_number,
    strip_punctuation,
    title_key,
    tokenize,
)


class TestTitleKey:
    """End-to-end key computation."""

    @pytest.mark.parametrize("title,expected", [
        ("The Gumball Rally", "gumball rally"),
        ("1917", "nineteen seventeen"),
        ("9 to 5", "nine to 5"),
        ("It's Garry Shandling's Show", "its garry shandlings show"),
        ("The 40-Year-Old Virgin", "forty year old virgin"),
        ("42nd Street", "forty-second street"),
        ("The 30th Floor", "thirtieth floor"),
        ("The 501st Legion", "five hundred first legion"),
        ("The 600th Floor", "six hundredth floor"),
        ("350000000 Years of Solitude", "three hundred fifty million years of solitude"),
    ])
    def test_reference_titles(self, title, expected):
        assert title_key(title) == expected

    @pytest.mark.parametrize("title,expected", [
        ("The", "the"),
        ("A", "a"),
        ("  an  ", "an"),
        ("The X", "x"),
        ("An Officer and a Gentleman", "officer and a gentleman"),
        ("A Tale of Two Cities", "tale of two cities"),
        ("Theory of Everything", "theory of everything"),
    ])
    def test_leading_articles(self, title, expected):
        assert title_key(title) == expected

    def test_only_first_article_dropped(self):
        assert title_key("The The") == "the"

    @pytest.mark.parametrize("title", ["", "   ", "...", "!?!", "-", "'\"", "\t\n"])
    def test_nothing_left_gives_empty_key(self, title):
        assert title_key(title) == ""

    def test_ampersand_becomes_and(self):
        assert title_key("Law & Order") == "law and order"
        assert title_key("R&B Classics") == "r and b classics"

    def test_lone_ampersand(self):
        assert title_key("&") == "and"

    def test_hyphens_split_words(self):
        assert title_key("Spider-Man") == "spider man"

    def test_whitespace_collapsed(self):
        assert title_key("  Gone \t with\n the   Wind ") == "gone with the wind"

    def test_unicode_letters_kept(self):
        assert title_key("Amélie") == "amélie"

    def test_only_leading_number_spelled(self):
        assert title_key("Apollo 13") == "apollo 13"
        assert title_key("2001: A Space Odyssey") == "two thousand one a space odyssey"

    def test_number_after_article(self):
        assert title_key("The 39 Steps") == "thirty-nine steps"

    def test_ordinal_suffix_case_folded(self):
        assert title_key("21ST Century") == "twenty-first century"

    def test_unknown_suffix_not_spelled(self):
        assert title_key("3D Printing") == "3d printing"

    def test_digits_with_punctuation_join(self):
        assert title_key("1,000 Ways to Die") == "one thousand ways to die"

    def test_non_ascii_digits_not_spelled(self):
        assert title_key("٣ Stories") == "٣ stories"

    def test_key_alias(self):
        assert key is title_key

    def test_not_a_string(self):
        with pytest.raises(TypeError):
            title_key(1917)

    @pytest.mark.parametrize("title", [
        "The Gumball Rally",
        "9 to 5",
        "The 501st Legion",
        "It's Garry Shandling's Show",
    ])
    def test_idempotent_on_normalized_keys(self, title):
        once = title_key(title)
        assert title_key(once) == once

    def test_output_is_lowercase_single_spaced(self):
        result = title_key("  THE  Quick-Brown  FOX's   Den  ")
        assert result == result.lower()
        assert "  " not in result
        assert result == result.strip()


class TestStages:
    """The individual cleanup steps."""

    def test_strip_punctuation_leaves_no_gap(self):
        assert strip_punctuation("it's o.k.") == "its ok"

    def test_tokenize(self):
        assert tokenize(" The Cat & the Hat-Trick! ") == [
            "the", "cat", "and", "the", "hat", "trick",
        ]

    def test_drop_article_keeps_lone_article(self):
        assert drop_article(["the"]) == ["the"]

    def test_drop_article_empty(self):
        assert drop_article([]) == []

    def test_spell_leading_number_splices(self):
        assert spell_leading_number(["501st", "legion"]) == [
            "five", "hundred", "first", "legion",
        ]

    def test_spell_leading_number_no_match(self):
        tokens = ["legion", "501"]
        assert spell_leading_number(tokens) == tokens

    def test_spell_leading_number_empty(self):
        assert spell_leading_number([]) == []

    def test_unparseable_numeral_left_alone(self, caplog):
        with mock.patch.object(keys_module, "int", side_effect=ValueError, create=True):
            with caplog.at_level(logging.WARNING, logger="bibsort.titles.keys"):
                assert spell_leading_number(["42", "street"]) == ["42", "street"]
        assert "unexpanded" in caplog.text
