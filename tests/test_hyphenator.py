"""
Tests for the Hyphenator helpers and the package-level API.

Run: pytest tests/test_hyphenator.py -v
"""

import pytest

import hyphen_split
from conftest import make_dict
from hyphen_split import Hyphenator
from hyphen_split.raw_types import BreakPoint
from hyphen_split.resources import DictionaryRegistry, DictionarySource


class TestHyphenator:
    """Test break filtering and word splitting."""

    def test_inserted(self):
        hyphenator = Hyphenator(dictionary=make_dict("b1c", "d1e"))
        assert hyphenator.inserted("abcdef") == "ab-cd-ef"
        assert hyphenator.inserted("abcdef", hyphen="\u00ad") == "ab\u00adcd\u00adef"

    def test_iterate(self):
        hyphenator = Hyphenator(dictionary=make_dict("b1c", "d1e"))
        assert list(hyphenator.iterate("abcdef")) == [("abcd", "ef"), ("ab", "cdef")]

    def test_keeps_original_case(self):
        hyphenator = Hyphenator(dictionary=make_dict("b1c", "d1e"))
        assert hyphenator.inserted("AbCdEf") == "Ab-Cd-Ef"

    def test_left_and_right(self):
        hd = make_dict("a1b", "b1c", "d1e", "e1f")
        assert Hyphenator(dictionary=hd, left=1, right=1).inserted("abcdef") == "a-b-cd-e-f"
        assert Hyphenator(dictionary=hd, left=2, right=3).inserted("abcdef") == "ab-cdef"
        assert Hyphenator(dictionary=hd, left=4, right=4).positions("abcdef") == []

    def test_defaults_from_dictionary_parameters(self):
        hd = make_dict("LEFTHYPHENMIN 1", "RIGHTHYPHENMIN 3", "a1b", "b1c", "d1e", "e1f")
        hyphenator = Hyphenator(dictionary=hd)
        assert (hyphenator.left, hyphenator.right) == (1, 3)
        assert hyphenator.positions("abcdef") == [BreakPoint(1), BreakPoint(2)]

    def test_default_minimums(self):
        hyphenator = Hyphenator(dictionary=make_dict("a1b"))
        assert (hyphenator.left, hyphenator.right) == (2, 2)

    def test_word_without_breaks(self):
        hyphenator = Hyphenator(dictionary=make_dict("b1c"))
        assert hyphenator.inserted("xyz") == "xyz"
        assert list(hyphenator.iterate("xyz")) == []

    def test_length_changing_lowercase(self):
        hyphenator = Hyphenator(dictionary=make_dict("a1b"), left=1, right=1)
        assert hyphenator.inserted("İab") == "İa-b"
        assert list(hyphenator.iterate("İab")) == [("İa", "b")]

    def test_requires_a_source(self):
        with pytest.raises(ValueError):
            Hyphenator()

    def test_lang_through_registry(self, dic_folder):
        registry = DictionaryRegistry(DictionarySource(dic_folder))
        hyphenator = Hyphenator(lang="en-US", registry=registry)
        assert hyphenator.inserted("abcdef") == "ab-cd-ef"
        assert Hyphenator(lang="en_US", registry=registry).hd is hyphenator.hd

    def test_filename(self, dic_folder):
        registry = DictionaryRegistry(DictionarySource(dic_folder))
        hyphenator = Hyphenator(filename=dic_folder / "hyph_en_GB.dic", registry=registry)
        assert hyphenator.inserted("abcdef") == "abcd-ef"

    def test_unknown_language(self, dic_folder):
        registry = DictionaryRegistry(DictionarySource(dic_folder))
        with pytest.raises(KeyError):
            Hyphenator(lang="fr", registry=registry)


class TestPackageApi:
    """Test the functions exported from hyphen_split."""

    def test_positions(self, dic_folder):
        registry = DictionaryRegistry(DictionarySource(dic_folder))
        points = hyphen_split.positions("abcdef", lang="en", registry=registry)
        assert points == (BreakPoint(4),)

    def test_positions_by_filename(self, dic_folder):
        registry = DictionaryRegistry(DictionarySource(dic_folder))
        points = hyphen_split.positions("abcdef", filename=dic_folder / "hyph_en_US.dic", registry=registry)
        assert [p.offset for p in points] == [2, 4]

    def test_positions_requires_a_source(self):
        with pytest.raises(ValueError):
            hyphen_split.positions("abc")

    def test_languages(self, dic_folder):
        registry = DictionaryRegistry(DictionarySource(dic_folder))
        assert "de_DE" in hyphen_split.languages(registry)
        assert hyphen_split.language_fallback("de-DE-1996", registry) == "de_DE"

    def test_warm_up(self, dic_folder):
        registry = DictionaryRegistry(DictionarySource(dic_folder))
        total, timings = hyphen_split.warm_up("de", registry=registry)
        assert total >= 0
        assert set(timings) == {"dictionary", "total"}
        assert len(registry) == 1

    def test_version(self):
        assert hyphen_split.get_version() == hyphen_split.__version__
