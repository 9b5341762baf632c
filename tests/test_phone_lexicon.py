import pytest

from PhoneLexicon import (
    ACCENTS,
    AMERICAN_WORDS,
    BRITISH_WORDS,
    PhoneLexicon,
    load_lexicon_file,
)


class TestTables:
    def test_keys_are_lowercase(self):
        for table in (BRITISH_WORDS, AMERICAN_WORDS):
            assert all(word == word.lower() for word in table)

    def test_tables_are_not_symmetric(self):
        assert "goodbye" in AMERICAN_WORDS and "goodbye" not in BRITISH_WORDS
        assert "world" in BRITISH_WORDS and "world" not in AMERICAN_WORDS

    def test_tables_are_read_only(self, lexicon):
        with pytest.raises(TypeError):
            lexicon.table("british")["hello"] = "x"


class TestLookup:
    def test_known_words(self, lexicon):
        assert lexicon.lookup("hello", "british") == "hɛˈləʊ"
        assert lexicon.lookup("hello", "american") == "həˈloʊ"
        assert lexicon.lookup("the", "american") == "ðə"

    def test_lookup_is_case_insensitive(self, lexicon):
        assert lexicon.lookup("WoRlD", "british") == "wɜːld"
        assert lexicon.lookup("I", "british") == "aɪ"

    def test_miss_returns_none(self, lexicon):
        assert lexicon.lookup("banana", "british") is None
        assert lexicon.lookup("world", "american") is None

    def test_unknown_accent_raises(self, lexicon):
        with pytest.raises(ValueError):
            lexicon.lookup("hello", "australian")


class TestReverseLookup:
    def test_exact_match(self, lexicon):
        assert lexicon.reverse_lookup("wɜːld") == "world"
        assert lexicon.reverse_lookup("həˈloʊ") == "hello"

    def test_later_british_entry_wins(self, lexicon):
        # to/two and for/four share a British transcription
        assert lexicon.reverse_lookup("tuː") == "two"
        assert lexicon.reverse_lookup("fɔː") == "four"
        assert lexicon.reverse_lookup("ðeə") == "their"

    def test_american_only_transcriptions(self, lexicon):
        assert lexicon.reverse_lookup("tu") == "to"
        assert lexicon.reverse_lookup("ðɛr") == "their"

    def test_british_overrides_american(self):
        lexicon = PhoneLexicon(extra={
            "american": {"colour": "ˈkʌlər"},
            "british": {"collar": "ˈkʌlər"},
        })
        assert lexicon.reverse_lookup("ˈkʌlər") == "collar"

    def test_miss_returns_none(self, lexicon):
        assert lexicon.reverse_lookup("bəˈnɑːnə") is None


class TestExtraEntries:
    def test_extra_entries_overlay_one_accent(self):
        lexicon = PhoneLexicon(extra={"british": {"Banana": "bəˈnɑːnə"}})
        assert lexicon.lookup("banana", "british") == "bəˈnɑːnə"
        assert lexicon.lookup("banana", "american") is None
        assert lexicon.reverse_lookup("bəˈnɑːnə") == "banana"

    def test_extra_entries_do_not_touch_module_tables(self):
        PhoneLexicon(extra={"british": {"hello": "x"}})
        assert BRITISH_WORDS["hello"] == "hɛˈləʊ"

    def test_unknown_extra_accent_raises(self):
        with pytest.raises(ValueError):
            PhoneLexicon(extra={"scottish": {}})

    def test_len_counts_both_tables(self, lexicon):
        assert len(lexicon) == len(BRITISH_WORDS) + len(AMERICAN_WORDS)


class TestLexiconFile:
    def test_load_lexicon_file(self, lexicon_file):
        entries = load_lexicon_file(str(lexicon_file))
        assert entries == {"banana": "bəˈnɑːnə", "hello": "hɛˈləʊ"}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_lexicon_file(str(tmp_path / "missing.txt"))

    def test_from_file(self, lexicon_file):
        lexicon = PhoneLexicon.from_file(str(lexicon_file), "american")
        assert lexicon.lookup("banana", "american") == "bəˈnɑːnə"
        assert lexicon.lookup("banana", "british") is None

    @pytest.mark.parametrize("accent", ACCENTS)
    def test_every_accent_has_a_table(self, lexicon, accent):
        assert len(lexicon.table(accent)) > 0
