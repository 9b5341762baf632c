import builtins

import pytest

from englishIpaConverter import EnglishIPAConverter
from ipa_translate import Translator, build_converter


@pytest.fixture
def translator():
    return Translator(EnglishIPAConverter(), default_accent="british")


def feed_input(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


class TestCli:
    def test_g2p_default_accent(self, translator, capsys):
        assert translator.cli(["g2p", "hello", "world"]) == 0
        assert "[BRITISH] hello world → hɛˈləʊ wɜːld" in capsys.readouterr().out

    def test_g2p_explicit_accent(self, translator, capsys):
        assert translator.cli(["g2p", "american", "hello"]) == 0
        assert "[AMERICAN] hello → həˈloʊ" in capsys.readouterr().out

    def test_p2g(self, translator, capsys):
        assert translator.cli(["p2g", "həˈloʊ"]) == 0
        assert "həˈloʊ → hello" in capsys.readouterr().out

    def test_round(self, translator, capsys):
        translator.cli(["round", "hello", "world"])
        out = capsys.readouterr().out
        assert "IPA      : hɛˈləʊ wɜːld" in out
        assert "Match    : ✓" in out

    def test_info(self, translator, capsys):
        translator.cli(["info", "hello", "banana"])
        out = capsys.readouterr().out
        assert "(lexicon)" in out
        assert "(rules)" in out

    def test_unknown_command(self, translator, capsys):
        assert translator.cli(["shout", "hello"]) == 1
        assert "[ERROR] Unknown command" in capsys.readouterr().out

    def test_missing_text(self, translator, capsys):
        assert translator.cli(["g2p", "american"]) == 1
        assert "[ERROR] No text provided" in capsys.readouterr().out

    def test_help(self, translator, capsys):
        assert translator.cli(["help"]) == 0
        assert "Usage" in capsys.readouterr().out


class TestRepl:
    def test_session(self, translator, monkeypatch, capsys):
        feed_input(monkeypatch, ["", "g2p american the", "p2g ðə", "quit"])
        translator.repl()
        out = capsys.readouterr().out
        assert "[AMERICAN] the → ðə" in out
        assert "ðə → the" in out
        assert "Exiting." in out

    def test_errors_do_not_end_the_session(self, translator, monkeypatch, capsys):
        feed_input(monkeypatch, ["nonsense", "g2p", "g2p cat"])
        translator.repl()
        out = capsys.readouterr().out
        assert "[ERROR] Unknown command: 'nonsense'" in out
        assert "[ERROR] No text provided" in out
        assert "cat → kæt" in out

    def test_exception_is_reported(self, translator, monkeypatch, capsys):
        def boom(*args):
            raise RuntimeError("boom")

        monkeypatch.setattr(translator, "cmd_g2p", boom)
        feed_input(monkeypatch, ["g2p hello", "exit"])
        translator.repl()
        assert "[ERROR] boom" in capsys.readouterr().out


class TestConfiguration:
    def test_unknown_default_accent_falls_back(self, capsys):
        translator = Translator(EnglishIPAConverter(), default_accent="klingon")
        assert translator.default_accent == "british"
        assert "[WARN]" in capsys.readouterr().out

    def test_build_converter_without_file(self):
        assert build_converter(None).english_to_ipa("hello") == "hɛˈləʊ"

    def test_build_converter_with_file(self, lexicon_file, capsys):
        converter = build_converter(str(lexicon_file), "british")
        assert converter.english_to_ipa("banana") == "bəˈnɑːnə"
        assert "[INFO] Loaded extra british entries" in capsys.readouterr().out

    def test_build_converter_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_converter(str(tmp_path / "missing.txt"), "british")
