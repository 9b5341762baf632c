import pytest

from englishIpaConverter import EnglishIPAConverter
from PhoneLexicon import PhoneLexicon


@pytest.fixture
def converter():
    return EnglishIPAConverter()


@pytest.fixture
def lexicon():
    return PhoneLexicon()


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "extra.txt"
    path.write_text(
        "# comment line without a tab\n"
        "Banana\t/bəˈnɑːnə/, /bəˈnænə/\n"
        "hello\t/hɛˈləʊ/\n"
        "123\t/wʌn/\n",
        encoding="utf-8",
    )
    return path
