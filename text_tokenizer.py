"""
Whitespace tokenizer with punctuation handling.

Each whitespace-delimited piece of input becomes a Token that keeps its
leading and trailing punctuation apart from the word itself, so the word
can be transcribed and the punctuation put back afterwards.
"""
import re
from typing import List, NamedTuple

# Punctuation stripped from either end of a word
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()?\"'[]"

_PUNCT_CLASS = '[' + re.escape(PUNCTUATION) + ']+'
LEADING_RE = re.compile('^' + _PUNCT_CLASS)
TRAILING_RE = re.compile(_PUNCT_CLASS + '$')


class Token(NamedTuple):
    leading: str
    core: str
    trailing: str

    @property
    def text(self) -> str:
        return self.leading + self.core + self.trailing

    def rebuild(self, core: str) -> str:
        """Reattach this token's punctuation around a new core."""
        return self.leading + core + self.trailing


def split_token(raw: str) -> Token:
    """Split one piece of text into (leading, core, trailing)."""
    leading = LEADING_RE.match(raw)
    leading = leading.group(0) if leading else ''
    rest = raw[len(leading):]

    trailing = TRAILING_RE.search(rest)
    trailing = trailing.group(0) if trailing else ''
    core = rest[:len(rest) - len(trailing)]

    return Token(leading, core, trailing)


def tokenize(text: str) -> List[Token]:
    """Split text on runs of whitespace, dropping empty pieces."""
    return [split_token(piece) for piece in text.split()]


def join_tokens(words: List[str]) -> str:
    return ' '.join(words)
