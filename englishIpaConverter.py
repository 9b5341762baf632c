"""
English to IPA Converter

This module provides a class to convert between English spelling and the
International Phonetic Alphabet (IPA), for British (RP) and American
(General American) accents.

Common words are looked up in a small dictionary per accent; anything else is
transcribed by an ordered cascade of spelling rules, so uncommon or irregular
words get an approximate but deterministic transcription. The reverse
direction (IPA to English) is accent-agnostic and only approximates spelling.
"""
from typing import Dict, List, NamedTuple, Optional, Tuple

from g2p_rules import G2PTransducer
from p2g_rules import P2GTransducer
from PhoneLexicon import ACCENTS, DEFAULT_LEXICON, IPA_SYMBOLS, PhoneLexicon, check_accent
from text_tokenizer import join_tokens, tokenize

TO_IPA = 'toIPA'
TO_ENGLISH = 'toEnglish'
DIRECTIONS = (TO_IPA, TO_ENGLISH)


class TokenResult(NamedTuple):
    original: str
    output: str
    source: str    # 'punctuation', 'lexicon', 'rules' or 'unchanged'


def check_direction(direction: str) -> str:
    if direction not in DIRECTIONS:
        raise ValueError(f"Direction must be one of {', '.join(DIRECTIONS)}, got {direction!r}")
    return direction


class EnglishIPAConverter(object):
    """
    A class to convert between English text and IPA transcriptions.

    Input is split on whitespace; each word keeps its leading and trailing
    punctuation, and words are joined back with single spaces.
    """

    def __init__(self, lexicon: Optional[PhoneLexicon] = None):
        """Initialize the converter with a lexicon and one transducer per accent."""
        self.lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON
        self.g2p = {accent: G2PTransducer(accent) for accent in ACCENTS}
        self.p2g = P2GTransducer(self.lexicon)

    def _word_to_ipa(self, word: str, accent: str) -> Tuple[str, str]:
        """Transcribe one core word, returning (ipa, source)."""
        word = word.lower()
        ipa = self.lexicon.lookup(word, accent)
        if ipa is not None:
            return ipa, 'lexicon'

        ipa = self.g2p[accent].transcribe_word(word)
        return ipa, 'rules' if ipa != word else 'unchanged'

    def analyze(self, text: str, direction: str = TO_IPA, accent: str = 'british') -> List[TokenResult]:
        """
        Convert text token by token, reporting where each result came from.

        Args:
            text (str): English or IPA text
            direction (str): 'toIPA' or 'toEnglish'
            accent (str): 'british' or 'american'; ignored for 'toEnglish'

        Returns:
            list: One TokenResult per whitespace-delimited token
        """
        check_direction(direction)
        if direction == TO_IPA:
            check_accent(accent)

        results = []
        for token in tokenize(text):
            if not token.core:
                results.append(TokenResult(token.text, token.text, 'punctuation'))
                continue

            if direction == TO_IPA:
                core, source = self._word_to_ipa(token.core, accent)
            else:
                core, source = self.p2g.analyze_word(token.core)
            results.append(TokenResult(token.text, token.rebuild(core), source))
        return results

    def convert(self, text: str, direction: str = TO_IPA, accent: str = 'british') -> str:
        """
        Convert text in the given direction.

        Example:
            >>> converter = EnglishIPAConverter()
            >>> converter.convert("Hello, world!", 'toIPA', 'british')
            'hɛˈləʊ, wɜːld!'
        """
        return join_tokens([result.output for result in self.analyze(text, direction, accent)])

    def english_to_ipa(self, text: str, accent: str = 'british') -> str:
        return self.convert(text, TO_IPA, accent)

    def ipa_to_english(self, text: str) -> str:
        return self.convert(text, TO_ENGLISH)

    def get_word_info(self, word: str) -> Dict[str, object]:
        """
        Get both accents' transcriptions of a word.

        Returns:
            dict: word, plus per accent the IPA and whether it was a dictionary hit
        """
        info = {'word': word.lower()}
        for accent in ACCENTS:
            ipa, source = self._word_to_ipa(word, accent)
            info[accent] = {'ipa': ipa, 'in_lexicon': source == 'lexicon'}
        return info

    def list_all_mappings(self, accent: str = 'british') -> Dict[str, str]:
        """Return all dictionary words for an accent."""
        return dict(self.lexicon.table(accent))

    def validate_ipa(self, text: str) -> Tuple[bool, List[str]]:
        """
        Validate IPA text against the known symbol inventory.

        Punctuation around words is ignored.

        Returns:
            tuple: (is_valid, unknown_symbols) in order of first appearance
        """
        unknown = []
        for token in tokenize(text):
            for symbol in token.core:
                if symbol not in IPA_SYMBOLS and symbol not in unknown:
                    unknown.append(symbol)
        return len(unknown) == 0, unknown


_converter = EnglishIPAConverter()


def transcribe(text: str, direction: str = TO_IPA, accent: str = 'british') -> str:
    """Convert text with the bundled dictionaries. Never raises for odd input."""
    return _converter.convert(text, direction, accent)


def main():
    """Demonstration of the English-IPA converter."""
    converter = EnglishIPAConverter()

    print("English to IPA Converter Demo")
    print("=" * 40)

    test_cases = [
        "Hello, world!",
        "The quick brown fox jumps over the lazy dog.",
        "A banana picnic in the park",
        "Queen of the knights",
    ]

    for accent in ACCENTS:
        print(f"\nEnglish to IPA ({accent}):")
        for text in test_cases:
            print(f"{text:45} → {converter.english_to_ipa(text, accent)}")

    print("\nIPA to English:")
    for text in test_cases:
        ipa = converter.english_to_ipa(text, 'british')
        print(f"{ipa:45} → {converter.ipa_to_english(ipa)}")

    print("\nWord information:")
    for word in ['hello', 'goodbye', 'banana']:
        print(f"{word}: {converter.get_word_info(word)}")

    print(f"\nTotal dictionary entries: {len(converter.lexicon)}")


if __name__ == "__main__":
    main()
