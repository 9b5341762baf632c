"""
Phoneme-to-grapheme approximation: IPA back to English-like spelling.

Whole words known to the lexicon are reversed exactly; everything else goes
through an ordered cascade of inverse substitutions. The mapping is lossy and
many-to-one (several vowels collapse to the same letters), so an
English -> IPA -> English round trip does not in general give back the
original spelling.
"""
from typing import Tuple

from g2p_rules import apply_rules, rule
from PhoneLexicon import DEFAULT_LEXICON, PhoneLexicon

REVERSE_RULES = (
    # Stress marks
    rule(r'ˈ', ''),
    rule(r'ˌ', ''),

    # Consonants, affricates before their second element
    rule(r'tʃ', 'ch'),
    rule(r'dʒ', 'j'),
    rule(r'θ', 'th'),
    rule(r'ð', 'th'),
    rule(r'ʃ', 'sh'),
    rule(r'ŋ', 'ng'),
    rule(r'ʒ', 'zh'),
    rule(r'j', 'y'),
    rule(r'ɹ', 'r'),
    rule(r'ɡ', 'g'),

    # Diphthongs and long vowels before their first element
    rule(r'eə', 'are'),
    rule(r'ɪə', 'ear'),
    rule(r'ʊə', 'ure'),
    rule(r'eɪ', 'ay'),
    rule(r'aɪ', 'igh'),
    rule(r'ɔɪ', 'oy'),
    rule(r'əʊ', 'ow'),
    rule(r'oʊ', 'ow'),
    rule(r'aʊ', 'ow'),
    rule(r'ɑː', 'ar'),
    rule(r'ɔː', 'or'),
    rule(r'iː', 'ee'),
    rule(r'uː', 'oo'),
    rule(r'ɜː', 'er'),
    rule(r'ɜr', 'er'),
    rule(r'[ɜɝ]', 'er'),

    # Monophthongs
    rule(r'æ', 'a'),
    rule(r'ɑ', 'a'),
    rule(r'ɒ', 'o'),
    rule(r'ɔ', 'o'),
    rule(r'ɛ', 'e'),
    rule(r'i', 'ee'),
    rule(r'ɪ', 'i'),
    rule(r'u', 'oo'),
    rule(r'ʊ', 'oo'),
    rule(r'ʌ', 'u'),
    rule(r'ə', 'a'),

    # Stray length marks
    rule(r'ː', ''),
)


class P2GTransducer(object):
    """Reverse lexicon lookup with a rule cascade fallback. Accent-agnostic."""

    def __init__(self, lexicon: PhoneLexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon
        self.rules = REVERSE_RULES

    def spell(self, ipa: str) -> str:
        """Approximate a spelling with the rule cascade alone."""
        return apply_rules(ipa, self.rules)

    def analyze_word(self, ipa: str) -> Tuple[str, str]:
        """Reverse one IPA word, returning (spelling, source)."""
        word = self.lexicon.reverse_lookup(ipa)
        if word is not None:
            return word, 'lexicon'

        word = self.spell(ipa)
        return word, 'rules' if word != ipa else 'unchanged'

    def transcribe_word(self, ipa: str) -> str:
        return self.analyze_word(ipa)[0]

    def __repr__(self):
        return f"P2GTransducer(rules={len(self.rules)}, words={len(self.lexicon.reverse_table)})"
