"""
Rule-based grapheme-to-phoneme transduction for English.

A word is rewritten by an ordered cascade of regex substitutions: consonant
digraphs first, then vowel digraphs, then single vowels by context, then a
final pass over the remaining consonant letters. The result is an
approximation; irregular spellings come out wrong but always the same way.
"""
import re
from typing import List, NamedTuple, Sequence, Tuple

from PhoneLexicon import VOWEL_SYMBOLS, check_accent


class Rule(NamedTuple):
    pattern: re.Pattern
    replacement: str


def rule(pattern: str, replacement: str) -> Rule:
    # ASCII word semantics: \w and \b only see plain letters, so IPA symbols
    # already written into the word act as boundaries
    return Rule(re.compile(pattern, re.ASCII), replacement)


# -----------------------------------------------------------------------------
# Rule tables
# -----------------------------------------------------------------------------
CONSONANT_RULES = (
    rule(r'th(?=[aeiou])', 'ð'),
    rule(r'th', 'θ'),
    rule(r'ch', 'tʃ'),
    rule(r'sh', 'ʃ'),
    rule(r'zh', 'ʒ'),
    rule(r'ng', 'ŋ'),
    rule(r'ph', 'f'),
    rule(r'(?<=[aeiou])gh(?=[aeiou])', 'g'),
    rule(r'gh', ''),
    rule(r'wh', 'w'),
    rule(r'(?<=[aeiou])ck', 'k'),
    rule(r'kn', 'n'),
    rule(r'mb$', 'm'),
    rule(r'ps', 's'),
    rule(r'gn', 'n'),
    rule(r'wr', 'r'),
    rule(r'qu', 'kw'),
)


def vowel_digraph_rules(long_e: str, long_u: str, open_o: str, goat: str) -> Tuple[Rule, ...]:
    """Vowel digraphs; the arguments are the accent's FLEECE, GOOSE, THOUGHT and GOAT vowels."""
    return (
        rule(r'ee', long_e),
        rule(r'ea(?=d\b)', 'ɛ'),
        rule(r'ea', long_e),
        rule(r'ei', 'aɪ'),
        rule(r'ey\b', long_e),
        rule(r'ey', 'eɪ'),
        rule(r'ie\b', long_e),
        rule(r'ie', 'aɪ'),
        rule(r'oo(?=k)', 'ʊ'),
        rule(r'oo(?=d)', 'ʊ'),
        rule(r'oo', long_u),
        rule(r'ou(?=ld)', 'ʊ'),
        rule(r'ou(?=l)', goat),
        rule(r'ou', 'aʊ'),
        rule(r'ow\b', goat),
        rule(r'ow', 'aʊ'),
        rule(r'oy', 'ɔɪ'),
        rule(r'oi', 'ɔɪ'),
        rule(r'ai', 'eɪ'),
        rule(r'ay', 'eɪ'),
        rule(r'aw', open_o),
        rule(r'au', open_o),
        rule(r'oa', goat),
        rule(r'oe', goat),
    )


def single_vowel_rules(vowel: str, short: str, tense: str, default: str = 'ə') -> Tuple[Rule, ...]:
    """
    Context rules for one vowel letter:
    closed by two consonants -> short, closed by one final consonant -> short,
    consonant plus silent e -> tense, anything else -> default (schwa).
    """
    return (
        rule(vowel + r'(?=\w*[^aeiou][^aeiou]\b)', short),
        rule(vowel + r'(?=[^aeiou]\b)', short),
        rule(vowel + r'(?=\w*[^aeiou]e\b)', tense),
        rule(vowel, default),
    )


# The letter e has no tense reading here; word-final e is silent. These run
# after the other single vowels so their silent-e lookaheads still see the e
E_RULES = (
    rule(r'e(?=\w*[^aeiou][^aeiou]\b)', 'ɛ'),
    rule(r'e(?=[^aeiou]\b)', 'ɛ'),
    rule(r'e\b', ''),
    rule(r'e', 'ə'),
)

FINAL_CONSONANT_RULES = (
    rule(r'c(?=[eiy])', 's'),
    rule(r'c', 'k'),
    rule(r'g(?=[eiy])', 'dʒ'),
    rule(r'x', 'ks'),
    rule(r'q(?!u)', 'k'),
)

BRITISH_RULES = (
    CONSONANT_RULES
    + vowel_digraph_rules(long_e='iː', long_u='uː', open_o='ɔː', goat='əʊ')
    + single_vowel_rules('a', 'æ', 'eɪ')
    + single_vowel_rules('i', 'ɪ', 'aɪ', default='ɪ')
    + single_vowel_rules('o', 'ɒ', 'əʊ')
    + single_vowel_rules('u', 'ʌ', 'juː')
    + E_RULES
    + FINAL_CONSONANT_RULES
)

AMERICAN_RULES = (
    CONSONANT_RULES
    + vowel_digraph_rules(long_e='i', long_u='u', open_o='ɔ', goat='oʊ')
    + single_vowel_rules('a', 'æ', 'eɪ')
    + single_vowel_rules('i', 'ɪ', 'aɪ', default='ɪ')
    + single_vowel_rules('o', 'ɑ', 'oʊ')
    + single_vowel_rules('u', 'ʌ', 'ju')
    + E_RULES
    + FINAL_CONSONANT_RULES
)

RULES_BY_ACCENT = {
    'british': BRITISH_RULES,
    'american': AMERICAN_RULES,
}

# Applied to British output after stress insertion
BRITISH_LENGTH_RULES = (
    rule(r'ɑ(?=r)', 'ɑː'),
    rule(r'ɔ(?=[^ɪː])', 'ɔː'),
    rule(r'ɜ(?!ː)', 'ɜː'),
)

PRIMARY_STRESS = 'ˈ'


# -----------------------------------------------------------------------------
# Cascade evaluation
# -----------------------------------------------------------------------------
def _apply_rule(r: Rule, text: str, consumed: List[bool]) -> Tuple[str, List[bool]]:
    """One left-to-right pass of a rule, skipping matches on consumed text."""
    pieces, mask = [], []
    last = pos = 0

    while pos <= len(text):
        match = r.pattern.search(text, pos)
        if match is None:
            break
        start, end = match.span()
        if any(consumed[start:end]):
            pos = start + 1
            continue

        pieces.append(text[last:start])
        mask.extend(consumed[last:start])
        pieces.append(r.replacement)
        mask.extend([True] * len(r.replacement))
        last = end
        pos = end if end > start else end + 1

    pieces.append(text[last:])
    mask.extend(consumed[last:])
    return ''.join(pieces), mask


def apply_rules(word: str, rules: Sequence[Rule]) -> str:
    """
    Run the rules strictly in order over one working buffer.

    Text written by a rule is final: later rules still see it as context for
    their lookarounds, but never rewrite it.
    """
    text = word
    consumed = [False] * len(text)
    for r in rules:
        text, consumed = _apply_rule(r, text, consumed)
    return text


def rewrite(text: str, rules: Sequence[Rule]) -> str:
    """Plain chained substitution, each rule over the whole string."""
    for r in rules:
        text = r.pattern.sub(r.replacement, text)
    return text


def count_vowels(ipa: str) -> int:
    return sum(1 for symbol in ipa if symbol in VOWEL_SYMBOLS)


def add_default_stress(ipa: str) -> str:
    """Stress the first syllable of a multi-syllable word that has no stress mark."""
    if count_vowels(ipa) > 1 and PRIMARY_STRESS not in ipa:
        return PRIMARY_STRESS + ipa
    return ipa


def lengthen_british(ipa: str) -> str:
    return rewrite(ipa, BRITISH_LENGTH_RULES)


class G2PTransducer(object):
    """Rule cascade, stress heuristic and accent post-pass for one accent."""

    def __init__(self, accent: str = 'british'):
        self.accent = check_accent(accent)
        self.rules = RULES_BY_ACCENT[accent]

    def transcribe_word(self, word: str) -> str:
        """Transcribe a single lowercase word with its punctuation removed."""
        ipa = apply_rules(word, self.rules)
        ipa = add_default_stress(ipa)
        if self.accent == 'british':
            ipa = lengthen_british(ipa)
        return ipa

    def __repr__(self):
        return f"G2PTransducer(accent={self.accent!r}, rules={len(self.rules)})"

