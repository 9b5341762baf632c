import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional

ACCENTS = ('british', 'american')

# Symbols produced by the lexicon tables and the rule cascades
IPA_SYMBOLS = frozenset([
    # Vowels
    'a', 'e', 'i', 'o', 'u', 'æ', 'ɑ', 'ɒ', 'ə', 'ɛ', 'ɜ', 'ɝ', 'ɪ', 'ɔ', 'ʊ', 'ʌ',
    # Consonants
    'b', 'd', 'f', 'g', 'ɡ', 'h', 'j', 'k', 'l', 'm', 'n', 'p', 'r', 'ɹ', 's', 't',
    'v', 'w', 'z', 'ŋ', 'ʃ', 'ʒ', 'θ', 'ð',
    # Other
    'ʔ', 'ɾ', 'x',
    # Stress and length marks
    'ˈ', 'ˌ', 'ː',
])

# Vowel symbols counted as syllable nuclei by the stress heuristic
VOWEL_SYMBOLS = frozenset('aeiouæɑɒəɛɪɔʊʌ')

STRESS_MARKS = ('ˈ', 'ˌ')

BRITISH_WORDS = {
    'hello': 'hɛˈləʊ', 'world': 'wɜːld', 'the': 'ðə', 'a': 'ə', 'an': 'ən', 'and': 'ænd',
    'is': 'ɪz', 'are': 'ɑː', 'to': 'tuː', 'of': 'ɒv', 'for': 'fɔː', 'in': 'ɪn', 'on': 'ɒn',
    'at': 'æt', 'with': 'wɪð', 'by': 'baɪ', 'from': 'frɒm', 'about': 'əˈbaʊt', 'into': 'ˈɪntuː',
    'over': 'ˈəʊvə', 'after': 'ˈɑːftə', 'under': 'ˈʌndə', 'through': 'θruː', 'between': 'bɪˈtwiːn',
    'yes': 'jɛs', 'no': 'nəʊ', 'please': 'pliːz', 'thank': 'θæŋk', 'you': 'juː', 'sorry': 'ˈsɒri',
    'what': 'wɒt', 'where': 'weə', 'when': 'wɛn', 'why': 'waɪ', 'who': 'huː', 'how': 'haʊ',
    'which': 'wɪtʃ', 'there': 'ðeə', 'here': 'hɪə', 'this': 'ðɪs', 'that': 'ðæt', 'these': 'ðiːz',
    'those': 'ðəʊz', 'they': 'ðeɪ', 'them': 'ðɛm', 'their': 'ðeə', 'she': 'ʃiː', 'he': 'hiː',
    'it': 'ɪt', 'we': 'wiː', 'i': 'aɪ', 'me': 'miː', 'my': 'maɪ', 'your': 'jɔː', 'his': 'hɪz',
    'her': 'hɜː', 'our': 'aʊə', 'its': 'ɪts', 'good': 'gʊd', 'bad': 'bæd', 'big': 'bɪg',
    'small': 'smɔːl', 'high': 'haɪ', 'low': 'ləʊ', 'long': 'lɒŋ', 'short': 'ʃɔːt', 'new': 'njuː',
    'old': 'əʊld', 'young': 'jʌŋ', 'happy': 'ˈhæpi', 'sad': 'sæd', 'time': 'taɪm', 'day': 'deɪ',
    'night': 'naɪt', 'year': 'jɪə', 'month': 'mʌnθ', 'week': 'wiːk', 'today': 'təˈdeɪ',
    'tomorrow': 'təˈmɒrəʊ', 'yesterday': 'ˈjɛstədeɪ', 'now': 'naʊ', 'then': 'ðɛn', 'always': 'ˈɔːlweɪz',
    'never': 'ˈnɛvə', 'sometimes': 'ˈsʌmtaɪmz', 'often': 'ˈɒfn', 'usually': 'ˈjuːʒuəli',
    'one': 'wʌn', 'two': 'tuː', 'three': 'θriː', 'four': 'fɔː', 'five': 'faɪv', 'six': 'sɪks',
    'seven': 'ˈsɛvn', 'eight': 'eɪt', 'nine': 'naɪn', 'ten': 'tɛn', 'hundred': 'ˈhʌndrəd',
    'thousand': 'ˈθaʊzənd', 'million': 'ˈmɪljən', 'billion': 'ˈbɪljən',
}

AMERICAN_WORDS = {
    'the': 'ðə', 'a': 'ə', 'an': 'ən', 'and': 'ænd', 'is': 'ɪz', 'are': 'ɑr', 'to': 'tu',
    'of': 'əv', 'for': 'fɔr', 'in': 'ɪn', 'on': 'ɑn', 'at': 'æt', 'with': 'wɪð', 'by': 'baɪ',
    'from': 'frəm', 'about': 'əˈbaʊt', 'into': 'ˈɪntu', 'over': 'ˈoʊvər', 'after': 'ˈæftər',
    'under': 'ˈʌndər', 'through': 'θru', 'between': 'bɪˈtwin', 'hello': 'həˈloʊ',
    'goodbye': 'ˌgʊdˈbaɪ', 'yes': 'jɛs', 'no': 'noʊ', 'please': 'pliz', 'thank': 'θæŋk',
    'you': 'ju', 'sorry': 'ˈsɑri', 'what': 'wət', 'where': 'wɛr', 'when': 'wɛn', 'why': 'waɪ',
    'who': 'hu', 'how': 'haʊ', 'which': 'wɪtʃ', 'there': 'ðɛr', 'here': 'hɪr', 'this': 'ðɪs',
    'that': 'ðæt', 'these': 'ðiz', 'those': 'ðoʊz', 'they': 'ðeɪ', 'them': 'ðɛm', 'their': 'ðɛr',
    'she': 'ʃi', 'he': 'hi', 'it': 'ɪt', 'we': 'wi', 'i': 'aɪ', 'me': 'mi', 'my': 'maɪ',
    'your': 'jɔr', 'his': 'hɪz', 'her': 'hɜr', 'our': 'aʊr', 'its': 'ɪts', 'quick': 'kwɪk',
    'brown': 'braʊn', 'fox': 'fɑks', 'jumps': 'dʒʌmps', 'lazy': 'ˈleɪzi', 'dog': 'dɔg',
}

_TABLES = {
    'british': BRITISH_WORDS,
    'american': AMERICAN_WORDS,
}

# Order in which tables are written into the reverse map; later entries win
REVERSE_MERGE_ORDER = ('american', 'british')


def check_accent(accent: str) -> str:
    if accent not in ACCENTS:
        raise ValueError(f"Accent must be one of {', '.join(ACCENTS)}, got {accent!r}")
    return accent


def load_lexicon_file(path: str) -> Dict[str, str]:
    """Parse a pronunciation file (format: word\\t/ipa/[, /ipa/...])"""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Lexicon file not found at {path}")

    entries = {}
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if '\t' not in line:
                continue

            word, pronunciations = line.split('\t', 1)
            word = word.strip().lower()

            if not any(c.isalpha() for c in word):
                continue

            # Take the first pronunciation and clean it
            pron = pronunciations.split(',')[0].strip().replace('/', '')
            if pron:
                entries[word] = pron
    return entries


class PhoneLexicon(object):
    """
    Read-only word -> IPA tables for both accents, plus the merged
    IPA -> word map used for the reverse direction.
    """

    def __init__(self, extra: Optional[Mapping[str, Mapping[str, str]]] = None):
        extra = extra or {}
        for accent in extra:
            check_accent(accent)

        self._tables = {}
        for accent in ACCENTS:
            table = dict(_TABLES[accent])
            table.update({w.lower(): ipa for w, ipa in extra.get(accent, {}).items()})
            self._tables[accent] = MappingProxyType(table)

        reverse = {}
        for accent in REVERSE_MERGE_ORDER:
            for word, ipa in self._tables[accent].items():
                reverse[ipa] = word
        self._reverse = MappingProxyType(reverse)

    @classmethod
    def from_file(cls, path: str, accent: str) -> 'PhoneLexicon':
        """Overlay the entries of a pronunciation file on one accent's table."""
        check_accent(accent)
        return cls(extra={accent: load_lexicon_file(path)})

    def table(self, accent: str) -> Mapping[str, str]:
        return self._tables[check_accent(accent)]

    @property
    def reverse_table(self) -> Mapping[str, str]:
        return self._reverse

    def lookup(self, word: str, accent: str) -> Optional[str]:
        """Exact, case-insensitive lookup. Returns None on a miss."""
        return self.table(accent).get(word.lower())

    def reverse_lookup(self, ipa: str) -> Optional[str]:
        return self._reverse.get(ipa)

    def __len__(self):
        return sum(len(t) for t in self._tables.values())


# Shared instance built from the bundled tables
DEFAULT_LEXICON = PhoneLexicon()
