"""
Helper script to batch-transcribe word lists and export lexicon files
"""
import argparse
from typing import Iterable

import pandas as pd

from englishIpaConverter import EnglishIPAConverter
from PhoneLexicon import ACCENTS, DEFAULT_LEXICON, check_accent


def transcribe_csv(input_path: str, output_path: str, column: str = 'word',
                   accents: Iterable[str] = ACCENTS,
                   converter: EnglishIPAConverter = None) -> pd.DataFrame:
    """Add an ipa_<accent> column per accent next to a CSV column of English text"""
    converter = converter or EnglishIPAConverter()
    accents = [check_accent(a) for a in accents]

    df = pd.read_csv(input_path)
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in {input_path}; columns are {list(df.columns)}")

    words = df[column].fillna('').astype(str)
    for accent in accents:
        df[f'ipa_{accent}'] = words.map(lambda text: converter.english_to_ipa(text, accent))

    df.to_csv(output_path, index=False)
    print(f"Transcribed {len(df)} rows from {input_path} and saved to {output_path}")
    return df


def export_lexicon(output_path: str, accent: str = 'british', lexicon=DEFAULT_LEXICON) -> int:
    """Write one accent's dictionary as word\\t/ipa/ lines, sorted by word"""
    table = lexicon.table(accent)
    entries = [f"{word}\t/{table[word]}/" for word in sorted(table)]

    with open(output_path, 'w', encoding='utf-8') as f:
        for entry in entries:
            f.write(entry + '\n')

    print(f"Exported {len(entries)} {accent} entries to {output_path}")
    return len(entries)


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__)
    sub = ap.add_subparsers(dest="command", required=True)

    tr = sub.add_parser("transcribe", help="transcribe a CSV column to IPA")
    tr.add_argument("infile")
    tr.add_argument("outfile")
    tr.add_argument("--column", default="word", help="column holding the English text")
    tr.add_argument("--accent", choices=ACCENTS, action="append",
                    help="accent to transcribe (repeatable, default: all)")

    ex = sub.add_parser("export", help="export a bundled dictionary")
    ex.add_argument("outfile")
    ex.add_argument("--accent", choices=ACCENTS, default="british")

    args = ap.parse_args(argv)

    if args.command == "transcribe":
        transcribe_csv(args.infile, args.outfile, column=args.column,
                       accents=args.accent or ACCENTS)
    else:
        export_lexicon(args.outfile, accent=args.accent)


if __name__ == "__main__":
    # Example usage:
    # python prepare_data.py transcribe words.csv words_ipa.csv --column word
    # python prepare_data.py export data/british.txt --accent british
    main()
