import os
import sys
from typing import List, Optional, Tuple

from englishIpaConverter import EnglishIPAConverter
from PhoneLexicon import ACCENTS, PhoneLexicon

# ---------------------------------------------------------------------------
# CONFIGURATION
# ---------------------------------------------------------------------------
DEFAULT_ACCENT = os.environ.get("IPA_DEFAULT_ACCENT", "british")
LEXICON_PATH = os.environ.get("IPA_LEXICON_PATH")  # extra word\t/ipa/ entries
LEXICON_ACCENT = os.environ.get("IPA_LEXICON_ACCENT", DEFAULT_ACCENT)

# ---------------------------------------------------------------------------
# Lexicon Loading
# ---------------------------------------------------------------------------

def build_converter(lexicon_path: Optional[str] = LEXICON_PATH,
                    lexicon_accent: str = LEXICON_ACCENT) -> EnglishIPAConverter:
    """Builds a converter, overlaying an extra lexicon file when one is configured."""
    if not lexicon_path:
        return EnglishIPAConverter()

    lexicon = PhoneLexicon.from_file(lexicon_path, lexicon_accent)
    print(f"[INFO] Loaded extra {lexicon_accent} entries from {lexicon_path}")
    return EnglishIPAConverter(lexicon)


class Translator:
    def __init__(self, converter: Optional[EnglishIPAConverter] = None,
                 default_accent: str = DEFAULT_ACCENT):
        if default_accent not in ACCENTS:
            print(f"[WARN] Unknown default accent '{default_accent}', using 'british'")
            default_accent = "british"
        self.default_accent = default_accent
        self.converter = converter or build_converter()

    def _parse_accent(self, args: List[str]) -> Tuple[str, str]:
        if args and args[0].lower() in ACCENTS:
            return args[0].lower(), " ".join(args[1:])
        return self.default_accent, " ".join(args)

    def repl(self):
        print("\n--- Interactive IPA Tool ---")
        print("Commands: g2p, p2g, round, info, help, quit")
        print(f"Default accent: {self.default_accent}")

        while True:
            try:
                raw_input = input(">>> ").strip()
                if not raw_input: continue

                cmd, *args = raw_input.split()
                cmd = cmd.lower()

                if cmd in ("quit", "exit"): break
                if cmd == "help":
                    self.cmd_help()
                    continue

                self.dispatch(cmd, args)

            except (EOFError, KeyboardInterrupt): break
            except Exception as e: print(f"[ERROR] {e}")
        print("\nExiting.")

    def dispatch(self, cmd: str, args: List[str]) -> bool:
        handler = getattr(self, f"cmd_{cmd}", None)
        if handler is None or cmd == "help":
            print(f"[ERROR] Unknown command: '{cmd}'. Type 'help'.")
            return False

        if cmd == "p2g":
            accent, payload = None, " ".join(args)
        else:
            accent, payload = self._parse_accent(args)

        if not payload:
            print("[ERROR] No text provided for processing.")
            return False

        if accent is None:
            handler(payload)
        else:
            handler(accent, payload)
        return True

    def cmd_help(self):
        print("\nUsage: <command> [<accent>] <text>")
        print("  g2p american hello world")
        print("  p2g həˈloʊ wɜːld")
        print("  round british the quick brown fox")
        print("  info hello")
        print(f"\nAccents: {', '.join(ACCENTS)}. Without one, '{self.default_accent}' is used.")

    def cmd_g2p(self, accent: str, text: str):
        ipa = self.converter.english_to_ipa(text, accent)
        print(f"[{accent.upper()}] {text} → {ipa}")

    def cmd_p2g(self, ipa: str):
        text = self.converter.ipa_to_english(ipa)
        print(f"{ipa} → {text}")

    def cmd_round(self, accent: str, text: str):
        ipa = self.converter.english_to_ipa(text, accent)
        recon = self.converter.ipa_to_english(ipa)
        print(f"Original : {text}")
        print(f"IPA      : {ipa}")
        print(f"Rebuilt  : {recon}")
        print(f"Match    : {'✓' if text.lower() == recon.lower() else '✗'}")

    def cmd_info(self, accent: str, text: str):
        for result in self.converter.analyze(text, 'toIPA', accent):
            print(f"{result.original:20} {result.output:20} ({result.source})")

    def cli(self, argv: Optional[List[str]] = None) -> int:
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.repl()
            return 0

        cmd = argv[0].lower()
        if cmd == "help":
            self.cmd_help()
            return 0
        return 0 if self.dispatch(cmd, argv[1:]) else 1


def main():
    try:
        translator = Translator()
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    sys.exit(translator.cli())


if __name__ == "__main__":
    main()
