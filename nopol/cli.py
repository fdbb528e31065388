"""
Nopol Command Line

Clean plates from the shell, list prefixes, or run the API server.
"""

import argparse
import sys

from nopol.plates import (
    clean_plate,
    select_best_candidate,
    format_plate_display,
    list_valid_prefixes,
    region_for_prefix,
)


def cmd_clean(args) -> int:
    """Clean each text argument; exit 1 if any had no plate"""
    status = 0
    for text in args.text:
        cleaned = clean_plate(text)
        if cleaned:
            print(f"{text!r} -> {cleaned} ({format_plate_display(cleaned)})")
        else:
            print(f"{text!r} -> no valid plate")
            status = 1
    return status


def cmd_best(args) -> int:
    """Pick the best plate among TEXT:CONFIDENCE hypotheses"""
    hypotheses = []
    for item in args.hypothesis:
        text, _, confidence = item.rpartition(":")
        if not text:
            text, confidence = confidence, "0"
        hypotheses.append((text, confidence))

    best = select_best_candidate(hypotheses)
    if best is None:
        print("No valid plate among hypotheses")
        return 1

    print(f"Heard:       {best.raw_text}")
    print(f"Interpreted: {best.cleaned_plate}")
    return 0


def cmd_prefixes(args) -> int:
    for prefix in sorted(list_valid_prefixes()):
        print(f"{prefix:<3} {region_for_prefix(prefix)}")
    return 0


def cmd_serve(args) -> int:
    from nopol.nopol_api import main as serve
    serve()
    return 0


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Indonesian license plate voice input tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m nopol.cli clean "Abi 1234 Abc"
  python -m nopol.cli best "X999ZZ:0.9" "B 999 CC:0.4"
  python -m nopol.cli prefixes
  python -m nopol.cli serve
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    clean_parser = subparsers.add_parser("clean", help="Clean recognized text into a plate")
    clean_parser.add_argument("text", nargs="+", help="Recognized speech text")
    clean_parser.set_defaults(func=cmd_clean)

    best_parser = subparsers.add_parser("best", help="Choose the best of several hypotheses")
    best_parser.add_argument(
        "hypothesis",
        nargs="+",
        help="Hypothesis as TEXT:CONFIDENCE (confidence optional)"
    )
    best_parser.set_defaults(func=cmd_best)

    prefixes_parser = subparsers.add_parser("prefixes", help="List valid regional prefixes")
    prefixes_parser.set_defaults(func=cmd_prefixes)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
