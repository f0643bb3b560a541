# htmlsummary/cli.py
import argparse
import json
import logging
import sys

from .summary import HtmlSummary


def build_parser():
    ap = argparse.ArgumentParser(
        prog="htmlsummary",
        description="Print title, author, dates, headline and first paragraph of an HTML file.",
    )
    ap.add_argument("path", help="HTML file to summarize")
    ap.add_argument("--not-available", dest="not_available", help="placeholder for missing values")
    ap.add_argument("--field", dest="fields", action="append", default=[],
                    help="extra meta name to include (repeatable)")
    ap.add_argument("--json", action="store_true", help="print the summary as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s:%(lineno)d - %(message)s",
    )

    s = HtmlSummary(PATH=args.path, NOT_AVAILABLE=args.not_available, FIELDS=args.fields)
    if not s.ok:
        print(s.error, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(s.summary, ensure_ascii=False, indent=2, sort_keys=True))
    else:
        for key in sorted(s.summary):
            print(f"{key}: {s.summary[key]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
