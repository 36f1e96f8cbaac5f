# src/token_normalizer/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: parse a design-token export and print the normalized result as JSON."""
    from .ingest import ParseOptions, parse_tokens

    parser = argparse.ArgumentParser(
        prog="token-normalizer",
        description="Normalize a Figma / Style Dictionary / flat design-token export.",
    )
    parser.add_argument("path", help="Token export file (e.g. tokens.json)")
    parser.add_argument("--mode", default=None, help="Only keep this mode from multi-mode exports")
    parser.add_argument(
        "--default-unit",
        default="px",
        dest="default_unit",
        help="Unit given to unitless dimensions",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(args.path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    result = parse_tokens(raw, ParseOptions(mode=args.mode, default_unit=args.default_unit))
    print(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))
    if result.errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
