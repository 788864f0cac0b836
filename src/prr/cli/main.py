"""CLI entrypoint for PRR."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from prr import __version__
from prr.codec import StateCodec
from prr.config import PrrConfig, load_config, validate_config_file
from prr.constants.branding import CLI_DESCRIPTION
from prr.exceptions import CodecError, ConfigError, PrrError, StateError
from prr.exceptions.validation import format_errors
from prr.io import StateStore
from prr.model import AssessmentRecord
from prr.record import clamp_record, parse_assignment, record_from_dict, record_to_dict
from prr.reporting import StdoutReporter
from prr.scoring import score


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="prr",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding prr.yaml (default: .)")
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument("-v", "--verbose", action="store_true", help="Show intermediate values and debug logs")

    record_source = argparse.ArgumentParser(add_help=False)
    source = record_source.add_mutually_exclusive_group()
    source.add_argument("--code", default=None, help="Start from a shared code (optionally prefixed with a label)")
    source.add_argument("--json", type=Path, default=None, help="Start from a JSON record file")
    source.add_argument("--state", action="store_true", help="Start from the saved session record")
    record_source.add_argument(
        "-s",
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Set a record field (repeat for multiple fields)",
    )
    record_source.add_argument("--save", action="store_true", help="Save the resulting record as the session state")

    rate = subparsers.add_parser("score", parents=[common, record_source], help="Rate a finding")
    rate.add_argument("--no-color", action="store_true", help="Disable colored output")

    subparsers.add_parser("encode", parents=[common, record_source], help="Print the share code for a record")

    decode = subparsers.add_parser(
        "decode",
        parents=[common],
        help="Print the record carried by a share code",
        epilog="Use `prr decode -- TEXT` when the finding label starts with `-`.",
    )
    decode.add_argument("text", help="Share code, optionally prefixed with `<findingRef>-`")
    decode.add_argument("--save", action="store_true", help="Save the decoded record as the session state")

    subparsers.add_parser("reset", parents=[common], help="Delete the saved session record")
    subparsers.add_parser("validate-config", parents=[common], help="Validate configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    validation_errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2
    if args.command == "validate-config":
        print("Configuration is valid.")
        return 0

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    codec = StateCodec()
    store = StateStore(config.state_file)

    if args.command == "reset":
        if store.clear():
            print(f"Cleared session state at {store.path}.")
        else:
            print(f"No session state at {store.path}.")
        return 0

    try:
        if args.command == "decode":
            record = codec.parse_share_text(args.text)
        else:
            record = _resolve_record(args, codec, store)
    except CodecError as exc:
        print(f"Decode error [{exc.code}]: {exc}", file=sys.stderr)
        return 2
    except StateError as exc:
        print(f"State error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2
    except PrrError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.save:
        store.save(record)

    if args.command == "decode":
        print(json.dumps(record_to_dict(record), indent=2, sort_keys=True))
    elif args.command == "encode":
        print(codec.share_text(record))
    else:
        print(_render_score(record, codec, config, args))
    return 0


def _resolve_record(args: argparse.Namespace, codec: StateCodec, store: StateStore) -> AssessmentRecord:
    """Build the record named by the source flags, then apply ``--set`` assignments."""
    if args.code is not None:
        record = codec.parse_share_text(args.code)
    elif args.json is not None:
        try:
            raw = json.loads(args.json.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ValueError(f"cannot read record JSON {args.json}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ValueError(f"record JSON {args.json} must be an object")
        record = record_from_dict(raw)
    elif args.state:
        restored = store.load()
        if restored is None:
            raise StateError(f"no saved session state at {store.path}")
        record = restored
    else:
        record = AssessmentRecord()

    changes = dict(parse_assignment(item) for item in args.assignments)
    return clamp_record(replace(record, **changes))


def _render_score(record: AssessmentRecord, codec: StateCodec, config: PrrConfig, args: argparse.Namespace) -> str:
    scores = score(record, thresholds=config.thresholds)
    use_color = not args.no_color and sys.stdout.isatty()
    reporter = StdoutReporter(record, scores, codec.share_text(record), color=use_color, verbose=args.verbose)
    return reporter.render()


if __name__ == "__main__":
    raise SystemExit(main())
