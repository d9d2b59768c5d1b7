"""CLI entry point for goforecast."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from goforecast.config.loader import load_config, resolve_state_dir
from goforecast.errors import GoforecastError, MissingArgumentError
from goforecast.pipeline.lookup_pipeline import LookupPipeline
from goforecast.reporting.formatters import render_forecast

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    """Reports usage errors like any other failure: exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="goforecast",
        description=(
            "goforecast looks up the current weather based upon a partial "
            "address; e.g., a zip code."
        ),
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--state-dir",
        default=None,
        help="Directory holding the .goforecast state file (default: $HOME)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr"
    )

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser(
        "lookup",
        aliases=["l"],
        help="Look up weather for a partial or whole address",
        usage='%(prog)s "[address]..."',
    )
    lookup_p.add_argument(
        "address", nargs="*", help="Address to look up; quote it if it has spaces"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, and the forecast URL embeds the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        _print_error(f"could not load config {args.config}: {e}")
        return 1

    try:
        return _cmd_lookup(config, args)
    except GoforecastError as e:
        _print_error(str(e))
        return 1


def _cmd_lookup(config, args) -> int:
    if not args.address or not args.address[0].strip():
        raise MissingArgumentError("missing address")
    if len(args.address) > 1:
        logger.warning(
            "Ignoring extra arguments %s; quote addresses containing spaces",
            args.address[1:],
        )
    addr = args.address[0]

    pipeline = LookupPipeline(config, resolve_state_dir(config, args.state_dir))
    result = pipeline.run(addr)
    render_forecast(result.forecast, addr)
    return 0


def _print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
