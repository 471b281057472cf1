"""Entry point for laneboard CLI."""

import logging
import sys

NOUNS = {"board", "lane", "card", "web"}
VERBOSE_FLAGS = ("-v", "--verbose")


def run_tui(path: str | None, verbose: bool) -> None:
    from textual.logging import TextualHandler

    from laneboard.config import Config
    from laneboard.ui import LaneboardApp

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, handlers=[TextualHandler()])
    config = Config.load()
    if path is not None:
        config = config.override(data_dir=path)
    LaneboardApp(config).run()


def main():
    argv = sys.argv[1:]
    verbose = bool(argv) and argv[0] in VERBOSE_FLAGS
    rest = argv[1:] if verbose else argv

    # No subcommand or non-noun argument = TUI mode, optionally after -v
    if not rest or (rest[0] not in NOUNS and not rest[0].startswith("-")):
        run_tui(rest[0] if rest else None, verbose)
        return

    from laneboard.cli import build_parser

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
