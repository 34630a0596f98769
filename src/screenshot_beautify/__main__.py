import argparse
import logging
import os
import sys
import time
from typing import Optional

from screenshot_beautify.composite import beautify
from screenshot_beautify.config import Background, CompositionConfig
from screenshot_beautify.errors import BeautifyError
from screenshot_beautify.presets import PRESETS, list_presets
from screenshot_beautify.version import __version__
from screenshot_beautify.watcher import Job, Watcher, output_path_for, run_job

logger = logging.getLogger("screenshot_beautify")

COMMANDS = ("file", "presets", "watch")


def _add_composition_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--padding", type=float, default=80, help="Padding around the window (px)"
    )
    parser.add_argument("--background", help="Background image file")
    parser.add_argument(
        "--preset", help="Gradient preset name, or 'auto' to match the screenshot"
    )
    parser.add_argument(
        "--delete-original",
        action="store_true",
        help="Delete the source file after a successful run",
    )


def _with_default_command(argv: list) -> list:
    # `file` is implied when the first argument after the global flags is a path.
    index = 0
    while index < len(argv) and argv[index] in ("-v", "--verbose"):
        index += 1
    rest = argv[index:]
    if rest and rest[0] not in COMMANDS and rest[0] not in ("-h", "--help", "--version"):
        return argv[:index] + ["file"] + rest
    return argv


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments.

    A bare input path is handled by the ``file`` command.
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = _with_default_command(list(argv))
    parser = argparse.ArgumentParser(
        description="Wrap screenshots in a window frame on a gradient background."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    file_parser = subparsers.add_parser("file", help="Beautify a single screenshot")
    file_parser.add_argument("input_file", help="Input screenshot")
    file_parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        help="Output PNG file (default: <input>_beautified.png)",
    )
    _add_composition_arguments(file_parser)

    subparsers.add_parser("presets", help="List the gradient presets")

    watch_parser = subparsers.add_parser(
        "watch", help="Beautify new screenshots of a directory"
    )
    watch_parser.add_argument("source_dir", help="Directory to watch")
    watch_parser.add_argument("output_dir", help="Directory for the results")
    watch_parser.add_argument(
        "--workers", type=int, default=1, help="Number of worker threads"
    )
    _add_composition_arguments(watch_parser)

    return parser.parse_args(argv)


def make_config(args: argparse.Namespace) -> CompositionConfig:
    return CompositionConfig(
        padding=args.padding,
        background=Background.from_options(args.background, args.preset),
    )


def main(argv: Optional[list] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    try:
        if args.command == "file":
            config = make_config(args)
            output = args.output_file
            if output is None:
                output = output_path_for(
                    args.input_file, os.path.dirname(os.path.abspath(args.input_file))
                )
            if args.delete_original:
                result = run_job(Job(args.input_file, output, True), config)
                if not result.ok:
                    return 1
            else:
                path = beautify(args.input_file, output, config)
                logger.info("Saved to: %s" % path)

        elif args.command == "presets":
            for name in list_presets():
                spec = PRESETS.get(name)
                if spec is None:
                    print("%-12s match the screenshot colors" % name)
                else:
                    print("%-12s %s" % (name, " -> ".join(spec.hex_colors)))

        elif args.command == "watch":
            watcher = Watcher(
                args.source_dir,
                args.output_dir,
                make_config(args),
                workers=args.workers,
                delete_original=args.delete_original,
            )
            watcher.start()
            try:
                while True:
                    time.sleep(1.0)
            except KeyboardInterrupt:
                logger.info("Stopping...")
            finally:
                watcher.stop()
            status = watcher.status.snapshot()
            logger.info(
                "Processed %d screenshot(s), %d failed"
                % (status.processed, status.failed)
            )
    except BeautifyError as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    main()
