"""
gomodup - Interactive updater for outdated Go module dependencies.
"""

import argparse
import curses
import logging
import sys

from gomodup.core.config import AppConfig, configure_logging, get_default_config_path, load_config
from gomodup.core.exceptions import ConfigurationError
from gomodup.gomod import GoModuleSource
from gomodup.tui.app import TUIApp
from gomodup.tui.controller import Controller
from gomodup.tui.state import SessionState
from gomodup.tui.view import TUIView


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gomodup",
        description="Browse outdated Go module dependencies and update them one at a time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys:
  j / down        next module
  k / up          previous module
  d / pgdown      scroll down
  u / pgup        scroll up
  enter           update the selected module
  q / ctrl+c      quit
        """
    )
    parser.add_argument(
        '-C', '--dir',
        dest='workdir',
        help='Run go commands in this directory (default: current directory)'
    )
    parser.add_argument(
        '--go',
        dest='go_binary',
        help='Path to the go executable (default: go)'
    )
    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {get_default_config_path()})',
        default=None
    )
    parser.add_argument(
        '--tick',
        dest='tick_interval',
        type=float,
        help='Spinner frame interval in seconds'
    )
    parser.add_argument(
        '--spinner',
        choices=['line', 'dot'],
        help='Busy indicator style'
    )
    parser.add_argument(
        '--log-file',
        help='Write log records to this file'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug detail (requires a log file)'
    )
    return parser


def run_session(config: AppConfig) -> SessionState:
    """Run the interactive session inside curses and return its final state."""
    source = GoModuleSource(go_binary=config.go_binary, workdir=config.workdir)
    controller = Controller(source, spinner=config.spinner)

    def _run(stdscr):
        app = TUIApp(TUIView(stdscr), controller, tick_interval=config.tick_interval)
        return app.run()

    return curses.wrapper(_run)


def main(argv=None):
    """Main entry point for gomodup."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            args.config,
            go_binary=args.go_binary,
            workdir=args.workdir,
            tick_interval=args.tick_interval,
            spinner=args.spinner,
            log_file=args.log_file,
            verbose=True if args.verbose else None,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(config)
    logger.debug(f"Using config: {config}")

    try:
        state = run_session(config)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130

    if state.error is not None:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
