import argparse
import sys

from rich.console import Console
from rich.text import Text
from textual.app import App

from pairview.core.charset import textfile_content
from pairview.core.resolver import ComparisonMode, binary_content, comparison_mode
from pairview.screens.browser import BrowserScreen
from pairview.utils.config import LaunchConfig
from pairview.utils.error_handling import PairviewError
from pairview.utils.io import arg_to_filepath
from pairview.utils.logger import log
from pairview.utils.validation import ValidationError, validate_directory_path


class PairviewApp(App):
    """Terminal front end: browse, pick two files, compare."""

    DEFAULT_CSS = """
    Screen {
        background: $surface-darken-1;
    }
    """

    def __init__(self, launch_config: LaunchConfig, watch: bool = True):
        """Initialize the application.

        Args:
            launch_config: Startup inputs (preloaded file, first directory)
            watch: Refresh the browser listing when the directory changes
        """
        super().__init__()
        self.launch_config = launch_config
        self.watch_dirs = watch

    def on_mount(self):
        self.push_screen(
            BrowserScreen(
                start_dir=self.launch_config.start_dir,
                preload=self.launch_config.filepath,
                watch=self.watch_dirs,
            )
        )


def _create_argument_parser():
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(prog="pairview", description="Pairview: side-by-side file comparison")
    parser.add_argument('path', nargs='?', help='File to preload as the old side of a comparison')
    parser.add_argument('--dir', type=str, help='Directory to browse first (default: working directory)')
    parser.add_argument(
        '--print',
        action='store_true',
        help='Print the decoded content of PATH with its charset and exit',
    )
    parser.add_argument('--no-watch', action='store_true', help='Do not refresh listings on directory changes')
    return parser


def _resolve_launch_config(args) -> LaunchConfig:
    """Apply environment fallbacks and validate the startup inputs."""
    launch_config = LaunchConfig.from_args(args).merge_with_env()
    launch_config.filepath = arg_to_filepath(launch_config.filepath)

    if launch_config.start_dir:
        try:
            launch_config.start_dir = validate_directory_path(launch_config.start_dir, "Start directory")
        except ValidationError as e:
            log(f"Configuration validation failed: {e}")
            sys.stderr.write(f"Configuration Error: {e}\n")
            sys.stderr.write("Use --help for usage information.\n")
            sys.exit(1)
    return launch_config


def print_content(filepath: str | None, console: Console | None = None) -> int:
    """Print the decoded content of ``filepath`` compared against nothing."""
    console = console or Console()
    if not filepath:
        console.print("No readable file given", style="red")
        return 1
    try:
        if comparison_mode(filepath, "") is ComparisonMode.TEXT_EMPTY:
            old = textfile_content(filepath)
        else:
            old = binary_content(filepath)
    except PairviewError as e:
        console.print(f"Error: {e}", style="red")
        return 1
    console.rule(Text(f"{filepath} [{old.charset}]"))
    console.print(Text(old.content), end="")
    return 0


def main():
    """Main entry point for pairview."""
    parser = _create_argument_parser()
    args, _unknown = parser.parse_known_args()

    launch_config = _resolve_launch_config(args)

    if args.print:
        sys.exit(print_content(launch_config.filepath))

    log.set_console_output(False)
    try:
        PairviewApp(launch_config, watch=not args.no_watch).run()
    finally:
        log.set_console_output(True)


if __name__ == "__main__":
    main()
