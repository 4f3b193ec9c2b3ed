"""
Command line interface: generate a palette for one mood, or loop interactively.
"""

import argparse
import sys
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from colorify.core.config import MatchConfiguration, get_top_k
from colorify.core.display import (
    render_color_bar,
    render_examples,
    render_header,
    render_palette,
)
from colorify.core.errors import ColorifyError, InitializationError
from colorify.core.matcher import MoodPaletteMatcher
from util.logging import logger

EXIT_WORDS = ("quit", "exit")

console = Console(soft_wrap=True, highlight=False)
error_console = Console(stderr=True, soft_wrap=True, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorify",
        description="Generate color palettes based on mood descriptions using semantic matching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  colorify "cozy winter cabin"
  colorify -n 8 --bar "tropical beach sunset"
  colorify --interactive
        """,
    )
    parser.add_argument(
        "mood",
        nargs="?",
        help="The mood or scene to generate colors for"
    )
    parser.add_argument(
        "-n", "--count",
        default=None,
        metavar="COUNT",
        help="Number of colors to generate (default: COLORIFY_TOP_K or 5)"
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Run in interactive mode"
    )
    parser.add_argument(
        "-b", "--bar",
        action="store_true",
        help="Display a compact color bar"
    )
    parser.add_argument(
        "--no-names",
        action="store_true",
        help="Hide color names in bar mode"
    )
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Show example mood descriptions"
    )
    return parser


def parse_count(raw: Optional[str]) -> int:
    """Requested palette size; unparsable or non-positive values use the default."""
    if raw is None:
        return get_top_k()
    try:
        count = int(raw)
    except ValueError:
        return get_top_k()
    return count if count >= 1 else get_top_k()


def generate_and_display(matcher: MoodPaletteMatcher, mood: str, show_bar: bool, no_names: bool) -> bool:
    """Print one palette. Returns False when the query failed."""
    console.print(Text.assemble("\n", ("🔍 Analyzing mood:", "bright_blue"), " ", (mood, "italic white")))

    try:
        palette = matcher.generate(mood)
    except ColorifyError as e:
        console.print(Text(f"❌ Error generating palette: {e}"))
        return False

    if not palette:
        console.print(Text("No matching colors found. Try a different mood description.", style="red"))
        return True

    if show_bar:
        console.print(render_color_bar(palette, show_names=not no_names))
    else:
        console.clear()
        console.print(render_palette(palette))
    return True


def run_interactive(matcher: MoodPaletteMatcher, show_bar: bool, no_names: bool,
                    input_func: Callable[[str], str] = input) -> None:
    console.print(render_header())
    console.print(Text("\n🎨 Interactive Mode - Enter mood descriptions (Ctrl+C to exit)", style="bold green"))
    console.print(render_examples())

    while True:
        try:
            mood = input_func("\n🎭 Enter mood: ").strip()
        except (EOFError, KeyboardInterrupt):
            console.print(Text("\nGoodbye! 🌈", style="cyan"))
            break

        if not mood:
            console.print(Text("Please enter a mood description.", style="yellow"))
            continue

        if mood.lower() in EXIT_WORDS:
            console.print(Text("Goodbye! 🌈", style="cyan"))
            break

        generate_and_display(matcher, mood, show_bar, no_names)


def build_matcher(count: int) -> MoodPaletteMatcher:
    return MoodPaletteMatcher.from_env(MatchConfiguration(result_limit=count))


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.examples:
        console.print(render_examples())
        return 0

    if not args.interactive and not args.mood:
        console.print(render_header())
        console.print(Text("\nPlease provide a mood description or use --interactive mode.", style="red"))
        console.print(Text('Usage: colorify "cozy winter cabin" or colorify --interactive'))
        console.print(Text("Use --examples to see example mood descriptions."))
        return 0

    try:
        matcher = build_matcher(parse_count(args.count))
    except InitializationError as e:
        logger.error(f"Matcher initialization failed: {e}")
        error_console.print(Text(f"❌ Failed to initialize semantic matching system: {e}"))
        return 1

    if args.interactive:
        run_interactive(matcher, args.bar, args.no_names)
        return 0

    return 0 if generate_and_display(matcher, args.mood, args.bar, args.no_names) else 1


if __name__ == "__main__":
    sys.exit(main())
