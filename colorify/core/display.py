"""
Terminal rendering for palettes. Renderers return rich Text; callers print
them through a Console. Swatches use the color's own hex value.
"""

from typing import List, Sequence

from rich.style import Style
from rich.text import Text

from colorify.vector.types import ScoredMatch

from .catalog import hex_to_rgb

BLOCK = "██"
RULE_WIDTH = 50
DESCRIPTION_WIDTH = 60

EXAMPLE_MOODS = [
    "cozy cabin in winter",
    "tropical beach sunset",
    "cyberpunk city at night",
    "peaceful forest morning",
    "vintage romance",
    "energetic summer festival",
]


def color_block(hex_value: str) -> Text:
    """Swatch in the given color; plain white when the hex is malformed."""
    rgb = hex_to_rgb(hex_value)
    if rgb is None:
        return Text(BLOCK, style=Style(color="white"))
    r, g, b = rgb
    return Text(BLOCK, style=Style(color=f"#{r:02x}{g:02x}{b:02x}"))


def wrap_text(text: str, width: int) -> List[str]:
    """Greedy word wrap. A single word longer than width gets its own line."""
    lines = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + len(word) + 1 <= width:
            current += " " + word
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def render_palette(matches: Sequence[ScoredMatch]) -> Text:
    if not matches:
        return Text("No colors found for the given mood.", style="red")

    rule = Text("─" * RULE_WIDTH, style="bright_black")
    output = Text("\n")
    output.append("🎨 Your Mood Palette:", style="bold cyan")
    output.append("\n")
    output.append_text(rule)

    for i, match in enumerate(matches):
        item = match.item
        output.append("\n")
        output.append(f"{i + 1}.", style="bright_black")
        output.append(" ")
        output.append_text(color_block(item.hex))
        output.append(" ")
        output.append(item.name, style="bold")
        output.append(" | ")
        output.append(item.hex, style="bright_black")
        output.append(" | Score: ")
        output.append(f"{match.score:.3f}", style="bright_green")
        for line in wrap_text(item.description, DESCRIPTION_WIDTH):
            output.append("\n   ")
            output.append(line, style="italic bright_black")
        if i < len(matches) - 1:
            output.append("\n")

    output.append("\n")
    output.append_text(rule)
    return output


def render_color_bar(matches: Sequence[ScoredMatch], show_names: bool = True) -> Text:
    if not matches:
        return Text("")

    output = Text("\n🌈 ")
    for match in matches:
        output.append_text(color_block(match.item.hex))
    output.append(" Your palette")
    if show_names:
        for match in matches:
            output.append("\n")
            output.append_text(color_block(match.item.hex))
            output.append(f" {match.item.name} ({match.item.hex}) - {match.score:.3f}", style="bright_green")
    output.append("\n")
    return output


def render_header() -> Text:
    return Text("\n".join([
        "╔══════════════════════════════════════════════════╗",
        "║                   🎨 COLORIFY 🎨                 ║",
        "║            Mood to Color Palette CLI             ║",
        "╚══════════════════════════════════════════════════╝",
    ]), style="cyan")


def render_examples() -> Text:
    output = Text("\n")
    output.append("💡 Try these example moods:", style="bold yellow")
    for example in EXAMPLE_MOODS:
        output.append("\n   • ")
        output.append(example, style="italic")
    return output
