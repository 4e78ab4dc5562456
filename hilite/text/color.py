# hilite/text/color.py
"""
Color is the spice of life.

Convenience helpers for 24-bit (truecolor) ANSI output. Theme and highlight
colors are stored as RGB triplets and turned into escape sequences here.

References:
- **Rendering:** https://en.wikipedia.org/wiki/ANSI_escape_code#Select_Graphic_Rendition_parameters
- **24-Bit Coloring:** https://en.wikipedia.org/wiki/ANSI_escape_code#24-bit
"""

from typing import Iterable, Optional, Tuple

ESCAPE = "\x1b"
RESET = f"{ESCAPE}[0m"

RGB = Tuple[int, int, int]


def in_range(n: int) -> bool:
    return 0 <= n <= 255


def _components(rgb: Iterable[int]) -> RGB:
    values = tuple(rgb)
    if len(values) != 3:
        raise ValueError("color must have exactly 3 components")
    for n in values:
        if not isinstance(n, int) or isinstance(n, bool) or not in_range(n):
            raise ValueError("color components must be integers 0-255")
    return values  # type: ignore[return-value]


def rgb_fg(rgb: RGB) -> str:
    """Return a foreground escape sequence for the given RGB triplet."""
    r, g, b = _components(rgb)
    return f"{ESCAPE}[38;2;{r};{g};{b}m"


def rgb_bg(rgb: RGB) -> str:
    """Return a background escape sequence for the given RGB triplet."""
    r, g, b = _components(rgb)
    return f"{ESCAPE}[48;2;{r};{g};{b}m"


def to_hex(rgb: RGB) -> str:
    """Return the `#rrggbb` form used by prompt_toolkit styles."""
    r, g, b = _components(rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def paint(text: str, fg: Optional[RGB] = None, bg: Optional[RGB] = None) -> str:
    """Wrap *text* with optional foreground/background truecolor codes."""
    parts = []
    if fg is not None:
        parts.append(rgb_fg(fg))
    if bg is not None:
        parts.append(rgb_bg(bg))
    parts.append(text)
    parts.append(RESET)
    return "".join(parts)


# usage example
if __name__ == "__main__":
    """Print a swatch for every highlight color in the default palette."""

    from argparse import ArgumentParser

    from hilite.config import default_config

    parser = ArgumentParser()
    parser.add_argument(
        "-s",
        "--swatch",
        default="█",
        help="Character used for each sampled block (default: █).",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=4,
        help="Number of swatch characters per color (default: 4).",
    )
    args = parser.parse_args()

    palette = default_config().highlights
    for name, rgb in sorted(palette.items()):
        print(f"{paint(args.swatch * args.width, fg=rgb)} {name:<12} {to_hex(rgb)}")
