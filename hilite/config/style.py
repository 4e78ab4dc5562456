"""
hilite.config.style

Turn a configuration's theme and highlight palette into a prompt_toolkit
style. Highlight categories become `hl.<category>` classes so fragments can
be tagged with `class:hl.comments` and the like.
"""

from typing import Dict

from prompt_toolkit.styles import Style

from hilite.config.models import Configuration
from hilite.text.color import to_hex

HIGHLIGHT_PREFIX = "hl."

# Files without a configured language are lexed by pygments; borrow the
# palette so they still match the theme.
PYGMENTS_CATEGORIES = {
    "pygments.comment": "comments",
    "pygments.comment.preproc": "macros",
    "pygments.keyword": "keywords",
    "pygments.keyword.constant": "booleans",
    "pygments.literal.string": "strings",
    "pygments.literal.string.char": "characters",
    "pygments.literal.number": "digits",
    "pygments.name.function": "functions",
    "pygments.name.class": "structs",
    "pygments.name.decorator": "attributes",
}


def highlight_class(category: str) -> str:
    return f"class:{HIGHLIGHT_PREFIX}{category}"


def style_rules(config: Configuration) -> Dict[str, str]:
    theme = config.theme
    rules = {
        # ------------------------------
        # BASE
        # ------------------------------
        "": f"{to_hex(theme.editor_fg)} bg:{to_hex(theme.editor_bg)}",
        # ------------------------------
        # CHROME
        # ------------------------------
        "status": f"{to_hex(theme.status_fg)} bg:{to_hex(theme.status_bg)}",
        "line-number": to_hex(theme.line_number_fg),
    }
    # ------------------------------
    # HIGHLIGHTS
    # ------------------------------
    for category, rgb in config.highlights.items():
        rules[f"{HIGHLIGHT_PREFIX}{category}"] = to_hex(rgb)
    # ------------------------------
    # PYGMENTS FALLBACK
    # ------------------------------
    for token, category in PYGMENTS_CATEGORIES.items():
        if category in config.highlights:
            rules[token] = to_hex(config.highlights[category])
    return rules


def theme_style(config: Configuration) -> Style:
    return Style.from_dict(style_rules(config))
