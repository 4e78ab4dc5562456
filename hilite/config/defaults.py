"""
Module: hilite.config.defaults

The built-in configuration used when no usable config file exists. The values
are fixed: a user without a config file gets working Rust highlighting.
"""

from types import MappingProxyType

from hilite.config.models import (
    Configuration,
    GeneralSettings,
    LanguageDefinition,
    ThemeColors,
)

RUST_KEYWORDS = (
    "as", "break", "const", "continue", "crate", "else", "enum", "extern", "fn",
    "for", "if", "impl", "in", "let", "loop", "match", "mod", "move", "mut",
    "pub", "ref", "return", "self", "static", "struct", "super", "trait",
    "type", "unsafe", "use", "where", "while", "async", "await", "dyn",
    "abstract", "become", "box", "do", "final", "macro", "override", "priv",
    "typeof", "unsized", "virtual", "yield", "try", "'static",
)  # fmt: skip


def default_config() -> Configuration:
    """Return a freshly constructed default configuration."""
    return Configuration(
        general=GeneralSettings(
            line_number_padding_right=2,
            line_number_padding_left=1,
            tab_width=4,
            undo_period=5,
        ),
        theme=ThemeColors(
            editor_bg=(41, 41, 61),
            editor_fg=(255, 255, 255),
            status_bg=(59, 59, 84),
            status_fg=(35, 240, 144),
            line_number_fg=(65, 65, 98),
        ),
        highlights=MappingProxyType(
            {
                "comments": (113, 113, 169),
                "keywords": (134, 76, 232),
                "strings": (39, 222, 145),
                "characters": (40, 198, 232),
                "digits": (40, 198, 232),
                "booleans": (86, 217, 178),
                "functions": (47, 141, 252),
                "structs": (47, 141, 252),
                "macros": (223, 52, 249),
                "attributes": (40, 198, 232),
            }
        ),
        languages=(
            LanguageDefinition(
                name="Rust",
                icon="\ue7a8 ",
                extensions=("rs",),
                keywords=RUST_KEYWORDS,
                definitions=MappingProxyType(
                    {
                        "comments": ("(?m)(//.*)$",),
                        "strings": ('(".*?")',),
                        "characters": ("('.')",),
                        "digits": (r"(\d+.\d+|\d+)",),
                        "booleans": (r"\b(true|false)\b",),
                        "functions": (r"\b\s+([a-z_]*)\b\(",),
                        "structs": (r"\b([A-Z][A-Za-z_]*)\b\s*\{",),
                        "macros": (r"\b([a-z_][a-zA-Z_]*!)",),
                        "attributes": (r"(?m)^\s*(#(?:!|)\[.*?\])",),
                    }
                ),
            ),
        ),
    )
