"""
Module: hilite.editor.text

A small line-by-line highlighter built on compiled rule sets, used to preview
a configuration in the terminal.

https://python-prompt-toolkit.readthedocs.io/en/master/pages/printing_text.html
"""

from typing import List, Optional, Tuple

import pygments
from prompt_toolkit.formatted_text import (
    FormattedText,
    PygmentsTokens,
    to_formatted_text,
)
from prompt_toolkit.formatted_text.utils import split_lines
from pygments.lexer import Lexer
from pygments.lexers import guess_lexer, guess_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from hilite.config.models import GeneralSettings
from hilite.config.style import highlight_class
from hilite.text.syntax import KEYWORDS, CompiledRuleSet

Fragment = Tuple[str, str]

# painted last so they win over anything matched inside them
PAINT_LAST = ("characters", "strings", "comments")


def paint_order(rules: CompiledRuleSet) -> List[str]:
    first = [KEYWORDS] if KEYWORDS in rules else []
    middle = [c for c in rules if c != KEYWORDS and c not in PAINT_LAST]
    last = [c for c in PAINT_LAST if c in rules]
    return first + middle + last


def categorize(line: str, rules: CompiledRuleSet) -> List[Optional[str]]:
    """Return the category covering each character of *line*."""
    cells: List[Optional[str]] = [None] * len(line)
    for category in paint_order(rules):
        for pattern in rules[category]:
            for match in pattern.finditer(line):
                # highlight the first group when the pattern has one
                start, end = match.span(1) if pattern.groups else match.span()
                if start < 0 or start == end:
                    continue
                cells[start:end] = [category] * (end - start)
    return cells


def highlight_line(line: str, rules: CompiledRuleSet) -> List[Fragment]:
    fragments: List[Fragment] = []
    cells = categorize(line, rules)
    start = 0
    for i in range(1, len(line) + 1):
        if i == len(line) or cells[i] != cells[start]:
            category = cells[start]
            style = highlight_class(category) if category else ""
            fragments.append((style, line[start:i]))
            start = i
    return fragments


def detect_lexer(path: str, source: str) -> Lexer:
    """
    Pick a pygments lexer for *source*: by file name first, then by content,
    and finally plain text.
    """
    try:
        return guess_lexer_for_filename(path, source)
    except ClassNotFound:
        pass

    try:
        return guess_lexer(source)
    except ClassNotFound:
        pass

    # last resort: plain text
    return TextLexer()


def lex_lines(path: str, source: str) -> List[List[Fragment]]:
    """Highlight *source* with pygments when no configured language applies."""
    tokens = list(pygments.lex(source, lexer=detect_lexer(path, source)))
    fragments = to_formatted_text(PygmentsTokens(tokens))
    lines = [list(line) for line in split_lines(fragments)]
    # pygments always terminates the text with a newline
    if lines and not "".join(text for _, text in lines[-1]):
        lines.pop()
    return lines


def gutter(number: int, width: int, general: GeneralSettings) -> Fragment:
    text = (
        " " * general.line_number_padding_left
        + str(number).rjust(width)
        + " " * general.line_number_padding_right
    )
    return ("class:line-number", text)


def render(
    source: str,
    general: GeneralSettings,
    rules: Optional[CompiledRuleSet] = None,
    path: str = "",
) -> FormattedText:
    """Render *source* as numbered, highlighted lines."""
    source = source.expandtabs(general.tab_width)
    if rules:
        lines = [highlight_line(line, rules) for line in source.splitlines()]
    else:
        lines = lex_lines(path, source)

    width = len(str(len(lines)))
    fragments: List[Fragment] = []
    for number, line in enumerate(lines, start=1):
        fragments.append(gutter(number, width, general))
        fragments.extend(line)
        fragments.append(("", "\n"))
    return FormattedText(fragments)
