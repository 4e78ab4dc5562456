"""
Module: hilite.editor.__main__

Preview a source file highlighted with the configured rules.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from hilite.config import default_path, load
from hilite.config.style import theme_style
from hilite.editor.text import render
from hilite.text.syntax import compile_rules, find_language


def status_line(path: Path, language_label: str, status: str) -> FormattedText:
    return FormattedText([("class:status", f" {language_label} {path.name} | {status} ")])


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Preview syntax highlighting")
    parser.add_argument("path", help="Source file to highlight")
    parser.add_argument("--config", default=None, help="Config file path")
    args = parser.parse_args(argv)

    path = Path(args.path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config, status = load(args.config or default_path())
    extension = path.suffix[1:]
    language = find_language(config, extension)
    label = f"{language.icon}{language.name}" if language else "Plain"

    style = theme_style(config)
    print_formatted_text(
        render(source, config.general, compile_rules(config, extension), str(path)),
        style=style,
        end="",
    )
    print_formatted_text(status_line(path, label, str(status)), style=style)
    return 0


if __name__ == "__main__":
    sys.exit(main())
