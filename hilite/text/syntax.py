"""
Module: hilite.text.syntax

Compile a language's highlighting rules into regular expressions.

The result maps a highlight category (e.g. "comments", "strings") to the
ordered list of compiled patterns for that category. Keywords always end up
under the "keywords" category, each wrapped in word boundaries.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import regex as re

from hilite.config.models import Configuration, LanguageDefinition
from hilite.text.logger import get_logger

KEYWORDS = "keywords"

# dotall combined with multiline is not supported by the highlighter
UNSUPPORTED_PREFIXES = ("(?ms)", "(?sm)")

CompiledRuleSet = Dict[str, List[re.Pattern]]

logger = get_logger(__name__)


@dataclass(frozen=True)
class Compiled:
    """Outcome of compiling one pattern string."""

    source: str
    pattern: Optional[re.Pattern] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.pattern is not None


def is_supported(source: str) -> bool:
    return not source.startswith(UNSUPPORTED_PREFIXES)


def try_compile(source: str) -> Compiled:
    try:
        return Compiled(source, pattern=re.compile(source))
    except re.error as e:
        return Compiled(source, error=str(e))


def compile_patterns(sources: Iterable[str]) -> List[re.Pattern]:
    """Compile *sources*, keeping only the patterns that compiled."""
    results = [try_compile(source) for source in sources if is_supported(source)]
    for result in results:
        if not result.ok:
            logger.debug(f"Dropped pattern {result.source!r}: {result.error}")
    return [result.pattern for result in results if result.ok]


def keyword_pattern(keyword: str) -> re.Pattern:
    """Match *keyword* as a standalone token. Raises regex.error if malformed."""
    return re.compile(rf"\b({keyword})\b")


def find_language(
    config: Configuration, extension: str
) -> Optional[LanguageDefinition]:
    """Return the first language claiming *extension* (no leading dot)."""
    for language in config.languages:
        if extension in language.extensions:
            return language
    return None


def compile_rules(config: Configuration, extension: str) -> CompiledRuleSet:
    """Compile the highlighting rules of the language for *extension*."""
    language = find_language(config, extension)
    if language is None:
        return {}

    rules: CompiledRuleSet = {
        category: compile_patterns(sources)
        for category, sources in language.definitions.items()
    }
    rules[KEYWORDS] = [keyword_pattern(keyword) for keyword in language.keywords]
    return rules


__all__ = [
    "KEYWORDS",
    "UNSUPPORTED_PREFIXES",
    "Compiled",
    "CompiledRuleSet",
    "compile_patterns",
    "compile_rules",
    "find_language",
    "is_supported",
    "keyword_pattern",
    "try_compile",
]
