"""Finds the symbols exported by the L-SMASH shared library.

The public header is not parsed, it is scanned line by line relying on the
formatting convention it follows:

- a function prototype has its parameter list opening on a line of its own,
  so a lone ``(`` makes the previous line the return type and function name

    const char *lsmash_foo
    (
        lsmash_root_t *root
    );

- codec types are defined with the ``DEFINE_ISOM_CODEC_TYPE`` and
  ``DEFINE_QTFF_CODEC_TYPE`` macros, the first argument being the constant
  to export

    DEFINE_ISOM_CODEC_TYPE( ISOM_CODEC_TYPE_AVC1_VIDEO, ISOM_4CC( 'a', 'v', 'c', '1' ) );

"""

import re
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple

# Entry points used by the cli apps which are not in the public header.
NON_PUBLIC_SYMBOLS: Tuple[str, ...] = (
    "lsmash_importer_open",
    "lsmash_importer_get_access_unit",
    "lsmash_importer_close",
    "lsmash_importer_get_track_count",
    "lsmash_importer_get_last_delta",
    "lsmash_importer_construct_timeline",
    "lsmash_duplicate_summary",
    "lsmash_string_from_wchar",
    "lsmash_win32_fopen")


class LsmashExportsError(Exception):
    pass


class ExtractionError(LsmashExportsError):

    def __init__(self, rule: str, lineno: int, text: str):
        self.rule = rule
        self.lineno = lineno
        self.text = text
        super().__init__(f"Unable to extract a symbol ({rule}) at line {lineno}: {text!r}")


class Lookback(NamedTuple):
    current: str
    previous: str = ""

    def advance(self, line: str) -> "Lookback":
        return Lookback(line, self.current)


class Rule(NamedTuple):
    """A recognition rule

    `guard` decides whether the rule applies to a line, `pattern` is then
    applied to the `previous` or `current` line (named by `source`) and its
    first group is the symbol.
    """
    name: str
    guard: re.Pattern
    source: str
    pattern: re.Pattern
    needs_previous: bool = False

    def matches(self, lookback: Lookback) -> bool:
        if self.needs_previous and not lookback.previous:
            return False
        return bool(self.guard.match(lookback.current))

    def extract(self, lookback: Lookback) -> Optional[str]:
        match = self.pattern.match(getattr(lookback, self.source))
        return match.group(1) if match else None


RULES: Tuple[Rule, ...] = (
    Rule(
        name="function",
        guard=re.compile(r"^\s*\(\s*$"),
        source="previous",
        pattern=re.compile(r".+\s+\*?(.+)"),
        needs_previous=True),
    Rule(
        name="codec_type",
        guard=re.compile(r"^DEFINE_(ISOM|QTFF)_CODEC_TYPE\("),
        source="current",
        pattern=re.compile(r"^.+\s+((ISOM|QT|LSMASH)_CODEC_TYPE_.+?),\s+.+")))


def classify(lookback: Lookback, lineno: int = 0) -> Optional[Tuple[str, str]]:
    """Returns the `(rule name, symbol)` recognized for the current line, if any

    Raises `ExtractionError` if a rule applies to the line but its pattern
    does not find a symbol.
    """
    for rule in RULES:
        if not rule.matches(lookback):
            continue
        symbol = rule.extract(lookback)
        if symbol is None:
            raise ExtractionError(
                rule.name,
                lineno - 1 if rule.source == "previous" else lineno,
                getattr(lookback, rule.source))
        return rule.name, symbol
    return None


def scan(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yields `(rule name, symbol)` for each symbol found, in header order"""
    lookback = Lookback("")
    for lineno, line in enumerate(lines, start=1):
        lookback = lookback.advance(line.rstrip("\r\n"))
        found = classify(lookback, lineno)
        if found:
            yield found
