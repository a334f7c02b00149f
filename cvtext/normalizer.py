# cvtext/normalizer.py
"""
Canonicalizes assembled page text for downstream AI parsing.

The normalizer is an ordered list of named rewrite rules. Each rule is a pure
str -> str function, so rules can be tested on their own and the whole
pipeline is idempotent: running it on its own output changes nothing.
"""
import re
from dataclasses import dataclass
from typing import Callable, Sequence

BULLET = "• "
SUBLIST_INDENT = "   "

LINE_ENDING_RE = re.compile(r"\r\n?")
# Glyph bullets at line start, or a dash used as a bullet (dash followed by whitespace)
BULLET_RE = re.compile(r"^[^\S\n]*(?:[●○◦▪▸►‣⁃∙·•]|[-–—](?=\s|$))[^\S\n]*", re.MULTILINE)
NUMBERED_RE = re.compile(r"^[^\S\n]*(\d+)[.)](?=[^\S\n]|$)[^\S\n]*", re.MULTILINE)
LETTERED_RE = re.compile(r"^[^\S\n]*([A-Za-z])[.)][^\S\n]+(?=\S)", re.MULTILINE)
INNER_SPACE_RE = re.compile(r"(?<=\S)[^\S\n]+")
BLANK_RUN_RE = re.compile(r"\n(?:[^\S\n]*\n){2,}")
SUBLIST_LINE_RE = re.compile(r"^[A-Za-z]\. \S")


@dataclass(frozen=True)
class RewriteRule:
    name: str
    description: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


def normalize_line_endings(text: str) -> str:
    return LINE_ENDING_RE.sub("\n", text)


def rewrite_bullets(text: str) -> str:
    return BULLET_RE.sub(BULLET, text)


def rewrite_numbered(text: str) -> str:
    return NUMBERED_RE.sub(r"\1. ", text)


def rewrite_lettered(text: str) -> str:
    return LETTERED_RE.sub(SUBLIST_INDENT + r"\1. ", text)


def _is_capital(ch: str) -> bool:
    return ch.isalpha() and ch.isupper()


def is_heading_line(line: str) -> bool:
    """An all-caps line of at least two characters: capitals, whitespace and '&' only."""
    s = line.strip()
    if len(s) < 2 or not _is_capital(s[0]) or not (_is_capital(s[-1]) or s[-1] == "&"):
        return False
    return all(_is_capital(ch) or ch.isspace() or ch == "&" for ch in s)


def tag_headings(text: str) -> str:
    return "\n".join(
        f"\n## {line.strip()}\n" if is_heading_line(line) else line
        for line in text.split("\n")
    )


def collapse_spaces(text: str) -> str:
    # Leading indentation is left to trim_lines
    return INNER_SPACE_RE.sub(" ", text)


def collapse_blank_lines(text: str) -> str:
    return BLANK_RUN_RE.sub("\n\n", text)


def _trim_line(line: str) -> str:
    stripped = line.strip()
    if SUBLIST_LINE_RE.match(stripped):
        return SUBLIST_INDENT + stripped
    return stripped


def trim_lines(text: str) -> str:
    return "\n".join(_trim_line(line) for line in text.split("\n")).strip("\n")


RULES = (
    RewriteRule("line_endings", "CRLF and lone CR become LF", normalize_line_endings),
    RewriteRule("bullets", "bullet glyphs and leading dashes become '• '", rewrite_bullets),
    RewriteRule("numbered", "'1)' or '1.' at line start becomes '1. '", rewrite_numbered),
    RewriteRule("lettered", "'a)' or 'a.' at line start becomes an indented '   a. '", rewrite_lettered),
    RewriteRule("headings", "all-caps lines are wrapped as '\\n## LINE\\n'", tag_headings),
    RewriteRule("spaces", "runs of whitespace inside a line become one space", collapse_spaces),
    RewriteRule("blank_lines", "three or more line breaks become two", collapse_blank_lines),
    RewriteRule("trim", "strip every line and the document, keeping sub-list indents", trim_lines),
)


def normalize(raw_text: str, rules: Sequence[RewriteRule] = RULES) -> str:
    text = raw_text or ""
    for rule in rules:
        text = rule(text)
    return text
