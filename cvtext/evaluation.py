# cvtext/evaluation.py
"""
Scores a reconstructed CV text against a hand-made ground truth.

Both sides go through the normalizer first, so headings and bullets are
compared in their canonical '## ' and '• ' forms. Besides plain text
similarity the report measures how much of the layout survived: whether the
reference lines come out in the same order, and how many headings and bullet
items were recovered.
"""
import re
from dataclasses import asdict, dataclass
from typing import List, Sequence

from rapidfuzz import fuzz, process
from rapidfuzz.distance import LCSseq, Levenshtein

from .document import PAGE_SEPARATOR, SIDEBAR_SEPARATOR
from .normalizer import BULLET, normalize

HEADING_PREFIX = "## "
LINE_MATCH_CUTOFF = 80.0
SEPARATOR_LINES = {PAGE_SEPARATOR.strip(), SIDEBAR_SEPARATOR.strip()}


@dataclass
class EvaluationReport:
    char_similarity: float
    word_error_rate: float
    reading_order: float
    heading_recall: float
    bullet_recall: float

    def to_dict(self) -> dict:
        return asdict(self)


def content_lines(text: str) -> List[str]:
    """Normalized non-empty lines, without page and sidebar separators."""
    lines = [ln.strip() for ln in normalize(text).split("\n")]
    return [ln for ln in lines if ln and ln not in SEPARATOR_LINES]


def _flat(lines: Sequence[str]) -> str:
    return re.sub(r"\s+", " ", " ".join(lines)).strip().lower()


def char_similarity(ref_lines: Sequence[str], hyp_lines: Sequence[str]) -> float:
    return Levenshtein.normalized_similarity(_flat(ref_lines), _flat(hyp_lines))


def word_error_rate(ref_lines: Sequence[str], hyp_lines: Sequence[str]) -> float:
    r = _flat(ref_lines).split()
    h = _flat(hyp_lines).split()
    if not r:
        return 0.0 if not h else 1.0
    return Levenshtein.distance(r, h) / len(r)


def _match_positions(ref_lines: Sequence[str], hyp_lines: Sequence[str]) -> List[int]:
    positions = []
    for line in ref_lines:
        match = process.extractOne(line, hyp_lines, scorer=fuzz.ratio, score_cutoff=LINE_MATCH_CUTOFF)
        if match is not None:
            positions.append(match[2])
    return positions


def reading_order_score(ref_lines: Sequence[str], hyp_lines: Sequence[str]) -> float:
    """
    Share of reference lines found in the extraction in their original order:
    the longest run of matched positions that never goes backwards.
    """
    if not ref_lines:
        return 1.0
    positions = _match_positions(ref_lines, hyp_lines)
    in_order = LCSseq.similarity(positions, sorted(positions))
    return in_order / len(ref_lines)


def recall(ref_items: Sequence[str], hyp_items: Sequence[str]) -> float:
    if not ref_items:
        return 1.0
    return len(_match_positions(ref_items, hyp_items)) / len(ref_items)


def evaluate_lines(ref_lines: Sequence[str], hyp_lines: Sequence[str]) -> EvaluationReport:
    def headings(lines):
        return [ln for ln in lines if ln.startswith(HEADING_PREFIX)]

    def bullets(lines):
        return [ln for ln in lines if ln.startswith(BULLET)]

    return EvaluationReport(
        char_similarity=char_similarity(ref_lines, hyp_lines),
        word_error_rate=word_error_rate(ref_lines, hyp_lines),
        reading_order=reading_order_score(ref_lines, hyp_lines),
        heading_recall=recall(headings(ref_lines), headings(hyp_lines)),
        bullet_recall=recall(bullets(ref_lines), bullets(hyp_lines)),
    )


def evaluate_pair(ref_text: str, hyp_text: str) -> dict:
    return evaluate_lines(content_lines(ref_text), content_lines(hyp_text)).to_dict()
