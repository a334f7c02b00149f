# cvtext/style_processor.py

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import Settings, settings
from .fragments import TextFragment

logger = logging.getLogger("cvtext.style_processor")

PARAGRAPH_BREAK = "\n\n"
LINE_BREAK = "\n"
CONTINUATION = " "


@dataclass(frozen=True)
class Line:
    y_key: float
    fragments: Tuple[TextFragment, ...]

    @property
    def avg_font_size(self) -> float:
        return float(np.mean([f.font_size for f in self.fragments]))


def quantize_y(y: float, tolerance: float) -> float:
    # Round half up, not half to even
    return math.floor(y / tolerance + 0.5) * tolerance


def _x_order(f: TextFragment):
    return (f.x, f.y, f.text)


class StyleProcessor:
    """
    Turns the fragments of one column into text: groups them into lines,
    orders each line left to right and joins lines into paragraphs.
    """
    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings

    def group_lines(self, fragments: Sequence[TextFragment]) -> List[Line]:
        """
        Groups fragments into lines sorted top to bottom.

        Fragments are walked in y order and a new line starts whenever the
        vertical distance to the previous fragment reaches the tolerance, so
        decoder baseline jitter never splits a visual line. The line key is
        the quantized y of its topmost fragment.
        """
        tolerance = self.config.LINE_Y_TOLERANCE
        ordered = sorted(fragments, key=lambda f: (f.y, f.x, f.text))

        groups: List[List[TextFragment]] = []
        prev_y = None
        for f in ordered:
            if prev_y is None or f.y - prev_y >= tolerance:
                groups.append([])
            groups[-1].append(f)
            prev_y = f.y

        return [
            Line(y_key=quantize_y(group[0].y, tolerance), fragments=tuple(sorted(group, key=_x_order)))
            for group in groups
        ]

    def assemble_line(self, fragments: Sequence[TextFragment]) -> str:
        """Joins a line's fragments left to right, adding a space across visible gaps."""
        parts = []
        last_x_end = None
        for f in sorted(fragments, key=_x_order):
            if last_x_end is not None and f.x - last_x_end > self.config.WORD_GAP_THRESHOLD:
                parts.append(" ")
            parts.append(f.text)
            last_x_end = f.x + len(f.text) * self.config.CHAR_WIDTH_FACTOR
        return "".join(parts).strip()

    def line_separator(self, gap: float, font_size: float, last_font_size: Optional[float]) -> str:
        if gap > self.config.PARAGRAPH_GAP:
            return PARAGRAPH_BREAK
        if last_font_size is not None and font_size > last_font_size * self.config.HEADING_FONT_RATIO:
            return PARAGRAPH_BREAK
        if gap > self.config.LINE_GAP:
            return LINE_BREAK
        return CONTINUATION

    def assemble_column(self, lines: Sequence[Line]) -> str:
        """Concatenates lines top to bottom with paragraph, line or continuation separators."""
        out = []
        last_y = None
        last_font_size = None
        for line in sorted(lines, key=lambda ln: ln.y_key):
            text = self.assemble_line(line.fragments)
            if not text:
                continue
            font_size = line.avg_font_size
            if last_y is not None:
                out.append(self.line_separator(line.y_key - last_y, font_size, last_font_size))
            out.append(text)
            last_y = line.y_key
            last_font_size = font_size
        return "".join(out)

    def process_fragments(self, fragments: Sequence[TextFragment]) -> str:
        """Processes the fragments of a single column into raw (unnormalized) text."""
        if not fragments:
            return ""
        lines = self.group_lines(fragments)
        logger.debug(f"Grouped {len(fragments)} fragments into {len(lines)} lines")
        return self.assemble_column(lines)
