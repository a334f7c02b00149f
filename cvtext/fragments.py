# cvtext/fragments.py
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

DEFAULT_FONT_SIZE = 12.0
DEFAULT_PAGE_WIDTH = 50.0


@dataclass(frozen=True)
class TextFragment:
    """One positioned run of decoded text. Coordinates use a top-left origin."""
    x: float
    y: float
    text: str
    font_size: Optional[float] = DEFAULT_FONT_SIZE

    def __post_init__(self):
        if self.font_size is None:
            object.__setattr__(self, "font_size", DEFAULT_FONT_SIZE)


@dataclass(frozen=True)
class Page:
    fragments: Tuple[TextFragment, ...] = field(default_factory=tuple)
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def effective_width(self) -> float:
        return self.width if self.width is not None else DEFAULT_PAGE_WIDTH


def make_fragment(x: float, y: float, text: str, font_size: Optional[float] = None) -> Optional[TextFragment]:
    """Builds a fragment, or returns None when the text is blank."""
    if text is None or not str(text).strip():
        return None
    size = float(font_size) if font_size else DEFAULT_FONT_SIZE
    return TextFragment(x=float(x), y=float(y), text=str(text), font_size=size)


def fragments_from_records(records: Iterable[Dict[str, Any]]) -> List[TextFragment]:
    """
    Converts decoder records into fragments.
    Accepts either {"x", "y", "text", "font_size"} or pdfplumber-style
    {"x0", "top", "text", "size"} keys; blank records are dropped.
    """
    fragments = []
    for rec in records:
        x = rec.get("x", rec.get("x0", 0.0))
        y = rec.get("y", rec.get("top", 0.0))
        size = rec.get("font_size", rec.get("size"))
        frag = make_fragment(x, y, rec.get("text", ""), size)
        if frag is not None:
            fragments.append(frag)
    return fragments


def page_from_words(words: List[Dict[str, Any]], width: Optional[float], height: Optional[float],
                    points_per_unit: float = 1.0) -> Page:
    """Scales pdfplumber word dicts (points) into page units and builds a Page."""
    scaled = []
    for w in words:
        scaled.append({
            "x": w["x0"] / points_per_unit,
            "y": w["top"] / points_per_unit,
            "text": w.get("text", ""),
            "font_size": w.get("size"),
        })
    return Page(
        fragments=tuple(fragments_from_records(scaled)),
        width=width / points_per_unit if width is not None else None,
        height=height / points_per_unit if height is not None else None,
    )
