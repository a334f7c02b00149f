from .config import Settings, settings
from .document import PAGE_SEPARATOR, SIDEBAR_SEPARATOR, assemble_document, assemble_page
from .fragments import DEFAULT_FONT_SIZE, Page, TextFragment
from .layout import ColumnLayout, classify, split_columns
from .normalizer import normalize
from .style_processor import StyleProcessor

__all__ = [
    "Settings", "settings",
    "PAGE_SEPARATOR", "SIDEBAR_SEPARATOR", "assemble_document", "assemble_page",
    "DEFAULT_FONT_SIZE", "Page", "TextFragment",
    "ColumnLayout", "classify", "split_columns",
    "normalize",
    "StyleProcessor",
]
