import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .config import Settings, settings
from .fragments import Page
from .layout import classify, split_columns
from .normalizer import normalize
from .style_processor import StyleProcessor

logger = logging.getLogger("cvtext.document")

PAGE_SEPARATOR = "\n\n---\n\n"
SIDEBAR_SEPARATOR = "\n\n--- Sidebar ---\n\n"


def assemble_page(page: Page, config: Optional[Settings] = None) -> str:
    """
    Reconstructs one page. On a two-column page the right (main) column comes
    first and the left sidebar follows the sidebar separator.
    """
    config = config or settings
    processor = StyleProcessor(config)
    fragments = list(page.fragments)

    layout = classify(fragments, page.effective_width, config)
    if not layout.is_multi_column:
        return normalize(processor.process_fragments(fragments))

    left, right = split_columns(fragments, layout.divider_x)
    main = normalize(processor.process_fragments(right))
    sidebar = normalize(processor.process_fragments(left))
    if not sidebar:
        return main
    return f"{main}{SIDEBAR_SEPARATOR}{sidebar}".strip()


def assemble_pages(pages: Sequence[Page], config: Optional[Settings] = None,
                   max_workers: Optional[int] = None) -> List[str]:
    """Returns the non-empty page texts in page order."""
    config = config or settings
    workers = max_workers or config.PAGE_WORKERS

    if workers > 1 and len(pages) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            texts = list(pool.map(lambda p: assemble_page(p, config), pages))
    else:
        texts = [assemble_page(p, config) for p in pages]

    kept = [t for t in texts if t.strip()]
    if len(kept) < len(texts):
        logger.debug(f"Skipped {len(texts) - len(kept)} empty page(s)")
    return kept


def assemble_document(pages: Sequence[Page], config: Optional[Settings] = None,
                      max_workers: Optional[int] = None) -> str:
    if not pages:
        return ""
    return PAGE_SEPARATOR.join(assemble_pages(pages, config, max_workers))
