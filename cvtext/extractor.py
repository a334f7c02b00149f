# cvtext/extractor.py (pdfplumber fragments + python-docx flat text)
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

import docx
import pdfplumber

from .config import Settings, settings
from .document import PAGE_SEPARATOR, assemble_pages
from .fragments import Page, page_from_words
from .normalizer import normalize

# ---------------- Logger ----------------
logger = logging.getLogger("cvtext.extractor")
logger.setLevel(logging.INFO)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
logger.addHandler(handler)

SUPPORTED_EXTENSIONS = [".pdf", ".docx", ".txt"]


# ---------------- Helper Classes ----------------
class ExtractionResult:
    """Data container for one extracted file."""
    def __init__(self, source: Union[str, Path], pages: int, metadata: dict,
                 page_texts: List[str]):

        self.source = str(source)
        self.pages = pages
        self.page_texts = [t.strip() for t in page_texts if t and t.strip()]
        self.text = PAGE_SEPARATOR.join(self.page_texts)

        self.metadata = dict(metadata)
        self.metadata.setdefault("extracted_at", datetime.now(timezone.utc).isoformat())
        self.metadata["char_count"] = self.char_count

    @property
    def char_count(self) -> int:
        return len(self.text)

    def is_usable(self, min_chars: Optional[int] = None) -> bool:
        """False when too little text came out and the user should paste it instead."""
        if min_chars is None:
            min_chars = settings.MIN_EXTRACTED_CHARS
        return len(self.text.strip()) >= min_chars

    def to_jsonl(self) -> str:
        data = {
            "source": self.source,
            "pages": self.pages,
            "metadata": self.metadata,
            "page_texts": self.page_texts,
            "text": self.text,
            "char_count": self.char_count,
        }
        return json.dumps(data, ensure_ascii=False, default=float)


def failed_result(source: Union[str, Path], method: str, error: str, pages: int = 0) -> ExtractionResult:
    return ExtractionResult(
        source=source, pages=pages,
        metadata={"method": method, "error": error},
        page_texts=[],
    )


# ---------------- Main Extractor ----------------
class CVTextExtractor:
    def __init__(self, output_dir: Optional[str] = None, config: Optional[Settings] = None):
        self.config = config or settings
        self.output_dir = Path(output_dir or self.config.OUTPUT_DIR)

    # -------------- PDF --------------

    def read_pdf_pages(self, file_path: Path) -> List[Page]:
        """Decodes a PDF into positioned fragments, one Page per PDF page."""
        pages = []
        with pdfplumber.open(file_path) as pdf:
            for pdf_page in pdf.pages:
                words = pdf_page.extract_words(extra_attrs=["size"])
                pages.append(page_from_words(
                    words, pdf_page.width, pdf_page.height,
                    points_per_unit=self.config.PDF_POINTS_PER_UNIT,
                ))
        return pages

    def extract_pdf(self, file_path: Path) -> ExtractionResult:
        try:
            pages = self.read_pdf_pages(file_path)
        except Exception as e:
            logger.exception(f"❌ PDF decoding failed: {e}")
            return failed_result(file_path, "pdf_failure", str(e))

        page_texts = assemble_pages(pages, self.config)
        if not page_texts:
            logger.warning(f"⚠️ No text detected in {file_path}. The PDF may be scanned.")

        return ExtractionResult(
            source=file_path,
            pages=len(pages),
            metadata={"method": "pdfplumber_positioned"},
            page_texts=page_texts,
        )

    # -------------- Flat Text --------------

    def extract_docx(self, file_path: Path) -> ExtractionResult:
        try:
            doc = docx.Document(str(file_path))
            lines = [p.text for p in doc.paragraphs if p.text]
            for table in doc.tables:
                # Merged cells repeat once per grid column they span
                seen = set()
                for row in table.rows:
                    for cell in row.cells:
                        if cell._tc in seen:
                            continue
                        seen.add(cell._tc)
                        if cell.text.strip():
                            lines.append(cell.text)
        except Exception as e:
            logger.error(f"DOCX extraction failed: {e}")
            return failed_result(file_path, "docx_error", str(e))

        return ExtractionResult(
            source=file_path, pages=0,
            metadata={"method": "docx"},
            page_texts=[normalize("\n".join(lines))],
        )

    def extract_txt(self, file_path: Path) -> ExtractionResult:
        try:
            raw = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"TXT extraction failed: {e}")
            return failed_result(file_path, "txt_error", str(e))

        return ExtractionResult(
            source=file_path, pages=0,
            metadata={"method": "txt"},
            page_texts=[normalize(raw)],
        )

    # -------------- Main Entry Point --------------

    def extract(self, file_path: Union[str, Path]) -> ExtractionResult:
        """Main routing function to select the correct extractor."""
        file_path = Path(file_path)
        ext = file_path.suffix.lower()

        if ext not in SUPPORTED_EXTENSIONS:
            logger.warning(f"Unsupported file type: {ext}")
            return failed_result(file_path, "unsupported_type", f"File type {ext} not supported.")

        try:
            size = file_path.stat().st_size
        except OSError as e:
            logger.error(f"Cannot read {file_path}: {e}")
            return failed_result(file_path, "missing_file", str(e))
        if size > self.config.MAX_UPLOAD_BYTES:
            logger.warning(f"File too large: {file_path} ({size} bytes)")
            return failed_result(
                file_path, "file_too_large",
                f"File is {size} bytes; maximum is {self.config.MAX_UPLOAD_BYTES}.",
            )

        if ext == ".pdf":
            result = self.extract_pdf(file_path)
        elif ext == ".docx":
            result = self.extract_docx(file_path)
        else:
            result = self.extract_txt(file_path)

        if not result.is_usable(self.config.MIN_EXTRACTED_CHARS):
            logger.warning(
                f"⚠️ Only {result.char_count} characters extracted from {file_path.name}; "
                "the text should be pasted manually."
            )
        return result

    def process_and_save(self, file_path: Union[str, Path]) -> str:
        file_path = Path(file_path)
        result = self.extract(file_path)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_file = self.output_dir / f"{file_path.stem}.jsonl"
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(result.to_jsonl())

        logger.info(f"✅ Saved: {output_file}")
        return str(output_file)
