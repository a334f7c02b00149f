from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Line grouping
    LINE_Y_TOLERANCE: float = Field(0.3, gt=0)

    # Line assembly: approximate glyph width per character and the gap that counts as a word break
    CHAR_WIDTH_FACTOR: float = Field(0.1, ge=0)
    WORD_GAP_THRESHOLD: float = Field(0.5, ge=0)

    # Column layout classification
    MIN_LAYOUT_FRAGMENTS: int = Field(10, ge=0)  # fewer fragments never split a page
    LEFT_REGION_RATIO: float = Field(0.7, gt=0)
    RIGHT_REGION_RATIO: float = Field(0.5, gt=0)
    MIN_COLUMN_FRAGMENTS: int = Field(5, ge=0)
    COLUMN_BALANCE_RATIO: float = Field(0.15, ge=0, le=1)
    DIVIDER_SEARCH_RATIO: float = Field(0.3, ge=0)
    DEFAULT_DIVIDER_RATIO: float = Field(0.4, ge=0)

    # Paragraph assembly
    PARAGRAPH_GAP: float = Field(1.5, ge=0)
    LINE_GAP: float = Field(0.8, ge=0)
    HEADING_FONT_RATIO: float = Field(1.2, gt=0)

    # Upload workflow
    MIN_EXTRACTED_CHARS: int = Field(50, ge=0)
    MAX_UPLOAD_BYTES: int = Field(5 * 1024 * 1024, gt=0)
    PDF_POINTS_PER_UNIT: float = Field(16.0, gt=0)  # pdfplumber reports points
    PAGE_WORKERS: int = Field(1, ge=1)
    OUTPUT_DIR: str = "./extracted_cvs"

    model_config = SettingsConfigDict(
        env_prefix="CVTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
