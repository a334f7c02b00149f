# cvtext/utils.py
from pathlib import Path
from typing import Iterator, Optional, Sequence

from .extractor import SUPPORTED_EXTENSIONS


def iter_files(directory: str, extensions: Optional[Sequence[str]] = None) -> Iterator[str]:
    extensions = extensions or SUPPORTED_EXTENSIONS
    p = Path(directory)
    if p.is_file():
        if p.suffix.lower() in extensions:
            yield str(p)
        return
    for f in sorted(p.rglob("*")):
        if f.is_file() and f.suffix.lower() in extensions:
            yield str(f)
