"""Turn documents into ordered lists of items.

Supported inputs:
- Plain text (.txt): one item per line
- Excel workbooks (.xlsx): every non-empty cell of every sheet, row by row
- Word documents (.docx): one item per paragraph line, then table cells

Items are trimmed and empty ones dropped. Workbooks are always
de-duplicated (first occurrence wins) since the same value commonly repeats
across sheets; other formats only when asked to.
"""

from __future__ import annotations
import io
import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, List
from zipfile import BadZipFile

import docx
from docx.opc.exceptions import PackageNotFoundError
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..errors import ParseError
from ..utils.normalization import dedupe_preserving_order, split_lines

logger = logging.getLogger(__name__)


class FileType(str, Enum):
    TEXT = "text"
    SPREADSHEET = "spreadsheet"
    WORD = "word"


_EXTENSIONS = {
    ".txt": FileType.TEXT,
    ".xlsx": FileType.SPREADSHEET,
    ".docx": FileType.WORD,
}

_DESCRIPTIONS = {
    FileType.TEXT: "Text File",
    FileType.SPREADSHEET: "Excel Spreadsheet",
    FileType.WORD: "Word Document",
}


def _extension(filename: str) -> str:
    return Path(filename).suffix.lower()


def is_supported(filename: str) -> bool:
    return _extension(filename) in _EXTENSIONS


def describe_file_type(filename: str) -> str:
    file_type = _EXTENSIONS.get(_extension(filename))
    return _DESCRIPTIONS[file_type] if file_type else "Unknown"


def detect_file_type(filename: str, extensions: Iterable[str] | None = None) -> FileType:
    """Map a filename to its FileType.

    Args:
        filename: Name (or path) of the document
        extensions: Optional allow-list such as [".txt", ".xlsx"]

    Raises:
        ParseError: If the extension is not supported or not allowed
    """
    ext = _extension(filename)
    allowed = {e.lower() for e in extensions} if extensions is not None else None
    if ext not in _EXTENSIONS or (allowed is not None and ext not in allowed):
        raise ParseError(f"Unsupported file type: {ext or filename}", source=filename)
    return _EXTENSIONS[ext]


def extract_text(text: str, deduplicate: bool = False) -> List[str]:
    """Split pasted text into items (one per non-empty line)."""
    items = split_lines(text)
    return dedupe_preserving_order(items) if deduplicate else items


def _parse_text(data: bytes, source: str) -> List[str]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Failed to read text file: {e}", source=source) from e
    return split_lines(text)


def _cell_values(rows: Iterable[tuple]) -> Iterable[str]:
    for row in rows:
        for value in row:
            if value is None:
                continue
            text = str(value).strip()
            if text:
                yield text


def _parse_spreadsheet(data: bytes, source: str) -> List[str]:
    try:
        workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, ValueError, OSError) as e:
        raise ParseError(f"Failed to parse Excel file: {e}", source=source) from e
    try:
        items: List[str] = []
        for sheet in workbook.worksheets:
            items.extend(_cell_values(sheet.iter_rows(values_only=True)))
    finally:
        workbook.close()
    return dedupe_preserving_order(items)


def _parse_word(data: bytes, source: str) -> List[str]:
    try:
        document = docx.Document(io.BytesIO(data))
    except (PackageNotFoundError, BadZipFile, KeyError, ValueError) as e:
        raise ParseError(f"Failed to parse Word document: {e}", source=source) from e
    items: List[str] = []
    for paragraph in document.paragraphs:
        items.extend(split_lines(paragraph.text))
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                items.extend(split_lines(cell.text))
    return items


_PARSERS = {
    FileType.TEXT: _parse_text,
    FileType.SPREADSHEET: _parse_spreadsheet,
    FileType.WORD: _parse_word,
}


def extract_bytes(data: bytes, file_type: FileType | str, deduplicate: bool = False, source: str = "<bytes>") -> List[str]:
    """Extract items from raw document bytes of a declared type.

    Raises:
        ParseError: If the type is unknown or the content cannot be parsed
    """
    try:
        file_type = FileType(file_type)
    except ValueError:
        raise ParseError(f"Unsupported file type: {file_type}", source=source) from None
    items = _PARSERS[file_type](data, source)
    if deduplicate:
        items = dedupe_preserving_order(items)
    logger.debug(f"Extracted {len(items)} items from {source} ({_DESCRIPTIONS[file_type]})")
    return items


def extract_items(path: str | Path, deduplicate: bool = False, extensions: Iterable[str] | None = None) -> List[str]:
    """Read ``path`` and extract its items based on the file extension.

    Raises:
        ParseError: Unsupported extension, unreadable file or malformed content
    """
    path = Path(path)
    file_type = detect_file_type(path.name, extensions)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ParseError(f"Failed to read {path.name}: {e}", source=str(path)) from e
    return extract_bytes(data, file_type, deduplicate=deduplicate, source=path.name)


__all__ = [
    "FileType",
    "is_supported",
    "describe_file_type",
    "detect_file_type",
    "extract_text",
    "extract_bytes",
    "extract_items",
]
