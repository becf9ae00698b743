"""
Data loading utilities.

Handles:
- Collecting document images from files and directories
- Loading previously extracted records (JSON, or an earlier CSV/Excel export)
"""

import os
import re
import json
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from config import ACCEPTED_MIME_PREFIX, EXPORT_COLUMNS
from extractors.base_extractor import detect_document_type
from records import ExtractedRecord
from utils.normalization import standardize_column_names

logger = logging.getLogger(__name__)


@dataclass
class SourceDocument:
    """One uploaded document waiting for extraction."""
    file_name: str
    content: bytes
    mime_type: str
    document_type: str


def _expand_paths(paths):
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {path}")
        if path.is_dir():
            for child in sorted(path.iterdir()):
                if child.is_file():
                    yield child
        else:
            yield path


def load_documents(paths, group=None):
    """
    Load document images from files and directories.

    Directories expand to their files in sorted order. Files that are not
    images are skipped with a warning.

    Args:
        paths: Iterable of file or directory paths
        group: Upload group ('passport', 'visa', 'flight') or None to detect
               the type from each file name

    Returns:
        list: SourceDocument objects in load order

    Raises:
        FileNotFoundError: If a path doesn't exist
    """
    documents = []

    for path in _expand_paths(paths):
        mime_type, _ = mimetypes.guess_type(str(path))
        if not mime_type or not mime_type.startswith(ACCEPTED_MIME_PREFIX):
            logger.warning(f"Invalid file type: {path.name} is not an image - skipping")
            continue

        # Group prefix gives the extractor the same hint as the upload screen
        hint = f"{group}-{path.name}" if group else path.name

        documents.append(SourceDocument(
            file_name=hint,
            content=path.read_bytes(),
            mime_type=mime_type,
            document_type=detect_document_type(hint),
        ))

    logger.info(f"Loaded {len(documents)} document(s)" + (f" ({group})" if group else ""))
    return documents


def _strip_text_marker(value):
    """Undo the ="..." wrapper written around date columns on export."""
    if isinstance(value, str):
        match = re.match(r'^="(.*)"$', value, flags=re.DOTALL)
        if match:
            return match.group(1).replace('""', '"')
    return value


def _load_records_json(filepath):
    with open(filepath, encoding='utf-8-sig') as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as e:
            raise ValueError(f"Records file is not valid JSON: {filepath} ({e})") from e

    if isinstance(data, dict):
        # Single record, or {"records": [...]}
        data = data.get('records', [data])

    if not isinstance(data, list):
        raise ValueError(f"Records file must contain a list of records: {filepath}")

    return [ExtractedRecord.from_dict(item) for item in data if isinstance(item, dict)]


def _load_records_table(filepath):
    if filepath.suffix.lower() == '.csv':
        df = pd.read_csv(filepath, dtype=str, keep_default_na=False, encoding='utf-8-sig')
    else:
        df = pd.read_excel(filepath, dtype=str)

    logger.info(f"Loaded {len(df)} rows from {filepath.name}")

    column_map = standardize_column_names(df)
    missing_columns = [header for header, _ in EXPORT_COLUMNS[:2] if header.lower() not in column_map]
    if missing_columns:
        logger.error(f"Missing critical columns in records file: {missing_columns}")
        logger.error(f"Available columns: {list(df.columns)}")
        raise ValueError(f"Missing critical columns: {missing_columns}")

    records = []
    for _, row in df.iterrows():
        values = {}
        for header, attr in EXPORT_COLUMNS:
            actual_col = column_map.get(header.lower())
            if actual_col:
                values[attr] = _strip_text_marker(row.get(actual_col))
        records.append(ExtractedRecord.from_dict(values))

    return records


def load_records(filepath):
    """
    Load previously extracted records.

    Supported formats:
    - .json: list of records with OCR field names (as written by --raw-output)
    - .csv / .xlsx: an earlier export with the standard column headers

    Args:
        filepath: Path to records file

    Returns:
        list: ExtractedRecord objects in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file can't be read as records
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Records file not found: {filepath}")

    filepath = Path(filepath)
    logger.info(f"Loading records from: {filepath}")

    suffix = filepath.suffix.lower()
    if suffix == '.json':
        records = _load_records_json(filepath)
    elif suffix in ('.csv', '.xlsx', '.xls'):
        records = _load_records_table(filepath)
    else:
        raise ValueError(f"Unsupported records file type: {filepath.suffix}")

    logger.info(f"Successfully loaded {len(records)} record(s)")
    return records
