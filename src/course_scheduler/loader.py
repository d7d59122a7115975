"""Catalog loading from JSON, CSV and Excel files."""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from .exceptions import CatalogLoadError
from .models import CatalogLoadResult, Course

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


def _read_json_records(path: Path) -> list[Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("courses")
    if not isinstance(data, list):
        raise CatalogLoadError(str(path), 'expected a list of courses or {"courses": [...]}')

    return data


def _read_table_records(path: Path) -> list[dict[str, Any]]:
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path, dtype=str)
    else:
        df = pd.read_excel(path, dtype=str, engine="openpyxl")

    df.columns = [str(column).strip() for column in df.columns]
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def load_catalog(path: str | Path) -> CatalogLoadResult:
    """Load catalog sections from a file.

    Supported formats are JSON (a list of records or an object with a
    "courses" list), CSV and Excel. Column or key names may be snake_case or
    the camelCase names of the web catalog export.

    Records that cannot be turned into a Course are skipped and reported in
    the result's warnings.

    Args:
        path: Path to the catalog file

    Returns:
        CatalogLoadResult with the loaded courses

    Raises:
        CatalogLoadError: If the file cannot be read or has an unknown format
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if not path.exists():
        raise CatalogLoadError(str(path), "file not found")

    try:
        if suffix == ".json":
            records = _read_json_records(path)
        elif suffix == ".csv" or suffix in EXCEL_SUFFIXES:
            records = _read_table_records(path)
        else:
            raise CatalogLoadError(str(path), f"unsupported file type '{suffix or path.name}'")
    except CatalogLoadError:
        raise
    except Exception as e:
        raise CatalogLoadError(str(path), str(e)) from e

    result = CatalogLoadResult(source=str(path))

    for index, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            result.warnings.append(f"Record {index}: expected an object, got {type(record).__name__}")
            continue

        missing = [key for key in ("id", "subject") if record.get(key) in (None, "")]
        if missing:
            result.warnings.append(f"Record {index}: missing {', '.join(missing)}")
            continue

        try:
            result.courses.append(Course.from_dict(record))
        except (TypeError, ValueError) as e:
            result.warnings.append(f"Record {index}: {e}")

    logger.info(
        f"Loaded {result.total_courses} courses ({result.total_subjects} subjects) "
        f"from {path.name}"
    )
    if result.warnings:
        logger.warning(f"Skipped {len(result.warnings)} catalog records")

    return result
