"""Export functionality for generated schedules."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import pandas as pd

from .config import Preferences
from .scheduler.constraints import total_units, unique_subjects
from .scheduler.models import ScheduleGenerationResult


def schedule_rows(result: ScheduleGenerationResult) -> list[dict[str, Any]]:
    """One row per selected section, with its parsed meeting days and times."""
    rows = []
    for course in result.best_schedule:
        parsed = course.parsed_schedule
        rows.append(
            {
                "id": course.id,
                "subject": course.subject,
                "section": course.section,
                "title": course.title,
                "schedule": course.schedule,
                "room": course.room,
                "units": course.unit_value,
                "days": "/".join(day.value for day in parsed.days) if parsed else "",
                "start_time": parsed.start_time if parsed else None,
                "end_time": parsed.end_time if parsed else None,
            }
        )
    return rows


def summary_rows(
    result: ScheduleGenerationResult, preferences: Preferences | None = None
) -> list[dict[str, Any]]:
    """Metric/value rows describing the result."""
    rows = [
        {"metric": "courses", "value": len(result.best_schedule)},
        {"metric": "total_units", "value": total_units(result.best_schedule)},
        {"metric": "unique_subjects", "value": unique_subjects(result.best_schedule)},
        {"metric": "score", "value": result.best_score},
        {"metric": "time_pref_score", "value": result.best_time_pref_score},
        {"metric": "campus_days", "value": result.best_campus_days},
    ]
    if preferences is not None:
        rows.append({"metric": "search_mode", "value": preferences.search_mode.value})
    return rows


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(
        self,
        result: ScheduleGenerationResult,
        output_path: str | Path,
        preferences: Preferences | None = None,
    ) -> None:
        """Export a generation result to file.

        Args:
            result: ScheduleGenerationResult to export
            output_path: Path to output file
            preferences: Preferences used for the run, included when given
        """
        pass


class JSONExporter(BaseExporter):
    """Export to JSON format."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        """Initialize exporter.

        Args:
            indent: JSON indentation level
            ensure_ascii: If False, allows non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(
        self,
        result: ScheduleGenerationResult,
        output_path: str | Path,
        preferences: Preferences | None = None,
    ) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = result.to_dict()
        data["total_units"] = total_units(result.best_schedule)
        data["unique_subjects"] = unique_subjects(result.best_schedule)
        if preferences is not None:
            data["preferences"] = preferences.to_dict()

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=self.indent, ensure_ascii=self.ensure_ascii)


class CSVExporter(BaseExporter):
    """Export the selected sections to a single CSV file."""

    def export(
        self,
        result: ScheduleGenerationResult,
        output_path: str | Path,
        preferences: Preferences | None = None,
    ) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        rows = schedule_rows(result)
        fieldnames = list(rows[0].keys()) if rows else ["id", "subject", "section"]

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format (Schedule and Summary sheets)."""

    def export(
        self,
        result: ScheduleGenerationResult,
        output_path: str | Path,
        preferences: Preferences | None = None,
    ) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        rows = schedule_rows(result)
        schedule_df = pd.DataFrame(rows) if rows else pd.DataFrame(columns=["id", "subject"])
        summary_df = pd.DataFrame(summary_rows(result, preferences))

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            schedule_df.to_excel(writer, sheet_name="Schedule", index=False)
            summary_df.to_excel(writer, sheet_name="Summary", index=False)


def get_exporter(format_type: str) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    return exporters[format_type]()
