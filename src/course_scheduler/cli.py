"""CLI entry point for the course scheduler."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import CourseFilter, Preferences, load_preferences, parse_time_range
from .exceptions import SchedulerError
from .exporters import get_exporter
from .filters import filter_courses_for_generation, group_courses_by_subject
from .loader import load_catalog
from .models import Course, ParsedSchedule, SearchMode, StatusFilter
from .normalization import parse_day_token
from .parser import ScheduleParser
from .scheduler import (
    ScheduleGenerationResult,
    ScheduleGenerator,
    find_conflicts,
    total_units,
    unique_subjects,
)

app = typer.Typer(
    name="course-scheduler",
    help="Parse catalog schedules and generate conflict-free timetables",
    add_completion=False,
)
console = Console()


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


_FORMAT_SUFFIXES = {
    OutputFormat.json: ".json",
    OutputFormat.csv: ".csv",
    OutputFormat.excel: ".xlsx",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def parse(
    schedule: Annotated[
        str,
        typer.Argument(help='Schedule string, e.g. "M/W/F | 9:00AM-10:30AM | ACAD309"'),
    ],
    strict_pairing: Annotated[
        bool,
        typer.Option("--strict-pairing", help="Fail when day and time counts cannot be paired"),
    ] = False,
) -> None:
    """Parse a schedule string and show its meeting slots."""
    parser = ScheduleParser(strict_pairing=strict_pairing)

    try:
        parsed = parser.parse_strict(schedule)
    except SchedulerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _show_parsed_schedule(parsed)


@app.command()
def validate(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Catalog file (JSON, CSV or Excel)"),
    ],
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Check that every schedule in a catalog can be parsed."""
    _configure_logging(verbose)

    try:
        with console.status("[bold green]Loading catalog..."):
            catalog = load_catalog(catalog_file)
    except SchedulerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    unparseable = [course for course in catalog.courses if course.parsed_schedule is None]
    conflicts = [
        (first, second)
        for first, second in find_conflicts(catalog.courses)
        if first.subject != second.subject
    ]

    console.print(f"\n[bold]Validation Results for:[/bold] {catalog_file.name}")
    console.print(f"  Courses: {catalog.total_courses}")
    console.print(f"  Subjects: {catalog.total_subjects}")

    if unparseable:
        console.print("[bold red]✗ Catalog has issues[/bold red]")
    else:
        console.print("[bold green]✓ All schedules parsed[/bold green]")

    if unparseable:
        console.print(f"\n[bold red]Unparseable schedules ({len(unparseable)}):[/bold red]")
        for course in unparseable:
            console.print(f"  [red]• {course.key}: {course.schedule!r}[/red]")

    if catalog.warnings:
        console.print(f"\n[bold yellow]Warnings ({len(catalog.warnings)}):[/bold yellow]")
        for warning in catalog.warnings:
            console.print(f"  [yellow]• {warning}[/yellow]")

    if conflicts:
        console.print(f"\n  Overlapping sections of different subjects: {len(conflicts)}")
        if verbose:
            for first, second in conflicts[:20]:
                console.print(f"    {first.key} <-> {second.key}")
            if len(conflicts) > 20:
                console.print(f"    ... and {len(conflicts) - 20} more")

    if unparseable:
        raise typer.Exit(1)


@app.command()
def generate(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Catalog file (JSON, CSV or Excel)"),
    ],
    mode: Annotated[
        Optional[SearchMode],
        typer.Option("--mode", "-m", help="Search strategy"),
    ] = None,
    max_units: Annotated[
        Optional[str],
        typer.Option("--max-units", help="Total units cap"),
    ] = None,
    max_gap: Annotated[
        Optional[str],
        typer.Option("--max-gap", help="Longest allowed same-day gap in hours"),
    ] = None,
    order: Annotated[
        Optional[str],
        typer.Option("--order", help="Preferred time-of-day order, e.g. morning,afternoon"),
    ] = None,
    minimize_days: Annotated[
        Optional[bool],
        typer.Option("--minimize-days/--no-minimize-days", help="Prefer fewer campus days"),
    ] = None,
    preferences_file: Annotated[
        Optional[Path],
        typer.Option("--preferences", "-p", help="JSON preferences file"),
    ] = None,
    status: Annotated[
        StatusFilter,
        typer.Option("--status", help="Section status to consider"),
    ] = StatusFilter.OPEN,
    section_type: Annotated[
        Optional[list[str]],
        typer.Option("--section-type", help="Allowed section type (AP3, AP4, AP5)"),
    ] = None,
    exclude_day: Annotated[
        Optional[list[str]],
        typer.Option("--exclude-day", help="Day to keep free (M, T, W, TH, F, S, SU)"),
    ] = None,
    exclude_time: Annotated[
        Optional[list[str]],
        typer.Option("--exclude-time", help="Time range to keep free, e.g. 07:30-09:00"),
    ] = None,
    count: Annotated[
        int,
        typer.Option("--count", "-n", min=1, help="Number of schedules to generate"),
    ] = 1,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Random seed for fast mode"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Export the first generated schedule"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.json,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Generate conflict-free schedules from a catalog."""
    _configure_logging(verbose)

    try:
        preferences = _build_preferences(
            preferences_file, mode, max_units, max_gap, order, minimize_days
        )
        course_filter = _build_course_filter(status, section_type, exclude_day, exclude_time)

        with console.status("[bold green]Loading catalog..."):
            catalog = load_catalog(catalog_file)
    except (SchedulerError, OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    candidates = filter_courses_for_generation(catalog.courses, course_filter)
    courses_by_subject = group_courses_by_subject(candidates)

    console.print(f"\n[bold]Schedule Generation for:[/bold] {catalog_file.name}")
    console.print(f"  Candidate sections: {len(candidates)} of {catalog.total_courses}")
    console.print(f"  Subjects: {len(courses_by_subject)}")
    console.print(f"  Search mode: {preferences.search_mode.value}")

    if not courses_by_subject:
        console.print("[bold yellow]Warning:[/bold yellow] No candidate sections after filtering")
        raise typer.Exit(1)

    generator = ScheduleGenerator(preferences, seed=seed)
    results: list[ScheduleGenerationResult] = []

    for number in range(1, count + 1):
        known = len(generator.session.generated_schedules)
        with console.status(f"[bold green]Generating schedule {number}..."):
            result = generator.generate(courses_by_subject)
        if result.is_empty or len(generator.session.generated_schedules) == known:
            console.print(f"\n[yellow]No further schedule found after {number - 1}[/yellow]")
            break
        results.append(result)
        _show_result(result, number)

    if not results:
        console.print("[bold red]No schedule satisfies the current constraints[/bold red]")
        raise typer.Exit(1)

    if output:
        if not output.suffix:
            output = output.with_suffix(_FORMAT_SUFFIXES[format])
        exporter = get_exporter(format.value)
        with console.status(f"[bold green]Exporting to {format.value}..."):
            exporter.export(results[0], output, preferences)
        console.print(f"\n[bold green]✓[/bold green] Exported to: {output}")


def _build_preferences(
    preferences_file: Path | None,
    mode: SearchMode | None,
    max_units: str | None,
    max_gap: str | None,
    order: str | None,
    minimize_days: bool | None,
) -> Preferences:
    """Merge the preferences file with command line overrides."""
    record: dict[str, Any] = {}
    if preferences_file is not None:
        record = load_preferences(preferences_file).to_dict()

    overrides = {
        "search_mode": mode,
        "max_units": max_units,
        "max_gap_hours": max_gap,
        "preferred_time_of_day_order": order,
        "minimize_days_on_campus": minimize_days,
    }
    record.update({key: value for key, value in overrides.items() if value is not None})

    return Preferences.from_dict(record)


def _build_course_filter(
    status: StatusFilter,
    section_types: list[str] | None,
    excluded_days: list[str] | None,
    excluded_times: list[str] | None,
) -> CourseFilter:
    days = set()
    for token in excluded_days or []:
        parsed = parse_day_token(token)
        if parsed is None:
            raise ValueError(f"Invalid day: {token}")
        days.update(parsed)

    return CourseFilter(
        status=status,
        section_types=frozenset(item.strip().upper() for item in section_types or []),
        excluded_days=frozenset(days),
        excluded_time_ranges=tuple(parse_time_range(value) for value in excluded_times or []),
    )


def _show_parsed_schedule(parsed: ParsedSchedule) -> None:
    """Show the slots of a parsed schedule in a table."""
    if parsed.is_tba:
        console.print("[bold]TBA[/bold] (no fixed meeting time)")
        return

    table = Table(title="Meeting Slots")
    table.add_column("#", style="dim")
    table.add_column("Days", style="cyan")
    table.add_column("Start", style="green")
    table.add_column("End", style="green")
    table.add_column("Room", style="magenta")

    for index, slot in enumerate(parsed.all_time_slots, start=1):
        table.add_row(
            str(index),
            "/".join(day.value for day in slot.sorted_days),
            slot.start_time or "-",
            slot.end_time or "-",
            slot.room or "-",
        )

    console.print(table)


def _show_result(result: ScheduleGenerationResult, number: int) -> None:
    """Show a generated schedule and its aggregates."""
    table = Table(title=f"Schedule {number}")
    table.add_column("Subject", style="cyan")
    table.add_column("Section", style="blue")
    table.add_column("Title", max_width=40)
    table.add_column("Schedule", style="green")
    table.add_column("Room", style="magenta")
    table.add_column("Units", justify="right")

    for course in result.best_schedule:
        table.add_row(
            course.subject,
            course.section,
            course.title[:40],
            _schedule_text(course),
            course.room,
            f"{course.unit_value:g}",
        )

    console.print(table)
    console.print(
        f"  Total units: {total_units(result.best_schedule):g} | "
        f"Subjects: {unique_subjects(result.best_schedule)} | "
        f"Score: {result.best_score:g} | "
        f"Time preference: {result.best_time_pref_score} | "
        f"Campus days: {result.best_campus_days}"
    )


def _schedule_text(course: Course) -> str:
    parsed = course.parsed_schedule
    if parsed is None or parsed.is_tba:
        return course.schedule or "-"
    return "; ".join(
        f"{'/'.join(day.value for day in slot.sorted_days)} {slot.start_time}-{slot.end_time}"
        for slot in parsed.all_time_slots
    )


if __name__ == "__main__":
    app()
