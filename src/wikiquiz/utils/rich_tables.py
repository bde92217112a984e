# ABOUTME: Rich table utilities for styled, colorful CLI displays
# ABOUTME: Provides pre-configured table generators for previews, quizzes, history and logging status

from datetime import UTC, datetime
from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.table import Table

from wikiquiz.core.models import ArticlePreview, HistoryEntry, KeyEntities, QuizQuestion, StoredQuizRecord


def format_timestamp(epoch_seconds: int) -> str:
    return datetime.fromtimestamp(epoch_seconds, tz=UTC).strftime("%Y-%m-%d %H:%M:%S")


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, width=None, no_wrap=False)
    table.add_column("Value", style=value_style, width=None, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table with zebra striping.

    Args:
        title: Table title with emoji/styling
        columns: List of (column_name, column_style) tuples
        rows: List of row data
        title_style: Style for the table title
        header_style: Style for column headers
        alternate_row_styles: Alternating row styles for zebra striping
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def _join_or_none(values: list[str]) -> str:
    return ", ".join(values) if values else "None"


def create_preview_table(preview: ArticlePreview) -> Table:
    """Create a table describing an extracted article.

    Args:
        preview: Extraction-only view of the article

    Returns:
        Styled article summary table
    """
    entities: KeyEntities = preview.key_entities
    data = {
        "📛 Title": preview.title,
        "🌐 URL": preview.url,
        "📝 Summary": preview.summary,
        "📑 Sections": _join_or_none(preview.sections),
        "👤 People": _join_or_none(entities.people),
        "🏛️ Organizations": _join_or_none(entities.organizations),
        "📍 Locations": _join_or_none(entities.locations),
    }
    return create_key_value_table(title="📖 Article Preview", data=data)


def create_record_table(record: StoredQuizRecord) -> Table:
    """Create a status table for a stored quiz."""
    data = {
        "🆔 Quiz ID": record.id,
        "📛 Title": record.title,
        "🌐 URL": record.url,
        "📅 Created At": format_timestamp(record.created_at),
        "❓ Questions": str(len(record.quiz)),
        "🔗 Related Topics": _join_or_none(record.related_topics),
        "🔑 Content Hash": record.content_hash[:12],
        "📄 Raw HTML": f"{len(record.raw_html):,} chars" if record.raw_html else "Not stored",
    }
    return create_key_value_table(title="🧠 Stored Quiz", data=data, title_style="bold green")


def create_quiz_table(questions: list[QuizQuestion]) -> Table:
    """Create a table listing every question with its options and answer.

    Args:
        questions: Generated questions in quiz order

    Returns:
        Multi-column quiz table
    """
    rows = [
        [
            str(index),
            question.difficulty.value,
            question.question,
            "\n".join(question.options),
            question.answer,
        ]
        for index, question in enumerate(questions, start=1)
    ]
    return create_multi_column_table(
        title="❓ Quiz",
        columns=[
            ("#", "dim"),
            ("Difficulty", "yellow"),
            ("Question", "bold white"),
            ("Options", "cyan"),
            ("Answer", "bold green"),
        ],
        rows=rows,
    )


def create_history_table(entries: list[HistoryEntry]) -> Table:
    """Create a table of previously generated quizzes, newest first."""
    rows = [[entry.id, entry.title, entry.url, format_timestamp(entry.created_at)] for entry in entries]
    return create_multi_column_table(
        title="🗂️ Quiz History",
        columns=[("ID", "dim"), ("Title", "bold white"), ("URL", "cyan"), ("Created At", "green")],
        rows=rows,
        box_style=SIMPLE,
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()
    console.print(table)
    console.print()
