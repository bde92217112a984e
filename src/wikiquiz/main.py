# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for article previews, quiz generation, history and stored quiz lookup

from typing import NoReturn

import asyncclick as click
from rich.console import Console
from rich.panel import Panel

from wikiquiz.config import get_config
from wikiquiz.core.errors import ValidationError, WikiQuizError
from wikiquiz.core.service import QuizGenerationService
from wikiquiz.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
    with_quiz_context,
)
from wikiquiz.utils.rich_tables import (
    create_history_table,
    create_logging_status_table,
    create_preview_table,
    create_quiz_table,
    create_record_table,
    print_rich_table,
)

console = Console()


def _report_error(ctx, error: WikiQuizError) -> NoReturn:
    """Print a pipeline error in red and exit with status 1."""
    message = getattr(error, "message", None) or str(error)
    if isinstance(error, ValidationError) and error.field:
        message = f"{message} (field: {error.field})"
    console.print(f"[red]❌ {message}[/red]")
    ctx.exit(1)


def _display_record(record) -> None:
    print_rich_table(console, create_record_table(record))
    print_rich_table(console, create_quiz_table(record.quiz))
    for index, question in enumerate(record.quiz, start=1):
        console.print(f"[dim]{index}. {question.explanation}[/dim]")


@click.command()
@click.argument("url")
@click.pass_context
async def preview(ctx, url: str):
    """
    🔍 Extract a Wikipedia article without generating a quiz.

    Shows title, summary, sections and the heuristic entity buckets.
    """
    json_output = ctx.obj["json_output"]
    with with_quiz_context(url=url) as logger:
        logger.info("Starting article preview")
        service = QuizGenerationService.from_config()
        try:
            result = await service.preview(url)
        except WikiQuizError as e:
            logger.warning("Preview failed", error=str(e), error_type=type(e).__name__)
            _report_error(ctx, e)
        finally:
            await service.close()

        logger.info("Preview complete", title=result.title, section_count=len(result.sections))

        if json_output:
            console.print_json(data=result.to_json_dict())
        else:
            print_rich_table(console, create_preview_table(result))


@click.command()
@click.argument("url")
@click.option("--force-regenerate", is_flag=True, help="Bypass the stored quiz and extract fresh content")
@click.option("--store-raw-html", is_flag=True, help="Keep the fetched markup with the stored quiz")
@click.pass_context
async def generate(ctx, url: str, force_regenerate: bool, store_raw_html: bool):
    """
    🧠 Generate (or reuse) a quiz for a Wikipedia article.

    Stored quizzes are returned as-is unless --force-regenerate is given.
    """
    json_output = ctx.obj["json_output"]
    with with_pipeline_context("url_to_quiz", url=url) as logger:
        logger.info("Starting quiz generation", force_regenerate=force_regenerate)

        if not json_output:
            console.print(
                Panel.fit(
                    f"🧠 [bold cyan]Wiki Quiz Generator[/bold cyan] 🧠\nArticle: {url}",
                    border_style="magenta",
                )
            )

        service = QuizGenerationService.from_config()
        try:
            record = await service.generate(
                url, force_regenerate=force_regenerate, store_raw_html=store_raw_html
            )
        except WikiQuizError as e:
            logger.warning("Quiz generation failed", error=str(e), error_type=type(e).__name__)
            _report_error(ctx, e)
        finally:
            await service.close()

        logger.info("Quiz ready", quiz_id=record.id, question_count=len(record.quiz))

        if json_output:
            console.print_json(data=record.to_json_dict())
        else:
            _display_record(record)


@click.command()
@click.option("--query", "-q", default=None, help="Case-insensitive filter on title or URL")
@click.pass_context
async def history(ctx, query: str | None):
    """
    🗂️ List previously generated quizzes, newest first.

    Reads the configured storage. With WIKIQUIZ_STORAGE_BACKEND=memory each
    command starts with an empty store, so nothing from earlier runs is listed.
    """
    json_output = ctx.obj["json_output"]
    service = QuizGenerationService.from_config()
    try:
        entries = await service.history(query)
    finally:
        await service.close()

    if json_output:
        console.print_json(data=[entry.to_json_dict() for entry in entries])
        return

    if not entries:
        console.print("[yellow]No quizzes generated yet.[/yellow]")
        return

    print_rich_table(console, create_history_table(entries))


@click.command()
@click.argument("quiz_id")
@click.pass_context
async def show(ctx, quiz_id: str):
    """
    📄 Show one stored quiz by id.

    Needs the database backend; the memory backend keeps nothing between commands.
    """
    json_output = ctx.obj["json_output"]
    with with_quiz_context(quiz_id=quiz_id) as logger:
        service = QuizGenerationService.from_config()
        try:
            record = await service.get_quiz(quiz_id)
        except WikiQuizError as e:
            logger.warning("Quiz lookup failed", error=str(e), error_type=type(e).__name__)
            _report_error(ctx, e)
        finally:
            await service.close()

        if json_output:
            console.print_json(data=record.to_json_dict())
        else:
            _display_record(record)


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    try:
        config = get_config()
        mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

        # Use config defaults when CLI parameters are not provided
        final_log_level = log_level or config.log_level
        final_log_file = log_file or (str(config.log_file) if config.log_file else None)

        configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)
    except (FileNotFoundError, PermissionError, OSError):
        # Fall back to minimal logging configuration
        mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE
        configure_logging(mode=mode, log_level=log_level or "INFO", log_file=log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🧠 Wiki Quiz - Multiple-choice quizzes from Wikipedia articles

    Fetch an English Wikipedia article, extract its structure and entities,
    and turn them into a short heuristic quiz that is stored for reuse.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(preview)
app.add_command(generate)
app.add_command(history)
app.add_command(show)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
