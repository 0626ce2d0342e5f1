"""Letter intake CLI."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any
from uuid import UUID

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from patra.config import settings
from patra.errors import PatraError
from patra.extraction import StructuredDataExtractor
from patra.intake import LetterIntakeService
from patra.models import StructuredRecord
from patra.ocr import TesseractOCR
from patra.storage import FileRepository, close_db, get_session, init_db

app = typer.Typer(
    name="patra",
    help="Structured data extraction for scanned inward letters",
    add_completion=False,
)
console = Console()


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def record_table(record: StructuredRecord) -> Table:
    """Render a structured record as a two-column table."""
    table = Table(title="Extracted data", show_lines=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    for field, value in record.to_dict().items():
        table.add_row(field, value or "[dim]-[/dim]")
    return table


def print_result(record: StructuredRecord, as_json: bool) -> None:
    if as_json:
        console.print_json(data=record.to_dict())
    else:
        console.print(record_table(record))


def run(coro) -> Any:
    """Run a storage coroutine, disposing of the engine afterwards."""

    async def runner():
        try:
            return await coro
        finally:
            await close_db()

    try:
        return asyncio.run(runner())
    except PatraError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    """Structured data extraction for scanned inward letters."""
    setup_logging(log_level)


@app.command()
def extract(
    text_file: Path = typer.Argument(..., help="OCR text file to extract from"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
) -> None:
    """Extract structured data from already OCR'd text."""
    if not text_file.is_file():
        console.print(f"[bold red]Error:[/bold red] Text file not found: {text_file}")
        raise typer.Exit(code=1)

    text = text_file.read_text(encoding="utf-8")
    record = StructuredDataExtractor().extract(text)
    print_result(record, as_json)


@app.command()
def process(
    pdf_path: Path = typer.Argument(..., help="Path to scanned letter (PDF or image)"),
    store: bool = typer.Option(False, "--store", help="Store the file and extracted data"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
) -> None:
    """OCR a scanned letter and extract structured data."""
    console.print(f"[bold blue]Processing:[/bold blue] {pdf_path}")

    if store:

        async def upload() -> dict:
            async with get_session() as session:
                return await LetterIntakeService(session).upload_and_extract(pdf_path)

        response = run(upload())
        console.print(f"[green]Stored as[/green] {response['file']['id']}")
        print_result(StructuredRecord.model_validate(response["extractedData"]), as_json)
        return

    try:
        ocr_output = TesseractOCR().process(pdf_path)
    except PatraError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[dim]{ocr_output.page_count} page(s) read with {ocr_output.model}[/dim]")
    print_result(StructuredDataExtractor().extract(ocr_output), as_json)


@app.command()
def show(
    file_id: UUID = typer.Argument(..., help="Stored file ID"),
    as_json: bool = typer.Option(False, "--json", help="Print the full response as JSON"),
) -> None:
    """Show the extracted data of a stored file."""

    async def fetch() -> dict:
        async with get_session() as session:
            return await LetterIntakeService(session).get_extracted_data(file_id)

    response = run(fetch())
    if as_json:
        console.print_json(json.dumps(response, ensure_ascii=False))
        return
    info = response["fileInfo"]
    console.print(f"[bold]{info['originalName']}[/bold] [dim]({info['pageCount']} page(s), {info['model']})[/dim]")
    console.print(record_table(StructuredRecord.model_validate(response["data"])))


@app.command()
def reextract(
    file_id: UUID = typer.Argument(..., help="Stored file ID"),
) -> None:
    """Regenerate the extracted data of a stored file from its OCR text."""

    async def regenerate() -> dict:
        async with get_session() as session:
            return await LetterIntakeService(session).reextract(file_id)

    response = run(regenerate())
    console.print(f"[green]{response['message']}[/green]")
    console.print(record_table(StructuredRecord.model_validate(response["extractedData"])))


@app.command(name="list")
def list_files(
    limit: int = typer.Option(50, help="Maximum files to show"),
) -> None:
    """List stored files, newest first."""

    async def fetch() -> list:
        async with get_session() as session:
            rows = await FileRepository(session).list_recent(limit)
            return [FileRepository.to_model(row) for row in rows]

    files = run(fetch())
    table = Table(title="Stored files")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Uploaded")
    table.add_column("Extracted", justify="center")
    for file in files:
        table.add_row(
            str(file.id),
            file.original_name,
            str(file.file_size),
            file.uploaded_at.strftime("%Y-%m-%d %H:%M"),
            "yes" if file.has_extracted_data else "no",
        )
    console.print(table)


@app.command()
def delete(
    file_id: UUID = typer.Argument(..., help="Stored file ID"),
) -> None:
    """Delete a stored file record and its uploaded copy."""

    async def remove() -> None:
        async with get_session() as session:
            await LetterIntakeService(session).delete(file_id)

    run(remove())
    console.print(f"[green]Deleted[/green] {file_id}")


@app.command(name="init-db")
def init_database() -> None:
    """Create database tables."""
    run(init_db())
    console.print("[green]Database initialized[/green]")


if __name__ == "__main__":
    app()
