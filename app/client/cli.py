"""
app/client/cli.py

Command-line front end for UploadClient:

    summarize-doc report.pdf --api-url http://localhost:5000
"""

from __future__ import annotations

import time

import click

from app.client.upload_client import FileCandidate, UploadClient
from app.core.exceptions import ConfigurationError
from app.core.logger import configure_logging

_TYPEWRITER_DELAY = 0.01


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--api-url",
    envvar="SUMMARIZER_API_URL",
    default=None,
    help="Gateway base URL (defaults to $SUMMARIZER_API_URL).",
)
@click.option(
    "--typewriter/--no-typewriter",
    default=True,
    help="Print the summary one character at a time.",
)
@click.option("--debug", is_flag=True, help="Verbose logging.")
def main(path: str, api_url: str | None, typewriter: bool, debug: bool) -> None:
    """Upload a PDF or DOCX file and print its summary."""
    configure_logging(debug)

    client = UploadClient(api_url)
    if not client.select_file(FileCandidate.from_path(path)):
        raise click.ClickException(client.error)

    try:
        result = client.submit()
    except ConfigurationError as exc:
        raise click.UsageError(f"{exc} Pass --api-url or set SUMMARIZER_API_URL.") from exc

    if not result.ok:
        raise click.ClickException(result.error)

    if typewriter:
        for char in client.iter_summary():
            click.echo(char, nl=False)
            time.sleep(_TYPEWRITER_DELAY)
        click.echo()
    else:
        click.echo(result.summary)


if __name__ == "__main__":
    main()
