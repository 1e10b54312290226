"""CLI interface using typer."""

import asyncio
import json
import logging
import sys

import httpx
import typer

from .config import settings
from .core import Fetcher, HttpFetcher, HTTPResponseDescriptor, create
from .output import StreamingOutputWriter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="httpdesc",
    help="Build and inspect immutable HTTP response descriptors",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Configure logging before running a command."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def parse_headers(values: list[str]) -> dict[str, str]:
    """Parse repeated ``Name: value`` options into a header mapping."""
    headers: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected 'Name: value', got {item!r}", param_hint="--header")
        headers[name.strip()] = value.strip()
    return headers


def _echo_descriptor(descriptor: HTTPResponseDescriptor):
    typer.echo(json.dumps(descriptor.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def build(
    url: str = typer.Argument(..., help="URL the response belongs to"),
    status: int = typer.Option(200, "--status", "-s", help="Status code"),
    http_version: str = typer.Option(None, "--http-version", help="Protocol version label"),
    header: list[str] = typer.Option(None, "-H", "--header", help="Header field as 'Name: value'"),
    raw: bool = typer.Option(False, "--raw", help="Print the serialized response head"),
    output: str = typer.Option(None, "-o", "--output", help="Output file (JSON)"),
):
    """Build a descriptor from explicit fields."""
    descriptor = create(
        url=url,
        status_code=status,
        http_version=http_version or settings.http_version,
        header_fields=parse_headers(header or []),
    )

    if output:
        with open(output, "w") as f:
            json.dump(descriptor.to_dict(), f, indent=2, ensure_ascii=False)
        typer.echo(f"Saved to {output}")
    elif raw:
        sys.stdout.write(descriptor.serialized_data.decode("utf-8"))
    else:
        _echo_descriptor(descriptor)


FetchResult = tuple[str, HTTPResponseDescriptor | None, str | None]


async def _fetch_all(
    urls: list[str], method: str, fetcher: Fetcher | None = None
) -> list[FetchResult]:
    """Fetch each URL in turn, collecting descriptors or error messages."""
    if fetcher is None:
        fetcher = HttpFetcher(
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        )
    results = []
    try:
        for url in urls:
            try:
                descriptor = await fetcher.fetch(url, method=method)
            except httpx.HTTPError as e:
                logger.warning("Failed to fetch %s: %s", url, e)
                results.append((url, None, str(e) or type(e).__name__))
            else:
                results.append((url, descriptor, None))
    finally:
        await fetcher.close()
    return results


@app.command()
def fetch(
    urls: list[str] = typer.Argument(..., help="URLs to fetch"),
    head: bool = typer.Option(False, "--head", help="Send HEAD instead of GET"),
    output: str = typer.Option(None, "-o", "--output", help="Output file (JSONL)"),
):
    """Fetch URLs with httpx and describe each response."""
    method = "HEAD" if head else "GET"
    results = asyncio.run(_fetch_all(urls, method))

    failed = 0
    if output:
        with StreamingOutputWriter(output) as writer:
            for url, descriptor, error in results:
                if descriptor is not None:
                    writer.write_one(descriptor)
        typer.echo(f"Saved {writer.count} descriptors to {output}")

    for url, descriptor, error in results:
        if error is not None:
            failed += 1
            typer.echo(f"Error: {url}: {error}", err=True)
        elif not output:
            _echo_descriptor(descriptor)

    if failed:
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"httpdesc {__version__}")


if __name__ == "__main__":
    app()
