"""Commands that talk to a running server through ApiClient"""

import json
import sys

import click
from rich.console import Console
from rich.table import Table

from inspiration_list.client import DEFAULT_BASE_URL, ApiClient, ApiError, HttpxSender, compose, with_retry

console = Console()

api_url_option = click.option(
    '--api-url',
    envvar='INSPIRATION_API_URL',
    default=DEFAULT_BASE_URL,
    show_default=True,
    help='Base URL of the inspiration API',
)


def get_api_client(api_url: str) -> ApiClient:
    """Client with two retries on network and server errors."""
    send = compose(HttpxSender(api_url), with_retry(max_retries=2, retry_delay=1.0))
    return ApiClient(api_url, send=send)


def _fail(action: str, error: ApiError):
    status = "network error" if error.is_network_error else f"HTTP {error.status}"
    console.print(f"[red]Failed to {action} ({status}): {error.message}[/red]")
    sys.exit(1)


@click.command()
@click.argument('text')
@api_url_option
@click.option('--json', 'as_json', is_flag=True, help='Print the raw JSON record')
def create_record(text: str, api_url: str, as_json: bool):
    """
    Create an inspiration from TEXT.

    Examples:
        inspiration-list create "我想做一个语音记录的APP"
        inspiration-list create "Build a habit tracker" --json
    """
    client = get_api_client(api_url)
    try:
        record = client.create_inspiration(text)
    except ApiError as e:
        _fail("create inspiration", e)

    if as_json:
        click.echo(json.dumps(record, indent=2, ensure_ascii=False))
        return

    content = record["enhancedContent"]
    console.print(f"[green]Created {record['id']}[/green]")
    console.print(f"[bold]Category:[/bold] {content['category']}")
    console.print(f"[bold]Summary:[/bold] {content['summary']}")
    console.print(f"[bold]Tags:[/bold] {', '.join(content['tags'])}")


@click.command()
@api_url_option
@click.option('--page', '-p', default=1, show_default=True, type=int, help='Page number')
@click.option('--limit', '-l', default=20, show_default=True, type=int, help='Records per page')
@click.option('--category', '-c', help="Exact category ('all' for any)")
@click.option('--search', '-s', help='Substring to look for in text, summary and tags')
def list_records(api_url: str, page: int, limit: int, category: str | None, search: str | None):
    """List inspirations, newest first."""
    client = get_api_client(api_url)
    try:
        result = client.list_inspirations(page=page, limit=limit, category=category, search=search)
    except ApiError as e:
        _fail("list inspirations", e)

    items = result["data"]
    pagination = result["pagination"]

    if not items:
        console.print("[yellow]No inspirations found.[/yellow]")
    else:
        table = Table(title="Inspirations")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Category")
        table.add_column("Summary")
        table.add_column("Created")
        for item in items:
            table.add_row(item["id"], item["category"], item["summary"], item["createdAt"])
        console.print(table)

    console.print(
        f"Page {pagination['currentPage']}/{pagination['totalPages']} "
        f"({pagination['totalItems']} total)"
    )


@click.command()
@click.argument('inspiration_id')
@api_url_option
def show_record(inspiration_id: str, api_url: str):
    """Print one inspiration as JSON."""
    client = get_api_client(api_url)
    try:
        record = client.get_inspiration(inspiration_id)
    except ApiError as e:
        _fail("get inspiration", e)

    click.echo(json.dumps(record, indent=2, ensure_ascii=False))


@click.command()
@click.argument('inspiration_id')
@api_url_option
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
def delete_record(inspiration_id: str, api_url: str, yes: bool):
    """Delete one inspiration."""
    if not yes:
        click.confirm(f"Delete {inspiration_id}?", abort=True)

    client = get_api_client(api_url)
    try:
        client.delete_inspiration(inspiration_id)
    except ApiError as e:
        _fail("delete inspiration", e)

    console.print(f"[green]Deleted {inspiration_id}[/green]")


@click.command()
@api_url_option
def health(api_url: str):
    """Check that the server is up and show its providers."""
    client = get_api_client(api_url)
    try:
        info = client.get_health()
    except ApiError as e:
        _fail("reach server", e)

    providers = info.get("providers", {})
    console.print(f"[green]{info.get('status', 'unknown')}[/green] (version {info.get('version', '?')})")
    console.print(f"[bold]Key-value store:[/bold] {providers.get('kv', '?')}")
    console.print(f"[bold]Enrichment:[/bold] {providers.get('enrichment', '?')}")
