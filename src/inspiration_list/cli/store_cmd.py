"""Commands that work directly on the configured key-value store."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import click
from rich.console import Console

logger = logging.getLogger(__name__)
console = Console()


def get_settings():
    """Get settings lazily."""
    from inspiration_list.config import settings
    return settings


def get_record_store():
    """Build a record store from the configured provider.

    Enrichment is not needed by these commands, so no client is attached
    to an endpoint.
    """
    from inspiration_list.core import RecordStore
    from inspiration_list.enrichment import EnrichmentClient
    from inspiration_list.providers import KeyValueProviderFactory

    settings = get_settings()
    kv = KeyValueProviderFactory.create(settings)
    offline = settings.model_copy(update={"enrichment_enabled": False})
    return RecordStore(kv, EnrichmentClient(offline), settings)


@click.command()
@click.argument('output', type=click.Path(path_type=Path), required=False)
@click.option('--pretty', is_flag=True, help='Pretty-print JSON output')
def export_records(output: Path | None, pretty: bool):
    """
    Export every stored inspiration to JSON.

    If OUTPUT is not specified, prints to stdout. Records missing from
    the listing index are included.

    Examples:
        inspiration-list export backup.json
        inspiration-list export --pretty
    """
    store = get_record_store()
    if not store.is_available:
        console.print("[red]No key-value store configured (KV_PROVIDER=none).[/red]")
        sys.exit(1)

    records = [record.to_json_dict() for record in store.iter_all()]

    export_data = {
        "version": "1.0",
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "provider": get_settings().kv_provider,
        "count": len(records),
        "inspirations": records
    }
    output_str = json.dumps(export_data, indent=2 if pretty else None, ensure_ascii=False)

    if output:
        output.write_text(output_str, encoding='utf-8')
        console.print(f"[green]Exported {len(records)} inspirations to {output}[/green]")
    else:
        click.echo(output_str)


@click.command()
def reindex():
    """
    Rebuild the listing index from the stored records.

    Use after a crash left records missing from listings, or after the
    index was lost or corrupted. Keeps the newest entries up to the index cap.
    """
    store = get_record_store()
    if not store.is_available:
        console.print("[red]No key-value store configured (KV_PROVIDER=none).[/red]")
        sys.exit(1)

    count = store.rebuild_index()
    console.print(f"[green]Index rebuilt with {count} entries[/green]")
