"""Main CLI entry point"""

from pathlib import Path

import click
from dotenv import load_dotenv

from inspiration_list import __version__

# Load .env file from current working directory before importing anything else
# This ensures environment variables are set before pydantic-settings reads them
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


@click.group()
@click.version_option(version=__version__, prog_name='inspiration-list')
def cli():
    """Inspiration List CLI - run the API, manage records and the store"""
    pass


def setup_cli():
    """Register all CLI commands"""
    from .providers_cmd import providers
    from .records_cmd import create_record, delete_record, health, list_records, show_record
    from .serve_cmd import serve
    from .store_cmd import export_records, reindex

    cli.add_command(serve, name='serve')
    cli.add_command(create_record, name='create')
    cli.add_command(list_records, name='list')
    cli.add_command(show_record, name='show')
    cli.add_command(delete_record, name='delete')
    cli.add_command(health, name='health')
    cli.add_command(export_records, name='export')
    cli.add_command(reindex, name='reindex')
    cli.add_command(providers, name='providers')


# Setup commands when module is imported
setup_cli()
