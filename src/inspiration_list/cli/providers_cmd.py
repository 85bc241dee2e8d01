"""Providers diagnostic command"""

import click

from inspiration_list.providers import plugin_loader


@click.command()
def providers():
    """List all discovered providers"""
    click.echo("Inspiration List Provider Discovery\n")

    for provider_type, group in plugin_loader.PROVIDER_GROUPS.items():
        found = plugin_loader.get_providers(provider_type)
        click.echo(f"{provider_type.upper()} Providers ({len(found)}) [{group}]:")

        for name, cls in sorted(found.items()):
            click.echo(f"  - {name:15} ({cls.__module__})")

        click.echo()

    total = sum(len(plugin_loader.get_providers(t)) for t in plugin_loader.PROVIDER_GROUPS)
    click.echo(f"Total: {total} providers discovered")
