import json
import click
from tabulate import tabulate
from linkcli.commands.common import open_storage
from linkstore.service import option as option_service

def truncate_text(text, max_length):
    """Truncate text to max_length with ellipsis if needed."""
    if not text or len(str(text)) <= max_length:
        return text
    return str(text)[:max_length-3] + "..."

@click.command('list')
@click.option('--width', '-w', default=60, help='Maximum width of a value column')
@click.pass_obj
def option_list(cfg, width: int = 60):
    """List all stored options."""
    handle = open_storage(cfg, require_installed=True)
    try:
        options = option_service.list_options(handle)
    finally:
        handle.close()

    if not options:
        click.echo("No options found")
        return

    table_data = [
        [name, truncate_text(json.dumps(value), width)]
        for name, value in sorted(options.items())
    ]
    click.echo(tabulate(
        table_data,
        headers=["Name", "Value"],
        tablefmt="simple",
        numalign='left',
        stralign='left'
    ))
