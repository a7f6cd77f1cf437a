import json
import click
from linkcli.commands.common import open_storage
from linkstore.service import option as option_service

def parse_value(raw: str):
    """JSON values are stored typed, anything else as a plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw

@click.command('set')
@click.argument('name')
@click.argument('value')
@click.pass_obj
def option_set(cfg, name, value):
    """Store an option value."""
    handle = open_storage(cfg, require_installed=True)
    try:
        option_service.update_option(handle, name, parse_value(value))
    finally:
        handle.close()
    click.echo(f"Option '{name}' updated")
