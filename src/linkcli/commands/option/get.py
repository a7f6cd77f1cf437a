import json
import click
from linkcli.commands.common import open_storage
from linkstore.service import option as option_service

_MISSING = object()

@click.command('get')
@click.argument('name')
@click.pass_obj
def option_get(cfg, name):
    """Print the value of an option."""
    handle = open_storage(cfg, require_installed=True)
    try:
        value = option_service.get_option(handle, name, default=_MISSING)
    finally:
        handle.close()
    if value is _MISSING:
        click.echo(f"Option '{name}' not found", err=True)
        raise SystemExit(1)
    click.echo(json.dumps(value))
