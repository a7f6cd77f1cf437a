import click

from linkcli.commands.common import FULL_STORAGE_POLICY, open_storage
from linkstore.util import normalize_server_version


@click.command()
@click.option('--queries', '-q', is_flag=True, help='List the SQL queries performed')
@click.pass_obj
def status(cfg, queries: bool = False):
    """Show installation and database status."""
    handle = open_storage(cfg, FULL_STORAGE_POLICY)
    try:
        raw_version = handle.get_server_version_string()
        click.echo(f"{click.style('Installed:', fg='green')} {'yes' if handle.is_installed() else 'no'}")
        click.echo(f"{click.style('Server version:', fg='green')} {raw_version} ({normalize_server_version(raw_version)})")
        click.echo(f"{click.style('Emulated prepares:', fg='green')} {'yes' if handle.get_emulate_state() else 'no'}")
        click.echo(f"{click.style('Queries:', fg='green')} {handle.get_num_queries()}")
        if queries:
            for query in handle.get_queries():
                click.echo(f"  {query}")
    finally:
        handle.close()
