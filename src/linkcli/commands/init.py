import click

from linkcli.commands.common import FULL_STORAGE_POLICY, open_storage
from linkstore.service import option as option_service

DB_VERSION = 1


@click.command()
@click.pass_obj
def init(cfg):
    """Create the tables and mark the installation complete."""
    handle = open_storage(cfg, FULL_STORAGE_POLICY)
    try:
        handle.create_tables()
        if not handle.is_installed():
            option_service.update_option(handle, "db_version", DB_VERSION)
            handle.set_installed(True)
            click.echo(click.style("Installation complete", fg='green'))
        else:
            click.echo("Already installed")
        click.echo(f"{click.style('Database:', fg='green')} {click.style(cfg['database_url'], fg='cyan')}")
    finally:
        handle.close()
