import click

from linkcli.config import build_storage
from linkstore.bootstrap import Bootstrapper, storage_steps
from linkstore.database.base import StorageHandle
from linkstore.errors import FatalError
from linkstore.init_defaults import BootstrapPolicy

# init and status must see the real installed state, so they never stop at fast init
FULL_STORAGE_POLICY = BootstrapPolicy().without("return_if_fast_init")


def echo_fatal(message: str, title: str = "", status: int = 503):
    """Fatal error display for the terminal."""
    click.echo(click.style(f"{title or 'Fatal error'} ({status})", fg='red'), err=True)
    click.echo(message.replace("<br/>", "\n"), err=True)
    raise FatalError(message, title, status)


def open_storage(cfg: dict, policy: BootstrapPolicy = BootstrapPolicy(), require_installed: bool = False) -> StorageHandle:
    """Run the storage bootstrap steps. Exits with code 1 if the DB is unreachable."""
    handle = build_storage(cfg, die=echo_fatal)

    def not_installed():
        handle.close()
        click.echo(click.style("Not installed, run `shortlink init` first", fg='yellow'), err=True)
        raise SystemExit(1)

    steps = storage_steps(handle, on_not_installed=not_installed if require_installed else None)
    Bootstrapper(policy, steps, fast_init=cfg.get("fast_init", False)).run()
    return handle
