import click
from loguru import logger

from linkcli.settings import load_config
from linkcli.commands.init import init
from linkcli.commands.status import status
from linkcli.commands.option.click import option_group
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

@click.group(context_settings=CONTEXT_SETTINGS)
@click.pass_context
def cli(ctx):
    """URL shortener storage toolkit."""
    if ctx.obj is None:
        ctx.obj = load_config()

    # Set up logging
    log_file = ctx.obj.get("log_file")
    if log_file:
        logger.add(log_file, rotation="10 MB")

# Register commands
cli.add_command(init)
cli.add_command(status)
cli.add_command(option_group)
