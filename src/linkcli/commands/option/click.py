import click

from .get import option_get
from .set import option_set
from .list import option_list

@click.group('option')
def option_group():
    """Read and write stored options."""
    pass

# Register option subcommands
option_group.add_command(option_get)
option_group.add_command(option_set)
option_group.add_command(option_list)
