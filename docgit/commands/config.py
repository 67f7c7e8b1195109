"""
Handles the 'config' command group.
"""

from pathlib import Path

import click

from ..cli_utils import standard_command, add_common_options
from ..config import get_config_path, get_default_config, save_config


@click.group('config')
def config_cmd():
    """Show or create the docgit configuration."""
    pass


@config_cmd.command('show')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def config_show(config, **kwargs):
    """Show the effective configuration (defaults, file and environment)."""
    return config


@config_cmd.command('init')
@click.option('--path', 'config_path', type=click.Path(dir_okay=False), default=None,
              help='Where to write (suffix picks json, toml or yaml)')
@click.option('--force', is_flag=True, help='Overwrite an existing file')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def config_init(config_path, force, **kwargs):
    """Write the default configuration to a file."""
    target = Path(config_path) if config_path else get_config_path()
    if target.exists() and not force:
        raise click.ClickException(f"{target} already exists (use --force to overwrite)")
    written = save_config(get_default_config(), target)
    return {'path': str(written), 'message': 'Configuration created'}
