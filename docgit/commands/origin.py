"""
Handles the 'origin' command.
"""

import click

from ..cli_utils import standard_command, add_common_options, open_repository
from ..services.origin_service import get_origin, normalize


@click.command('origin')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.option('--remote', default=None, help='Remote name (default: origin)')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def origin_handler(path, remote, config, **kwargs):
    """Show the origin URL of the repository at PATH in https:// form.

    Examples:

    \b
        docgit origin .
        docgit origin . --remote upstream
    """
    repo = open_repository(path, config)
    raw = get_origin(repo, remote or config['origin']['remote'])
    return {'url': normalize(raw), 'raw': raw}
