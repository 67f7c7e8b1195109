"""
Handles the 'meta' command: versioned build metadata for a repository.
"""

import sys

import click

from ..cli_utils import standard_command, add_common_options, open_repository
from ..render import render_metadata_table
from ..services.metadata_service import assemble


@click.command('meta')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.argument('versions', nargs=-1, required=True)
@click.option('--remote', default=None, help='Remote to read the URL from (default: origin)')
@click.option('--table/--no-table', default=None, help='Display as formatted table (auto-detected by default)')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def meta_handler(path, versions, remote, table, config, **kwargs):
    """Show URL, tag and commit for each VERSION of the repository at PATH.

    A version without a matching tag yields a record with only the URL
    and a warning on stderr.

    Examples:

    \b
        docgit meta . 1.2.0
        docgit meta ~/src/yada 1.2.10 1.2.11 --table
    """
    if table is None:
        table = sys.stdout.isatty()

    repo = open_repository(path, config)
    remote = remote or config['origin']['remote']
    prefix = config['tags']['version_prefix']

    records = [
        (version, assemble(repo, version, remote=remote, prefix=prefix).to_dict())
        for version in versions
    ]

    if table:
        render_metadata_table([dict(record, version=version) for version, record in records])
        return None
    return [record for _, record in records]
