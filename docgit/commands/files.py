"""
Handles the 'show' and 'doc-config' commands.

Both print file content as-is on stdout.
"""

import click

from ..cli_utils import standard_command, add_common_options, open_repository
from ..exit_codes import NotFoundError
from ..services.file_service import read_config, read_file_at


@click.command('show')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.argument('revision')
@click.argument('file')
@add_common_options('verbose', 'quiet')
@standard_command
def show_handler(path, revision, file, config, quiet=False, **kwargs):
    """Print FILE as it is at REVISION in the repository at PATH.

    Examples:

    \b
        docgit show . master doc/cljdoc.edn
        docgit show . v1.2.0 README.md
    """
    repo = open_repository(path, config)
    content = read_file_at(repo, revision, file)
    if content is None:
        raise NotFoundError(f"{file} does not exist at {revision}")
    if not quiet:
        click.echo(content, nl=False)


@click.command('doc-config')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.option('--rev', 'revision', default=None, help='Revision to read first (falls back to the default branch)')
@click.option('--file', 'config_file', default=None, help='Config path inside the repository')
@click.option('--default-branch', default=None, help='Branch used as fallback')
@add_common_options('verbose', 'quiet')
@standard_command
def doc_config_handler(path, revision, config_file, default_branch, config, quiet=False, **kwargs):
    """Print the documentation config of the repository at PATH.

    Reads doc/cljdoc.edn at --rev, or at the default branch when the file
    is missing or empty there.

    Examples:

    \b
        docgit doc-config .
        docgit doc-config . --rev 1.2.0
    """
    repo = open_repository(path, config)
    docs = config['docs']
    content = read_config(
        repo,
        revision,
        path=config_file or docs['config_file'],
        default_branch=default_branch or docs['default_branch'],
    )
    if content is None:
        raise NotFoundError("No documentation config found")
    if not quiet:
        click.echo(content, nl=False)
