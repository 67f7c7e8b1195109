"""
Handles the 'tags' and 'resolve' commands.
"""

import sys

import click

from ..cli_utils import standard_command, add_common_options, open_repository
from ..domain.tag import peel
from ..errors import UnsupportedRefKind
from ..exit_codes import NotFoundError
from ..render import render_tags_table
from ..services.tag_service import resolve_version, version_tags


def list_tags(repo, sort='name', prefix='v'):
    """
    Yield one dictionary per tag.

    Tags that cannot be peeled to a commit are reported with an error
    field instead of aborting the listing.
    """
    refs = {ref.name: ref for ref in repo.list_tags()}
    versions = {name: version for name, version in version_tags(repo, prefix=prefix)}

    if sort == 'version':
        names = list(versions) + sorted(name for name in refs if name not in versions)
    else:
        names = sorted(refs)

    for name in names:
        version = versions.get(name)
        try:
            item = peel(refs[name]).to_dict()
        except UnsupportedRefKind as e:
            item = {'name': name, 'error': str(e)}
        item['version'] = str(version) if version is not None else None
        yield item


@click.command('tags')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.option('--sort', type=click.Choice(['name', 'version']), default='name', help='Order by ref name or by parsed version')
@click.option('--table/--no-table', default=None, help='Display as formatted table (auto-detected by default)')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def tags_handler(path, sort, table, config, **kwargs):
    """List tags of the repository at PATH with their kind and commit.

    Examples:

    \b
        docgit tags .
        docgit tags . --sort version --table
    """
    if table is None:
        table = sys.stdout.isatty()

    repo = open_repository(path, config)
    items = list_tags(repo, sort=sort, prefix=config['tags']['version_prefix'])

    if table:
        render_tags_table(list(items))
        return None
    return items


@click.command('resolve')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.argument('version')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def resolve_handler(path, version, config, **kwargs):
    """Find the tag for VERSION (trying the v-prefixed name second).

    Examples:

    \b
        docgit resolve . 1.2.0
    """
    repo = open_repository(path, config)
    tag_ref = resolve_version(repo, version, prefix=config['tags']['version_prefix'])
    if tag_ref is None:
        raise NotFoundError(f"No tag found for version {version}")
    return peel(tag_ref).to_dict()
