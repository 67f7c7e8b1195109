"""
Handles the 'clone' and 'checkout' commands.
"""

import click

from ..cli_utils import standard_command, add_common_options, git_client_from_config, open_repository
from ..infra.repository import RepositoryHandle
from ..infra.transport import AnonymousTransport, SshAgentTransport


@click.command('clone')
@click.argument('uri')
@click.argument('target_dir', type=click.Path(file_okay=False))
@click.option('--ssh-agent', is_flag=True, help='Authenticate over SSH with keys from the running ssh-agent')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def clone_handler(uri, target_dir, ssh_agent, config, **kwargs):
    """Clone URI into TARGET_DIR (full history).

    Examples:

    \b
        docgit clone https://github.com/juxt/yada.git /tmp/yada
        docgit clone git@github.com:juxt/yada.git /tmp/yada --ssh-agent
    """
    transport = SshAgentTransport() if ssh_agent else AnonymousTransport()
    repo = RepositoryHandle.clone(uri, target_dir, transport=transport, client=git_client_from_config(config))
    return {'uri': uri, 'path': repo.path, 'git_dir': repo.git_dir}


@click.command('checkout')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.argument('revision')
@add_common_options('verbose', 'quiet', 'format')
@standard_command
def checkout_handler(path, revision, config, **kwargs):
    """Switch the working tree at PATH to REVISION.

    Examples:

    \b
        docgit checkout . v1.2.0
    """
    repo = open_repository(path, config)
    repo.checkout(revision)
    return {'path': repo.path, 'revision': revision, 'commit': repo.resolve_commit('HEAD')}
