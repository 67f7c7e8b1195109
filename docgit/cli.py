#!/usr/bin/env python3

import click

from docgit.commands.meta import meta_handler
from docgit.commands.tags import tags_handler, resolve_handler
from docgit.commands.origin import origin_handler
from docgit.commands.files import show_handler, doc_config_handler
from docgit.commands.git import clone_handler, checkout_handler
from docgit.commands.config import config_cmd


@click.group()
@click.version_option(package_name='docgit')
def cli():
    """docgit - Versioned build metadata from git repositories.

    Finds the tag for a released version, resolves it to a commit,
    normalizes the origin URL and reads files at any revision.
    """
    pass


cli.add_command(meta_handler)
cli.add_command(tags_handler)
cli.add_command(resolve_handler)
cli.add_command(origin_handler)
cli.add_command(show_handler)
cli.add_command(doc_config_handler)
cli.add_command(clone_handler)
cli.add_command(checkout_handler)
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
