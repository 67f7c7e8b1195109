"""
Common CLI utilities and decorators for consistent command behavior.
"""

import json
import sys
import click
from functools import wraps
from typing import Any, Dict, Generator

from .config import load_config, logger, setup_logging
from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError, ConfigError
)
from .format_utils import format_output, format_single, get_format_from_env
from .infra.git_client import GitClient
from .infra.repository import RepositoryHandle


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Configuration loaded and injected as ``config``
    - Logging on stderr, clean data output on stdout
    - --quiet/-q suppresses data output
    - Consistent error handling and exit codes
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        verbose = kwargs.get('verbose', False)
        quiet = kwargs.get('quiet', False)
        output_format = kwargs.get('format', None) or get_format_from_env('jsonl')

        try:
            config = load_config()
            setup_logging(config, verbose)
            kwargs['config'] = config

            result = func(*args, **kwargs)

            if quiet:
                # Consume the generator so side effects still happen
                if isinstance(result, Generator):
                    for _ in result:
                        pass
            elif result is None:
                # Command handles its own output
                pass
            elif isinstance(result, Generator):
                for line in format_output(result, output_format):
                    print(line, flush=True)
            elif isinstance(result, (list, tuple)):
                for line in format_output(iter(result), output_format):
                    print(line, flush=True)
            elif isinstance(result, dict):
                print(format_single(result, output_format), flush=True)
            else:
                print(result, flush=True)

            sys.exit(SUCCESS)

        except KeyboardInterrupt:
            logger.error("Interrupted by user")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            raise
        except CommandError as e:
            logger.error(str(e))
            if not quiet:
                print(json.dumps(_error_object(e, e.exit_code), ensure_ascii=False), flush=True)
            sys.exit(e.exit_code)
        except Exception as e:
            exit_code = get_exit_code_for_exception(e)
            logger.error(str(e))
            if not quiet:
                print(json.dumps(_error_object(e, exit_code), ensure_ascii=False), flush=True)
            sys.exit(exit_code)

    return wrapper


def _error_object(exc: BaseException, exit_code: int) -> Dict[str, Any]:
    return {
        "error": str(exc),
        "type": type(exc).__name__,
        "exit_code": exit_code,
    }


def git_client_from_config(config: Dict[str, Any]) -> GitClient:
    """Build a GitClient from the git section of the configuration."""
    git_config = config.get("git", {})
    timeout = git_config.get("timeout")
    if timeout is not None and timeout != "":
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"git.timeout must be a number of seconds, got {timeout!r}") from e
        if timeout <= 0:
            raise ConfigError(f"git.timeout must be positive, got {timeout:g}")
    return GitClient(
        executable=git_config.get("executable") or "git",
        timeout=timeout or None,
    )


def open_repository(path: str, config: Dict[str, Any]) -> RepositoryHandle:
    """Open the repository at path with a client built from config."""
    return RepositoryHandle.open(path, client=git_client_from_config(config))


# Standard options that many commands share
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                           help='Log debug output to stderr'),
    'quiet': click.option('-q', '--quiet', is_flag=True,
                         help='Suppress data output, show only logs'),
    'format': click.option('-f', '--format',
                         type=click.Choice(['json', 'jsonl', 'yaml']),
                         help='Output format (default: jsonl, or from DOCGIT_FORMAT env)'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'quiet')
        def my_command(verbose, quiet):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
