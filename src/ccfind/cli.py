"""
Command-line entry points: ccgho and ccgrep.
"""

import logging
import sys
from typing import Optional

import click

from ccfind import __version__
from ccfind.config.parser import load_config
from ccfind.errors import CcfindError, FolderNotFoundError, NoMatchesError
from ccfind.models.config import WorkspaceConfig
from ccfind.tools.browser import open_url
from ccfind.tools.chooser import choose_match
from ccfind.tools.file_locator import FileLocator
from ccfind.tools.folder_resolver import resolve_subfolder
from ccfind.tools.text_search import run_search
from ccfind.tools.url_mapper import url_for_match


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def resolve_search_root(config: WorkspaceConfig, folder: Optional[str]) -> str:
    """Directory to search: the workspace root, or the repository picked by -f."""
    if not folder:
        return config.root

    path = resolve_subfolder(config.root, folder, sort=config.sort_results)
    if path is None:
        raise FolderNotFoundError(folder, config.root)
    return path


class WorkspaceCommand(click.Command):
    """Command whose usage errors exit with status 1, keeping 2 free for grep's own errors."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def folder_option(f):
    return click.option(
        '-f', '--folder', 'folder', metavar='FOLDERSUBSTRING',
        help='Only search the first workspace folder whose name contains this text.'
    )(f)


def config_option(f):
    return click.option(
        '-c', '--config', 'config_path', type=click.Path(dir_okay=False),
        help='YAML configuration file (default: $CCFIND_CONFIG or ~/.ccfind.yaml).'
    )(f)


def verbose_option(f):
    return click.option('-v', '--verbose', is_flag=True, help='Show debug output.')(f)


@click.command(cls=WorkspaceCommand)
@folder_option
@click.option('-n', '--print-only', is_flag=True, help='Print the URL without opening a browser.')
@config_option
@verbose_option
@click.version_option(version=__version__, prog_name="ccgho")
@click.argument('filename', required=False, metavar='FILENAME')
def ccgho(folder, print_only, config_path, verbose, filename):
    """Find a workspace file by name and open it on GitHub.

    FILENAME is matched case-insensitively against file names without their
    extension. When several files match and no folder was given, you are asked
    to pick one.

    \b
    Examples:
      ccgho -f v3 MapContainer
      ccgho UserService
    """
    configure_logging(verbose)

    if not filename:
        raise click.ClickException("No file name provided")

    try:
        config = load_config(config_path)
        search_root = resolve_search_root(config, folder)

        click.echo(f"Searching for '{filename}' in {search_root}", err=True)
        matches = FileLocator(config).locate(search_root, filename)
        if not matches:
            raise NoMatchesError(filename)

        if len(matches) == 1:
            selected = matches[0]
        elif folder:
            logger.info(f"{len(matches)} files match in {search_root}, using the first")
            selected = matches[0]
        else:
            selected = matches[choose_match(matches)]

        url = url_for_match(selected, config.remote)
    except CcfindError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Opening: {url}")
    if not print_only:
        open_url(url, config.browser)


@click.command(cls=WorkspaceCommand)
@folder_option
@config_option
@verbose_option
@click.version_option(version=__version__, prog_name="ccgrep")
@click.argument('search_string', required=False, metavar='SEARCHSTRING')
@click.pass_context
def ccgrep(ctx, folder, config_path, verbose, search_string):
    """Search the workspace for text.

    Output is grep's own colored output. The exit status is grep's: 0 when
    something matched, 1 when nothing did.

    \b
    Examples:
      ccgrep -f v3 TODO
      ccgrep useMapStore
    """
    configure_logging(verbose)

    if not search_string:
        raise click.ClickException("No search string provided")

    try:
        config = load_config(config_path)
        search_root = resolve_search_root(config, folder)
    except CcfindError as e:
        raise click.ClickException(str(e)) from e

    ctx.exit(run_search(search_root, search_string, config.search))

