"""CLI entry point for inspecting property bundles."""

from pathlib import Path

import click

from . import __version__
from .config import Settings
from .diff import ChainInspector
from .errors import InvalidLocale, PropChainError
from .i18n import PropertyStore, load_property_chain, parse_locale, split_locale
from .logging_config import setup_logging
from .properties import PropertiesParser


def _load_chain(directory: str, base: str, locale: str):
    parts = split_locale(locale)
    chain = load_property_chain(parts, directory, base)
    if chain is None:
        click.secho(f"Error: invalid locale code {locale!r}", fg='red', err=True)
        raise SystemExit(2)
    return chain


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Locale fallback chains of .properties files."""
    setup_logging(verbose)
    try:
        settings = Settings.from_env()
    except ValueError as ex:
        click.secho(f"Error: invalid PROPCHAIN_* setting: {ex}", fg='red', err=True)
        raise SystemExit(2)
    ctx.obj = {'verbose': verbose, 'settings': settings}


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(file: Path):
    """Parse and display entries from a .properties file.

    FILE is the path to the .properties file to parse.
    """
    parser = PropertiesParser(encoding=Settings.from_env().encoding)
    try:
        entries = parser.parse_file(file)
    except PropChainError as ex:
        click.secho(f"Error: {ex}", fg='red', err=True)
        raise SystemExit(1)

    if not entries:
        click.secho("No entries found.", fg='yellow')
        return

    click.echo(f"Entries ({len(entries)} total):\n")

    for entry in entries:
        if entry.comment:
            for line in entry.comment.split("\n"):
                click.secho(f"# {line}", fg='cyan')
        click.echo(entry.to_properties_format(with_comment=False))


@cli.command()
@click.argument('directory', type=click.Path(file_okay=False))
@click.argument('base')
@click.argument('key')
@click.option('--locale', '-l', default='', help='Locale code, e.g. de_DE')
@click.pass_context
def get(ctx: click.Context, directory: str, base: str, key: str, locale: str):
    """Look up KEY in the bundle BASE, falling back to less specific locales.

    DIRECTORY is the directory containing the bundle files.
    """
    chain = _load_chain(directory, base, locale)
    resolved = chain.resolve(key)

    if resolved is None:
        click.secho(f"Key not found: {key}", fg='yellow', err=True)
        raise SystemExit(1)

    index, value = resolved
    click.echo(value)
    if ctx.obj['verbose']:
        click.secho(f"  from {chain[index].location.path}", fg='cyan', err=True)


@cli.command()
@click.argument('directory', type=click.Path(file_okay=False))
@click.argument('base')
@click.option('--locale', '-l', default='', help='Locale code, e.g. de_DE')
@click.option('--local-only', is_flag=True, help='Only keys of the most specific level')
def keys(directory: str, base: str, locale: str, local_only: bool):
    """List the keys of the bundle BASE in DIRECTORY."""
    chain = _load_chain(directory, base, locale)
    for key in sorted(chain.head.keys(recursive=not local_only)):
        click.echo(key)


@cli.command()
@click.argument('directory', type=click.Path(file_okay=False))
@click.argument('base')
@click.option('--locale', '-l', required=True, help='Locale code, e.g. de_DE')
def missing(directory: str, base: str, locale: str):
    """Show untranslated and obsolete keys of a locale level.

    DIRECTORY is the directory containing the bundle files, BASE their
    common base name.
    """
    chain = _load_chain(directory, base, locale)
    inspector = ChainInspector()
    untranslated = inspector.untranslated(chain.head)
    obsolete = inspector.obsolete(chain.head)

    if not untranslated and not obsolete:
        click.secho("Nothing missing.", fg='green')
        return

    if untranslated:
        click.secho(f"Untranslated ({len(untranslated)}):", fg='yellow', bold=True)
        for key in sorted(untranslated):
            click.echo(f"  + {key}")
            click.echo(f"    \"{chain.head.get(key)}\"")
        click.echo()

    if obsolete:
        click.secho(f"Obsolete ({len(obsolete)}):", fg='red', bold=True)
        for key in sorted(obsolete):
            click.echo(f"  - {key}")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def normalize(file: Path):
    """Rewrite a .properties file with sorted keys and canonical escaping."""
    store = PropertyStore(file)
    if not store.load():
        click.secho(f"Error: could not load {file}", fg='red', err=True)
        raise SystemExit(1)
    if not store.save():
        click.secho(f"Error: could not save {file}", fg='red', err=True)
        raise SystemExit(1)
    click.secho(f"Normalized {len(store)} entries in {file}", fg='green')


@cli.command(name='check-locale')
@click.argument('code')
def check_locale(code: str):
    """Check if CODE is a valid language[_COUNTRY[_variant]] code."""
    try:
        locale = parse_locale(split_locale(code))
    except InvalidLocale as ex:
        click.secho(f"Invalid: {ex}", fg='red')
        raise SystemExit(1)

    click.secho(f"Valid locale: {locale}", fg='green')
    click.echo(f"  Language: {locale.language}")
    if locale.country:
        click.echo(f"  Country: {locale.country}")
    if locale.variant:
        click.echo(f"  Variant: {locale.variant}")


if __name__ == '__main__':
    cli()
