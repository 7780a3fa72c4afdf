import sys

import typer

from berry.common import bus, needle
from berry.needle import L
from berry.spec import BerryError
from berry.cli.factories import make_app

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def generate_command(
    dry_run: bool = typer.Option(
        False, "--dry-run", help=needle.get(L.cli.option.dry_run.help)
    ),
    strict: bool = typer.Option(
        False, "--strict", help=needle.get(L.cli.option.strict.help)
    ),
):
    try:
        app_instance = make_app()
    except tomllib.TOMLDecodeError as e:
        bus.error(L.error.config, error=e)
        raise typer.Exit(code=1)

    try:
        result = app_instance.run_generate(dry_run=dry_run)
    except (BerryError, OSError) as e:
        bus.error(L.error.stub_dir, error=e)
        raise typer.Exit(code=1)

    if strict and not result.success:
        raise typer.Exit(code=1)
