import typer

from berry.common import bus
from berry.needle import L
from berry.cli.factories import make_app


def list_command():
    app_instance = make_app()
    packages = app_instance.run_list()
    if not packages:
        bus.warning(L.list.empty)
        return

    for name, package_root in packages.items():
        declaration = (
            package_root / app_instance.config.declaration_file
            if package_root is not None
            else "-"
        )
        typer.echo(bus.resolve(L.list.package, name=name, path=declaration))
