import typer

from berry.common import bus, needle
from berry.needle import L
from .rendering import CliRenderer

from .commands.generate import generate_command
from .commands.list import list_command

app = typer.Typer(
    name="berry",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root: it decides which renderer the bus uses.
    bus.set_renderer(CliRenderer(verbose=verbose))


app.command(name="generate", help=needle.get(L.cli.command.generate.help))(
    generate_command
)
app.command(name="list", help=needle.get(L.cli.command.list.help))(list_command)


if __name__ == "__main__":
    app()
