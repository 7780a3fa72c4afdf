import typer
from berry.common.messaging import protocols

_LEVEL_COLORS = {
    "success": typer.colors.GREEN,
    "warning": typer.colors.YELLOW,
    "error": typer.colors.RED,
    "debug": typer.colors.BRIGHT_BLACK,
}


class CliRenderer(protocols.Renderer):
    """Colors bus messages by level; warnings and errors go to stderr."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return
        typer.secho(
            message,
            fg=_LEVEL_COLORS.get(level),
            err=level in ("warning", "error"),
        )
