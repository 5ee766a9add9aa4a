import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from arbor.cli.commands.render import render_command
from arbor.cli.commands.show import show_command

app = typer.Typer()

app.command(name="show")(show_command)
app.command(name="render")(render_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
