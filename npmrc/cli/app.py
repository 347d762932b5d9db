"""
Main CLI application for npmrc.

Defines the Typer application and command routing; the commands are thin
wrappers around the library's read/lookup functions.
"""
import typer

from npmrc.cli.commands.registry import registry_command
from npmrc.cli.commands.show import show_command


app = typer.Typer(help="npmrc - inspect npm's user configuration", no_args_is_help=True)

app.command("show", help="Show the parsed contents of .npmrc.")(show_command)
app.command("registry", help="Resolve the registry URL used for a package.")(registry_command)


def main():
    app()


if __name__ == "__main__":
    main()
