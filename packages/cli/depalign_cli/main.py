"""depalign CLI - Main entry point."""
import typer

from . import align_cmd

# Single command: `depalign [LIBRARIES]...` runs the alignment directly
app = typer.Typer(
    name="depalign",
    help="depalign - Install a library and align your project's dependencies with it",
    add_completion=False,
)

app.command(name="align")(align_cmd.align)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
