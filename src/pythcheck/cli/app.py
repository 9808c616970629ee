import typer

from pythcheck.cli.check import check

app = typer.Typer(
    name="pythcheck",
    help="Find Python functions missing type hints.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("check", no_args_is_help=True, context_settings={"help_option_names": ["-h", "--help"]})(check)


def main() -> None:
    app()
