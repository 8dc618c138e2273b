import typer

from schema_lint.cli.lint import lint, list_rules

app = typer.Typer(
    name="schema-lint",
    help="Schema Lint CLI: check descriptions in GraphQL schema files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("lint")(lint)
app.command("rules")(list_rules)


def main() -> None:
    app()
