from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="loadassert", help="Assertions for load-test iteration scripts")
schema_app = typer.Typer(name="schema", help="Generate config schema tooling")
app.add_typer(schema_app, name="schema")

EXAMPLE_CONFIG = """\
# loadassert settings, see `loadassert schema generate`
colors: true
show_origin: true
# log_file: ${HOME}/.cache/loadassert/debug.log
verbose: false
abort_exit_code: 108
"""

EXAMPLE_SCRIPT = '''\
from loadassert import assert_, expect


def default(response):
    assert_(response is not None, "a response is expected")
    expect(response["status"]).to_be(200)
    expect.soft(response["items"]).to_have_length(3)
'''


def _examples_source() -> Path | None:
    # Installed package: examples are bundled next to cli.py
    pkg = Path(__file__).parent / "examples"
    if pkg.exists():
        return pkg
    # Development: examples live at repo root (three levels up from src/loadassert/cli.py)
    repo = Path(__file__).parent.parent.parent / "examples"
    if repo.exists():
        return repo
    return None


@app.command()
def init(
    dir: str = typer.Option(
        "loadassert", "--dir", help="Directory to initialize the project in"
    ),
    with_examples: bool = typer.Option(
        False,
        "--with-examples",
        help="Copy example iteration scripts into the project directory",
    ),
):
    """Write a starter config and iteration script."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    config_path = project_dir / "loadassert.yaml"
    if config_path.exists():
        typer.echo(f"loadassert.yaml already exists in {dir}, skipping.")
        return

    config_path.write_text(EXAMPLE_CONFIG)
    (project_dir / "script.py").write_text(EXAMPLE_SCRIPT)

    typer.echo(f"Initialized loadassert project in {dir}:")
    typer.echo("  loadassert.yaml  - assertion settings")
    typer.echo("  script.py        - sample iteration script")

    if with_examples:
        src = _examples_source()
        if src is None:
            typer.echo("Error: bundled examples not found.", err=True)
            raise typer.Exit(1)
        import shutil

        shutil.copytree(src, project_dir / "examples")
        typer.echo("  examples/        - example iteration scripts")


@app.command()
def check(
    config: str = typer.Argument(help="Path to loadassert YAML config"),
):
    """Validate a config file and print the effective settings."""
    from pydantic import ValidationError

    from loadassert.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        settings = load_config(config_path)
    except ValidationError as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    for key, value in settings.model_dump().items():
        typer.echo(f"{key}: {value}")


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/loadassert.schema.json", help="Output path for the JSON Schema"
    ),
):
    """Generate the JSON Schema for loadassert.yaml."""
    from loadassert.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
