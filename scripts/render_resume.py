#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders a YAML/JSON resume to LaTeX, HTML or Markdown using the rendering context.

Commands:
    render    - Render one layout of a resume to a file
    templates - List available engines and templates
    languages - List supported locales

Examples:\n

    render_resume.py render resume.yaml                       # First layout, next to the resume

    render_resume.py render resume.yaml --layout 1            # Second layout

    render_resume.py render resume.yaml -o out/resume.html    # Explicit output path

    render_resume.py templates --engine latex                 # LaTeX templates only
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from vitae.contexts.localization import SUPPORTED_LOCALES
from vitae.contexts.rendering import (
    DEFAULT_TEMPLATES,
    engine_from_extension,
    get_resume_renderer,
    list_templates,
)
from vitae.contexts.rendering.logger import (
    _log_error,
    _log_info,
    _log_success,
    log_render_result,
    setup_rendering_logger,
)

load_dotenv()
LOG_DIR = Path(os.getenv("VITAE_LOG_DIR") or "logs")


app = typer.Typer(
    help="Render structured resumes to LaTeX, HTML or Markdown",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    resume_path: Annotated[
        Path,
        typer.Argument(
            help="Resume file (YAML or JSON)",
            exists=True,
            dir_okay=False,
        ),
    ],
    layout_index: Annotated[
        int,
        typer.Option(
            "--layout",
            "-l",
            help="Index of the layout to render (default: first layout)",
            min=0,
        ),
    ] = 0,
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file; its extension must match the layout's engine (default: next to the resume)",
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the render log (default: VITAE_LOG_DIR/render_<timestamp>)",
        ),
    ] = None,
):
    """
    Render one layout of a resume.

    Examples:\n

        $ render_resume.py render resume.yaml                  # Render first layout

        $ render_resume.py render resume.yaml --layout 2       # Render third layout

        $ render_resume.py render resume.yaml -o cv.tex        # Write to cv.tex
    """
    if log_dir is None:
        log_dir = LOG_DIR / f"render_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    resume = OmegaConf.to_container(OmegaConf.load(resume_path), resolve=False)

    try:
        renderer = get_resume_renderer(resume, layout_index)
    except (IndexError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_file = setup_rendering_logger(log_dir, engine=renderer.engine, template_id=renderer.template_id)

    if output_path is None:
        output_path = resume_path.with_suffix(renderer.output_extension)

    try:
        expected_engine = engine_from_extension(output_path)
    except ValueError as e:
        _log_error(str(e))
        raise typer.Exit(code=1)

    if expected_engine != renderer.engine:
        _log_error(
            f"Output {output_path} expects a {expected_engine} document, "
            f"but layout {layout_index} uses the {renderer.engine} engine"
        )
        raise typer.Exit(code=1)

    _log_info(f"Rendering {resume_path} with {renderer.engine}/{renderer.template_id}")
    output = renderer.render()
    log_render_result(renderer.engine, renderer.template_id, output)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output, encoding="utf-8")

    _log_success(f"Wrote {output_path}")
    typer.echo(f"  Log: {log_file}")


@app.command("templates")
def templates_command(
    engine: Annotated[
        Optional[str],
        typer.Option(
            "--engine",
            "-e",
            help="Only list templates of this engine",
        ),
    ] = None,
):
    """List engines and their templates; the default template is marked with *."""
    try:
        pairs = list_templates(engine)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    current_engine = None
    for name, template_id in pairs:
        if name != current_engine:
            typer.secho(name, fg=typer.colors.BLUE, bold=True)
            current_engine = name
        marker = "*" if DEFAULT_TEMPLATES[name] == template_id else " "
        typer.echo(f"  {marker} {template_id}")


@app.command("languages")
def languages_command():
    """List supported locales."""
    for code, name in SUPPORTED_LOCALES.items():
        typer.echo(f"  {code:<12} {name}")


if __name__ == "__main__":
    app()
