#!/usr/bin/env python
"""JobMatch Typer-based CLI.

Reads a resume and a job description from files, runs the analysis and
renders the result with rich, optionally exporting the Markdown report.
"""
from __future__ import annotations
import contextvars
import json
import logging
import time
from logging import Logger
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jobmatch.config import ConfigError, load_config, matching_config_from, validate_config
from jobmatch.matching import AnalyzeRequest, AnalysisResult, create_match_analyzer, score_label
from jobmatch.nlp import SkillExtractor
from jobmatch.reporting import save_report
from jobmatch.resume import DocumentReadError, read_document

APP = typer.Typer(add_completion=False, help="JobMatch CLI")
console = Console()

config_app = typer.Typer(help="Config management")
APP.add_typer(config_app, name="config")


class Context:
    def __init__(self):
        self.config: Dict[str, Any] = {}
        self.logger: Logger | None = None


pass_context = contextvars.ContextVar("jobmatch_ctx")


@APP.callback()
def _root(config: Optional[Path] = typer.Option(None, '--config', help='Config file path')):
    c = Context()
    try:
        c.config = load_config(config)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    level = getattr(logging, str(c.config.get('logging', {}).get('level', 'WARNING')).upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s %(message)s')
    c.logger = logging.getLogger('jobmatch')
    pass_context.set(c)


def _matching_config():
    ctx = pass_context.get()
    try:
        return matching_config_from(ctx.config)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _read(path: Path, label: str) -> str:
    try:
        text = read_document(path)
    except DocumentReadError as e:
        console.print(f"[red]Could not read {label}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    return text


def _score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def print_result(result: AnalysisResult) -> None:
    style = _score_style(result.score)
    console.print(f"[bold {style}]Compatibility Score: {result.score}/100[/bold {style}] ({score_label(result.score)})")
    if result.job_title or result.company:
        role = escape(result.job_title or 'Not detected')
        company = escape(result.company or 'Not detected')
        console.print(f"[cyan]Role:[/cyan] {role}  [cyan]Company:[/cyan] {company}")

    matched = Table(title=f"Matched Skills ({len(result.matched_skills)})")
    matched.add_column("Skill", style="green")
    matched.add_column("Relevance", style="white")
    for skill in result.matched_skills:
        matched.add_row(escape(skill.name), f"{skill.relevance}%")
    console.print(matched)

    missing = Table(title=f"Missing Skills ({len(result.missing_skills)})")
    missing.add_column("Skill", style="red")
    missing.add_column("Relevance in job", style="white")
    for skill in result.missing_skills:
        missing.add_row(escape(skill.name), f"{skill.relevance}%")
    console.print(missing)

    console.print("[bold]Improvement Suggestions[/bold]")
    for i, suggestion in enumerate(result.suggestions, 1):
        console.print(f"  {i}. {escape(suggestion)}")

    console.print("[bold]Recommended Resume Summary[/bold]")
    console.print(escape(result.summary))


@APP.command('analyze')
def analyze(
    resume: Path = typer.Argument(..., help="Resume file (.txt, .pdf, .docx)"),
    job: Path = typer.Argument(..., help="Job description file (.txt, .pdf, .docx)"),
    title: Optional[str] = typer.Option(None, '--title', help="Resume title shown in the report"),
    json_out: bool = typer.Option(False, '--json', help="Output as JSON"),
    export: bool = typer.Option(False, '--export/--no-export', help="Write the Markdown report"),
    output_dir: Optional[Path] = typer.Option(None, '--output-dir', help="Directory for the exported report"),
    delay: float = typer.Option(0.0, '--delay', min=0.0, help="Seconds to wait before analyzing"),
):
    """Analyze how well a resume matches a job description"""
    ctx = pass_context.get()
    matching_config = _matching_config()

    resume_text = _read(resume, "resume")
    job_text = _read(job, "job description")
    ctx.logger.info(f"Analyzing {resume} against {job}")

    analyzer = create_match_analyzer(matching_config)
    request = AnalyzeRequest(resume_text=resume_text, job_text=job_text)

    if delay:
        with console.status("Analyzing..."):
            time.sleep(delay)
    result = analyzer.analyze(request)

    if json_out:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_result(result)

    if export:
        report_conf = ctx.config.get('report', {})
        resume_title = title or report_conf.get('resume_title', 'Resume')
        target_dir = output_dir or Path(report_conf.get('output_dir', '.'))
        try:
            path = save_report(result, target_dir, resume_title=resume_title)
        except OSError as e:
            console.print(f"[red]Could not write report: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)
        if not json_out:
            console.print(f"[green]Report written to {escape(str(path))}[/green]")


@APP.command('skills')
def skills(
    file: Path = typer.Argument(..., help="Document to scan (.txt, .pdf, .docx)"),
    json_out: bool = typer.Option(False, '--json', help="Output as JSON"),
):
    """List the vocabulary skills found in one document"""
    matching_config = _matching_config()
    text = _read(file, "document")

    extractor = SkillExtractor(
        vocabulary=matching_config.vocabulary,
        relevance_per_occurrence=matching_config.relevance_per_occurrence,
        max_relevance=matching_config.max_relevance,
    )
    found = extractor.extract_skills(text)

    if json_out:
        print(json.dumps([skill.to_dict() for skill in found], indent=2))
        return

    if not found:
        console.print("[yellow]No known skills found.[/yellow]")
        return

    table = Table(title=f"Skills ({len(found)})")
    table.add_column("Skill", style="cyan")
    table.add_column("Relevance", style="white")
    for skill in found:
        table.add_row(escape(skill.name), f"{skill.relevance}%")
    console.print(table)


@APP.command('vocabulary')
def vocabulary():
    """Show the skill vocabulary in use"""
    matching_config = _matching_config()
    table = Table(title=f"Vocabulary ({len(matching_config.vocabulary)} terms)")
    table.add_column("#", style="dim")
    table.add_column("Term", style="cyan")
    for i, term in enumerate(matching_config.vocabulary, 1):
        table.add_row(str(i), escape(term))
    console.print(table)


def print_config(conf: Dict[str, Any]):
    table = Table(title="Effective Configuration")
    table.add_column("Key")
    table.add_column("Value")

    def _walk(prefix: str, obj: Any):
        if isinstance(obj, dict):
            for k, v in obj.items():
                _walk(f"{prefix}.{k}" if prefix else k, v)
        else:
            table.add_row(prefix, escape(json.dumps(obj) if isinstance(obj, (list, dict)) else str(obj)))

    _walk('', conf)
    console.print(table)


@config_app.command('show')
def config_show():
    """Print the merged configuration"""
    ctx = pass_context.get()
    print_config(ctx.config)


@config_app.command('validate')
def config_validate():
    """Validate the merged configuration"""
    ctx = pass_context.get()
    try:
        validate_config(ctx.config)
    except ConfigError as e:
        console.print(f"[red]Config invalid:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    console.print("[green]Config OK[/green]")


def main():  # entry point for setuptools script
    APP()


if __name__ == '__main__':  # pragma: no cover
    main()
