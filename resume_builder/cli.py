"""Command-line entry point: score and analyze resume JSON files, or run the API."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from .config import configure_logging
from .domain import (
    ResumeContent,
    analyze_resume,
    calculate_ats_score,
    format_ats_report,
    get_industry_keywords,
)

console = Console()


def _load_resume(path: str) -> ResumeContent:
    """Read a resume JSON document (camelCase wire shape) from *path*."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")
    data = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Resume file must contain a JSON object: {path}")
    return ResumeContent.from_dict(data)


def cmd_score(args: argparse.Namespace) -> int:
    resume = _load_resume(args.path)
    score = calculate_ats_score(resume)
    if args.json:
        console.print_json(json.dumps(score.to_dict()))
    else:
        console.print(Markdown(format_ats_report(score)))
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    analysis = analyze_resume(_load_resume(args.path))
    benchmark = analysis.industry_benchmark

    console.print(Markdown(format_ats_report(analysis.ats_score)))
    console.print(
        Panel(
            f"{benchmark.message}\nPercentile: {benchmark.percentile}",
            title=f"Benchmark: {benchmark.category}",
            border_style="cyan",
        )
    )

    if analysis.recommendations:
        console.print("\n[bold]Recommendations[/bold]")
        for i, item in enumerate(analysis.recommendations, 1):
            console.print(f"  {i}. {item}")

    keywords = analysis.keyword_analysis
    table = Table(title="Keywords", show_header=True, header_style="bold cyan")
    table.add_column("Group", style="cyan")
    table.add_column("Count", justify="right", width=6)
    table.add_column("Keywords", no_wrap=False)
    table.add_row("Top", str(len(keywords.keywords)), ", ".join(keywords.keywords))
    table.add_row("Technical", str(len(keywords.tech_keywords)), ", ".join(keywords.tech_keywords))
    table.add_row("Soft skills", str(len(keywords.soft_skill_keywords)), ", ".join(keywords.soft_skill_keywords))
    console.print(table)

    fmt = analysis.format_analysis
    _print_list("Format strengths", fmt.strengths, "green")
    _print_list("Format issues", fmt.issues, "yellow")
    return 0


def cmd_keywords(args: argparse.Namespace) -> int:
    keywords = get_industry_keywords(args.industry, args.role)
    title = f"{args.industry or 'general'} / {args.role or 'general'}"
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="yellow", width=3)
    table.add_column("Keyword", style="cyan")
    for i, keyword in enumerate(keywords, 1):
        table.add_row(str(i), keyword)
    console.print(table)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from .web.app import main as serve

    serve(host=args.host, port=args.port)
    return 0


def _print_list(title: str, items: List[str], style: str) -> None:
    if not items:
        return
    console.print(f"\n[bold]{title}[/bold]")
    for item in items:
        console.print(f"  - {item}", style=style)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-builder",
        description="Resume Builder - ATS scoring and resume analysis",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Score a resume JSON file")
    score.add_argument("path", help="Path to resume JSON file")
    score.add_argument("--json", action="store_true", help="Print the raw score as JSON")
    score.set_defaults(handler=cmd_score)

    analyze = subparsers.add_parser("analyze", help="Full analysis of a resume JSON file")
    analyze.add_argument("path", help="Path to resume JSON file")
    analyze.set_defaults(handler=cmd_analyze)

    keywords = subparsers.add_parser("keywords", help="Suggested keywords for an industry and role")
    keywords.add_argument("--industry", help="technology, marketing, finance or sales")
    keywords.add_argument("--role", help="frontend, backend, fullstack, manager or senior")
    keywords.set_defaults(handler=cmd_keywords)

    serve = subparsers.add_parser("serve", help="Run the web API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(handler=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.handler(args)
    except (FileNotFoundError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        console.print(f"❌ {exc}", style="red")
        return 1


if __name__ == "__main__":
    sys.exit(main())
