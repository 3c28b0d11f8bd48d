"""
demo_assessment.py – Take an assessment in the terminal

Run:
    python demo_assessment.py

Requires:
    .env file with OPENAI_API_KEY set (or AZURE_OPENAI_API_KEY plus
    AZURE_OPENAI_ENDPOINT).  Without a key the run still completes and shows
    the error card.
"""

from __future__ import annotations

import sys
from pathlib import Path

# ── make src/ importable without installing the package ──────────────────────
sys.path.insert(0, str(Path(__file__).parent / "src"))

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from career_assess.catalog import AssessmentCatalog
from career_assess.config import configure_logging
from career_assess.models import AssessmentType, Recommendation
from career_assess.session import AssessmentSession

console = Console()


# ─── Display helpers ─────────────────────────────────────────────────────────

def show_recommendations(assessment_type: AssessmentType, results: list[Recommendation]) -> None:
    console.print()
    console.rule(f"[bold magenta]{assessment_type.label} — Recommended Career Paths[/bold magenta]")
    console.print()

    if not results:
        console.print("[dim]The provider returned no recommendations.[/dim]")
        return

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold white on dark_violet", padding=(0, 1))
    table.add_column("#",      justify="right", style="dim")
    table.add_column("Career", style="bold cyan", no_wrap=True)
    table.add_column("Why it fits", style="white")
    for i, rec in enumerate(results, start=1):
        style = "bold red" if rec.career == "Error" else "bold cyan"
        table.add_row(str(i), f"[{style}]{rec.career}[/{style}]", rec.reason)
    console.print(table)
    console.print()


def ask_answers(session: AssessmentSession) -> None:
    """Prompt until every question has a non-blank answer."""
    for i, question in enumerate(session.questions):
        answer = ""
        while not answer.strip():
            answer = Prompt.ask(f"[cyan]{i + 1}.[/cyan] {question}")
        session.set_answer(i, answer)


# ─── Main ────────────────────────────────────────────────────────────────────

def main() -> None:
    configure_logging("WARNING")
    console.print()
    console.print(Panel(
        "[bold]AI-Powered Career Assessment[/bold]\n"
        "[dim]Discover your path to a fulfilling career.[/dim]",
        style="on dark_violet",
        expand=False,
    ))

    choices = [t.value for t in AssessmentType]
    picked  = Prompt.ask("Which test would you like to take?", choices=choices, default="career")
    assessment_type = AssessmentType(picked)

    session = AssessmentSession(AssessmentCatalog())
    try:
        session.start_test(assessment_type)
        ask_answers(session)
        session.submit()
        with console.status("[bold blue]Our AI is analyzing your results…"):
            session.wait()
        show_recommendations(assessment_type, session.results)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(0)

    finally:
        session.close()


if __name__ == "__main__":
    main()
