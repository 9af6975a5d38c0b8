"""Command line entry point for running the API and UI test suites."""
import re
import subprocess
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List
import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

PROJECT_ROOT = Path(__file__).parent

app = typer.Typer(
    help="Placeholder E2E Suite - runs the REST API and browser UI test suites",
    no_args_is_help=True
)
console = Console()


class Suite(str, Enum):
    unit = "unit"
    api = "api"
    ui = "ui"
    all = "all"


# pytest arguments per suite; live suites override the default "not live" filter
SUITE_ARGS: Dict[Suite, List[str]] = {
    Suite.unit: ["tests/unit"],
    Suite.api: ["tests/api", "-m", "live"],
    Suite.ui: ["tests/ui", "-m", "live"],
    Suite.all: ["tests", "-m", "live or not live"],
}

# pytest exit code for a session that collected no tests
NO_TESTS_COLLECTED = 5

OUTCOMES = ("passed", "failed", "skipped", "error", "errors", "deselected")


def build_command(suite: Suite, verbose: bool = False) -> List[str]:
    cmd = [sys.executable, "-m", "pytest", *SUITE_ARGS[suite], "--tb=short"]
    if verbose:
        cmd.append("-v")
    return cmd


def parse_outcomes(output: str) -> Dict[str, int]:
    """Parse the pytest summary line, e.g. '3 passed, 1 failed in 0.42s'."""
    counts = {}
    for number, outcome in re.findall(r"(\d+)\s+(" + "|".join(OUTCOMES) + r")\b", output):
        key = "error" if outcome == "errors" else outcome
        counts[key] = counts.get(key, 0) + int(number)
    return counts


def run_suite(suite: Suite, verbose: bool = False) -> Dict[str, Any]:
    """Run one suite with pytest and return its results."""
    cmd = build_command(suite, verbose)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=600,
            cwd=str(PROJECT_ROOT)
        )
    except subprocess.TimeoutExpired:
        return {
            "success": False,
            "passed": False,
            "no_tests": False,
            "output": "",
            "counts": {},
            "error": "Test execution timed out"
        }

    output = result.stdout + result.stderr
    return {
        "success": True,
        "passed": result.returncode == 0,
        "no_tests": result.returncode == NO_TESTS_COLLECTED,
        "output": output,
        "counts": parse_outcomes(output),
        "error": None
    }


def print_session_banner(suite: Suite):
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    banner = Panel(
        Text(f"Placeholder E2E Suite: {suite.value}\nSession started: {timestamp}", justify="center"),
        border_style="bright_blue",
        title="[bold bright_blue]TEST SESSION[/bold bright_blue]"
    )
    console.print(banner)


def print_summary_report(suite: Suite, result: Dict[str, Any]):
    """Print final summary report using Rich."""
    table = Table(title=f"Test Session Report ({suite.value})", show_header=True, header_style="bold magenta")
    table.add_column("Outcome", style="cyan", no_wrap=True)
    table.add_column("Count", style="green")

    counts = result.get("counts", {})
    for outcome in ("passed", "failed", "error", "skipped", "deselected"):
        table.add_row(outcome.capitalize(), str(counts.get(outcome, 0)))

    console.print("\n")
    console.print(table)


@app.command(name="run")
def run_cmd(
    suite: Suite = typer.Option(Suite.unit, "--suite", help="Suite to run: unit, api, ui or all"),
    verbose: bool = typer.Option(False, "--verbose", help="Show each test result"),
):
    """
    Run a test suite and print a summary.

    Exits non-zero when any test fails or when the suite collects no tests.
    """
    print_session_banner(suite)
    result = run_suite(suite, verbose)

    if not result["success"]:
        console.print(f"[red]Error running tests: {result['error']}[/red]")
        raise typer.Exit(code=2)

    if result["no_tests"]:
        console.print(result["output"])
        console.print("[yellow]⚠ No tests collected[/yellow]")
        raise typer.Exit(code=NO_TESTS_COLLECTED)

    if verbose or not result["passed"]:
        console.print(result["output"])

    print_summary_report(suite, result)

    if result["passed"]:
        console.print("[green]✓ All tests passed![/green]")
    else:
        console.print("[yellow]⚠ Some tests failed[/yellow]")
        raise typer.Exit(code=1)


@app.command(name="suites")
def suites_cmd():
    """List the available suites and the pytest arguments they use."""
    for suite, args in SUITE_ARGS.items():
        console.print(f"[cyan]{suite.value}[/cyan]  pytest {' '.join(args)}")


if __name__ == "__main__":
    app()
