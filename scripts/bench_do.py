"""Benchmarks for do blocks against the equivalent `and_then` chains."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum
from typing import Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import pyok as pk
from pyok import option, result

app = typer.Typer(help="do block benchmarks: do vs and_then chains")

type BenchFn = Callable[[], object]


class Runs(IntEnum):
    """Repeat count per case; each repeat times `Runs // 10` calls."""

    CHEAP = 2_000
    NORMAL = 1_000
    EXPENSIVE = 200


class Case(NamedTuple):
    """One computation written both as a do block and as a chain."""

    category: str
    name: str
    do: BenchFn
    chain: BenchFn
    runs: Runs = Runs.CHEAP


class Timing(NamedTuple):
    case: Case
    do_median: float
    chain_median: float

    @property
    def ratio(self) -> float:
        return self.do_median / self.chain_median


RAW_DATA: Final = [str(x) if x % 7 else "n/a" for x in range(50)]
LOOKUP: Final = {f"k{x}": x for x in range(0, 50, 2)}

CONSOLE: Final = Console()


def _parse(s: str) -> pk.Result[int, str]:
    return result.from_(int, f"not a number: {s}", s)


def _half(x: int) -> pk.Option[int]:
    return pk.Some(x // 2) if x % 2 == 0 else pk.NONE


def _do_lookups() -> pk.Option[int]:
    def block() -> pk.Option[int]:
        a = option.of(LOOKUP.get("k4")).bind()
        b = option.of(LOOKUP.get("k8")).bind()
        return pk.Some(a + b)

    return option.do(block)


def _do_parse_all() -> pk.Result[list[int], str]:
    return result.do(lambda: pk.Ok([_parse(s).bind() for s in RAW_DATA[1:7]]))


CASES: Final = (
    Case(
        "Option",
        "two lookups",
        do=_do_lookups,
        chain=lambda: option.of(LOOKUP.get("k4")).and_then(
            lambda a: option.of(LOOKUP.get("k8")).map(lambda b: a + b)
        ),
    ),
    Case(
        "Option",
        "early exit",
        do=lambda: option.do(lambda: pk.Some(_half(_half(6).bind()).bind())),
        chain=lambda: _half(6).and_then(_half),
    ),
    Case(
        "Result",
        "parse all",
        do=_do_parse_all,
        chain=lambda: result.traverse(RAW_DATA[1:7], _parse),
        runs=Runs.EXPENSIVE,
    ),
    Case(
        "Result",
        "failing parse",
        do=lambda: result.do(
            lambda: pk.Ok(_parse(RAW_DATA[7]).bind() + _parse("1").bind())
        ),
        chain=lambda: _parse(RAW_DATA[7]).and_then(
            lambda a: _parse("1").map(lambda b: a + b)
        ),
        runs=Runs.NORMAL,
    ),
)


def _median_time(fn: BenchFn, runs: Runs) -> float:
    return statistics.median(
        timeit.repeat(fn, number=runs.value // 10, repeat=runs.value)
    )


def time_case(case: Case) -> Timing:
    """Time both implementations of a case and keep the medians."""
    return Timing(
        case, _median_time(case.do, case.runs), _median_time(case.chain, case.runs)
    )


def _agreeing_cases() -> list[Case]:
    cases: list[Case] = []
    for case in CASES:
        if case.do() != case.chain():
            CONSOLE.print(
                f"[red]Error: {case.category}/{case.name} - do and chain disagree, skipped[/red]"
            )
            continue
        cases.append(case)
    return cases


def _run(cases: list[Case]) -> list[Timing]:
    timings: list[Timing] = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(cases))
        for case in cases:
            progress.update(task, description=f"[cyan]{case.category}: {case.name}")
            timings.append(time_case(case))
            progress.advance(task)
    return timings


def _display(timings: list[Timing]) -> None:
    table = Table(title="do block vs and_then chain")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("do (s, median)", justify="right", style="green")
    table.add_column("chain (s, median)", justify="right", style="yellow")
    table.add_column("do / chain", justify="right")

    for timing in timings:
        ratio_style = "green bold" if timing.ratio <= 1 else "red bold"
        table.add_row(
            timing.case.category,
            timing.case.name,
            f"{timing.do_median:.4f}",
            f"{timing.chain_median:.4f}",
            Text(f"{timing.ratio:.2f}x", style=ratio_style),
        )

    CONSOLE.print(table)
    if timings:
        CONSOLE.print()
        CONSOLE.print(
            Text("Median do / chain: ", style="bold")
            + Text(
                f"{statistics.median(t.ratio for t in timings):.2f}x",
                style="cyan bold",
            )
        )


@app.command()
def all_benchmarks() -> None:
    """Run all benchmarks (default)."""
    CONSOLE.print(Text("Running do block benchmarks...", style="bold blue"))
    CONSOLE.print()
    _display(_run(_agreeing_cases()))


@app.command()
def check() -> None:
    """Only check that every do block agrees with its chain."""
    table = Table(title="do / chain agreement")
    table.add_column("Benchmark", style="cyan")
    table.add_column("do", style="green")
    table.add_column("chain", style="yellow")
    for case in CASES:
        table.add_row(
            f"{case.category}: {case.name}", repr(case.do()), repr(case.chain())
        )
    CONSOLE.print(table)


if __name__ == "__main__":
    app()
