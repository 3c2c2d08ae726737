"""Benchmark for RelPath.join_path() and RelPath.get_relative_path()."""
import logging
import platform
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from relpath import Config, RelPath

DEFAULT_ITERATIONS = 100_000

JOIN_BASE = '/data/example/resources/lib'
JOIN_PATH = '../.././resources/lib/foo/foo.js'

RELATIVE_PATH = '/data/example/resources/lib/foo/foo.js'
RELATIVE_START = '/data/example/resources/src'


@dataclass
class BenchmarkResult:
    """Timing for one benchmarked operation."""

    name: str
    iterations: int
    total_ms: float

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.iterations if self.iterations else 0.0


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING

    logging.basicConfig(
        level=level,
        format='[%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def time_operation(name: str, operation: Callable[[], object], iterations: int) -> BenchmarkResult:
    """Call *operation* *iterations* times and record the elapsed time."""
    start = time.perf_counter_ns()
    for _ in range(iterations):
        operation()
    elapsed_ms = (time.perf_counter_ns() - start) / 1_000_000

    return BenchmarkResult(name=name, iterations=iterations, total_ms=elapsed_ms)


def run_benchmark(iterations: int = DEFAULT_ITERATIONS,
                  config: Optional[Config] = None) -> List[BenchmarkResult]:
    """
    Time join_path and get_relative_path on fixed sample paths.

    Args:
        iterations: Number of calls per operation.
        config: Platform mode to benchmark. If None, derived from the environment.

    Returns:
        One result per operation.
    """
    rel = RelPath(config)
    logging.debug(f"Benchmarking {rel!r} with {iterations} iterations")

    return [
        time_operation(
            'RelPath.join_path',
            lambda: rel.join_path(JOIN_BASE, JOIN_PATH),
            iterations,
        ),
        time_operation(
            'RelPath.get_relative_path',
            lambda: rel.get_relative_path(RELATIVE_PATH, RELATIVE_START),
            iterations,
        ),
    ]


def render_results(console: Console, results: List[BenchmarkResult]) -> None:
    """Print benchmark results as a table."""
    table = Table(title=f"Python {platform.python_version()}")
    table.add_column("Operation", style="cyan")
    table.add_column("Iterations", justify="right")
    table.add_column("Average (ms)", justify="right", style="green")

    for result in results:
        table.add_row(result.name, f"{result.iterations:,}", f"{result.average_ms:.6f}")

    console.print(table)


@click.command()
@click.option('--iterations', '-n', type=click.IntRange(min=1), default=DEFAULT_ITERATIONS,
              help='Calls per operation')
@click.option('--platform', 'platform_mode', type=click.Choice(['auto', 'posix', 'windows']),
              default='auto', help='Path convention to benchmark')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def main(iterations: int, platform_mode: str, debug: bool) -> None:
    """Benchmark the relpath path algebra."""
    load_dotenv()
    setup_logging(debug)

    if platform_mode == 'posix':
        config = Config.posix()
    elif platform_mode == 'windows':
        config = Config.for_windows()
    else:
        config = Config()

    results = run_benchmark(iterations, config)
    render_results(Console(), results)


if __name__ == '__main__':
    main()
