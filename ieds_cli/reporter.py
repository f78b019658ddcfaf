"""
Reporter for displaying and exporting elimination results.
"""

import csv
from pathlib import Path
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from ieds_core.config import Player
from ieds_core.matrix import PayoffMatrices
from ieds_core.results import EliminationResult, IterationResult


SEPARATOR = "=" * 60
CROSSOUT = "-"


def _format_row(cells: Iterable[object]) -> str:
    return "".join(f"{cell}\t" for cell in cells)


def format_matrix(matrix: NDArray) -> str:
    """Format all of a matrix, one tab-separated line per row."""
    return "\n".join(_format_row(row) for row in matrix)


def format_matrix_crossouts(matrices: PayoffMatrices, player: Player) -> str:
    """Format a player's matrix with eliminated cells shown as a crossout glyph."""
    crossed = matrices.crossed_out(player)
    return "\n".join(
        _format_row(CROSSOUT if cell is None else cell for cell in row)
        for row in crossed
    )


def format_matrix_reduced(matrices: PayoffMatrices, player: Player) -> str:
    """Format a player's matrix with eliminated rows and columns removed."""
    return format_matrix(matrices.reduced(player))


def print_usage(prog: str = "ieds") -> None:
    """Print usage."""
    print(f"Usage: {prog} matrix1 [matrix2] [options]")
    print("  Performs IEDS on two-player game in normal form.")
    print("  matrix1/2 is CSV file with payoff matrix for player1/2.")
    print("  If only matrix1 provided assumes game is symmetric")
    print("  (matrix2 will be set to the transpose of matrix1).")
    print("  By default only eliminates strictly dominated strategies.")
    print()
    print("Options include:")
    print("  -w weak dominance eliminated")
    print("  -v very weak dominance eliminated")
    print("  --live-only compare live opponent strategies only")
    print()


def print_iteration(result: IterationResult) -> None:
    """Print one iteration of the elimination trace."""
    print(f"Iteration #{result.iteration}:")
    for event in result.events:
        print(event.describe())
    if not result.any_eliminated:
        print("No eliminations.")
    print()


def print_post_elimination_size(matrices: PayoffMatrices) -> None:
    """Report post-elimination matrix size."""
    n_rows, n_cols = matrices.reduced_shape
    print(f"Post-elimination matrix size: {n_rows}x{n_cols}\n")


def print_matrix_section(title: str, body: str) -> None:
    print(f"{title}:")
    if body:
        print(body)
    print()


def print_full_report(result: EliminationResult) -> None:
    """Print post-elimination size, crossed-out and reduced matrices."""
    matrices = result.matrices

    if not result.converged:
        print(f"Stopped after {result.n_iterations} iterations (iteration limit).\n")

    print_post_elimination_size(matrices)

    # Results with crossouts
    print_matrix_section(
        "Player 1 Matrix With Crossouts",
        format_matrix_crossouts(matrices, Player.ROW)
    )
    print_matrix_section(
        "Player 2 Matrix With Crossouts",
        format_matrix_crossouts(matrices, Player.COL)
    )

    # Results with removals
    print_matrix_section(
        "Player 1 Matrix After Removals",
        format_matrix_reduced(matrices, Player.ROW)
    )
    print_matrix_section(
        "Player 2 Matrix After Removals",
        format_matrix_reduced(matrices, Player.COL)
    )


def export_to_csv(result: EliminationResult, output_path: str) -> None:
    """
    Export the elimination trace to a CSV file.

    Indices are written 1-based, matching the console trace.

    Args:
        result: Elimination result
        output_path: Path to output CSV file
    """
    path = Path(output_path)

    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        # Header
        writer.writerow(['iteration', 'player', 'strategy', 'dominated_by'])

        # Data rows
        for event in result.events:
            writer.writerow([
                event.iteration,
                event.player.value.lower(),
                event.index + 1,
                event.dominated_by + 1,
            ])

    print(f"Elimination trace exported to: {path.absolute()}")


def export_reduced_csv(result: EliminationResult, output_path: str) -> None:
    """
    Export both reduced matrices next to the trace file.

    Writes <stem>_player1<ext> and <stem>_player2<ext>.
    """
    path = Path(output_path)
    base = path.stem
    ext = path.suffix or ".csv"

    for n, player in ((1, Player.ROW), (2, Player.COL)):
        reduced_path = path.parent / f"{base}_player{n}{ext}"
        np.savetxt(
            reduced_path,
            result.matrices.reduced(player),
            fmt="%d",
            delimiter=",",
        )
        print(f"Reduced player {n} matrix exported to: {reduced_path.absolute()}")
