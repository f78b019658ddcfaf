"""
Configuration builder for the IEDS CLI.

Converts command-line arguments to EliminationConfig and PayoffMatrices.
"""

from argparse import Namespace
from typing import List

from ieds_core.config import EliminationConfig, Strictness
from ieds_core.exceptions import UsageError
from ieds_core.loader import load_game
from ieds_core.matrix import PayoffMatrices


def check_matrix_paths(paths: List[str]) -> None:
    """
    Validate the number of matrix files given on the command line.

    Raises:
        UsageError: if no matrix or more than two matrices were given
    """
    if not paths:
        raise UsageError("No game matrix found.")
    if len(paths) > 2:
        raise UsageError(f"Too many game matrices: expected 1 or 2, got {len(paths)}.")


def build_config(args: Namespace) -> EliminationConfig:
    """
    Build an EliminationConfig from command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        EliminationConfig with all parameters set

    Raises:
        ConfigurationError: if an option value is invalid
    """
    strictness = args.strictness if args.strictness is not None else Strictness.STRICT

    return EliminationConfig(
        strictness=strictness,
        live_only=getattr(args, "live_only", False),
        max_iterations=getattr(args, "max_iterations", None),
    )


def build_game(args: Namespace) -> PayoffMatrices:
    """
    Load the game described by the positional matrix arguments.

    One file gives a symmetric game (player 2 plays the transpose).

    Raises:
        UsageError: wrong number of matrix files
        MatrixLoadError: a file could not be read or parsed
        IncompatibleMatricesError: the two matrices differ in size
    """
    check_matrix_paths(args.matrices)
    path2 = args.matrices[1] if len(args.matrices) == 2 else None
    return load_game(args.matrices[0], path2)


def format_config_summary(config: EliminationConfig, args: Namespace) -> str:
    """
    Format configuration summary for display.

    Args:
        config: EliminationConfig to summarize
        args: Parsed command-line arguments (for the input file names)

    Returns:
        Formatted string summary
    """
    if len(args.matrices) == 1:
        inputs = f"{args.matrices[0]} (symmetric game)"
    else:
        inputs = ", ".join(args.matrices)

    lines = [
        f"  Matrices: {inputs}",
        f"  Strictness: {config.strictness.value}",
    ]

    if config.live_only:
        lines.append("  Comparing live strategies only")
    if config.max_iterations is not None:
        lines.append(f"  Max iterations: {config.max_iterations}")

    return "\n".join(lines)
