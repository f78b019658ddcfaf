"""
Runner for executing elimination with a live console trace.
"""

from ieds_core.config import EliminationConfig
from ieds_core.elimination import EliminationEngine
from ieds_core.matrix import PayoffMatrices
from ieds_core.results import EliminationResult

from .reporter import print_iteration


def run_elimination(
    matrices: PayoffMatrices,
    config: EliminationConfig,
    show_trace: bool = True,
) -> EliminationResult:
    """
    Run IEDS on the given matrices.

    Args:
        matrices: Payoff matrices (mutated in place)
        config: Elimination configuration
        show_trace: Whether to print each iteration as it completes

    Returns:
        EliminationResult for the run
    """
    engine = EliminationEngine(
        matrices,
        config,
        iteration_callback=print_iteration if show_trace else None,
    )
    return engine.run()
