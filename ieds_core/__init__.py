"""
IEDS Calculator Core Package

2人標準形ゲームにおける被支配戦略の逐次消去（IEDS）のコアモジュール
"""

from .config import EliminationConfig, Strictness, Player, STRICTNESS_FLAGS
from .matrix import PayoffMatrices
from .loader import load_matrix, load_game, parse_matrix_text
from .dominance import DominanceEvaluator, DominanceFlags, dominance_flags, decide
from .results import EliminationEvent, IterationResult, EliminationResult
from .elimination import EliminationEngine, eliminate_all
from .exceptions import (
    IEDSError,
    ConfigurationError,
    UsageError,
    MatrixLoadError,
    IncompatibleMatricesError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "EliminationConfig",
    "Strictness",
    "Player",
    "STRICTNESS_FLAGS",
    # Core
    "PayoffMatrices",
    "DominanceEvaluator",
    "DominanceFlags",
    "dominance_flags",
    "decide",
    "EliminationEngine",
    "eliminate_all",
    "EliminationEvent",
    "IterationResult",
    "EliminationResult",
    # Loader
    "load_matrix",
    "load_game",
    "parse_matrix_text",
    # Exceptions
    "IEDSError",
    "ConfigurationError",
    "UsageError",
    "MatrixLoadError",
    "IncompatibleMatricesError",
]
