"""
Dominance evaluator for IEDS Calculator

2つの純粋戦略のうち一方が他方に支配されているかを判定（副作用なし）
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .config import EliminationConfig, Strictness
from .matrix import PayoffMatrices


@dataclass(frozen=True)
class DominanceFlags:
    """支配候補と被支配候補の利得比較から得られる証拠"""
    found_lesser: bool   # 支配候補の方が小さい位置がある
    found_equal: bool    # 同点の位置がある
    found_greater: bool  # 支配候補の方が大きい位置がある


def dominance_flags(
    dominator: NDArray[np.int64],
    dominated: NDArray[np.int64],
    n_ties: int = 0
) -> DominanceFlags:
    """
    利得の大小比較から支配の証拠を集計

    差を取らずに比較するため、int64の端の値でもオーバーフローしない。

    Args:
        dominator: 支配候補の各位置における利得
        dominated: 被支配候補の同じ位置における利得
        n_ties: 配列に含まれない「同点」とみなす位置の数

    Returns:
        DominanceFlags
    """
    return DominanceFlags(
        found_lesser=bool(np.any(np.less(dominator, dominated))),
        found_equal=bool(np.any(np.equal(dominator, dominated))) or n_ties > 0,
        found_greater=bool(np.any(np.greater(dominator, dominated))),
    )


def decide(strictness: Strictness, flags: DominanceFlags) -> bool:
    """厳しさに応じて支配を判定"""
    if strictness is Strictness.STRICT:
        return not flags.found_equal and not flags.found_lesser
    if strictness is Strictness.WEAK:
        return flags.found_greater and not flags.found_lesser
    if strictness is Strictness.VERYWEAK:
        return not flags.found_lesser
    return False


class DominanceEvaluator:
    """支配判定器"""

    def __init__(
        self,
        matrices: PayoffMatrices,
        config: EliminationConfig | None = None
    ) -> None:
        """
        Args:
            matrices: 判定対象の利得行列（生存状態は判定時点のものを参照）
            config: 消去設定（Noneならデフォルト = STRICT）
        """
        self.matrices = matrices
        self.config = config if config is not None else EliminationConfig()

    @property
    def strictness(self) -> Strictness:
        return self.config.strictness

    def is_row_dominated(self, row_a: int, row_b: int) -> bool:
        """
        プレイヤー1の行row_aが行row_bに支配されているか

        自分自身との比較、または消去済みの行を含む比較は常にFalse。
        消去済みの列は同点として数える（live_onlyなら比較から除外）。
        """
        if row_a == row_b:
            return False
        if not self.matrices.is_row_live(row_a) or not self.matrices.is_row_live(row_b):
            return False

        cols = self.matrices.live_cols()
        m1 = self.matrices.matrix1
        n_ties = self._n_eliminated_ties(self.matrices.n_cols - len(cols))
        flags = dominance_flags(m1[row_b, cols], m1[row_a, cols], n_ties)
        return decide(self.strictness, flags)

    def is_col_dominated(self, col_a: int, col_b: int) -> bool:
        """
        プレイヤー2の列col_aが列col_bに支配されているか

        is_row_dominatedの列版（matrix2を行方向に走査）。
        """
        if col_a == col_b:
            return False
        if not self.matrices.is_col_live(col_a) or not self.matrices.is_col_live(col_b):
            return False

        rows = self.matrices.live_rows()
        m2 = self.matrices.matrix2
        n_ties = self._n_eliminated_ties(self.matrices.n_rows - len(rows))
        flags = dominance_flags(m2[rows, col_b], m2[rows, col_a], n_ties)
        return decide(self.strictness, flags)

    def _n_eliminated_ties(self, n_eliminated: int) -> int:
        if self.config.live_only:
            return 0
        return n_eliminated
