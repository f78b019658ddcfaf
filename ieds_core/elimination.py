"""
Elimination engine for IEDS Calculator

被支配戦略の逐次消去（不動点まで行・列のスイープを繰り返す）
"""

from typing import Callable, List

from .config import EliminationConfig, Player
from .dominance import DominanceEvaluator
from .matrix import PayoffMatrices
from .results import EliminationEvent, IterationResult, EliminationResult


class EliminationEngine:
    """逐次消去エンジン"""

    def __init__(
        self,
        matrices: PayoffMatrices,
        config: EliminationConfig | None = None,
        event_callback: Callable[[EliminationEvent], None] | None = None,
        iteration_callback: Callable[[IterationResult], None] | None = None
    ) -> None:
        """
        Args:
            matrices: 利得行列（消去はこのオブジェクトに直接反映される）
            config: 消去設定（Noneならデフォルト = STRICT）
            event_callback: 消去のたびに呼ばれるコールバック (event) -> None
            iteration_callback: 反復終了ごとに呼ばれるコールバック (result) -> None
        """
        self.matrices = matrices
        self.config = config if config is not None else EliminationConfig()
        self.event_callback = event_callback
        self.iteration_callback = iteration_callback

        self.evaluator = DominanceEvaluator(matrices, self.config)

    def run(self) -> EliminationResult:
        """
        消去できなくなるまで反復を実行

        Returns:
            消去結果（最後の反復は消去なし。上限で打ち切った場合を除く）
        """
        iterations: List[IterationResult] = []
        converged = True

        while True:
            result = self._run_single_iteration(len(iterations) + 1)
            iterations.append(result)

            if self.iteration_callback:
                self.iteration_callback(result)

            if not result.any_eliminated:
                break

            limit = self.config.max_iterations
            if limit is not None and len(iterations) >= limit:
                converged = False
                break

        return EliminationResult(
            iterations=iterations,
            matrices=self.matrices,
            config_summary=self.config.to_dict(),
            converged=converged,
        )

    def _run_single_iteration(self, iteration: int) -> IterationResult:
        """
        1回の反復（行スイープの後に列スイープ）

        消去は即座に反映され、同じスイープ内の後続の比較に影響する。
        走査順はインデックスの昇順。
        """
        result = IterationResult(iteration=iteration)

        n_rows = self.matrices.n_rows
        for row in range(n_rows):
            for opp in range(n_rows):
                if self.evaluator.is_row_dominated(row, opp):
                    self.matrices.eliminate_row(row)
                    self._record(result, Player.ROW, row, opp)

        n_cols = self.matrices.n_cols
        for col in range(n_cols):
            for opp in range(n_cols):
                if self.evaluator.is_col_dominated(col, opp):
                    self.matrices.eliminate_col(col)
                    self._record(result, Player.COL, col, opp)

        return result

    def _record(
        self,
        result: IterationResult,
        player: Player,
        index: int,
        dominated_by: int
    ) -> None:
        event = EliminationEvent(
            iteration=result.iteration,
            player=player,
            index=index,
            dominated_by=dominated_by,
        )
        result.events.append(event)
        if self.event_callback:
            self.event_callback(event)


def eliminate_all(
    matrices: PayoffMatrices,
    config: EliminationConfig | None = None
) -> EliminationResult:
    """利得行列に対して逐次消去を実行（EliminationEngineの簡易版）"""
    return EliminationEngine(matrices, config).run()
