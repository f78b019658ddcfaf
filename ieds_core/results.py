"""
Result data structures for IEDS Calculator

消去イベントと反復ごとの結果の集約
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import pandas as pd

from .config import Player
from .matrix import PayoffMatrices


@dataclass(frozen=True)
class EliminationEvent:
    """単一の消去イベント"""

    iteration: int          # 反復番号（1始まり）
    player: Player          # 行（プレイヤー1）か列（プレイヤー2）か
    index: int              # 消去された戦略のインデックス（0始まり）
    dominated_by: int       # 支配した戦略のインデックス（0始まり）

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "iteration": self.iteration,
            "player": self.player.value,
            "index": self.index,
            "dominated_by": self.dominated_by,
        }

    def describe(self) -> str:
        """人間可読な1行（インデックスは1始まり）"""
        return (
            f"{self.player.value} {self.index + 1} dominated by "
            f"{self.player.value.lower()} {self.dominated_by + 1}"
        )


@dataclass
class IterationResult:
    """1回の反復（行スイープ + 列スイープ）の結果"""

    iteration: int
    events: List[EliminationEvent] = field(default_factory=list)

    @property
    def any_eliminated(self) -> bool:
        """この反復で1つ以上消去されたか"""
        return len(self.events) > 0


@dataclass
class EliminationResult:
    """逐次消去全体の結果"""

    iterations: List[IterationResult]
    matrices: PayoffMatrices
    config_summary: Dict[str, Any]
    converged: bool = True   # 不動点に到達したか（max_iterationsで打ち切られたらFalse）

    @property
    def n_iterations(self) -> int:
        """反復回数（消去なしの最終反復を含む）"""
        return len(self.iterations)

    @property
    def events(self) -> List[EliminationEvent]:
        """全消去イベント（発生順）"""
        return [event for it in self.iterations for event in it.events]

    @property
    def n_eliminated_rows(self) -> int:
        return sum(1 for e in self.events if e.player is Player.ROW)

    @property
    def n_eliminated_cols(self) -> int:
        return sum(1 for e in self.events if e.player is Player.COL)

    @property
    def reduced_shape(self) -> Tuple[int, int]:
        """消去後の行列サイズ"""
        return self.matrices.reduced_shape

    def to_dataframe(self) -> pd.DataFrame:
        """
        消去イベントをDataFrameに変換

        Returns:
            消去イベントのDataFrame（イベントがなくても列は揃える）
        """
        records = [e.to_dict() for e in self.events]
        return pd.DataFrame(
            records,
            columns=["iteration", "player", "index", "dominated_by"]
        )

    def to_csv(self, path: str, index: bool = False) -> None:
        """
        消去イベントをCSVに出力

        Args:
            path: 出力ファイルパス
            index: インデックスを出力するか
        """
        self.to_dataframe().to_csv(path, index=index)

    def get_summary_text(self) -> str:
        """
        結果のサマリテキストを生成

        Returns:
            人間可読なサマリ文字列
        """
        n_rows, n_cols = self.matrices.shape
        r_rows, r_cols = self.reduced_shape

        lines = [
            "=== IEDS Results ===",
            f"Strictness: {self.config_summary.get('strictness', 'N/A')}",
            f"Original size: {n_rows}x{n_cols}",
            f"Iterations: {self.n_iterations}",
            f"Eliminated rows: {self.n_eliminated_rows}",
            f"Eliminated cols: {self.n_eliminated_cols}",
            f"Post-elimination matrix size: {r_rows}x{r_cols}",
        ]
        if not self.converged:
            lines.append("Stopped before reaching a fixed point (iteration limit).")

        return "\n".join(lines)
