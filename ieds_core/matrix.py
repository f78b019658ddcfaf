"""
Payoff matrix store for IEDS Calculator

2人ゲームの利得行列と、各行・各列の生存状態を保持
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import Player
from .exceptions import IncompatibleMatricesError


def _as_payoff_array(values: ArrayLike) -> NDArray[np.int64]:
    """2次元の整数配列に変換（コピー）。"""
    arr = np.array(values, dtype=np.int64)
    if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError(f"利得行列は空でない2次元配列である必要があります: shape={arr.shape}")
    return arr


@dataclass
class PayoffMatrices:
    """
    プレイヤー1・2の利得行列と生存マスク

    行iはプレイヤー1のi番目の戦略、列jはプレイヤー2のj番目の戦略。
    消去は生存マスクを倒すだけで、利得値は書き換えない（インデックスは常に安定）。
    """

    matrix1: NDArray[np.int64]   # プレイヤー1の利得（R×C）
    matrix2: NDArray[np.int64]   # プレイヤー2の利得（R×C）

    # 内部状態（post_initで初期化）
    _row_live: NDArray[np.bool_] = field(init=False, repr=False)
    _col_live: NDArray[np.bool_] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """形状チェックと生存マスクの初期化"""
        self.matrix1 = _as_payoff_array(self.matrix1)
        self.matrix2 = _as_payoff_array(self.matrix2)

        if self.matrix1.shape != self.matrix2.shape:
            raise IncompatibleMatricesError(self.matrix1.shape, self.matrix2.shape)

        self._row_live = np.ones(self.n_rows, dtype=bool)
        self._col_live = np.ones(self.n_cols, dtype=bool)

    @classmethod
    def symmetric(cls, matrix: ArrayLike) -> "PayoffMatrices":
        """
        対称ゲームを作成（プレイヤー2の利得 = プレイヤー1の転置）

        Raises:
            IncompatibleMatricesError: 正方行列でない場合
        """
        matrix1 = _as_payoff_array(matrix)
        return cls(matrix1=matrix1, matrix2=matrix1.T.copy())

    @property
    def n_rows(self) -> int:
        """行数（プレイヤー1の戦略数）"""
        return int(self.matrix1.shape[0])

    @property
    def n_cols(self) -> int:
        """列数（プレイヤー2の戦略数）"""
        return int(self.matrix1.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.n_rows, self.n_cols)

    @property
    def row_live(self) -> NDArray[np.bool_]:
        """行の生存マスク（読み取り専用コピー）"""
        return self._row_live.copy()

    @property
    def col_live(self) -> NDArray[np.bool_]:
        """列の生存マスク（読み取り専用コピー）"""
        return self._col_live.copy()

    @property
    def n_live_rows(self) -> int:
        return int(np.sum(self._row_live))

    @property
    def n_live_cols(self) -> int:
        return int(np.sum(self._col_live))

    @property
    def reduced_shape(self) -> Tuple[int, int]:
        """消去後の行列サイズ"""
        return (self.n_live_rows, self.n_live_cols)

    def is_row_live(self, row: int) -> bool:
        """指定行が未消去か判定"""
        return bool(self._row_live[row])

    def is_col_live(self, col: int) -> bool:
        """指定列が未消去か判定"""
        return bool(self._col_live[col])

    def eliminate_row(self, row: int) -> bool:
        """
        行を消去する（両プレイヤーの行列で同時に）

        Returns:
            新規に消去された場合True（消去済みなら何もせずFalse）
        """
        if not self._row_live[row]:
            return False
        self._row_live[row] = False
        return True

    def eliminate_col(self, col: int) -> bool:
        """
        列を消去する（両プレイヤーの行列で同時に）

        Returns:
            新規に消去された場合True（消去済みなら何もせずFalse）
        """
        if not self._col_live[col]:
            return False
        self._col_live[col] = False
        return True

    def live_rows(self) -> NDArray[np.int64]:
        """未消去の行インデックス（昇順）"""
        return np.where(self._row_live)[0].astype(np.int64)

    def live_cols(self) -> NDArray[np.int64]:
        """未消去の列インデックス（昇順）"""
        return np.where(self._col_live)[0].astype(np.int64)

    def payoffs(self, player: Player) -> NDArray[np.int64]:
        """指定プレイヤーの利得行列（読み取り専用コピー）"""
        if player is Player.ROW:
            return self.matrix1.copy()
        return self.matrix2.copy()

    def crossed_out(self, player: Player) -> NDArray[np.object_]:
        """
        消去済みのセルをNoneに置き換えた行列を取得

        Returns:
            object配列（R×C）。消去された行・列に属するセルはNone
        """
        result = self.payoffs(player).astype(object)
        alive = np.outer(self._row_live, self._col_live)
        result[~alive] = None
        return result

    def reduced(self, player: Player) -> NDArray[np.int64]:
        """消去済みの行・列を取り除いた行列を取得"""
        return self.payoffs(player)[np.ix_(self._row_live, self._col_live)]

    def copy(self) -> "PayoffMatrices":
        """利得と生存状態のコピーを作成"""
        new_store = PayoffMatrices(
            matrix1=self.matrix1.copy(),
            matrix2=self.matrix2.copy()
        )
        new_store._row_live = self._row_live.copy()
        new_store._col_live = self._col_live.copy()
        return new_store
