"""
Tests for PayoffMatrices
"""

import pytest
import numpy as np

from ieds_core.config import Player
from ieds_core.exceptions import IncompatibleMatricesError
from ieds_core.matrix import PayoffMatrices


class TestPayoffMatrices:
    """PayoffMatricesの単体テスト"""

    def test_initial_state(self) -> None:
        """初期状態では全行・全列が生存"""
        store = PayoffMatrices(matrix1=[[1, 2, 3], [4, 5, 6]], matrix2=np.zeros((2, 3)))
        assert store.shape == (2, 3)
        assert store.n_rows == 2
        assert store.n_cols == 3
        assert store.reduced_shape == (2, 3)
        assert all(store.is_row_live(i) for i in range(2))
        assert all(store.is_col_live(j) for j in range(3))

    def test_symmetric_is_transpose(self) -> None:
        """対称ゲームのプレイヤー2行列は転置"""
        store = PayoffMatrices.symmetric([[3, 3], [5, 0]])
        np.testing.assert_array_equal(store.matrix2, [[3, 5], [3, 0]])
        np.testing.assert_array_equal(store.matrix2, store.matrix1.T)

    def test_symmetric_does_not_share_memory(self) -> None:
        """転置はコピーであること"""
        store = PayoffMatrices.symmetric([[1, 2], [3, 4]])
        assert not np.shares_memory(store.matrix1, store.matrix2)

    def test_symmetric_requires_square(self) -> None:
        """非正方行列の対称ゲームはサイズ不一致"""
        with pytest.raises(IncompatibleMatricesError, match="2x3 vs 3x2"):
            PayoffMatrices.symmetric([[1, 2, 3], [4, 5, 6]])

    def test_shape_mismatch(self) -> None:
        """2つの行列のサイズ不一致でエラー"""
        with pytest.raises(IncompatibleMatricesError) as exc_info:
            PayoffMatrices(matrix1=[[1, 2]], matrix2=[[1], [2]])
        assert exc_info.value.shape1 == (1, 2)
        assert exc_info.value.shape2 == (2, 1)

    @pytest.mark.parametrize("bad", [[], [[]], [1, 2, 3]])
    def test_rejects_empty_or_1d(self, bad: list) -> None:
        """空配列・1次元配列はエラー"""
        with pytest.raises(ValueError, match="2次元配列"):
            PayoffMatrices(matrix1=bad, matrix2=bad)

    def test_eliminate_row(self) -> None:
        """行の消去"""
        store = PayoffMatrices.symmetric([[1, 2], [3, 4]])
        assert store.eliminate_row(0)
        assert not store.is_row_live(0)
        assert store.is_row_live(1)
        assert store.reduced_shape == (1, 2)
        np.testing.assert_array_equal(store.live_rows(), [1])

    def test_eliminate_col(self) -> None:
        """列の消去"""
        store = PayoffMatrices.symmetric([[1, 2], [3, 4]])
        assert store.eliminate_col(1)
        assert not store.is_col_live(1)
        assert store.reduced_shape == (2, 1)
        np.testing.assert_array_equal(store.live_cols(), [0])

    def test_eliminate_is_idempotent(self) -> None:
        """再消去は何もしない"""
        store = PayoffMatrices.symmetric([[1, 2], [3, 4]])
        store.eliminate_row(0)
        store.eliminate_col(0)
        assert not store.eliminate_row(0)
        assert not store.eliminate_col(0)
        assert store.reduced_shape == (1, 1)
        np.testing.assert_array_equal(store.reduced(Player.ROW), [[4]])

    def test_elimination_keeps_payoffs(self) -> None:
        """消去しても利得値は書き換えない"""
        store = PayoffMatrices(matrix1=[[1, 2], [3, 4]], matrix2=[[5, 6], [7, 8]])
        store.eliminate_row(0)
        store.eliminate_col(1)
        np.testing.assert_array_equal(store.matrix1, [[1, 2], [3, 4]])
        np.testing.assert_array_equal(store.matrix2, [[5, 6], [7, 8]])

    def test_crossed_out(self) -> None:
        """消去済みセルはNone"""
        store = PayoffMatrices(matrix1=[[1, 2], [3, 4]], matrix2=[[5, 6], [7, 8]])
        store.eliminate_row(0)
        store.eliminate_col(1)
        assert store.crossed_out(Player.ROW).tolist() == [[None, None], [3, None]]
        assert store.crossed_out(Player.COL).tolist() == [[None, None], [7, None]]

    def test_reduced(self) -> None:
        """消去済みの行・列を取り除いた行列"""
        store = PayoffMatrices(
            matrix1=[[1, 2, 3], [4, 5, 6], [7, 8, 9]],
            matrix2=[[9, 8, 7], [6, 5, 4], [3, 2, 1]],
        )
        store.eliminate_row(1)
        store.eliminate_col(0)
        np.testing.assert_array_equal(store.reduced(Player.ROW), [[2, 3], [8, 9]])
        np.testing.assert_array_equal(store.reduced(Player.COL), [[8, 7], [2, 1]])

    def test_any_integer_is_a_valid_payoff(self) -> None:
        """特定の値を消去マークとして予約しない"""
        lowest = np.iinfo(np.int64).min
        store = PayoffMatrices.symmetric([[lowest, lowest], [lowest, lowest]])
        assert store.n_live_rows == 2
        assert store.n_live_cols == 2

    def test_live_masks_are_copies(self) -> None:
        """生存マスクは読み取り専用コピー"""
        store = PayoffMatrices.symmetric([[1, 2], [3, 4]])
        mask = store.row_live
        mask[0] = False
        assert store.is_row_live(0)

    def test_copy(self) -> None:
        """コピーのテスト"""
        store = PayoffMatrices.symmetric([[1, 2], [3, 4]])
        store.eliminate_row(0)
        copied = store.copy()

        # コピーは同じ状態
        assert copied.reduced_shape == (1, 2)
        assert not copied.is_row_live(0)

        # 元を変更してもコピーに影響しない
        store.eliminate_col(0)
        assert store.reduced_shape == (1, 1)
        assert copied.reduced_shape == (1, 2)
