"""
Tests for DominanceEvaluator
"""

import pytest
import numpy as np

from ieds_core.config import EliminationConfig, Strictness
from ieds_core.dominance import DominanceEvaluator, DominanceFlags, decide, dominance_flags
from ieds_core.matrix import PayoffMatrices


@pytest.fixture
def row_store() -> PayoffMatrices:
    """行の支配関係を確認するための4x3ゲーム"""
    return PayoffMatrices(
        matrix1=[
            [1, 2, 3],
            [2, 3, 4],   # 行0より全列で大きい
            [2, 2, 3],   # 行0より大きいか同点
            [1, 2, 3],   # 行0と同一
        ],
        matrix2=np.zeros((4, 3), dtype=np.int64),
    )


@pytest.fixture
def col_store() -> PayoffMatrices:
    """列の支配関係を確認するための3x3ゲーム"""
    return PayoffMatrices(
        matrix1=np.zeros((3, 3), dtype=np.int64),
        matrix2=[
            [1, 2, 1],
            [1, 3, 1],
            [1, 4, 2],
        ],
    )


def evaluator(store: PayoffMatrices, strictness: Strictness, **kwargs) -> DominanceEvaluator:
    return DominanceEvaluator(store, EliminationConfig(strictness=strictness, **kwargs))


class TestDecide:
    """支配判定ルールのテスト"""

    @pytest.mark.parametrize(
        "diff, strict, weak, very_weak",
        [
            ([1, 1, 1], True, True, True),
            ([1, 0, 1], False, True, True),
            ([0, 0, 0], False, False, True),
            ([1, -1, 1], False, False, False),
            ([-1, -1, -1], False, False, False),
            ([0, -1, 0], False, False, False),
        ],
    )
    def test_truth_table(
        self, diff: list, strict: bool, weak: bool, very_weak: bool
    ) -> None:
        """各厳しさの判定表"""
        diff = np.array(diff, dtype=np.int64)
        flags = dominance_flags(diff, np.zeros_like(diff))
        assert decide(Strictness.STRICT, flags) is strict
        assert decide(Strictness.WEAK, flags) is weak
        assert decide(Strictness.VERYWEAK, flags) is very_weak

    def test_flags(self) -> None:
        """証拠フラグの集計"""
        flags = dominance_flags(
            np.array([3, 0, -2], dtype=np.int64),
            np.array([0, 0, 0], dtype=np.int64),
        )
        assert flags == DominanceFlags(found_lesser=True, found_equal=True, found_greater=True)

    def test_extra_ties_count_as_equal(self) -> None:
        """配列外の同点位置はfound_equalに加算される"""
        flags = dominance_flags(
            np.array([2, 2], dtype=np.int64),
            np.array([1, 1], dtype=np.int64),
            n_ties=1,
        )
        assert flags.found_equal
        assert not decide(Strictness.STRICT, flags)
        assert decide(Strictness.WEAK, flags)


class TestRowDominance:
    """is_row_dominatedのテスト"""

    def test_strict(self, row_store: PayoffMatrices) -> None:
        ev = evaluator(row_store, Strictness.STRICT)
        assert ev.is_row_dominated(0, 1)
        assert not ev.is_row_dominated(0, 2)
        assert not ev.is_row_dominated(0, 3)
        assert not ev.is_row_dominated(1, 0)

    def test_weak(self, row_store: PayoffMatrices) -> None:
        ev = evaluator(row_store, Strictness.WEAK)
        assert ev.is_row_dominated(0, 1)
        assert ev.is_row_dominated(0, 2)
        assert not ev.is_row_dominated(0, 3)
        assert not ev.is_row_dominated(2, 0)

    def test_very_weak(self, row_store: PayoffMatrices) -> None:
        ev = evaluator(row_store, Strictness.VERYWEAK)
        assert ev.is_row_dominated(0, 1)
        assert ev.is_row_dominated(0, 2)
        assert ev.is_row_dominated(0, 3)
        assert ev.is_row_dominated(3, 0)
        assert not ev.is_row_dominated(1, 0)

    @pytest.mark.parametrize("strictness", list(Strictness))
    def test_self_pair_never_dominated(
        self, row_store: PayoffMatrices, strictness: Strictness
    ) -> None:
        """自分自身との比較は常にFalse"""
        ev = evaluator(row_store, strictness)
        for row in range(row_store.n_rows):
            assert not ev.is_row_dominated(row, row)

    def test_eliminated_rows_never_compared(self, row_store: PayoffMatrices) -> None:
        """消去済みの行は支配する側にもされる側にもならない"""
        ev = evaluator(row_store, Strictness.VERYWEAK)
        row_store.eliminate_row(1)
        assert not ev.is_row_dominated(0, 1)
        assert not ev.is_row_dominated(1, 0)
        assert ev.is_row_dominated(0, 2)

    def test_eliminated_columns_count_as_ties(self) -> None:
        """消去済みの列は同点として数えられる"""
        store = PayoffMatrices(
            matrix1=[[1, 5], [2, 4]],
            matrix2=np.zeros((2, 2), dtype=np.int64),
        )
        store.eliminate_col(1)
        assert not evaluator(store, Strictness.STRICT).is_row_dominated(0, 1)
        assert evaluator(store, Strictness.WEAK).is_row_dominated(0, 1)
        assert evaluator(store, Strictness.VERYWEAK).is_row_dominated(0, 1)

    def test_live_only(self) -> None:
        """live_onlyでは消去済みの列を比較に含めない"""
        store = PayoffMatrices(
            matrix1=[[1, 5], [2, 4]],
            matrix2=np.zeros((2, 2), dtype=np.int64),
        )
        ev = evaluator(store, Strictness.STRICT, live_only=True)
        assert not ev.is_row_dominated(0, 1)
        store.eliminate_col(1)
        assert ev.is_row_dominated(0, 1)

    def test_extreme_payoffs(self) -> None:
        """int64の最小値と最大値の比較でもオーバーフローしない"""
        lo = np.iinfo(np.int64).min
        hi = np.iinfo(np.int64).max
        store = PayoffMatrices(
            matrix1=[[lo, lo], [hi, hi]],
            matrix2=np.zeros((2, 2), dtype=np.int64),
        )
        ev = evaluator(store, Strictness.STRICT)
        assert ev.is_row_dominated(0, 1)
        assert not ev.is_row_dominated(1, 0)

    def test_does_not_mutate(self, row_store: PayoffMatrices) -> None:
        """判定は副作用なし"""
        ev = evaluator(row_store, Strictness.VERYWEAK)
        for a in range(row_store.n_rows):
            for b in range(row_store.n_rows):
                ev.is_row_dominated(a, b)
        assert row_store.reduced_shape == (4, 3)


class TestColDominance:
    """is_col_dominatedのテスト（matrix2を使用）"""

    def test_strict(self, col_store: PayoffMatrices) -> None:
        ev = evaluator(col_store, Strictness.STRICT)
        assert ev.is_col_dominated(0, 1)
        assert not ev.is_col_dominated(1, 0)
        assert not ev.is_col_dominated(0, 2)

    def test_weak(self, col_store: PayoffMatrices) -> None:
        ev = evaluator(col_store, Strictness.WEAK)
        assert ev.is_col_dominated(0, 2)
        assert not ev.is_col_dominated(2, 0)

    def test_very_weak(self, col_store: PayoffMatrices) -> None:
        ev = evaluator(col_store, Strictness.VERYWEAK)
        assert ev.is_col_dominated(0, 2)
        assert not ev.is_col_dominated(2, 0)
        assert not ev.is_col_dominated(1, 1)

    def test_uses_player2_payoffs(self) -> None:
        """列の判定はプレイヤー1の利得を参照しない"""
        store = PayoffMatrices(
            matrix1=[[9, 0], [9, 0]],
            matrix2=[[0, 9], [0, 9]],
        )
        ev = evaluator(store, Strictness.STRICT)
        assert ev.is_col_dominated(0, 1)
        assert not ev.is_col_dominated(1, 0)

    def test_eliminated_rows_count_as_ties(self, col_store: PayoffMatrices) -> None:
        """消去済みの行は同点として数えられ、厳密支配を妨げる"""
        col_store.eliminate_row(0)
        col_store.eliminate_row(1)
        assert not evaluator(col_store, Strictness.STRICT).is_col_dominated(0, 2)
        assert evaluator(col_store, Strictness.WEAK).is_col_dominated(0, 2)

    def test_live_only(self, col_store: PayoffMatrices) -> None:
        """live_onlyでは消去済みの行を比較に含めない"""
        ev = evaluator(col_store, Strictness.STRICT, live_only=True)
        assert not ev.is_col_dominated(0, 2)
        col_store.eliminate_row(0)
        col_store.eliminate_row(1)
        assert ev.is_col_dominated(0, 2)


class TestMonotonicity:
    """STRICT ⇒ WEAK ⇒ VERYWEAK"""

    @pytest.mark.parametrize("seed", range(20))
    def test_stricter_implies_weaker(self, seed: int) -> None:
        rng = np.random.default_rng(seed)
        store = PayoffMatrices(
            matrix1=rng.integers(0, 3, size=(4, 3)),
            matrix2=rng.integers(0, 3, size=(4, 3)),
        )
        strict = evaluator(store, Strictness.STRICT)
        weak = evaluator(store, Strictness.WEAK)
        very_weak = evaluator(store, Strictness.VERYWEAK)

        for a in range(store.n_rows):
            for b in range(store.n_rows):
                if strict.is_row_dominated(a, b):
                    assert weak.is_row_dominated(a, b)
                if weak.is_row_dominated(a, b):
                    assert very_weak.is_row_dominated(a, b)

        for a in range(store.n_cols):
            for b in range(store.n_cols):
                if strict.is_col_dominated(a, b):
                    assert weak.is_col_dominated(a, b)
                if weak.is_col_dominated(a, b):
                    assert very_weak.is_col_dominated(a, b)
