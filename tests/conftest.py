"""
Shared fixtures for IEDS tests
"""

import pytest

from ieds_core.matrix import PayoffMatrices


@pytest.fixture
def prisoners_dilemma() -> PayoffMatrices:
    """囚人のジレンマ（対称）: 行0/列0 = 協調, 行1/列1 = 裏切り"""
    return PayoffMatrices.symmetric([[3, 0], [5, 1]])


@pytest.fixture
def three_step_game() -> PayoffMatrices:
    """live_onlyの厳密支配で3段階の消去が必要な3x3ゲーム"""
    return PayoffMatrices(
        matrix1=[[3, 1, 0], [2, 0, 5], [1, 2, 1]],
        matrix2=[[2, 1, 0], [1, 3, 0], [3, 0, 1]],
    )


@pytest.fixture
def weak_game() -> PayoffMatrices:
    """弱支配・超弱支配でのみ消去が起きるゲーム"""
    return PayoffMatrices(
        matrix1=[[1, 1], [1, 0]],
        matrix2=[[1, 1], [1, 0]],
    )


@pytest.fixture
def tie_game() -> PayoffMatrices:
    """行0と行1が同一（超弱支配の走査順依存を確認する3戦略ゲーム）"""
    return PayoffMatrices(
        matrix1=[[2, 2], [2, 2], [1, 3]],
        matrix2=[[0, 0], [1, 0], [0, 1]],
    )
