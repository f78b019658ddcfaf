"""
Utility functions for Streamlit UI
"""

from typing import Tuple

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
import numpy as np
import pandas as pd

from ieds_core.config import Player
from ieds_core.matrix import PayoffMatrices

# フォント設定（環境に応じて調整）
matplotlib.rcParams['font.family'] = ['DejaVu Sans', 'sans-serif']


def strategy_labels(n: int, prefix: str) -> list[str]:
    """戦略ラベル（1始まり）"""
    return [f"{prefix}{i + 1}" for i in range(n)]


def create_payoff_heatmap(
    matrices: PayoffMatrices,
    player: Player,
    title: str,
    figsize: Tuple[float, float] = (5, 4)
) -> Figure:
    """
    利得行列のヒートマップを作成（消去済みセルはハッチングで表示）

    Args:
        matrices: 利得行列
        player: 表示するプレイヤー
        title: グラフタイトル
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    values = matrices.payoffs(player).astype(np.float64)
    alive = np.outer(matrices.row_live, matrices.col_live)
    masked = np.ma.masked_where(~alive, values)

    cmap = matplotlib.colormaps["viridis"].copy()
    cmap.set_bad(color="#DDDDDD")
    image = ax.imshow(masked, cmap=cmap, aspect="auto")
    fig.colorbar(image, ax=ax)

    n_rows, n_cols = matrices.shape
    for i in range(n_rows):
        for j in range(n_cols):
            text = str(int(values[i, j])) if alive[i, j] else "-"
            ax.text(j, i, text, ha="center", va="center", color="black")

    ax.set_xticks(range(n_cols))
    ax.set_xticklabels(strategy_labels(n_cols, "C"))
    ax.set_yticks(range(n_rows))
    ax.set_yticklabels(strategy_labels(n_rows, "R"))
    ax.set_title(title)
    fig.tight_layout()

    return fig


def crossed_out_dataframe(matrices: PayoffMatrices, player: Player) -> pd.DataFrame:
    """消去済みセルを'-'で表示するDataFrame"""
    crossed = matrices.crossed_out(player)
    n_rows, n_cols = matrices.shape
    cells = [["-" if v is None else str(v) for v in row] for row in crossed]
    return pd.DataFrame(
        cells,
        index=strategy_labels(n_rows, "R"),
        columns=strategy_labels(n_cols, "C"),
    )


def reduced_dataframe(matrices: PayoffMatrices, player: Player) -> pd.DataFrame:
    """消去済みの行・列を取り除いたDataFrame（元のラベルを保持）"""
    return pd.DataFrame(
        matrices.reduced(player),
        index=[f"R{i + 1}" for i in matrices.live_rows()],
        columns=[f"C{j + 1}" for j in matrices.live_cols()],
    )
