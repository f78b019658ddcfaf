"""
Sidebar component for Streamlit UI
"""

from typing import Dict, Tuple

import streamlit as st

from ieds_core.config import EliminationConfig, Strictness
from ieds_core.exceptions import ConfigurationError, IEDSError
from ieds_core.loader import load_matrix, parse_matrix_text
from ieds_core.matrix import PayoffMatrices


# サンプルゲーム（プレイヤー1の利得, プレイヤー2の利得 or None=対称）
SAMPLE_GAMES: Dict[str, Tuple[str, str | None]] = {
    "Prisoner's Dilemma": ("3,0\n5,1\n", None),
    "Three-Step Game (3x3)": (
        "3,1,0\n2,0,5\n1,2,1\n",
        "2,1,0\n1,3,0\n3,0,1\n",
    ),
    "Weak Dominance": ("1,1\n1,0\n", "1,1\n1,0\n"),
    "Battle of the Sexes": ("2,0\n0,1\n", "1,0\n0,2\n"),
}


def render_sidebar() -> Tuple[PayoffMatrices | None, EliminationConfig | None, bool]:
    """
    サイドバーをレンダリング

    Returns:
        (利得行列 or None, 設定オブジェクト or None, 実行ボタンが押されたか)
    """
    st.sidebar.header("Game Input")

    # 入力方式
    source = st.sidebar.radio(
        "Payoff Source",
        options=["Sample Game", "Upload CSV"],
        index=0,
        help="Use a built-in game or upload payoff matrices as CSV files"
    )

    matrices: PayoffMatrices | None = None
    try:
        if source == "Sample Game":
            matrices = _render_sample_input()
        else:
            matrices = _render_upload_input()
    except IEDSError as e:
        st.sidebar.error(str(e))
        matrices = None

    if matrices is not None:
        n_rows, n_cols = matrices.shape
        st.sidebar.markdown(f"**Game Size**: {n_rows}x{n_cols}")

    st.sidebar.markdown("---")
    st.sidebar.header("Elimination Settings")

    # 支配の厳しさ
    strictness_options = {s.value: s for s in Strictness}
    strictness_name = st.sidebar.selectbox(
        "Dominance",
        options=list(strictness_options.keys()),
        index=0,  # デフォルトはStrict
        help="Strict: better everywhere. Weak: never worse, better somewhere. "
             "Very Weak: never worse (ties everywhere allowed)."
    )
    strictness = strictness_options[strictness_name]

    live_only = st.sidebar.checkbox(
        "Compare live strategies only",
        value=False,
        help="By default eliminated opponent strategies count as ties. "
             "Check to compare only the opponent strategies still in play."
    )

    # 反復回数の上限（オプション）
    use_limit = st.sidebar.checkbox(
        "Limit iterations",
        value=False,
        help="Stop before reaching a fixed point"
    )
    max_iterations: int | None = None
    if use_limit:
        max_iterations = int(st.sidebar.number_input(
            "Max Iterations",
            min_value=1,
            max_value=1000,
            value=1,
            step=1
        ))

    st.sidebar.markdown("---")

    # 実行ボタン
    run_clicked = st.sidebar.button(
        "Run Elimination",
        type="primary",
        use_container_width=True,
        disabled=matrices is None
    )

    if run_clicked:
        try:
            config = EliminationConfig(
                strictness=strictness,
                live_only=live_only,
                max_iterations=max_iterations,
            )
            return matrices, config, True
        except ConfigurationError as e:
            st.sidebar.error(f"Configuration Error: {e}")
            return None, None, False

    return None, None, False


def _render_sample_input() -> PayoffMatrices:
    """サンプルゲームの選択とダウンロード"""
    game_name = st.sidebar.selectbox(
        "Sample Game",
        options=list(SAMPLE_GAMES.keys()),
        index=0
    )
    text1, text2 = SAMPLE_GAMES[game_name]

    st.sidebar.download_button(
        label="Download Player 1 CSV",
        data=text1,
        file_name="player1.csv",
        mime="text/csv",
        use_container_width=True
    )
    if text2 is not None:
        st.sidebar.download_button(
            label="Download Player 2 CSV",
            data=text2,
            file_name="player2.csv",
            mime="text/csv",
            use_container_width=True
        )
    else:
        st.sidebar.caption("Symmetric game: player 2 plays the transpose")

    matrix1 = parse_matrix_text(text1, name=f"{game_name} (player 1)")
    if text2 is None:
        return PayoffMatrices.symmetric(matrix1)
    matrix2 = parse_matrix_text(text2, name=f"{game_name} (player 2)")
    return PayoffMatrices(matrix1=matrix1, matrix2=matrix2)


def _render_upload_input() -> PayoffMatrices | None:
    """CSVアップロード（プレイヤー2は省略可）"""
    file1 = st.sidebar.file_uploader(
        "Player 1 Payoffs (CSV)",
        type=["csv", "txt"],
        key="matrix1"
    )
    file2 = st.sidebar.file_uploader(
        "Player 2 Payoffs (CSV, optional)",
        type=["csv", "txt"],
        key="matrix2",
        help="Leave empty for a symmetric game"
    )

    if file1 is None:
        st.sidebar.info("Upload at least the player 1 matrix")
        return None

    matrix1 = load_matrix(file1)
    if file2 is None:
        return PayoffMatrices.symmetric(matrix1)
    return PayoffMatrices(matrix1=matrix1, matrix2=load_matrix(file2))
