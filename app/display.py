"""
Display component for Streamlit UI
"""

import streamlit as st
import matplotlib.pyplot as plt

from ieds_core.config import EliminationConfig, Player
from ieds_core.elimination import EliminationEngine
from ieds_core.matrix import PayoffMatrices
from app.utils import create_payoff_heatmap, crossed_out_dataframe, reduced_dataframe


def render_results(matrices: PayoffMatrices, config: EliminationConfig) -> None:
    """
    逐次消去を実行し結果を表示

    Args:
        matrices: 利得行列（このオブジェクトは変更しない）
        config: 消去設定
    """
    # 実行条件サマリ
    st.subheader("Execution Settings")
    n_rows, n_cols = matrices.shape
    col1, col2, col3 = st.columns(3)
    col1.metric("Dominance", config.strictness.value)
    col2.metric("Game Size", f"{n_rows}x{n_cols}")
    col3.metric(
        "Iteration Limit",
        "None" if config.max_iterations is None else config.max_iterations
    )
    if config.live_only:
        st.caption("Only live opponent strategies are compared")

    st.markdown("---")

    # 消去の実行（入力を汚さないようコピー上で）
    try:
        engine = EliminationEngine(matrices.copy(), config)
        result = engine.run()
    except Exception as e:
        st.error(f"Elimination failed: {e}")
        return

    reduced = result.matrices

    # 結果サマリ
    st.subheader("Results Summary")
    r_rows, r_cols = result.reduced_shape
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Iterations", result.n_iterations)
    col2.metric("Rows Eliminated", result.n_eliminated_rows)
    col3.metric("Cols Eliminated", result.n_eliminated_cols)
    col4.metric("Reduced Size", f"{r_rows}x{r_cols}")

    if not result.converged:
        st.warning("Stopped at the iteration limit before reaching a fixed point.")

    st.markdown("---")

    # 消去トレース
    st.subheader("Elimination Trace")
    for it in result.iterations:
        with st.expander(f"Iteration #{it.iteration}", expanded=True):
            if it.any_eliminated:
                for event in it.events:
                    st.markdown(f"- {event.describe()}")
            else:
                st.markdown("No eliminations.")

    st.markdown("---")

    # ヒートマップ（左右に並べて表示）
    st.subheader("Payoff Heatmaps")
    col_left, col_right = st.columns(2)

    with col_left:
        fig1 = create_payoff_heatmap(reduced, Player.ROW, "Player 1 Payoffs")
        st.pyplot(fig1)
        plt.close(fig1)

    with col_right:
        fig2 = create_payoff_heatmap(reduced, Player.COL, "Player 2 Payoffs")
        st.pyplot(fig2)
        plt.close(fig2)

    st.markdown("---")

    # 行列テーブル
    st.subheader("Matrices With Crossouts")
    col_left, col_right = st.columns(2)
    col_left.markdown("**Player 1**")
    col_left.dataframe(crossed_out_dataframe(reduced, Player.ROW), use_container_width=True)
    col_right.markdown("**Player 2**")
    col_right.dataframe(crossed_out_dataframe(reduced, Player.COL), use_container_width=True)

    st.subheader("Matrices After Removals")
    col_left, col_right = st.columns(2)
    col_left.markdown("**Player 1**")
    col_left.dataframe(reduced_dataframe(reduced, Player.ROW), use_container_width=True)
    col_right.markdown("**Player 2**")
    col_right.dataframe(reduced_dataframe(reduced, Player.COL), use_container_width=True)

    st.markdown("---")

    # CSVダウンロード
    df = result.to_dataframe()
    csv = df.to_csv(index=False)
    st.download_button(
        label="Download Elimination Trace (CSV)",
        data=csv,
        file_name=f"ieds_trace_{config.strictness.name.lower()}.csv",
        mime="text/csv",
        use_container_width=True
    )

    st.download_button(
        label="Download Summary (TXT)",
        data=result.get_summary_text(),
        file_name=f"ieds_summary_{config.strictness.name.lower()}.txt",
        mime="text/plain",
        use_container_width=True
    )
