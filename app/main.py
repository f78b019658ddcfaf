"""
Streamlit application entry point for IEDS Calculator
"""

import streamlit as st

from app.sidebar import render_sidebar
from app.display import render_results


def main() -> None:
    """Streamlitアプリのエントリーポイント"""

    # ページ設定
    st.set_page_config(
        page_title="IEDS Calculator",
        page_icon=":game_die:",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # タイトル
    st.title("IEDS Calculator")
    st.markdown(
        "**Iterated Elimination of Dominated Strategies for Two-Player Games**"
    )

    st.markdown("---")

    # サイドバーでゲームと設定を入力
    matrices, config, run_clicked = render_sidebar()

    # メイン領域
    if run_clicked:
        if matrices is not None and config is not None:
            render_results(matrices, config)
        else:
            st.error(
                "Input error. Please check the sidebar settings."
            )
    else:
        # 初期表示
        st.info(
            "Choose a game in the sidebar and click "
            "**Run Elimination** to start."
        )

        # 使い方の説明
        with st.expander("How to Use", expanded=True):
            st.markdown("""
            ### Input

            - **Player 1 matrix**: CSV of integer payoffs, one row per
              player 1 strategy, one column per player 2 strategy
            - **Player 2 matrix** (optional): same shape as player 1.
              If omitted the game is symmetric and player 2's payoffs
              are the transpose of player 1's

            ### Dominance

            - **Strict**: the dominating strategy pays strictly more
              against every opponent strategy
            - **Weak**: never less, and strictly more at least once
            - **Very Weak**: never less (identical strategies dominate
              each other; the lower index is removed first)

            ### Procedure

            Each iteration sweeps rows (player 1) then columns (player 2)
            in ascending order. A dominated strategy is removed as soon as
            it is found, so later comparisons in the same sweep no longer
            see it. An opponent strategy that has already been removed
            counts as a tie, which blocks Strict dominance; check
            **Compare live strategies only** to ignore removed strategies
            instead. Iterations repeat until one removes nothing.
            """)


if __name__ == "__main__":
    main()
