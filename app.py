"""gomokuai: Gradio web app entry point."""

import logging

import gradio as gr

from gomokuai.ui.board_component import BOARD_CLICK_JS
from gomokuai.ui.play_tab import build_play_tab

with gr.Blocks(title="Gomoku") as demo:
    gr.Markdown("# Gomoku")
    gr.Markdown("Play against the minimax AI: 15x15 board, 5 in a row to win.")

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=BOARD_CLICK_JS)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    demo.launch(theme=gr.themes.Soft())
