"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Optional

from gomokuai.game.board import BOARD_SIZE, CENTER, COL_LABELS, format_point
from gomokuai.game.state import GomokuGameState
from gomokuai.game.types import Player, Point

# Layout constants
CELL_SIZE = 40
MARGIN = 40
BOARD_PX = MARGIN * 2 + CELL_SIZE * (BOARD_SIZE - 1)
STONE_RADIUS = 16
CLICK_RADIUS = 18  # Invisible click target radius

# Colors
BG_COLOR = "#DCB35C"
LINE_COLOR = "#4A3728"
HUMAN_STONE = "#1A1A1A"
AI_STONE = "#F5F5F5"
AI_STROKE = "#888"
WIN_COLOR = "#E74C3C"

# Banner colors keyed by outcome text
BANNER_WIN = "#4ADE80"
BANNER_LOSS = "#F87171"
BANNER_DRAW = "#FFFFFF"

# Star points of a 15x15 board
STAR_POINTS = [Point(3, 3), Point(3, 11), CENTER, Point(11, 3), Point(11, 11)]


def _coord(row: int, col: int) -> tuple[int, int]:
    """Convert 0-indexed board coordinates to SVG pixel coordinates."""
    x = MARGIN + col * CELL_SIZE
    y = MARGIN + row * CELL_SIZE  # row 0 at top
    return x, y


def _banner_color(message: str) -> str:
    if message.startswith("You win"):
        return BANNER_WIN
    if message.startswith("AI wins"):
        return BANNER_LOSS
    return BANNER_DRAW


def render_board_svg(
    game_state: GomokuGameState,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
) -> str:
    """Render the board as an SVG string."""
    parts: list[str] = []

    # SVG header
    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_PX}" height="{BOARD_PX}" '
        f'viewBox="0 0 {BOARD_PX} {BOARD_PX}" '
        f'id="gomoku-board">'
    )

    # Background
    parts.append(
        f'<rect width="{BOARD_PX}" height="{BOARD_PX}" fill="{BG_COLOR}" rx="4"/>'
    )

    # Grid lines
    edge = MARGIN + (BOARD_SIZE - 1) * CELL_SIZE
    for i in range(BOARD_SIZE):
        pos = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{pos}" y1="{MARGIN}" x2="{pos}" y2="{edge}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )
        parts.append(
            f'<line x1="{MARGIN}" y1="{pos}" x2="{edge}" y2="{pos}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )

    for star in STAR_POINTS:
        sx, sy = _coord(*star)
        parts.append(f'<circle cx="{sx}" cy="{sy}" r="3" fill="{LINE_COLOR}"/>')

    # Column labels (top) and row labels (left)
    for i in range(BOARD_SIZE):
        x, y = _coord(i, i)
        parts.append(
            f'<text x="{x}" y="{MARGIN - 15}" text-anchor="middle" '
            f'font-size="13" font-family="monospace" fill="{LINE_COLOR}">'
            f'{COL_LABELS[i]}</text>'
        )
        parts.append(
            f'<text x="{MARGIN - 22}" y="{y + 4}" text-anchor="middle" '
            f'font-size="13" font-family="monospace" fill="{LINE_COLOR}">'
            f'{i + 1}</text>'
        )

    # Stones
    last_point: Optional[Point] = game_state.last_move
    winning = set(game_state.winning_span)

    for point, player in game_state.board.stones():
        x, y = _coord(*point)
        fill = HUMAN_STONE if player is Player.HUMAN else AI_STONE
        stroke = "none" if player is Player.HUMAN else AI_STROKE
        if point in winning:
            stroke = WIN_COLOR
        parts.append(
            f'<circle cx="{x}" cy="{y}" r="{STONE_RADIUS}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="3" '
            f'class="stone{" winning" if point in winning else ""}"/>'
        )
        if highlight_last and point == last_point:
            marker_color = AI_STONE if player is Player.HUMAN else HUMAN_STONE
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="5" '
                f'fill="{marker_color}" opacity="0.7"/>'
            )

    # Clickable intersection targets (invisible circles)
    if clickable and not game_state.is_over:
        for point in game_state.board.empty_points():
            x, y = _coord(*point)
            coord_str = format_point(point)
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="{CLICK_RADIUS}" '
                f'fill="transparent" class="board-click" '
                f'data-coord="{coord_str}" style="cursor:pointer">'
                f'<title>{coord_str}</title></circle>'
            )

    if game_over_message:
        mid = BOARD_PX // 2
        parts.append(
            f'<rect x="{mid - 110}" y="{mid - 30}" width="220" height="60" '
            f'rx="8" fill="rgba(0, 0, 0, 0.65)"/>'
        )
        parts.append(
            f'<text x="{mid}" y="{mid + 9}" text-anchor="middle" '
            f'font-size="26" font-weight="bold" font-family="sans-serif" '
            f'fill="{_banner_color(game_over_message)}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the coordinate to
# a hidden Gradio Textbox, then triggers the submit button.
BOARD_CLICK_JS = """
() => {
    if (window._gomokuClickBound) return;
    window._gomokuClickBound = true;

    document.addEventListener('click', function(e) {
        const circle = e.target.closest('.board-click');
        if (!circle) return;
        const coord = circle.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (!container) return;
        // Native setter so Gradio notices the change
        const proto = container.tagName === 'TEXTAREA'
            ? window.HTMLTextAreaElement.prototype
            : window.HTMLInputElement.prototype;
        const nativeSetter = Object.getOwnPropertyDescriptor(proto, 'value')?.set;
        if (nativeSetter) {
            nativeSetter.call(container, coord);
        } else {
            container.value = coord;
        }
        container.dispatchEvent(new Event('input', { bubbles: true }));
        const btn = document.querySelector('#coord-submit');
        if (btn) btn.click();
    });
}
"""
