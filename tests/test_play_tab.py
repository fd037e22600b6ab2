from gomokuai.agent.minimax_agent import MinimaxAgent
from gomokuai.game.board import CENTER
from gomokuai.game.rules import DRAW
from gomokuai.game.types import Player, Point
from gomokuai.ui.play_tab import GameSession, _apply_human_move, _new_game


def _fast_session() -> GameSession:
    return GameSession(agent=MinimaxAgent(depth=1))


def test_new_game_human_first():
    session = _fast_session()
    result = _new_game("You", session)
    assert session.game.first_player is Player.HUMAN
    assert len(session.game.moves) == 0  # no AI opening move
    assert result[4] == "You move first."
    assert result[1] == "Your turn"


def test_new_game_ai_first_plays_center():
    session = _fast_session()
    result = _new_game("AI", session)
    assert len(session.game.moves) == 1
    assert session.game.moves[0].player is Player.AI
    assert session.game.moves[0].point == CENTER
    assert session.game.current_player is Player.HUMAN
    assert result[4] == "The AI moves first."


def test_new_game_random_assigns_both():
    session = _fast_session()
    firsts = set()
    for _ in range(50):
        _new_game("Random", session)
        firsts.add(session.game.first_player)
    assert firsts == {Player.HUMAN, Player.AI}


def test_human_move_gets_ai_reply():
    session = _fast_session()
    _new_game("You", session)
    board_html, status, history, _, coord = _apply_human_move("H8", session)
    assert len(session.game.moves) == 2
    assert session.game.moves[0].point == Point(7, 7)
    assert session.game.moves[1].player is Player.AI
    assert status == "Your turn"
    assert len(history) == 2
    assert history[0] == ["1", "Human", "H8"]
    assert coord == ""
    assert "<svg" in board_html


def test_invalid_coordinate():
    session = _fast_session()
    _new_game("You", session)
    result = _apply_human_move("Z99", session)
    assert "Invalid coordinate" in result[1]
    assert len(session.game.moves) == 0


def test_occupied_cell():
    session = _fast_session()
    _new_game("AI", session)
    result = _apply_human_move("H8", session)
    assert result[1] == "H8 is already occupied."
    assert len(session.game.moves) == 1


def test_human_win_stops_ai():
    session = _fast_session()
    _new_game("You", session)
    for c in range(4):
        session.game.place_stone(Point(0, c), Player.HUMAN)
        session.game.place_stone(Point(14, c), Player.AI)
    result = _apply_human_move("E1", session)
    assert session.game.winner is Player.HUMAN
    assert len(session.game.moves) == 9
    assert result[1] == "Game over: You win! (five at A1 B1 C1 D1 E1)"


def test_move_ignored_after_game_over():
    session = _fast_session()
    session.game._result = DRAW
    _apply_human_move("H8", session)
    assert len(session.game.moves) == 0


def test_game_over_banner():
    session = _fast_session()
    assert session.game_over_banner == ""
    for c in range(5):
        session.game.place_stone(Point(3, c), Player.AI)
    assert session.game_over_banner == "AI wins!"


def test_draw_status_text():
    session = _fast_session()
    session.game._result = DRAW
    assert session.status_text == "Game over: Draw!"
    assert session.game_over_banner == "Draw!"
