from tablut import Board, SearchConfig, Side

from scripts.play_tablut import Session, handle_command, step


def make_session(outputs):
    return Session(search_config=SearchConfig(), output=outputs.append)


def test_console_commands():
    outputs = []
    session = make_session(outputs)

    handle_command(session, "d1-d2")
    assert session.board.move_count == 1

    handle_command(session, "dump")
    assert outputs[-1].startswith("===\n")
    assert outputs[-1].endswith("===")

    handle_command(session, "undo")
    assert session.board.encoded_board() == Board().encoded_board()

    handle_command(session, "e6-h6")
    assert outputs[-1].startswith("Error:")

    handle_command(session, "auto black")
    assert session.auto_sides[Side.BLACK]

    handle_command(session, "quit")
    assert not session.running


def test_ai_replies_after_manual_move():
    outputs = []
    session = make_session(outputs)
    lines = iter(["d1-d2"])

    step(session, lambda: next(lines))
    assert session.board.turn is Side.WHITE

    step(session, lambda: "quit")
    assert session.board.move_count == 2
    assert outputs[-1].startswith("* ")


def test_undo_takes_back_the_ai_reply_and_the_human_move():
    outputs = []
    session = make_session(outputs)

    step(session, lambda: "d1-d2")
    step(session, lambda: "quit")
    assert session.board.move_count == 2

    handle_command(session, "undo")
    assert session.board.move_count == 0
    assert session.board.turn is Side.BLACK
    assert session.board.encoded_board() == Board().encoded_board()

    ai_moves = sum(1 for line in outputs if line.startswith("* "))
    step(session, lambda: "dump")
    assert session.board.move_count == 0
    assert sum(1 for line in outputs if line.startswith("* ")) == ai_moves
