import pytest

from dfagames.board import INITIAL_FEN, Board
from dfagames.side import Side


def perft(board, depth):
    if depth == 0:
        return 1
    return sum(perft(move, depth - 1) for move in board.generate_moves())


def distinct_positions(board, depth):
    layers = [{board}]
    for _ in range(depth):
        layers.append({m for b in layers[-1] for m in b.generate_moves()})
    return [len(layer) for layer in layers]


def test_initial_position_string():
    board = Board(INITIAL_FEN)
    assert board.to_string() == (
        "r n b q k b n r\n"
        "p p p p p p p p\n"
        ". . . . . . . .\n"
        ". . . . . . . .\n"
        ". . . . . . . .\n"
        ". . . . . . . .\n"
        "P P P P P P P P\n"
        "R N B Q K B N R\n"
    )
    assert str(board) == board.to_string()
    assert board.side_to_move is Side.WHITE


def test_black_check_board():
    board = Board("rnbq1bnr/ppppkppp/8/4p3/8/BP6/P1PPPPPP/RN1QKBNR b KQkq - 0 1")
    assert board.is_check(Side.BLACK)
    assert board.is_check()
    assert not board.is_check(Side.WHITE)


def test_initial_distinct_positions():
    assert distinct_positions(Board(INITIAL_FEN), 2) == [1, 20, 400]


def test_initial_perft_three():
    assert perft(Board(INITIAL_FEN), 3) == 8902


def test_king_moves_distinct():
    assert distinct_positions(Board("4k3/8/8/8/8/8/8/4K3 w - - 0 1"), 2) == [1, 5, 25]


def test_castling_moves():
    board = Board("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    last_rows = {m.to_string().splitlines()[-1] for m in board.generate_moves()}
    assert "R . . . . R K ." in last_rows
    assert ". . K R . . . R" in last_rows


def test_en_passant_capture():
    board = Board("4k3/3p4/8/4P3/8/8/8/4K3 b - - 0 1")
    double_push = [m for m in board.generate_moves() if m.en_passant_file == 3]
    assert len(double_push) == 1
    after = double_push[0]
    captures = [m for m in after.generate_moves() if "p" not in m.to_string()]
    assert len(captures) == 1
    assert captures[0].to_string().splitlines()[2] == ". . . P . . . ."


def test_promotion_choices():
    board = Board("8/P7/8/8/8/8/8/k6K w - - 0 1")
    moves = board.generate_moves()
    assert board.count_moves() == 7
    promoted = {m.to_string()[0] for m in moves if m.to_string()[0] != "."}
    assert promoted == {"Q", "B", "N", "R"}


def test_checkmate():
    board = Board("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3")
    assert board.is_checkmate()
    assert not board.is_stalemate()
    assert board.is_final()


def test_stalemate():
    board = Board("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
    assert board.is_stalemate()
    assert not board.is_checkmate()
    assert board.count_moves() == 0


def test_is_attacked():
    board = Board("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
    # rook on a1 attacks a8 (square 0) but not b8 (square 1)
    assert board.is_attacked(Side.BLACK, 0)
    assert not board.is_attacked(Side.BLACK, 1)


@pytest.mark.parametrize(
    "fen, expected",
    [
        ("8/8/8/8/8/8/8/K6k w - - 0 1", True),
        ("8/8/8/8/8/8/8/KB5k w - - 0 1", True),
        ("8/8/8/8/8/8/8/KN5k w - - 0 1", True),
        ("8/8/8/8/8/8/8/KR5k w - - 0 1", False),
        (INITIAL_FEN, False),
    ],
)
def test_draw_by_material(fen, expected):
    board = Board(fen)
    assert board.is_draw_by_material() is expected
    assert board.is_draw() is expected


def test_halfmove_clock_after_first_moves():
    moves = Board(INITIAL_FEN).generate_moves()
    clocks = [m.halfmove_clock for m in moves]
    assert clocks.count(0) == 16
    assert clocks.count(1) == 4


def test_fullmove_number():
    first = Board(INITIAL_FEN).generate_moves()[0]
    assert first.fullmove_number == 1
    assert first.side_to_move is Side.BLACK
    second = first.generate_moves()[0]
    assert second.fullmove_number == 2


def test_draw_by_rule_after_hundred_quiet_plies():
    board = Board("n3k3/8/8/8/8/8/8/N3K3 w - - 0 1")
    for ply in range(100):
        assert not board.is_draw_by_rule()
        blanks = str(board).count(".")
        board = next(
            m for m in board.generate_moves()
            if str(m).count(".") == blanks and not m.is_check()
        )
        assert board.halfmove_clock == ply + 1
    assert board.is_draw_by_rule()
    assert board.is_draw()


def test_equality_and_hash():
    a = Board(INITIAL_FEN)
    b = Board(INITIAL_FEN)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    moved = a.generate_moves()[0]
    assert not moved == a
    assert (moved < a) or (a < moved)


def test_ordering_is_total():
    moves = Board(INITIAL_FEN).generate_moves()
    ordered = sorted(moves)
    assert all(x < y for x, y in zip(ordered, ordered[1:]))
    assert len(ordered) == 20


def test_empty_board():
    board = Board()
    assert board.to_string() == ". . . . . . . .\n" * 8
    assert board.count_moves() == 0
    assert not board.is_check()


@pytest.mark.parametrize(
    "fen",
    [
        "8/8 w - -",
        "7/8/8/8/8/8/8/8 w - -",
        "8/8/8/8/8/8/8/7x w - -",
        "8/8/8/8/8/8/8/8",
        "8/8/8/8/8/8/8/8/ w - -",
        "8/8/8/8/8/8/8/8 x - -",
        "8/8/8/8/8/8/8/8 w- -",
        "8/8/8/8/8/8/8/8 w Z -",
        "8/8/8/8/8/8/8/8 w -",
    ],
)
def test_invalid_fen(fen):
    with pytest.raises(ValueError):
        Board(fen)


def test_fen_without_move_counters():
    board = Board("r3k2r/8/8/8/8/8/8/R3K2R w KQkq -")
    assert board.count_moves() == 26
    assert board.castling_availability == (1 << 63) | (1 << 56) | (1 << 7) | 1