"""A chess position held as bitboards, with legal move generation.

Squares are numbered 0..63, rank-major from the top of the board as a FEN
string lists them: square 0 is a8, square 7 is h8, square 56 is a1 and
square 63 is h1. White pawns therefore advance towards lower square numbers.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import Iterator, Optional

from dfagames.masks import between_mask
from dfagames.side import Side

CHESS_MAX_MOVES = 256
INITIAL_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class Piece(IntEnum):
    """Chess piece types."""

    KING = 0
    QUEEN = 1
    BISHOP = 2
    KNIGHT = 3
    ROOK = 4
    PAWN = 5


_PIECE_BY_CHAR = {
    "b": Piece.BISHOP,
    "k": Piece.KING,
    "n": Piece.KNIGHT,
    "p": Piece.PAWN,
    "r": Piece.ROOK,
    "q": Piece.QUEEN,
}

# order in which a square's piece is identified when rendering
_RENDER_ORDER = (
    (Piece.PAWN, "p"),
    (Piece.KING, "k"),
    (Piece.QUEEN, "q"),
    (Piece.BISHOP, "b"),
    (Piece.KNIGHT, "n"),
    (Piece.ROOK, "r"),
)

_PROMOTION_CHOICES = (Piece.QUEEN, Piece.BISHOP, Piece.KNIGHT, Piece.ROOK)

_CASTLING_BITS = {
    "K": 1 << 63,
    "Q": 1 << 56,
    "k": 1 << 7,
    "q": 1 << 0,
}


def _move_table(deltas: tuple[tuple[int, int], ...], sliding: bool) -> tuple[int, ...]:
    table = []
    for square in range(64):
        rank, file = divmod(square, 8)
        mask = 0
        for d_rank, d_file in deltas:
            r, f = rank + d_rank, file + d_file
            while 0 <= r < 8 and 0 <= f < 8:
                mask |= 1 << (r * 8 + f)
                if not sliding:
                    break
                r += d_rank
                f += d_file
        table.append(mask)
    return tuple(table)


_DIAGONALS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_ORTHOGONALS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_KNIGHT_JUMPS = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))

_BISHOP_MOVES = _move_table(_DIAGONALS, True)
_ROOK_MOVES = _move_table(_ORTHOGONALS, True)
_QUEEN_MOVES = _move_table(_DIAGONALS + _ORTHOGONALS, True)
_KING_MOVES = _move_table(_DIAGONALS + _ORTHOGONALS, False)
_KNIGHT_MOVES = _move_table(_KNIGHT_JUMPS, False)
_PAWN_ADVANCES = {
    Side.WHITE: _move_table(((-1, 0),), False),
    Side.BLACK: _move_table(((1, 0),), False),
}
_PAWN_CAPTURES = {
    Side.WHITE: _move_table(((-1, -1), (-1, 1)), False),
    Side.BLACK: _move_table(((1, -1), (1, 1)), False),
}


def _bits(mask: int) -> Iterator[int]:
    """Yield the indices of the set bits of ``mask`` in ascending order."""
    while mask:
        low = mask & -mask
        yield low.bit_length() - 1
        mask ^= low


@total_ordering
class Board:
    """A chess position: pieces, side to move, en passant and castling state."""

    def __init__(self, fen: Optional[str] = None) -> None:
        self._pieces = 0
        self._by_side = [0, 0]
        self._by_type = [[0] * len(Piece) for _ in range(2)]
        self._side_to_move = Side.WHITE
        self.en_passant_file = -1
        self.castling_availability = 0
        self.halfmove_clock = 0
        self.fullmove_number = 1

        if fen is not None:
            self._parse_fen(fen)

    # ------------------------------------------------------------------
    # construction

    def _parse_fen(self, fen: str) -> None:
        pos = 0
        square = 0
        while square < 64 and pos < len(fen):
            c = fen[pos]
            pos += 1

            if c == " ":
                raise ValueError("found space before end of board squares")
            if c == "/":
                if square % 8 != 0:
                    raise ValueError("found slash but not at end of a rank")
                continue
            if c in "12345678":
                square += int(c)
                continue

            side = Side.WHITE if c.isupper() else Side.BLACK
            mask = 1 << square
            self._pieces |= mask
            self._by_side[side] |= mask
            piece = _PIECE_BY_CHAR.get(c.lower())
            if piece is None:
                raise ValueError(f"unrecognized piece character: {c!r}")
            self._by_type[side][piece] |= mask
            square += 1

        if square < 64:
            raise ValueError("FEN string ended before board squares filled")

        def expect_space(what: str) -> int:
            if pos >= len(fen) or fen[pos] != " ":
                raise ValueError(f"FEN string did not have space after {what}")
            return pos + 1

        pos = expect_space("board squares")

        side_char = fen[pos] if pos < len(fen) else ""
        if side_char == "w":
            self._side_to_move = Side.WHITE
        elif side_char == "b":
            self._side_to_move = Side.BLACK
        else:
            raise ValueError("FEN string did not have expected side to move")
        pos += 1

        pos = expect_space("side to move")

        while pos < len(fen) and fen[pos] != " ":
            c = fen[pos]
            if c != "-":
                bit = _CASTLING_BITS.get(c)
                if bit is None:
                    raise ValueError(f"unrecognized character for castling availability: {c!r}")
                self.castling_availability |= bit
            pos += 1

        expect_space("castling availability")

    def _copy(self) -> "Board":
        other = Board.__new__(Board)
        other._pieces = self._pieces
        other._by_side = list(self._by_side)
        other._by_type = [list(row) for row in self._by_type]
        other._side_to_move = self._side_to_move
        other.en_passant_file = self.en_passant_file
        other.castling_availability = self.castling_availability
        other.halfmove_clock = self.halfmove_clock
        other.fullmove_number = self.fullmove_number
        return other

    # ------------------------------------------------------------------
    # move mechanics

    def _check_between(self, i: int, j: int) -> bool:
        """True if any piece stands strictly between squares ``i`` and ``j``."""
        if i == j:
            raise ValueError("check_between called with one square twice")
        return (between_mask(i, j) & self._pieces) != 0

    def _start_move(self) -> "Board":
        move = self._copy()
        move._side_to_move = self._side_to_move.flip()
        move.en_passant_file = -1
        move.halfmove_clock += 1
        if self._side_to_move is Side.BLACK:
            move.fullmove_number += 1
        return move

    def _move_piece(self, from_index: int, to_index: int) -> None:
        from_mask = 1 << from_index
        to_mask = 1 << to_index

        moving = self._side_to_move.flip()
        if not self._by_side[moving] & from_mask:
            raise RuntimeError("tried to move without side piece")
        if self._by_side[moving] & to_mask:
            raise RuntimeError("tried to move on top of same side piece")

        move_mask = from_mask ^ to_mask
        self._by_side[moving] ^= move_mask
        types = self._by_type[moving]
        for piece in Piece:
            if types[piece] & from_mask:
                types[piece] ^= move_mask
                if piece is Piece.PAWN:
                    self.halfmove_clock = 0
                break

        if move_mask & types[Piece.KING]:
            # king moved, so that side cannot castle anymore
            if moving is Side.WHITE:
                self.castling_availability &= 0xFF
            else:
                self.castling_availability &= 0xFF << 56

        self.castling_availability &= ~(from_mask | to_mask)

        opponent = self._side_to_move
        if self._by_side[opponent] & to_mask:
            self._by_side[opponent] &= ~to_mask
            opponent_types = self._by_type[opponent]
            for piece in Piece:
                if opponent_types[piece] & to_mask:
                    opponent_types[piece] &= ~to_mask
                    break
            self.halfmove_clock = 0

    def _finish_move(self) -> bool:
        """Tidy up after a move; False if it left the mover in check."""
        self._pieces = self._by_side[Side.WHITE] | self._by_side[Side.BLACK]
        self.castling_availability &= (
            self._by_type[Side.WHITE][Piece.ROOK] | self._by_type[Side.BLACK][Piece.ROOK]
        )
        return not self.is_check(self._side_to_move.flip())

    def _try_move(self, from_index: int, to_index: int) -> Optional["Board"]:
        if self._check_between(from_index, to_index):
            return None
        move = self._start_move()
        move._move_piece(from_index, to_index)
        return move if move._finish_move() else None

    def _try_castle(self, king_index: int, rook_index: int) -> Optional["Board"]:
        if self._check_between(king_index, rook_index):
            return None
        if self.is_attacked(self._side_to_move, king_index):
            return None
        direction = 1 if rook_index > king_index else -1
        if self.is_attacked(self._side_to_move, king_index + direction):
            return None
        if self.is_attacked(self._side_to_move, king_index + 2 * direction):
            return None

        move = self._start_move()
        move._move_piece(king_index, king_index + 2 * direction)
        move._move_piece(rook_index, king_index + direction)
        return move if move._finish_move() else None

    # ------------------------------------------------------------------
    # comparison

    def _key(self) -> tuple:
        return (
            tuple(mask for row in self._by_type for mask in row),
            int(self._side_to_move),
            self.en_passant_file,
            self.castling_availability,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Board") -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # ------------------------------------------------------------------
    # queries

    @property
    def side_to_move(self) -> Side:
        """The side whose turn it is."""
        return self._side_to_move

    def generate_moves(self) -> list["Board"]:
        """Return the positions reachable by one legal move."""
        side = self._side_to_move
        other = side.flip()
        own = self._by_side[side]
        types = self._by_type[side]
        white = side is Side.WHITE

        moves: list[Board] = []

        def add(move: Optional[Board]) -> None:
            if move is not None:
                moves.append(move)

        for from_index in _bits(own):
            from_mask = 1 << from_index

            if from_mask & types[Piece.PAWN]:
                advance_mask = _PAWN_ADVANCES[side][from_index] & ~self._pieces
                capture_mask = _PAWN_CAPTURES[side][from_index] & self._by_side[other]
                to_mask = advance_mask | capture_mask

                from_rank, from_file = divmod(from_index, 8)
                rank_by_side = 7 - from_rank if white else from_rank

                if rank_by_side == 1:
                    if advance_mask:
                        two_index = from_index + (-16 if white else 16)
                        if not (1 << two_index) & self._pieces:
                            move = self._try_move(from_index, two_index)
                            if move is not None:
                                move.en_passant_file = from_file
                                moves.append(move)
                elif rank_by_side == 4:
                    ep_file = self.en_passant_file
                    if ep_file >= 0 and abs(from_file - ep_file) == 1:
                        capture_rank = 3 if white else 4
                        keep_mask = ~(1 << (capture_rank * 8 + ep_file))
                        to_rank = 2 if white else 5

                        move = self._start_move()
                        move._move_piece(from_index, to_rank * 8 + ep_file)
                        move._pieces &= keep_mask
                        move._by_side[other] &= keep_mask
                        move._by_type[other][Piece.PAWN] &= keep_mask
                        if move._finish_move():
                            moves.append(move)
                elif rank_by_side == 6:
                    for to_index in _bits(to_mask):
                        unpromoted = self._start_move()
                        unpromoted._move_piece(from_index, to_index)
                        if not unpromoted._finish_move():
                            continue
                        square_mask = 1 << to_index
                        for promotion in _PROMOTION_CHOICES:
                            move = unpromoted._copy()
                            move._by_type[side][Piece.PAWN] &= ~square_mask
                            move._by_type[side][promotion] |= square_mask
                            moves.append(move)
                    to_mask = 0
            elif from_mask & types[Piece.BISHOP]:
                to_mask = _BISHOP_MOVES[from_index]
            elif from_mask & types[Piece.KING]:
                to_mask = _KING_MOVES[from_index]
                rooks = self.castling_availability & types[Piece.ROOK]
                if rooks:
                    if white:
                        if rooks & (1 << 63):
                            add(self._try_castle(60, 63))
                        if rooks & (1 << 56):
                            add(self._try_castle(60, 56))
                    else:
                        if rooks & (1 << 7):
                            add(self._try_castle(4, 7))
                        if rooks & (1 << 0):
                            add(self._try_castle(4, 0))
            elif from_mask & types[Piece.KNIGHT]:
                to_mask = _KNIGHT_MOVES[from_index]
            elif from_mask & types[Piece.QUEEN]:
                to_mask = _QUEEN_MOVES[from_index]
            elif from_mask & types[Piece.ROOK]:
                to_mask = _ROOK_MOVES[from_index]
            else:
                raise RuntimeError("unrecognized from piece type in generate_moves")

            to_mask &= ~own
            for to_index in _bits(to_mask):
                add(self._try_move(from_index, to_index))

        if len(moves) >= CHESS_MAX_MOVES:
            raise RuntimeError("found more moves than CHESS_MAX_MOVES")

        return moves

    def count_moves(self) -> int:
        """Return the number of legal moves."""
        return len(self.generate_moves())

    def is_attacked(self, defending_side: Side, defending_index: int) -> bool:
        """True if the opponent of ``defending_side`` attacks the given square."""
        attacking_side = Side(defending_side).flip()
        attackers = self._by_type[attacking_side]

        attacking_mask = (
            (_BISHOP_MOVES[defending_index] & attackers[Piece.BISHOP])
            | (_KING_MOVES[defending_index] & attackers[Piece.KING])
            | (_KNIGHT_MOVES[defending_index] & attackers[Piece.KNIGHT])
            | (_QUEEN_MOVES[defending_index] & attackers[Piece.QUEEN])
            | (_ROOK_MOVES[defending_index] & attackers[Piece.ROOK])
            # pawn captures seen from the defending square, so colours swapped
            | (_PAWN_CAPTURES[attacking_side.flip()][defending_index] & attackers[Piece.PAWN])
        )

        return any(
            not self._check_between(attacking_index, defending_index)
            for attacking_index in _bits(attacking_mask)
        )

    def is_check(self, defending_side: Optional[Side] = None) -> bool:
        """True if the king of ``defending_side`` (default: side to move) is attacked."""
        if defending_side is None:
            defending_side = self._side_to_move
        kings = self._by_type[defending_side][Piece.KING]
        if not kings:
            # no king: allows simplified test positions
            return False
        king_index = (kings & -kings).bit_length() - 1
        return self.is_attacked(defending_side, king_index)

    def is_checkmate(self) -> bool:
        return self.is_check() and self.count_moves() == 0

    def is_draw(self) -> bool:
        return self.is_draw_by_rule() or self.is_draw_by_material()

    def is_draw_by_material(self) -> bool:
        """True for king against king, or king against king and a minor piece."""
        counts = [bin(mask).count("1") for mask in self._by_side]
        if counts[0] == 1 and counts[1] == 1:
            return True
        for s in (0, 1):
            if counts[s] == 1 and counts[1 - s] == 2:
                if self._by_type[1 - s][Piece.BISHOP] or self._by_type[1 - s][Piece.KNIGHT]:
                    return True
        return False

    def is_draw_by_rule(self) -> bool:
        """True once the fifty-move rule applies."""
        return self.halfmove_clock >= 100

    def is_final(self) -> bool:
        return self.count_moves() == 0 or self.is_draw()

    def is_stalemate(self) -> bool:
        return not self.is_check() and self.count_moves() == 0

    def to_string(self) -> str:
        """Render the board as eight lines of space-separated squares."""
        parts = []
        for square in range(64):
            mask = 1 << square
            c = "."
            for side in Side:
                if not self._by_side[side] & mask:
                    continue
                for piece, letter in _RENDER_ORDER:
                    if self._by_type[side][piece] & mask:
                        c = letter
                        break
            if self._by_side[Side.WHITE] & mask:
                c = c.upper()
            parts.append(c)
            parts.append(" " if square % 8 < 7 else "\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Board(side_to_move={self._side_to_move.name})"