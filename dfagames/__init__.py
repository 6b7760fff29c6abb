"""Rules and move generation for chess, Ataxx, Breakthrough and Amazons, with bitboard and boolean-function helpers."""

__version__ = "0.1.0"

__all__ = ["amazons", "ataxx", "binary_function", "board", "breakthrough", "masks", "side"]