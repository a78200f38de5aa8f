"""Chessclick — an interactive chessboard driven by pointer gestures."""

__version__ = "0.1.0"
