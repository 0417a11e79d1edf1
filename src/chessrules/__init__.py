"""chessrules: chess rules engine with a best-move oracle boundary."""

__version__ = "0.1.0"
