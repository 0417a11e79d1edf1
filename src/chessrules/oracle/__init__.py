"""Best-move oracle package: protocol, HTTP client and Qt worker bridge."""

from chessrules.oracle.base import BestMoveOracle, OracleError, request_best_move
from chessrules.oracle.settings import OracleSettings
from chessrules.oracle.stockfish_online import (
    StockfishOnlineOracle,
    parse_best_move_response,
)

__all__ = [
    "BestMoveOracle",
    "OracleError",
    "OracleSettings",
    "StockfishOnlineOracle",
    "parse_best_move_response",
    "request_best_move",
]
