"""HTTP client for the public stockfish.online REST endpoint."""

from __future__ import annotations

import http.client
import json
import logging
from collections.abc import Callable
from typing import IO, Any
from urllib.parse import urlencode
from urllib.request import urlopen

from chessrules.oracle.base import OracleError
from chessrules.oracle.settings import OracleSettings

_LOGGER = logging.getLogger(__name__)

Opener = Callable[..., IO[bytes]]


class StockfishOnlineOracle:
    """Queries ``GET <base_url>?fen=...&depth=...``.

    The endpoint answers JSON such as
    ``{"success": true, "bestmove": "bestmove e2e4 ponder e7e5", ...}``.
    No retries: any failure surfaces as :class:`OracleError`.
    """

    __slots__ = ("_settings", "_opener")

    def __init__(
        self,
        settings: OracleSettings | None = None,
        opener: Opener = urlopen,
    ) -> None:
        self._settings = settings if settings is not None else OracleSettings()
        self._opener = opener

    @property
    def settings(self) -> OracleSettings:
        return self._settings

    def build_url(self, fen: str, depth: int) -> str:
        query = urlencode({"fen": fen, "depth": depth})
        return f"{self._settings.base_url}?{query}"

    def best_move(self, fen: str, depth: int | None = None) -> str:
        url = self.build_url(fen, self._settings.depth if depth is None else depth)
        _LOGGER.debug("Requesting best move: %s", url)
        try:
            with self._opener(url, timeout=self._settings.timeout_s) as response:
                body = response.read()
        except (OSError, ValueError, http.client.HTTPException) as exc:
            # URLError, HTTPError, timeouts, unknown url types, broken replies
            _LOGGER.warning("Best-move request failed: %s", exc)
            raise OracleError(f"Best-move request failed: {exc}") from exc

        try:
            data: Any = json.loads(body)
        except ValueError as exc:
            _LOGGER.warning("Best-move response is not JSON")
            raise OracleError("Best-move response is not JSON") from exc

        return parse_best_move_response(data)


def parse_best_move_response(data: Any) -> str:
    """Extract the move token from a decoded response payload."""
    if not isinstance(data, dict) or not data.get("success"):
        raise OracleError("Failed to get computer move")

    bestmove = data.get("bestmove")
    if not isinstance(bestmove, str):
        raise OracleError("Response carries no bestmove field")

    # "bestmove e2e4 ponder e7e5" → "e2e4"
    tokens = bestmove.split()
    if len(tokens) < 2:
        raise OracleError(f"Unexpected bestmove field: {bestmove!r}")
    return tokens[1]
