"""Best-move oracle configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_URL = "https://stockfish.online/api/s/v2.php"

MIN_DEPTH = 1
MAX_DEPTH = 15  # upper bound accepted by the public endpoint

ENV_URL = "CHESSRULES_ORACLE_URL"
ENV_DEPTH = "CHESSRULES_ORACLE_DEPTH"
ENV_TIMEOUT = "CHESSRULES_ORACLE_TIMEOUT"


@dataclass(slots=True, frozen=True)
class OracleSettings:
    """Where the oracle lives and how hard it should think."""

    base_url: str = DEFAULT_URL
    depth: int = 10
    timeout_s: float = 10.0

    def __post_init__(self) -> None:
        if not (MIN_DEPTH <= self.depth <= MAX_DEPTH):
            raise ValueError(
                f"Oracle depth must be in [{MIN_DEPTH}, {MAX_DEPTH}], got {self.depth}"
            )
        if self.timeout_s <= 0:
            raise ValueError(f"Oracle timeout must be positive, got {self.timeout_s}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OracleSettings:
        """Defaults overridden by ``CHESSRULES_ORACLE_*`` variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            base_url=env.get(ENV_URL, defaults.base_url),
            depth=int(env.get(ENV_DEPTH, defaults.depth)),
            timeout_s=float(env.get(ENV_TIMEOUT, defaults.timeout_s)),
        )
