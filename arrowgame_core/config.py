from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "ARROWGAME_"


@dataclass(frozen=True)
class Settings:
    """Runtime settings, overridable through ARROWGAME_* environment variables."""
    starting_swaps: int = 3
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 5000


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_int(name: str, value: str, default: int, minimum: int = 0) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring %s%s=%r: not an integer", ENV_PREFIX, name, value)
        return default
    if parsed < minimum:
        logger.warning("Ignoring %s%s=%r: must be >= %d", ENV_PREFIX, name, value, minimum)
        return default
    return parsed


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Builds Settings from the environment (or the given mapping)."""
    env = os.environ if env is None else env
    defaults = Settings()

    def get(name: str) -> Optional[str]:
        return env.get(ENV_PREFIX + name)

    swaps = get("STARTING_SWAPS")
    debug = get("DEBUG")
    host = get("HOST")
    port = get("PORT")
    return Settings(
        starting_swaps=_as_int("STARTING_SWAPS", swaps, defaults.starting_swaps) if swaps is not None else defaults.starting_swaps,
        debug=_as_bool(debug) if debug is not None else defaults.debug,
        host=host or defaults.host,
        port=_as_int("PORT", port, defaults.port, minimum=1) if port is not None else defaults.port,
    )


def configure_logging(debug: bool = False) -> None:
    """Root logging setup for the CLI and the Flask entrypoint."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
