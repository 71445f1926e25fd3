"""`TraceSink` sobre `logging` (stdlib).

El formato imita un tracer clásico:
- `trace`:  `-> evento {params}`
- `debug`:  `=> mensaje {params}`
"""

from __future__ import annotations

import logging
from typing import Any


class LoggingTrace:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("gh_search")

    def trace(self, event: str, **params: Any) -> None:
        if params:
            self._logger.debug("-> %s %s", event, params)
        else:
            self._logger.debug("-> %s", event)

    def debug(self, message: str, **params: Any) -> None:
        if params:
            self._logger.debug("=> %s %s", message, params)
        else:
            self._logger.debug("=> %s", message)
