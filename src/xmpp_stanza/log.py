"""Loguru setup: one stderr sink, stdlib logging routed through loguru."""

from __future__ import annotations

import logging
import sys
from typing import Any

from loguru import logger

from xmpp_stanza.config import cfg


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        msg = record.getMessage()
        logger.patch(
            lambda r: r.update(
                name=record.name,
                function=record.funcName,
                line=record.lineno,
            ),
        ).opt(exception=record.exc_info).log(level, msg)


def setup_logging(level: str | None = None, sink: Any = None) -> int:
    """Configure loguru and return the sink id.

    Level: explicit argument, else cfg.log_level (STANZA_LOG_LEVEL overrides config).
    """
    level = (level or cfg.log_level).upper()
    logger.remove()
    handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}",
    )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return handler_id
