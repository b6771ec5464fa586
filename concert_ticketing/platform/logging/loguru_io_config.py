"""
loguru sinks and stdlib interception

Imported once for its side effect: every record, ours or uvicorn's and
SQLAlchemy's, ends up in one loguru pipeline with the service context bound.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
from pathlib import Path
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from concert_ticketing.platform.config.core_setting import settings
from concert_ticketing.platform.constant.path import LOG_DIR as DEFAULT_LOG_DIR
from concert_ticketing.platform.logging.service_context import get_service_context


LOG_DIR = Path(os.environ.get('TEST_LOG_DIR') or DEFAULT_LOG_DIR)

# Argument names whose values never reach a sink
SENSITIVE_KEYWORDS = {'password', 'password_hash', 'token', 'credentials'}
MASK = '********'
MAX_CONTENT_LENGTH = 500

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# Checked top-down: the first floor the status code reaches decides the level
_STATUS_LEVELS = ((500, 'CRITICAL'), (400, 'ERROR'), (300, 'WARNING'), (200, 'SUCCESS'))

_IGNORED_DEBUG_MESSAGES = ('Using selector:',)


def _parse_http_status_level(message: str) -> str | None:
    """
    Level for a uvicorn access line, picked from its status code

    '127.0.0.1:51234 - "POST /orders HTTP/1.1" 201' -> 'SUCCESS'
    """
    request_line, _, tail = message.rpartition('"')
    if ' - "' not in request_line or ' HTTP/' not in request_line:
        return None

    status_token = tail.split()[:1]
    if not status_token or not status_token[0].isdigit():
        return None

    status_code = int(status_token[0])
    return next((level for floor, level in _STATUS_LEVELS if status_code >= floor), 'INFO')


def _default_extra() -> dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the original caller frame"""

    _bound_logger: 'LoguruLogger | None' = None

    @classmethod
    def bound_logger(cls) -> 'LoguruLogger':
        if cls._bound_logger is None:
            cls._bound_logger = loguru_logger.bind(**_default_extra())
        return cls._bound_logger

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.levelno <= logging.DEBUG and message.startswith(_IGNORED_DEBUG_MESSAGES):
            return

        level: str | int | None = _parse_http_status_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self.bound_logger().opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> Path:
    hour = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return LOG_DIR / f'{prefix}{hour}.log'


def configure_logging() -> 'LoguruLogger':
    level = 'DEBUG' if settings.DEBUG else 'INFO'

    loguru_logger.remove()
    configured = loguru_logger.bind(**_default_extra())
    configured.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    # Hourly files only while debugging; deployed instances log to stdout alone
    if settings.DEBUG:
        configured.add(
            str(_log_file_path()),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=level,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO, force=True)
    return configured


custom_logger = configure_logging()
