"""Translation of unexpected failures into ``InternalError``.

Errors that already carry domain meaning (not found, validation) pass
through untouched.  Anything else is logged with its traceback and
replaced by an InternalError holding only a generic message, so storage
or network details never reach the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from recordshop.domain.exceptions import DomainException, InternalError

logger = logging.getLogger(__name__)


@contextmanager
def internal_failure(operation: str, message: str) -> Iterator[None]:
    try:
        yield
    except DomainException:
        raise
    except Exception as exc:
        logger.exception("%s failed: %s", operation, exc)
        raise InternalError(message) from exc
