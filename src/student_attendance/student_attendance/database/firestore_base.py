from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

from ..core.exceptions import DomainError, StoreError

logger = logging.getLogger(__name__)

Document = Tuple[str, Dict[str, Any]]


@contextmanager
def store_call(operation: str) -> Iterator[None]:
    """Surface any driver failure as StoreError, keeping the original message."""
    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        logger.error("Firestore %s failed: %s", operation, e)
        raise StoreError(str(e)) from e


def to_document(snapshot) -> Document:
    return snapshot.id, dict(snapshot.to_dict() or {})


def fetchall(query) -> List[Document]:
    return [to_document(s) for s in query.stream()]
