from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, Optional, Union

from ..config import load_settings
from .schemas import Scholarship

logger = logging.getLogger(__name__)

DEFAULT_SCHOLARSHIPS = (
    Scholarship(name="test", amount=1000),
    Scholarship(name="test2", amount=2000),
)


class ScholarshipStore:
    """In-memory store of scholarship records keyed by name.

    Every operation, reads included, runs under one exclusive lock.
    """

    def __init__(self, seed: Iterable[Scholarship] = DEFAULT_SCHOLARSHIPS) -> None:
        self._lock = asyncio.Lock()
        self._scholarships: Dict[str, Scholarship] = {s.name: s for s in seed}

    async def read(self, name: Optional[str]) -> Union[Scholarship, Dict[str, Scholarship]]:
        """Return the record for ``name``, or the whole store if there is none.

        Unknown names fall back to the full listing rather than signalling
        absence; clients rely on this.
        """
        async with self._lock:
            if name is not None and name in self._scholarships:
                return self._scholarships[name]
            return dict(self._scholarships)

    async def create(self, scholarship: Scholarship) -> Scholarship:
        async with self._lock:
            self._scholarships[scholarship.name] = scholarship
            logger.info("Stored scholarship %r (amount=%d)", scholarship.name, scholarship.amount)
            return scholarship

    async def update(self, name: str, scholarship: Scholarship) -> Optional[Scholarship]:
        """Replace the record stored under ``name``.

        Returns ``None`` when ``name`` is unknown.  A zero ``amount`` leaves the
        existing record untouched; either way the current value is returned.
        """
        async with self._lock:
            if name not in self._scholarships:
                return None
            if scholarship.amount != 0:
                self._scholarships[name] = scholarship
                logger.info("Updated scholarship %r (amount=%d)", name, scholarship.amount)
            else:
                logger.debug("Ignoring zero-amount update for scholarship %r", name)
            return self._scholarships[name]

    async def delete(self, name: str) -> bool:
        async with self._lock:
            if self._scholarships.pop(name, None) is None:
                return False
            logger.info("Deleted scholarship %r", name)
            return True


store = ScholarshipStore(seed=DEFAULT_SCHOLARSHIPS if load_settings().seed_scholarships else ())


def get_store() -> ScholarshipStore:
    return store
