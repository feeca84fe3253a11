"""Hash-chained log of reconstruction requests.

Each entry embeds the SHA-256 of the previous one, so editing or dropping
an entry breaks ``verify_chain``.  Secrets are never stored in clear;
callers record ``secret_digest(secret)`` instead.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

GENESIS = "0" * 64


@dataclass(frozen=True)
class AuditEntry:
    timestamp: float
    event: str
    data: Dict[str, Any]
    prev_hash: str
    entry_hash: str


def _digest(timestamp: float, event: str, data: Dict[str, Any], prev_hash: str) -> str:
    payload = json.dumps(
        {"timestamp": timestamp, "event": event, "data": data, "prev_hash": prev_hash},
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(payload.encode()).hexdigest()


def secret_digest(secret: Any) -> str:
    """SHA-256 of the canonical rendering of *secret*."""
    return hashlib.sha256(str(secret).encode()).hexdigest()


class AuditLog:
    """Append-only record of ``reconstruct`` / ``reject`` events."""

    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []
        self._head = GENESIS

    def append(self, event: str, data: Dict[str, Any]) -> AuditEntry:
        ts = time.time()
        entry = AuditEntry(
            timestamp=ts,
            event=event,
            data=data,
            prev_hash=self._head,
            entry_hash=_digest(ts, event, data, self._head),
        )
        self._entries.append(entry)
        self._head = entry.entry_hash
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self, event: str | None = None) -> List[Dict[str, Any]]:
        """Entries as plain dicts, optionally filtered by *event*."""
        return [asdict(e) for e in self._entries if event is None or e.event == event]

    def verify_chain(self) -> bool:
        prev = GENESIS
        for e in self._entries:
            if e.prev_hash != prev:
                return False
            if e.entry_hash != _digest(e.timestamp, e.event, e.data, e.prev_hash):
                return False
            prev = e.entry_hash
        return True
