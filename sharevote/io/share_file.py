"""JSON share files.

Layout::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2",  "value": "111"}
    }

``n`` and ``k`` may also sit at the top level.  Every numeric key is a
share identifier; other keys are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ValidationError, field_validator

from sharevote.config import MAX_SHARE_ID, MAX_SHARES
from sharevote.errors import DuplicateShareError, ShareFileError
from sharevote.shares import Point, Share, to_points

logger = logging.getLogger(__name__)

_HEADER_KEYS = ("keys", "n", "k")


class ShareRecord(BaseModel):
    """One encoded share as it appears in the file."""

    base: int
    value: str

    @field_validator("value")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class ShareFile(BaseModel):
    """A parsed share file."""

    n: int
    k: int
    shares: Dict[int, ShareRecord]

    def to_shares(self) -> List[Share]:
        """Shares ordered by identifier."""
        return [
            Share(x=x, base=rec.base, digits=rec.value)
            for x, rec in sorted(self.shares.items())
        ]

    def to_points(self) -> List[Point]:
        return to_points(self.to_shares())


def _reject_duplicates(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in pairs:
        if key in out:
            raise DuplicateShareError(f"Key {key!r} appears more than once")
        out[key] = value
    return out


def _share_id(key: str) -> int | None:
    if not (key.isascii() and key.isdigit()):
        return None
    return int(key)


def from_document(doc: Dict[str, Any]) -> ShareFile:
    """Build a ``ShareFile`` from an already decoded JSON object."""
    if not isinstance(doc, dict):
        raise ShareFileError("Share file must be a JSON object")

    header = doc.get("keys", doc)
    if not isinstance(header, dict):
        raise ShareFileError("'keys' must be an object")

    shares: Dict[int, Any] = {}
    for key, record in doc.items():
        if key in _HEADER_KEYS:
            continue
        x = _share_id(key)
        if x is None:
            logger.debug("Ignoring non-share key %r", key)
            continue
        if x < 1:
            raise ShareFileError(f"Share identifier must be positive, got {key!r}")
        if x > MAX_SHARE_ID:
            raise ShareFileError(f"Share identifier {key!r} exceeds {MAX_SHARE_ID}")
        if x in shares:
            raise DuplicateShareError(f"Share {x} appears more than once")
        shares[x] = record

    if len(shares) > MAX_SHARES:
        raise ShareFileError(f"Too many shares: {len(shares)} > {MAX_SHARES}")

    try:
        parsed = ShareFile(n=header.get("n"), k=header.get("k"), shares=shares)
    except ValidationError as exc:
        raise ShareFileError(f"Invalid share file: {exc}") from exc

    if parsed.n != len(parsed.shares):
        logger.warning(
            "Header says n=%d but %d shares are present", parsed.n, len(parsed.shares)
        )
    return parsed


def read_document(text: str) -> Dict[str, Any]:
    """Decode share-file JSON, rejecting repeated keys."""
    try:
        return json.loads(text, object_pairs_hook=_reject_duplicates)
    except json.JSONDecodeError as exc:
        raise ShareFileError(f"Malformed JSON: {exc}") from exc


def read_text(path: str | Path) -> str:
    path = Path(path)
    logger.debug("Loading share file %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ShareFileError(f"Cannot read {path}: {exc}") from exc


def parse_share_file(text: str) -> ShareFile:
    """Parse share-file JSON *text*."""
    return from_document(read_document(text))


def load_share_file(path: str | Path) -> ShareFile:
    """Read and parse the share file at *path*."""
    return parse_share_file(read_text(path))
