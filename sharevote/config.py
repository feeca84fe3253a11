"""Global configuration for sharevote."""

import os

# ---------- Digit alphabet bounds ----------
MIN_BASE = 2
MAX_BASE = 36

# ---------- Resource guard ----------
# Every k-subset is enumerated, so n must stay small.
MAX_SHARES = int(os.environ.get("SHAREVOTE_MAX_SHARES", "20"))

# Share identifiers are small positive integers.
MAX_SHARE_ID = int(os.environ.get("SHAREVOTE_MAX_SHARE_ID", str(2**31 - 1)))

# ---------- Interpolation ----------
MODES = ("fingerprint", "rational", "field")


def resolve_mode(mode: str) -> str:
    """Return *mode* if it names an interpolation mode, else raise."""
    if mode not in MODES:
        raise ValueError(f"Unknown interpolation mode {mode!r}; expected one of {MODES}")
    return mode


DEFAULT_MODE = resolve_mode(os.environ.get("SHAREVOTE_MODE", "fingerprint"))

# Prime used by the "field" mode only (Mersenne prime M127).
FIELD_PRIME = 2**127 - 1

# ---------- Callers ----------
LOG_LEVEL = os.environ.get("SHAREVOTE_LOG_LEVEL", "WARNING")
SERVICE_URL = os.environ.get("SHAREVOTE_SERVICE_URL", "http://localhost:8000")
DEFAULT_INPUTS = ["testcase1.json", "testcase2.json"]
