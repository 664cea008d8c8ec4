# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Record layout
# -----------------------------------------------------------------------------
# Field holding the text to embed (CSV column / JSON entry key)
CONTENT_FIELD = _env("RECEMBED_CONTENT_FIELD", "content")

# Top-level JSON key holding the array of entries
JSON_ARRAY_FIELD = _env("RECEMBED_JSON_ARRAY_FIELD", "data")


# -----------------------------------------------------------------------------
# Run behaviour
# -----------------------------------------------------------------------------
SHOW_PROGRESS = _env_bool("RECEMBED_SHOW_PROGRESS", True)

# false = log failed records and keep going instead of aborting the run
FAIL_FAST = _env_bool("RECEMBED_FAIL_FAST", True)


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if not CONTENT_FIELD:
    raise RuntimeError("CONTENT_FIELD resolved to empty value")

if not JSON_ARRAY_FIELD:
    raise RuntimeError("JSON_ARRAY_FIELD resolved to empty value")
