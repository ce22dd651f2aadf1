"""Honeypot spam guard.

The contact page renders a ``website`` input hidden from people. Bots that
fill every field trip it. This is a best-effort heuristic, not a security
boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

HONEYPOT_FIELD = "website"


def is_spam(form: Mapping[str, Any]) -> bool:
    value = form.get(HONEYPOT_FIELD)
    if value is None:
        return False
    return bool(str(value).strip())
