"""Shared type aliases."""

from __future__ import annotations

from typing import Any

# Raw JSON objects as returned by the portal API
JsonDict = dict[str, Any]
