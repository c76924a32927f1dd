"""Container healthcheck script: returns exit 0 if the report API is ready."""

from __future__ import annotations

import os
import sys
import urllib.error
import urllib.request

port = os.environ.get("COGREPORT_APP_PORT", "8080")

try:
    with urllib.request.urlopen(f"http://localhost:{port}/ready", timeout=5) as resp:
        if resp.status == 200:
            sys.exit(0)
except (urllib.error.URLError, OSError) as exc:
    print(f"healthcheck failed: {exc}", file=sys.stderr)

sys.exit(1)
