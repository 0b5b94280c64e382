"""
site_verify/telemetry.py — optional JSONL run events.

Off unless TELEMETRY_DIR is set; nothing is created on disk otherwise.
One `verify_build.completed` event per run, appended to
$TELEMETRY_DIR/<epoch>.jsonl.
"""

from __future__ import annotations

import getpass
import os
import socket
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import orjson

from site_verify.audit import VerificationResult

EVENT_TYPE = "verify_build.completed"


def telemetry_dir() -> Optional[Path]:
    raw = os.getenv("TELEMETRY_DIR")
    return Path(raw) if raw else None


def github_context() -> Dict[str, Optional[str]]:
    return {
        key: os.getenv(f"GITHUB_{key.upper()}")
        for key in ("repository", "sha", "ref", "workflow", "job")
    }


def record_verification(result: VerificationResult, dist: Path, run_id: Optional[str] = None) -> Optional[str]:
    """
    Write the outcome of one verification run (status, error count, per-stage
    tallies, size warnings) and return the event id, or None when off.
    """
    target = telemetry_dir()
    if target is None:
        return None

    event_id = str(uuid.uuid4())
    event: Dict[str, Any] = {
        "event_id": event_id,
        "event_type": EVENT_TYPE,
        "ts": datetime.now(timezone.utc).isoformat(),
        "run_id": run_id or os.getenv("GITHUB_RUN_ID") or event_id,
        "actor": getpass.getuser(),
        "host": socket.gethostname(),
        "context": github_context(),
        "payload": {
            "dist": str(dist),
            "status": "PASS" if result.ok else "FAIL",
            "errors": result.errors,
            "warnings": list(result.warnings),
            "stages": [
                {"name": s.name, "attempted": s.attempted, "passed": s.passed, "errors": s.errors}
                for s in result.stages
            ],
        },
    }

    target.mkdir(parents=True, exist_ok=True)
    with (target / f"{int(time.time())}.jsonl").open("ab") as f:
        f.write(orjson.dumps(event) + b"\n")
    return event_id
