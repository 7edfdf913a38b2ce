"""Audit log for committed registry mutations.

Each registry appends one JSON line per successful create, replace, or
delete to a daily file under the audit directory (``~/.collabmesh/audit_logs/``
by default). Rejected operations are returned to the caller and not recorded.

The line is written after the table commit. If that write fails the
mutation stays committed and ``AuditWriteError`` tells the caller so.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from collabmesh import config


class AuditWriteError(RuntimeError):
    """A mutation was committed but its audit line could not be written."""

    def __init__(self, entry: AuditEntry, cause: OSError) -> None:
        self.entry = entry
        super().__init__(
            f"{entry.registry}.{entry.action} by '{entry.actor}' was committed "
            f"but not audited: {cause}"
        )


@dataclass
class AuditEntry:
    """One committed mutation. Mutations are self-only, so the record key is the actor."""

    id: str
    timestamp: str
    actor: str
    registry: str  # organization | contributor | requisition
    action: str  # registry operation name, e.g. "initialize"


class AuditLogger:
    """Append-only JSON-lines audit logger."""

    def __init__(self, base_dir: Optional[str | Path] = None) -> None:
        self._dir = config.audit_dir(base_dir)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _day_file(self, stamp: datetime) -> Path:
        return self._dir / f"{stamp:%Y-%m-%d}.jsonl"

    def record(self, actor: str, registry: str, action: str) -> AuditEntry:
        """Append an entry for a committed mutation and return it."""
        stamp = datetime.now(timezone.utc)
        entry = AuditEntry(
            id=uuid.uuid4().hex[:16],
            timestamp=stamp.isoformat(),
            actor=actor,
            registry=registry,
            action=action,
        )
        try:
            with self._day_file(stamp).open("a", encoding="utf-8") as fh:
                fh.write(json.dumps(asdict(entry)) + "\n")
        except OSError as e:
            raise AuditWriteError(entry, e) from e
        return entry

    def entries(self) -> list[AuditEntry]:
        """Every readable entry, oldest file first. Torn lines are skipped."""
        found: list[AuditEntry] = []
        for path in sorted(self._dir.glob("*.jsonl")):
            for line in path.read_text(encoding="utf-8").splitlines():
                if not line.strip():
                    continue
                try:
                    found.append(AuditEntry(**json.loads(line)))
                except (json.JSONDecodeError, TypeError):
                    continue
        return found

    def get_events(
        self,
        *,
        actor: Optional[str] = None,
        registry: Optional[str] = None,
        action: Optional[str] = None,
        limit: int = 200,
    ) -> list[AuditEntry]:
        """Return matching entries, newest first."""
        matched = [
            e
            for e in self.entries()
            if (actor is None or e.actor == actor)
            and (registry is None or e.registry == registry)
            and (action is None or e.action == action)
        ]
        matched.sort(key=lambda e: e.timestamp, reverse=True)
        return matched[:limit]
