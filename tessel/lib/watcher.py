"""Polling file watcher for rebuild-on-change.

Changes are reported only after the watched tree has been stable for one
poll, so an editor writing several files triggers a single rebuild.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from .errors import TesselError

log = logging.getLogger(__name__)

Snapshot = dict[Path, int]


class ChangeKind(str, Enum):
    ADDED = "added"
    CHANGED = "changed"
    REMOVED = "removed"


@dataclass(frozen=True)
class FileChange:
    kind: ChangeKind
    path: Path


def snapshot(paths: Iterable[Path]) -> Snapshot:
    """Map every file below `paths` to its modification time."""
    state: Snapshot = {}
    for root in paths:
        if not root.is_dir():
            continue
        for path in root.rglob("*"):
            try:
                if path.is_file():
                    state[path] = path.stat().st_mtime_ns
            except FileNotFoundError:
                # deleted between listing and stat; the next poll reports it
                continue
    return state


def diff(before: Snapshot, after: Snapshot) -> list[FileChange]:
    changes = [FileChange(ChangeKind.ADDED, p) for p in after if p not in before]
    changes += [
        FileChange(ChangeKind.CHANGED, p)
        for p, mtime in after.items()
        if p in before and before[p] != mtime
    ]
    changes += [FileChange(ChangeKind.REMOVED, p) for p in before if p not in after]
    return changes


class Watcher:
    """Polls `paths` and calls `on_change` with each settled batch of changes."""

    def __init__(
        self,
        paths: Iterable[Path],
        on_change: Callable[[list[FileChange]], None],
        interval: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.paths = list(paths)
        self.on_change = on_change
        self.interval = interval
        self._sleep = sleep
        self._state = snapshot(self.paths)
        self._pending: dict[Path, FileChange] = {}
        self._stopped = False

    def poll_once(self) -> list[FileChange]:
        """Return the settled changes since the last call, if any."""
        current = snapshot(self.paths)
        changes = diff(self._state, current)
        self._state = current

        if changes:
            for change in changes:
                self._pending[change.path] = change
            return []

        ready = list(self._pending.values())
        self._pending.clear()
        return ready

    def run(self) -> None:
        """Poll until `stop()` is called or the user hits Ctrl-C."""
        for path in self.paths:
            log.info(f"Watching: {path}")
        log.info("Watch mode active. Press Ctrl-C to stop.")

        try:
            while not self._stopped:
                changes = self.poll_once()
                if changes:
                    self._dispatch(changes)
                self._sleep(self.interval)
        except KeyboardInterrupt:
            pass
        log.info("Watch mode stopped")

    def stop(self) -> None:
        self._stopped = True

    def _dispatch(self, changes: list[FileChange]) -> None:
        for change in changes:
            log.info(f"File {change.kind.value}: {change.path}")
        try:
            self.on_change(changes)
        except TesselError as e:
            log.error(f"Build failed: {e.message}")
        except Exception as e:
            log.exception(f"Build failed: {e}")
        else:
            log.info("Build completed successfully")
