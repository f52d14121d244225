"""Event source reading a JSON-lines file: one decoded event record per line."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

from synth_exchange_indexer.event_source.base import IEventSource
from synth_exchange_indexer.exceptions import MalformedEventError
from synth_exchange_indexer.models.events import ChainPosition, DecodedEvent, decode_event


class JsonLinesEventSource(IEventSource):
    """Replays events from a .jsonl file. Blank lines are ignored.

    The file is reopened on every iteration, so the same log can be replayed
    from scratch or from a checkpoint.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def iter_events(self, after: ChainPosition | None = None) -> Iterator[DecodedEvent]:
        with self._path.open("r", encoding="utf-8") as fh:
            for line_number, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                try:
                    payload = json.loads(line)
                except json.JSONDecodeError as e:
                    raise MalformedEventError(
                        f"{self._path}:{line_number}: invalid JSON ({e.msg})",
                        line_number=line_number,
                    ) from e
                try:
                    event = decode_event(payload)
                except MalformedEventError as e:
                    raise MalformedEventError(
                        f"{self._path}:{line_number}: {e}",
                        field=e.field,
                        line_number=line_number,
                    ) from e
                if after is not None and event.meta.position <= after:
                    continue
                yield event
