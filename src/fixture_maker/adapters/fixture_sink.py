from __future__ import annotations

import dataclasses
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from fixture_maker.ports.fixture_sink import FixtureSink


def encode_instance(instance: object) -> str:
    # Dicts from configured fixtures and dataclass fixtures both render as one compact JSON object.
    return json.dumps(instance, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def _json_default(value: object) -> object:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


@dataclass
class JsonlFixtureSink(FixtureSink):
    # Writes one instance per line; the file is opened on first write and truncated.
    path: Path
    written: int = field(default=0, init=False)
    _handle: TextIO | None = field(default=None, init=False, repr=False)

    def write(self, instance: object) -> None:
        if self._handle is None:
            self._handle = self.path.open("w", encoding="utf-8")
        self._handle.write(encode_instance(instance) + "\n")
        self.written += 1

    def close(self) -> None:
        # Idempotent.
        if self._handle is None:
            return
        self._handle.flush()
        self._handle.close()
        self._handle = None


class StdoutFixtureSink(FixtureSink):
    def __init__(self) -> None:
        self.written = 0

    def write(self, instance: object) -> None:
        sys.stdout.write(encode_instance(instance) + "\n")
        self.written += 1

    def close(self) -> None:
        sys.stdout.flush()


def build_fixture_sink(output: str | None) -> FixtureSink:
    return JsonlFixtureSink(Path(output)) if output else StdoutFixtureSink()
