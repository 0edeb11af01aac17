from __future__ import annotations

from typing import Protocol, runtime_checkable


# FixtureSink receives made instances; encoding is the adapter's concern.
@runtime_checkable
class FixtureSink(Protocol):
    def write(self, instance: object) -> None:
        """Record one made fixture instance."""
        raise NotImplementedError("FixtureSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Flush and release whatever the sink holds open."""
        raise NotImplementedError("FixtureSink is a port; use a concrete adapter.")
