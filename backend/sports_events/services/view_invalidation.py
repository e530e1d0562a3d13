"""View Invalidation — collects page paths made stale by a successful write.

Invariants:
    - Paths recorded in order, without duplicates
    - Only successful writes record paths (use cases call invalidate() last)
    - One collector per request; nothing is shared across requests

Design Decisions:
    - Collected, not pushed: the route copies the paths into the
      X-Invalidate-Paths header and the client decides what to refetch
"""

INVALIDATE_HEADER = "X-Invalidate-Paths"


class RequestInvalidations:
    """ViewInvalidator that remembers stale paths for the current response."""

    def __init__(self):
        self.paths: list[str] = []

    def invalidate(self, path: str) -> None:
        if path not in self.paths:
            self.paths.append(path)

    def header_value(self) -> str | None:
        return ",".join(self.paths) if self.paths else None
