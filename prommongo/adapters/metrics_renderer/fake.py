"""Fake MetricsRenderer for testing.

Renders one ``<family> 0`` line per declared family name, so facade tests
can check what was served without parsing the exposition format.
"""

from typing import Iterable

from prommongo.core.protocols.metrics_renderer import MetricsRenderer


class FakeMetricsRenderer(MetricsRenderer):
    """In-memory spy implementing the MetricsRenderer protocol."""

    def __init__(self, families: Iterable[str] = ()) -> None:
        self.families = sorted(families)
        self.generate_calls: int = 0

    @property
    def content_type(self) -> str:
        return "text/plain"

    def generate(self) -> bytes:
        self.generate_calls += 1
        return "".join(f"{name} 0\n" for name in self.families).encode()

    def family_names(self) -> list[str]:
        return list(self.families)

    def clear(self) -> None:
        self.generate_calls = 0
