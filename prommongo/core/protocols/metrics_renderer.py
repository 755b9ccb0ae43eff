"""MetricsRenderer protocol for the ``/metrics`` side of prommongo.

The command and pool collectors only understand pymongo events.  Whatever
serves a scrape endpoint talks to a renderer instead, which knows the wire
format and which ``go_mongo_*`` families are currently exposed.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Protocol for turning registered MongoDB collectors into a scrape body."""

    @property
    def content_type(self) -> str:
        """``Content-Type`` header to send with ``generate()``'s output."""
        ...

    def generate(self) -> bytes:
        """One scrape of every registered collector."""
        ...

    def family_names(self) -> list[str]:
        """Sorted names of the metric families a scrape would contain right now."""
        ...
