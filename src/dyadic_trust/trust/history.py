"""AntecedentHistory — the capped, append-only antecedent log for one direction.

Each direction of a relationship keeps its own history. Appending past the
cap sorts the log by timestamp and evicts the oldest entries, so the log
always holds the most recent ``max_entries`` observations.
"""
from __future__ import annotations

import datetime
import logging
from collections.abc import Iterator

from dyadic_trust.trust.antecedent import TrustAntecedent

logger = logging.getLogger(__name__)

MAX_ANTECEDENT_HISTORY = 100


class AntecedentHistory:
    """Bounded log of trust antecedents.

    The log performs no locking; callers serialise mutation of a single
    relationship themselves.

    Parameters
    ----------
    max_entries:
        Maximum number of antecedents retained. Defaults to 100.
    """

    def __init__(self, max_entries: int = MAX_ANTECEDENT_HISTORY) -> None:
        self._entries: list[TrustAntecedent] = []
        self._max_entries = max_entries
        self._last_negative: datetime.datetime | None = None

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def append(self, antecedent: TrustAntecedent) -> None:
        """Record an antecedent, pruning the oldest entries past the cap.

        Parameters
        ----------
        antecedent:
            The observation to record. Negative antecedents also update
            :attr:`last_negative`.
        """
        if antecedent.is_negative:
            self._last_negative = antecedent.timestamp

        self._entries.append(antecedent)
        if len(self._entries) > self._max_entries:
            self._entries.sort(key=lambda entry: entry.timestamp)
            overflow = len(self._entries) - self._max_entries
            del self._entries[:overflow]
            logger.debug(
                "Pruned %d antecedent(s); history capped at %d",
                overflow,
                self._max_entries,
            )

    def clear(self) -> None:
        """Remove every entry and forget the last negative timestamp."""
        self._entries.clear()
        self._last_negative = None

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def last_negative(self) -> datetime.datetime | None:
        """Timestamp of the most recently appended negative antecedent."""
        return self._last_negative

    def entries(self) -> list[TrustAntecedent]:
        """Return a copy of the log in storage order."""
        return list(self._entries)

    def since(self, timestamp: datetime.datetime) -> list[TrustAntecedent]:
        """Return entries at or after ``timestamp``, in storage order."""
        return [entry for entry in self._entries if entry.timestamp >= timestamp]

    def latest(self) -> TrustAntecedent | None:
        """Return the antecedent with the latest timestamp, or None."""
        if not self._entries:
            return None
        return max(self._entries, key=lambda entry: entry.timestamp)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TrustAntecedent]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"AntecedentHistory(entries={len(self._entries)}, max_entries={self._max_entries})"
