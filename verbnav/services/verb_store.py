"""In-memory registry of verbs keyed by invocation."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..domain.verbs import Verb, VerbRecord
from ..logging import log_event


class VerbRegistry:
    """Maps invocation keys to verbs.

    Built once from configuration and read-only afterwards. Inserting an
    existing key replaces the previous binding.
    """

    def __init__(self) -> None:
        self._verbs: Dict[str, Verb] = {}

    def insert(self, invocation: str, verb: Verb) -> None:
        self._verbs[invocation] = verb

    def insert_from_config(self, records: Iterable[VerbRecord]) -> int:
        """Insert every record, last writer wins. Returns the number inserted."""
        count = 0
        for record in records:
            self.insert(record.invocation, Verb.from_record(record))
            count += 1
        log_event("verbs_loaded", inserted=count, registered=len(self._verbs))
        return count

    def lookup(self, invocation: str) -> Optional[Verb]:
        """Exact-match lookup; ``None`` when the key is unbound."""
        return self._verbs.get(invocation)

    def items(self) -> List[Tuple[str, Verb]]:
        return sorted(self._verbs.items())

    def __contains__(self, invocation: object) -> bool:
        return invocation in self._verbs

    def __iter__(self) -> Iterator[str]:
        return iter(self._verbs)

    def __len__(self) -> int:
        return len(self._verbs)
