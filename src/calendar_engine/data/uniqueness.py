from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Collection, Iterable, List, Mapping, Optional, Set, Tuple

from ..domain import ConflictError


@dataclass
class UniquenessIndex:
    """Live (subject, start, end) keys; subjects compare case-insensitively."""

    keys: Set[str] = field(default_factory=set)

    @staticmethod
    def key(subject: str, start: datetime, end: datetime) -> str:
        return f"{subject.strip().lower()}|{start.isoformat()}|{end.isoformat()}"

    @staticmethod
    def subject_of(key: str) -> str:
        return key.rsplit("|", 2)[0]

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def add_or_raise(self, subject: str, start: datetime, end: datetime) -> str:
        key = self.key(subject, start, end)
        if key in self.keys:
            raise ConflictError(
                "Duplicate event (subject/start/end) exists",
                subject=subject.strip(),
                key=key,
            )
        self.keys.add(key)
        return key

    def replace_or_raise(self, old_key: str, new_key: str, *, subject: Optional[str] = None) -> None:
        if old_key != new_key and new_key in self.keys:
            raise ConflictError(
                "Update would duplicate an existing event",
                subject=subject or self.subject_of(new_key),
                key=new_key,
            )
        self.keys.discard(old_key)
        self.keys.add(new_key)

    def ensure_available(
        self,
        candidates: Iterable[str],
        *,
        releasing: Collection[str] = (),
        labels: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Raise unless every candidate key could be live at once.

        Keys listed in ``releasing`` are about to be removed and do not count as
        taken. ``labels`` maps keys to the subject reported in the error.
        Nothing is modified.
        """

        labels = labels or {}
        released = set(releasing)
        seen: Set[str] = set()
        for key in candidates:
            subject = labels.get(key) or self.subject_of(key)
            if key in seen:
                raise ConflictError("Operation would produce duplicate events", subject=subject, key=key)
            seen.add(key)
            if key in self.keys and key not in released:
                raise ConflictError("Duplicate event (subject/start/end) exists", subject=subject, key=key)

    def add_many(self, keys: Iterable[str], *, labels: Optional[Mapping[str, str]] = None) -> None:
        pending = list(keys)
        self.ensure_available(pending, labels=labels)
        self.keys.update(pending)

    def replace_many(self, pairs: List[Tuple[str, str]], *, labels: Optional[Mapping[str, str]] = None) -> None:
        self.ensure_available([new for _, new in pairs], releasing=[old for old, _ in pairs], labels=labels)
        for old, _ in pairs:
            self.keys.discard(old)
        for _, new in pairs:
            self.keys.add(new)

    def discard(self, key: Optional[str]) -> None:
        if key is not None:
            self.keys.discard(key)
