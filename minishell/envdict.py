"""An ordered key/value store for environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO


class EnvDict:
    """Ordered (key, value) entries; a value may be None when it was never set.

    Iterating yields (key, value) tuples in insertion order.
    """

    def __init__(self, entries: Iterable[tuple[str, str | None]] = ()) -> None:
        self._entries: list[list] = [[key, value] for key, value in entries]

    @classmethod
    def from_list(cls, entries: Iterable[str], separator: str = "=") -> "EnvDict":
        """Build from strings such as "KEY=value".

        Empty pieces between separators are dropped, so "K==v" gives "v";
        further separators after the first are kept in the value.
        """
        result = cls()
        for entry in entries:
            pieces = [piece for piece in entry.split(separator) if piece]
            if not pieces:
                raise ValueError(f"entry {entry!r} has no key")
            key, *rest = pieces
            value = separator.join(rest) if rest else None
            result._entries.append([key, value])
        return result

    def add(self, key: str, value: str) -> None:
        """Append an entry.

        Existing entries without a value are given a single space.
        """
        if key is None:
            raise ValueError("key missing")
        for entry in self._entries:
            if entry[1] is None:
                entry[1] = " "
        self._entries.append([key, value])

    def remove(self, key: str) -> int:
        """Remove every entry whose key starts with ``key``; return how many."""
        kept = [entry for entry in self._entries if not entry[0].startswith(key)]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def get(self, key: str) -> str | None:
        """Return the value of the first entry with exactly this key, or None."""
        for entry_key, value in self._entries:
            if entry_key == key:
                return value
        return None

    def update(self, key: str, value: str) -> None:
        """Set the value of ``key``, adding the entry if there is none."""
        for entry in self._entries:
            if entry[0] == key:
                if entry[1] is None:
                    self.add(key, value)
                    self._entries.remove(entry)
                else:
                    entry[1] = value
                return
        self.add(key, value)

    def format(self, separator: str | None = None) -> str:
        """Render entries that have a value, one "key<sep>value" per line."""
        if separator is None:
            separator = ": "
        return "".join(
            f"{key}{separator}{value}\n"
            for key, value in self._entries
            if value is not None
        )

    def write(self, stream: TextIO, separator: str | None = None) -> None:
        """Write the rendered entries to ``stream``."""
        stream.write(self.format(separator))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        return (tuple(entry) for entry in list(self._entries))

    def __repr__(self) -> str:
        return f"EnvDict({list(self)!r})"