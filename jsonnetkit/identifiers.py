"""Sets of identifiers."""

from __future__ import annotations

from collections.abc import Iterable


class IdentifierSet(set):
    """A set of variable, parameter or field names."""

    def add_identifiers(self, idents: Iterable[str]) -> None:
        """Add every identifier in ``idents``."""
        self.update(idents)

    def to_ordered_list(self) -> list[str]:
        """The identifiers in sorted order."""
        return sorted(self)