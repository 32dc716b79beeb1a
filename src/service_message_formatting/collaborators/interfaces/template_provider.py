"""Abstract interface for localized template lookup (string tables, remote bundles, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from service_message_formatting.models.result import TextRange


@dataclass(frozen=True)
class TemplateLookup:
    """Filled template plus the range each referenced argument occupies."""

    text: str
    ranges: tuple[tuple[int, TextRange], ...] = ()
    """(argument index, range) pairs; unreferenced arguments are absent."""


class ITemplateProvider(ABC):
    """Interface for a localized template provider.

    Must be total over every TemplateKey and report ranges in str indices.
    """

    @abstractmethod
    def lookup(
        self,
        key: str,
        args: Sequence[str],
        *,
        plural: int | None = None,
    ) -> TemplateLookup:
        """Fill the template for key with args.

        Raises:
            TemplateNotFoundError: key is unknown.
            TemplateFormatError: the template references a missing argument.
        """
        ...

    def text(self, key: str) -> str:
        """Return the template for key filled with no arguments."""
        return self.lookup(key, ()).text
