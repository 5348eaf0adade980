"""Symbol table for generated TypeScript declarations."""

from dataclasses import dataclass
from typing import Any

from .errors import SymbolError
from .source import TypescriptFile


@dataclass(frozen=True)
class SymbolEntry:
    """A generated name reserved for a schema element."""

    name: str
    type_name: str
    file: TypescriptFile
    kind: str


def _identity(descriptor: Any) -> str:
    if isinstance(descriptor, str):
        return descriptor
    return descriptor.type_name


class SymbolTable:
    """Reserves generated names and resolves them by schema identity.

    Names are unique across all output files, so an imported name never
    shadows a local declaration. A clashing name gets a ``$N`` suffix.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], SymbolEntry] = {}
        self._names: set[str] = set()

    def register(self, name: str, descriptor: Any, file: TypescriptFile, kind: str = "type") -> str:
        """Reserve a name for `descriptor` under `kind`, returning the final name."""
        key = (_identity(descriptor), kind)
        if key in self._entries:
            raise SymbolError(f"{key[0]} is already registered as {kind}")

        unique = name
        counter = 1
        while unique in self._names:
            unique = f"{name}${counter}"
            counter += 1

        self._names.add(unique)
        self._entries[key] = SymbolEntry(unique, key[0], file, kind)
        return unique

    def has(self, descriptor: Any, kind: str = "type") -> bool:
        return (_identity(descriptor), kind) in self._entries

    def find(self, descriptor: Any, kind: str = "type") -> SymbolEntry:
        """Look up a registered symbol."""
        key = (_identity(descriptor), kind)
        entry = self._entries.get(key)
        if entry is None:
            raise SymbolError(f"No {kind} symbol registered for {key[0]}")
        return entry

    def declared_in(self, file: TypescriptFile) -> list[SymbolEntry]:
        """Return the symbols declared in `file`, in registration order."""
        return [e for e in self._entries.values() if e.file is file]
