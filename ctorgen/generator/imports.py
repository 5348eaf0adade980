"""Resolve schema types to local TypeScript names, importing as needed."""

from typing import Any

from .source import TypescriptFile
from .symbols import SymbolTable


class TypeScriptImports:
    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols

    def type(self, source: TypescriptFile, descriptor: Any, kind: str = "type") -> str:
        """Return the name to use for `descriptor` inside `source`.

        If the symbol is declared in another file, an import is added to
        `source`.
        """
        entry = self.symbols.find(descriptor, kind)
        if entry.file is not source:
            source.add_import(entry.file, entry.name)
        return entry.name

    def type_by_name(self, source: TypescriptFile, type_name: str, kind: str = "message") -> str:
        """Like `type`, keyed by fully qualified schema name."""
        return self.type(source, type_name, kind)
