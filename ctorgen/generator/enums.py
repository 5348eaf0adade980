"""Enum declarations."""

from .comments import CommentGenerator, CommentPlacement
from .imports import TypeScriptImports
from .source import TypescriptFile
from .symbols import SymbolTable
from .types import ProtoEnum
from .typescript import EnumDeclaration, EnumMember

ENUM_KIND = "enum"


class EnumGenerator:
    def __init__(self, symbols: SymbolTable, imports: TypeScriptImports, comments: CommentGenerator):
        self.symbols = symbols
        self.imports = imports
        self.comments = comments

    def register_symbols(self, source: TypescriptFile, enum: ProtoEnum) -> str:
        return self.symbols.register(enum.local_name, enum, source, ENUM_KIND)

    def generate_enum(self, source: TypescriptFile, enum: ProtoEnum) -> EnumDeclaration:
        """Add ``export enum Name { ... }`` to `source`."""
        members: list[EnumMember] = []
        for value in enum.values:
            member = EnumMember(value.name, value.number)
            self.comments.add_comments_for_descriptor(
                member, value, CommentPlacement.APPEND_TO_LEADING_BLOCK
            )
            members.append(member)

        statement = EnumDeclaration(self.imports.type(source, enum, ENUM_KIND), members)
        self.comments.add_comments_for_descriptor(
            statement, enum, CommentPlacement.APPEND_TO_LEADING_BLOCK
        )
        source.add_statement(statement, enum.type_name)
        return statement
