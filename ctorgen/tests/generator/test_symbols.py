"""Tests for symbol registration and imports."""

from pytest import raises

from ctorgen.generator.errors import SymbolError
from ctorgen.generator.imports import TypeScriptImports
from ctorgen.generator.source import TypescriptFile, output_file_name
from ctorgen.generator.symbols import SymbolTable
from ctorgen.generator.types import ProtoFile, ProtoMessage


def make_file(name):
    return TypescriptFile(ProtoFile(name=name))


def describe_symbol_table():
    def registers_by_identity_and_kind(expect):
        symbols = SymbolTable()
        source = make_file("a.proto")
        message = ProtoMessage(name="A", type_name="p.A")
        expect(symbols.register("A", message, source, "message")) == "A"
        expect(symbols.register("ACtor", message, source, "message-class")) == "ACtor"
        expect(symbols.find("p.A", "message-class").name) == "ACtor"
        expect(symbols.has(message, "enum")) == False

    def suffixes_clashing_names(expect):
        symbols = SymbolTable()
        source = make_file("a.proto")
        expect(symbols.register("A", "p.A", source)) == "A"
        expect(symbols.register("A", "q.A", source)) == "A$1"
        expect(symbols.register("A", "r.A", source)) == "A$2"

    def rejects_duplicate_registration(expect):
        symbols = SymbolTable()
        source = make_file("a.proto")
        symbols.register("A", "p.A", source)
        with raises(SymbolError):
            symbols.register("Other", "p.A", source)

    def raises_for_unknown_symbols(expect):
        with raises(SymbolError):
            SymbolTable().find("p.Missing", "message")

    def lists_symbols_per_file(expect):
        symbols = SymbolTable()
        a, b = make_file("a.proto"), make_file("b.proto")
        symbols.register("A", "p.A", a)
        symbols.register("B", "p.B", b)
        expect([e.name for e in symbols.declared_in(a)]) == ["A"]


def describe_imports():
    def computes_relative_import_paths(expect):
        here = make_file("pkg/sub/here.proto")
        expect(here.import_path(make_file("pkg/sub/there.proto"))) == "./there"
        expect(here.import_path(make_file("pkg/other.proto"))) == "../other"
        expect(here.import_path(make_file("root.proto"))) == "../../root"

    def imports_each_name_once(expect):
        symbols = SymbolTable()
        here, there = make_file("here.proto"), make_file("there.proto")
        symbols.register("T", "p.T", there, "message")
        imports = TypeScriptImports(symbols)
        expect(imports.type_by_name(here, "p.T")) == "T"
        expect(imports.type_by_name(here, "p.T")) == "T"
        expect(here.imports) == [("./there", ["T"])]
        expect(there.imports) == []

    def maps_schema_file_names(expect):
        expect(output_file_name("geo/shapes.proto")) == "geo/shapes.ts"
        expect(output_file_name("schema")) == "schema.ts"
