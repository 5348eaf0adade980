"""Output file model and rendering."""

import posixpath

from jinja2 import Environment, PackageLoader

from ctorgen import __version__

from .types import ProtoFile
from .typescript import Statement, print_statement

env = Environment(
    loader=PackageLoader("ctorgen.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("typescript.ts.j2")


def output_file_name(schema_file_name: str) -> str:
    """Map ``pkg/foo.proto`` to ``pkg/foo.ts``."""
    base, ext = posixpath.splitext(schema_file_name)
    if ext != ".proto":
        base = schema_file_name
    return base + ".ts"


class TypescriptFile:
    """A TypeScript file under construction."""

    def __init__(self, proto_file: ProtoFile):
        self.proto_file = proto_file
        self.file_name = output_file_name(proto_file.name)
        self.statements: list[Statement] = []
        self._imports: dict[str, list[str]] = {}
        self._declarations: dict[str, Statement] = {}

    def __repr__(self) -> str:
        return f"TypescriptFile({self.file_name!r})"

    def add_statement(self, statement: Statement, type_name: str | None = None) -> None:
        """Append a declaration, optionally recording the schema type it declares.

        A later declaration for the same type name replaces the earlier one
        in place.
        """
        previous = self._declarations.get(type_name) if type_name is not None else None
        if previous is None:
            self.statements.append(statement)
        else:
            index = next(i for i, s in enumerate(self.statements) if s is previous)
            self.statements[index] = statement
        if type_name is not None:
            self._declarations[type_name] = statement

    def declaration(self, type_name: str) -> Statement | None:
        return self._declarations.get(type_name)

    def add_import(self, other: "TypescriptFile", name: str) -> None:
        """Import `name` from another generated file, once."""
        module = self.import_path(other)
        names = self._imports.setdefault(module, [])
        if name not in names:
            names.append(name)

    def import_path(self, other: "TypescriptFile") -> str:
        """Relative module specifier for `other`, without extension."""
        here = posixpath.dirname(self.file_name)
        target = posixpath.splitext(other.file_name)[0]
        rel = posixpath.relpath(target, here or ".")
        if not rel.startswith("."):
            rel = "./" + rel
        return rel

    def _origin(self) -> str:
        origin = f"schema file \"{self.proto_file.name}\""
        if self.proto_file.package:
            origin += f" (package \"{self.proto_file.package}\")"
        return origin

    @property
    def imports(self) -> list[tuple[str, list[str]]]:
        return sorted((module, sorted(names)) for module, names in self._imports.items())

    def to_source(self) -> str:
        """Render the file to TypeScript source text."""
        comment = self.proto_file.comment
        header = comment.leading.splitlines() if comment and comment.leading else []
        return template.render(
            version=__version__,
            origin=self._origin(),
            header_comments=header,
            imports=self.imports,
            statements=[print_statement(s) for s in self.statements],
            BLANK_LINE="",
        )
