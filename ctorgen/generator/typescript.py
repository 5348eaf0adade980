"""TypeScript syntax nodes and printer.

Type nodes are frozen so that two generation passes over the same input can
be compared structurally. Declarations carry mutable comment lists that the
comment generator fills in after construction.
"""

import json
from dataclasses import dataclass, field

INDENT = "    "


@dataclass(frozen=True)
class KeywordType:
    """A built in type keyword such as ``string`` or ``undefined``."""

    keyword: str


@dataclass(frozen=True)
class TypeReference:
    name: str


@dataclass(frozen=True)
class LiteralType:
    """A string literal type."""

    value: str


@dataclass(frozen=True)
class ArrayType:
    element: "TypeNode"


@dataclass(frozen=True)
class PropertySignature:
    """A property inside a type literal."""

    name: str
    type: "TypeNode"
    optional: bool = False


@dataclass(frozen=True)
class IndexSignature:
    """``[key: K]: V`` inside a type literal."""

    key_name: str
    key_type: "TypeNode"
    value_type: "TypeNode"


@dataclass(frozen=True)
class TypeLiteral:
    members: tuple[PropertySignature | IndexSignature, ...]


@dataclass(frozen=True)
class UnionType:
    types: tuple["TypeNode", ...]


TypeNode = KeywordType | TypeReference | LiteralType | ArrayType | TypeLiteral | UnionType

BOOLEAN = KeywordType("boolean")
STRING = KeywordType("string")
NUMBER = KeywordType("number")
BIGINT = KeywordType("bigint")
UNDEFINED = KeywordType("undefined")
UINT8_ARRAY = TypeReference("Uint8Array")


@dataclass
class Comments:
    """Comment text attached to a declaration."""

    leading: list[str] = field(default_factory=list)
    trailing: list[str] = field(default_factory=list)


@dataclass
class Parameter:
    """A constructor parameter, optionally promoted to a class property."""

    name: str
    type: TypeNode
    optional: bool = False
    modifiers: tuple[str, ...] = ("public", "readonly")
    comments: Comments = field(default_factory=Comments)


@dataclass
class Constructor:
    parameters: list[Parameter] = field(default_factory=list)


@dataclass
class ClassDeclaration:
    name: str
    members: list[Constructor] = field(default_factory=list)
    modifiers: tuple[str, ...] = ("export",)
    comments: Comments = field(default_factory=Comments)

    @property
    def parameters(self) -> list[Parameter]:
        """Constructor parameters of the first constructor, if any."""
        for member in self.members:
            if isinstance(member, Constructor):
                return member.parameters
        return []


@dataclass
class EnumMember:
    name: str
    value: int
    comments: Comments = field(default_factory=Comments)


@dataclass
class EnumDeclaration:
    name: str
    members: list[EnumMember] = field(default_factory=list)
    modifiers: tuple[str, ...] = ("export",)
    comments: Comments = field(default_factory=Comments)


@dataclass
class TypeAliasDeclaration:
    name: str
    type: TypeNode
    modifiers: tuple[str, ...] = ("export",)
    comments: Comments = field(default_factory=Comments)


Statement = ClassDeclaration | EnumDeclaration | TypeAliasDeclaration


def print_type(node: TypeNode) -> str:
    """Print a type node on a single line."""
    if isinstance(node, KeywordType):
        return node.keyword
    if isinstance(node, TypeReference):
        return node.name
    if isinstance(node, LiteralType):
        return json.dumps(node.value)
    if isinstance(node, ArrayType):
        element = print_type(node.element)
        if isinstance(node.element, UnionType):
            element = f"({element})"
        return f"{element}[]"
    if isinstance(node, TypeLiteral):
        if not node.members:
            return "{}"
        return "{ " + " ".join(_print_member(m) + ";" for m in node.members) + " }"
    if isinstance(node, UnionType):
        return " | ".join(print_type(t) for t in node.types)
    raise TypeError(f"Not a type node: {node!r}")


def _print_member(member: PropertySignature | IndexSignature) -> str:
    if isinstance(member, IndexSignature):
        key = f"{member.key_name}: {print_type(member.key_type)}"
        return f"[{key}]: {print_type(member.value_type)}"
    mark = "?" if member.optional else ""
    return f"{member.name}{mark}: {print_type(member.type)}"


def _leading_block(comments: Comments, indent: str) -> list[str]:
    if not comments.leading:
        return []
    lines = [f"{indent}/**"]
    for line in comments.leading:
        lines.append(f"{indent} * {line}".rstrip())
    lines.append(f"{indent} */")
    return lines


def _trailing_lines(comments: Comments, indent: str) -> list[str]:
    return [f"{indent}// {line}".rstrip() for line in comments.trailing]


def _print_parameter(param: Parameter) -> str:
    prefix = " ".join(param.modifiers)
    if prefix:
        prefix += " "
    mark = "?" if param.optional else ""
    return f"{prefix}{param.name}{mark}: {print_type(param.type)}"


def print_class(decl: ClassDeclaration) -> str:
    lines = _leading_block(decl.comments, "")
    lines.append(f"{' '.join(decl.modifiers + ('class',))} {decl.name} {{")
    for member in decl.members:
        if not member.parameters:
            lines.append(f"{INDENT}constructor() {{")
            lines.append(f"{INDENT}}}")
            continue
        lines.append(f"{INDENT}constructor(")
        indent = INDENT * 2
        for i, param in enumerate(member.parameters):
            sep = "," if i < len(member.parameters) - 1 else ""
            lines.extend(_leading_block(param.comments, indent))
            lines.append(f"{indent}{_print_parameter(param)}{sep}")
            lines.extend(_trailing_lines(param.comments, indent))
        lines.append(f"{INDENT}) {{")
        lines.append(f"{INDENT}}}")
    lines.append("}")
    lines.extend(_trailing_lines(decl.comments, ""))
    return "\n".join(lines)


def print_enum(decl: EnumDeclaration) -> str:
    lines = _leading_block(decl.comments, "")
    lines.append(f"{' '.join(decl.modifiers + ('enum',))} {decl.name} {{")
    for i, member in enumerate(decl.members):
        sep = "," if i < len(decl.members) - 1 else ""
        lines.extend(_leading_block(member.comments, INDENT))
        lines.append(f"{INDENT}{member.name} = {member.value}{sep}")
        lines.extend(_trailing_lines(member.comments, INDENT))
    lines.append("}")
    return "\n".join(lines)


def print_type_alias(decl: TypeAliasDeclaration) -> str:
    lines = _leading_block(decl.comments, "")
    keywords = " ".join(decl.modifiers + ("type",))
    lines.append(f"{keywords} {decl.name} = {print_type(decl.type)};")
    return "\n".join(lines)


def print_statement(statement: Statement) -> str:
    """Print a top level declaration."""
    if isinstance(statement, ClassDeclaration):
        return print_class(statement)
    if isinstance(statement, EnumDeclaration):
        return print_enum(statement)
    if isinstance(statement, TypeAliasDeclaration):
        return print_type_alias(statement)
    raise TypeError(f"Not a statement: {statement!r}")
