"""Naming helpers."""

# Names that clash with class syntax, Object.prototype, or are not valid
# binding identifiers for constructor parameters in strict mode code.
RESERVED_PROPERTY_NAMES = frozenset(
    [
        "constructor",
        "toString",
        # ECMAScript reserved words
        "break", "case", "catch", "class", "const", "continue", "debugger", "default",
        "delete", "do", "else", "enum", "export", "extends", "false", "finally", "for",
        "function", "if", "import", "in", "instanceof", "new", "null", "return", "super",
        "switch", "this", "throw", "true", "try", "typeof", "var", "void", "while", "with",
        # strict mode
        "arguments", "await", "eval", "implements", "interface", "let", "package",
        "private", "protected", "public", "static", "yield",
    ]
)  # fmt: skip


def to_camel_case(snake_str: str, upper: bool = False) -> str:
    """Convert snake_case to lowerCamelCase (or UpperCamelCase).

    A digit also capitalizes the following letter, so ``field_1_name``
    becomes ``field1Name``.
    """
    out: list[str] = []
    cap_next = upper
    for i, ch in enumerate(snake_str):
        if ch == "_":
            cap_next = True
        elif ch.isdigit():
            out.append(ch)
            cap_next = True
        elif cap_next:
            out.append(ch.upper())
            cap_next = False
        elif i == 0:
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def safe_property_name(name: str) -> str:
    if name in RESERVED_PROPERTY_NAMES:
        return name + "$"
    return name


def local_field_name(schema_name: str) -> str:
    """Property name used for a schema field or oneof."""
    return safe_property_name(to_camel_case(schema_name))
