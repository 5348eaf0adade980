"""Translate field metadata into TypeScript type nodes."""

from .errors import UnsupportedFieldKind
from .imports import TypeScriptImports
from .interpreter import FieldMeta
from .maps import MapTypeSynthesizer
from .options import GeneratorOptions
from .source import TypescriptFile
from .types import FieldKind, LongType, ProtoField, ScalarType
from .typescript import (
    BIGINT,
    BOOLEAN,
    NUMBER,
    STRING,
    UINT8_ARRAY,
    ArrayType,
    IndexSignature,
    TypeLiteral,
    TypeNode,
    TypeReference,
)

# Scalars whose TypeScript type does not depend on the long type setting
SCALAR_TYPE_MAP: dict[ScalarType, TypeNode] = {
    ScalarType.BOOL: BOOLEAN,
    ScalarType.STRING: STRING,
    ScalarType.BYTES: UINT8_ARRAY,
    ScalarType.DOUBLE: NUMBER,
    ScalarType.FLOAT: NUMBER,
    ScalarType.INT32: NUMBER,
    ScalarType.UINT32: NUMBER,
    ScalarType.FIXED32: NUMBER,
    ScalarType.SFIXED32: NUMBER,
    ScalarType.SINT32: NUMBER,
}

# 64-bit integer scalars, by representation
LONG_TYPE_MAP: dict[LongType, TypeNode] = {
    LongType.STRING: STRING,
    LongType.NUMBER: NUMBER,
    LongType.BIGINT: BIGINT,
}


def scalar_type_node(scalar: ScalarType, long_type: LongType = LongType.STRING) -> TypeNode:
    """Map a scalar to its TypeScript type."""
    if scalar in SCALAR_TYPE_MAP:
        return SCALAR_TYPE_MAP[scalar]
    return LONG_TYPE_MAP[long_type]


class FieldTypeResolver:
    """Resolves the value type of a field, ignoring optionality.

    Repeated fields come back wrapped in an array type.
    """

    def __init__(self, imports: TypeScriptImports, options: GeneratorOptions):
        self.imports = imports
        self.options = options
        self.maps = MapTypeSynthesizer(self)

    def create_type_node(
        self,
        source: TypescriptFile,
        field: FieldMeta,
        descriptor: ProtoField | None = None,
    ) -> TypeNode:
        type_node: TypeNode

        match field.kind:
            case FieldKind.SCALAR:
                type_node = self.create_scalar_type_node(field.scalar_type, field.long_type)
            case FieldKind.ENUM:
                type_node = self.create_enum_type_node(source, field.type_name)
            case FieldKind.MESSAGE:
                type_node = self.create_message_type_node(source, field.type_name)
            case FieldKind.MAP:
                key_type, value_type = self.maps.create(source, field, descriptor)
                type_node = TypeLiteral((IndexSignature("key", key_type, value_type),))
            case _:
                raise UnsupportedFieldKind(descriptor or field, field.kind)

        if field.repeat:
            type_node = ArrayType(type_node)

        return type_node

    def create_scalar_type_node(
        self, scalar: ScalarType | None, long_type: LongType | None = None
    ) -> TypeNode:
        """Scalar type, with 64-bit integers following `long_type` or the default."""
        if scalar is None:
            raise ValueError("Scalar field without a scalar type")
        return scalar_type_node(scalar, long_type or self.options.normal_long_type)

    def create_enum_type_node(self, source: TypescriptFile, type_name: str | None) -> TypeNode:
        if type_name is None:
            raise ValueError("Enum field without a type name")
        return TypeReference(self.imports.type_by_name(source, type_name, "enum"))

    def create_message_type_node(self, source: TypescriptFile, type_name: str | None) -> TypeNode:
        if type_name is None:
            raise ValueError("Message field without a type name")
        return TypeReference(self.imports.type_by_name(source, type_name, "message"))
