"""Key and value types for map fields."""

from typing import TYPE_CHECKING

from .errors import UnsupportedFieldKind
from .interpreter import FieldMeta
from .source import TypescriptFile
from .types import MAP_KEY_SCALARS, FieldKind, LongType, ProtoField, ScalarType
from .typescript import STRING, TypeNode

if TYPE_CHECKING:
    from .field_types import FieldTypeResolver


class MapTypeSynthesizer:
    """Builds the (key, value) types of a map field.

    Object keys in TypeScript are strings, so bool keys become ``string`` and
    64-bit integer keys always use the decimal string form, whatever the
    configured long type.
    """

    def __init__(self, resolver: "FieldTypeResolver"):
        self.resolver = resolver

    def create_key_type_node(self, key: ScalarType | None, field: FieldMeta | ProtoField) -> TypeNode:
        if key is None or key not in MAP_KEY_SCALARS:
            raise UnsupportedFieldKind(field, f"map key {key!r}")
        if key == ScalarType.BOOL:
            return STRING
        return self.resolver.create_scalar_type_node(key, LongType.STRING)

    def create(
        self,
        source: TypescriptFile,
        field: FieldMeta,
        descriptor: ProtoField | None = None,
    ) -> tuple[TypeNode, TypeNode]:
        """Return the key and value type nodes of a map field."""
        origin = descriptor or field
        value = field.map_value
        if value is None:
            raise UnsupportedFieldKind(origin, "map without value")

        key_type = self.create_key_type_node(field.map_key, origin)

        match value.kind:
            case FieldKind.SCALAR:
                value_type = self.resolver.create_scalar_type_node(value.scalar_type, value.long_type)
            case FieldKind.ENUM:
                value_type = self.resolver.create_enum_type_node(source, value.type_name)
            case FieldKind.MESSAGE:
                value_type = self.resolver.create_message_type_node(source, value.type_name)
            case _:
                raise UnsupportedFieldKind(origin, f"map value {value.kind!r}")

        return key_type, value_type
