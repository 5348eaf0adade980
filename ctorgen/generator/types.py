"""Descriptor types for schema input and code generation."""

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum, auto
from typing import Any

from dataclasses_json import DataClassJsonMixin


class ScalarType(IntEnum):
    """Protobuf scalar value types, numbered as in descriptor.proto."""

    DOUBLE = 1
    FLOAT = 2
    INT64 = 3
    UINT64 = 4
    INT32 = 5
    FIXED64 = 6
    FIXED32 = 7
    BOOL = 8
    STRING = 9
    BYTES = 12
    UINT32 = 13
    SFIXED32 = 15
    SFIXED64 = 16
    SINT32 = 17
    SINT64 = 18


class LongType(StrEnum):
    """How 64-bit integer values are represented in TypeScript."""

    STRING = auto()  # decimal string
    NUMBER = auto()  # native number, loses precision above 2^53
    BIGINT = auto()  # arbitrary precision


class FieldKind(StrEnum):
    """Closed set of field kinds understood by the generator."""

    SCALAR = auto()
    ENUM = auto()
    MESSAGE = auto()
    MAP = auto()


LONG_SCALARS = frozenset(
    [
        ScalarType.INT64,
        ScalarType.UINT64,
        ScalarType.FIXED64,
        ScalarType.SFIXED64,
        ScalarType.SINT64,
    ]
)

INTEGER_SCALARS = LONG_SCALARS | frozenset(
    [
        ScalarType.INT32,
        ScalarType.UINT32,
        ScalarType.FIXED32,
        ScalarType.SFIXED32,
        ScalarType.SINT32,
    ]
)

MAP_KEY_SCALARS = INTEGER_SCALARS | frozenset([ScalarType.BOOL, ScalarType.STRING])

SCALAR_NAMES: dict[str, ScalarType] = {t.name.lower(): t for t in ScalarType}

JSTYPES: dict[str, LongType | None] = {
    "normal": None,
    "string": LongType.STRING,
    "number": LongType.NUMBER,
}


@dataclass
class ProtoComment(DataClassJsonMixin):
    """Comments attached to a schema element."""

    leading: str | None = None
    trailing: str | None = None


@dataclass
class ProtoMapValue(DataClassJsonMixin):
    """Value side of a map field."""

    type: str
    type_name: str | None = None
    jstype: str | None = None


@dataclass
class ProtoField(DataClassJsonMixin):
    """Represents a single field of a message.

    `type` is a scalar name (``int32``, ``string``...), ``enum``, ``message``
    or ``map``. Enum and message fields name their target in `type_name`
    using the fully qualified schema name (``pkg.Outer.Inner``).
    """

    name: str
    number: int
    type: str
    type_name: str | None = None
    repeated: bool = False
    optional: bool = False
    oneof: str | None = None
    jstype: str | None = None
    map_key: str | None = None
    map_value: ProtoMapValue | None = None
    comment: ProtoComment | None = None

    @property
    def is_map(self) -> bool:
        return self.type == "map"


@dataclass
class ProtoOneof(DataClassJsonMixin):
    """Represents a oneof group declared in a message."""

    name: str
    comment: ProtoComment | None = None


@dataclass
class ProtoEnumValue(DataClassJsonMixin):
    """Represents a single enum value."""

    name: str
    number: int
    comment: ProtoComment | None = None


@dataclass
class ProtoEnum(DataClassJsonMixin):
    """Represents an enum type definition."""

    name: str
    values: list[ProtoEnumValue] = field(default_factory=list)
    comment: ProtoComment | None = None
    type_name: str = ""
    local_name: str = ""


@dataclass
class ProtoMessage(DataClassJsonMixin):
    """Represents a message type definition.

    `type_name` and `local_name` are filled in by the loader once the
    message's position in the file is known.
    """

    name: str
    fields: list[ProtoField] = field(default_factory=list)
    oneofs: list[ProtoOneof] = field(default_factory=list)
    nested_messages: list["ProtoMessage"] = field(default_factory=list)
    nested_enums: list[ProtoEnum] = field(default_factory=list)
    comment: ProtoComment | None = None
    type_name: str = ""
    local_name: str = ""

    def find_field(self, number: int) -> ProtoField | None:
        """Return the field with the given number, if any."""
        return next((f for f in self.fields if f.number == number), None)

    def find_oneof(self, name: str) -> ProtoOneof | None:
        return next((o for o in self.oneofs if o.name == name), None)

    def oneof_fields(self, oneof: ProtoOneof) -> list[ProtoField]:
        """Return the members of a oneof in declaration order."""
        return [f for f in self.fields if f.oneof == oneof.name]


@dataclass
class ProtoFile(DataClassJsonMixin):
    """Represents one schema file and everything declared in it."""

    name: str
    package: str = ""
    enums: list[ProtoEnum] = field(default_factory=list)
    messages: list[ProtoMessage] = field(default_factory=list)
    comment: ProtoComment | None = None

    def all_messages(self) -> list[ProtoMessage]:
        """Return every message in the file, parents before nested children."""
        result: list[ProtoMessage] = []

        def _walk(messages: list[ProtoMessage]) -> None:
            for message in messages:
                result.append(message)
                _walk(message.nested_messages)

        _walk(self.messages)
        return result

    def all_enums(self) -> list[ProtoEnum]:
        """Return top level and nested enums."""
        result = list(self.enums)
        for message in self.all_messages():
            result.extend(message.nested_enums)
        return result


@dataclass
class DescriptorSet(DataClassJsonMixin):
    """A complete set of schema files."""

    files: list[ProtoFile] = field(default_factory=list)


def scalar_type(name: str) -> ScalarType | None:
    """Look up a scalar type by its schema name."""
    return SCALAR_NAMES.get(name)


def describe(value: Any) -> str:
    """Short human readable label for a descriptor, used in error messages."""
    if isinstance(value, ProtoField):
        return f"field {value.name} = {value.number}"
    if isinstance(value, ProtoOneof):
        return f"oneof {value.name}"
    if isinstance(value, ProtoMessage | ProtoEnum):
        return value.type_name or value.name
    if hasattr(value, "no") and hasattr(value, "local_name"):
        return f"field {value.name} = {value.no}"
    return repr(value)
