"""Derive per-field metadata from message descriptors."""

import logging
from dataclasses import dataclass

from .errors import FieldMetaNotFound
from .types import (
    JSTYPES,
    DescriptorSet,
    FieldKind,
    LongType,
    ProtoField,
    ProtoMessage,
    ScalarType,
    scalar_type,
)
from .util import local_field_name

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapValueMeta:
    """Value side of a map field. `kind` is never ``map``."""

    kind: str
    scalar_type: ScalarType | None = None
    long_type: LongType | None = None
    type_name: str | None = None


@dataclass(frozen=True)
class FieldMeta:
    """Resolved metadata for one field.

    `long_type` is the field's own 64-bit representation override, or None to
    use the configured default. `oneof` is the local name of the oneof group
    the field belongs to.
    """

    no: int
    name: str
    local_name: str
    kind: str
    scalar_type: ScalarType | None = None
    long_type: LongType | None = None
    type_name: str | None = None
    map_key: ScalarType | None = None
    map_value: MapValueMeta | None = None
    repeat: bool = False
    opt: bool = False
    oneof: str | None = None


@dataclass(frozen=True)
class MessageType:
    """Field metadata for a message, in declaration order."""

    type_name: str
    fields: tuple[FieldMeta, ...]

    def find(self, number: int) -> FieldMeta:
        for field in self.fields:
            if field.no == number:
                return field
        raise FieldMetaNotFound(self.type_name, number)


def _kind_of(type_str: str) -> str:
    if scalar_type(type_str) is not None:
        return FieldKind.SCALAR
    if type_str in (FieldKind.ENUM, FieldKind.MESSAGE, FieldKind.MAP):
        return FieldKind(type_str)
    # Left as-is; the type resolver rejects it.
    return type_str


def _long_type(jstype: str | None) -> LongType | None:
    return JSTYPES.get(jstype or "normal")


def is_synthetic_oneof_member(field: ProtoField) -> bool:
    """proto3 ``optional`` fields live in a single-member synthetic oneof."""
    return field.optional and field.oneof is not None


def field_meta(field: ProtoField) -> FieldMeta:
    """Build metadata for a single field descriptor."""
    kind = _kind_of(field.type)
    oneof = None
    if field.oneof is not None and not is_synthetic_oneof_member(field):
        oneof = local_field_name(field.oneof)

    map_key = None
    map_value = None
    if kind == FieldKind.MAP and field.map_value is not None:
        map_key = scalar_type(field.map_key or "")
        map_value = MapValueMeta(
            kind=_kind_of(field.map_value.type),
            scalar_type=scalar_type(field.map_value.type),
            long_type=_long_type(field.map_value.jstype),
            type_name=field.map_value.type_name,
        )

    return FieldMeta(
        no=field.number,
        name=field.name,
        local_name=local_field_name(field.name),
        kind=kind,
        scalar_type=scalar_type(field.type),
        long_type=_long_type(field.jstype),
        type_name=field.type_name,
        map_key=map_key,
        map_value=map_value,
        repeat=field.repeated and kind != FieldKind.MAP,
        opt=field.optional and oneof is None,
        oneof=oneof,
    )


class Interpreter:
    """Provides `MessageType` metadata for messages of a descriptor set.

    Results are cached by type name. Cached values are immutable, so
    concurrent callers at worst compute the same value twice.
    """

    def __init__(self, descriptors: DescriptorSet | None = None):
        self._messages: dict[str, ProtoMessage] = {}
        self._cache: dict[str, MessageType] = {}
        if descriptors is not None:
            for proto_file in descriptors.files:
                for message in proto_file.all_messages():
                    self._messages[message.type_name] = message

    def get_message_type(self, message: ProtoMessage | str) -> MessageType:
        """Return field metadata for a message descriptor or type name."""
        if isinstance(message, str):
            type_name = message
            descriptor = self._messages.get(type_name)
            if descriptor is None:
                raise KeyError(f"Unknown message type {type_name}")
        else:
            type_name = message.type_name
            descriptor = message

        cached = self._cache.get(type_name)
        if cached is not None:
            return cached

        _LOG.debug("Interpreting message %s", type_name)
        message_type = MessageType(
            type_name=type_name,
            fields=tuple(field_meta(f) for f in descriptor.fields),
        )
        self._cache[type_name] = message_type
        return message_type
