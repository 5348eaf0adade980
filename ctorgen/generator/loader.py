"""Load descriptor sets from JSON."""

import json
import logging
from pathlib import Path

from .types import (
    JSTYPES,
    MAP_KEY_SCALARS,
    DescriptorSet,
    FieldKind,
    ProtoEnum,
    ProtoField,
    ProtoFile,
    ProtoMessage,
    scalar_type,
)

_LOG = logging.getLogger(__name__)


class ValidationError(RuntimeError):
    """Raised when a descriptor document is structurally invalid."""


def _qualify(package: str, path: list[str]) -> str:
    return ".".join([package, *path] if package else path)


def _link_file(proto_file: ProtoFile) -> None:
    """Fill in type names and local names for everything in a file."""

    def _link_enum(enum: ProtoEnum, path: list[str]) -> None:
        enum.type_name = _qualify(proto_file.package, path)
        enum.local_name = "_".join(path)

    def _link_messages(messages: list[ProtoMessage], parent: list[str]) -> None:
        for message in messages:
            path = [*parent, message.name]
            message.type_name = _qualify(proto_file.package, path)
            message.local_name = "_".join(path)
            for enum in message.nested_enums:
                _link_enum(enum, [*path, enum.name])
            _link_messages(message.nested_messages, path)

    for enum in proto_file.enums:
        _link_enum(enum, [enum.name])
    _link_messages(proto_file.messages, [])


def _validate_field(
    message: ProtoMessage,
    field: ProtoField,
    enum_names: set[str],
    message_names: set[str],
) -> None:
    where = f"{message.type_name}.{field.name}"

    if field.number <= 0:
        raise ValidationError(f"{where}: field number must be positive")

    if field.jstype is not None and field.jstype not in JSTYPES:
        raise ValidationError(f"{where}: unknown jstype {field.jstype!r}")

    if field.type == FieldKind.ENUM and field.type_name not in enum_names:
        raise ValidationError(f"{where}: unknown enum {field.type_name!r}")
    if field.type == FieldKind.MESSAGE and field.type_name not in message_names:
        raise ValidationError(f"{where}: unknown message {field.type_name!r}")

    if field.oneof is not None and field.optional:
        # proto3 optional: a synthetic oneof with exactly this one member
        if sum(1 for f in message.fields if f.oneof == field.oneof) != 1:
            raise ValidationError(
                f"{where}: optional field shares oneof {field.oneof!r} with other fields"
            )
    elif field.oneof is not None:
        if field.repeated:
            raise ValidationError(f"{where}: oneof members cannot be repeated")
        if message.find_oneof(field.oneof) is None:
            raise ValidationError(f"{where}: oneof {field.oneof!r} is not declared")

    if field.type != FieldKind.MAP:
        return

    if field.oneof is not None:
        raise ValidationError(f"{where}: map fields cannot be oneof members")
    if field.map_key is None or field.map_value is None:
        raise ValidationError(f"{where}: map fields need map_key and map_value")
    key = scalar_type(field.map_key)
    if key is None or key not in MAP_KEY_SCALARS:
        raise ValidationError(f"{where}: {field.map_key!r} is not a valid map key type")

    value = field.map_value
    if value.type == FieldKind.MAP:
        raise ValidationError(f"{where}: map values cannot be maps")
    if value.type == FieldKind.ENUM and value.type_name not in enum_names:
        raise ValidationError(f"{where}: unknown enum {value.type_name!r}")
    if value.type == FieldKind.MESSAGE and value.type_name not in message_names:
        raise ValidationError(f"{where}: unknown message {value.type_name!r}")
    if value.jstype is not None and value.jstype not in JSTYPES:
        raise ValidationError(f"{where}: unknown jstype {value.jstype!r}")


def validate(descriptors: DescriptorSet) -> None:
    """Validate a linked descriptor set."""
    file_names: set[str] = set()
    enum_names: set[str] = set()
    message_names: set[str] = set()

    for proto_file in descriptors.files:
        if proto_file.name in file_names:
            raise ValidationError(f"Duplicate file {proto_file.name}")
        file_names.add(proto_file.name)

        for enum in proto_file.all_enums():
            if enum.type_name in enum_names | message_names:
                raise ValidationError(f"Duplicate type {enum.type_name}")
            enum_names.add(enum.type_name)
        for message in proto_file.all_messages():
            if message.type_name in enum_names | message_names:
                raise ValidationError(f"Duplicate type {message.type_name}")
            message_names.add(message.type_name)

    for proto_file in descriptors.files:
        for message in proto_file.all_messages():
            numbers: set[int] = set()
            for field in message.fields:
                if field.number in numbers:
                    raise ValidationError(
                        f"{message.type_name}: field number {field.number} used twice"
                    )
                numbers.add(field.number)
                _validate_field(message, field, enum_names, message_names)


def load(text: str) -> DescriptorSet:
    """Parse a JSON descriptor set."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError("Descriptor set must be a JSON object")

    try:
        descriptors = DescriptorSet.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Malformed descriptor set: {e}") from e

    for proto_file in descriptors.files:
        _link_file(proto_file)
        _LOG.debug(
            "Loaded %s: %d messages, %d enums",
            proto_file.name,
            len(proto_file.all_messages()),
            len(proto_file.all_enums()),
        )

    validate(descriptors)
    return descriptors


def load_file(path: str | Path) -> DescriptorSet:
    with open(path, encoding="utf-8") as f:
        return load(f.read())
