"""Attach schema comments to generated declarations."""

from enum import StrEnum
from typing import Any

from .types import ProtoEnum, ProtoEnumValue, ProtoField, ProtoMessage, ProtoOneof


class CommentPlacement(StrEnum):
    """Where schema comments end up relative to a declaration."""

    APPEND_TO_LEADING_BLOCK = "appendToLeadingBlock"
    TRAILING_LINES = "trailingLines"


def _lines(text: str | None) -> list[str]:
    """Split a schema comment into lines, dropping the one leading space of ``// x``."""
    if not text:
        return []
    return [
        (line[1:] if line.startswith(" ") else line).rstrip()
        for line in text.strip("\n").splitlines()
    ]


def field_declaration(field: ProtoField) -> str:
    """Schema-like declaration of a field, e.g. ``repeated int32 ids = 3``."""
    if field.is_map and field.map_value is not None:
        value = field.map_value.type_name or field.map_value.type
        type_str = f"map<{field.map_key}, {value}>"
    else:
        type_str = field.type_name or field.type

    label = ""
    if field.repeated:
        label = "repeated "
    elif field.optional:
        label = "optional "
    return f"{label}{type_str} {field.name} = {field.number}"


def generated_from(descriptor: Any) -> str:
    if isinstance(descriptor, ProtoMessage):
        return f"@generated from protobuf message {descriptor.type_name}"
    if isinstance(descriptor, ProtoEnum):
        return f"@generated from protobuf enum {descriptor.type_name}"
    if isinstance(descriptor, ProtoOneof):
        return f"@generated from protobuf oneof: {descriptor.name}"
    if isinstance(descriptor, ProtoField):
        return f"@generated from protobuf field: {field_declaration(descriptor)}"
    if isinstance(descriptor, ProtoEnumValue):
        return f"@generated from protobuf enum value: {descriptor.name} = {descriptor.number}"
    raise TypeError(f"Cannot describe {descriptor!r}")


class CommentGenerator:
    """Copies leading/trailing schema comments onto declaration nodes.

    Every node also gets an ``@generated from ...`` line naming the schema
    element it came from.
    """

    def add_comments_for_descriptor(
        self, node: Any, descriptor: Any, placement: CommentPlacement | str
    ) -> None:
        comment = getattr(descriptor, "comment", None)
        leading = _lines(comment.leading) if comment else []
        trailing = _lines(comment.trailing) if comment else []
        tag = generated_from(descriptor)

        node.comments.leading.extend(leading)

        if CommentPlacement(placement) == CommentPlacement.TRAILING_LINES:
            node.comments.trailing.extend(trailing)
            node.comments.trailing.append(tag)
            return

        block = node.comments.leading
        if trailing:
            if block:
                block.append("")
            block.extend(trailing)
        if block:
            block.append("")
        block.append(tag)
