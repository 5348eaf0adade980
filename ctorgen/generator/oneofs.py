"""Discriminated union types for oneof groups."""

from .errors import FieldMetaNotFound, MissingOneofGroup
from .field_types import FieldTypeResolver
from .interpreter import FieldMeta, Interpreter, MessageType
from .options import GeneratorOptions
from .source import TypescriptFile
from .types import ProtoMessage, ProtoOneof
from .typescript import (
    UNDEFINED,
    LiteralType,
    PropertySignature,
    TypeLiteral,
    TypeNode,
    UnionType,
)


class OneofAdtSynthesizer:
    """Collapses a oneof group into a tagged union.

    For a oneof ``result`` with members ``value`` and ``error`` this produces::

        { oneofKind: "value"; value: number; }
        | { oneofKind: "error"; error: string; }
        | { oneofKind: undefined; }

    The last variant stands for "nothing selected" and is always present.
    """

    def __init__(
        self,
        interpreter: Interpreter,
        resolver: FieldTypeResolver,
        options: GeneratorOptions,
    ):
        self.interpreter = interpreter
        self.resolver = resolver
        self.options = options

    def oneof_info(
        self, message: ProtoMessage, oneof: ProtoOneof
    ) -> tuple[ProtoMessage, MessageType, str]:
        """Return the parent message, its metadata and the oneof's local name."""
        message_type = self.interpreter.get_message_type(message)
        members = message.oneof_fields(oneof)
        if not members:
            raise MissingOneofGroup(oneof)
        sample = message_type.find(members[0].number)
        if sample.oneof is None:
            raise MissingOneofGroup(oneof)
        return message, message_type, sample.oneof

    def member_fields(self, message: ProtoMessage, oneof: ProtoOneof) -> list[FieldMeta]:
        """Field metadata of the oneof's members, in declaration order."""
        _, message_type, local_name = self.oneof_info(message, oneof)
        return [f for f in message_type.fields if f.oneof == local_name]

    def create_type_node(
        self, source: TypescriptFile, message: ProtoMessage, oneof: ProtoOneof
    ) -> TypeNode:
        discriminator = self.options.oneof_kind_discriminator
        cases: list[TypeNode] = []

        for field in self.member_fields(message, oneof):
            descriptor = message.find_field(field.no)
            if descriptor is None:
                raise FieldMetaNotFound(message, field.no)

            member_name = field.local_name
            if member_name == discriminator:
                member_name += "$"

            kind = PropertySignature(discriminator, LiteralType(member_name))
            value = PropertySignature(
                member_name,
                self.resolver.create_type_node(source, field, descriptor),
                optional=field.opt,
            )
            cases.append(TypeLiteral((kind, value)))

        cases.append(TypeLiteral((PropertySignature(discriminator, UNDEFINED),)))
        return UnionType(tuple(cases))
