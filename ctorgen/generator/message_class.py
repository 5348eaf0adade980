"""Constructor-based classes for messages."""

import logging

from .comments import CommentGenerator, CommentPlacement
from .errors import FieldMetaNotFound, MissingOneofGroup
from .field_types import FieldTypeResolver
from .imports import TypeScriptImports
from .interpreter import Interpreter
from .oneofs import OneofAdtSynthesizer
from .options import GeneratorOptions
from .source import TypescriptFile
from .symbols import SymbolTable
from .types import ProtoMessage
from .typescript import (
    ClassDeclaration,
    Constructor,
    Parameter,
    TypeAliasDeclaration,
    TypeReference,
)

_LOG = logging.getLogger(__name__)

MESSAGE_CLASS_KIND = "message-class"
MESSAGE_CLASS_SUFFIX = "Ctor"
MESSAGE_ALIAS_KIND = "message"


class MessageClassGenerator:
    """Generates a class whose constructor parameters mirror a message.

    Every parameter is ``public readonly``. A oneof group becomes a single
    parameter holding a tagged union instead of one parameter per member.
    """

    def __init__(
        self,
        symbols: SymbolTable,
        imports: TypeScriptImports,
        comments: CommentGenerator,
        interpreter: Interpreter,
        options: GeneratorOptions,
    ):
        self.symbols = symbols
        self.imports = imports
        self.comments = comments
        self.interpreter = interpreter
        self.options = options
        self.resolver = FieldTypeResolver(imports, options)
        self.oneofs = OneofAdtSynthesizer(interpreter, self.resolver, options)

    def register_symbols(self, source: TypescriptFile, message: ProtoMessage) -> str:
        """Reserve the class name for a message."""
        class_name = message.local_name + MESSAGE_CLASS_SUFFIX
        return self.symbols.register(class_name, message, source, MESSAGE_CLASS_KIND)

    def generate_message_class(
        self, source: TypescriptFile, message: ProtoMessage
    ) -> ClassDeclaration:
        """Build the class for `message` and add it to `source`."""
        message_type = self.interpreter.get_message_type(message)
        processed_oneofs: set[str] = set()
        params: list[Parameter] = []

        for field_info in message_type.fields:
            descriptor = message.find_field(field_info.no)
            if descriptor is None:
                raise FieldMetaNotFound(message, field_info.no)

            if field_info.oneof is not None:
                if field_info.oneof in processed_oneofs:
                    continue
                oneof = message.find_oneof(descriptor.oneof or "")
                if oneof is None:
                    raise MissingOneofGroup(descriptor)
                _, _, oneof_local_name = self.oneofs.oneof_info(message, oneof)
                param = Parameter(
                    oneof_local_name,
                    self.oneofs.create_type_node(source, message, oneof),
                )
                self.comments.add_comments_for_descriptor(
                    param, oneof, CommentPlacement.APPEND_TO_LEADING_BLOCK
                )
                processed_oneofs.add(field_info.oneof)
            else:
                param = Parameter(
                    field_info.local_name,
                    self.resolver.create_type_node(source, field_info, descriptor),
                    optional=field_info.opt,
                )
                self.comments.add_comments_for_descriptor(
                    param, descriptor, CommentPlacement.TRAILING_LINES
                )
            params.append(param)

        statement = ClassDeclaration(
            name=self.imports.type(source, message, MESSAGE_CLASS_KIND),
            members=[Constructor(params)],
        )
        self.comments.add_comments_for_descriptor(
            statement, message, CommentPlacement.APPEND_TO_LEADING_BLOCK
        )
        _LOG.debug("Generated %s with %d parameters", statement.name, len(params))
        source.add_statement(statement, message.type_name)
        return statement

    def register_alias_symbols(self, source: TypescriptFile, message: ProtoMessage) -> str:
        """Reserve the plain message name, used when other fields reference it."""
        return self.symbols.register(message.local_name, message, source, MESSAGE_ALIAS_KIND)

    def generate_message_alias(
        self, source: TypescriptFile, message: ProtoMessage
    ) -> TypeAliasDeclaration:
        """Add ``export type Name = NameCtor;`` to `source`."""
        class_name = self.imports.type(source, message, MESSAGE_CLASS_KIND)
        statement = TypeAliasDeclaration(
            name=self.imports.type(source, message, MESSAGE_ALIAS_KIND),
            type=TypeReference(class_name),
        )
        source.add_statement(statement)
        return statement
