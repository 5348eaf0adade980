"""Generate TypeScript files for a whole descriptor set."""

import logging

from .comments import CommentGenerator
from .enums import EnumGenerator
from .imports import TypeScriptImports
from .interpreter import Interpreter
from .message_class import MessageClassGenerator
from .options import GeneratorOptions
from .source import TypescriptFile
from .symbols import SymbolTable
from .types import DescriptorSet

_LOG = logging.getLogger(__name__)


def generate(
    descriptors: DescriptorSet, options: GeneratorOptions | None = None
) -> list[TypescriptFile]:
    """Generate one TypeScript file per schema file.

    Symbols for every file are registered before any declaration is built,
    so references across files resolve regardless of file order.
    """
    options = options or GeneratorOptions()
    symbols = SymbolTable()
    imports = TypeScriptImports(symbols)
    comments = CommentGenerator()
    interpreter = Interpreter(descriptors)
    enum_generator = EnumGenerator(symbols, imports, comments)
    class_generator = MessageClassGenerator(symbols, imports, comments, interpreter, options)

    sources = [TypescriptFile(proto_file) for proto_file in descriptors.files]

    for source in sources:
        for enum in source.proto_file.all_enums():
            enum_generator.register_symbols(source, enum)
        for message in source.proto_file.all_messages():
            class_generator.register_alias_symbols(source, message)
            class_generator.register_symbols(source, message)

    for source in sources:
        _LOG.debug("Generating %s", source.file_name)
        for enum in source.proto_file.all_enums():
            enum_generator.generate_enum(source, enum)
        for message in source.proto_file.all_messages():
            class_generator.generate_message_class(source, message)
            class_generator.generate_message_alias(source, message)

    return sources


def render(descriptors: DescriptorSet, options: GeneratorOptions | None = None) -> dict[str, str]:
    """Return generated sources as a dict of file name -> content."""
    return {source.file_name: source.to_source() for source in generate(descriptors, options)}
