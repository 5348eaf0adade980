"""ctorgen code generator."""

from .driver import generate as generate
from .driver import render as render
from .errors import *
from .loader import ValidationError as ValidationError
from .loader import load as load
from .loader import load_file as load_file
from .message_class import MessageClassGenerator as MessageClassGenerator
from .options import GeneratorOptions as GeneratorOptions
from .types import *
