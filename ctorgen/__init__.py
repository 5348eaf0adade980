"""ctorgen - constructor-based TypeScript classes from protobuf schemas."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ctorgen")
except PackageNotFoundError:
    __version__ = "(local)"
