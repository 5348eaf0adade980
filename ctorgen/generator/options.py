"""Generator configuration."""

from dataclasses import dataclass

from .types import LongType


@dataclass(frozen=True)
class GeneratorOptions:
    """Options fixed when the generator is constructed.

    Attributes:
        oneof_kind_discriminator: Property name used as the tag in oneof unions.
        normal_long_type: Representation for 64-bit integer fields that do not
            override it with a ``jstype``.
    """

    oneof_kind_discriminator: str = "oneofKind"
    normal_long_type: LongType = LongType.STRING
