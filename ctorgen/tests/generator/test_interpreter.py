"""Tests for field metadata."""

from pytest import raises

from ctorgen.generator.errors import FieldMetaNotFound
from ctorgen.generator.interpreter import Interpreter, field_meta
from ctorgen.generator.types import (
    FieldKind,
    LongType,
    ProtoField,
    ProtoMapValue,
    ScalarType,
)
from ctorgen.generator.util import local_field_name, to_camel_case


def describe_local_names():
    def converts_snake_case(expect):
        expect(to_camel_case("anchor_point")) == "anchorPoint"
        expect(to_camel_case("field_1_name")) == "field1Name"
        expect(to_camel_case("Already")) == "already"
        expect(to_camel_case("outer_inner", upper=True)) == "OuterInner"
        expect(to_camel_case("__proto__")) == "Proto"

    def escapes_reserved_property_names(expect):
        expect(local_field_name("constructor")) == "constructor$"
        expect(local_field_name("to_string")) == "toString$"

    def escapes_reserved_words(expect):
        for word in ("default", "new", "class", "in", "delete", "yield"):
            expect(local_field_name(word)) == word + "$"
        expect(local_field_name("default_value")) == "defaultValue"


def describe_field_meta():
    def resolves_scalars(expect):
        meta = field_meta(ProtoField(name="max_size", number=3, type="uint32"))
        expect(meta.no) == 3
        expect(meta.local_name) == "maxSize"
        expect(meta.kind) == FieldKind.SCALAR
        expect(meta.scalar_type) == ScalarType.UINT32
        expect(meta.long_type) == None

    def maps_jstype_to_long_type(expect):
        for jstype, expected in (
            ("normal", None),
            ("string", LongType.STRING),
            ("number", LongType.NUMBER),
        ):
            meta = field_meta(ProtoField(name="id", number=1, type="int64", jstype=jstype))
            expect(meta.long_type) == expected

    def keeps_references(expect):
        meta = field_meta(
            ProtoField(name="color", number=1, type="enum", type_name="geo.Color", repeated=True)
        )
        expect(meta.kind) == FieldKind.ENUM
        expect(meta.type_name) == "geo.Color"
        expect(meta.repeat) == True

    def uses_local_names_for_oneofs(expect):
        meta = field_meta(ProtoField(name="a", number=1, type="string", oneof="my_choice"))
        expect(meta.oneof) == "myChoice"
        expect(meta.opt) == False

    def treats_proto3_optional_as_presence(expect):
        meta = field_meta(
            ProtoField(name="title", number=1, type="string", optional=True, oneof="_title")
        )
        expect(meta.oneof) == None
        expect(meta.opt) == True

    def covers_maps(expect):
        meta = field_meta(
            ProtoField(
                name="counts",
                number=1,
                type="map",
                map_key="int64",
                map_value=ProtoMapValue(type="uint64", jstype="number"),
            )
        )
        expect(meta.kind) == FieldKind.MAP
        expect(meta.repeat) == False
        expect(meta.map_key) == ScalarType.INT64
        expect(meta.map_value.kind) == FieldKind.SCALAR
        expect(meta.map_value.scalar_type) == ScalarType.UINT64
        expect(meta.map_value.long_type) == LongType.NUMBER

    def keeps_unknown_kinds(expect):
        meta = field_meta(ProtoField(name="legacy", number=1, type="group"))
        expect(meta.kind) == "group"


def describe_interpreter():
    def preserves_declaration_order(expect, shapes):
        interpreter = Interpreter(shapes)
        message_type = interpreter.get_message_type("geo.Shape")
        expect([f.local_name for f in message_type.fields]) == ["width", "area", "label", "anchor"]

    def caches_message_types(expect, shapes):
        interpreter = Interpreter(shapes)
        first = interpreter.get_message_type("geo.Canvas")
        message = shapes.files[1].messages[1]
        expect(interpreter.get_message_type(message) is first) == True

    def rejects_unknown_type_names(expect, shapes):
        with raises(KeyError):
            Interpreter(shapes).get_message_type("geo.Missing")

    def raises_for_unknown_field_numbers(expect, shapes):
        message_type = Interpreter(shapes).get_message_type("geo.Shape")
        expect(message_type.find(2).local_name) == "area"
        with raises(FieldMetaNotFound):
            message_type.find(99)
