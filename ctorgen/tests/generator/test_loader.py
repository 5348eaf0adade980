"""Tests for descriptor loading."""

import json

from pytest import raises

from ctorgen.generator.loader import ValidationError, load


def document(fields, oneofs=(), enums=()):
    return json.dumps(
        {
            "files": [
                {
                    "name": "test.proto",
                    "package": "test",
                    "enums": list(enums),
                    "messages": [
                        {"name": "Target", "fields": []},
                        {"name": "Holder", "fields": fields, "oneofs": list(oneofs)},
                    ],
                }
            ]
        }
    )


def describe_load():
    def loads_files(expect, shapes):
        expect([f.name for f in shapes.files]) == ["geo/point.proto", "geo/shapes.proto"]
        expect(shapes.files[0].enums[0].values[1].name) == "COLOR_RED"

    def assigns_type_and_local_names(expect, shapes):
        canvas = shapes.files[1].messages[1]
        layer = canvas.nested_messages[0]
        expect(canvas.type_name) == "geo.Canvas"
        expect(layer.type_name) == "geo.Canvas.Layer"
        expect(layer.local_name) == "Canvas_Layer"
        expect(shapes.files[0].enums[0].type_name) == "geo.Color"

    def decodes_nested_descriptors(expect, shapes):
        canvas = shapes.files[1].messages[1]
        counts = canvas.find_field(3)
        expect(counts.map_key) == "int64"
        expect(counts.map_value.type) == "uint64"
        expect(shapes.files[1].comment.leading) == "Shapes that can be drawn on a canvas."

    def handles_files_without_package(expect):
        descriptors = load(json.dumps({"files": [{"name": "a.proto", "messages": [{"name": "A"}]}]}))
        expect(descriptors.files[0].messages[0].type_name) == "A"

    def passes_unknown_field_types_through(expect):
        descriptors = load(document([{"name": "legacy", "number": 1, "type": "group"}]))
        expect(descriptors.files[0].messages[1].fields[0].type) == "group"


def describe_validation():
    def rejects_invalid_json(expect):
        with raises(ValidationError):
            load("{not json")

    def rejects_non_objects(expect):
        with raises(ValidationError):
            load("[]")

    def rejects_missing_required_keys(expect):
        with raises(ValidationError):
            load(json.dumps({"files": [{"messages": []}]}))

    def rejects_unknown_references(expect):
        with raises(ValidationError) as e:
            load(document([{"name": "t", "number": 1, "type": "message", "type_name": "test.Nope"}]))
        expect("test.Nope" in str(e.value)) == True

    def rejects_enum_references_to_messages(expect):
        with raises(ValidationError):
            load(document([{"name": "t", "number": 1, "type": "enum", "type_name": "test.Target"}]))

    def rejects_duplicate_field_numbers(expect):
        fields = [
            {"name": "a", "number": 1, "type": "int32"},
            {"name": "b", "number": 1, "type": "int32"},
        ]
        with raises(ValidationError):
            load(document(fields))

    def rejects_non_positive_field_numbers(expect):
        with raises(ValidationError):
            load(document([{"name": "a", "number": 0, "type": "int32"}]))

    def rejects_undeclared_oneofs(expect):
        with raises(ValidationError):
            load(document([{"name": "a", "number": 1, "type": "int32", "oneof": "choice"}]))

    def rejects_repeated_oneof_members(expect):
        fields = [{"name": "a", "number": 1, "type": "int32", "oneof": "c", "repeated": True}]
        with raises(ValidationError):
            load(document(fields, oneofs=[{"name": "c"}]))

    def rejects_optional_fields_in_shared_oneofs(expect):
        fields = [
            {"name": "a", "number": 1, "type": "int32", "oneof": "c", "optional": True},
            {"name": "b", "number": 2, "type": "int32", "oneof": "c"},
        ]
        with raises(ValidationError) as e:
            load(document(fields, oneofs=[{"name": "c"}]))
        expect("shares oneof" in str(e.value)) == True

    def accepts_proto3_optional_fields(expect):
        fields = [{"name": "a", "number": 1, "type": "int32", "oneof": "_a", "optional": True}]
        descriptors = load(document(fields, oneofs=[{"name": "_a"}]))
        expect(descriptors.files[0].messages[1].fields[0].optional) == True

    def rejects_invalid_map_keys(expect):
        for key in ("double", "bytes", "enum", None):
            field = {"name": "m", "number": 1, "type": "map", "map_value": {"type": "int32"}}
            if key is not None:
                field["map_key"] = key
            with raises(ValidationError):
                load(document([field]))

    def accepts_bool_map_keys(expect):
        field = {
            "name": "m",
            "number": 1,
            "type": "map",
            "map_key": "bool",
            "map_value": {"type": "message", "type_name": "test.Target"},
        }
        descriptors = load(document([field]))
        expect(descriptors.files[0].messages[1].fields[0].map_key) == "bool"

    def rejects_map_values_that_are_maps(expect):
        field = {
            "name": "m",
            "number": 1,
            "type": "map",
            "map_key": "string",
            "map_value": {"type": "map"},
        }
        with raises(ValidationError):
            load(document([field]))

    def rejects_unknown_jstypes(expect):
        with raises(ValidationError):
            load(document([{"name": "a", "number": 1, "type": "int64", "jstype": "bigint"}]))

    def rejects_duplicate_type_names(expect):
        text = json.dumps(
            {
                "files": [
                    {"name": "a.proto", "package": "p", "messages": [{"name": "A"}]},
                    {"name": "b.proto", "package": "p", "enums": [{"name": "A"}]},
                ]
            }
        )
        with raises(ValidationError):
            load(text)
