import json
from pathlib import Path

import pytest

from berry.io import DeclarationParser
from berry.spec import Argument, ParseError


def _raw(data) -> bytes:
    return json.dumps(data).encode("utf-8")


def test_parse_full_document():
    raw = _raw(
        {
            "extensions": [
                {
                    "namespace": "App\\Models",
                    "class": ["User", "Team"],
                    "uses": ["Carbon\\Carbon"],
                    "methods": [
                        {
                            "name": "touchLater",
                            "doc": "Refreshes later.",
                            "returns": "static",
                            "args": [
                                {"name": "at", "type": "Carbon", "defaultValue": "null"},
                                {"name": "force"},
                            ],
                        }
                    ],
                }
            ]
        }
    )

    document = DeclarationParser().parse(raw)

    [extension] = document.extensions
    assert extension.segments == ("App", "Models")
    assert extension.classes == ["User", "Team"]
    assert extension.uses == ["Carbon\\Carbon"]
    [method] = extension.methods
    assert method.name == "touchLater"
    assert method.doc == "Refreshes later."
    assert method.returns == "static"
    assert method.args == [
        Argument(name="at", type="Carbon", default_value="null"),
        Argument(name="force"),
    ]


def test_single_class_is_normalized_to_a_list():
    raw = _raw({"extensions": [{"namespace": "A", "class": "User", "methods": []}]})

    document = DeclarationParser().parse(raw)

    assert document.extensions[0].classes == ["User"]


def test_optional_fields_default_to_empty():
    raw = _raw(
        {
            "extensions": [
                {
                    "namespace": "A",
                    "class": "User",
                    "uses": None,
                    "methods": [{"name": "save", "doc": None}],
                }
            ]
        }
    )

    [extension] = DeclarationParser().parse(raw).extensions

    assert extension.uses == []
    [method] = extension.methods
    assert method.args == []
    assert method.doc is None
    assert method.returns is None


def test_malformed_json_is_a_parse_error():
    with pytest.raises(ParseError, match="malformed document"):
        DeclarationParser().parse(b'{"extensions": [', Path("pkg/decl.json"))


def test_parse_error_names_the_source_file():
    with pytest.raises(ParseError) as excinfo:
        DeclarationParser().parse(b"[]", Path("pkg/decl.json"))

    assert str(excinfo.value).startswith("pkg/decl.json: ")


@pytest.mark.parametrize(
    "data, location",
    [
        ({}, "extensions"),
        ({"extensions": {}}, "extensions"),
        ({"extensions": [{"class": "A", "methods": []}]}, "namespace"),
        ({"extensions": [{"namespace": "A", "methods": []}]}, "class"),
        ({"extensions": [{"namespace": "A", "class": "B"}]}, "methods"),
        ({"extensions": [{"namespace": "A", "class": 3, "methods": []}]}, "extensions[0]"),
        (
            {"extensions": [{"namespace": "A", "class": "B", "methods": [{}]}]},
            "extensions[0].methods[0]",
        ),
        (
            {
                "extensions": [
                    {
                        "namespace": "A",
                        "class": "B",
                        "methods": [{"name": "m", "args": [{"type": "int"}]}],
                    }
                ]
            },
            "extensions[0].methods[0].args[0]",
        ),
    ],
)
def test_structural_errors_point_at_the_location(data, location):
    with pytest.raises(ParseError) as excinfo:
        DeclarationParser().parse(_raw(data))

    assert location in str(excinfo.value)


@pytest.mark.parametrize(
    "namespace, cls",
    [
        ("/tmp_abs", "User"),
        ("App/../../..", "User"),
        ("Vendor\\a/b", "User"),
        ("App", "../../../escaped"),
        ("App", ".."),
        ("App", "."),
        ("App", "a/b"),
        ("App", "a\\b"),
        ("App", ""),
        ("App", ["User", "../Other"]),
    ],
)
def test_names_that_would_leave_the_stub_root_are_rejected(namespace, cls):
    raw = _raw({"extensions": [{"namespace": namespace, "class": cls, "methods": []}]})

    with pytest.raises(ParseError) as excinfo:
        DeclarationParser().parse(raw)

    assert "extensions[0]" in str(excinfo.value)


def test_invalid_utf8_is_a_parse_error():
    with pytest.raises(ParseError, match="UTF-8"):
        DeclarationParser().parse(b"\xff\xfe{}")


def test_yaml_declarations_are_selected_by_suffix():
    raw = b"""
extensions:
  - namespace: App.Models
    class: User
    methods:
      - name: paginate
        args:
          - name: perPage
            type: int
            defaultValue: 15
"""

    [extension] = DeclarationParser().parse(raw, Path("decl.yaml")).extensions

    assert extension.segments == ("App", "Models")
    assert extension.methods[0].args[0].default_value == "15"


def test_boolean_literals_are_kept_as_source_text():
    raw = _raw(
        {
            "extensions": [
                {
                    "namespace": "A",
                    "class": "B",
                    "methods": [{"name": "m", "args": [{"name": "x", "defaultValue": False}]}],
                }
            ]
        }
    )

    [extension] = DeclarationParser().parse(raw).extensions

    assert extension.methods[0].args[0].default_value == "false"
