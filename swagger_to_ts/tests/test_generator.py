"""
End-to-end tests for the pipeline generator: seeding, ordering, naming
and error propagation.
"""

from __future__ import annotations

import pytest

from swagger_to_ts import __version__
from swagger_to_ts.pipeline import (
    CodeGeneratorConfig,
    NameCollisionError,
    PipelineGenerator,
    UnresolvedReferenceError,
)
from swagger_to_ts.pipeline.config import FormatterConfig
from swagger_to_ts.pipeline.formatters import Formatter


def _config(**kwargs):
    config = CodeGeneratorConfig(**kwargs)
    config.formatter.enabled = False
    return config


def _generate_lines(definitions, **kwargs):
    return PipelineGenerator({"definitions": definitions}, _config(**kwargs)).generate_lines()


def _declared(definitions, **kwargs):
    prefix = "export interface "
    return [line[len(prefix) :].split(" ")[0] for line in _generate_lines(definitions, **kwargs) if line.startswith(prefix)]


def _object(**properties):
    return {"type": "object", "properties": properties}


STRING = {"type": "string"}


class TestOrdering:
    def test_top_level_definitions_drain_in_reverse_sorted_order(self):
        definitions = {"B": _object(b=STRING), "C": _object(c=STRING), "A": _object(a=STRING)}
        assert _declared(definitions) == ["C", "B", "A"]

    def test_nested_shapes_drain_before_remaining_definitions(self):
        definitions = {
            "Alpha": _object(a=STRING),
            "Beta": _object(x=_object(y=STRING)),
        }
        assert _declared(definitions) == ["Beta", "BetaX", "Alpha"]

    def test_sort_ignores_case_of_sanitized_names(self):
        definitions = {"apple": _object(), "Banana": _object(), "a.Cherry": _object()}
        assert _declared(definitions) == ["Banana", "apple", "aCherry"]

    def test_lowercase_sorts_before_uppercase_on_a_tie(self):
        definitions = {"Pet": _object(), "pet": _object()}
        assert _declared(definitions) == ["Pet", "pet"]


class TestSeeding:
    def test_only_object_definitions_are_declared(self):
        definitions = {
            "Pet": _object(name=STRING),
            "Name": STRING,
            "Tags": {"type": "array", "items": STRING},
            "Loose": {"properties": {"a": STRING}},
        }
        assert _declared(definitions) == ["Pet"]

    def test_empty_document(self):
        assert PipelineGenerator({}, _config()).generate_lines() == ["declare namespace OpenAPI2 {", "}"]

    def test_field_sets_match_input(self):
        definitions = {
            "Pet": {
                "type": "object",
                "required": ["id"],
                "properties": {"id": {"type": "integer"}, "name": STRING, "weight": {"type": "number"}},
            }
        }
        assert _generate_lines(definitions) == [
            "declare namespace OpenAPI2 {",
            "export interface Pet {",
            "id: number;",
            "name?: string;",
            "weight?: number;",
            "}",
            "}",
        ]

    def test_primitive_shape_under_nested_name_is_skipped(self):
        definitions = {"Pet": _object(code={"type": "string", "properties": {}})}
        assert _generate_lines(definitions) == [
            "declare namespace OpenAPI2 {",
            "export interface Pet {",
            "code?: PetCode;",
            "}",
            "}",
        ]


class TestContainer:
    def test_custom_wrapper(self):
        lines = _generate_lines({}, wrapper="declare module 'petstore'")
        assert lines[0] == "declare module 'petstore' {"

    def test_empty_wrapper_falls_back_to_default(self):
        assert _generate_lines({}, wrapper="")[0] == "declare namespace OpenAPI2 {"

    def test_generation_comment(self):
        lines = _generate_lines({}, add_generation_comment=True)
        assert lines[0] == f"// Generated by swagger_to_ts v{__version__} : swagger-to-ts"
        assert lines[1] == "declare namespace OpenAPI2 {"

    def test_generate_ends_with_newline(self):
        code = PipelineGenerator({"definitions": {"Pet": _object()}}, _config()).generate()
        assert code == "declare namespace OpenAPI2 {\nexport interface Pet {\n}\n}\n"


class TestNameCollisions:
    def test_dot_stripping_collision_fails(self):
        definitions = {"pet.Owner": _object(a=STRING), "petOwner": _object(b=STRING)}
        with pytest.raises(NameCollisionError) as exc_info:
            _generate_lines(definitions)
        assert exc_info.value.identifier == "petOwner"
        assert exc_info.value.sources == ["pet.Owner", "petOwner"]

    def test_dot_stripping_collision_allowed_keeps_last(self):
        definitions = {"pet.Owner": _object(a=STRING), "petOwner": _object(b=STRING)}
        lines = _generate_lines(definitions, allow_name_collisions=True)
        assert "b?: string;" in lines
        assert "a?: string;" not in lines

    def test_nested_name_colliding_with_declared_definition(self):
        definitions = {"Pet": _object(owner=_object(a=STRING)), "PetOwner": _object(b=STRING)}
        with pytest.raises(NameCollisionError):
            _generate_lines(definitions)

    def test_nested_name_shadowing_undeclared_definition(self):
        definitions = {"Pet": _object(owner=_object(a=STRING)), "PetOwner": {"type": "array", "items": STRING}}
        with pytest.raises(NameCollisionError):
            _generate_lines(definitions)

    def test_nested_name_collision_allowed_emits_both(self):
        definitions = {"Pet": _object(owner=_object(a=STRING)), "PetOwner": _object(b=STRING)}
        assert _declared(definitions, allow_name_collisions=True) == ["PetOwner", "Pet", "PetOwner"]

    def test_camel_case_collision(self):
        definitions = {"foo_bar": _object(), "fooBar": _object()}
        assert _declared(definitions) == ["fooBar", "foo_bar"]
        with pytest.raises(NameCollisionError):
            _generate_lines(definitions, camelcase=True)


class TestErrors:
    def test_unresolved_reference_aborts_pass(self):
        definitions = {"Pet": _object(owner={"$ref": "#/definitions/Owner"})}
        generator = PipelineGenerator({"definitions": definitions}, _config())
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            generator.generate()
        assert exc_info.value.identifier == "Owner"


class RecordingFormatter(Formatter):
    def __init__(self):
        self.calls = []

    def format(self, code: str, config: FormatterConfig) -> str:
        self.calls.append((code, config))
        return "formatted\n"

    def is_available(self, config: FormatterConfig) -> bool:
        return True


class TestFormatting:
    def test_full_text_is_handed_to_formatter(self):
        formatter = RecordingFormatter()
        generator = PipelineGenerator({"definitions": {"Pet": _object(name=STRING)}}, CodeGeneratorConfig(), formatter)
        assert generator.generate() == "formatted\n"
        (code, config), = formatter.calls
        assert code == "declare namespace OpenAPI2 {\nexport interface Pet {\nname?: string;\n}\n}\n"
        assert config.parser == "typescript"
        assert config.single_quote is True

    def test_formatter_skipped_when_disabled(self):
        formatter = RecordingFormatter()
        PipelineGenerator({"definitions": {}}, _config(), formatter).generate()
        assert formatter.calls == []
