"""
Unit tests for the generation output parser.

Run with: pytest tests/test_project_parser.py -v
"""

import pytest

from promptcraft.domain.exceptions import (
    InvalidGenerationOutputError,
    MalformedOutputError,
    UnexpectedShapeError,
)
from promptcraft.domain.services import parse_generated_project, strip_code_fence


class TestStripCodeFence:
    def test_removes_json_fence(self):
        """A ```json ... ``` wrapper is removed."""
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_removes_bare_fence(self):
        assert strip_code_fence('```\n{"a": 1}```') == '{"a": 1}'

    def test_unfenced_text_only_trimmed(self):
        assert strip_code_fence('  {"a": 1}\n') == '{"a": 1}'

    def test_inner_backticks_untouched(self):
        """Only the outer fence goes; backticks inside file content stay."""
        raw = '```json\n{"content": "use `npm start`"}\n```'
        assert strip_code_fence(raw) == '{"content": "use `npm start`"}'


class TestParseGeneratedProject:
    def test_well_formed_output(self):
        project = parse_generated_project(
            '{"summary": "Todo app", "files": ['
            '{"name": "index.html", "language": "html", "content": "<ul></ul>"}]}'
        )

        assert project.summary == "Todo app"
        assert len(project.files) == 1
        assert project.files[0].name == "index.html"
        assert project.files[0].language == "html"
        assert project.files[0].content == "<ul></ul>"

    def test_fenced_output_is_accepted(self):
        project = parse_generated_project(
            '```json\n{"summary": "x", "files": []}\n```'
        )
        assert project.summary == "x"
        assert project.files == ()

    def test_not_json_is_malformed(self):
        with pytest.raises(MalformedOutputError):
            parse_generated_project("Sure! Here is your project:")

    def test_truncated_json_is_malformed(self):
        with pytest.raises(MalformedOutputError):
            parse_generated_project('{"summary": "cut off", "files": [')

    @pytest.mark.parametrize("raw", ["[1, 2]", '"text"', "42", "null"])
    def test_non_object_is_unexpected_shape(self, raw):
        with pytest.raises(UnexpectedShapeError):
            parse_generated_project(raw)

    def test_both_rejections_share_a_base_class(self):
        """Callers can catch every rejection with one except clause."""
        for raw in ("nope", "[]"):
            with pytest.raises(InvalidGenerationOutputError):
                parse_generated_project(raw)

    def test_missing_or_non_string_summary_becomes_empty(self):
        assert parse_generated_project('{"files": []}').summary == ""
        assert parse_generated_project('{"summary": 7}').summary == ""

    def test_missing_files_gives_empty_project(self):
        """An object with no usable files is still a valid (empty) project."""
        project = parse_generated_project('{"summary": "nothing", "files": "oops"}')
        assert project.summary == "nothing"
        assert project.files == ()

    def test_invalid_file_entries_are_dropped(self):
        project = parse_generated_project(
            '{"summary": "s", "files": ['
            '{"name": "a.js", "content": "1"},'
            '{"name": "no-content.js"},'
            '{"content": "no name"},'
            '{"name": 3, "content": "numeric name"},'
            '"just a string",'
            '{"name": "b.css", "content": "p{}"}]}'
        )
        assert [f.name for f in project.files] == ["a.js", "b.css"]

    def test_language_kept_only_when_non_empty_string(self):
        project = parse_generated_project(
            '{"files": ['
            '{"name": "a", "content": "", "language": ""},'
            '{"name": "b", "content": "", "language": 5},'
            '{"name": "c", "content": "", "language": "css"}]}'
        )
        assert [f.language for f in project.files] == [None, None, "css"]
