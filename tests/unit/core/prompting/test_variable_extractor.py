from frame_promptly.core.application.prompting import (
    detect_variables,
    extract_variables,
    merge_detected_variables,
    render_preview,
)
from frame_promptly.core.application.prompting.variable_extractor import humanize_variable_name
from frame_promptly.core.domain.prompt import PromptingMethod, PromptTemplate, PromptVariable, VariableType


def test_extract_variables_dedups_in_first_seen_order():
    assert extract_variables("Hello {name}, your {name} is {id}") == ["name", "id"]


def test_extract_variables_trims_whitespace_inside_braces():
    assert extract_variables("A { spaced } and {spaced}") == ["spaced"]


def test_extract_variables_empty_text():
    assert extract_variables("") == []
    assert extract_variables("no placeholders here") == []


def test_extract_variables_ignores_empty_braces():
    assert extract_variables("{} and {  } and {real}") == ["real"]


def test_humanize_variable_name():
    assert humanize_variable_name("userGroup") == "User Group"
    assert humanize_variable_name("task") == "Task"
    assert humanize_variable_name("") == ""


def test_detect_variables_marks_required_text():
    variables = detect_variables("Interview {userGroup} about {topic}")

    assert [v.id for v in variables] == ["userGroup", "topic"]
    first = variables[0]
    assert first.name == "User Group"
    assert first.type == VariableType.TEXT
    assert first.required is True
    assert first.description == "Variable: userGroup"


def test_detect_variables_skips_non_identifiers():
    variables = detect_variables("Keep {valid_name} but not {two words} or {1st}")
    assert [v.id for v in variables] == ["valid_name"]


def test_merge_detected_variables_keeps_declared_ones():
    template = PromptTemplate(
        id="t",
        name="T",
        template_body="{projectType} for {audience}",
        method=PromptingMethod.ZERO_SHOT,
        variables=(PromptVariable(id="projectType", name="Project", required=False),),
    )

    merged = merge_detected_variables(template)

    assert [v.id for v in merged.variables] == ["projectType", "audience"]
    assert merged.variables[0].required is False
    assert merged.variables[1].required is True


def test_merge_detected_variables_returns_same_template_when_nothing_new():
    template = PromptTemplate(id="t", name="T", template_body="plain", method=PromptingMethod.ZERO_SHOT)
    assert merge_detected_variables(template) is template


def test_render_preview_leaves_unknown_tokens():
    preview = render_preview("Hi {name}, welcome to { place }. {unknown}", {"name": "Ana", "place": "Lima"})
    assert preview == "Hi Ana, welcome to Lima. {unknown}"


def test_render_preview_does_not_expand_backrefs_in_values():
    assert render_preview("{a}", {"a": r"\1 {b}"}) == r"\1 {b}"
