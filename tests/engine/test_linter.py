"""End-to-end lint and fix tests over parsed JavaScript."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsxwrap.config import WrapOptions
from jsxwrap.engine import fix_source, lint_file, lint_source
from jsxwrap.exceptions import ConfigError, SourceParseError
from jsxwrap.model import JSXElement

DECLARATION = "const x = <div>\n  text\n</div>;\n"
WRAPPED_DECLARATION = "const x = (\n  <div>\n    text\n  </div>\n);\n"


def test_declaration_is_reported_with_position() -> None:
    (violation,) = lint_source(DECLARATION)

    assert violation.rule_id == "jsx-wrap-multilines"
    assert (violation.line, violation.column) == (1, 10)
    assert (violation.end_line, violation.end_column) == (3, 6)
    assert isinstance(violation.node, JSXElement)


def test_wrapped_declaration_is_clean() -> None:
    assert lint_source(WRAPPED_DECLARATION) == []


def test_comment_between_paren_and_element_still_counts_as_wrapped() -> None:
    assert lint_source("const x = ( // note\n  <div>\n  </div>\n);\n") == []


def test_single_line_element_is_clean() -> None:
    assert lint_source("const x = <div>text</div>;\n") == []


def test_assignment_is_reported() -> None:
    violations = lint_source("let x;\nx = <div>\n</div>;\n")

    assert [v.line for v in violations] == [2]


def test_return_is_reported_and_can_be_disabled() -> None:
    text = "function F() {\n  return <div>\n  </div>;\n}\n"

    assert [v.line for v in lint_source(text)] == [2]
    assert lint_source(text, options={"return": False}) == []


def test_arrow_expression_body_is_reported_once() -> None:
    violations = lint_source("const f = () => <div>\n  text\n</div>;\n")

    assert len(violations) == 1
    assert violations[0].line == 1


def test_arrow_block_body_is_handled_by_return() -> None:
    text = "const f = () => {\n  return <div>\n  </div>;\n};\n"

    assert [v.line for v in lint_source(text)] == [2]
    assert lint_source(text, options={"return": False}) == []


def test_conditional_branches_checked_under_declaration() -> None:
    violations = lint_source("const x = cond ? <A\n/> : <B/>;\n")

    assert len(violations) == 1
    assert violations[0].fix is not None
    assert violations[0].fix.text == "(<A\n/>)"


def test_conditional_outside_declaration_needs_condition_context() -> None:
    text = "foo(cond ? <A\n/> : null);\n"

    assert lint_source(text) == []
    assert len(lint_source(text, options={"condition": True})) == 1


def test_logical_right_operand_needs_logical_context() -> None:
    text = "const x = cond && <div>\n</div>;\n"

    assert lint_source(text) == []
    assert len(lint_source(text, options={"logical": True})) == 1


def test_prop_value_needs_prop_context() -> None:
    text = "const x = (\n  <Foo render={<div>\n  </div>} />\n);\n"

    assert lint_source(text) == []
    (violation,) = lint_source(text, options={"prop": True})
    assert violation.line == 2


def test_fragments_are_not_reported() -> None:
    assert lint_source("const x = <>\n  <div />\n</>;\n") == []


def test_fix_source_wraps_and_is_idempotent() -> None:
    outcome = fix_source(DECLARATION)

    assert outcome.output == "const x = (<div>\n  text\n</div>);\n"
    assert outcome.applied == 1
    assert outcome.remaining == ()
    assert lint_source(outcome.output) == []
    assert fix_source(outcome.output).output == outcome.output


def test_fix_source_reaches_fixed_point_for_nested_elements() -> None:
    text = "const x = <div>\n  {cond && <span>\n  </span>}\n</div>;\n"

    outcome = fix_source(text, options={"logical": True})

    assert outcome.output == "const x = (<div>\n  {cond && (<span>\n  </span>)}\n</div>);\n"
    assert outcome.applied == 2
    assert outcome.passes == 2
    assert outcome.remaining == ()


def test_fix_preserves_non_ascii_text() -> None:
    outcome = fix_source("const héllo = <p>\n  naïve ☃\n</p>;\n")

    assert outcome.output == "const héllo = (<p>\n  naïve ☃\n</p>);\n"


def test_lint_source_accepts_wrap_options_instance() -> None:
    assert lint_source(DECLARATION, options=WrapOptions(declaration=False)) == []


def test_lint_source_rejects_unknown_option_keys() -> None:
    with pytest.raises(ConfigError, match="declarations"):
        lint_source(DECLARATION, options={"declarations": False})


def test_lint_source_raises_on_syntax_error() -> None:
    with pytest.raises(SourceParseError):
        lint_source("const x = <div>;\n")


def test_lint_file_fix_writes_back(tmp_path: Path) -> None:
    path = tmp_path / "App.jsx"
    path.write_text(DECLARATION, encoding="utf-8")

    result = lint_file(path, fix=True)

    assert result.fixed is True
    assert result.fixes_applied == 1
    assert result.violations == ()
    assert path.read_text(encoding="utf-8") == "const x = (<div>\n  text\n</div>);\n"


def test_lint_file_without_fix_leaves_file(tmp_path: Path) -> None:
    path = tmp_path / "App.jsx"
    path.write_text(DECLARATION, encoding="utf-8")

    result = lint_file(path)

    assert len(result.violations) == 1
    assert result.fixable_count == 1
    assert path.read_text(encoding="utf-8") == DECLARATION


def test_wrapped_element_inside_template_substitution_is_clean() -> None:
    text = "const s = `${items.map(i => (<li>\n</li>))}`;\n"

    outcome = fix_source(text)

    assert lint_source(text) == []
    assert outcome.output == text
    assert outcome.applied == 0


def test_fix_inside_template_substitution_wraps_once() -> None:
    outcome = fix_source("const s = `${items.map(i => <li>\n</li>)}`;\n")

    assert outcome.output == "const s = `${items.map(i => (<li>\n</li>))}`;\n"
    assert outcome.applied == 1
    assert outcome.passes == 1
    assert outcome.remaining == ()
