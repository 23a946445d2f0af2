import pytest

from component_bundler.assembler import ENVELOPE_HEAD, ENVELOPE_TAIL, assemble


def test_assemble_keeps_order_and_wraps_once() -> None:
    fragments = ["var a = 1;", "var b = 2;", "var c = 3;"]
    output = assemble(fragments)
    assert output == "(function(){ 'use strict';\nvar a = 1;\nvar b = 2;\nvar c = 3;\n})();"
    assert output.count(ENVELOPE_HEAD) == 1
    assert output.count(ENVELOPE_TAIL) == 1
    positions = [output.index(fragment) for fragment in fragments]
    assert positions == sorted(positions)


def test_assemble_empty() -> None:
    assert assemble([]) == ENVELOPE_HEAD + ENVELOPE_TAIL


def test_assemble_rejects_non_string_fragment() -> None:
    with pytest.raises(TypeError):
        assemble(["ok", 3])  # type: ignore[list-item]


def test_assemble_rejects_bare_string() -> None:
    with pytest.raises(TypeError):
        assemble("var a;")
