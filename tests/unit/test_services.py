import pytest
import sass

from component_bundler.services import (
    TextServices,
    compile_style,
    default_services,
    minify_markup,
    minify_style,
    wrap_style_module,
    wrap_template_module,
)


def test_minify_style_drops_whitespace_and_comments() -> None:
    source = "a {\n  color: red;\n}\n/* note */\n"
    output = minify_style(source)
    assert "note" not in output
    assert "\n" not in output
    assert output.startswith("a{color:red")


def test_compile_style_produces_compressed_css() -> None:
    output = compile_style("$c: red;\n.a { .b { color: $c; } }")
    assert ".a .b{color:red}" in output


def test_compile_style_errors_propagate() -> None:
    with pytest.raises(sass.CompileError):
        compile_style(".a { color: ")


def test_minify_markup_collapses_whitespace() -> None:
    output = minify_markup("<div>\n    <span>x</span>\n</div>")
    assert "\n" not in output
    assert "<span>x</span>" in output


def test_wrap_template_module_registers_template() -> None:
    output = wrap_template_module("app/a.html", '<p class="x">it\'s</p>')
    assert output.startswith('angular.module("app/a.html", [])')
    assert "$templateCache.put(" in output
    assert '"<p class=\\"x\\">it\'s<\\/p>"' in output


def test_wrap_template_module_escapes_closing_tags() -> None:
    output = wrap_template_module("a.html", "</script>")
    assert "</script>" not in output
    assert "<\\/script>" in output


def test_wrap_style_module_injects_style() -> None:
    output = wrap_style_module("a.css", "a{color:red}")
    assert output.startswith('angular.module("a.css", [])')
    assert "document.createElement('style')" in output
    assert '"a{color:red}"' in output


def test_text_services_defaults_are_module_functions() -> None:
    services = TextServices()
    assert services.minify_style is minify_style
    assert services.wrap_template_module is wrap_template_module


def test_default_services_bind_include_paths(tmp_path) -> None:
    (tmp_path / "_vars.scss").write_text("$c: blue;", encoding="utf-8")
    services = default_services([str(tmp_path)])
    assert "color:blue" in services.compile_style("@import 'vars';\n.a { color: $c; }")
