"""Text transform services used by the built-in transform rules.

Every service is a pure ``text -> text`` function (the wrappers also take the
module identifier). Errors raised by the underlying libraries are left to
propagate as-is.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial

import minify_html
import rcssmin
import sass

TextFn = Callable[[str], str]
WrapFn = Callable[[str, str], str]


def minify_style(css: str) -> str:
    return rcssmin.cssmin(css)


def compile_style(scss: str, include_paths: Sequence[str] = ()) -> str:
    """Compile SCSS source to compressed CSS."""
    return sass.compile(
        string=scss,
        include_paths=list(include_paths),
        output_style="compressed",
    )


def minify_markup(html: str) -> str:
    return minify_html.minify(html, keep_closing_tags=True, preserve_brace_template_syntax=True)


def _js_string(value: str) -> str:
    # JSON string literals are valid JavaScript literals; "</" is split so
    # markup can never close an enclosing <script> tag.
    return json.dumps(value).replace("</", "<\\/")


def wrap_style_module(identifier: str, css: str) -> str:
    """Wrap CSS into an AngularJS module that injects it into the document head."""
    return (
        f"angular.module({_js_string(identifier)}, []).run([function() {{\n"
        "  var style = document.createElement('style');\n"
        "  style.setAttribute('type', 'text/css');\n"
        f"  style.appendChild(document.createTextNode({_js_string(css)}));\n"
        "  document.head.appendChild(style);\n"
        "}]);"
    )


def wrap_template_module(identifier: str, html: str) -> str:
    """Wrap markup into an AngularJS module that primes ``$templateCache``."""
    return (
        f"angular.module({_js_string(identifier)}, []).run(['$templateCache', "
        "function($templateCache) {\n"
        f"  $templateCache.put({_js_string(identifier)}, {_js_string(html)});\n"
        "}]);"
    )


@dataclass(frozen=True, slots=True)
class TextServices:
    """The services the built-in rules call; swap any of them to change a step."""

    minify_style: TextFn = minify_style
    compile_style: TextFn = compile_style
    minify_markup: TextFn = minify_markup
    wrap_style_module: WrapFn = wrap_style_module
    wrap_template_module: WrapFn = wrap_template_module


def default_services(include_paths: Sequence[str] = ()) -> TextServices:
    return TextServices(compile_style=partial(compile_style, include_paths=tuple(include_paths)))
