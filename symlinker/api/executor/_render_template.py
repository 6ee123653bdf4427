"""Thin wrapper around Jinja2 for rendering executor scripts."""

import shlex
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined


def _cmd_quote(value: str) -> str:
    return '"' + value.replace("%", "%%") + '"'


_ENV = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
    autoescape=False,
)
_ENV.filters["sh_quote"] = shlex.quote
_ENV.filters["cmd_quote"] = _cmd_quote


def _render_template(template: str, context: dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)
