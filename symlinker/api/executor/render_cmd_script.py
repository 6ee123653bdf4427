"""Render a Plan as a Windows cmd script using mklink."""

from ..link.Plan import Plan
from ._render_template import _render_template

_TEMPLATE = r"""@echo off
set SYMLINKER_STATUS=0
{% for group in groups %}
if not exist {{ (group.directory ~ "\\") | cmd_quote }} mkdir {{ group.directory | cmd_quote }}
cd /d {{ group.directory | cmd_quote }} || exit /b 1
{% for op in group.operations %}
{% if op.action == "skip" %}
rem skip {{ op.link_name | cmd_quote }}: {{ op.existing }} already exists
{% else %}
{% if op.action == "replace_then_create" %}
if exist {{ (op.link_name ~ "\\") | cmd_quote }} rmdir {{ op.link_name | cmd_quote }} /s /q
if exist {{ op.link_name | cmd_quote }} del {{ op.link_name | cmd_quote }} /f /q
{% endif %}
mklink {% if op.is_directory %}/d {% endif %}{{ op.link_name | cmd_quote }} {{ op.target | cmd_quote }} || set SYMLINKER_STATUS=1
{% endif %}
{% endfor %}
{% endfor %}
exit /b %SYMLINKER_STATUS%
"""


def render_cmd_script(plan: Plan) -> str:
    """Render ``plan`` for cmd.exe.

    Each group creates its directory if missing and changes into it; links
    are then made by bare name. Replaced entries are removed directory-style
    first, then file-style. The script exits 1 if any mklink failed.
    """
    groups = [
        {"directory": group.directory, "operations": [op.to_dict() for op in group.operations]}
        for group in plan.groups
    ]
    return _render_template(_TEMPLATE, {"groups": groups}).replace("\n", "\r\n")
