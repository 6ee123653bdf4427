"""Render a Plan as a POSIX sh script using ln -s."""

from ..link.Plan import Plan
from ._render_template import _render_template

_TEMPLATE = """#!/bin/sh
status=0
{% for group in groups %}
mkdir -p -- {{ group.directory | sh_quote }} || exit 1
cd -- {{ group.directory | sh_quote }} || exit 1
{% for op in group.operations %}
{% if op.action == "skip" %}
# skip {{ op.link_name | sh_quote }}: {{ op.existing }} already exists
{% else %}
{% if op.action == "replace_then_create" %}
rm -rf -- {{ op.link_name | sh_quote }}
{% endif %}
ln -s -- {{ op.target | sh_quote }} {{ op.link_name | sh_quote }} || status=1
{% endif %}
{% endfor %}
{% endfor %}
exit $status
"""


def render_sh_script(plan: Plan) -> str:
    """Render ``plan`` for /bin/sh.

    ``rm -rf`` removes a symlink itself, never what it points to.
    """
    groups = [
        {"directory": group.directory, "operations": [op.to_dict() for op in group.operations]}
        for group in plan.groups
    ]
    return _render_template(_TEMPLATE, {"groups": groups})
