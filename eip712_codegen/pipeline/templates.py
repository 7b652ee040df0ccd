"""
Jinja2 environment shared by the Solidity and documentation renderers.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import jinja2

from ..utils import join_with_and

TEMPLATES_DIR = Path(__file__).parent.parent.resolve().absolute() / "templates"


@lru_cache(maxsize=None)
def get_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATES_DIR),
        lstrip_blocks=True,
        trim_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["join_with_and"] = join_with_and
    return env


def render(template_name: str, **context) -> str:
    """Render a template from the package `templates` directory."""
    return get_environment().get_template(template_name).render(**context)
