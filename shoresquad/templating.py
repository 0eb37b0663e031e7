"""Jinja2 environment for the widget's HTML fragments and page shell."""
import os

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, **context) -> Markup:
    """Render a template; the result is already-escaped markup."""
    return Markup(env.get_template(template_name).render(**context))
