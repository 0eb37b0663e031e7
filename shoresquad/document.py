"""In-process document the widget renders into, and its HTML serialization."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from markupsafe import Markup, escape

from shoresquad.templating import render as render_template


@dataclass
class Element:
    """A display region: markup plus inline style, addressable by id or class."""
    tag: str = "div"
    element_id: Optional[str] = None
    class_name: Optional[str] = None
    inner_html: str = ""
    style: Dict[str, str] = field(default_factory=dict)

    @property
    def text_content(self) -> str:
        """Visible text with markup removed and whitespace collapsed."""
        return Markup(self.inner_html).striptags()

    @text_content.setter
    def text_content(self, value: str) -> None:
        self.inner_html = str(escape(value))

    @property
    def is_hidden(self) -> bool:
        return self.style.get("display") == "none"

    @property
    def style_css(self) -> str:
        return "; ".join(f"{k}: {v}" for k, v in self.style.items())

    def matches(self, selector: str) -> bool:
        """Match a single `#id` or `.class` selector."""
        if selector.startswith("#"):
            return self.element_id == selector[1:]
        if selector.startswith("."):
            return selector[1:] in (self.class_name or "").split()
        return self.tag == selector

    def outer_html(self) -> Markup:
        return render_template("element.html.j2", el=self)


class Document:
    """Ordered set of top-level elements making up the widget page."""

    def __init__(self, elements: Optional[List[Element]] = None) -> None:
        self.elements: List[Element] = list(elements or [])

    @classmethod
    def default(cls) -> "Document":
        """The ShoreSquad layout: clock header, weather container, loading overlay."""
        return cls(
            [
                Element(tag="header", class_name="current-time"),
                Element(tag="section", class_name="weather-widget"),
                Element(
                    element_id="loading-overlay",
                    class_name="loading-overlay",
                    inner_html='<div class="spinner"></div>',
                    style={"display": "none"},
                ),
            ]
        )

    def query_selector(self, selector: str) -> Optional[Element]:
        return next((el for el in self.elements if el.matches(selector)), None)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self.query_selector(f"#{element_id}")

    def render(self, title: str = "ShoreSquad") -> str:
        """Serialize the whole page; a fresh GET shows the current state."""
        return str(render_template("page.html.j2", title=title, elements=self.elements))
