"""
HTML rendering for the guest list.

``ViewRenderer`` owns a Jinja2 environment loaded from the templates
directory.  ``render_list`` produces the ``rsvp_list.html`` fragment
and is the only place list markup is generated: ``render_page`` embeds
its output into the full page instead of rendering the list template a
second time, so the initial page and the refreshed fragment after a
submission cannot drift apart.

Template problems are configuration errors.  ``check`` loads every
template so they surface at startup; any failure while rendering is
raised as :class:`RenderError`.
"""

import logging
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from partifuller.app.core.exceptions import RenderError
from partifuller.app.schemas.rsvp import RsvpRecord

logger = logging.getLogger(__name__)

TEMPLATES = ("base.html", "index.html", "rsvp_form.html", "rsvp_list.html")


class ViewRenderer:
    """Render RSVP records to HTML documents."""

    def __init__(self, templates_dir: str, title: str = "Partifuller") -> None:
        self.title = title
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html"]),
        )

    def check(self) -> None:
        """Load and compile every template, raising ``RenderError`` on failure."""
        for name in TEMPLATES:
            try:
                self.env.get_template(name)
            except TemplateError as exc:
                raise RenderError(f"Template {name} could not be loaded") from exc

    def render_list(self, records: Sequence[RsvpRecord]) -> str:
        """Render the guest list fragment."""
        return self._render("rsvp_list.html", rsvps=list(records))

    def render_page(self, records: Sequence[RsvpRecord]) -> str:
        """Render the full page with the form and the guest list."""
        fragment = Markup(self.render_list(records))
        return self._render("index.html", title=self.title, rsvp_list=fragment)

    def _render(self, name: str, **context) -> str:
        try:
            return self.env.get_template(name).render(**context)
        except TemplateError as exc:
            logger.exception("Failed to render %s", name)
            raise RenderError(f"Template {name} failed to render") from exc
