"""Plain text to HTML rendering for email bodies."""

import re
from typing import Optional

import jinja2
from markupsafe import Markup, escape

from .models import EmailRequest
from .validators import WHITESPACE

URL_PATTERN = re.compile(f"(https?://[^{WHITESPACE}]+)")

APOSTROPHE_ENTITY = "&#39;"
LINE_BREAK = "<br>"
LINK_TEMPLATE = r'<a href="\1" style="color: #3B82F6;">\1</a>'
PARAGRAPH_TEMPLATE = '<p style="margin: 8px 0; line-height: 1.5;">{}</p>'
DEFAULT_ATTRIBUTION = "Sent via Business Manager"

CONTAINER_TEMPLATE = """<div style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; color: #333;">
  {{ body }}
  <hr style="margin: 30px 0; border: none; border-top: 1px solid #e5e7eb;">
  <p style="font-size: 12px; color: #6b7280; margin: 0;">
    {{ attribution }}
  </p>
</div>"""


class HtmlRenderer:
    """Renders plain text bodies into a fixed, styled HTML layout.

    Output depends only on the body and the attribution line, so the same
    body always renders to the same string.
    """

    def __init__(self, attribution: str = DEFAULT_ATTRIBUTION):
        """Initialize the renderer.

        Args:
            attribution: Footer line shown under the separator
        """
        self.attribution = attribution
        self.env = jinja2.Environment(autoescape=True, undefined=jinja2.StrictUndefined)
        self.template = self.env.from_string(CONTAINER_TEMPLATE)

    def render_line(self, line: str) -> str:
        """Render a single line of text.

        Blank lines become a line break; other lines are HTML-escaped, get
        their http(s) URLs turned into links and are wrapped in a paragraph.
        Only ``&``, ``<``, ``>`` and ``"`` are escaped, so apostrophes in
        text such as "Don't" come through unchanged.
        """
        text = line.strip(WHITESPACE)
        if not text:
            return LINE_BREAK
        # paragraph and href attributes are double-quoted, a bare ' is safe
        escaped = str(escape(text)).replace(APOSTROPHE_ENTITY, "'")
        linked = URL_PATTERN.sub(LINK_TEMPLATE, escaped)
        return PARAGRAPH_TEMPLATE.format(linked)

    def render_fragments(self, body: str) -> str:
        """Render every line of the body, concatenated without separators."""
        return "".join(self.render_line(line) for line in body.split("\n"))

    def render(self, body: str) -> str:
        """Render a body into the full HTML container.

        Args:
            body: Plain text body with newlines

        Returns:
            HTML markup
        """
        return self.template.render(
            body=Markup(self.render_fragments(body)),
            attribution=self.attribution,
        )


def preview_email(request: EmailRequest, renderer: Optional[HtmlRenderer] = None) -> str:
    """Return the HTML a request's body renders to, without sending anything."""
    renderer = renderer or HtmlRenderer()
    return renderer.render(request.body)
