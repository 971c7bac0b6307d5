"""
Pipeline - Text Parser

HTML → Markdown / plain text conversion for Hacker News item and
profile text.
"""

import re
from typing import Literal
from dataclasses import dataclass
from bs4 import BeautifulSoup
from markdownify import markdownify as md


TextFormat = Literal["html", "markdown", "plain"]


@dataclass
class ParsedText:
    """HN text converted to Markdown and plain text."""
    markdown: str
    plain: str


class TextParser:
    """Parses the HTML fragments HN stores in `text` and `about` fields."""

    def parse(self, html_content: str) -> ParsedText:
        """
        Parse an HN HTML fragment.

        Args:
            html_content: Raw HTML as returned by the item API

        Returns:
            ParsedText with markdown and plain text
        """
        soup = BeautifulSoup(html_content or "", "html.parser")

        markdown = md(str(soup), heading_style="ATX", code_language="")
        markdown = self._clean(markdown)

        # HN separates paragraphs with bare <p> tags
        for paragraph in soup.find_all("p"):
            paragraph.insert_before("\n\n")
        plain = self._clean(soup.get_text())

        return ParsedText(
            markdown=markdown,
            plain=plain,
        )

    def convert(self, html_content: str, text_format: TextFormat = "html") -> str:
        """Render HN text in the requested format; html is returned untouched."""
        if not html_content:
            return ""
        if text_format == "html":
            return html_content
        if text_format not in ("markdown", "plain"):
            raise ValueError(f"Unknown text format: {text_format}")

        parsed = self.parse(html_content)
        return parsed.markdown if text_format == "markdown" else parsed.plain

    def _clean(self, text: str) -> str:
        """Collapse runs of blank lines and trim."""
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.strip()
