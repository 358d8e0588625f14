# ==============================================
# HtmlSanitizer
# ==============================================
#
# PURPOSE:
#   Strip all markup from a value before it is encoded and handed
#   to the store, leaving only its text.
#
# CLASS: HtmlSanitizer
# --------------------
#   Stateless apart from the list of elements whose content is
#   dropped entirely.
#
#   Methods:
#   --------
#   - sanitize(value: str) -> str
#       "<b>x</b>"                  -> "x"
#       "a<script>evil()</script>b" -> "ab"
#       "a<!-- note -->b"           -> "ab"
#       "Tom &amp; Jerry"           -> "Tom &amp; Jerry"
#       "&lt;b&gt;x&lt;/b&gt;"      -> "&lt;b&gt;x&lt;/b&gt;"
#
#   The text is re-escaped (&, <, >) so entities in the input never
#   come back out as live markup.
#
# ==============================================

import warnings
from typing import Iterable

from bs4 import BeautifulSoup, Comment, MarkupResemblesLocatorWarning
from bs4.dammit import EntitySubstitution

PRUNED_TAGS = ("script", "style", "form")


class HtmlSanitizer:
    """Removes every tag from a string, keeping the text content."""

    def __init__(self, pruned_tags: Iterable[str] = PRUNED_TAGS):
        self.pruned_tags = tuple(pruned_tags)

    def sanitize(self, value: str) -> str:
        """
        Remove markup from a single value.

        Args:
            value: Raw value, possibly containing HTML

        Returns:
            The text of the value with all tags removed, with &, < and >
            escaped
        """
        if not value:
            return value

        with warnings.catch_warnings():
            # Short values like "index.html" make bs4 think it was given a path
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(value, "html.parser")

        for element in soup.find_all(list(self.pruned_tags)):
            element.decompose()
        for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
            comment.extract()

        return EntitySubstitution.substitute_xml(soup.get_text())

    def __call__(self, value: str) -> str:
        return self.sanitize(value)
