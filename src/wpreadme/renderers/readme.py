#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/renderers/readme.py
"""Document to canonical readme.txt generator.

The generator accepts a :class:`~wpreadme.document.ReadmeDocument` or a plain
mapping of form-field values and always produces a complete readme:

- absent or empty fields are replaced with documented defaults,
- every value is sanitized with the cap for its field,
- an invalid stable tag is repaired to ``1.0.0``,
- empty FAQ and changelog lists are replaced with a placeholder entry,
- the license lines are fixed to GPLv2 or later.

Output layout::

    === {title} ===

    Contributors: {contributors}
    Tags: {tags}
    Requires at least: {requires_at_least}
    Tested up to: {tested_up_to}
    Stable tag: {version}
    Requires PHP: {requires_php}
    License: GPLv2 or later
    License URI: https://www.gnu.org/licenses/gpl-2.0.html

    {short_description}

    == Description ==
    ...

"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import fields as dataclass_fields
from typing import Any, Iterable, Mapping

from wpreadme.constants import (
    DEFAULT_CONTRIBUTORS,
    DEFAULT_DESCRIPTION,
    DEFAULT_INSTALLATION,
    DEFAULT_REQUIRES_AT_LEAST,
    DEFAULT_REQUIRES_PHP,
    DEFAULT_SHORT_DESCRIPTION,
    DEFAULT_TAGS,
    DEFAULT_TESTED_UP_TO,
    DEFAULT_TITLE,
    DEFAULT_VERSION,
    LICENSE_LINE,
    LICENSE_URI_LINE,
    PLACEHOLDER_CHANGELOG_CHANGE,
    PLACEHOLDER_CHANGELOG_VERSION,
    PLACEHOLDER_FAQ_ANSWER,
    PLACEHOLDER_FAQ_QUESTION,
    SECTION_CHANGELOG,
    SECTION_DESCRIPTION,
    SECTION_FAQ,
    SECTION_INSTALLATION,
)
from wpreadme.document import ChangelogEntry, FAQEntry, ReadmeDocument
from wpreadme.exceptions import RenderingError
from wpreadme.options.readme import ReadmeRendererOptions
from wpreadme.renderers.base import BaseRenderer
from wpreadme.utils.sanitize import sanitize, validate

logger = logging.getLogger(__name__)

# Answers of this shape read back as an FAQ question marker
_MARKER_SHAPED = re.compile(r"=[ \t]*[^=].*?[ \t]*=")

# Form ids used by the readme editor, mapped to document field names
FORM_FIELD_ALIASES: dict[str, str] = {
    "pluginName": "title",
    "plugin_name": "title",
    "shortDescription": "short_description",
    "requiresAtLeast": "requires_at_least",
    "testedUpTo": "tested_up_to",
    "requiresPHP": "requires_php",
    "requiresPhp": "requires_php",
    "stableTag": "version",
    "stable_tag": "version",
}


def normalize_fields(fields: ReadmeDocument | Mapping[str, Any]) -> dict[str, Any]:
    """Convert a document or form-field record to a dict keyed by field name.

    Parameters
    ----------
    fields : ReadmeDocument or Mapping
        Source of field values. Mapping keys may be document field names or
        editor form ids (``pluginName``, ``requiresAtLeast``, ...).

    Returns
    -------
    dict
        Field values keyed by document field name; ``None`` values are dropped

    Raises
    ------
    RenderingError
        If fields is neither a ReadmeDocument nor a mapping

    """
    if isinstance(fields, ReadmeDocument):
        return {f.name: getattr(fields, f.name) for f in dataclass_fields(fields)}
    if not isinstance(fields, Mapping):
        raise RenderingError(
            f"Expected ReadmeDocument or mapping of field values, got {type(fields).__name__}",
            rendering_stage="input",
        )

    normalized: dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        normalized[FORM_FIELD_ALIASES.get(key, key)] = value
    return normalized


def _as_text(value: Any) -> Any:
    """Turn numbers from YAML or TOML input into strings; leave other values alone."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class ReadmeRenderer(BaseRenderer):
    r"""Render a document or form-field record as canonical readme text.

    Parameters
    ----------
    options : ReadmeRendererOptions or None, default = None
        Renderer configuration options

    Examples
    --------
        >>> renderer = ReadmeRenderer()
        >>> text = renderer.render_to_string({"title": "Foo", "version": "v1"})
        >>> text.splitlines()[0], "Stable tag: 1.0.0" in text
        ('=== Foo ===', True)

    """

    def __init__(self, options: ReadmeRendererOptions | None = None):
        """Initialize the readme renderer with options."""
        BaseRenderer._validate_options_type(options, ReadmeRendererOptions, "readme")
        options = options or ReadmeRendererOptions()
        super().__init__(options)
        self.options: ReadmeRendererOptions = options

    def render_to_string(self, fields: ReadmeDocument | Mapping[str, Any]) -> str:
        """Generate canonical readme text.

        Parameters
        ----------
        fields : ReadmeDocument or Mapping
            Field values. Absent or empty values fall back to defaults.

        Returns
        -------
        str
            Complete readme text

        Raises
        ------
        RenderingError
            If fields is neither a ReadmeDocument nor a mapping

        """
        values = normalize_fields(fields)
        limits = self.options.limits

        title = self._text(values, "title", DEFAULT_TITLE, limits.title)
        short_description = self._text(
            values, "short_description", DEFAULT_SHORT_DESCRIPTION, limits.short_description
        )
        contributors = self._joined_list(
            values.get("contributors"), limits.contributor, limits.max_contributors, DEFAULT_CONTRIBUTORS
        )
        tags = self._joined_list(values.get("tags"), limits.tag, limits.max_tags, DEFAULT_TAGS)
        version = self._version(values.get("version"))
        requires_at_least = self._text(values, "requires_at_least", DEFAULT_REQUIRES_AT_LEAST, limits.header_value)
        tested_up_to = self._text(values, "tested_up_to", DEFAULT_TESTED_UP_TO, limits.header_value)
        requires_php = self._text(values, "requires_php", DEFAULT_REQUIRES_PHP, limits.header_value)
        description = self._text(values, "description", DEFAULT_DESCRIPTION, limits.description)
        installation = self._text(values, "installation", DEFAULT_INSTALLATION, limits.installation)

        lines = [
            f"=== {title} ===",
            "",
            f"Contributors: {contributors}",
            f"Tags: {tags}",
            f"Requires at least: {requires_at_least}",
            f"Tested up to: {tested_up_to}",
            f"Stable tag: {version}",
            f"Requires PHP: {requires_php}",
            LICENSE_LINE,
            LICENSE_URI_LINE,
            "",
            short_description,
            "",
            f"== {SECTION_DESCRIPTION} ==",
            "",
            description,
            "",
            f"== {SECTION_INSTALLATION} ==",
            "",
            installation,
            "",
            f"== {SECTION_FAQ} ==",
            "",
            self._faq_section(values.get("faqs")).strip(),
            "",
            f"== {SECTION_CHANGELOG} ==",
            "",
            self._changelog_section(values.get("changelog")).strip(),
        ]
        text = "\n".join(lines)
        return text + "\n" if self.options.trailing_newline else text

    def render_preview_html(self, fields: ReadmeDocument | Mapping[str, Any]) -> str:
        """Generate readme text wrapped for display as literal text in HTML.

        Parameters
        ----------
        fields : ReadmeDocument or Mapping
            Field values

        Returns
        -------
        str
            ``<pre>`` element containing the HTML-escaped readme text

        """
        text = self.render_to_string(fields)
        return f'<pre class="wpreadme-preview">{html.escape(text, quote=True)}</pre>'

    @staticmethod
    def _text(values: Mapping[str, Any], name: str, default: str, max_length: int) -> str:
        cleaned = sanitize(_as_text(values.get(name)), max_length)
        return cleaned or sanitize(default, max_length)

    def _version(self, raw: Any) -> str:
        version = sanitize(_as_text(raw), self.options.limits.version)
        if not validate(version, "version"):
            if version:
                logger.debug(f"Replacing invalid version {version!r} with {DEFAULT_VERSION}")
            return DEFAULT_VERSION
        return version

    @staticmethod
    def _items(raw: Any) -> list[Any]:
        if raw is None:
            return []
        if isinstance(raw, str):
            return raw.split(",")
        if isinstance(raw, Iterable):
            return list(raw)
        return [raw]

    def _joined_list(self, raw: Any, max_length: int, max_items: int, default: str) -> str:
        items = [sanitize(_as_text(item), max_length) for item in self._items(raw)]
        kept = [item for item in items if item][:max_items]
        return ", ".join(kept) if kept else default

    @staticmethod
    def _answer_text(question: str, answer: str) -> str:
        """Lay out an answer so that it does not read back as a question marker.

        A marker-shaped answer such as ``= hi =`` is broken at its first space;
        the parser joins answer lines with a single space, so the text survives.
        """
        if not _MARKER_SHAPED.fullmatch(answer):
            return answer
        head, _, tail = answer.partition(" ")
        if tail and not _MARKER_SHAPED.fullmatch(head) and not _MARKER_SHAPED.fullmatch(tail):
            return f"{head}\n{tail}"
        logger.warning(f"FAQ answer for {question!r} looks like a question marker and will not parse back")
        return answer

    def _faq_section(self, raw: Any) -> str:
        limits = self.options.limits
        parts: list[str] = []

        entries = [] if isinstance(raw, str) else self._items(raw)
        for entry in entries:
            if isinstance(entry, FAQEntry):
                question, answer = entry.question, entry.answer
            elif isinstance(entry, Mapping):
                question, answer = entry.get("question"), entry.get("answer")
            else:
                logger.debug(f"Skipping FAQ entry of type {type(entry).__name__}")
                continue

            question = sanitize(_as_text(question), limits.faq_question)
            answer = sanitize(_as_text(answer), limits.faq_answer)
            if question and answer:
                parts.append(f"= {question} =\n\n{self._answer_text(question, answer)}\n\n")

        if len(parts) > limits.max_faqs:
            logger.info(f"Keeping first {limits.max_faqs} of {len(parts)} FAQ entries")
            parts = parts[: limits.max_faqs]

        return "".join(parts) or f"= {PLACEHOLDER_FAQ_QUESTION} =\n\n{PLACEHOLDER_FAQ_ANSWER}\n\n"

    def _changelog_section(self, raw: Any) -> str:
        limits = self.options.limits
        parts: list[str] = []

        entries = [] if isinstance(raw, str) else self._items(raw)
        for entry in entries:
            if isinstance(entry, ChangelogEntry):
                version, changes = entry.version, entry.changes
            elif isinstance(entry, Mapping):
                version, changes = entry.get("version"), entry.get("changes")
            else:
                logger.debug(f"Skipping changelog entry of type {type(entry).__name__}")
                continue

            version = sanitize(_as_text(version), limits.changelog_version)
            change_items = changes.splitlines() if isinstance(changes, str) else self._items(changes)
            change_lines = [sanitize(_as_text(change), limits.changelog_change) for change in change_items]
            change_lines = [change for change in change_lines if change]
            if version and change_lines:
                parts.append(f"= {version} =\n" + "".join(f"* {change}\n" for change in change_lines) + "\n")

        if len(parts) > limits.max_changelogs:
            logger.info(f"Keeping first {limits.max_changelogs} of {len(parts)} changelog entries")
            parts = parts[: limits.max_changelogs]

        return "".join(parts) or f"= {PLACEHOLDER_CHANGELOG_VERSION} =\n* {PLACEHOLDER_CHANGELOG_CHANGE}\n\n"
