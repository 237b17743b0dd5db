#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/parsers/readme.py
"""WordPress plugin readme.txt to document parser.

The parser recovers structured fields from loosely formatted, hand-written
readme files. It runs a fixed sequence of independent passes over the same
input; each pass either fills its fields or, if it fails, leaves them at their
defaults while the remaining passes carry on.

Passes
------
1. Title: first ``=== Name ===`` line.
2. Header block: a single forward scan over lines with three states
   (before header, in header, after header) collecting ``Key: Value`` lines
   and the short description paragraph.
3. Short description fallback: the first plain paragraph after the last
   ``License URI:``, ``Requires PHP:`` or ``Stable tag:`` line, used only if
   pass 2 found none.
4. Description and Installation section bodies.
5. FAQ entries (``= Question =`` followed by answer lines).
6. Changelog entries (``= 1.2.3 =`` followed by ``* change`` lines).

Example input::

    === My Plugin ===

    Contributors: alice, bob
    Tags: seo, images
    Stable tag: 1.2.0

    Makes images smaller.

    == Description ==

    Longer text.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional, TypeVar

from wpreadme.constants import (
    HEADER_KEY_ALIASES,
    MIN_FALLBACK_SHORT_DESCRIPTION_LENGTH,
    SECTION_CHANGELOG,
    SECTION_DESCRIPTION,
    SECTION_FAQ,
    SECTION_INSTALLATION,
)
from wpreadme.document import ChangelogEntry, FAQEntry, ReadmeDocument
from wpreadme.exceptions import ParsingError
from wpreadme.options.readme import ReadmeParserOptions
from wpreadme.parsers.base import BaseParser
from wpreadme.utils.chunking import iter_marker_chunks
from wpreadme.utils.sanitize import sanitize, validate

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Line-level patterns, matched against stripped lines with fullmatch()
_TITLE_LINE = re.compile(r"={3,}.*={3,}")
_SECTION_MARKER = re.compile(r"==[ \t]*([^=].*?)[ \t]*==")
_HEADER_LINE = re.compile(r"([^:=][^:]*?)[ \t]*:(.*)")
_FAQ_QUESTION = re.compile(r"=[ \t]*([^=].*?)[ \t]*=")
_CHANGELOG_VERSION = re.compile(r"=[ \t]*([0-9.]+)[ \t]*=")
_CHANGE_LINE = re.compile(r"\*\s+(.*)")

# Document-level patterns
_TITLE_PATTERN = re.compile(r"^[ \t]*={3,}[ \t]*(.+?)[ \t]*={3,}[ \t]*$", re.MULTILINE)
_FALLBACK_ANCHOR = re.compile(
    r"^[ \t]*(?:License URI|Requires PHP|Stable tag)[ \t]*:[^\n]*\n", re.IGNORECASE | re.MULTILINE
)
_NEXT_SECTION = r"(?=^[ \t]*==[ \t]*[^=\n][^\n]*?==[ \t]*$|\Z)"


def _section_pattern(name: str) -> re.Pattern[str]:
    """Build the pattern matching the body of a ``== Name ==`` section."""
    words = r"[ \t]+".join(re.escape(word) for word in name.split())
    return re.compile(
        rf"^[ \t]*==[ \t]*{words}[ \t]*==[ \t]*$(.*?){_NEXT_SECTION}",
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )


_SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    name: _section_pattern(name)
    for name in (SECTION_DESCRIPTION, SECTION_INSTALLATION, SECTION_FAQ, SECTION_CHANGELOG)
}


class HeaderScanState(Enum):
    """States of the forward scan over the header block."""

    BEFORE_HEADER = auto()
    IN_HEADER = auto()
    AFTER_HEADER = auto()


@dataclass
class HeaderScan:
    """Raw result of the header scan, before values are interpreted.

    Attributes
    ----------
    fields : list of (str, str)
        ``Key: Value`` pairs in source order, unsanitized
    short_description_lines : list of str
        Lines of the paragraph that ended the header block, if any

    """

    fields: list[tuple[str, str]] = field(default_factory=list)
    short_description_lines: list[str] = field(default_factory=list)


def is_recognized_key(raw_key: str) -> bool:
    """Return True if a raw header key maps to a document field."""
    return raw_key.strip().lower() in HEADER_KEY_ALIASES


def scan_header(lines: list[str]) -> HeaderScan:
    """Scan lines for the header block and the short description.

    The header starts at the first title line. Inside it, blank lines are
    skipped and ``Key: Value`` lines are collected; the key is everything
    before the first colon. The first line that is neither blank nor a header
    line starts the short description paragraph, which runs until the next
    blank line or section marker. Recognized header lines inside that
    paragraph are still collected as fields rather than joined into it. A
    section marker reached while still in the header ends the scan without a
    short description.

    Parameters
    ----------
    lines : list of str
        Input lines without line terminators

    Returns
    -------
    HeaderScan
        Collected header fields and short description lines

    """
    result = HeaderScan()
    state = HeaderScanState.BEFORE_HEADER

    for raw_line in lines:
        line = raw_line.strip()

        if state is HeaderScanState.BEFORE_HEADER:
            if _TITLE_LINE.fullmatch(line):
                state = HeaderScanState.IN_HEADER
            continue

        if state is HeaderScanState.IN_HEADER:
            if not line:
                continue
            if _SECTION_MARKER.fullmatch(line):
                break
            header_match = _HEADER_LINE.fullmatch(line)
            if header_match:
                result.fields.append((header_match.group(1), header_match.group(2)))
                continue
            result.short_description_lines.append(line)
            state = HeaderScanState.AFTER_HEADER
            continue

        # AFTER_HEADER: extend the short description paragraph
        if not line or _SECTION_MARKER.fullmatch(line):
            break
        header_match = _HEADER_LINE.fullmatch(line)
        if header_match and is_recognized_key(header_match.group(1)):
            result.fields.append((header_match.group(1), header_match.group(2)))
            continue
        result.short_description_lines.append(line)

    return result


class ReadmeParser(BaseParser):
    r"""Convert readme.txt text into a :class:`ReadmeDocument`.

    Parsing never fails on malformed content. A pass that cannot make sense
    of its part of the input is logged and skipped, and the document is
    returned with whatever the other passes recovered.

    Parameters
    ----------
    options : ReadmeParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = ReadmeParser()
        >>> doc = parser.parse("=== Foo ===\n\nStable tag: 2.0.0\n\nDoes foo.\n")
        >>> doc.title, doc.version, doc.short_description
        ('Foo', '2.0.0', 'Does foo.')

    """

    def __init__(self, options: ReadmeParserOptions | None = None):
        """Initialize the readme parser with options."""
        BaseParser._validate_options_type(options, ReadmeParserOptions, "readme")
        options = options or ReadmeParserOptions()
        super().__init__(options)
        self.options: ReadmeParserOptions = options

    def parse(self, text: str) -> ReadmeDocument:
        """Parse readme text into a document.

        Parameters
        ----------
        text : str
            Raw readme text

        Returns
        -------
        ReadmeDocument
            Parsed document; anything not found keeps its default

        Raises
        ------
        InvalidInputError
            If text is not a string or exceeds ``max_input_length`` once trimmed
        ParsingError
            If assembling the document fails unexpectedly

        """
        self._check_text_input(text, self.options.max_input_length)
        content = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = content.split("\n")
        limits = self.options.limits

        try:
            values: dict[str, Any] = {}

            values["title"] = self._run_pass("title", self._extract_title, content, default="")
            values.update(self._run_pass("header", self._extract_header, lines, default={}))

            if not values.get("short_description") and self.options.short_description_fallback:
                values["short_description"] = self._run_pass(
                    "short_description", self._extract_fallback_short_description, content, default=""
                )

            values["description"] = self._run_pass(
                "description", self._extract_section, content, SECTION_DESCRIPTION, limits.description, default=""
            )
            values["installation"] = self._run_pass(
                "installation",
                self._extract_section,
                content,
                SECTION_INSTALLATION,
                limits.installation,
                default="",
            )
            values["faqs"] = self._run_pass("faq", self._extract_faqs, content, default=())
            values["changelog"] = self._run_pass("changelog", self._extract_changelog, content, default=())

            document = ReadmeDocument(**values)
        except ParsingError:
            raise
        except Exception as e:
            raise ParsingError(f"Failed to assemble readme document: {e}", original_error=e) from e

        logger.debug(
            f"Parsed readme '{document.title}': {len(document.faqs)} FAQ entries, "
            f"{len(document.changelog)} changelog entries"
        )
        return document

    @staticmethod
    def _run_pass(name: str, func: Callable[..., T], *args: Any, default: T) -> T:
        """Run one parsing pass, falling back to ``default`` if it raises."""
        try:
            return func(*args)
        except Exception as e:
            logger.warning(f"Skipping {name} section: {e}", exc_info=True)
            return default

    def _extract_title(self, content: str) -> str:
        match = _TITLE_PATTERN.search(content)
        if not match:
            return ""
        return sanitize(match.group(1), self.options.limits.title)

    def _extract_header(self, lines: list[str]) -> dict[str, Any]:
        """Interpret the header block as document field values.

        Returns
        -------
        dict
            Keyword arguments for ReadmeDocument: any of ``header``,
            ``contributors``, ``tags``, ``version``, ``requires_at_least``,
            ``tested_up_to``, ``requires_php`` and ``short_description``

        """
        limits = self.options.limits
        scan = scan_header(lines)
        values: dict[str, Any] = {}
        header: dict[str, str] = {}

        for raw_key, raw_value in scan.fields:
            key = HEADER_KEY_ALIASES.get(raw_key.strip().lower())
            if key is None:
                logger.debug(f"Ignoring unrecognized header field: {raw_key.strip()!r}")
                continue

            value = sanitize(raw_value, limits.header_value)
            if not value:
                continue

            if key == "contributors":
                contributors = self._split_list(value, limits.contributor, "username", limits.max_contributors)
                if contributors:
                    values["contributors"] = contributors
                    header[key] = value
            elif key == "tags":
                tags = self._split_list(value, limits.tag, "tag", limits.max_tags)
                if tags:
                    values["tags"] = tags
                    header[key] = value
            elif key == "stable tag":
                version = sanitize(value, limits.version)
                if validate(version, "version"):
                    values["version"] = version
                    header[key] = value
                else:
                    logger.debug(f"Dropping invalid stable tag: {value!r}")
            else:
                field_name = {
                    "requires at least": "requires_at_least",
                    "tested up to": "tested_up_to",
                    "requires php": "requires_php",
                }[key]
                values[field_name] = value
                header[key] = value

        values["header"] = header
        if scan.short_description_lines:
            values["short_description"] = sanitize(
                " ".join(scan.short_description_lines), limits.short_description
            )
        return values

    @staticmethod
    def _split_list(value: str, max_length: int, kind: str, max_items: int) -> tuple[str, ...]:
        """Split a comma-separated header value into validated items."""
        items = (sanitize(item.strip(), max_length) for item in value.split(","))
        valid = [item for item in items if item and validate(item, kind)]
        if len(valid) > max_items:
            logger.debug(f"Keeping first {max_items} of {len(valid)} {kind} entries")
        return tuple(valid[:max_items])

    def _extract_fallback_short_description(self, content: str) -> str:
        """Find a short description after the last license or version header line.

        The candidate is the first paragraph of plain text after the anchor
        line, stopping at the first section marker. It is accepted only if it
        is longer than a few characters, contains no colon and does not start
        with "contributors", since any of those suggests a missed header line.
        """
        anchors = list(_FALLBACK_ANCHOR.finditer(content))
        if not anchors:
            return ""

        paragraph: list[str] = []
        for raw_line in content[anchors[-1].end() :].split("\n"):
            line = raw_line.strip()
            if not line:
                if paragraph:
                    break
                continue
            if _SECTION_MARKER.fullmatch(line) or _TITLE_LINE.fullmatch(line):
                break
            if not paragraph and _HEADER_LINE.fullmatch(line):
                continue
            paragraph.append(line)

        candidate = sanitize(" ".join(paragraph), self.options.limits.short_description)
        if (
            len(candidate) > MIN_FALLBACK_SHORT_DESCRIPTION_LENGTH
            and ":" not in candidate
            and not candidate.lower().startswith("contributors")
        ):
            return candidate
        return ""

    @staticmethod
    def _section_body(content: str, name: str) -> Optional[str]:
        """Return the raw text between ``== name ==`` and the next section marker."""
        match = _SECTION_PATTERNS[name].search(content)
        if not match:
            return None
        return match.group(1)

    def _extract_section(self, content: str, name: str, max_length: int) -> str:
        body = self._section_body(content, name)
        if body is None:
            return ""
        return sanitize(body.strip(), max_length)

    def _cap_entries(self, entries: list[T], max_items: int, name: str) -> tuple[T, ...]:
        if self.options.cap_entries and len(entries) > max_items:
            logger.info(f"Keeping first {max_items} of {len(entries)} {name} entries")
            return tuple(entries[:max_items])
        return tuple(entries)

    def _extract_faqs(self, content: str) -> tuple[FAQEntry, ...]:
        body = self._section_body(content, SECTION_FAQ)
        if not body or not body.strip():
            return ()

        entries: list[FAQEntry] = []
        for chunk in iter_marker_chunks(body.split("\n"), lambda line: bool(_FAQ_QUESTION.fullmatch(line.strip()))):
            entry = self._faq_from_chunk(chunk)
            if entry is not None:
                entries.append(entry)

        return self._cap_entries(entries, self.options.limits.max_faqs, "FAQ")

    def _faq_from_chunk(self, chunk: list[str]) -> Optional[FAQEntry]:
        """Build an FAQ entry from one chunk, or None if it lacks a question or answer."""
        limits = self.options.limits
        question = ""
        answer_lines: list[str] = []

        for raw_line in chunk:
            line = raw_line.strip()
            marker = _FAQ_QUESTION.fullmatch(line)
            if marker and not question:
                question = marker.group(1)
            elif question and line:
                answer_lines.append(line)

        question = sanitize(question, limits.faq_question)
        answer = sanitize("\n".join(answer_lines), limits.faq_answer)
        if not question or not answer:
            return None
        return FAQEntry(question=question, answer=answer)

    def _extract_changelog(self, content: str) -> tuple[ChangelogEntry, ...]:
        body = self._section_body(content, SECTION_CHANGELOG)
        if not body or not body.strip():
            return ()

        entries: list[ChangelogEntry] = []
        for chunk in iter_marker_chunks(
            body.split("\n"), lambda line: bool(_CHANGELOG_VERSION.fullmatch(line.strip()))
        ):
            entry = self._changelog_from_chunk(chunk)
            if entry is not None:
                entries.append(entry)

        return self._cap_entries(entries, self.options.limits.max_changelogs, "changelog")

    def _changelog_from_chunk(self, chunk: list[str]) -> Optional[ChangelogEntry]:
        """Build a changelog entry from one chunk, or None if it has no version or changes."""
        limits = self.options.limits
        version = ""
        changes: list[str] = []

        for raw_line in chunk:
            line = raw_line.strip()
            marker = _CHANGELOG_VERSION.fullmatch(line)
            if marker and not version:
                version = sanitize(marker.group(1), limits.changelog_version)
                continue
            change_match = _CHANGE_LINE.fullmatch(line)
            if change_match:
                change = sanitize(change_match.group(1), limits.changelog_change)
                if change:
                    changes.append(change)

        if not version or not changes:
            return None
        return ChangelogEntry(version=version, changes=tuple(changes))
