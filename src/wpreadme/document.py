#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/document.py
"""Structured representation of a plugin readme.

A :class:`ReadmeDocument` is a plain value: it is produced by the parser or
assembled from form-field values, and consumed by the generator or by a form
layer that copies each field into a UI control. It carries no identity beyond
its field values and is never mutated; use :meth:`ReadmeDocument.create_updated`
to derive a modified copy.

Field values are expected to be sanitized already. The parser guarantees this
for the documents it returns; the generator sanitizes again on the way out, so
a hand-assembled document is safe to render either way.
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class FAQEntry:
    """A single ``= Question =`` entry of the FAQ section.

    Parameters
    ----------
    question : str
        Question text without the ``=`` delimiters
    answer : str
        Answer text

    """

    question: str
    answer: str


@dataclass(frozen=True)
class ChangelogEntry:
    """A single ``= x.y.z =`` entry of the changelog section.

    Parameters
    ----------
    version : str
        Version string without the ``=`` delimiters
    changes : tuple of str
        Change lines without their ``*`` bullet

    """

    version: str
    changes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Store changes as a tuple regardless of the sequence type given."""
        if not isinstance(self.changes, tuple):
            object.__setattr__(self, "changes", tuple(self.changes))


@dataclass(frozen=True)
class ReadmeDocument:
    """Structured content of a ``readme.txt`` file.

    Parameters
    ----------
    title : str
        Plugin name from the ``=== Title ===`` line
    short_description : str
        One-paragraph summary following the header block
    header : dict
        Recognized header lines, keyed by canonical lowercase key
        (``"stable tag"``, ``"requires php"``, ...) with their sanitized values
    contributors : tuple of str
        WordPress.org usernames
    tags : tuple of str
        Plugin directory tags
    version : str
        Stable tag, always ``x.y.z`` when set by the parser
    requires_at_least, tested_up_to, requires_php : str
        Free-form version constraints
    description, installation : str
        Bodies of the Description and Installation sections
    faqs : tuple of FAQEntry
        FAQ entries in source order
    changelog : tuple of ChangelogEntry
        Changelog entries in source order

    """

    title: str = ""
    short_description: str = ""
    header: dict[str, str] = field(default_factory=dict, compare=True, hash=False)
    contributors: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    version: str = ""
    requires_at_least: str = ""
    tested_up_to: str = ""
    requires_php: str = ""
    description: str = ""
    installation: str = ""
    faqs: tuple[FAQEntry, ...] = ()
    changelog: tuple[ChangelogEntry, ...] = ()

    def __post_init__(self) -> None:
        """Normalize sequence fields to tuples."""
        for name in ("contributors", "tags", "faqs", "changelog"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new document with updated field values."""
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert the document to plain dicts, lists and strings.

        Returns
        -------
        dict
            Mapping suitable for JSON, YAML or TOML serialization

        """
        data = asdict(self)
        data["contributors"] = list(self.contributors)
        data["tags"] = list(self.tags)
        data["faqs"] = [asdict(entry) for entry in self.faqs]
        data["changelog"] = [
            {"version": entry.version, "changes": list(entry.changes)} for entry in self.changelog
        ]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReadmeDocument":
        """Build a document from a mapping produced by :meth:`to_dict`.

        Unknown keys are ignored and missing keys take their defaults. Values
        are taken as-is; no sanitization happens here.

        Parameters
        ----------
        data : Mapping
            Serialized document

        Returns
        -------
        ReadmeDocument
            Reconstructed document

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {key: value for key, value in data.items() if key in known}

        if "header" in kwargs:
            kwargs["header"] = dict(kwargs["header"] or {})
        if "faqs" in kwargs:
            kwargs["faqs"] = tuple(
                entry if isinstance(entry, FAQEntry) else FAQEntry(str(entry["question"]), str(entry["answer"]))
                for entry in kwargs["faqs"] or ()
            )
        if "changelog" in kwargs:
            kwargs["changelog"] = tuple(
                entry
                if isinstance(entry, ChangelogEntry)
                else ChangelogEntry(str(entry["version"]), tuple(entry.get("changes") or ()))
                for entry in kwargs["changelog"] or ()
            )
        for name in ("contributors", "tags"):
            if name in kwargs:
                kwargs[name] = tuple(kwargs[name] or ())

        return cls(**kwargs)
