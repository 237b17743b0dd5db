"""Base classes for parser and renderer options.

This module defines the foundation classes for the immutable configuration
values passed to the readme parser and generator.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from wpreadme import constants


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ReadmeLimits(CloneFrozenMixin):
    """Length caps and item caps applied to readme fields.

    Length caps are passed to :func:`~wpreadme.utils.sanitize.sanitize` for the
    matching field. Item caps bound the number of entries kept in a list field.

    Parameters
    ----------
    title, short_description, description, installation : int
        Length caps for the plain text fields
    faq_question, faq_answer : int
        Length caps for FAQ entries
    changelog_version, changelog_change : int
        Length caps for changelog entries
    contributor, tag : int
        Length caps for individual contributors and tags
    version : int
        Length cap for the stable tag
    header_value : int
        Length cap for a raw header value before it is split or interpreted,
        and for the free-form requires/tested version fields
    max_contributors, max_tags, max_faqs, max_changelogs : int
        Item caps

    """

    title: int = field(default=constants.MAX_TITLE_LENGTH, metadata={"help": "Maximum title length"})
    short_description: int = field(
        default=constants.MAX_SHORT_DESCRIPTION_LENGTH, metadata={"help": "Maximum short description length"}
    )
    description: int = field(
        default=constants.MAX_DESCRIPTION_LENGTH, metadata={"help": "Maximum Description section length"}
    )
    installation: int = field(
        default=constants.MAX_INSTALLATION_LENGTH, metadata={"help": "Maximum Installation section length"}
    )
    faq_question: int = field(default=constants.MAX_FAQ_QUESTION_LENGTH, metadata={"help": "Maximum FAQ question length"})
    faq_answer: int = field(default=constants.MAX_FAQ_ANSWER_LENGTH, metadata={"help": "Maximum FAQ answer length"})
    changelog_version: int = field(
        default=constants.MAX_CHANGELOG_VERSION_LENGTH, metadata={"help": "Maximum changelog version length"}
    )
    changelog_change: int = field(
        default=constants.MAX_CHANGELOG_CHANGE_LENGTH, metadata={"help": "Maximum changelog change length"}
    )
    contributor: int = field(default=constants.MAX_CONTRIBUTOR_LENGTH, metadata={"help": "Maximum contributor length"})
    tag: int = field(default=constants.MAX_TAG_LENGTH, metadata={"help": "Maximum tag length"})
    version: int = field(default=constants.MAX_VERSION_LENGTH, metadata={"help": "Maximum version string length"})
    header_value: int = field(
        default=constants.MAX_HEADER_VALUE_LENGTH, metadata={"help": "Maximum raw header value length"}
    )
    max_contributors: int = field(default=constants.MAX_CONTRIBUTORS, metadata={"help": "Maximum contributors kept"})
    max_tags: int = field(default=constants.MAX_TAGS, metadata={"help": "Maximum tags kept"})
    max_faqs: int = field(default=constants.MAX_FAQS, metadata={"help": "Maximum FAQ entries kept"})
    max_changelogs: int = field(default=constants.MAX_CHANGELOGS, metadata={"help": "Maximum changelog entries kept"})

    def __post_init__(self) -> None:
        """Validate that every limit is a non-negative integer.

        Raises
        ------
        ValueError
            If any limit is negative or not an integer.

        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{f.name} must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative, got {value}")


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    limits : ReadmeLimits
        Field length caps and item caps

    """

    limits: ReadmeLimits = field(
        default_factory=ReadmeLimits,
        metadata={"help": "Field length caps and item caps", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the limits object type."""
        if not isinstance(self.limits, ReadmeLimits):
            raise TypeError(f"limits must be ReadmeLimits, got {type(self.limits).__name__}")


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    limits : ReadmeLimits
        Field length caps and item caps

    """

    limits: ReadmeLimits = field(
        default_factory=ReadmeLimits,
        metadata={"help": "Field length caps and item caps", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the limits object type."""
        if not isinstance(self.limits, ReadmeLimits):
            raise TypeError(f"limits must be ReadmeLimits, got {type(self.limits).__name__}")
