"""wpreadme - parse and generate WordPress plugin readme.txt files.

wpreadme converts between the semi-structured ``readme.txt`` format used by
WordPress plugins and a structured :class:`ReadmeDocument`:

- :func:`parse_readme` recovers the title, header fields, short description,
  Description and Installation sections, FAQ entries and changelog entries
  from hand-written text. Malformed sections are skipped, never fatal.
- :func:`generate_readme` renders a document, or a plain mapping of form-field
  values, as canonical readme text with defaults for anything missing.
- :func:`sanitize` and :func:`validate` are the shared escaping and format
  checks applied to every field in both directions.

Both directions are pure functions over strings and immutable values; they
perform no I/O and can be called concurrently without locking.

Examples
--------
    >>> from wpreadme import parse_readme, generate_readme
    >>> doc = parse_readme("=== Foo ===\\n\\nStable tag: 2.0.0\\n\\nDoes foo.\\n")
    >>> doc.version
    '2.0.0'
    >>> print(generate_readme(doc).splitlines()[0])
    === Foo ===

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from wpreadme.api import generate_readme, normalize_readme, parse_readme
from wpreadme.document import ChangelogEntry, FAQEntry, ReadmeDocument
from wpreadme.exceptions import (
    FileError,
    InvalidInputError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ValidationError,
    WpReadmeError,
)
from wpreadme.options import ReadmeLimits, ReadmeParserOptions, ReadmeRendererOptions
from wpreadme.parsers.readme import ReadmeParser
from wpreadme.renderers.readme import ReadmeRenderer
from wpreadme.utils.sanitize import sanitize, validate

__version__ = "1.0.0"

__all__ = [
    "ChangelogEntry",
    "FAQEntry",
    "FileError",
    "InvalidInputError",
    "InvalidOptionsError",
    "ParsingError",
    "ReadmeDocument",
    "ReadmeLimits",
    "ReadmeParser",
    "ReadmeParserOptions",
    "ReadmeRenderer",
    "ReadmeRendererOptions",
    "RenderingError",
    "ValidationError",
    "WpReadmeError",
    "__version__",
    "generate_readme",
    "normalize_readme",
    "parse_readme",
    "sanitize",
    "validate",
]
