#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the wpreadme library.

This module centralizes the hardcoded values used across the parser, the
generator and the sanitization layer. Constants are organized by category:

1. Type Definitions - Literal types and type aliases
2. Field Limits - Length caps and item caps
3. Generator Defaults - Values substituted for absent form fields
4. Format Patterns - Header keys and fixed output lines
5. Upload and CLI Constants - File checks and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ValidationKind = Literal["username", "version", "tag", "url", "email"]
OutputFormat = Literal["json", "yaml", "toml"]

# =============================================================================
# Field Limits
# =============================================================================

DEFAULT_MAX_INPUT_LENGTH = 50000
DEFAULT_SANITIZE_MAX_LENGTH = 1000

MAX_TITLE_LENGTH = 100
MAX_SHORT_DESCRIPTION_LENGTH = 150
MAX_DESCRIPTION_LENGTH = 5000
MAX_INSTALLATION_LENGTH = 2000
MAX_FAQ_QUESTION_LENGTH = 200
MAX_FAQ_ANSWER_LENGTH = 1000
MAX_CHANGELOG_VERSION_LENGTH = 20
MAX_CHANGELOG_CHANGE_LENGTH = 200
MAX_CONTRIBUTOR_LENGTH = 50
MAX_TAG_LENGTH = 30
MAX_VERSION_LENGTH = 20
MAX_HEADER_VALUE_LENGTH = 1000

MAX_CONTRIBUTORS = 10
MAX_TAGS = 5
MAX_FAQS = 20
MAX_CHANGELOGS = 20

# Fallback short description must be longer than this to be accepted
MIN_FALLBACK_SHORT_DESCRIPTION_LENGTH = 5

# =============================================================================
# Generator Defaults
# =============================================================================

DEFAULT_TITLE = "Plugin Name"
DEFAULT_SHORT_DESCRIPTION = "Short description here."
DEFAULT_CONTRIBUTORS = "username"
DEFAULT_TAGS = "plugin"
DEFAULT_VERSION = "1.0.0"
DEFAULT_REQUIRES_AT_LEAST = "5.0"
DEFAULT_TESTED_UP_TO = "6.8"
DEFAULT_REQUIRES_PHP = "7.4"
DEFAULT_DESCRIPTION = "Detailed description here."
DEFAULT_INSTALLATION = "1. Upload to /wp-content/plugins/\n2. Activate the plugin"

PLACEHOLDER_FAQ_QUESTION = "How do I use this plugin?"
PLACEHOLDER_FAQ_ANSWER = "Just install and activate the plugin through the WordPress admin."
PLACEHOLDER_CHANGELOG_VERSION = "1.0.0"
PLACEHOLDER_CHANGELOG_CHANGE = "Initial release"

# =============================================================================
# Format Patterns
# =============================================================================

LICENSE_LINE = "License: GPLv2 or later"
LICENSE_URI_LINE = "License URI: https://www.gnu.org/licenses/gpl-2.0.html"

# Recognized header keys (lowercased) mapped to their canonical key
HEADER_KEY_ALIASES: dict[str, str] = {
    "contributors": "contributors",
    "contributor": "contributors",
    "tags": "tags",
    "tag": "tags",
    "requires at least": "requires at least",
    "requires wordpress": "requires at least",
    "tested up to": "tested up to",
    "stable tag": "stable tag",
    "requires php": "requires php",
}

SECTION_DESCRIPTION = "Description"
SECTION_INSTALLATION = "Installation"
SECTION_FAQ = "Frequently Asked Questions"
SECTION_CHANGELOG = "Changelog"

# =============================================================================
# Upload and CLI Constants
# =============================================================================

MAX_UPLOAD_SIZE_BYTES = 102400
ALLOWED_UPLOAD_EXTENSIONS: tuple[str, ...] = (".txt",)
DEFAULT_OUTPUT_FILENAME = "readme.txt"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INPUT_ERROR = 3
