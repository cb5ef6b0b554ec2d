"""
Input validation and sanitization helpers for contact form fields.
Protects the outgoing email against HTML/script injection.
"""

import re
import html


MIN_MESSAGE_LENGTH = 10

# Basic mailbox pattern: local@domain.suffix, no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def clean_text(value) -> str:
    """Return stripped text, or an empty string for anything that is not a string."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def is_valid_email(email: str) -> bool:
    """Permissive format check, not full RFC 5322."""
    return bool(EMAIL_PATTERN.match(email))


def sanitize_text(text: str, preserve_newlines: bool = False) -> str:
    """
    Escape text for embedding in an HTML email body.

    Args:
        text: Input text to sanitize
        preserve_newlines: If True, newlines are rendered as <br>

    Returns:
        HTML-safe text
    """
    if not text:
        return ""

    text = html.escape(text.strip())

    if preserve_newlines:
        text = text.replace("\r\n", "\n").replace("\n", "<br>")

    return text
