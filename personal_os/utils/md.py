#!/usr/bin/env python3
"""
md.py
-------------------
Markdown field extraction for Personal OS documents.

Review, life-map and goal files are loosely structured Markdown written by
hand from templates. This module provides the low-level primitives the
record codecs share:
- Section lookup by ``## Heading``
- Blockquote answers (``> text``)
- Bracket placeholders left over from templates (``[Your answer]``)
- ``**Label:** value`` fields
- Table score cells
- Frontmatter blocks
- Content hashing for change detection

None of these functions raise. Absent or malformed input always degrades
to ``None``, ``0`` or an empty string so that a half-filled document still
yields a usable record.
"""
from __future__ import annotations

# --- Standard library imports ---
import hashlib
import math
import re
from typing import List, Optional, Tuple

PLACEHOLDER_PATTERN = re.compile(r"^\[.*\]$")
FLOAT_PREFIX_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
INT_PREFIX_PATTERN = re.compile(r"^[+-]?\d+")

HORIZONTAL_RULE = "---"
SECTION_PREFIX = "## "


# ----- Placeholders -----
def is_placeholder(value: str) -> bool:
    """
    Check whether a value is a template placeholder.

    Examples:
        >>> is_placeholder("[Your win]")
        True
        >>> is_placeholder("  [YYYY-MM-DD] ")
        True
        >>> is_placeholder("Closed the deal [finally]")
        False
    """
    return bool(PLACEHOLDER_PATTERN.match(value.strip()))


# ----- Sections -----
def extract_section(content: str, header: str) -> Optional[str]:
    """
    Return the text of a ``## <header>`` section.

    The heading is matched case-insensitively against the whole heading
    line. The section runs from the line after the heading up to, but not
    including, the next ``---`` line, the next ``## `` heading, or the end
    of the document.

    Args:
        content: Full markdown document
        header: Heading text without the ``## `` prefix

    Returns:
        Section text (may be empty), or None if the heading is absent

    Examples:
        >>> extract_section("## Win\\n\\n> Shipped\\n\\n---\\n", "win")
        '\\n> Shipped\\n'
        >>> extract_section("# Title", "Win") is None
        True
    """
    lines = content.split("\n")
    target = f"{SECTION_PREFIX}{header}".lower()

    start = None
    # The heading must be followed by a line break to open a section
    for i, line in enumerate(lines[:-1]):
        if line.rstrip().lower() == target:
            start = i + 1
            break

    if start is None:
        return None

    section: List[str] = []
    for line in lines[start:]:
        if line.rstrip() == HORIZONTAL_RULE or line.startswith(SECTION_PREFIX):
            break
        section.append(line)

    return "\n".join(section)


def extract_blockquote(section: str) -> Optional[str]:
    """
    Collect the first blockquote in a section as a single line.

    Contiguous lines starting with ``>`` are stripped of the marker and one
    following space, trimmed, and joined with single spaces. Blank quoted
    lines are skipped.

    Args:
        section: Section text, usually from extract_section()

    Returns:
        The quoted text, or None if there is no quote, it is empty, or it
        is a bracket placeholder

    Examples:
        >>> extract_blockquote("*Caption*\\n\\n> First line\\n> second line\\n")
        'First line second line'
        >>> extract_blockquote("> [Your win]") is None
        True
    """
    quoted: List[str] = []
    in_quote = False

    for line in section.split("\n"):
        if line.startswith(">"):
            in_quote = True
            text = line[1:]
            if text.startswith(" "):
                text = text[1:]
            text = text.strip()
            if text:
                quoted.append(text)
        elif in_quote:
            break

    result = " ".join(quoted).strip()
    if not result or is_placeholder(result):
        return None
    return result


def extract_text_after(section: str, prompt: str) -> Optional[str]:
    """
    Return the first non-blank line after a prompt line.

    Used for free-text answers written under a question or an italic
    caption rather than in a blockquote.

    Args:
        section: Section text
        prompt: Prompt line content (matched case-insensitively)

    Returns:
        Trimmed answer line, or None if missing, blank or a placeholder
    """
    lines = section.split("\n")
    needle = prompt.lower()

    for i, line in enumerate(lines):
        if line.strip().lower().endswith(needle):
            for candidate in lines[i + 1 :]:
                value = candidate.strip()
                if value:
                    return None if is_placeholder(value) else value
            return None

    return None


def first_content_line(section: str) -> Optional[str]:
    """
    Return the first non-blank line that is neither italic nor a placeholder.

    Fallback for sections whose caption line was removed by hand.
    """
    for line in section.split("\n"):
        value = line.strip()
        if value and not is_placeholder(value) and not value.startswith("*"):
            return value
    return None


# ----- Labeled fields -----
def extract_labeled_field(content: str, label: str) -> Optional[str]:
    """
    Return the first token after a ``**<label>:**`` field.

    Whitespace (including line breaks) between the label and the value is
    skipped, so a blank field picks up whatever token follows it; callers
    validate the token's format.

    Examples:
        >>> extract_labeled_field("**Date:** 2024-12-31", "Date")
        '2024-12-31'
        >>> extract_labeled_field("**Energy level (1-10):** [ ]", "Energy level (1-10)")
        '['
    """
    match = re.search(rf"\*\*{re.escape(label)}:\*\*\s*(\S+)", content)
    return match.group(1) if match else None


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a token, or None.

    Examples:
        >>> parse_leading_int("7")
        7
        >>> parse_leading_int("8/10")
        8
        >>> parse_leading_int("[") is None
        True
    """
    if value is None:
        return None
    match = INT_PREFIX_PATTERN.match(value.strip())
    return int(match.group(0)) if match else None


# ----- Scores -----
def parse_score(cell: str) -> int:
    """
    Parse a table score cell.

    The leading decimal number is truncated toward zero. Empty and
    non-numeric cells give 0. No clamping happens here.

    Examples:
        >>> parse_score("7.9")
        7
        >>> parse_score("")
        0
        >>> parse_score("abc")
        0
        >>> parse_score("-3")
        -3
    """
    trimmed = cell.strip()
    if not trimmed:
        return 0

    match = FLOAT_PREFIX_PATTERN.match(trimmed)
    if not match:
        return 0

    parsed = float(match.group(0))
    if not math.isfinite(parsed):
        return 0
    return math.trunc(parsed)


# ----- Frontmatter -----
def match_frontmatter(content: str) -> Optional[Tuple[str, str]]:
    """
    Split a leading ``---`` frontmatter block from the body.

    Expected format:
        ---
        status: on-track
        ---

        Body content here...

    The closing delimiter must be followed by a line break. Blank lines at
    the start of the body are dropped.

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body), or None when the document has no
        complete frontmatter block

    Examples:
        >>> match_frontmatter("---\\nstatus: behind\\n---\\n\\nBody")
        ('status: behind', 'Body')
        >>> match_frontmatter("No frontmatter") is None
        True
    """
    lines = content.split("\n")
    if not lines or lines[0].rstrip() != HORIZONTAL_RULE:
        return None

    for i in range(2, len(lines) - 1):
        if lines[i].rstrip() == HORIZONTAL_RULE:
            frontmatter = "\n".join(lines[1:i])
            body_lines = lines[i + 1 :]
            while body_lines and body_lines[0].strip() == "":
                body_lines.pop(0)
            return frontmatter, "\n".join(body_lines)

    return None


# ----- Content Hashing -----
def get_text_hash(text: str) -> str:
    """
    Compute MD5 hash of text content for change detection.

    Note: MD5 is used for change detection only, not cryptographic security.

    Examples:
        >>> get_text_hash("Hello, world!")
        '6cd3556deb0da54bca060b4c39479839'
    """
    return hashlib.md5(text.encode("utf-8")).hexdigest()
