"""
Utilities package for Personal OS.

This package provides commonly-used utilities organized by domain:
- md: Markdown field extraction (sections, blockquotes, labeled fields,
  scores, frontmatter)
- fs: Dated record filenames and date parsing

Import commonly-used utilities directly from this package:
    from personal_os.utils import extract_section, extract_blockquote

Or import specific modules:
    from personal_os.utils import md, fs
"""

# Markdown field extraction
from .md import (
    is_placeholder,
    extract_section,
    extract_blockquote,
    extract_text_after,
    first_content_line,
    extract_labeled_field,
    parse_leading_int,
    parse_score,
    match_frontmatter,
    get_text_hash,
)

# Filesystem and date utilities
from .fs import (
    find_markdown_files,
    is_dated_review_file,
    is_iso_date,
    parse_iso_date,
    date_to_filename,
    date_from_filename,
)

__all__ = [
    # Markdown
    "is_placeholder",
    "extract_section",
    "extract_blockquote",
    "extract_text_after",
    "first_content_line",
    "extract_labeled_field",
    "parse_leading_int",
    "parse_score",
    "match_frontmatter",
    "get_text_hash",
    # Filesystem
    "find_markdown_files",
    "is_dated_review_file",
    "is_iso_date",
    "parse_iso_date",
    "date_to_filename",
    "date_from_filename",
]
