"""
Helpers for reading uploaded translation content.
"""

from .mapping import read_json_mapping
from .tabular import read_sheet_rows
from .tags import parse_tags
from .uploads import saved_upload

__all__ = ["read_json_mapping", "read_sheet_rows", "parse_tags", "saved_upload"]
