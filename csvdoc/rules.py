"""
Deterministic conversion rules.

This file exists to make the fixed parts of the pipeline explicit.
"""

PRIMARY_ENCODING = "utf-8"
FALLBACK_ENCODING = "cp932"  # Shift_JIS family (Windows-31J)
REPLACEMENT_CHAR = "\ufffd"
BOM = "\ufeff"

TAB_DELIMITER = "\t"
DEFAULT_DELIMITER = ","
SYNTHETIC_COLUMN_PREFIX = "column_"

MARKDOWN_RECORD_SEPARATOR = "---"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_ROOT_TAG = "root"
XML_ITEM_TAG = "item"
