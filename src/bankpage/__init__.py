"""Bank Pager -- next/previous cursor paging over bank records."""

__version__ = "0.1.0"
