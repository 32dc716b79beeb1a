# -*- coding: utf-8 -*-
"""Utility modules."""

from service_message_formatting.utils.text import (
    ELLIPSIS,
    PINNED_TEXT_LIMIT,
    clip_text,
    collapse_newlines,
    join_names,
)

__all__ = ["ELLIPSIS", "PINNED_TEXT_LIMIT", "clip_text", "collapse_newlines", "join_names"]
