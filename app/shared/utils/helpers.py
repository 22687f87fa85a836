# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# This file contains small shortcuts used by the share pages, like picking the first
# filled-in value from a list of options and encoding ids so they are safe inside links.

# 🧪 Purpose (Technical Summary):
# General purpose utility functions for ordered value fallback and URL component
# encoding compatible with what browsers produce for the same ids.

# 🔗 Dependencies:
# - urllib.parse: percent-encoding
# - typing: Type hints

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.knowledge (share payload resolution, canonical and share URLs)

from typing import Iterable, Optional, TypeVar
from urllib.parse import quote

T = TypeVar('T')

# Characters encodeURIComponent leaves alone on top of quote()'s unreserved set
_URI_COMPONENT_SAFE = "!~*'()"


def first_present(values: Iterable[Optional[T]], default: Optional[T] = None) -> Optional[T]:
    """
    Return the first value that is neither None nor an empty string.

    Args:
        values: Candidate values in priority order
        default: Returned when no candidate is present

    Returns:
        The first present value, or ``default``
    """
    for value in values:
        if value is None:
            continue
        if isinstance(value, str) and value == "":
            continue
        return value
    return default


def encode_uri_component(value: str) -> str:
    """Percent-encode a single URL component the way browsers' encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)
