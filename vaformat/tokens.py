"""
Token estimates for the generated artifact.

The artifact is usually pasted into a language model, so the CLI can
report how many tokens it holds.  Counting uses `tiktoken`; the first
use of an encoding may need to download its vocabulary.
"""

from __future__ import annotations

import tiktoken

DEFAULT_ENCODING = "cl100k_base"


def estimate_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Return the number of tokens `text` encodes to under `encoding_name`."""
    encoding = tiktoken.get_encoding(encoding_name)
    # Source files may contain literal special-token strings
    return len(encoding.encode(text, disallowed_special=()))
