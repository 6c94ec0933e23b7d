"""tokenize.py
Tokenizer shared by the keyword search index.
"""
import re
from typing import List

# Tokens this short or shorter carry no signal ("a", "of", "in")
MIN_TOKEN_LENGTH = 3


def tokenize(text: str) -> List[str]:
    """
    Lowercase `text`, replace non-word characters with spaces and drop tokens
    shorter than MIN_TOKEN_LENGTH.

    Example:
        >>> tokenize("Node.js & AWS, 5 yrs")
        ['node', 'aws', 'yrs']
    """
    cleaned = re.sub(r"[^\w\s]", " ", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]
