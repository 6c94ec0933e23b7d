"""clean_text.py
Normalizes whitespace in text pulled out of uploaded documents.
"""
import re


def clean_text(text: str) -> str:
    """
    Normalize line endings and collapse runs of whitespace.

    - `\\r\\n` becomes `\\n`
    - three or more newlines become a single blank line
    - tabs become spaces
    - runs of two or more spaces become one space

    Args:
        text (str): Raw extracted text.

    Returns:
        str: Cleaned text with leading/trailing whitespace removed.
    """
    text = text.replace("\r\n", "\n")
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = text.replace("\t", " ")
    # Only horizontal whitespace, so line structure survives for section detection
    text = re.sub(r"[ \f\v]{2,}", " ", text)
    return text.strip()


def count_words(text: str) -> int:
    """Return the number of whitespace separated words in `text`."""
    return len(text.split())
