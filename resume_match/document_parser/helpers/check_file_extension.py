"""check_file_extension.py
Checks file extension and confirms that it's supported by the document parsers.
"""

import os
from typing import Iterable

from resume_match.exceptions import FileNotSupportedError

def check_file_extension(file_path: str, supported_extensions: Iterable[str]) -> str:
    """
    Validate and return the lowercase file extension for a given file path.
    Supports multi-dot extensions like '.tar.gz'.
    """
    supported_extensions = list(supported_extensions)
    file_name = os.path.basename(str(file_path)).lower()

    # Try to match the longest supported extension
    for ext in sorted(supported_extensions, key=len, reverse=True):
        if file_name.endswith(ext.lower()):
            return ext.lower()

    ext = os.path.splitext(file_name)[1]
    raise FileNotSupportedError(
        extension=ext,
        supported_extensions=supported_extensions,
        context="Failed in check_file_extension() call."
    )
