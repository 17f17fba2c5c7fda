"""
File driver for the stemmer.

Reads a text file and stems every word in it. Failures are reported with the
messages users of the original command-line stemmer know:
- missing file:     "File <name> Not Found"
- unreadable file:  "Error In Reading <name>"

Size limit and decoding are checked up front, so a file is either stemmed
completely or not at all.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .stemmer.tokenizer import MAX_WORD_LENGTH, stem_text

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB


class DocumentError(Exception):
    """Base class for input file failures"""

    def __init__(self, message: str, filename: str, reason: str = ""):
        super().__init__(message)
        self.filename = filename
        self.reason = reason


class DocumentNotFoundError(DocumentError):
    """Input file does not exist"""

    def __init__(self, filename: str):
        super().__init__(f"File {filename} Not Found", filename)


class DocumentReadError(DocumentError):
    """Input file exists but cannot be read or decoded"""

    def __init__(self, filename: str, reason: str = ""):
        super().__init__(f"Error In Reading {filename}", filename, reason)


def read_document(
    path: Union[str, Path],
    encoding: str = "utf-8",
    max_size: int = MAX_FILE_SIZE,
) -> str:
    """
    Read a text file.

    Args:
        path: File path
        encoding: Text encoding of the file
        max_size: Largest accepted file size in bytes

    Returns:
        Decoded file content

    Raises:
        DocumentNotFoundError: If the file does not exist
        DocumentReadError: If the file is too large, unreadable or not decodable
    """
    filename = str(path)
    path = Path(path)

    try:
        with open(path, "rb") as f:
            content = f.read(max_size + 1)
    except FileNotFoundError:
        raise DocumentNotFoundError(filename)
    except OSError as e:
        raise DocumentReadError(filename, str(e)) from e

    if len(content) > max_size:
        raise DocumentReadError(
            filename,
            f"File is too large (maximum allowed: {max_size / 1024 / 1024:.1f}MB)",
        )

    try:
        text = content.decode(encoding)
    except UnicodeDecodeError as e:
        raise DocumentReadError(filename, f"Not valid {encoding} text: {e}") from e
    except LookupError as e:
        raise DocumentReadError(filename, f"Unknown encoding: {encoding}") from e

    logger.debug(f"Read {len(content)} bytes from {filename}")
    return text


def stem_file(
    path: Union[str, Path],
    verb_pass: bool = True,
    max_word_length: Optional[int] = MAX_WORD_LENGTH,
    encoding: str = "utf-8",
    max_size: int = MAX_FILE_SIZE,
) -> str:
    """
    Read a file and replace every word in it with its stem.

    Raises:
        DocumentNotFoundError, DocumentReadError: See read_document
    """
    text = read_document(path, encoding=encoding, max_size=max_size)
    result = stem_text(text, verb_pass=verb_pass, max_word_length=max_word_length)
    logger.info(f"Stemmed {path} ({len(text)} chars)")
    return result
