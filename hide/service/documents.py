# hide/service/documents.py

"""Reading, serializing and writing JSON documents."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Union

from hide.core.exceptions import InputParseFailed, InputReadFailed, OutputWriteFailed

logger = logging.getLogger(__name__)


def read_document(path: Union[str, Path]) -> Any:
    """Reads and parses a JSON file.

    Raises:
        InputReadFailed: If the file is missing, unreadable or not UTF-8
        InputParseFailed: If the content is not valid JSON
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Reading input failed: {e}", extra={"input_path": str(path)})
        raise InputReadFailed(path, str(e)) from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parsing error: {e}", extra={"input_path": str(path)})
        raise InputParseFailed(path, str(e)) from e
    except RecursionError as e:
        raise InputParseFailed(path, "document is nested too deeply") from e

    logger.debug(
        "Input document parsed",
        extra={"input_path": str(path), "size": len(text)},
    )
    return document


def dump_document(document: Any, indent: int = 2) -> str:
    """Serializes a document pretty-printed, keeping key order."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def write_document(text: str, path: Optional[Union[str, Path]] = None) -> None:
    """Writes serialized output to a file, or to stdout when no path is given.

    Raises:
        OutputWriteFailed: If the output file cannot be written
    """
    if path is None:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        return

    path = Path(path)
    try:
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        logger.error(f"Writing output failed: {e}", extra={"output_path": str(path)})
        raise OutputWriteFailed(path, str(e)) from e

    logger.info("Output written", extra={"output_path": str(path)})
