"""Locate, read and write the metadata files of an ARC."""

import json
import logging
from pathlib import Path
from typing import Any

from opentelemetry import trace
from pydantic import ValidationError

from .errors import InvalidInvestigationError, InvestigationNotFoundError
from .rocrate import METADATA_FILE_NAME
from .schemas import Investigation

logger = logging.getLogger(__name__)

INVESTIGATION_JSON_SUFFIX = Path(".arc/Json/isa.investigation.json")


def resolve_root(path: str | Path | None = None) -> Path:
    """Resolve the ARC root directory.

    An empty or missing path means the current working directory. Relative
    paths are joined onto the current working directory without collapsing
    ``..`` segments.
    """
    if not path:
        return Path.cwd()
    root = Path(path)
    if root.is_absolute():
        return root
    return Path.cwd() / root


def investigation_path(root: Path) -> Path:
    """Return the path of the ISA investigation JSON below an ARC root."""
    return root / INVESTIGATION_JSON_SUFFIX


def load_investigation(path: Path) -> Investigation:
    """Read and validate an ISA investigation JSON file.

    Args:
        path: Path to ``isa.investigation.json``.

    Returns:
        The validated investigation.

    Raises:
        InvestigationNotFoundError: If the file does not exist.
        InvalidInvestigationError: If the file is no valid JSON or does not
            match the investigation schema.
    """
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span("read_investigation", attributes={"path": str(path)}):
        if not path.is_file():
            raise InvestigationNotFoundError(f"File '{path}' not found.")

        try:
            data = json.loads(path.read_text(encoding="utf-8-sig"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidInvestigationError(f"File '{path}' contains malformed JSON: {e}") from e

        try:
            investigation = Investigation.model_validate(data)
        except ValidationError as e:
            raise InvalidInvestigationError(f"File '{path}' is no valid ISA investigation: {e}") from e

        logger.debug("Loaded investigation '%s' from %s", investigation.identifier, path)
        return investigation


def write_rocrate(root: Path, document: dict[str, Any]) -> Path:
    """Write the RO-Crate metadata document into the ARC root.

    An existing file is overwritten. Lone surrogates, which UTF-8 cannot
    encode, are written as JSON escapes (e.g. ``\\ud800``).

    Returns:
        The path of the written file.
    """
    tracer = trace.get_tracer(__name__)
    output_path = root / METADATA_FILE_NAME
    with tracer.start_as_current_span("write_rocrate", attributes={"path": str(output_path)}):
        content = json.dumps(document, indent=1, ensure_ascii=False).encode("utf-8", errors="backslashreplace")
        output_path.write_bytes(content)
        return output_path
