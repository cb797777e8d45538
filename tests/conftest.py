"""Shared fixtures for tests."""

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from arc_to_rocrate.arc_files import INVESTIGATION_JSON_SUFFIX
from arc_to_rocrate.config import ENV_PREFIX

ORCID = "https://orcid.org/0000-0001-2345-6789"
DOI = "https://doi.org/10.1234/abcd"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove converter settings of the calling shell from the environment."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX + "_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def investigation_data() -> dict[str, Any]:
    """Return ISA investigation JSON data touching every converted field."""
    return {
        "identifier": "my-arc",
        "title": "Not converted",
        "description": "An investigation",
        "publicReleaseDate": "2023-01-15",
        "people": [
            {"firstName": "Jane", "lastName": "Doe", "orcid": ORCID},
            {"firstName": "John", "lastName": "Smith"},
            "Max Mustermann",
        ],
        "publications": [{"doi": DOI, "title": "A paper"}],
        "studies": [
            {
                "identifier": "study-1",
                "assays": [
                    {"filename": "Results and Diagrams/isa.assay.xlsx"},
                    {"filename": "study1/data.csv"},
                ],
            },
            {"identifier": "study-2", "assays": [{"filename": "study1/other.csv"}]},
        ],
    }


@pytest.fixture
def make_arc(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing an ARC with the given investigation JSON."""

    def _make_arc(data: dict[str, Any] | str, name: str = "arc") -> Path:
        root = tmp_path / name
        json_path = root / INVESTIGATION_JSON_SUFFIX
        json_path.parent.mkdir(parents=True)
        content = data if isinstance(data, str) else json.dumps(data)
        json_path.write_text(content, encoding="utf-8")
        return root

    return _make_arc


@pytest.fixture
def arc_root(make_arc: Callable[..., Path], investigation_data: dict[str, Any]) -> Path:
    """Return an ARC root directory containing the sample investigation."""
    return make_arc(investigation_data)
