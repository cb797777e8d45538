"""Build the RO-Crate JSON-LD graph of an ARC from its ISA investigation.

The graph is kept as a mapping from ``@id`` to node while it is built, so
every node exists once. ``RoCrateBuilder.finalize`` flattens it into the
``@graph`` list in insertion order: the metadata descriptor, the root
dataset, the assays dataset and then one dataset per assay folder.
"""

import logging
from typing import Any

from opentelemetry import trace

from .errors import RoCrateGraphError
from .schemas import Assay, Investigation, Person, Publication
from .utils import format_datetime, to_valid_id

logger = logging.getLogger(__name__)

ROCRATE_CONTEXT = "https://w3id.org/ro/crate/1.1/context"
ROCRATE_SPEC = "https://w3id.org/ro/crate/1.1"
METADATA_FILE_NAME = "ro-crate-metadata.json"
ROOT_ID = "./"
ASSAYS_ID = "assays/"
MISSING_ORCID_PREFIX = "MISSING_ORCID:"
# License and assay name/description are not available from ISA yet.
PLACEHOLDER = "TODO"

Node = dict[str, Any]


def get_ref(target: Node | str) -> dict[str, str]:
    """Return a JSON-LD reference to a node or an identifier."""
    return {"@id": target["@id"] if isinstance(target, dict) else target}


def person_reference_id(person: Person) -> str:
    """Return the identifier an author is referenced by.

    The ORCID is used as is. Without one, a ``MISSING_ORCID:`` placeholder
    carrying the person's name is returned.
    """
    if person.orcid:
        return person.orcid
    return f"{MISSING_ORCID_PREFIX}{person.first_name} {person.last_name}"


def assay_id(assay: Assay) -> str:
    """Return the assay dataset identifier, i.e. the encoded assay folder.

    Only ``/`` separates folders; backslash separated paths stay in one piece.
    """
    return to_valid_id(assay.filename.split("/")[0])


class RoCrateBuilder:
    """Incrementally builds the RO-Crate graph of one ARC."""

    def __init__(self) -> None:
        self._graph: dict[str, Node] = {}
        self._add_node(
            {
                "@type": "CreativeWork",
                "@id": METADATA_FILE_NAME,
                "conformsTo": {"@id": ROCRATE_SPEC},
                "about": {"@id": ROOT_ID},
                "description": "RO-Crate Metadata File Descriptor",
            }
        )
        self._add_node(
            {
                "@id": ROOT_ID,
                "@type": "Dataset",
                "author": [],
                "citation": [],
                "hasPart": [{"@id": ASSAYS_ID}],
            }
        )
        self._add_node(
            {
                "name": "assays",
                "@id": ASSAYS_ID,
                "@type": "Dataset",
                "hasPart": [],
            }
        )
        self._fixed_ids = frozenset(self._graph)

    def _add_node(self, node: Node) -> None:
        self._graph[node["@id"]] = node

    @property
    def root_dataset(self) -> Node:
        """The root data entity describing the ARC as a whole."""
        return self._graph[ROOT_ID]

    @property
    def assays_dataset(self) -> Node:
        """The dataset containing all assay datasets."""
        return self._graph[ASSAYS_ID]

    def set_investigation_info(self, investigation: Investigation) -> None:
        """Describe the root dataset by the investigation's own fields.

        Missing identifier or description leave out ``name`` or ``description``.
        """
        root = self.root_dataset
        if investigation.identifier is not None:
            root["name"] = investigation.identifier
        if investigation.description is not None:
            root["description"] = investigation.description
        root["datePublished"] = format_datetime(investigation.public_release_date)
        root["license"] = PLACEHOLDER

    def add_author(self, person: Person) -> None:
        """Reference a person as author of the root dataset."""
        self.root_dataset["author"].append(get_ref(person_reference_id(person)))

    def add_citation(self, publication: Publication) -> bool:
        """Reference a publication by its DOI.

        Returns:
            False if the publication has no DOI and was skipped.
        """
        if not publication.doi:
            logger.warning("Skipping publication without DOI")
            return False
        self.root_dataset["citation"].append(get_ref(publication.doi))
        return True

    def add_assay(self, assay: Assay) -> bool:
        """Add a dataset for the assay's folder and reference it from the assays dataset.

        Returns:
            False if a dataset for the same folder already exists.

        Raises:
            RoCrateGraphError: If the assay folder cannot be encoded as URI or
                collides with a fixed node.
        """
        try:
            node_id = assay_id(assay)
        except UnicodeEncodeError as e:
            raise RoCrateGraphError(f"Assay folder of {assay.filename!r} cannot be encoded as URI: {e}") from e
        if node_id in self._fixed_ids:
            raise RoCrateGraphError(f"Assay '{assay.filename}' would replace the RO-Crate node '{node_id}'")
        if node_id in self._graph:
            logger.debug("Assay folder '%s' already added, skipping '%s'", node_id, assay.filename)
            return False
        node = {
            "@id": node_id,
            "@type": "Dataset",
            "name": PLACEHOLDER,
            "description": PLACEHOLDER,
        }
        self.assays_dataset["hasPart"].append(get_ref(node))
        self._add_node(node)
        return True

    def finalize(self) -> dict[str, Any]:
        """Return the RO-Crate metadata document with the graph as list."""
        return {
            "@context": ROCRATE_CONTEXT,
            "@graph": list(self._graph.values()),
        }


def build_rocrate(investigation: Investigation) -> dict[str, Any]:
    """Translate an ISA investigation into an RO-Crate metadata document.

    Args:
        investigation: The validated ISA investigation.

    Returns:
        The JSON-LD document with ``@context`` and ``@graph``.

    Raises:
        RoCrateGraphError: If an assay folder collides with a fixed node.
    """
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span("build_rocrate") as span:
        builder = RoCrateBuilder()
        builder.set_investigation_info(investigation)

        for person in investigation.people:
            builder.add_author(person)

        citations = sum(builder.add_citation(publication) for publication in investigation.publications)

        assays = 0
        for study in investigation.studies:
            for assay in study.assays:
                assays += builder.add_assay(assay)

        span.set_attribute("authors", len(investigation.people))
        span.set_attribute("citations", citations)
        span.set_attribute("assays", assays)
        logger.debug(
            "Built RO-Crate graph with %d authors, %d citations and %d assays",
            len(investigation.people),
            citations,
            assays,
        )
        return builder.finalize()
