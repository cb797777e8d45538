"""Schemas of the ISA investigation input."""

from .investigation import Assay, Investigation, Person, Publication, Study

__all__ = ["Assay", "Investigation", "Person", "Publication", "Study"]
