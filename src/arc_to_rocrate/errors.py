"""Exceptions raised while generating an RO-Crate from an ARC."""


class ArcToRoCrateError(Exception):
    """Base exception class for all conversion errors."""


class InvestigationNotFoundError(ArcToRoCrateError):
    """Arises when the ARC root contains no ISA investigation JSON file."""


class InvalidInvestigationError(ArcToRoCrateError):
    """Arises when the ISA investigation JSON cannot be parsed or validated.

    For example, malformed JSON, missing required fields or an invalid
    public release date.
    """


class RoCrateGraphError(ArcToRoCrateError):
    """Arises when a derived node would replace one of the fixed RO-Crate nodes."""
