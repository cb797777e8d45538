"""Generate RO-Crate metadata from ARC ISA investigation JSON."""

__version__ = "0.1.0"
