"""Make clean document pages look like they came off a scanner."""

__version__ = "0.1.0"
