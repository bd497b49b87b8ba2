"""
Module: exporter.errors

Purpose:
    Exception hierarchy for the exporter.

Key Classes:
    - ExportError: Base class
    - NestingError: Malformed \\subp / \\subsubp nesting
    - DeliveryError: Failure inside a delivery transport

Used By:
    - exporter.markup.nesting: raises NestingError
    - exporter.markup.transformer: recovers from NestingError
    - exporter.delivery.transports: raises and catches DeliveryError
"""


class ExportError(Exception):
    """Error raised by the export engine."""
    pass


class NestingError(ExportError):
    """Sub-question tokens are nested in an impossible order."""

    def __init__(self, message: str, position: int = -1):
        super().__init__(message)
        self.position = position


class DeliveryError(ExportError):
    """Delivering an export (clipboard, browser, HTTP) failed."""
    pass
