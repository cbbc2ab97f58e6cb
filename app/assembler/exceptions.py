class AssemblerError(Exception):
    """Base exception for prompt assembly errors."""


class ExtractionTransportError(AssemblerError):
    """Raised when the extraction endpoint cannot be reached or times out."""


class AssemblerBusyError(AssemblerError):
    """Raised when generate() is called while a document is still processing."""
