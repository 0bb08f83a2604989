"""Errors raised by the format pipeline."""


class LibraryLoaderError(Exception):
    """Base class for library loader errors."""


class EcadNotFound(LibraryLoaderError, ValueError):
    """The label does not name a supported ECAD format."""

    def __init__(self, label):
        self.label = label
        super().__init__(f"Unknown ECAD format: {label!r}")


class UnsupportedOperation(LibraryLoaderError, NotImplementedError):
    """The ECAD format cannot go through the given pipeline step.

    Raised when a non-ECAD archive (e.g. a raw zip bundle) is routed
    through extraction or processing.
    """

    def __init__(self, ecad, operation: str):
        self.ecad = ecad
        self.operation = operation
        super().__init__(f"Cannot {operation} '{ecad}' archives: "
                         f"save the downloaded archive as-is instead")


class MalformedFragment(LibraryLoaderError, ValueError):
    """A library fragment could not be merged."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"{path}: {reason}")
