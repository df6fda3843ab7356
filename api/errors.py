"""
Error taxonomy for the content API.

Each error knows the HTTP status it maps to, so route modules can translate
them without a lookup table. MetadataParseError is the exception to the
rule: it is always recovered where it is raised and never reaches a route.
"""


class ContentError(Exception):
    """Base class for content discovery failures"""
    status_code = 500

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidPathError(ContentError):
    """Path escapes the content root or contains traversal segments"""
    status_code = 400


class MissingPathError(ContentError):
    """A required path parameter was empty"""
    status_code = 400


class NotFoundError(ContentError):
    """Resolved file or directory does not exist"""
    status_code = 404


class NotDirectoryError(ContentError):
    """Path resolves to a file where a directory was expected"""
    status_code = 400


class InternalError(ContentError):
    """Unexpected I/O or parse failure"""
    status_code = 500


class MetadataParseError(ContentError):
    """Front matter or sidecar metadata could not be interpreted"""
    status_code = 500
