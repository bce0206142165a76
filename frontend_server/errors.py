"""
Exceptions raised while handling a request.

Every one of them ends up in the error stage and is reported to the client as
a uniform 500 response.
"""


class FrontendServerError(Exception):
    """Base class for request handling failures."""


class EntryDocumentMissing(FrontendServerError):
    def __init__(self, path):
        super().__init__(f"Entry document not found: {path}")
        self.path = path


class RequestBodyError(FrontendServerError):
    """The request body could not be decoded."""
