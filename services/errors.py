"""Exceptions raised by the translation services"""


class RemoteTranslationError(RuntimeError):
    """The remote translator failed: network error, non-2xx status, or an empty/malformed payload"""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
