"""Errors raised by the language resolver."""


class NoLanguageFoundError(LookupError):
    """No source yielded a language and no fallback is configured."""

    def __init__(self, message: str = "Sorry, couldn't find a valid language to redirect to."):
        super().__init__(message)
        self.message = message
