from __future__ import annotations


class ElyspError(Exception):
    """ Base class for all elysp errors"""
    pass


class ElyspSyntaxError(ElyspError):
    """ Raised by the reader on malformed source text"""

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
        snippet: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.snippet = snippet


class ElyspUnboundSymbol(ElyspError):
    """ Raised when a symbol has no binding in the environment chain"""


class ElyspArityError(ElyspError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class ElyspTypeError(ElyspError):
    """ Raised when an argument does not have the expected type tag"""

    def __init__(self, message: str, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ElyspNotCallable(ElyspError):
    """ Raised when applying something that is not a function or a list"""


class ElyspMalformedForm(ElyspError):
    """ Raised when a special form's arguments have the wrong shape"""


class ElyspUserError(ElyspError):
    """ Raised by the `error` primitive"""


class ElyspZeroDivisionError(ElyspError):
    """ Raised on division by zero"""


class ElyspStackOverflow(ElyspError):
    """ Raised when evaluation exhausts the host call stack"""
