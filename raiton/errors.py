from __future__ import annotations


class RaitonError(Exception):
    """ Base class for all Raiton errors"""
    pass


class RaitonSyntaxError(RaitonError):
    """ Raised when the parser meets a token it cannot accept.

    Lexical problems (an unterminated string, an unknown character) reach the
    parser as EOF or ILLEGAL tokens and are reported through this class too.
    """

    def __init__(self, message: str, kind: str | None = None, literal: str | None = None,
                 line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.kind = kind
        self.literal = literal
        self.line = line
        self.column = column


class RaitonRuntimeError(RaitonError):
    """ Base class for errors raised while evaluating an AST"""
    pass


class RaitonUnboundName(RaitonRuntimeError):
    """ Raised when a name is bound neither in the environment nor the builtins"""


class RaitonArityError(RaitonRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class RaitonTypeError(RaitonRuntimeError):
    """ Raised when a value of the wrong kind is used"""


class RaitonRangeError(RaitonRuntimeError):
    """ Raised when an index is out of bounds or an array size does not match"""


class RaitonEmptyStackError(RaitonRuntimeError):
    """ Raised when evaluating a node that yields no value"""
