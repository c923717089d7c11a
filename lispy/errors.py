

class LispyError(Exception):
    """ Base class for all Lispy errors"""
    kind = "Error"


class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = "ArityError"


class LispyTypeError(LispyError):
    """ Raised when an argument is the wrong kind of value"""
    kind = "TypeError"


class LispyEmptyListError(LispyError):
    """ Raised when a list operation needs a non-empty Q-Expression"""
    kind = "EmptyListError"


class LispyUnboundSymbol(LispyError):
    """ Raised when a symbol is used before it is bound"""
    kind = "UnresolvedSymbolError"


class LispyDivisionByZero(LispyError):
    """ Raised when / or % is given a zero divisor"""
    kind = "DivisionByZeroError"


class LispyMalformedVariadic(LispyError):
    """ Raised when '&' is not followed by exactly one formal"""
    kind = "MalformedVariadicError"


class LispyNumericParseError(LispyError):
    """ Raised when a number literal does not fit a signed 64-bit integer"""
    kind = "NumericParseError"


class LispySyntaxError(LispyError):
    """ Raised when there is a syntax error"""
    kind = "SyntaxError"

    def __init__(self, message: str, line: int = 0, col: int = 0):
        super().__init__(message)
        self.line = line
        self.col = col


class LispyRecursionError(LispyError):
    """ Raised when evaluation nests deeper than the Python stack allows"""
    kind = "RecursionError"
