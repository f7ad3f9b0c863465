class MiniLispError(Exception):
    """ Base class for all recoverable MiniLisp errors"""
    pass

class MiniLispParseError(MiniLispError):
    """ Raised when the input text is not a well-formed expression"""

class MiniLispEvalError(MiniLispError):
    """ Raised when an expression cannot be evaluated"""

class MiniLispUnboundVariable(MiniLispEvalError):
    """ Raised when a symbol has no binding"""

class MiniLispArityError(MiniLispEvalError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class MiniLispTypeError(MiniLispEvalError):
    """ Raised when an operand has the wrong variant"""

class MiniLispDivideByZero(MiniLispEvalError):
    """ Raised on integer division by zero"""

class MiniLispUnknownOperator(MiniLispEvalError):
    """ Raised when a head symbol is neither a builtin nor a defined function"""

class MiniLispEmptyListEval(MiniLispEvalError):
    """ Raised when evaluating ()"""


class MiniLispStackExhaustion(Exception):
    """ Raised when evaluation exhausts the host call stack.

    Not a MiniLispError: hosts that recover from MiniLispError per input
    must not recover from this one.
    """
