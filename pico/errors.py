class PicoError(Exception):
    """ Base class for all Pico errors"""
    kind = "Error"


class PicoSyntaxError(PicoError):
    """ Raised by the reader on malformed input"""
    kind = "SyntaxError"


class PicoUnboundSymbol(PicoError):
    """ Raised when a registered symbol has no value"""
    kind = "UnboundSymbol"


class PicoNoSuchSymbol(PicoError):
    """ Raised when a name was never registered in the symbol table"""
    kind = "NoSuchSymbol"


class PicoConstantViolation(PicoError):
    """ Raised when rebinding a constant symbol (t, nil or a builtin)"""
    kind = "ConstantViolation"


class PicoNotCallable(PicoError):
    """ Raised when the head of a call is not a function"""
    kind = "NotCallable"


class PicoArityError(PicoError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = "ArityError"


class PicoTypeError(PicoError):
    """ Raised when the types of arguments passed to a function are incorrect"""
    kind = "TypeError"


class PicoEvaluationError(PicoError):
    """ Raised when evaluation cannot continue (runaway recursion, bad builtin result)"""
    kind = "EvaluationError"


class PicoUserError(PicoError):
    """ Raised by the (error ...) builtin"""
    kind = "UserError"
