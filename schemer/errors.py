"""Error taxonomy for schemer.

Errors are raised where they are detected and reported once by the nearest
evaluation boundary, which then yields the INVALID value. `str(error)` is the
diagnostic written to the output stream.
"""


class SchemerError(Exception):
    """ Base class for all user-facing schemer errors"""
    kind = "Error"


class ArityMismatchError(SchemerError):
    """ Raised when a procedure or special form gets the wrong number of operands"""
    kind = "ArityMismatch"

    def __init__(self, name: str, expected: str, given: int):
        self.name = name
        self.expected = expected
        self.given = given
        super().__init__(
            f"{name}: arity mismatch;\n"
            f" the expected number of arguments does not match the given number\n"
            f"  expected: {expected}\n"
            f"  given: {given}"
        )


class NotAProcedureError(SchemerError):
    """ Raised when the head of an application is not callable"""
    kind = "NotAProcedure"

    def __init__(self, given: str):
        self.given = given
        super().__init__(
            "application: not a procedure;\n"
            " expected a procedure that can be applied to arguments\n"
            f"  given: {given}"
        )


class ContractViolationError(SchemerError):
    """ Raised when an argument fails a required predicate"""
    kind = "ContractViolation"

    def __init__(self, name: str, expected: str, given: str):
        self.name = name
        self.expected = expected
        self.given = given
        super().__init__(
            f"{name}: contract violation\n"
            f"  expected: {expected}\n"
            f"  given: {given}"
        )


class UndefinedError(SchemerError):
    """ Raised when a variable is not bound anywhere in the environment chain"""
    kind = "Undefined"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name}: undefined;\n cannot reference an identifier before its definition")


class MissingProcedureError(SchemerError):
    """ Raised when an empty list is evaluated as code"""
    kind = "MissingProcedure"

    def __init__(self):
        super().__init__(
            "#%app: missing procedure expression;\n"
            " probably originally (), which is an illegal empty application"
        )


class BadSyntaxError(SchemerError):
    """ Raised when a special form has a malformed shape"""
    kind = "BadSyntax"

    def __init__(self, name: str, detail: str = ""):
        self.name = name
        self.detail = detail
        super().__init__(f"{name}: bad syntax" + (f" ({detail})" if detail else ""))


class ReadSyntaxError(SchemerError):
    """ Raised when the reader cannot build a form from the tokens"""
    kind = "ReadSyntax"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"read-syntax: {detail}")


class DivisionByZeroError(SchemerError):
    """ Raised when a division or remainder has a zero divisor"""
    kind = "DivisionByZero"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name}: division by zero")


class SchemerInternalError(RuntimeError):
    """ Raised when a value invariant is broken; signals a bug, never user input"""
