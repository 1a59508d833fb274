class JistError(Exception):
    """Exception type used to propagate fatal jist errors."""
    kind = 'Error'

    def __init__(self, message: str):
        super().__init__(f"{self.kind}: {message}")
        self.message = message


class LexerError(JistError):
    kind = 'LexerError'


class ClassificationError(JistError):
    kind = 'ClassificationError'


class UnrecognizedToken(ClassificationError):
    pass


class MalformedLiteral(ClassificationError):
    pass


class JistSyntaxError(JistError):
    kind = 'SyntaxError'


class IncompleteDeclaration(JistSyntaxError):
    pass


class UnknownType(JistSyntaxError):
    pass


class UnhandledNode(JistSyntaxError):
    pass


class NameResolutionError(JistError):
    kind = 'NameError'


class JistArithmeticError(JistError):
    kind = 'ArithmeticError'


class DivisionByZero(JistArithmeticError):
    pass


class UnknownOperator(JistArithmeticError):
    pass


class OperandTypeError(JistArithmeticError):
    pass


class IntegerOverflow(JistArithmeticError):
    pass


class LoopLimitExceeded(JistError):
    kind = 'LoopLimitExceeded'


class CallDepthExceeded(JistError):
    kind = 'CallDepthExceeded'
