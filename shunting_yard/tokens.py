from enum import Enum

from .errors import InvalidTokenError

# A token is classified by two class attributes:
#   precedence     0 for operands, > 0 for operators (higher binds tighter)
#   associativity  only consulted between operators of equal precedence


class Associativity(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    NONE = "NONE"


class IToken:
    precedence = 0
    associativity = Associativity.LEFT

    def __init__(self, value=None, start=None, end=None):
        self.value = value
        self.start = start
        self.end = end

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.value!r}>"


class OperandToken(IToken):
    pass


class OperatorToken(IToken):
    """
    Must provide a precedence value greater than 0
    Associativity is left by default
    """

    precedence = None
    symbol = None

    def __init__(self, value=None, start=None, end=None):
        super().__init__(self.symbol if value is None else value, start, end)


# Built in tokens


class Number(OperandToken):
    pass


class Variable(OperandToken):
    pass


class Equality(OperatorToken):
    associativity = Associativity.NONE
    precedence = 1
    symbol = "=="


class Addition(OperatorToken):
    precedence = 2
    symbol = "+"


class Subtraction(OperatorToken):
    precedence = 2
    symbol = "-"


class Multiplication(OperatorToken):
    precedence = 3
    symbol = "*"


class Division(OperatorToken):
    precedence = 3
    symbol = "/"


class Power(OperatorToken):
    associativity = Associativity.RIGHT
    precedence = 4
    symbol = "^"


class ITokenCollection(Enum):
    @classmethod
    def from_str(cls, string):
        return cls[string.upper()]

    @classmethod
    def list(cls):
        return list(map(lambda c: c.value, cls))


class OperandTokens(ITokenCollection):
    NUMBER = Number
    VARIABLE = Variable


class ArithmeticTokens(ITokenCollection):
    ADDITION = Addition
    SUBTRACTION = Subtraction
    MULTIPLICATION = Multiplication
    DIVISION = Division
    POWER = Power


class ComparisonTokens(ITokenCollection):
    EQUALITY = Equality


class Tokenlib:
    operands = OperandTokens
    arithmetic = ArithmeticTokens
    comparison = ComparisonTokens

    @staticmethod
    def load(*args):
        seen = []
        for arg in args:
            for t in arg.list():
                if t not in seen:
                    seen.append(t)
        return seen

    @staticmethod
    def validate(classes):
        for cls in classes:
            if not (isinstance(cls, type) and issubclass(cls, IToken)):
                raise InvalidTokenError(f"{cls!r} is not a token")
            if issubclass(cls, OperatorToken):
                p = cls.precedence
                if not isinstance(p, int) or isinstance(p, bool) or p <= 0:
                    raise InvalidTokenError(
                        f"class '{cls.__name__}' has no precedence. OperatorToken must have a precedence greater than 0"
                    )
        return classes
