from .containers import Queue, Stack
from .errors import EmptyContainerError, InvalidTokenError, ShuntingYardError
from .parser import ShuntingYard, postfix_values, produce_postfix
from .tokens import (
    Addition,
    ArithmeticTokens,
    Associativity,
    ComparisonTokens,
    Division,
    Equality,
    IToken,
    ITokenCollection,
    Multiplication,
    Number,
    OperandToken,
    OperandTokens,
    OperatorToken,
    Power,
    Subtraction,
    Tokenlib,
    Variable,
)
from .trace import TracingShuntingYard, generate_trace_table, print_trace_table
