import logging

from .containers import Queue, Stack
from .errors import InvalidTokenError
from .tokens import Associativity

logger = logging.getLogger(__name__)

# Tokens are routed by precedence alone: 0 goes straight to the output,
# anything else waits on the operator stack until an operator of lower
# precedence (or the end of input) flushes it.
# Grouping tokens are not understood here.


def snapshot(container):
    return " ".join(str(v) for v in container)


class ShuntingYard:
    """
    Converts a sequence of infix tokens into postfix order

    An instance keeps no state between calls and can be shared
    """

    @staticmethod
    def should_stack(top_op, precedence) -> bool:
        # Resolve the stacked operator before pushing one that binds no tighter.
        # Equal precedence only resolves for left associative operators
        return top_op.precedence > precedence or (
            top_op.precedence == precedence
            and getattr(top_op, "associativity", Associativity.LEFT)
            == Associativity.LEFT
        )

    @staticmethod
    def check_token(token):
        precedence = getattr(token, "precedence", None)
        if (
            not isinstance(precedence, int)
            or isinstance(precedence, bool)
            or precedence < 0
        ):
            raise InvalidTokenError(
                f"{token!r} has invalid precedence {precedence!r}. Should be an integer >= 0",
                token,
            )

        associativity = getattr(token, "associativity", Associativity.LEFT)
        if not isinstance(associativity, Associativity):
            raise InvalidTokenError(
                f"{token!r} has invalid associativity value {associativity!r}. Should be one of {[repr(a) for a in Associativity]}",
                token,
            )

    def produce_postfix(self, tokens) -> Queue:
        output = Queue()
        operator_stack = Stack()

        for token in tokens:
            self.check_token(token)

            if token.precedence == 0:
                output.enqueue(token)
            else:
                while not operator_stack.is_empty() and self.should_stack(
                    operator_stack.peek(), token.precedence
                ):
                    output.enqueue(operator_stack.pop())

                operator_stack.push(token)

            self.on_token(token, output, operator_stack)

        while not operator_stack.is_empty():
            output.enqueue(operator_stack.pop())

        self.on_finish(output)

        return output

    def on_token(self, token, output, operator_stack):
        logger.debug(
            "on token %s: output=[%s] operators=[%s]",
            token,
            snapshot(output),
            snapshot(operator_stack),
        )

    def on_finish(self, output):
        logger.debug("postfix: [%s]", snapshot(output))


def produce_postfix(tokens) -> Queue:
    return ShuntingYard().produce_postfix(tokens)


def postfix_values(queue):
    return [getattr(token, "value", token) for token in queue]
