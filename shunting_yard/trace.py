import pandas as pd

from .parser import ShuntingYard, snapshot

END_MARKER = "<end>"


class TracingShuntingYard(ShuntingYard):
    """
    Records the output queue and operator stack after every token

    rows only hold the most recent conversion
    """

    def __init__(self):
        self.rows = []

    def produce_postfix(self, tokens):
        self.rows = []
        return super().produce_postfix(tokens)

    def on_token(self, token, output, operator_stack):
        super().on_token(token, output, operator_stack)
        self.rows.append([str(token), snapshot(output), snapshot(operator_stack)])

    def on_finish(self, output):
        super().on_finish(output)
        self.rows.append([END_MARKER, snapshot(output), ""])


def generate_trace_table(tokens, tracer: TracingShuntingYard = None):
    """
    Returns pandas dataframe

    tracer must be a TracingShuntingYard, a fresh one is used when omitted
    """
    tracer = tracer or TracingShuntingYard()
    if not isinstance(tracer, TracingShuntingYard):
        raise TypeError(
            f"tracer must be a TracingShuntingYard, got {type(tracer).__name__}"
        )
    tracer.produce_postfix(tokens)

    return pd.DataFrame(tracer.rows, columns=["token", "output", "operators"])


def print_trace_table(tokens):
    s = generate_trace_table(tokens).to_string(index=False)

    print(s)
