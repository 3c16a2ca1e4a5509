class ShuntingYardError(Exception):
    pass


class EmptyContainerError(ShuntingYardError, IndexError):
    """
    Raised when a Stack or Queue is read while empty

    This is always a bug in the caller, never a runtime condition
    """


class InvalidTokenError(ShuntingYardError):
    def __init__(self, err, token=None):
        self.err = err
        self.token = token
        self.start = getattr(token, "start", None)
        self.end = getattr(token, "end", None)

    def __str__(self):
        if self.start is None:
            return str(self.err)
        return f"@[{self.start}, {self.end}]: {self.err}"
