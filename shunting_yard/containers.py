from collections import deque

from .errors import EmptyContainerError


class Stack:
    """
    LIFO container for pending operators

    Reading from an empty stack raises EmptyContainerError
    """

    def __init__(self):
        self._items = []

    def push(self, value):
        self._items.append(value)

    def pop(self):
        if not self._items:
            raise EmptyContainerError("cannot pop from an empty stack")
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise EmptyContainerError("cannot peek into an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        # Bottom to top
        return iter(self._items)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._items!r}>"


class Queue:
    """
    FIFO container for the postfix output

    Reading from an empty queue raises EmptyContainerError
    """

    def __init__(self):
        self._items = deque()

    def enqueue(self, value):
        self._items.append(value)

    def dequeue(self):
        if not self._items:
            raise EmptyContainerError("cannot dequeue from an empty queue")
        return self._items.popleft()

    def peek(self):
        if not self._items:
            raise EmptyContainerError("cannot peek into an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def drain(self):
        """
        Dequeue everything, front to back
        """
        while self._items:
            yield self._items.popleft()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        # Front to back, does not consume
        return iter(self._items)

    def __repr__(self):
        return f"<{self.__class__.__name__} {list(self._items)!r}>"
