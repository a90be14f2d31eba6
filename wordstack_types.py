from collections import namedtuple

# ===================================================================
#      ERRORS
# ===================================================================

class InterpreterError(Exception):
    """Base class for every failure raised while evaluating words."""


class StackUnderflow(InterpreterError, IndexError):
    """A word needed more values than the data stack holds."""
    def __init__(self, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(f"Stack underflow: needed {needed}, found {available}")


class UnknownToken(InterpreterError, NameError):
    """Raised in strict mode for a token that is neither a literal nor a bound word."""
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown word: '{token}'")


# ===================================================================
#      WORDS: Primitive(operation) | Compound(definition)
# ===================================================================

class Primitive(namedtuple("Primitive", "operation")):
    """A native word. Its operation receives the interpreter and works on its stack."""

    def eval_within(self, interpreter):
        self.operation(interpreter)

    def __repr__(self):
        name = getattr(self.operation, "__name__", None) or repr(self.operation)
        return f"<primitive {name}>"


class Compound(namedtuple("Compound", "definition")):
    """
    A word defined as an ordered sequence of other words.
    The definition holds references to the words themselves, so
    rebinding a name later does not change an existing compound.
    """

    def __new__(cls, definition=()):
        definition = tuple(definition)
        for word in definition:
            if not isinstance(word, (Primitive, Compound)):
                raise TypeError(f"Compound definitions may only hold words, got {word!r}")
        return super().__new__(cls, definition)

    def eval_within(self, interpreter):
        for word in self.definition:
            word.eval_within(interpreter)

    def __repr__(self):
        return "[" + " ".join(repr(word) for word in self.definition) + "]"


def literal(value) -> Primitive:
    """Returns a word that pushes `value` each time it is evaluated."""
    def push_literal(interpreter):
        interpreter.push(value)
    push_literal.__name__ = repr(value)
    return Primitive(push_literal)
