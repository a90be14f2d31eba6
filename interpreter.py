import logging

from parser import *
from wordstack_types import *

log = logging.getLogger(__name__)

# ===================================================================
#      INTERPRETER: Owns the data stack and the dictionary
# ===================================================================

class Interpreter:
    """
    A minimal stack-based interpreter.
    Numeric tokens are pushed onto the data stack, any other token is
    looked up in the dictionary and the bound word is evaluated.

    `value_type` parses a token into a stack value; a token is a literal
    whenever it does not raise ValueError, TypeError or ArithmeticError.
    In `strict` mode an unbound token raises UnknownToken instead of
    being ignored.
    """

    def __init__(self, value_type=int, strict: bool = False, words=None):
        self.value_type = value_type
        self.strict = strict
        self._stack = []
        self._words = {}
        for name, word in (words or {}).items():
            self.define(name, word)

    # --- Stack ---

    def push(self, value):
        self._stack.append(value)

    def pop(self):
        """Removes and returns the top value, or None if the stack is empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self):
        if not self._stack:
            return None
        return self._stack[-1]

    def take(self, n: int) -> list:
        """
        Pops `n` values and returns them in the order they were pushed.
        Raises StackUnderflow, leaving the stack untouched, if fewer are present.
        A negative `n` raises ValueError.
        """
        if n < 0:
            raise ValueError(f"Cannot take a negative number of values: {n}")
        if len(self._stack) < n:
            raise StackUnderflow(n, len(self._stack))
        if n == 0:
            return []
        values = self._stack[-n:]
        del self._stack[-n:]
        return values

    def clear(self):
        self._stack.clear()

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def stack(self) -> list:
        """A copy of the data stack, bottom first."""
        return list(self._stack)

    # --- Dictionary ---

    def define(self, name: str, word):
        if name in self._words:
            log.info("Redefining word '%s'", name)
        else:
            log.debug("Defining word '%s'", name)
        self._words[name] = word

    def lookup(self, name: str):
        return self._words.get(name)

    @property
    def words(self) -> list:
        return sorted(self._words)

    # --- Evaluation ---

    def _parse_literal(self, token: str):
        try:
            return True, self.value_type(token)
        except (ValueError, TypeError, ArithmeticError):
            # decimal.InvalidOperation is an ArithmeticError
            return False, None

    def eval_token(self, token: str):
        is_literal, value = self._parse_literal(token)
        if is_literal:
            self.push(value)
            return
        word = self.lookup(token)
        if word is not None:
            word.eval_within(self)
        elif self.strict:
            raise UnknownToken(token)
        else:
            log.debug("Ignoring unknown token '%s'", token)

    def parse(self, program_text: str):
        """Evaluates every token of `program_text`, strictly left to right."""
        for token in Parser(program_text):
            self.eval_token(token)

    def compile(self, program_text: str) -> Compound:
        """
        Builds a compound word from program text using the current bindings.
        Literals become words that push them; names are resolved now, so
        later redefinitions do not affect the result.
        """
        definition = []
        for token in Parser(program_text):
            is_literal, value = self._parse_literal(token)
            if is_literal:
                definition.append(literal(value))
                continue
            word = self.lookup(token)
            if word is not None:
                definition.append(word)
            elif self.strict:
                raise UnknownToken(token)
            else:
                log.debug("Dropping unknown token '%s' from compound", token)
        return Compound(definition)

    def __repr__(self):
        return f"<Interpreter stack={self._stack!r} words={len(self._words)}>"
