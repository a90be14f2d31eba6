"""
Standard primitive words a host can install into an Interpreter.
None of these are part of the interpreter itself; an Interpreter
starts with an empty dictionary.
"""
import operator

from wordstack_types import Primitive

# --- Word Implementations ---

def _make_binary_op(op: callable, name: str) -> Primitive:
    def word(i):
        a, b = i.take(2)
        i.push(op(a, b))
    word.__name__ = name
    return Primitive(word)

def _word_negate(i):
    a, = i.take(1)
    i.push(-a)

def _word_dup(i):
    a, = i.take(1)
    i.push(a)
    i.push(a)

def _word_drop(i):
    i.take(1)

def _word_swap(i):
    a, b = i.take(2)
    i.push(b)
    i.push(a)

def _word_over(i):
    a, b = i.take(2)
    for value in (a, b, a):
        i.push(value)

def _word_rot(i):
    # ( a b c -- b c a )
    a, b, c = i.take(3)
    for value in (b, c, a):
        i.push(value)

def _word_nip(i):
    _, b = i.take(2)
    i.push(b)

def _word_tuck(i):
    # ( a b -- b a b )
    a, b = i.take(2)
    for value in (b, a, b):
        i.push(value)

def _word_depth(i):
    i.push(i.depth)

def _word_clear(i):
    i.clear()


def core_words() -> dict:
    """Returns a fresh name -> word mapping of the standard primitives."""
    words = {
        '+':      _make_binary_op(operator.add, '+'),
        '-':      _make_binary_op(operator.sub, '-'),
        '*':      _make_binary_op(operator.mul, '*'),
        '/':      _make_binary_op(operator.truediv, '/'),
        '//':     _make_binary_op(operator.floordiv, '//'),
        'mod':    _make_binary_op(operator.mod, 'mod'),
        'negate': Primitive(_word_negate),
        'dup':    Primitive(_word_dup),
        'drop':   Primitive(_word_drop),
        'swap':   Primitive(_word_swap),
        'over':   Primitive(_word_over),
        'rot':    Primitive(_word_rot),
        'nip':    Primitive(_word_nip),
        'tuck':   Primitive(_word_tuck),
        'depth':  Primitive(_word_depth),
        'clear':  Primitive(_word_clear),
    }
    return words

def install(interpreter):
    """Defines every standard word in `interpreter` and returns it."""
    for name, word in core_words().items():
        interpreter.define(name, word)
    return interpreter
