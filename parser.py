class Parser:
    """
    Splits program text into whitespace-delimited tokens.
    Designed to be used as a stream, yielding one token at a time,
    so each token can be evaluated before the next one is read.
    """
    def __init__(self, code: str):
        self.code = code
        self.pos = 0

    def next_token(self):
        """
        Returns the very next token from the input stream.
        Returns None if the end of the stream is reached.
        """
        self._skip_whitespace()
        if self.pos >= len(self.code):
            return None # Signal end of input
        return self._parse_atom()

    def __iter__(self):
        while (token := self.next_token()) is not None:
            yield token

    def _skip_whitespace(self):
        while self.pos < len(self.code):
            if self.code[self.pos].isspace():
                self.pos += 1
            else:
                break

    def _parse_atom(self) -> str:
        start = self.pos
        while self.pos < len(self.code) and not self.code[self.pos].isspace():
            self.pos += 1
        return self.code[start:self.pos]


def tokenize(code: str) -> list:
    return list(Parser(code))
