""" Lexical analysis for shell commands. """


def tokenize(line: str) -> list[str]:
    # No quoting or escapes: a token is whatever sits between whitespace runs.
    return line.split()
