""" Alias table consulted before launching external commands. """
import types

from gsh_lexer import tokenize


class AliasTable:
    """
    Map a command name to the tokens that replace it.

    Expansions are looked up once per command; the result is never
    resolved again, so an alias can expand to a program of the same name.
    """
    def __init__(self, aliases=None):
        table = {}
        for name, expansion in (aliases or {}).items():
            if not name or tokenize(name) != [name]:
                raise ValueError(f"alias: invalid name: {name!r}")
            if isinstance(expansion, str):
                tokens = tokenize(expansion)
            else:
                tokens = tokenize(" ".join(expansion))
            if not tokens:
                raise ValueError(f"alias: empty expansion for {name}")
            table[name] = tuple(tokens)
        self._aliases = types.MappingProxyType(table)

    def resolve(self, name: str) -> list[str] | None:
        expansion = self._aliases.get(name)
        if expansion is None:
            return None
        return list(expansion)

    def items(self):
        return self._aliases.items()

    def __contains__(self, name):
        return name in self._aliases

    def __iter__(self):
        return iter(self._aliases)

    def __len__(self):
        return len(self._aliases)
