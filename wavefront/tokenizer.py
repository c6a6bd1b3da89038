import typing

KEYWORDS = frozenset(("v", "vt", "vn", "f"))


def tokenize(line: str) -> typing.Optional[typing.Tuple[str, typing.List[str]]]:
    """Split one line into its keyword and the remaining tokens.

    Comments, blank lines and directives other than ``v``, ``vt``, ``vn`` and
    ``f`` yield ``None``.
    """
    tokens = line.split("#", 1)[0].split()
    if not tokens or tokens[0] not in KEYWORDS:
        return None
    return tokens[0], tokens[1:]
