import re
from typing import Tuple


class QuerySyntaxError(ValueError):
    pass


TOKEN_PATTERN = re.compile(r'\S+')


def parse_query(query: str) -> Tuple[str, str]:
    """
    Parse a query of the form "kw1 OR kw2" (OR is case-insensitive).
    A lone keyword is accepted and paired with an empty second keyword.

    Args:
        query: Query string

    Returns:
        (kw1, kw2) raw keywords

    Raises:
        QuerySyntaxError: If the query is empty or not of the form above
    """
    tokens = TOKEN_PATTERN.findall(query or "")

    if len(tokens) == 1 and tokens[0].upper() != "OR":
        return tokens[0], ""
    if len(tokens) == 2 and tokens[0].upper() != "OR" and tokens[1].upper() != "OR":
        # implicit OR between two keywords
        return tokens[0], tokens[1]
    if len(tokens) == 3 and tokens[1].upper() == "OR" and "OR" not in (tokens[0].upper(), tokens[2].upper()):
        return tokens[0], tokens[2]

    if not tokens:
        raise QuerySyntaxError("Empty query")
    raise QuerySyntaxError(f"Expected 'keyword OR keyword', got: {query!r}")
