"""
Top-5 search module answering "kw1 OR kw2" queries.
Documents are ranked by keyword frequency, ties going to the first keyword.
"""
from .parser import QuerySyntaxError, parse_query
from .top5_search import NO_RESULTS, Top5SearchEngine, top5_search
