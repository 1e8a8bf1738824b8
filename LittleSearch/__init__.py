"""
LittleSearch - keyword index over a small set of text documents.
Answers "kw1 OR kw2" queries with the top documents ranked by frequency.
"""
