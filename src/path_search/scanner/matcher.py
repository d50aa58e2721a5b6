"""Relevance scoring of a file against a query.

Scores are tiered so that a better kind of match always outranks a worse one:

    1000  file name equals query
     900  relative path equals query
     800  file name starts with query
     700  relative path starts with query
     600  file name contains query
     500  relative path contains query
    300+  fuzzy subsequence match on the file name
    200+  fuzzy subsequence match on the relative path
       0  no match

An empty query matches every file with a flat score of 1.0.
"""

EXACT_NAME_SCORE = 1000.0
EXACT_PATH_SCORE = 900.0
NAME_PREFIX_SCORE = 800.0
PATH_PREFIX_SCORE = 700.0
NAME_CONTAINS_SCORE = 600.0
PATH_CONTAINS_SCORE = 500.0
FUZZY_NAME_BASE = 300.0
FUZZY_PATH_BASE = 200.0

EMPTY_QUERY_SCORE = 1.0


def calculate_score(file_name: str, relative_path: str, query: str) -> float:
    """
    Score a file against a query, case-insensitively.

    Args:
        file_name: Base name of the file
        relative_path: Path of the file relative to the project root
        query: Search string

    Returns:
        Score in one of the tiers above, 0 when nothing matches
    """
    if not query:
        return EMPTY_QUERY_SCORE

    query = query.lower()
    name = file_name.lower()
    path = relative_path.lower()

    if name == query:
        return EXACT_NAME_SCORE
    if path == query:
        return EXACT_PATH_SCORE
    if name.startswith(query):
        return NAME_PREFIX_SCORE
    if path.startswith(query):
        return PATH_PREFIX_SCORE
    if query in name:
        return NAME_CONTAINS_SCORE
    if query in path:
        return PATH_CONTAINS_SCORE

    name_fuzzy = fuzzy_score(name, query)
    if name_fuzzy > 0:
        return FUZZY_NAME_BASE + name_fuzzy

    path_fuzzy = fuzzy_score(path, query)
    if path_fuzzy > 0:
        return FUZZY_PATH_BASE + path_fuzzy

    return 0.0


def fuzzy_score(text: str, pattern: str) -> float:
    """
    Score `pattern` as an in-order subsequence of `text`.

    Single left-to-right pass over the UTF-8 bytes, no backtracking. Each
    matched byte adds twice the length of the current run of consecutive
    matches, so contiguous matches beat scattered ones. A full match also
    earns a bonus for short text (measured in bytes) and a flat 100 for the
    match ratio.

    Args:
        text: Candidate text, already lowercased
        pattern: Query, already lowercased

    Returns:
        Fuzzy score, or 0 if the pattern is empty or not fully matched
    """
    if not pattern:
        return 0.0

    # Undecodable file name characters map back to their original bytes
    text_bytes = text.encode("utf-8", "surrogateescape")
    pattern_bytes = pattern.encode("utf-8", "surrogateescape")

    pattern_len = len(pattern_bytes)
    pattern_idx = 0
    matches = 0
    consecutive = 0
    score = 0.0

    for byte in text_bytes:
        if pattern_idx >= pattern_len:
            break
        if byte == pattern_bytes[pattern_idx]:
            matches += 1
            consecutive += 1
            pattern_idx += 1
            score += consecutive * 2
        else:
            consecutive = 0

    if pattern_idx < pattern_len:
        return 0.0

    length_bonus = max(0, 50 - len(text_bytes))
    # matches == pattern_len here, so this is always 100
    match_ratio = matches / pattern_len
    return score + length_bonus + match_ratio * 100
