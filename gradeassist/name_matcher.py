"""
Fuzzy name matching between roster entries and submission folders.
"""

import difflib
from collections.abc import Iterable


def fuzzy_score(query: str, candidate: str) -> int | None:
    """
    Score how well a candidate name matches a query.

    The query has to appear in the candidate as a case-insensitive
    subsequence. Longer contiguous runs of matching characters score higher.

    Args:
        query: Name being looked for (e.g. a student number).
        candidate: Name to score (e.g. a directory entry).

    Returns:
        The score, or None if the candidate cannot match.
    """
    query, candidate = query.lower(), candidate.lower()

    remaining = iter(candidate)
    if not all(char in remaining for char in query):
        return None

    matcher = difflib.SequenceMatcher(None, query, candidate, autojunk=False)
    return sum(block.size ** 2 for block in matcher.get_matching_blocks())


class NameMatcher:
    """
    Picks the best fuzzy match for a name among candidates.
    """

    def best_match(self, query: str, candidates: Iterable[str]) -> str | None:
        """
        Return the candidate with the strictly highest positive score.

        Ties keep the first candidate scanned.
        """
        best: str | None = None
        best_score = 0

        for candidate in candidates:
            score = fuzzy_score(query, candidate)
            if score is not None and score > best_score:
                best, best_score = candidate, score

        return best
