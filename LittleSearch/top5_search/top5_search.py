from typing import Dict, List, Optional

from ..config import load_config
from ..occurrence import Occurrence
from ..preprocessing.preprocess import create_preprocessing_pipeline, normalize_noise_words
from .parser import parse_query

# Returned when a query ran but no document matched
NO_RESULTS = None


class Top5SearchEngine:
    def __init__(self, index: Dict[str, List[Occurrence]], noise_words=None, config=None):
        """
        Initialize the search engine with a built index.

        Args:
            index: Keyword -> occurrences in descending order of frequency
            noise_words: Noise words used when the index was built
            config: Optional configuration dictionary
        """
        self.index = index
        self.config = config if config is not None else load_config()
        self.max_results = self.config.get("search", {}).get("max_results", 5)
        if not isinstance(self.max_results, int) or self.max_results < 1:
            raise ValueError(f"max_results must be a positive integer, got {self.max_results!r}")
        self.pipeline = create_preprocessing_pipeline(normalize_noise_words(noise_words or ()), self.config)

    @classmethod
    def from_builder(cls, builder):
        return cls(builder.index, noise_words=builder.noise_words, config=builder.config)

    def search_query(self, query: str) -> Optional[List[str]]:
        """Search for a "kw1 OR kw2" query string"""
        kw1, kw2 = parse_query(query)
        return self.search(kw1, kw2)

    def search(self, kw1: str, kw2: str) -> Optional[List[str]]:
        """
        Search result for "kw1 or kw2". A document is in the result if kw1 or
        kw2 occurs in it. Results are arranged in descending order of frequency,
        each document appears once, and ties are broken in favor of kw1.

        Args:
            kw1: First keyword (raw, normalized here)
            kw2: Second keyword (raw, normalized here)

        Returns:
            Names of at most max_results documents, or NO_RESULTS if nothing matched
        """
        key1 = self.pipeline.preprocess(kw1)
        key2 = self.pipeline.preprocess(kw2)

        if not key1 and not key2:
            return NO_RESULTS

        if not key1 or not key2:
            occurrences = self.index.get(key1 or key2, [])
            results = [occ.document for occ in occurrences[:self.max_results]]
        else:
            results = self._merge_ranked(self.index.get(key1, []), self.index.get(key2, []))

        return results or NO_RESULTS

    def _merge_ranked(self, first: List[Occurrence], second: List[Occurrence]) -> List[str]:
        """Walk both occurrence lists from the top, taking the higher frequency each step"""
        results = []
        seen = set()
        i = j = 0

        while len(results) < self.max_results:
            while i < len(first) and first[i].document in seen:
                i += 1
            while j < len(second) and second[j].document in seen:
                j += 1

            if i >= len(first) and j >= len(second):
                break

            if j >= len(second) or (i < len(first) and first[i].frequency >= second[j].frequency):
                document = first[i].document
                i += 1
            else:
                document = second[j].document
                j += 1

            results.append(document)
            seen.add(document)

        return results


def top5_search(index, kw1, kw2, noise_words=(), config=None):
    """Rank documents for "kw1 OR kw2" against an index"""
    return Top5SearchEngine(index, noise_words=noise_words, config=config).search(kw1, kw2)
