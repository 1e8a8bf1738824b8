import argparse
import os
import time
from typing import Dict, Iterable, List, Tuple

from LittleSearch.config import load_config
from LittleSearch.occurrence import Occurrence
from LittleSearch.preprocessing.document import Document, load_keywords
from LittleSearch.preprocessing.preprocess import (
    create_preprocessing_pipeline,
    load_noise_words,
    normalize_noise_words,
)


def insert_last_occurrence(occurrences: List[Occurrence]) -> List[int]:
    """
    Insert the last occurrence of the list at its place in descending order of
    frequency. Elements 0..n-2 are already in order; the correct spot for the
    last one is found by binary search, and it is moved there.

    Args:
        occurrences: List of occurrences, all but the last sorted by descending frequency

    Returns:
        Sequence of midpoint indexes checked by the binary search. Empty for a
        single occurrence extended to two (and for shorter lists). The last
        entry is the last probed midpoint; it need not be the insertion index,
        since the final candidate may be settled after the loop.
    """
    midpoints = []
    if len(occurrences) < 2:
        return midpoints

    ins = occurrences[-1]
    left, right = 0, len(occurrences) - 2
    while left < right:
        mid = (left + right) // 2
        midpoints.append(mid)
        if occurrences[mid].frequency >= ins.frequency:
            left = mid + 1
        else:
            right = mid - 1

    # left is the only position not yet compared; equal frequencies stay ahead
    position = left
    if occurrences[left].frequency >= ins.frequency:
        position += 1

    occurrences.insert(position, occurrences.pop())
    return midpoints


def merge_keywords(index: Dict[str, List[Occurrence]], keywords: Dict[str, Occurrence]) -> Dict[str, List[int]]:
    """
    Merge the keywords of a single document into the index.

    Args:
        index: Keyword -> occurrence list, each list in descending order of frequency
        keywords: Keyword -> occurrence for one document

    Returns:
        Keyword -> binary search midpoints, for keywords that were already indexed
    """
    traces = {}
    for keyword, occurrence in keywords.items():
        occurrences = index.get(keyword)
        if occurrences is None:
            index[keyword] = [occurrence]
        else:
            occurrences.append(occurrence)
            traces[keyword] = insert_last_occurrence(occurrences)
    return traces


def build_index(documents: Iterable[Tuple[str, Iterable[str]]], noise_words: Iterable[str] = (), config=None):
    """
    Build an index from (document name, raw tokens) pairs.

    Returns:
        dict: keyword -> list of Occurrence in descending order of frequency
    """
    builder = InvertedIndexBuilder(noise_words=noise_words, config=config)
    return builder.build(documents)


class InvertedIndexBuilder:
    def __init__(self, noise_words=None, config=None):
        self.index = {}            # keyword -> list of Occurrence
        self.all_docs = []         # document names, in indexing order
        self.document_count = 0

        self.config = config if config is not None else load_config()
        self.noise_words = normalize_noise_words(noise_words or ())
        self.pipeline = create_preprocessing_pipeline(self.noise_words, self.config)

    def set_noise_words(self, noise_words):
        """Replace the noise words and rebuild the keyword pipeline"""
        self.noise_words = normalize_noise_words(noise_words)
        self.pipeline = create_preprocessing_pipeline(self.noise_words, self.config)

    def load_keywords(self, doc_id, tokens):
        return load_keywords(doc_id, tokens, self.pipeline)

    def build(self, documents):
        """
        Index all keywords found in the documents. The previous index is only
        replaced once every document has been merged.

        Args:
            documents: Iterable of (document name, tokens) pairs or Document objects

        Returns:
            dict: The new index

        Raises:
            ValueError: If the same document name appears more than once
        """
        index = {}
        all_docs = []
        seen = set()

        for doc in documents:
            if not isinstance(doc, Document):
                doc = Document(*doc)
            if doc.id in seen:
                raise ValueError(f"Document listed more than once: {doc.id}")
            seen.add(doc.id)
            merge_keywords(index, doc.load_keywords(self.pipeline))
            all_docs.append(doc.id)

        self.index = index
        self.all_docs = all_docs
        self.document_count = len(all_docs)
        return self.index

    def build_from_files(self, docs_file, noise_words_file):
        """
        Build the index from a file listing document file names and a file of
        noise words. Relative document names are resolved against the directory
        of the listing; documents are indexed under the name as listed.

        Args:
            docs_file: File with the names of all documents, whitespace-separated
            noise_words_file: File with noise words, whitespace-separated

        Returns:
            dict: The new index

        Raises:
            FileNotFoundError: If the listing or noise words file is missing
            DocumentNotFoundError: If a listed document cannot be read
            ValueError: If a file is not valid UTF-8 or a document is listed twice
        """
        self.set_noise_words(load_noise_words(noise_words_file))
        print(f"Loaded {len(self.noise_words)} noise words from {noise_words_file}")

        with open(docs_file, "r", encoding="utf-8") as f:
            doc_names = f.read().split()

        repeated = sorted({name for name in doc_names if doc_names.count(name) > 1})
        if repeated:
            raise ValueError(f"Document listed more than once: {', '.join(repeated)}")

        base_dir = os.path.dirname(os.path.abspath(docs_file))
        start_time = time.time()
        self.build(
            Document.from_file(os.path.join(base_dir, name), doc_id=name)
            for name in doc_names
        )
        end_time = time.time()

        print(f"Indexed {self.document_count} documents in {end_time - start_time:.2f} seconds")
        print(f"Total keywords in index: {len(self.index)}")
        return self.index

    def print_sample(self, sample_size=10):
        """Print a sample of the index"""
        print("\nIndex Sample:")
        print("-" * 60)

        for keyword in sorted(self.index.keys())[:sample_size]:
            occurrences = self.index[keyword]
            print(f"'{keyword}' -> {len(occurrences)} documents: {occurrences[:5]}{'...' if len(occurrences) > 5 else ''}")

        print("-" * 60)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Build a keyword index from documents')
    parser.add_argument('docs', help='File listing the document file names')
    parser.add_argument('noise_words', help='File listing the noise words')
    parser.add_argument('--sample', type=int, default=10, help='Number of keywords to print')
    args = parser.parse_args(argv)

    builder = InvertedIndexBuilder()
    try:
        builder.build_from_files(args.docs, args.noise_words)
    except (FileNotFoundError, ValueError) as e:
        # UnicodeDecodeError is a ValueError
        print(f"Failed to build index: {e}")
        return 1

    builder.print_sample(args.sample)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
