from typing import Dict, Iterable, List

from ..occurrence import Occurrence
from .preprocess import PreprocessingPipeline


class DocumentNotFoundError(FileNotFoundError):
    """Raised when a document listed for indexing cannot be read."""

    def __init__(self, document, reason=None):
        self.document = document
        message = f"Document not found: {document}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


def load_keywords(doc_id, tokens: Iterable[str], pipeline: PreprocessingPipeline) -> Dict[str, Occurrence]:
    """
    Scan a document's tokens and count the keywords found in it.

    Args:
        doc_id: Document name
        tokens: Raw whitespace-delimited words of the document
        pipeline: Keyword preprocessing pipeline

    Returns:
        Dictionary of keyword -> Occurrence for this document
    """
    keywords = {}
    for token in tokens:
        keyword = pipeline.preprocess(token)
        if not keyword:
            continue
        occurrence = keywords.get(keyword)
        if occurrence is None:
            keywords[keyword] = Occurrence(doc_id, 1)
        else:
            occurrence.frequency += 1
    return keywords


class Document:
    """
    Represents a document to be indexed: its name and raw tokens.
    """

    def __init__(self, doc_id, tokens: Iterable[str] = ()):
        self.id = doc_id
        self.tokens: List[str] = list(tokens)

    @classmethod
    def from_file(cls, path, doc_id=None) -> "Document":
        """
        Read a document from disk, splitting it on whitespace.

        Args:
            path: Path of the document file
            doc_id: Name to index the document under (defaults to path)

        Raises:
            DocumentNotFoundError: If the file cannot be read
        """
        doc_id = str(path) if doc_id is None else doc_id
        try:
            with open(path, "r", encoding="utf-8") as f:
                tokens = f.read().split()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentNotFoundError(doc_id, e.strerror if isinstance(e, OSError) else str(e)) from e
        return cls(doc_id, tokens)

    def load_keywords(self, pipeline: PreprocessingPipeline) -> Dict[str, Occurrence]:
        return load_keywords(self.id, self.tokens, pipeline)

    def __repr__(self):
        return f"Document({self.id!r}, {len(self.tokens)} tokens)"
