class Occurrence:
    """
    Occurrence of a keyword in one document.
    Stores the document name and how many times the keyword occurs in it.
    """

    __slots__ = ("document", "frequency")

    def __init__(self, document: str, frequency: int = 1):
        """
        Initialize the occurrence with a document/frequency pair.

        Args:
            document: Document name
            frequency: Number of times the keyword occurs in the document
        """
        self.document = document
        self.frequency = frequency

    def __eq__(self, other):
        if not isinstance(other, Occurrence):
            return NotImplemented
        return self.document == other.document and self.frequency == other.frequency

    def __repr__(self):
        return f"({self.document},{self.frequency})"
