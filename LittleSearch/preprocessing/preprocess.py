from abc import ABC, abstractmethod
import string
from typing import Iterable, Optional

from ..config import DEFAULT_CONFIG

ASCII_LETTERS = frozenset(string.ascii_letters)


class KeywordPreprocessor(ABC):
    """A single step of keyword normalization. Returning "" rejects the word."""

    @abstractmethod
    def preprocess(self, word: str) -> str:
        raise NotImplementedError()


class TrailingPunctuationPreprocessor(KeywordPreprocessor):
    """Preprocessor for stripping trailing punctuation."""

    def __init__(self, punctuation=".,?:;!"):
        """
        Initialize preprocessor for stripping trailing punctuation.

        Args:
            punctuation: Characters that may be stripped off the end of a word
        """
        self.punctuation = frozenset(punctuation)

    def preprocess(self, word: str) -> str:
        """
        Strip punctuation characters off the end of the word, one at a time.
        A single remaining character is never stripped.

        Args:
            word: Word to process

        Returns:
            Word without trailing punctuation
        """
        while len(word) > 1 and word[-1] not in ASCII_LETTERS and word[-1] in self.punctuation:
            word = word[:-1]
        return word


class AlphabeticPreprocessor(KeywordPreprocessor):
    """Rejects words containing anything other than ASCII letters."""

    def preprocess(self, word: str) -> str:
        if not word or any(c not in ASCII_LETTERS for c in word):
            return ""
        return word


class LowercasePreprocessor(KeywordPreprocessor):
    def preprocess(self, word: str) -> str:
        return word.lower()


class NoiseWordsPreprocessor(KeywordPreprocessor):
    """Preprocessor for removing noise words."""

    def __init__(self, noise_words: Iterable[str] = ()):
        """
        Initialize preprocessor for removing noise words.

        Args:
            noise_words: Words excluded from indexing (compared case-insensitively)
        """
        self.noise_words = normalize_noise_words(noise_words)

    def preprocess(self, word: str) -> str:
        if word in self.noise_words:
            return ""
        return word


class PreprocessingPipeline:
    """Pipeline of keyword preprocessors."""

    def __init__(self, preprocessors, name="Default Pipeline"):
        """
        Initialize a preprocessing pipeline.

        Args:
            preprocessors: List of preprocessor objects
            name: Name of the pipeline
        """
        self.preprocessors = preprocessors
        self.name = name

    def preprocess(self, word: str) -> str:
        """
        Apply all preprocessors to the word, stopping at the first rejection.

        Args:
            word: Raw word

        Returns:
            Keyword, or "" if the word was rejected
        """
        for preprocessor in self.preprocessors:
            word = preprocessor.preprocess(word)
            if not word:
                return ""
        return word

    def get_keyword(self, word: str) -> Optional[str]:
        """Return the keyword for a raw word, or None if it is rejected"""
        return self.preprocess(word) or None


def normalize_noise_words(noise_words: Iterable[str]) -> frozenset:
    return frozenset(word.strip().lower() for word in noise_words if word.strip())


def create_preprocessing_pipeline(noise_words: Iterable[str] = (), config=None) -> PreprocessingPipeline:
    """Create the keyword pipeline based on configuration"""
    preproc_config = (config or DEFAULT_CONFIG).get("preprocessing", {})

    preprocessors = [
        TrailingPunctuationPreprocessor(preproc_config.get("punctuation", ".,?:;!")),
        AlphabeticPreprocessor(),
        LowercasePreprocessor(),
        NoiseWordsPreprocessor(noise_words),
    ]

    return PreprocessingPipeline(preprocessors, name="KeywordPipeline")


def get_keyword(word: str, noise_words: Iterable[str] = ()) -> Optional[str]:
    """
    Given a word, return it as a keyword if it passes the keyword test.

    A keyword is any word that, after being stripped of trailing punctuation,
    consists only of letters and is not a noise word. Words are treated
    case-insensitively.

    Args:
        word: Candidate word
        noise_words: Words excluded from indexing

    Returns:
        Keyword in lower case, or None if the word is rejected
    """
    return create_preprocessing_pipeline(noise_words).get_keyword(word)


def load_noise_words(noise_words_file) -> frozenset:
    """
    Load noise words from a file, one or more per line.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    with open(noise_words_file, "r", encoding="utf-8") as f:
        return normalize_noise_words(f.read().split())
