"""
Preprocessing module turning raw words into keywords.
Includes trailing punctuation stripping, lowercase conversion and noise word filtering.
"""
from .preprocess import PreprocessingPipeline, create_preprocessing_pipeline, get_keyword, load_noise_words
from .document import Document, DocumentNotFoundError, load_keywords
