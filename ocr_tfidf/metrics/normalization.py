# normalization.py
import jiwer

# Letters-only pipeline feeding the TF-IDF tokenizer.
# Non-letters are deleted, not replaced, so "don't" becomes "dont".
# Only ASCII whitespace survives; NBSP and friends are deleted like punctuation.
transform_letters = jiwer.Compose([
    jiwer.SubstituteRegexes({r"[^a-zA-Z \t\n\x0b\f\r]": r""}),
    jiwer.ToLowerCase(),
])

# Word-level normalization pipeline
transform_word = jiwer.Compose([
    jiwer.SubstituteRegexes({r"\s+": " "}),  # OCR line breaks are word gaps
    jiwer.ToLowerCase(),
    jiwer.RemoveMultipleSpaces(),
    jiwer.Strip(),
    jiwer.ReduceToListOfListOfWords(),
])

# Character-level normalization pipeline (whitespace errors ignored)
transform_character = jiwer.Compose([
    jiwer.ToLowerCase(),
    jiwer.RemoveMultipleSpaces(),
    jiwer.Strip(),
    jiwer.RemoveWhiteSpace(replace_by_space=False),
    jiwer.ReduceToListOfListOfChars(),
])


def preprocess(text: str) -> str:
    """
    Keep only ASCII letters and whitespace, lowercased.
    preprocess("Hello, World! 123") == "hello world "
    """
    return transform_letters(text)


__all__ = ["preprocess", "transform_letters", "transform_word", "transform_character"]
