import string

ASCII_LETTERS = frozenset(string.ascii_letters)


#Letter check
def is_ascii_letter(ch):
    """True only for a-z and A-Z; digits, punctuation and non-ASCII letters are not letters here"""
    return ch in ASCII_LETTERS


#Separating words from text
def split_words(text):
    """Split text on the single ASCII space; consecutive spaces give empty words"""
    return text.split(" ")


#Combine text words into a single string
def join_words(words):
    """Combine a list of words into a single text with single spaces"""
    return " ".join(words)


#Letters of a word
def letters_of(word):
    """Return the ASCII letters of a word in their original order"""
    return [ch for ch in word if is_ascii_letter(ch)]
