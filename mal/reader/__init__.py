from mal.reader.tokenizer import Tokenizer, tokenize
from mal.reader.parser import read_from, read_forms, read_str

__all__ = ["Tokenizer", "tokenize", "read_from", "read_forms", "read_str"]
