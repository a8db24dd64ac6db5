from malt.reader.parser import lex, TokenStream, read_str, read_all

__all__ = ["lex", "TokenStream", "read_str", "read_all"]
