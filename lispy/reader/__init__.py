from lispy.reader.parser import ParseNode, lex, parse
from lispy.reader.reader import read

__all__ = ["ParseNode", "lex", "parse", "read"]
