# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source text -> TokenStream.

The grammar (`grammar.lark`) only knows about terminals and bracket nesting;
it is parsed with a module-level LALR parser and the resulting lark tree is
folded into `Group`/`Ident`/`Punct`/`Literal` trees. Punct spacing is derived
from adjacency: a punct immediately followed by another punct (or by a
lifetime tick) is joint, matching how `::` and `=>` are told apart from
`: :` and `= >`.

Lifetimes are split into a joint `'` punct followed by an identifier.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken
from lark.visitors import Transformer_NonRecursive

from quote_use.core.errors import InternalInvariantViolation, LexError
from quote_use.core.span import Span
from .tokens import Delimiter, Group, Ident, Literal, Punct, Spacing, TokenStream, TokenTree

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)

_LITERAL_TERMINALS = {"STRING", "RAW_STRING", "CHAR", "NUMBER"}
_JOINABLE_TERMINALS = {"PUNCT", "LIFETIME"}
_OPENERS = {"LPAR": "(", "LSQB": "[", "LBRACE": "{"}
_CLOSERS = {"RPAR": ")", "RSQB": "]", "RBRACE": "}"}
_MATCHING = {"RPAR": "LPAR", "RSQB": "LSQB", "RBRACE": "LBRACE"}
_CLOSER_FOR = {opener: closer for closer, opener in _MATCHING.items()}


class _TreeBuilder(Transformer_NonRecursive):
	"""Folds the lark parse tree into token trees, without recursing per nesting level."""

	def __init__(self, file: Optional[str]) -> None:
		super().__init__()
		self.file = file

	def start(self, children: list) -> TokenStream:
		return TokenStream(tuple(self._assemble(children)))

	def paren(self, children: list) -> Group:
		return self._group(Delimiter.PARENTHESIS, children)

	def bracket(self, children: list) -> Group:
		return self._group(Delimiter.BRACKET, children)

	def brace(self, children: list) -> Group:
		return self._group(Delimiter.BRACE, children)

	def _span(self, tok: Token) -> Span:
		return Span.from_loc(tok, file=self.file)

	def _group(self, delimiter: Delimiter, children: list) -> Group:
		open_tok, *inner, _close_tok = children
		return Group(delimiter, TokenStream(tuple(self._assemble(inner))), self._span(open_tok))

	def _assemble(self, children: list) -> List[TokenTree]:
		out: List[TokenTree] = []
		for idx, child in enumerate(children):
			if not isinstance(child, Token):
				out.append(child)
				continue
			span = self._span(child)
			if child.type == "IDENT":
				out.append(Ident(child.value, span))
			elif child.type == "LIFETIME":
				out.append(Punct("'", Spacing.JOINT, span))
				out.append(Ident(child.value[1:], span))
			elif child.type in _LITERAL_TERMINALS:
				out.append(Literal(child.value, span))
			elif child.type == "PUNCT":
				nxt = children[idx + 1] if idx + 1 < len(children) else None
				joint = (
					isinstance(nxt, Token)
					and nxt.type in _JOINABLE_TERMINALS
					and nxt.start_pos == child.end_pos
				)
				out.append(Punct(child.value, Spacing.JOINT if joint else Spacing.ALONE, span))
			else:
				raise InternalInvariantViolation(f"unexpected terminal {child.type} in token tree")
		return out


def _unclosed_opener(source: str) -> Optional[Token]:
	"""Return the innermost delimiter left open at end of input."""
	stack: list[Token] = []
	for tok in _PARSER.lex(source):
		if tok.type in _OPENERS:
			stack.append(tok)
		elif tok.type in _CLOSERS and stack and stack[-1].type == _MATCHING[tok.type]:
			stack.pop()
	return stack[-1] if stack else None


def _lex_error(err: UnexpectedInput, source: str, file: Optional[str]) -> LexError:
	if isinstance(err, UnexpectedCharacters):
		char = source[err.pos_in_stream] if 0 <= err.pos_in_stream < len(source) else "?"
		return LexError(
			f"unexpected character {char!r}",
			span=Span(file=file, line=err.line, column=err.column, raw=err),
		)
	if isinstance(err, UnexpectedEOF) or (isinstance(err, UnexpectedToken) and err.token.type == "$END"):
		opener = _unclosed_opener(source)
		if opener is not None:
			return LexError(
				f"unclosed delimiter `{opener.value}`",
				span=Span.from_loc(opener, file=file),
				expected=(_CLOSERS[_CLOSER_FOR[opener.type]],),
			)
		return LexError("unexpected end of input", span=Span(file=file, raw=err))
	if isinstance(err, UnexpectedToken):
		tok = err.token
		expected = sorted(_CLOSERS[name] for name in err.expected if name in _CLOSERS)
		if tok.type in _CLOSERS:
			message = f"unexpected closing delimiter `{tok.value}`"
		else:
			message = f"unexpected token `{tok.value}`"
		return LexError(message, span=Span.from_loc(tok, file=file), expected=expected)
	return LexError(str(err), span=Span(file=file, line=getattr(err, "line", None), column=getattr(err, "column", None), raw=err))


def lex(source: str, *, file: Optional[str] = None) -> TokenStream:
	"""
	Lex `source` into a TokenStream.

	Raises `LexError` (a `UseSyntaxError`) on unbalanced delimiters or unknown
	characters.
	"""
	try:
		tree = _PARSER.parse(source)
	except UnexpectedInput as err:
		raise _lex_error(err, source, file) from err
	return _TreeBuilder(file).transform(tree)


__all__ = ["lex"]
