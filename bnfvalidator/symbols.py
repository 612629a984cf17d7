# Bnfvalidator
# Copyright (C) 2026 Iikka Hauhio
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


class Symbol(ABC):
	"""
	The abstract base class of all symbols that can appear in a production.
	"""

	@abstractmethod
	def to_code(self) -> str:
		...


@dataclass(frozen=True)
class Terminal(Symbol):
	"""
	A literal word that matches exactly one token with the same text. Matching is case-sensitive.
	"""
	literal: str

	def to_code(self) -> str:
		return "\"" + self.literal + "\""


@dataclass(frozen=True)
class Nonterminal(Symbol):
	"""
	A reference to another rule of the grammar.
	"""
	name: str

	def to_code(self) -> str:
		return "<" + self.name + ">"


@dataclass(frozen=True)
class CharacterClass(Symbol):
	"""
	A bracketed pattern such as `[0-9]` that matches exactly one token.

	The whole bracket text is used as a regular expression and the token must match it completely.
	"""
	pattern: str

	def to_code(self) -> str:
		return self.pattern

	def matches_token(self, token: str) -> bool:
		return re.fullmatch(self.pattern, token) is not None


@dataclass(frozen=True)
class Group(Symbol):
	"""
	A parenthesized sub-expression. Its interior is an alternation of its own.
	"""
	alternation: "Alternation"

	def to_code(self) -> str:
		return "( " + self.alternation.to_code() + " )"


@dataclass(frozen=True)
class UnknownSymbol(Symbol):
	"""
	Anything that could not be classified. It never matches.
	"""
	code: str

	def to_code(self) -> str:
		return self.code


@dataclass(frozen=True)
class OptionalSymbol(Symbol):
	"""
	Zero or one occurrences of the wrapped symbol (`X?`).
	"""
	symbol: Symbol

	def to_code(self) -> str:
		return self.symbol.to_code() + "?"


@dataclass(frozen=True)
class RepeatableSymbol(Symbol):
	"""
	Zero or more occurrences of the wrapped symbol (`X*`).
	"""
	symbol: Symbol

	def to_code(self) -> str:
		return self.symbol.to_code() + "*"


@dataclass(frozen=True)
class Production:
	"""
	One sequence of symbols.
	"""
	symbols: tuple[Symbol, ...]

	def to_code(self) -> str:
		return " ".join([s.to_code() for s in self.symbols])

	def references(self) -> list[str]:
		"""
		Returns the names of all nonterminals used in this production, including those inside groups and modifiers.
		"""
		ans = []
		for symbol in self.symbols:
			while isinstance(symbol, (OptionalSymbol, RepeatableSymbol)):
				symbol = symbol.symbol

			if isinstance(symbol, Nonterminal):
				ans.append(symbol.name)

			elif isinstance(symbol, Group):
				ans += symbol.alternation.references()

		return ans


@dataclass(frozen=True)
class Alternation:
	"""
	An ordered list of productions separated by `|`. The first production that matches wins.
	"""
	productions: tuple[Production, ...]

	def to_code(self) -> str:
		return " | ".join([p.to_code() for p in self.productions])

	def references(self) -> list[str]:
		ans = []
		for production in self.productions:
			ans += production.references()

		return ans


def split_alternatives(definition: str) -> list[str]:
	"""
	Splits a definition at each `|` that is not inside parentheses.

	Every alternative is stripped. Empty alternatives are kept, so an empty definition gives `[""]`.
	"""
	ans = []
	current = ""
	depth = 0
	for char in definition:
		if char == "(":
			depth += 1

		elif char == ")":
			depth -= 1

		elif char == "|" and depth == 0:
			ans.append(current.strip())
			current = ""
			continue

		current += char

	ans.append(current.strip())
	return ans


def tokenize_production(production: str) -> list[str]:
	"""
	Splits one alternative into symbol tokens at whitespace outside parentheses.

	A group is kept as a single token with its parentheses, and modifiers such as `?` and `*` stay attached to the
	symbol before them.
	"""
	tokens = []
	current = ""
	depth = 0
	for char in production:
		if char.isspace() and depth == 0:
			if current:
				tokens.append(current)
				current = ""

			continue

		if char == "(":
			depth += 1

		elif char == ")":
			depth -= 1

		current += char

	if current:
		tokens.append(current)

	return tokens


def _is_delimited(token: str, start: str, end: str) -> bool:
	if len(token) < 2 or token[0] != start or token[-1] != end:
		return False

	# the first closing delimiter must be the last character: `"a"b"` is not a terminal
	return token.index(end, 1) == len(token) - 1


def _is_group(token: str) -> bool:
	if not token.startswith("("):
		return False

	depth = 0
	for i, char in enumerate(token):
		if char == "(":
			depth += 1

		elif char == ")":
			depth -= 1
			if depth == 0:
				return i == len(token) - 1

	return False


def parse_symbol(token: str) -> Symbol:
	"""
	Classifies one symbol token by its surface syntax.

	A single trailing `*` or `?` is removed first and wraps the result in `RepeatableSymbol` or `OptionalSymbol`.
	"""
	if token.endswith("*"):
		return RepeatableSymbol(_parse_base_symbol(token[:-1]))

	elif token.endswith("?"):
		return OptionalSymbol(_parse_base_symbol(token[:-1]))

	return _parse_base_symbol(token)


def _parse_base_symbol(token: str) -> Symbol:
	if _is_delimited(token, "\"", "\""):
		return Terminal(token[1:-1])

	elif _is_delimited(token, "<", ">"):
		return Nonterminal(token[1:-1])

	elif _is_group(token):
		return Group(compile_definition(token[1:-1]))

	elif _is_delimited(token, "[", "]"):
		try:
			re.compile(token)

		except re.error:
			return UnknownSymbol(token)

		return CharacterClass(token)

	else:
		return UnknownSymbol(token)


def compile_production(production: str) -> Production:
	return Production(tuple(parse_symbol(token) for token in tokenize_production(production)))


def compile_alternatives(alternatives: Sequence[str]) -> Alternation:
	return Alternation(tuple(compile_production(alternative) for alternative in alternatives))


def compile_definition(definition: str) -> Alternation:
	"""
	Parses the raw text of a rule definition (or the interior of a group) into a symbol tree.

	This never raises. Pieces that cannot be classified become `UnknownSymbol`s and simply fail to match.
	"""
	return compile_alternatives(split_alternatives(definition))
