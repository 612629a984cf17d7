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

from typing import TYPE_CHECKING, Sequence

from . import debug
from .symbols import (
	Alternation,
	CharacterClass,
	Group,
	Nonterminal,
	OptionalSymbol,
	Production,
	RepeatableSymbol,
	Symbol,
	Terminal,
)

if TYPE_CHECKING:
	from .grammar import Grammar


class RecursiveMatcher:
	"""
	Matches token sequences against the compiled rules of a grammar.

	Every method takes the whole token sequence and a start index, and returns the index after the last consumed
	token, or None if the symbol, production or alternation does not match at that position.

	The matcher commits to the first alternative that matches and consumes optional and repeatable symbols greedily.
	None of these choices are revisited if a later symbol fails.
	"""

	def __init__(self, grammar: "Grammar"):
		self.grammar = grammar

	def match_rule(self, name: str, tokens: Sequence[str], start: int) -> int | None:
		"""
		Matches the rule `name` at `start`. Raises RuleNotFound if the rule does not exist.
		"""
		alternation = self.grammar.get_compiled_rule(name)
		debug.trace(2, "<" + name + ">", "at", start)
		debug.enter()
		try:
			end = self.match_alternation(alternation, tokens, start)

		finally:
			debug.leave()

		debug.trace(2, "<" + name + ">", "->", end)
		return end

	def match_alternation(self, alternation: Alternation, tokens: Sequence[str], start: int) -> int | None:
		for production in alternation.productions:
			end = self.match_production(production, tokens, start)
			if end is not None:
				return end

		return None

	def match_production(self, production: Production, tokens: Sequence[str], start: int) -> int | None:
		i = start
		for symbol in production.symbols:
			if isinstance(symbol, RepeatableSymbol):
				while i < len(tokens):
					end = self.match_symbol(symbol.symbol, tokens, i)
					if end is None or end == i:
						break

					i = end

			elif isinstance(symbol, OptionalSymbol):
				end = self.match_symbol(symbol.symbol, tokens, i)
				if end is not None:
					i = end

			else:
				end = self.match_symbol(symbol, tokens, i)
				if end is None:
					return None

				i = end

		return i

	def match_symbol(self, symbol: Symbol, tokens: Sequence[str], start: int) -> int | None:
		"""
		Matches a single symbol, ignoring modifiers. Modifiers are handled by `match_production`.
		"""
		if isinstance(symbol, Terminal):
			return self._match_token(symbol, tokens, start, lambda token: token == symbol.literal)

		elif isinstance(symbol, CharacterClass):
			return self._match_token(symbol, tokens, start, symbol.matches_token)

		elif isinstance(symbol, Nonterminal):
			return self.match_rule(symbol.name, tokens, start)

		elif isinstance(symbol, Group):
			return self.match_alternation(symbol.alternation, tokens, start)

		else:
			debug.trace(3, "unknown symbol:", symbol.to_code())
			return None

	def _match_token(self, symbol: Symbol, tokens: Sequence[str], start: int, predicate) -> int | None:
		if start < len(tokens) and predicate(tokens[start]):
			debug.trace(3, "match:", tokens[start], symbol.to_code())
			return start + 1

		debug.trace(3, "no match:", tokens[start] if start < len(tokens) else "<END>", symbol.to_code())
		return None
