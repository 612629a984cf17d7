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
import sys
from typing import Iterable

from . import debug
from .matcher import RecursiveMatcher
from .symbols import Alternation, compile_definition


class GrammarError(Exception):
	"""
	The base class of all errors raised by this package.
	"""


class RuleNotFound(GrammarError, LookupError):
	def __init__(self, rule_name: str):
		super().__init__("Rule " + rule_name + " not found.")
		self.rule_name = rule_name


class GrammarSyntaxError(GrammarError, ValueError):
	pass


class RecursiveRuleError(GrammarError):
	def __init__(self, cycle: list[str]):
		super().__init__("Recursive rules are not supported: " + " -> ".join(["<" + name + ">" for name in cycle]))
		self.cycle = cycle


RULE_LINE = re.compile(r"<(.*?)> ::= (.*)")


class Grammar:
	definitions: dict[str, str]
	"""
	A mapping from rule names (without angle brackets) to the raw definitions as they were given.
	"""

	rules: dict[str, Alternation]
	"""
	A mapping from rule names to the compiled definitions. Kept in sync with `definitions`.
	"""

	def __init__(self, definitions: dict[str, str] | None = None):
		self.definitions = {}
		self.rules = {}
		self._acyclic: set[str] = set()
		for name, definition in (definitions or {}).items():
			self.add_rule(name, definition)

	@classmethod
	def from_file(cls, path: str) -> "Grammar":
		grammar = cls()
		grammar.load_file(path)
		return grammar

	def add_rule(self, name: str, definition: str):
		"""
		Adds a rule or overwrites an existing one. The definition is not validated; malformed parts never match.
		"""
		self.definitions[name] = definition
		self.rules[name] = compile_definition(definition)
		self._acyclic.clear()

	def remove_rule(self, name: str):
		if name in self.definitions:
			del self.definitions[name]
			del self.rules[name]
			self._acyclic.clear()

	def get_rule_definition(self, name: str) -> str:
		if name not in self.definitions:
			raise RuleNotFound(name)

		return self.definitions[name]

	def get_compiled_rule(self, name: str) -> Alternation:
		if name not in self.rules:
			raise RuleNotFound(name)

		return self.rules[name]

	def list_rules(self) -> list[str]:
		return list(self.definitions)

	def get_rules(self) -> dict[str, str]:
		return self.definitions.copy()

	def print(self):
		for name in sorted(self.rules):
			print("<" + name + "> ::= " + self.rules[name].to_code())

	def copy(self):
		return Grammar(self.definitions)

	def update(self, grammar: "Grammar"):
		for name, definition in grammar.definitions.items():
			self.add_rule(name, definition)

	def parse_grammar_line(self, line: str) -> str:
		"""
		Parses a line of the form `<name> ::= definition`, adds the rule and returns its name.
		"""
		debug.trace(1, line)

		match = RULE_LINE.fullmatch(line.strip())
		if not match:
			raise GrammarSyntaxError("Syntax error on line `" + line + "'")

		name = match.group(1).strip()
		self.add_rule(name, match.group(2).strip())
		return name

	def load_lines(self, lines: Iterable[str]) -> int:
		"""
		Adds every rule in `lines`. Blank lines and comments starting with `#` are ignored and malformed lines are
		skipped. Returns the number of rules loaded.
		"""
		n_rules = 0
		for line in lines:
			line = line.strip()
			if not line or line.startswith("#"):
				continue

			try:
				self.parse_grammar_line(line)

			except GrammarSyntaxError:
				debug.trace(1, "skipped malformed line:", line)
				continue

			n_rules += 1

		return n_rules

	def load_file(self, path: str) -> int:
		"""
		Loads rules from a grammar file. A read error is reported on stderr; the rules read before it are kept.
		"""
		n_rules = 0
		try:
			with open(path, encoding="utf-8") as file:
				for line in file:
					n_rules += self.load_lines([line])

		except OSError as e:
			print("Error reading BNF file: " + str(e), file=sys.stderr)

		return n_rules

	def find_cycle(self, name: str) -> list[str] | None:
		"""
		Returns a chain of rule references that leads from `name` back to a rule already on the chain, or None if the
		rules reachable from `name` are not recursive. References to undefined rules are ignored.
		"""
		path: list[str] = []
		done: set[str] = set(self._acyclic)

		def visit(current: str) -> list[str] | None:
			if current in path:
				return path[path.index(current):] + [current]

			if current in done or current not in self.rules:
				return None

			path.append(current)
			for reference in self.rules[current].references():
				cycle = visit(reference)
				if cycle:
					return cycle

			path.pop()
			done.add(current)
			return None

		cycle = visit(name)
		if cycle is None:
			self._acyclic |= done

		return cycle

	def is_valid_sentence(self, sentence: str, rule_name: str) -> bool:
		"""
		Returns True if the whitespace-separated words of `sentence` are matched completely by the rule `rule_name`.

		Raises RuleNotFound if the rule (or a rule it refers to) does not exist, and RecursiveRuleError if the rule
		refers to itself directly or through other rules.
		"""
		if rule_name not in self.rules:
			raise RuleNotFound(rule_name)

		cycle = self.find_cycle(rule_name)
		if cycle:
			raise RecursiveRuleError(cycle)

		tokens = sentence.split()
		end = RecursiveMatcher(self).match_rule(rule_name, tokens, 0)
		return end == len(tokens)
