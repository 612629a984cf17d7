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

import argparse
import enum
import os
import sys
from typing import TextIO

from rich.console import Console

from .debug import set_debug_level
from .grammar import Grammar

DEFAULT_GRAMMAR_FILE = os.path.join(os.path.dirname(os.path.realpath(__file__)), "domolect.bnf")
DEFAULT_RULE_NAME = "augmented_command"


class Response(enum.Enum):
	EXIT = "Exiting REPL..."
	UNKNOWN_COMMAND = "Unrecognised command."
	SUCCESS = "Command executed successfully."

	@property
	def message(self) -> str:
		return self.value


RESPONSE_STYLES = {
	Response.EXIT: "bold",
	Response.UNKNOWN_COMMAND: "bold red",
	Response.SUCCESS: "bold green",
}


class Repl:
	"""
	Reads commands line by line and answers each with a canned response telling whether the command is a valid
	sentence of the given rule. Typing `exit` or reaching the end of the input stops the loop.
	"""

	def __init__(self, grammar: Grammar):
		self.grammar = grammar
		self.is_running = False

	def start(self, input: TextIO, output: TextIO, rule_name: str):
		if input is None or output is None:
			self.is_running = False
			raise ValueError("Input and output streams must be non-null.")

		self.is_running = True
		console = Console(file=output, highlight=False)

		console.print("Welcome to the Domolect 2.0 parser!")
		console.print("Enter a command or type `exit` to quit.", markup=False)

		while self.is_running:
			console.print(">>> ", end="")
			output.flush()

			line = input.readline()
			if not line:
				print("Error reading input stream: EOF reached.", file=sys.stderr)
				self.stop()
				return

			response = self.evaluate_input(line.rstrip("\r\n"), rule_name)
			console.print(response.message, style=RESPONSE_STYLES[response])

			if response is Response.EXIT:
				self.stop()
				return

	def evaluate_input(self, line: str, rule_name: str) -> Response:
		if line == "exit":
			return Response.EXIT

		if self.grammar.is_valid_sentence(line, rule_name):
			return Response.SUCCESS

		return Response.UNKNOWN_COMMAND

	def stop(self):
		self.is_running = False


def main():
	argparser = argparse.ArgumentParser(description="Validate commands against a BNF grammar")
	argparser.add_argument("-f", "--file", default=DEFAULT_GRAMMAR_FILE, help="grammar file to load")
	argparser.add_argument("-c", "--rule", default=DEFAULT_RULE_NAME, help="rule that every command must match")
	argparser.add_argument("-d", "--debug", type=int, default=0, help="debug level (0-3)")
	args = argparser.parse_args()

	set_debug_level(args.debug)

	grammar = Grammar.from_file(args.file)
	print("Loaded BNF rules from " + args.file)
	if args.debug:
		grammar.print()

	if args.rule not in grammar.list_rules():
		argparser.exit(1, "Rule " + args.rule + " not found in " + args.file + "\n")

	print("Parsing against rule: " + args.rule)

	Repl(grammar).start(sys.stdin, sys.stdout, args.rule)


if __name__ == "__main__":
	main()
