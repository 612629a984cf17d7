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

from .grammar import Grammar as Grammar

from .grammar import GrammarError as GrammarError
from .grammar import RuleNotFound as RuleNotFound
from .grammar import GrammarSyntaxError as GrammarSyntaxError
from .grammar import RecursiveRuleError as RecursiveRuleError

from .symbols import Symbol as Symbol
from .symbols import Terminal as Terminal
from .symbols import Nonterminal as Nonterminal
from .symbols import CharacterClass as CharacterClass
from .symbols import Group as Group
from .symbols import OptionalSymbol as OptionalSymbol
from .symbols import RepeatableSymbol as RepeatableSymbol
from .symbols import Production as Production
from .symbols import Alternation as Alternation
from .symbols import compile_definition as compile_definition

from .matcher import RecursiveMatcher as RecursiveMatcher

from .debug import set_debug_level as set_debug_level
