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

debug_level = 0
indent = 0

def set_debug_level(n: int):
	"""
	Sets the verbosity of the diagnostic output printed to stdout.

	1 prints grammar lines as they are loaded, 2 prints every rule the matcher enters and its result, and 3 also
	prints every single-token comparison.
	"""
	global debug_level
	debug_level = n


def trace(level: int, *args):
	if debug_level >= level:
		print(" "*indent + " ".join([str(arg) for arg in args]))


def enter():
	global indent
	indent += 1


def leave():
	global indent
	indent -= 1
