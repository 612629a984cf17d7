import io

import pytest

from bnfvalidator import Grammar, RuleNotFound
from bnfvalidator.repl import DEFAULT_GRAMMAR_FILE, Repl, Response


class StubGrammar(Grammar):
	def __init__(self, valid: bool):
		super().__init__()
		self.valid = valid
		self.calls = []

	def is_valid_sentence(self, sentence, rule_name):
		self.calls.append((sentence, rule_name))
		return self.valid


def run(repl, text, rule_name="command"):
	output = io.StringIO()
	repl.start(io.StringIO(text), output, rule_name)
	return output.getvalue()


def test_start_and_exit():
	repl = Repl(StubGrammar(True))
	output = run(repl, "exit\n")
	assert "Welcome to the Domolect 2.0 parser!" in output
	assert "Enter a command or type `exit` to quit." in output
	assert Response.EXIT.message in output
	assert not repl.is_running


def test_valid_command():
	grammar = StubGrammar(True)
	output = run(Repl(grammar), "open curtains\nexit\n", "mockRule")
	assert Response.SUCCESS.message in output
	assert grammar.calls == [("open curtains", "mockRule")]


def test_invalid_command():
	output = run(Repl(StubGrammar(False)), "open sesame\nexit\n")
	assert Response.UNKNOWN_COMMAND.message in output


def test_prompt_is_printed_for_every_line():
	output = run(Repl(StubGrammar(False)), "a\nb\nexit\n")
	assert output.count(">>>") == 3


def test_end_of_input_stops(capsys):
	repl = Repl(StubGrammar(True))
	output = run(repl, "open curtains\n")
	assert Response.SUCCESS.message in output
	assert not repl.is_running
	assert "EOF reached" in capsys.readouterr().err


def test_missing_streams():
	repl = Repl(StubGrammar(True))
	with pytest.raises(ValueError):
		repl.start(None, io.StringIO(), "command")

	assert not repl.is_running


def test_evaluate_input():
	repl = Repl(StubGrammar(True))
	assert repl.evaluate_input("exit", "command") is Response.EXIT
	assert repl.evaluate_input("anything", "command") is Response.SUCCESS
	assert Repl(StubGrammar(False)).evaluate_input("anything", "command") is Response.UNKNOWN_COMMAND


def test_unknown_rule_propagates():
	repl = Repl(Grammar())
	with pytest.raises(RuleNotFound):
		repl.evaluate_input("open curtains", "command")


@pytest.mark.parametrize("text,rule_name,response", [
	("living-room set thermostat to 6 9 9 K", "command", Response.SUCCESS),
	("open curtains", "command", Response.SUCCESS),
	("turn laser-cannon on", "command", Response.SUCCESS),
	("turn brazier off", "command", Response.SUCCESS),
	("invalid command", "command", Response.UNKNOWN_COMMAND),
	("kitchen set incinerator to 6 9 K when current-temperature less-than 6 9 K", "augmented_command", Response.SUCCESS),
	("kitchen set incinerator to 6 9 K when 1 2 : 3 4 am until 0 7 : 5 6 pm", "augmented_command", Response.SUCCESS),
])
def test_domolect_repl(text, rule_name, response):
	repl = Repl(Grammar.from_file(DEFAULT_GRAMMAR_FILE))
	output = run(repl, text + "\nexit\n", rule_name)
	assert response.message in output
