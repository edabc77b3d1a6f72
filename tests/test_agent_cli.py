import pytest

from hedera_chat.agent import agent_cli
from hedera_chat.agent.agent_cli import BANNER, run_repl


class FakeExecutor:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def invoke(self, payload):
        self.calls.append(payload)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def scripted(lines):
    remaining = list(lines)
    prompts = []

    def read_input(prompt):
        prompts.append(prompt)
        item = remaining.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    read_input.prompts = prompts
    return read_input


def test_balance_question_then_mixed_case_exit(capsys):
    executor = FakeExecutor([{"output": "Your balance is 10 HBAR"}])
    read_input = scripted(["What is my balance?", "EXIT"])

    run_repl(executor, read_input)

    out = capsys.readouterr().out.splitlines()
    assert out == [BANNER, "AI: Your balance is 10 HBAR", "Goodbye!"]
    assert executor.calls == [{"input": "What is my balance?"}]
    assert len(read_input.prompts) == 2


@pytest.mark.parametrize("line", ["exit", "QUIT", "  Exit  ", "", None])
def test_exit_inputs_terminate_without_invoking(capsys, line):
    executor = FakeExecutor([])
    read_input = scripted([line, "never read"])

    run_repl(executor, read_input)

    out = capsys.readouterr().out
    assert out.count("Goodbye!") == 1
    assert executor.calls == []
    assert len(read_input.prompts) == 1


@pytest.mark.parametrize("interrupt", [EOFError(), KeyboardInterrupt()])
def test_interrupt_at_prompt_exits_cleanly(capsys, interrupt):
    executor = FakeExecutor([])

    run_repl(executor, scripted([interrupt]))

    assert capsys.readouterr().out.splitlines()[-1] == "Goodbye!"
    assert executor.calls == []


def test_raw_input_is_forwarded_untrimmed():
    executor = FakeExecutor([{"output": "ok"}])

    run_repl(executor, scripted(["  send 1 hbar  ", "quit"]))

    assert executor.calls == [{"input": "  send 1 hbar  "}]


def test_reply_without_output_field_prints_raw_value(capsys):
    executor = FakeExecutor(["plain text reply", {"answer": 42}])

    run_repl(executor, scripted(["one", "two", "exit"]))

    out = capsys.readouterr().out.splitlines()
    assert "AI: plain text reply" in out
    assert "AI: {'answer': 42}" in out


def test_failed_turn_does_not_end_session(capsys):
    executor = FakeExecutor([RuntimeError("model unavailable"), {"output": "recovered"}])
    read_input = scripted(["first", "second", "exit"])

    run_repl(executor, read_input)

    captured = capsys.readouterr()
    assert "Error: model unavailable" in captured.err
    assert "AI: recovered" in captured.out
    assert captured.out.count("Goodbye!") == 1
    assert len(executor.calls) == 2
    assert len(read_input.prompts) == 3


def test_main_reports_fatal_bootstrap_error(monkeypatch, capsys):
    def failing_bootstrap():
        raise RuntimeError("ACCOUNT_ID not set")

    started = []
    monkeypatch.setattr(agent_cli, "load_dotenv", lambda: None)
    monkeypatch.setattr(agent_cli, "bootstrap", failing_bootstrap)
    monkeypatch.setattr(agent_cli, "run_repl", lambda executor: started.append(executor))

    assert agent_cli.main() == 1

    err = capsys.readouterr().err
    assert "Fatal error during CLI bootstrap: ACCOUNT_ID not set" in err
    assert started == []


def test_main_runs_repl_after_bootstrap(monkeypatch):
    executor = FakeExecutor([])
    started = []
    monkeypatch.setattr(agent_cli, "load_dotenv", lambda: None)
    monkeypatch.setattr(agent_cli, "bootstrap", lambda: executor)
    monkeypatch.setattr(agent_cli, "run_repl", lambda ex: started.append(ex))

    assert agent_cli.main() == 0
    assert started == [executor]


def test_main_loads_dotenv_once_before_bootstrap(monkeypatch):
    events = []
    monkeypatch.setattr(agent_cli, "load_dotenv", lambda: events.append("dotenv"))
    monkeypatch.setattr(agent_cli, "bootstrap", lambda: events.append("bootstrap") or FakeExecutor([]))
    monkeypatch.setattr(agent_cli, "run_repl", lambda executor: events.append("repl"))

    assert agent_cli.main() == 0
    assert events == ["dotenv", "bootstrap", "repl"]
