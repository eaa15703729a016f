import pytest

from calc_parser.config import Settings


class ScriptedSession:
    """Stand-in for a PromptSession that replays canned lines.

    Items that are exception classes or instances are raised instead of
    returned. Running out of items behaves like Ctrl-D.
    """

    def __init__(self, items):
        self.items = list(items)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        if not self.items:
            raise EOFError
        item = self.items.pop(0)
        if isinstance(item, BaseException) or (isinstance(item, type) and issubclass(item, BaseException)):
            raise item
        return item


@pytest.fixture
def scripted_session():
    return ScriptedSession


@pytest.fixture
def settings(tmp_path):
    return Settings(history_file=str(tmp_path / "history"))


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("CALC_PROMPT", "CALC_HISTORY_FILE", "CALC_SHOW_TREE", "CALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
