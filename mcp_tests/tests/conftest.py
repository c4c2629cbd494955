from typing import Optional

import pytest


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}
        self.descriptions = {}

    def tool(self, *, name: str, description: Optional[str] = None):
        def _decorator(fn):
            self.tools[name] = fn
            self.descriptions[name] = description
            return fn
        return _decorator


class FakeDispatcher:
    """Records tool calls and returns a canned envelope."""

    def __init__(self, envelope):
        self._envelope = envelope
        self.calls = []

    async def call_tool(self, name, arguments=None):
        self.calls.append((name, dict(arguments or {})))
        return self._envelope


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_dispatcher_factory():
    return FakeDispatcher


@pytest.fixture
def sample_tree(tmp_path):
    # tmp/
    #   a.txt
    #   .hidden
    #   sub/
    #     b.md
    #     deeper/
    #       c.py
    (tmp_path / "a.txt").write_text("alpha", encoding="utf-8")
    (tmp_path / ".hidden").write_text("h", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.md").write_text("# b", encoding="utf-8")
    (tmp_path / "sub" / "deeper").mkdir()
    (tmp_path / "sub" / "deeper" / "c.py").write_text("print(1)\n", encoding="utf-8")
    return tmp_path
