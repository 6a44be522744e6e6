"""Mock objects for gitgate testing."""

from tests.mocks.mock_runner import FakeRunner, ScriptedResponse

__all__ = [
    "FakeRunner",
    "ScriptedResponse",
]
