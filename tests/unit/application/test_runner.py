"""Tests for application/runner.py."""

import sys

import pytest

from grepbat.application.runner import process_arguments
from grepbat.domain.exceptions import CollaboratorError, ViewerSpawnError
from tests.factories import FakeRunner, make_invoker


class TestProcessArguments:
    """Tests for process_arguments()."""

    def test_no_arguments(self) -> None:
        runner = FakeRunner()
        process_arguments([], make_invoker(runner))
        assert runner.calls == []

    def test_each_match_viewed_in_order(self) -> None:
        runner = FakeRunner()
        process_arguments(
            ["a.py:1:1: x", "b.py:200:3: y", "c:\\c.py:30:1: z"],
            make_invoker(runner),
        )
        assert [call[-1] for call in runner.calls] == ["a.py", "b.py", "c:\\c.py"]
        assert runner.calls[1][-2] == "--highlight-line=200"

    def test_malformed_arguments_skipped(self) -> None:
        runner = FakeRunner()
        process_arguments(
            ["noise", "a.py:1:1: x", "foo:10:", "b.py:1x:1: y", "c.py:3:1: z"],
            make_invoker(runner),
        )
        assert [call[-1] for call in runner.calls] == ["a.py", "c.py"]

    def test_only_malformed_arguments(self) -> None:
        runner = FakeRunner()
        process_arguments(["noise", "foo:10:"], make_invoker(runner))
        assert runner.calls == []

    def test_failure_aborts_remaining(self) -> None:
        runner = FakeRunner(fail_on_call=2)

        with pytest.raises(ViewerSpawnError):
            process_arguments(
                ["a.py:1:1: x", "b.py:2:1: y", "c.py:3:1: z"],
                make_invoker(runner),
            )

        assert [call[-1] for call in runner.calls] == ["a.py", "b.py"]

    def test_failure_is_collaborator_error(self) -> None:
        runner = FakeRunner(fail_on_call=1)
        with pytest.raises(CollaboratorError):
            process_arguments(["a.py:1:1: x"], make_invoker(runner))

    def test_accepts_generator(self) -> None:
        runner = FakeRunner()
        process_arguments((f"f{i}.py:{i}:1: x" for i in range(3)), make_invoker(runner))
        assert len(runner.calls) == 3

    def test_huge_line_skipped_and_loop_continues(self) -> None:
        runner = FakeRunner()
        process_arguments(
            [f"big.py:{sys.maxsize + 100}:1: x", "a.py:1:1: y"],
            make_invoker(runner),
        )
        assert [call[-1] for call in runner.calls] == ["a.py"]
