"""Unit tests for input parsing and command formatting."""

import pytest
from medlab import (
    Action,
    ActionKind,
    Location,
    MalformedSnapshot,
    Ownership,
    ResourceKind,
    connect_molecule,
    connect_sample,
    format_action,
    goto,
    parse_agent_line,
    parse_available_line,
    parse_project,
    parse_task_line,
)

# --- Parse ---


class TestParseAgentLine:
    def test_full_line(self):
        status = parse_agent_line("MOLECULES 2 15 1 0 2 0 3 0 1 0 0 2")
        assert status.location is Location.MOLECULES
        assert status.eta == 2
        assert status.health == 15
        assert status.storage.as_list() == [1, 0, 2, 0, 3]
        assert status.expertise.as_list() == [0, 1, 0, 0, 2]

    def test_unknown_module(self):
        with pytest.raises(MalformedSnapshot):
            parse_agent_line("GARAGE 0 0 0 0 0 0 0 0 0 0 0 0")

    def test_wrong_token_count(self):
        with pytest.raises(ValueError, match="Expected 13 tokens"):
            parse_agent_line("DIAGNOSIS 0 0")

    def test_non_numeric(self):
        with pytest.raises(ValueError):
            parse_agent_line("DIAGNOSIS x 0 0 0 0 0 0 0 0 0 0 0")

    def test_negative_storage(self):
        with pytest.raises(MalformedSnapshot):
            parse_agent_line("DIAGNOSIS 0 0 -1 0 0 0 0 0 0 0 0 0")


class TestParseTaskLine:
    def test_cloud_sample(self):
        task = parse_task_line("12 -1 2 C 10 0 3 0 2 1")
        assert task.id == 12
        assert task.owner is Ownership.SHARED
        assert task.rank == 2
        assert task.expertise_gain is ResourceKind.C
        assert task.health == 10
        assert task.cost.as_list() == [0, 3, 0, 2, 1]
        assert task.total_cost == 6

    def test_own_sample(self):
        task = parse_task_line("3 0 1 A 1 1 1 1 1 0")
        assert task.owner is Ownership.SELF

    def test_no_expertise_gain(self):
        task = parse_task_line("3 1 1 0 1 1 1 1 1 0")
        assert task.expertise_gain is None
        assert task.owner is Ownership.OTHER

    def test_unknown_owner(self):
        with pytest.raises(MalformedSnapshot):
            parse_task_line("3 7 1 A 1 1 1 1 1 0")

    def test_wrong_token_count(self):
        with pytest.raises(ValueError):
            parse_task_line("3 0 1 A 1")


class TestParseSmallLines:
    def test_project(self):
        project = parse_project("0 3 3 3 0")
        assert project.expertise.as_list() == [0, 3, 3, 3, 0]

    def test_available(self):
        assert parse_available_line("5 5 4 5 6").as_list() == [5, 5, 4, 5, 6]

    def test_available_wrong_count(self):
        with pytest.raises(ValueError):
            parse_available_line("5 5 5")


# --- Format ---


class TestFormatAction:
    def test_goto(self):
        assert format_action(goto(Location.DIAGNOSIS)) == "GOTO DIAGNOSIS"

    def test_goto_start(self):
        assert format_action(goto(Location.START)) == "GOTO START_POS"

    def test_connect_sample(self):
        assert format_action(connect_sample(42)) == "CONNECT 42"

    def test_connect_sample_zero(self):
        assert format_action(connect_sample(0)) == "CONNECT 0"

    def test_connect_molecule(self):
        assert format_action(connect_molecule(ResourceKind.D)) == "CONNECT D"

    def test_goto_without_module(self):
        with pytest.raises(ValueError):
            format_action(Action(kind=ActionKind.GOTO))

    def test_connect_without_target(self):
        with pytest.raises(ValueError):
            format_action(Action(kind=ActionKind.CONNECT))
