"""Run tree flattening tests."""

from __future__ import annotations

from browser_suite_runner.suite_definition import Step, describe, flatten, group


def _noop(_context: object) -> None:
    return None


def _steps(*descriptions: str) -> list[Step]:
    return [Step(description=description, action=_noop) for description in descriptions]


def test_flatten_single_leaf_keeps_its_name_and_steps() -> None:
    tree = describe("Login", _steps("open", "submit"))

    flat_runs = flatten(tree)

    assert len(flat_runs) == 1
    assert flat_runs[0].qualified_name == "Login"
    assert [step.description for step in flat_runs[0].steps] == ["open", "submit"]


def test_flatten_prefixes_group_names_in_declaration_order() -> None:
    tree = group(
        "Shop",
        [
            describe("Login", _steps("a")),
            group(
                "Cart",
                [
                    describe("Add", _steps("b")),
                    describe("Remove", _steps("c")),
                ],
            ),
            describe("Logout", _steps("d")),
        ],
    )

    names = [run.qualified_name for run in flatten(tree)]

    assert names == [
        "Shop / Login",
        "Shop / Cart / Add",
        "Shop / Cart / Remove",
        "Shop / Logout",
    ]


def test_flatten_empty_group_yields_no_runs() -> None:
    assert flatten(group("Empty", [])) == ()


def test_flatten_handles_deep_nesting_without_recursion_limit() -> None:
    tree = describe("leaf", _steps("x"))
    for _ in range(5000):
        tree = group("g", [tree])

    flat_runs = flatten(tree)

    assert len(flat_runs) == 1
    assert flat_runs[0].qualified_name.endswith("g / leaf")
    assert flat_runs[0].qualified_name.count(" / ") == 5000


def test_flatten_keeps_runs_with_duplicate_names() -> None:
    tree = group("Suite", [describe("Same", []), describe("Same", [])])

    names = [run.qualified_name for run in flatten(tree)]

    assert names == ["Suite / Same", "Suite / Same"]
