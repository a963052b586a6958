"""Tests for population statistics used by the evaluators."""

from src.evaluators.stats_generator import (
    build_eval_context,
    compute_dependency_frequency,
    compute_repo_counts,
)
from src.models.model_server import Dependency
from tests.factories import make_record, make_remote_record


def test_repo_counts_skip_remote_records():
    records = [
        make_record(name="acme__tools__a", repo="tools", path="a"),
        make_record(name="acme__tools__b", repo="tools", path="b"),
        make_record(name="zeta__x", owner="zeta", repo="x"),
        make_remote_record(),
    ]

    assert compute_repo_counts(records) == {"acme/tools": 2, "zeta/x": 1}


def test_dependency_frequency_counts_significant_only():
    records = [
        make_record(name="a", dependencies=[Dependency(name="zod", importance=9)]),
        make_record(name="b", dependencies=[
            Dependency(name="zod", importance=5),
            Dependency(name="lodash", importance=2),
        ]),
        make_record(name="c", dependencies=None),
    ]

    assert compute_dependency_frequency(records) == {"zod": 2}


def test_empty_population():
    context = build_eval_context(None)

    assert context.repo_counts == {}
    assert context.dependency_frequency is None
    assert context.population_size == 0


def test_rarity_requires_more_than_ten_records():
    population = [make_record(name=f"r{i}") for i in range(11)]

    assert build_eval_context(population[:10]).rarity_enabled is False
    assert build_eval_context(population).rarity_enabled is True
    assert build_eval_context(population).population_size == 11
