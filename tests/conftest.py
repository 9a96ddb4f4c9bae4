"""Shared fixtures for Sendero tests.

Graphs are built in memory and conditions are resolved through a predicate
table, so tests never depend on an expression language.
"""

import logging

import pytest

from sendero.conditions import MappingConditionEvaluator
from sendero.graph import DialogGraph, GraphBuilder
from sendero.navigator import Navigator
from sendero.state import Conversation


@pytest.fixture
def evaluator() -> MappingConditionEvaluator:
    """Evaluator with a few fixed and data-driven predicates."""
    return MappingConditionEvaluator(
        {
            "always": lambda data: True,
            "never": lambda data: False,
            "is_adult": lambda data: data.get("age", 0) >= 18,
            "wants_help": lambda data: bool(data.get("help")),
        }
    )


@pytest.fixture
def onboarding_graph() -> DialogGraph:
    """
    root
    ├── greet
    ├── ask_age           scenarios: is_adult -> [adult_offer], never -> kids_corner
    │   └── adult_offer   (scenario step)
    └── goodbye
    kids_corner           next: goodbye
    """
    return (
        GraphBuilder()
        .add_node("root")
        .add_step("root", "greet")
        .add_step("root", "ask_age")
        .add_step("root", "goodbye")
        .add_scenario("ask_age", "is_adult", steps=["adult_offer"])
        .add_scenario("ask_age", "never", target="kids_corner")
        .add_node("kids_corner", next_id="goodbye")
        .set_next("greet", "ask_age")
        .set_next("ask_age", "goodbye")
        .set_next("adult_offer", "goodbye")
        .set_root("root")
        .build()
    )


@pytest.fixture
def navigator(onboarding_graph, evaluator) -> Navigator:
    return Navigator(onboarding_graph, evaluator)


@pytest.fixture
def conversation() -> Conversation:
    return Conversation()


@pytest.fixture
def restore_sendero_logger():
    """Undo logging.config changes made by setup_logging."""
    root_logger = logging.getLogger()
    sendero_logger = logging.getLogger("sendero")
    saved = {
        logger: (list(logger.handlers), logger.level, logger.propagate)
        for logger in (root_logger, sendero_logger)
    }
    yield sendero_logger
    for logger, (handlers, level, propagate) in saved.items():
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate
