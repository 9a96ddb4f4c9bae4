"""Condition evaluator adapters.

The navigator treats condition expressions as opaque strings. These adapters
plug an existing expression engine, or a table of predicates, into the
IConditionEvaluator interface without the navigator knowing the grammar.
"""

from collections.abc import Callable, Mapping
from typing import Any

# Evaluator function: receives conversation data and the expression
EvaluatorFn = Callable[[Mapping[str, Any], str], Any]

# Predicate bound to a single expression
PredicateFn = Callable[[Mapping[str, Any]], Any]


class CallableConditionEvaluator:
    """Wrap a plain function as an IConditionEvaluator."""

    def __init__(self, fn: EvaluatorFn) -> None:
        self._fn = fn

    def evaluate(self, data: Mapping[str, Any], expression: str) -> bool:
        return bool(self._fn(data, expression))


class MappingConditionEvaluator:
    """Resolve expressions through a table of predicates.

    Useful when the set of conditions used by a graph is known up front:

        evaluator = MappingConditionEvaluator({
            "is_adult": lambda data: data.get("age", 0) >= 18,
        })
    """

    def __init__(self, predicates: Mapping[str, PredicateFn]) -> None:
        self._predicates = dict(predicates)

    def register(self, expression: str, predicate: PredicateFn) -> None:
        """Add or replace the predicate for an expression."""
        self._predicates[expression] = predicate

    def evaluate(self, data: Mapping[str, Any], expression: str) -> bool:
        """Evaluate the predicate registered for expression.

        Raises:
            KeyError: If no predicate is registered for expression
        """
        try:
            predicate = self._predicates[expression]
        except KeyError:
            raise KeyError(f"No predicate registered for condition '{expression}'") from None
        return bool(predicate(data))
