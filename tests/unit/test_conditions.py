"""Unit tests for condition evaluator adapters."""

import pytest

from sendero.conditions import CallableConditionEvaluator, MappingConditionEvaluator


class TestCallableConditionEvaluator:
    def test_result_is_coerced_to_bool(self):
        evaluator = CallableConditionEvaluator(lambda data, expr: data.get(expr))

        assert evaluator.evaluate({"name": "Ana"}, "name") is True
        assert evaluator.evaluate({}, "name") is False

    def test_errors_propagate(self):
        def fail(data, expr):
            raise RuntimeError("engine down")

        with pytest.raises(RuntimeError, match="engine down"):
            CallableConditionEvaluator(fail).evaluate({}, "x")


class TestMappingConditionEvaluator:
    """Tests for predicate-table evaluation."""

    def test_registered_predicate(self, evaluator):
        assert evaluator.evaluate({"age": 20}, "is_adult") is True
        assert evaluator.evaluate({"age": 12}, "is_adult") is False

    def test_register_adds_predicate(self):
        evaluator = MappingConditionEvaluator({})

        evaluator.register("has_email", lambda data: "email" in data)

        assert evaluator.evaluate({"email": "a@b.c"}, "has_email") is True

    def test_unknown_expression_raises_key_error(self):
        with pytest.raises(KeyError, match="No predicate registered"):
            MappingConditionEvaluator({}).evaluate({}, "mystery")
