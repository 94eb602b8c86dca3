"""
Function-style gradient helpers: grad, grads, grads_list, value.
"""

import numpy as np
import pytest

from aad_scalar import Var, grad, grads, grads_list, value


def test_value_passthrough():
    assert value(Var(2.5)) == 2.5
    assert value(Var(2.0) * Var(3.0)) == 6.0
    assert value(7.0) == 7.0


def test_grad_of_square():
    assert grad(lambda x: x * x, 3.0) == 6.0


def test_grad_of_constant_function_is_zero():
    assert grad(lambda x: 42.0, 3.0) == 0.0
    assert grad(lambda x: Var(42.0), 3.0) == 0.0


def test_grad_calls_do_not_accumulate():
    f = lambda x: x * x + x
    assert grad(f, 2.0) == 5.0
    assert grad(f, 2.0) == 5.0


def test_grads_dict_order_and_values():
    def f(v):
        return v["a"] * v["a"] + v["b"] * v["c"]

    g = grads(f, {"a": 3.0, "b": 2.0, "c": 4.0})
    assert list(g) == ["a", "b", "c"]
    assert g == {"a": 6.0, "b": 4.0, "c": 2.0}


def test_grads_unused_input_is_zero():
    g = grads(lambda v: v["x"] * 2, {"x": 1.0, "unused": 5.0})
    assert g == {"x": 2.0, "unused": 0.0}


def test_grads_list():
    f = lambda xs: xs[0] * xs[0] + 3 * xs[1]
    assert grads_list(f, [2.0, 4.0]) == [4.0, 3.0]


def test_bad_return_type_raises():
    with pytest.raises(ValueError):
        grad(lambda x: "not a number", 1.0)
    with pytest.raises(ValueError):
        grads(lambda v: None, {"x": 1.0})


def test_array_output_is_rejected():
    with pytest.raises(ValueError):
        grad(lambda x: np.array([1.0, 2.0]), 1.0)
    with pytest.raises(ValueError):
        grads_list(lambda xs: True, [1.0])


def test_numpy_scalar_output_is_a_constant():
    assert grad(lambda x: np.float64(3.0), 1.0) == 0.0
    assert grad(lambda x: np.int64(3), 1.0) == 0.0


def test_grads_list_product_plus_operand():
    f = lambda xs: xs[0] * xs[1] + xs[1]
    assert grads_list(f, [5.0, 2.0]) == [2.0, 6.0]
