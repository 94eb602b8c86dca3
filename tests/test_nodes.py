"""
Sum and Product nodes: forward caching, backward chain rule and aliasing.
"""

import pytest

from aad_scalar import Product, Sum, Var


def test_add_grad():
    a = Var(3.0)
    b = Var(2.0)
    c = a + b

    assert isinstance(c, Sum)
    assert c.value() == 5.0

    c.propagate(1.0)
    assert c.grad() == 1.0
    assert a.grad() == 1.0
    assert b.grad() == 1.0


def test_twice_add_grad():
    a = Var(3.0)
    c = a + a

    assert c.value() == 6.0

    c.propagate(1.0)
    assert c.grad() == 1.0
    assert a.grad() == 2.0


def test_mul_grad():
    a = Var(3.0)
    b = Var(2.0)
    c = a * b

    assert isinstance(c, Product)
    assert c.value() == 6.0

    c.propagate(1.0)
    assert c.grad() == 1.0
    assert a.grad() == 2.0
    assert b.grad() == 3.0


def test_twice_mul_grad():
    a = Var(3.0)
    c = a * a

    assert c.value() == 9.0

    c.propagate(1.0)
    assert c.grad() == 1.0
    assert a.grad() == 6.0


def test_aliased_handles_in_product():
    a = Var(3.0)
    c = Product(a, a.alias())

    c.propagate(1.0)
    assert a.grad() == 6.0


def test_constructors_match_operators():
    a = Var(3.0)
    b = Var(2.0)
    assert Sum(a, b).value() == (a + b).value()
    assert Product(a, b).value() == (a * b).value()


def test_seed_is_scaled_by_product_rule():
    a = Var(3.0)
    b = Var(2.0)
    c = a * b
    c.propagate(0.5)
    assert c.grad() == 0.5
    assert a.grad() == 1.0
    assert b.grad() == 1.5


def test_operands_are_kept_by_reference():
    a = Var(3.0)
    b = Var(2.0)
    c = a * b
    assert c.left is a
    assert c.right is b


def test_value_frozen_at_construction():
    a = Var(3.0)
    c = a * a
    c.propagate(1.0)
    c.propagate(1.0)
    assert c.value() == 9.0
    assert a.value() == 3.0


def test_fresh_composite_has_zero_grad():
    a = Var(3.0)
    b = Var(2.0)
    assert (a + b).grad() == 0.0
    assert (a * b).grad() == 0.0


@pytest.mark.parametrize("kind", [Sum, Product])
def test_composite_rejects_non_nodes(kind):
    with pytest.raises(TypeError):
        kind(Var(1.0), 2.0)


def test_repr():
    a = Var(3.0)
    assert repr(a + a) == "Sum(6.0, grad=0.0)"
    assert repr(a * a) == "Product(9.0, grad=0.0)"


def test_composite_base_is_abstract():
    from aad_scalar.core.node import _Composite
    with pytest.raises(TypeError):
        _Composite(Var(1.0), Var(2.0))
