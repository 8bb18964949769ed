import threading

import pytest

from rumus_pkg.equation import Equation
from rumus_pkg.registry import EquationRegistry
from rumus_pkg.types import ValidationError


@pytest.fixture
def registry():
    return EquationRegistry()


def test_register_and_get(registry):
    equation = Equation("1 + 1", "two", registry=registry)
    assert registry.get("two") is equation
    assert "two" in registry
    assert len(registry) == 1


def test_unregister(registry):
    equation = Equation("1", "one", registry=registry)
    assert registry.unregister("one") is equation
    assert registry.unregister("one") is None
    assert "one" not in registry


def test_clear_and_names(registry):
    Equation("1", "b", registry=registry)
    Equation("2", "a", registry=registry)
    assert registry.names() == ["a", "b"]
    registry.clear()
    assert registry.names() == []


@pytest.mark.parametrize("name", ["2x", "a b", "x+y", "$0", ""])
def test_invalid_names_rejected(registry, name):
    with pytest.raises(ValidationError):
        registry.register(name, Equation("1", registry=registry))


def test_constant_name_is_shadowed(registry, caplog):
    Equation("1", "PI", registry=registry)
    assert "PI" in registry
    assert "shadowed" in caplog.text
    assert Equation("PI", registry=registry).evaluate() != 1


def test_concurrent_registration(registry):
    def worker(offset):
        for index in range(50):
            Equation(f"{index}", f"eq_{offset}_{index}", registry=registry)

    threads = [threading.Thread(target=worker, args=(offset,)) for offset in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(registry) == 400
    assert Equation("eq_3_7 + eq_7_3", registry=registry).evaluate() == 10
