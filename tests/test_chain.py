import source_error as se
from source_error import chain

from .common import FakeInspector


def _chain():
    fake = FakeInspector(stack="")
    original = ValueError("disk full")
    inner = se.source_error(original, inspector=fake)
    outer = se.source_error(inner, inspector=fake)
    return outer, inner, original


def test_unwrap_source_error():
    "Test that unwrap follows a SourceError to its cause."

    outer, inner, original = _chain()

    assert chain.unwrap(outer) is inner
    assert chain.unwrap(inner) is original


def test_unwrap_raise_from():
    "Test that unwrap follows __cause__ on ordinary exceptions."

    try:
        try:
            raise KeyError("k")
        except KeyError as exc:
            raise ValueError("v") from exc
    except ValueError as exc:
        subj = exc

    assert isinstance(chain.unwrap(subj), KeyError)


def test_unwrap_nothing():
    "Test that unwrap returns None for values that wrap nothing."

    assert chain.unwrap(ValueError("v")) is None
    assert chain.unwrap(None) is None
    assert chain.unwrap("text") is None


def test_causes():
    "Test that causes yields every link below the starting value, in order."

    outer, inner, original = _chain()

    assert list(chain.causes(outer)) == [inner, original]
    assert list(chain.causes(original)) == []


def test_causes_not_deduplicated():
    "Test that the same failure wrapped twice shows up as separate links."

    fake = FakeInspector(stack="")
    original = ValueError("disk full")
    first = se.source_error(original, inspector=fake)
    second = se.source_error(first, inspector=fake)

    assert list(chain.causes(second)) == [first, original]


def test_causes_cycle():
    "Test that causes stops when the chain loops back on itself."

    a = ValueError("a")
    b = KeyError("b")
    a.__cause__ = b
    b.__cause__ = a

    assert list(chain.causes(a)) == [b]


def test_root_cause():
    "Test that root_cause finds the innermost value, or the value itself."

    outer, inner, original = _chain()

    assert chain.root_cause(outer) is original
    assert chain.root_cause(original) is original


def test_root_cause_none_inside():
    "Test that root_cause stops above a wrapped None."

    subj = se.source_error(None, inspector=FakeInspector(stack=""))

    assert chain.root_cause(subj) is subj


def test_find_cause():
    "Test that find_cause returns the first value of a type, starting with the value itself."

    outer, inner, original = _chain()

    assert chain.find_cause(outer, se.SourceError) is outer
    assert chain.find_cause(outer, ValueError) is original
    assert chain.find_cause(outer, KeyError) is None
