"""Tests for Result combinators."""

import math

import pytest

import pyok as pk


def _parse(s: str) -> pk.Result[int, str]:
    return pk.Ok(int(s)) if s.lstrip("-").isdigit() else pk.Err(f"bad: {s}")


def _positive(n: int) -> pk.Result[int, str]:
    return pk.Ok(n) if n > 0 else pk.Err("not positive")


class TestTags:
    """Tag queries."""

    def test_tags(self) -> None:
        """Exactly one tag query holds."""
        assert pk.Ok(1).is_ok()
        assert not pk.Ok(1).is_err()
        assert pk.Err("e").is_err()
        assert not pk.Err("e").is_ok()

    @pytest.mark.parametrize("value", [0, "", math.nan, None, [], False])
    def test_falsy_values_are_ok(self, value: object) -> None:
        """Success never depends on truthiness."""
        assert pk.Ok(value).is_ok()

    def test_is_ok_and(self) -> None:
        """Predicate is only checked on Ok."""
        assert pk.Ok(2).is_ok_and(lambda v: v > 1)
        assert not pk.Ok(0).is_ok_and(lambda v: v > 1)
        assert not pk.Err(2).is_ok_and(lambda v: v > 1)

    def test_is_err_and(self) -> None:
        """Predicate is only checked on Err."""
        assert pk.Err("boom").is_err_and(lambda e: "o" in e)
        assert not pk.Err("bam").is_err_and(lambda e: "o" in e)
        assert not pk.Ok("boom").is_err_and(lambda e: "o" in e)

    def test_constructors(self) -> None:
        """Lowercase constructors build the same variants."""
        assert pk.ok(1) == pk.Ok(1)
        assert pk.err("e") == pk.Err("e")
        assert pk.Ok(1) != pk.Err(1)


class TestConversions:
    """ok() and err()."""

    def test_ok(self) -> None:
        """ok discards the error."""
        assert pk.Ok(2).ok() == pk.Some(2)
        assert pk.Err("e").ok().is_none()

    def test_err(self) -> None:
        """err discards the value."""
        assert pk.Err("e").err() == pk.Some("e")
        assert pk.Ok(2).err().is_none()


class TestExtraction:
    """Unwrap family."""

    def test_unwrap_returns_stored_object(self) -> None:
        """unwrap hands back the very object stored."""
        payload = object()
        assert pk.Ok(payload).unwrap() is payload

    def test_unwrap_err_variant(self) -> None:
        """unwrap on Err carries the error."""
        with pytest.raises(pk.ResultUnwrapError, match="'boom'") as info:
            pk.Err("boom").unwrap()
        assert info.value.payload == "boom"

    def test_unwrap_chains_exception_payload(self) -> None:
        """An exception payload becomes the cause of the unwrap error."""
        cause = KeyError("k")
        with pytest.raises(pk.ResultUnwrapError) as info:
            pk.Err(cause).unwrap()
        assert info.value.__cause__ is cause

    def test_unwrap_keeps_context_of_handled_exception(self) -> None:
        """A plain payload leaves the exception being handled visible."""
        handled = KeyError("orig")
        with pytest.raises(pk.ResultUnwrapError) as info:
            try:
                raise handled
            except KeyError:
                pk.Err("boom").expect("loading")
        assert info.value.__context__ is handled
        assert not info.value.__suppress_context__
        with pytest.raises(pk.ResultUnwrapError) as info:
            try:
                raise handled
            except KeyError:
                pk.Err("boom").unwrap()
        assert info.value.__context__ is handled
        assert not info.value.__suppress_context__

    def test_expect(self) -> None:
        """expect carries the message and the error."""
        assert pk.Ok(1).expect("nope") == 1
        with pytest.raises(pk.ResultUnwrapError, match="loading: disk full"):
            pk.Err("disk full").expect("loading")

    def test_unwrap_err(self) -> None:
        """unwrap_err is the mirror of unwrap."""
        assert pk.Err("e").unwrap_err() == "e"
        with pytest.raises(pk.ResultUnwrapError, match="unwrap_err") as info:
            pk.Ok(3).unwrap_err()
        assert info.value.payload == 3

    def test_expect_err(self) -> None:
        """expect_err carries the message and the value."""
        assert pk.Err("e").expect_err("x") == "e"
        with pytest.raises(pk.ResultUnwrapError, match="wanted failure"):
            pk.Ok(3).expect_err("wanted failure")

    def test_unwrap_or(self) -> None:
        """Defaults only apply on Err."""
        assert pk.Ok(0).unwrap_or(9) == 0
        assert pk.Err("e").unwrap_or(9) == 9
        assert pk.Ok(0).unwrap_or_else(lambda: 9) == 0
        assert pk.Err("e").unwrap_or_else(lambda: 9) == 9


class TestTransform:
    """map family."""

    def test_map(self) -> None:
        """map only touches Ok."""
        assert pk.Ok(2).map(lambda v: v + 1) == pk.Ok(3)
        assert pk.Err("e").map(lambda v: v + 1) == pk.Err("e")

    def test_map_err(self) -> None:
        """map_err only touches Err."""
        assert pk.Err("abc").map_err(len) == pk.Err(3)
        assert pk.Ok("abc").map_err(len) == pk.Ok("abc")

    def test_map_or(self) -> None:
        """map_or returns the default on Err."""
        assert pk.Ok("ab").map_or(0, len) == 2
        assert pk.Err("ab").map_or(0, len) == 0

    def test_map_or_else_returns_default_directly(self) -> None:
        """The default is returned as is, never passed to f."""
        assert pk.Ok("ab").map_or_else(lambda: "zz", str.upper) == "AB"
        assert pk.Err("e").map_or_else(lambda: "zz", str.upper) == "zz"

    def test_flatten(self) -> None:
        """flatten removes one level of nesting."""
        assert pk.Ok(pk.Ok(1)).flatten() == pk.Ok(1)
        assert pk.Ok(pk.Err("in")).flatten() == pk.Err("in")
        assert pk.Err("out").flatten() == pk.Err("out")

    def test_match(self) -> None:
        """match dispatches on the variant."""
        assert pk.Ok(1).match(ok=lambda v: f"ok {v}", err=lambda e: f"err {e}") == "ok 1"
        assert pk.Err(2).match(ok=lambda v: f"ok {v}", err=lambda e: f"err {e}") == "err 2"


class TestCombine:
    """and_/or_ family."""

    def test_and(self) -> None:
        """and_ returns other on Ok, keeps the Err otherwise."""
        assert pk.Ok(1).and_(pk.Ok("x")) == pk.Ok("x")
        assert pk.Ok(1).and_(pk.Err("late")) == pk.Err("late")
        assert pk.Err("early").and_(pk.Ok("x")) == pk.Err("early")

    def test_or(self) -> None:
        """or_ keeps Ok, otherwise takes other, possibly with another error type."""
        assert pk.Ok(1).or_(pk.Err(404)) == pk.Ok(1)
        assert pk.Err("e").or_(pk.Ok(2)) == pk.Ok(2)
        assert pk.Err("e").or_(pk.Err(404)) == pk.Err(404)

    def test_or_else(self) -> None:
        """or_else is lazy and may change the error type."""
        calls: list[int] = []

        def fallback() -> pk.Result[int, int]:
            calls.append(1)
            return pk.Err(500)

        assert pk.Ok(1).or_else(fallback) == pk.Ok(1)
        assert calls == []
        assert pk.Err("e").or_else(fallback) == pk.Err(500)
        assert pk.Err("e").or_else(lambda: pk.Ok(1)) == pk.Ok(1)

    def test_and_then(self) -> None:
        """and_then chains fallible steps, stopping at the first Err."""
        assert pk.Ok("5").and_then(_parse).and_then(_positive) == pk.Ok(5)
        assert pk.Ok("-5").and_then(_parse).and_then(_positive) == pk.Err(
            "not positive"
        )
        assert pk.Ok("x").and_then(_parse).and_then(_positive) == pk.Err("bad: x")
        assert pk.Err("e").flat_map(_parse) == pk.Err("e")


class TestLaws:
    """Functor and monad laws."""

    @pytest.mark.parametrize(
        "x", [pk.Ok(3), pk.Ok(0), pk.Ok(math.nan), pk.Err("e"), pk.Err(math.nan)]
    )
    def test_map_identity(self, x: pk.Result[int, str]) -> None:
        """Mapping the identity changes nothing."""
        assert x.map(lambda v: v) == x

    @pytest.mark.parametrize("x", [pk.Ok(3), pk.Err("e")])
    def test_map_composition(self, x: pk.Result[int, str]) -> None:
        """Two maps equal one map of the composition."""
        assert x.map(str).map(len) == x.map(lambda v: len(str(v)))

    @pytest.mark.parametrize("x", [pk.Ok("7"), pk.Ok("-7"), pk.Ok("q"), pk.Err("e")])
    def test_and_then_associativity(self, x: pk.Result[str, str]) -> None:
        """Chaining order does not matter."""
        assert x.and_then(_parse).and_then(_positive) == x.and_then(
            lambda v: _parse(v).and_then(_positive)
        )


class TestSideEffects:
    """tap, inspect and inspect_err."""

    def test_tap(self) -> None:
        """tap only runs on Ok and returns the function result."""
        seen: list[int] = []
        assert pk.Ok(1).tap(lambda v: seen.append(v) or "done") == "done"
        assert pk.Err(2).tap(seen.append) is None
        assert seen == [1]

    def test_tap_never_changes_container(self) -> None:
        """The container keeps its tag and payload."""
        res = pk.Ok(1)
        res.tap(lambda _: pk.Err("ignored"))
        assert res == pk.Ok(1)

    def test_inspect(self) -> None:
        """inspect and inspect_err return the container itself."""
        seen: list[object] = []
        ok = pk.Ok(1)
        bad = pk.Err("e")
        assert ok.inspect(seen.append) is ok
        assert ok.inspect_err(seen.append) is ok
        assert bad.inspect(seen.append) is bad
        assert bad.inspect_err(seen.append) is bad
        assert seen == [1, "e"]


def test_repr() -> None:
    """Variants render with their payload."""
    assert repr(pk.Ok(1)) == "Ok(value=1)"
    assert repr(pk.Err("no")) == "Err(error='no')"
