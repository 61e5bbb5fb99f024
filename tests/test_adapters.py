"""Tests for the creation and adapter functions of pyok.option and pyok.result."""

import math
from collections.abc import Iterator

import pytest

import pyok as pk
from pyok import option, result

PRESENT_VALUES = [42, 0, "", math.inf, {}, [], False]


def _boom() -> int:
    msg = "boom"
    raise ValueError(msg)


class TestOf:
    """of treats only None as absent."""

    @pytest.mark.parametrize("value", PRESENT_VALUES)
    def test_option_present(self, value: object) -> None:
        """Falsy values are present values."""
        opt = option.of(value)
        assert opt.is_some()
        assert opt.unwrap() is value

    @pytest.mark.parametrize("value", PRESENT_VALUES)
    def test_result_present(self, value: object) -> None:
        """Falsy values are Ok values."""
        res = result.of(value, "missing")
        assert res.is_ok()
        assert res.unwrap() is value

    def test_nan_is_present(self) -> None:
        """NaN is a value like any other."""
        assert math.isnan(option.of(math.nan).unwrap())
        assert math.isnan(result.of(math.nan, "e").unwrap())

    def test_none_is_absent(self) -> None:
        """None is the only absent sentinel."""
        assert option.of(None).is_none()
        assert result.of(None, "missing") == pk.Err("missing")


class TestFrom:
    """from_ converts failures at the call boundary."""

    def test_option_success(self) -> None:
        """A returned value is wrapped."""
        assert option.from_(lambda: 0) == pk.Some(0)
        assert option.from_(int, "7") == pk.Some(7)

    def test_option_failure(self) -> None:
        """Both None and exceptions give NONE."""
        assert option.from_(lambda: None).is_none()
        assert option.from_(_boom).is_none()

    def test_result_success(self) -> None:
        """A returned value is wrapped."""
        assert result.from_(lambda: "", "e") == pk.Ok("")
        assert result.from_(int, "e", "12") == pk.Ok(12)

    def test_result_failure(self) -> None:
        """Both None and exceptions give the provided error."""
        assert result.from_(lambda: None, "e") == pk.Err("e")
        assert result.from_(_boom, "e") == pk.Err("e")

    def test_kwargs_forwarded(self) -> None:
        """Keyword arguments reach the function."""
        assert option.from_(int, "ff", base=16) == pk.Some(255)
        assert result.from_(int, "e", "ff", base=16) == pk.Ok(255)

    def test_base_exceptions_propagate(self) -> None:
        """Only Exception subclasses are converted."""

        def interrupt() -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            option.from_(interrupt)
        with pytest.raises(KeyboardInterrupt):
            result.from_(interrupt, "e")
        with pytest.raises(KeyboardInterrupt):
            result.from_throwable(interrupt)


class TestFromThrowable:
    """from_throwable keeps the raised exception."""

    def test_success(self) -> None:
        """Return values, None included, are Ok."""
        assert result.from_throwable(lambda: 42) == pk.Ok(42)
        assert result.from_throwable(lambda: None) == pk.Ok(None)

    def test_failure_keeps_exception(self) -> None:
        """The exception instance becomes the error payload."""
        res = result.from_throwable(_boom)
        assert res.is_err()
        error = res.unwrap_err()
        assert isinstance(error, ValueError)
        assert str(error) == "boom"

    def test_args_forwarded(self) -> None:
        """Positional arguments reach the function."""
        assert result.from_throwable(divmod, 7, 2) == pk.Ok((3, 1))
        assert result.from_throwable(divmod, 7, 0).is_err_and(
            lambda e: isinstance(e, ZeroDivisionError)
        )


class TestSequence:
    """sequence collects in order and stops at the first failure."""

    def test_empty(self) -> None:
        """An empty input is a present empty list."""
        assert option.sequence([]) == pk.Some([])
        assert result.sequence([]) == pk.Ok([])

    def test_all_present(self) -> None:
        """Values are kept in order."""
        assert option.sequence([pk.Some(1), pk.Some(2)]).unwrap() == [1, 2]
        assert result.sequence([pk.Ok(1), pk.Ok(2)]).unwrap() == [1, 2]

    def test_first_failure_wins(self) -> None:
        """The first failure is returned as is."""
        assert option.sequence([pk.Some(1), pk.NONE, pk.Some(2)]).is_none()
        first = pk.Err("first")
        assert result.sequence([pk.Ok(1), first, pk.Err("second")]) is first

    def test_stops_consuming(self) -> None:
        """Nothing after the first failure is pulled from the iterable."""
        pulled: list[int] = []

        def gen() -> Iterator[pk.Result[int, str]]:
            for i in range(5):
                pulled.append(i)
                yield pk.Err("stop") if i == 1 else pk.Ok(i)

        assert result.sequence(gen()) == pk.Err("stop")
        assert pulled == [0, 1]


class TestTraverse:
    """traverse maps then sequences, lazily."""

    def test_option(self) -> None:
        """Every item is mapped when all succeed."""
        assert option.traverse([1, 2, 3], lambda x: pk.Some(x * 2)) == pk.Some(
            [2, 4, 6]
        )

    def test_result_stops_calling(self) -> None:
        """f is not called past the first Err."""
        calls: list[str] = []

        def parse(s: str) -> pk.Result[int, str]:
            calls.append(s)
            return result.from_(int, f"bad {s}", s)

        assert result.traverse(["1", "x", "3"], parse) == pk.Err("bad x")
        assert calls == ["1", "x"]
