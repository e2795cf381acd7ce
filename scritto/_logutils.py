from __future__ import annotations
from collections import UserString
import typing as _t


class LazyFmt(UserString):
    """
    A class to do lazy formatting for asserts and exceptions

    .. code-block:: python

        assert cg.left >= 0, LazyFmt("Negative time left in %s", cg)
    """
    def __init__(self, fmt: str, *args):
        self._fmt = fmt
        self._args = args
        self._cached: str | None = None

    @property
    def data(self) -> str:
        if self._cached is not None:
            return self._cached
        self._cached = s = self._fmt % self._args
        return s

    def __getattr__(self, name: str) -> _t.Any:
        return getattr(self.data, name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.data)!r})"


class LazyStr(UserString):
    """
    A string with delayed evaluation.

    To be used mainly when logging big objects, like the stack
    of a grouping controller

    Args:
        func: a function returning a string
        args: optional arguments passed to func
        kwargs: keyword args passed to func

    Example

        logger.debug("Stack: %s", LazyStr(controller.dump))

    In the example above, the stack is only dumped if debugging
    actually takes place.

    """
    __slots__ = ("_func", "_args", "_kwargs")

    def __new__(cls, func: _t.Callable | str, *args, **kwargs) -> _t.Any:
        if isinstance(func, str):
            # Nothing to delay
            return func
        return object.__new__(cls)

    def __init__(self, func: _t.Callable[..., str], *args, **kwargs) -> None:
        # we do not want to call super().__init__
        self._func = func
        self._args = args
        self._kwargs = kwargs


    @property
    def data(self) -> str:
        return self._func(*self._args, **self._kwargs)

    def __getattr__(self, name: str) -> _t.Any:
        return getattr(self.data, name)

    def __repr__(self) -> str:
        try:
            r = repr(str(self.data))
            return f"{self.__class__.__name__}({r})"
        except Exception:
            return "<%s broken>" % self.__class__.__name__
