from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


@dataclass(slots=True)
class Call:
    args: tuple[Any, ...]
    kwargs: dict[str, Any] = field(default_factory=dict)
    returned: Any = None
    raised: BaseException | None = None
    # Arguments handed to the callback, or None when no callback ran.
    delivered: tuple[Any, ...] | None = None

    @property
    def threw(self) -> bool:
        return self.raised is not None


class Spy(Generic[P, R]):
    """Transparent call recorder around *func*.

    Arguments and the return value pass through untouched, exceptions are
    recorded and re-raised. With ``callback=True`` the trailing positional
    argument (or the ``callback`` keyword) is wrapped so that whatever it
    receives is captured in :attr:`Call.delivered`.
    """

    def __init__(self, func: Callable[P, R], *, name: str | None = None, callback: bool = False) -> None:
        self._func = func
        self._callback = callback
        self.name = name or getattr(func, "__name__", "spy")
        self.calls: list[Call] = []

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        call = Call(args=tuple(args), kwargs=dict(kwargs))
        self.calls.append(call)
        call_args: tuple[Any, ...] = args
        call_kwargs: dict[str, Any] = kwargs
        if self._callback:
            call_args, call_kwargs = self._wrap_callback(call, call_args, call_kwargs)
        try:
            result = self._func(*call_args, **call_kwargs)
        except BaseException as exc:
            call.raised = exc
            raise
        call.returned = result
        return result

    @staticmethod
    def _wrap_callback(
        call: Call, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> tuple[tuple[Any, ...], dict[str, Any]]:
        def recording(original: Callable[..., Any]) -> Callable[..., Any]:
            def deliver(*values: Any) -> Any:
                call.delivered = values
                return original(*values)

            return deliver

        if "callback" in kwargs:
            return args, {**kwargs, "callback": recording(kwargs["callback"])}
        if args and callable(args[-1]):
            return (*args[:-1], recording(args[-1])), kwargs
        return args, kwargs

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def last_call(self) -> Call | None:
        return self.calls[-1] if self.calls else None

    @property
    def returned_values(self) -> list[Any]:
        return [call.returned for call in self.calls]

    def called_with(self, *args: Any, **kwargs: Any) -> bool:
        """True when some recorded call started with *args* and included *kwargs*."""
        for call in self.calls:
            if call.args[: len(args)] != args:
                continue
            if all(key in call.kwargs and call.kwargs[key] == value for key, value in kwargs.items()):
                return True
        return False

    def reset(self) -> None:
        self.calls.clear()

    def __repr__(self) -> str:
        return f"Spy({self.name!r}, call_count={self.call_count})"
