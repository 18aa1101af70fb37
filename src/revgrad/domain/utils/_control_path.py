"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on an object's runtime
state value.

Core idea
---------
- You define a *base* method on a class (its signature becomes the
  canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the configured state attribute of `self`
  and dispatches to the implementation registered for the current value.

In revgrad the state is a tensor's element kind (``"floating"`` or
``"integral"``), so a kernel is selected once per operation call and an
operation that has no path for a kind is rejected before any allocation.

Important notes
---------------
- This design mutates the class: the first time you decorate a control
  path, the original method name is replaced with a wrapper that performs
  dispatch.
- Registered implementations are stored in a closure-local mapping owned
  by `create_path_builder()`. Different builders do not share mappings.
- Implementations are called like bound methods: ``sub_method(self, ...)``.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapFactory = Callable[[Callable[..., Any], Any], BaseException]
"""Builds the exception raised when no control path matches: (method, self)."""


def create_path_builder(
    state_attribute: str = "_state",
    default_trap: Optional[TrapFactory] = None,
) -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapFactory]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register stateful
    control paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("_state")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, state="A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, state="B")
        def foo_B(self, x: int) -> int:
            ...

    When `MyClass().foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on ``self._state``.

    Parameters
    ----------
    state_attribute : str
        Name of the attribute (usually a property) read from `self` at call
        time to select the control path.
    default_trap : Optional[TrapFactory]
        Exception factory used by every path registered through this builder
        that does not pass its own `trap_exception`.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control
        path and replaces `cls.method` with a dispatcher wrapper.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    _missing = object()

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based
            dispatch. The wrapper is installed on this class under
            `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its name, docstring and
            annotations are carried over to the installed wrapper via
            `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[TrapFactory]
            Called as ``trap_exception(method, self)`` when no control path
            matches the current state; the returned exception is raised.
            Falls back to the builder's `default_trap`, then to
            `NotImplementedError`.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator registering `sub_method` for `(cls, method, state)`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {repr(state)}"
            ) from None

        name = method.__name__
        smk: MethodKey = MethodKey(cls.__name__, name, state)
        trap = trap_exception or default_trap

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured
            state and install the dispatcher on `cls` if not already there.

            Returns
            -------
            Callable[P, R]
                The original `sub_method`, so decorators can be stacked to
                register one implementation for several states.
            """
            methods_map[smk] = sub_method

            installed = cls.__dict__.get(name)
            if getattr(installed, "__control_path__", False):
                return sub_method

            @wraps(method)
            def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                """
                Dispatch to a registered implementation based on the state
                attribute of `self`.
                """
                cur = getattr(self, state_attribute, _missing)
                if cur is _missing:
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attribute)
                        )
                    )
                if sm := methods_map.get(MethodKey(cls.__name__, name, cur)):
                    return sm(self, *args, **kwargs)
                if trap is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur), repr(method)
                        )
                    )
                raise trap(method, self)

            wrapper.__control_path__ = True
            setattr(cls, name, wrapper)
            return sub_method

        return decorator

    return templator
