import unittest

from revgrad.domain.utils._control_path import create_path_builder


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder("_state")

    def test_state_must_be_hashable(self) -> None:
        class C:
            @property
            def _state(self):
                return "A"

            def foo(self, x: int) -> int:
                return x

        with self.assertRaises(TypeError) as ctx:
            # list is unhashable
            self.decorator(C, C.foo, ["not-hashable"])(lambda self, x: x)

        self.assertIn("must be hashable", str(ctx.exception))

    def test_dispatch_selects_registered_control_path(self) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                # base implementation never used once wrapper installed
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 10

        @self.decorator(C, C.foo, "B")
        def foo_B(self, x: int) -> int:
            return x + 20

        self.assertEqual(C("A").foo(1), 11)
        self.assertEqual(C("B").foo(1), 21)

    def test_implementation_receives_self(self) -> None:
        class C:
            _state = "A"
            scale = 3

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return self.scale * x

        self.assertEqual(C().foo(2), 6)

    def test_stacked_registration_shares_one_implementation(self) -> None:
        class C:
            def __init__(self, st):
                self._state = st

            def foo(self) -> str:
                return "base"

        @self.decorator(C, C.foo, "A")
        @self.decorator(C, C.foo, "B")
        def foo_any(self) -> str:
            return "shared"

        self.assertEqual(C("A").foo(), "shared")
        self.assertEqual(C("B").foo(), "shared")

    def test_wrapper_preserves_name_and_doc(self) -> None:
        class C:
            _state = "A"

            def foo(self) -> int:
                """Base docstring."""
                return 0

        @self.decorator(C, C.foo, "A")
        def foo_A(self) -> int:
            return 1

        self.assertEqual(C.foo.__name__, "foo")
        self.assertEqual(C.foo.__doc__, "Base docstring.")

    def test_missing_state_attribute_raises_not_implemented(self) -> None:
        class C:
            # No _state attribute on purpose
            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)

        self.assertIn("missing attribute", str(ctx.exception))
        self.assertIn("'_state'", str(ctx.exception))

    def test_missing_control_path_without_trap_raises_not_implemented(self) -> None:
        class C:
            def __init__(self, st):
                self._state = st

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C("B").foo(1)

        self.assertIn("Missing control path", str(ctx.exception))
        self.assertIn("state='B'", str(ctx.exception))

    def test_trap_factory_builds_raised_exception(self) -> None:
        class MissingPathError(Exception):
            pass

        class C:
            _state = "Z"

            def foo(self) -> None:
                return None

        seen = {}

        def trap(method, obj):
            seen["name"] = method.__name__
            seen["obj"] = obj
            return MissingPathError("no path")

        c = C()

        @self.decorator(C, C.foo, "A", trap)
        def foo_A(self) -> None:
            return None

        with self.assertRaises(MissingPathError):
            c.foo()
        self.assertEqual(seen["name"], "foo")
        self.assertIs(seen["obj"], c)

    def test_builder_default_trap_is_used(self) -> None:
        decorator = create_path_builder(
            "_state", default_trap=lambda method, obj: KeyError(method.__name__)
        )

        class C:
            _state = "Z"

            def foo(self) -> None:
                return None

        @decorator(C, C.foo, "A")
        def foo_A(self) -> None:
            return None

        with self.assertRaises(KeyError):
            C().foo()

    def test_builders_do_not_share_registrations(self) -> None:
        other = create_path_builder("_state")

        class C:
            _state = "A"

            def foo(self) -> int:
                return 0

            def bar(self) -> int:
                return 0

        @self.decorator(C, C.foo, "A")
        def foo_A(self) -> int:
            return 1

        @other(C, C.bar, "B")
        def bar_B(self) -> int:
            return 2

        self.assertEqual(C().foo(), 1)
        with self.assertRaises(NotImplementedError):
            C().bar()


if __name__ == "__main__":
    unittest.main()
