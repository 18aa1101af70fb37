import unittest

import numpy as np

from revgrad.domain._element_type import ElementType
from revgrad.domain._errors import UnsupportedTypeError
from revgrad.domain._operation import Operation, MAX_OPERANDS


class TestElementType(unittest.TestCase):
    def test_numpy_dtypes(self):
        self.assertEqual(ElementType.FLOAT32.numpy_dtype, np.dtype(np.float32))
        self.assertEqual(ElementType.FLOAT64.numpy_dtype, np.dtype(np.float64))
        self.assertEqual(ElementType.INT32.numpy_dtype, np.dtype(np.int32))
        self.assertEqual(ElementType.INT64.numpy_dtype, np.dtype(np.int64))

    def test_kind(self):
        self.assertTrue(ElementType.FLOAT32.is_floating)
        self.assertFalse(ElementType.INT64.is_floating)
        self.assertEqual(ElementType.FLOAT64.kind, "floating")
        self.assertEqual(ElementType.INT32.kind, "integral")

    def test_promoted(self):
        self.assertIs(ElementType.INT32.promoted(), ElementType.FLOAT32)
        self.assertIs(ElementType.INT64.promoted(), ElementType.FLOAT64)
        self.assertIs(ElementType.FLOAT64.promoted(), ElementType.FLOAT64)

    def test_coerce_accepts_enum_string_and_dtype(self):
        self.assertIs(ElementType.coerce(ElementType.INT32), ElementType.INT32)
        self.assertIs(ElementType.coerce("float64"), ElementType.FLOAT64)
        self.assertIs(ElementType.coerce("INT64"), ElementType.INT64)
        self.assertIs(ElementType.coerce(np.float32), ElementType.FLOAT32)
        self.assertIs(ElementType.coerce(np.dtype("int32")), ElementType.INT32)

    def test_coerce_rejects_other_types(self):
        for bad in ("float16", "bool", np.uint8, "complex64", "not-a-type"):
            with self.subTest(bad=bad):
                with self.assertRaises(UnsupportedTypeError):
                    ElementType.coerce(bad)

    def test_str(self):
        self.assertEqual(str(ElementType.FLOAT32), "float32")


class TestOperation(unittest.TestCase):
    def test_str_is_name(self):
        self.assertEqual(str(Operation.MATMUL), "MATMUL")

    def test_max_operands(self):
        self.assertEqual(MAX_OPERANDS, 3)


class TestErrors(unittest.TestCase):
    def test_unsupported_type_error_message_and_attributes(self):
        err = UnsupportedTypeError("softmax", ElementType.INT32)
        self.assertIsInstance(err, TypeError)
        self.assertEqual(err.op, "softmax")
        self.assertIs(err.element_type, ElementType.INT32)
        self.assertIn("softmax", str(err))
        self.assertIn("int32", str(err))


if __name__ == "__main__":
    unittest.main()
