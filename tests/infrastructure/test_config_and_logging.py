import io
import logging
import os
import unittest
from unittest import mock

from revgrad._config import RuntimeConfig, get_config, load_config_from_env, set_config
from revgrad import _logging
from revgrad._logging import (
    PACKAGE_LOGGER_NAME,
    apply_log_level,
    configure_logging,
    get_logger,
)
from revgrad.domain._element_type import ElementType
from revgrad.domain._errors import UnsupportedTypeError


class TestRuntimeConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._saved = get_config()

    def tearDown(self) -> None:
        set_config(
            log_level=self._saved.log_level,
            default_element_type=self._saved.default_element_type,
            seed=self._saved.seed,
        )

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            cfg = load_config_from_env()
        self.assertEqual(cfg, RuntimeConfig())
        self.assertEqual(cfg.log_level, "WARNING")
        self.assertIs(cfg.default_element_type, ElementType.FLOAT32)
        self.assertIsNone(cfg.seed)

    def test_environment_overrides(self):
        env = {
            "REVGRAD_LOG_LEVEL": "debug",
            "REVGRAD_DEFAULT_DTYPE": "float64",
            "REVGRAD_SEED": "42",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            cfg = load_config_from_env()
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertIs(cfg.default_element_type, ElementType.FLOAT64)
        self.assertEqual(cfg.seed, 42)

    def test_invalid_default_dtype_falls_back_with_warning(self):
        with mock.patch.dict(os.environ, {"REVGRAD_DEFAULT_DTYPE": "float16"}, clear=True):
            with self.assertLogs("revgrad._config", level="WARNING") as logs:
                cfg = load_config_from_env()
        self.assertIs(cfg.default_element_type, ElementType.FLOAT32)
        self.assertIn("REVGRAD_DEFAULT_DTYPE", logs.output[0])

    def test_invalid_seed_falls_back_with_warning(self):
        with mock.patch.dict(os.environ, {"REVGRAD_SEED": "abc"}, clear=True):
            with self.assertLogs("revgrad._config", level="WARNING") as logs:
                cfg = load_config_from_env()
        self.assertIsNone(cfg.seed)
        self.assertIn("REVGRAD_SEED", logs.output[0])

    def test_set_config_rejects_unknown_element_type(self):
        with self.assertRaises(UnsupportedTypeError):
            set_config(default_element_type="float16")

    def test_set_config_coerces_element_type(self):
        cfg = set_config(default_element_type="int64")
        self.assertIs(cfg.default_element_type, ElementType.INT64)
        self.assertIs(get_config(), cfg)

    def test_set_config_applies_log_level(self):
        set_config(log_level="DEBUG")
        self.assertEqual(logging.getLogger(PACKAGE_LOGGER_NAME).level, logging.DEBUG)


class TestLogging(unittest.TestCase):
    def tearDown(self) -> None:
        apply_log_level(get_config().log_level)

    def test_get_logger_returns_package_logger(self):
        logger = get_logger()
        self.assertEqual(logger.name, "revgrad")
        self.assertTrue(logger.hasHandlers())

    def test_import_attaches_only_a_null_handler(self):
        logger = get_logger()
        own = [h for h in logger.handlers if h is not _logging._stream_handler]
        self.assertTrue(own)
        for h in own:
            self.assertIsInstance(h, logging.NullHandler)

    def test_configure_logging_writes_formatted_records(self):
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        first, second = io.StringIO(), io.StringIO()
        try:
            configure_logging("INFO", stream=first)
            configure_logging("INFO", stream=second)
            logging.getLogger("revgrad.test").info("hello")
        finally:
            logger.removeHandler(_logging._stream_handler)
            _logging._stream_handler = None
        self.assertEqual(first.getvalue(), "")
        self.assertRegex(second.getvalue(), r"^\[.+\]\[INFO\]\[revgrad\.test\] hello\n$")

    def test_unknown_level_falls_back_to_warning(self):
        apply_log_level("chatty")
        self.assertEqual(logging.getLogger(PACKAGE_LOGGER_NAME).level, logging.WARNING)

    def test_module_loggers_are_children(self):
        from revgrad.infrastructure.tensor._tensor import Tensor

        with self.assertLogs("revgrad", level="DEBUG") as logs:
            Tensor.create([1.0], "float32")
        self.assertTrue(any("created leaf tensor" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
