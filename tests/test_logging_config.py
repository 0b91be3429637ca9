import logging
import unittest

from mezzanine.logging_config import setup_logging


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestSetupLogging(unittest.TestCase):

    def tearDown(self):
        logger = logging.getLogger("mezzanine")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        logger = setup_logging()
        self.assertEqual(len(logger.handlers), 1)

    def test_host_handler_receives_module_records(self):
        handler = _ListHandler()
        setup_logging(logging.DEBUG, host_handler=handler)
        logging.getLogger("mezzanine.controller.command").info("hello")
        self.assertEqual(handler.records[-1].getMessage(), "hello")


if __name__ == "__main__":
    unittest.main()
