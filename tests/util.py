"""tests.util.

Common Utilities for tests
"""
import unittest
import logging
import os
import inspect
import time
import datetime


def _flush_handlers() -> None:
    """Flush root handlers so log output appears in test order."""
    for handler in logging.getLogger().handlers:
        handler.flush()


class LoggingTestResult(unittest.TextTestResult):
    """Test result that also writes each outcome to the test log."""

    def startTest(self, test):
        """Log the start of each test with a separator."""
        logging.info("\n%s\n\tRunning: %s\n%s", "=" * 79,
                     self.getDescription(test), "-" * 79)
        _flush_handlers()
        super().startTest(test)

    def addSuccess(self, test):
        super().addSuccess(test)
        logging.info("\n%s\n\tPASS: %s", "-" * 79, self.getDescription(test))
        _flush_handlers()

    def addFailure(self, test, err):
        """Log test failure and traceback."""
        super().addFailure(test, err)
        logging.error("\n%s\n\tFAIL: %s\n%s", "-" * 79,
                      self.getDescription(test),
                      self._exc_info_to_string(err, test))
        _flush_handlers()

    def addError(self, test, err):
        """Log test error and traceback."""
        super().addError(test, err)
        logging.error("\n%s\n\tERROR: %s\n%s", "-" * 79,
                      self.getDescription(test),
                      self._exc_info_to_string(err, test))
        _flush_handlers()

    def addSubTest(self, test, subtest, err):
        """Log failing sub tests, e.g. one row of a test value table."""
        super().addSubTest(test, subtest, err)
        if err is not None:
            logging.error("\n%s\n\tSUBTEST FAIL: %s\n%s", "-" * 79,
                          subtest.id(), self._exc_info_to_string(err, test))
            _flush_handlers()

    def printSummary(self, duration: float) -> None:
        """Log a clean summary block at the end."""
        lines = ["\n", "=" * 79, "SUMMARY:",
                 f"\tRan {self.testsRun} tests in {duration:.3f}s"]
        if self.wasSuccessful():
            lines.append("\tRESULT: OK")
        else:
            lines.append(f"\tRESULT: FAIL ({len(self.failures)} "
                         f"failures, {len(self.errors)} errors)")
        lines.append("-" * 79)
        logging.info("\n".join(lines))
        _flush_handlers()


class LoggingTestRunner(unittest.TextTestRunner):
    """Custom test runner that logs a test summary at the end."""

    resultclass = LoggingTestResult

    def run(self, test):
        """Run the test suite, print errors and log a summary."""
        result = self._makeResult()
        start_time = time.time()
        test(result)
        result.printErrors()
        result.printSummary(time.time() - start_time)
        return result


def setup_test_logging(name: str = None,
                       level: int = logging.DEBUG,
                       clear: bool = True) -> None:
    """Set up consistent logging for test cases.

    Args
    ----
    name : str, optional
        Log filename inside 'tests' folder.
        If None, uses the calling test script's filename with `.log` extension.

    level : int
        Logging level to use. Defaults to logging.DEBUG.

    clear : bool
        If True (default), clears any existing content in the log file.
    """
    if name is None:
        frame = inspect.stack()[1]
        base_name, _ = os.path.splitext(os.path.basename(frame.filename))
        name = f"{base_name}.log"

    log_path = os.path.join(os.path.dirname(__file__), name)

    if clear:
        with open(log_path, 'w'):
            pass

    # Only add the file handler if it's not already present
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            filename=log_path,
            level=level,
            format="[%(levelname)s] %(message)s"
        )
        logging.debug("%s UTC - Log initialized at:\n\t%s",
                      datetime.datetime.now(datetime.timezone.utc).strftime(
                          "%Y-%m-%d %H:%M:%S"), log_path)
    else:
        logging.debug("Logger already initialized.")
