"""
Fault demonstrator.

Holds an ordered registry of scenarios. Each scenario performs one action
that is guaranteed to fail in a specific way, catches exactly that family
of errors, and reports it through the reporter. A scenario never catches
more than it documents: anything else propagates out of run_all().
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from .config import Config
from .faults import FaultKind, FaultReport
from .reporters import ConsoleReporter
from .type_registry import TypeRegistry, UnknownTypeError, default_registry
from utils.conversions import checked_cast
from utils.data_stream import read_int, write_int
from utils.database import attempt_connection


logger = logging.getLogger(__name__)

BANNER = "===== Exception Handling Demonstration ====="

SEQUENCE_LENGTH = 5
NEGATIVE_LENGTH = -1
MALFORMED_NUMBER = "abc"
DATA_VALUE = 123


class UnknownScenarioError(KeyError):
    """Raised when a scenario name is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown scenario: {self.name}"


@dataclass(frozen=True)
class Scenario:
    """A named, zero-argument trigger-catch-report unit."""
    name: str
    action: Callable[[], None]

    def __call__(self):
        self.action()


def _database_error_message(error: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception; its own str() adds SQL and a help link.
    original = getattr(error, 'orig', None)
    return str(original) if original is not None else str(error)


class FaultDemonstrator:
    """Runs the registered fault scenarios in order."""

    def __init__(self, config: Optional[Config] = None, reporter=None,
                 type_registry: Optional[TypeRegistry] = None):
        """
        Args:
            config: Paths and endpoints used as triggers (defaults if None)
            reporter: Message sink; plain console lines if None
            type_registry: Registry consulted by the missing-class scenario
        """
        self.config = config or Config()
        self.reporter = reporter or ConsoleReporter()
        self.type_registry = type_registry or default_registry()
        self._scenarios: Tuple[Scenario, ...] = (
            Scenario('restricted-write', self.restricted_write),
            Scenario('missing-file-read', self.missing_file_read),
            Scenario('premature-end-of-stream', self.premature_end_of_stream),
            Scenario('unreachable-database', self.unreachable_database),
            Scenario('missing-class-load', self.missing_class_load),
            Scenario('divide-by-zero', self.divide_by_zero),
            Scenario('null-dereference', self.null_dereference),
            Scenario('out-of-range-index', self.out_of_range_index),
            Scenario('invalid-type-cast', self.invalid_type_cast),
            Scenario('negative-size-allocation', self.negative_size_allocation),
            Scenario('malformed-numeric-parse', self.malformed_numeric_parse),
        )

    @property
    def scenarios(self) -> Tuple[Scenario, ...]:
        return self._scenarios

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self._scenarios)

    def get(self, name: str) -> Scenario:
        """Look up a scenario by name."""
        for scenario in self._scenarios:
            if scenario.name == name:
                return scenario
        raise UnknownScenarioError(name)

    def run_all(self):
        """Print the banner and run every scenario in registration order."""
        self._run(self._scenarios)

    def run(self, names: Iterable[str]):
        """
        Run only the named scenarios, still in registration order.

        Raises:
            UnknownScenarioError: If any name is not registered (nothing runs)
        """
        wanted = set(names)
        for name in wanted:
            self.get(name)
        self._run([s for s in self._scenarios if s.name in wanted])

    def _run(self, scenarios: Iterable[Scenario]):
        self.reporter.banner(BANNER)
        try:
            for scenario in scenarios:
                logger.info(f"Running scenario {scenario.name}")
                scenario()
        finally:
            self.reporter.finish()

    def _caught(self, scenario: str, kind: FaultKind, error: BaseException,
                message: Optional[str] = None):
        if message is None:
            report = FaultReport.from_error(scenario, kind, error)
        else:
            report = FaultReport(scenario=scenario, kind=kind,
                                 message=FaultReport.single_line(message))
        logger.info(f"{scenario}: {report.line}")
        self.reporter.report(report)

    def _note(self, scenario: str, text: str):
        logger.info(f"{scenario}: {text}")
        self.reporter.note(scenario, text)

    def _no_fault(self, scenario: str):
        logger.warning(f"{scenario}: trigger completed without the expected fault")

    # ------------------------------------------------------------------
    # Scenarios
    # ------------------------------------------------------------------

    def restricted_write(self):
        """Write to a path the process cannot write to."""
        name = 'restricted-write'
        try:
            with open(self.config.restricted_write_path, 'w') as f:
                f.write("This will fail")
        except OSError as e:
            self._caught(name, FaultKind.IO_FAILURE, e)
        else:
            self._no_fault(name)
        finally:
            self._note(name, f"{FaultKind.IO_FAILURE.label} demonstration completed")

    def missing_file_read(self):
        """Open a file that does not exist."""
        name = 'missing-file-read'
        try:
            with open(self.config.missing_file_path, 'r'):
                pass
        except FileNotFoundError as e:
            self._caught(name, FaultKind.FILE_NOT_FOUND, e)
        except OSError as e:
            self._caught(name, FaultKind.IO_FAILURE, e)
        else:
            self._no_fault(name)

    def premature_end_of_stream(self):
        """Write one integer, then read two."""
        name = 'premature-end-of-stream'
        path = self.config.data_file_path
        reader = None
        try:
            with open(path, 'wb') as out:
                write_int(out, DATA_VALUE)

            reader = open(path, 'rb')
            read_int(reader)
            read_int(reader)
        except EOFError as e:
            self._caught(name, FaultKind.END_OF_STREAM, e)
        except OSError as e:
            self._caught(name, FaultKind.IO_FAILURE, e)
        else:
            self._no_fault(name)
        finally:
            try:
                if reader is not None:
                    reader.close()
            except OSError as e:
                self._note(name, f"Error closing stream: {e}")
            self._note(name, f"{FaultKind.END_OF_STREAM.label} demonstration completed")

    def unreachable_database(self):
        """Connect to a database that is not there."""
        name = 'unreachable-database'
        try:
            attempt_connection(self.config.database_url,
                               self.config.database_connect_timeout)
        except SQLAlchemyError as e:
            self._caught(name, FaultKind.DATABASE_FAILURE, e,
                         message=_database_error_message(e))
        else:
            self._no_fault(name)

    def missing_class_load(self):
        """Resolve a type name nobody registered."""
        name = 'missing-class-load'
        try:
            self.type_registry.load(self.config.missing_type_name)
        except UnknownTypeError as e:
            self._caught(name, FaultKind.CLASS_RESOLUTION_FAILURE, e)
        else:
            self._no_fault(name)

    def divide_by_zero(self):
        name = 'divide-by-zero'
        try:
            10 // 0
        except ArithmeticError as e:
            self._caught(name, FaultKind.ARITHMETIC_FAULT, e)
        else:
            self._no_fault(name)

    def null_dereference(self):
        name = 'null-dereference'
        text: Optional[str] = None
        try:
            text.strip()
        except AttributeError as e:
            self._caught(name, FaultKind.NULL_REFERENCE_FAULT, e)
        else:
            self._no_fault(name)

    def out_of_range_index(self):
        name = 'out-of-range-index'
        values = [0] * SEQUENCE_LENGTH
        try:
            values[SEQUENCE_LENGTH] = 10
        except IndexError as e:
            self._caught(name, FaultKind.BOUNDS_FAULT, e)
        else:
            self._no_fault(name)

    def invalid_type_cast(self):
        name = 'invalid-type-cast'
        value: object = DATA_VALUE
        try:
            checked_cast(value, str)
        except TypeError as e:
            self._caught(name, FaultKind.TYPE_CAST_FAULT, e)
        else:
            self._no_fault(name)

    def negative_size_allocation(self):
        name = 'negative-size-allocation'
        try:
            bytearray(NEGATIVE_LENGTH)
        except ValueError as e:
            self._caught(name, FaultKind.INVALID_ARGUMENT_FAULT, e)
        else:
            self._no_fault(name)

    def malformed_numeric_parse(self):
        name = 'malformed-numeric-parse'
        try:
            int(MALFORMED_NUMBER)
        except ValueError as e:
            self._caught(name, FaultKind.NUMERIC_FORMAT_FAULT, e)
        else:
            self._no_fault(name)
