"""
faultdemo core module
Fault taxonomy, scenario registry and reporting.
"""

from .config import Config
from .demonstrator import FaultDemonstrator, Scenario, UnknownScenarioError
from .faults import FaultKind, FaultReport
from .logger import setup_logging
from .reporters import ConsoleReporter, JsonReporter, create_reporter
from .type_registry import TypeRegistry, UnknownTypeError

__all__ = [
    'Config',
    'FaultDemonstrator',
    'Scenario',
    'UnknownScenarioError',
    'FaultKind',
    'FaultReport',
    'setup_logging',
    'ConsoleReporter',
    'JsonReporter',
    'create_reporter',
    'TypeRegistry',
    'UnknownTypeError'
]
