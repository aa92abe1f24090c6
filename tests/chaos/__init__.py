"""
Chaos Testing Infrastructure

Fault injection around the demonstration triggers. Each injector forces
one extra failure mode so the tests can check that scenarios still report
exactly once, still clean up, and never leak a handled error.

Chaos testing philosophy:
- Inject failures systematically, not randomly
- Test one failure mode at a time for clarity
- Validate cleanup happens even when operations fail
"""

from .fault_injectors import (
    PermissionDeniedInjector,
    DiskFullInjector,
    CloseFailureInjector,
    TruncatedWriteInjector,
    NetworkTimeoutInjector,
)

__all__ = [
    'PermissionDeniedInjector',
    'DiskFullInjector',
    'CloseFailureInjector',
    'TruncatedWriteInjector',
    'NetworkTimeoutInjector',
]
