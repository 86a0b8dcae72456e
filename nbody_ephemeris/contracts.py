# nbody_ephemeris/contracts.py
"""
Caller-contract checks.

Everything that can go wrong inside this package is a bug in the caller
(bad construction arguments, evaluation outside the validity interval,
unsupported fit degree, inconsistent trajectories, mixed frames).
Such failures are fatal: they are logged at CRITICAL and raised as
ContractViolation, which is an AssertionError and is not meant to be caught.
"""
import logging

log = logging.getLogger(__name__)


class ContractViolation(AssertionError):
    """A precondition of a core operation was not met."""


class FrameMismatch(ContractViolation):
    """Two operands declared different reference frames."""


def check(condition, message, *args, error=ContractViolation):
    """
    Abort with `error` unless `condition` holds.
    `message` is %-formatted with `args` only when the check fails.
    """
    if condition:
        return
    text = message % args if args else message
    log.critical("Check failed: %s", text)
    raise error(text)


def check_eq(expected, actual, what):
    check(expected == actual, "%s: expected %r, got %r", what, expected, actual)


def check_same_frame(left, right):
    check(left is right,
          "Cannot combine frames %s and %s",
          getattr(left, "__name__", left),
          getattr(right, "__name__", right),
          error=FrameMismatch)
