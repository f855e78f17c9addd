"""Error taxonomy for collection-aware change assertions.

ChangeCollectionError  -- Base class for every error raised by this package.
InvalidDeclaration     -- A matcher was declared with conflicting or missing
                          arguments. Raised at declaration time.
NegationUnsupported    -- The negated form was requested for a matcher that
                          cannot express it.
ChangeAssertionFailed  -- An expectation did not hold. Raised by the
                          expectation layer, never by the matchers.
"""

from __future__ import annotations


class ChangeCollectionError(Exception):
    """Base class for change-collection errors."""


class InvalidDeclaration(ChangeCollectionError, ValueError):
    """A matcher declaration received an invalid combination of arguments."""


class NegationUnsupported(ChangeCollectionError, NotImplementedError):
    """The matcher does not support being negated in its current state."""


class ChangeAssertionFailed(AssertionError):
    """An expectation was not met.

    Subclasses ``AssertionError`` so pytest reports it as a plain test
    failure rather than an error.
    """
