"""Collection-aware change assertions.

    expect(lambda: items.append(1)).to(change(lambda: items).to_include(1))
"""

from changecollection.errors import (
    ChangeAssertionFailed,
    ChangeCollectionError,
    InvalidDeclaration,
    NegationUnsupported,
)
from changecollection.expectations import expect
from changecollection.matchers import (
    Change,
    CollectionChange,
    change,
    change_with_collection,
    change_without_collection,
)
from changecollection.registry import install, uninstall

__version__ = "0.1.0"

__all__ = [
    "Change",
    "ChangeAssertionFailed",
    "ChangeCollectionError",
    "CollectionChange",
    "InvalidDeclaration",
    "NegationUnsupported",
    "change",
    "change_with_collection",
    "change_without_collection",
    "expect",
    "install",
    "uninstall",
]
