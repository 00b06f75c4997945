"""Order-stable content signatures for change detection.

The remote store reports a signature for every published entry; comparing
it against the local one tells whether an entry needs to be pushed again
without transferring the content.
"""

import hashlib
from collections.abc import Mapping
from typing import Any, Optional


def _canonical_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _feed(value: Any, digest: "hashlib._Hash") -> None:
    if isinstance(value, Mapping):
        # Key order is not significant, only the values are hashed
        for key in sorted(value, key=str):
            _feed(value[key], digest)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _feed(item, digest)
    else:
        digest.update(_canonical_scalar(value).encode("utf-8"))


def signature(value: Any, digest: Optional["hashlib._Hash"] = None) -> str:
    """Compute the MD5 signature of a nested structure.

    Mappings are walked in ascending key order, sequences in their own
    order, and every scalar is hashed as its canonical string.

    Args:
        value: Mapping, sequence or scalar to hash
        digest: Running digest to continue (a fresh MD5 if omitted)

    Returns:
        Hex digest

    Examples:
        >>> signature({"b": "2", "a": "1"}) == signature({"a": "1", "b": "2"})
        True
        >>> signature(["1", "2"]) == signature(["2", "1"])
        False
    """
    if digest is None:
        digest = hashlib.md5()
    _feed(value, digest)
    return digest.hexdigest()
