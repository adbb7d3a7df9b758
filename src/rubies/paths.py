"""Operations on colon-delimited search path strings."""
import os
from typing import Iterable, List, Optional


def split_path(path: str) -> List[str]:
    """Split a search path into its entries."""
    if not path:
        return []
    return path.split(os.pathsep)


def join_path(entries: Iterable[str]) -> str:
    return os.pathsep.join(entries)


def remove_from_path(path: str, to_remove: Iterable[Optional[str]]) -> str:
    """Drop every entry exactly equal to one of ``to_remove``.

    ``None`` and empty members are ignored, as are members that do not
    occur in ``path``. Duplicates are all removed and the remaining
    entries keep their relative order.
    """
    targets = {entry for entry in to_remove if entry}
    return join_path(entry for entry in split_path(path) if entry not in targets)


def prepend_to_path(path: str, *entries: str) -> str:
    """Put ``entries`` in front of ``path``, first argument first."""
    return join_path([*entries, *split_path(path)])
