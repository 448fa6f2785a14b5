"""General utility functions and helper classes."""

from typing import Iterable


def parse_issue_ids(values: Iterable[str]) -> list[int]:
    """Parse issue IDs given as repeated values and/or comma-separated lists.

    Order is preserved and duplicates are kept, so ``["5,9", "2"]`` becomes
    ``[5, 9, 2]``.

    Raises:
        ValueError: If any element is not an integer.
    """
    issue_ids: list[int] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                issue_ids.append(int(part))
            except ValueError:
                raise ValueError(f"Invalid issue ID: {part!r}") from None
    return issue_ids
