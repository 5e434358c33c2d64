"""Shared test fixtures."""

from __future__ import annotations

from typing import Iterator

import pytest

from modulefield.kinds import Capabilities, FieldKind, registry


@pytest.fixture
def restricted_kind() -> Iterator[FieldKind]:
    """A kind on the shared registry that allows no behavioral flags."""
    kind = FieldKind(
        "Restricted",
        Capabilities(multi=False, writable=False, required=False, private=False),
    )
    registry.register(kind, replace=True)
    yield kind
    registry.unregister(kind.name)
