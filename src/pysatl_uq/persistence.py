"""
Persistence Contract
====================

Objects that can be saved and restored expose their defining state as a
:class:`PersistentState`:

- ``class_name`` — name of the class the state belongs to;
- ``schema_version`` — version of the field layout;
- ``fields`` — the declared persistent fields, as plain Python values.

Restoring goes through the class constructor, so restored objects are
validated exactly like freshly built ones. Runtime data (call counters,
history buffers, cached dependence measures) is never part of the state.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Self

import numpy as np

from pysatl_uq.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class PersistentState:
    """
    Saved state of a persistent object.

    Parameters
    ----------
    class_name : str
        Name of the persisted class.
    schema_version : int
        Version of the field layout.
    fields : Mapping[str, Any]
        Persistent field values.
    """

    class_name: str
    schema_version: int
    fields: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "class_name": self.class_name,
            "schema_version": self.schema_version,
            "fields": dict(self.fields),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PersistentState:
        """
        Build a state from :meth:`to_dict` output.

        Raises
        ------
        InvalidArgumentError
            If a required key is missing.
        """
        try:
            return cls(
                class_name=str(data["class_name"]),
                schema_version=int(data["schema_version"]),
                fields=dict(data["fields"]),
            )
        except KeyError as exc:
            raise InvalidArgumentError(f"Persistent state is missing key {exc}") from exc


def _plain(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value


class Persistent:
    """
    Mixin implementing the persistence contract.

    Subclasses declare ``_persistent_fields`` (attribute names, in order) and
    implement :meth:`_from_fields`, which rebuilds an instance through the
    constructor.
    """

    _persistent_fields: ClassVar[tuple[str, ...]] = ()
    _schema_version: ClassVar[int] = 1

    def to_state(self) -> PersistentState:
        """Return the persistent state of this object."""
        return PersistentState(
            class_name=type(self).__name__,
            schema_version=self._schema_version,
            fields={name: _plain(getattr(self, name)) for name in self._persistent_fields},
        )

    @classmethod
    def from_state(cls, state: PersistentState) -> Self:
        """
        Restore an object from its persistent state.

        Raises
        ------
        InvalidArgumentError
            If the state belongs to another class, has an unsupported schema
            version, does not match the declared fields, or holds values the
            constructor rejects.
        """
        if state.class_name != cls.__name__:
            raise InvalidArgumentError(
                f"Cannot restore {cls.__name__} from a state of {state.class_name}"
            )
        if state.schema_version != cls._schema_version:
            raise InvalidArgumentError(
                f"Unsupported schema version {state.schema_version} for {cls.__name__}, "
                f"expected {cls._schema_version}"
            )
        expected = set(cls._persistent_fields)
        actual = set(state.fields)
        if expected != actual:
            raise InvalidArgumentError(
                f"Persistent fields of {cls.__name__} must be {sorted(expected)}, "
                f"got {sorted(actual)}"
            )
        return cls._from_fields(state.fields)

    @classmethod
    def _from_fields(cls, fields: Mapping[str, Any]) -> Self:
        raise NotImplementedError


__all__ = [
    "PersistentState",
    "Persistent",
]
