"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass holding the parameter values of a
family member in one coordinate system (e.g. shape and scale). Constraints
are instance predicates marked with :func:`constraint`; they are checked by
:meth:`Parametrization.validate` whenever a distribution is built.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING

from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_uq.families.parametric_family import ParametricFamily

_CONSTRAINT_MARKER = "__constraint_description__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values.

    Parameters
    ----------
    description : str
        Human-readable statement of the constraint, e.g. ``"nu > 0"``.
    check : Callable[[Any], bool]
        Predicate on the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of parametrizations.

    Subclasses are turned into frozen dataclasses and bound to their family by
    the :func:`parametrization` decorator.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> ParametrizationName:
        """Name under which the parametrization is registered."""
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return list(self._constraints)

    def validate(self) -> None:
        """
        Check every constraint.

        Raises
        ------
        InvalidArgumentError
            On the first violated constraint.
        """
        for item in self._constraints:
            if not item.check(self):
                raise InvalidArgumentError(
                    f'Constraint "{item.description}" does not hold for {self.parameters}'
                )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Express the same distribution in the base parametrization.

        The base parametrization itself returns ``self``; alternative
        parametrizations override this method.
        """
        return self

    def __str__(self) -> str:
        values = ", ".join(f"{key}={value}" for key, value in self.parameters.items())
        return f"{self.name}({values})"


def constraint(description: str) -> Callable[[Callable[[Any], bool]], Callable[[Any], bool]]:
    """
    Mark an instance predicate as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable statement reported when the constraint fails.
    """

    def decorator(func: Callable[[Any], bool]) -> Callable[[Any], bool]:
        setattr(func, _CONSTRAINT_MARKER, description)
        return func

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT_MARKER):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and hasattr(attr, _CONSTRAINT_MARKER):
            collected.append(
                ParametrizationConstraint(description=getattr(attr, _CONSTRAINT_MARKER), check=attr)
            )
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: ParametrizationName,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization in ``family``.

    The class becomes a frozen, slotted dataclass unless it already is a
    dataclass, and its ``@constraint`` methods are collected.

    Parameters
    ----------
    family : ParametricFamily
        Owning family.
    name : str
        Parametrization name, unique within the family.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        family.register_parametrization(name, cls)
        return cls

    return decorator
