# pyright: reportExplicitAny=false, reportAny=false
"""Base model shared by every node of a cluster spec tree.

Every field of a spec node is optional and ``None`` means the caller never
supplied it. Nodes remember which of their fields were filled in while
applying defaults, so a field can always be told apart as absent, explicit
or defaulted.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.alias_generators import to_camel

from pulsar_operator.enums import FieldPresence

if TYPE_CHECKING:
    from pulsar_operator.crds._validation import ValidationContext


class SpecModel(BaseModel):
    """A node in a cluster spec tree.

    Python attributes are snake_case; documents use the camelCase wire names
    generated from them. Unknown keys are ignored and assignments are
    validated against the declared field types.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    _defaulted_fields: set[str] = PrivateAttr(default_factory=set)

    def _check_field(self, name: str) -> None:
        if name not in type(self).model_fields:
            msg = f"{type(self).__name__} has no field {name!r}"
            raise AttributeError(msg)

    def field_presence(self, name: str) -> FieldPresence:
        """Return the presence state of a field.

        Args:
            name: Python attribute name of the field.

        Returns:
            ABSENT when the value is None, DEFAULTED when the value was filled
            in by the defaulting pass, EXPLICIT otherwise.

        Raises:
            AttributeError: If the node has no such field.
        """
        self._check_field(name)
        if getattr(self, name) is None:
            return FieldPresence.ABSENT
        if name in self._defaulted_fields:
            return FieldPresence.DEFAULTED
        return FieldPresence.EXPLICIT

    def mark_defaulted(self, name: str) -> None:
        """Record that a field was filled in from a default.

        When the field holds a nested node copied from a template, every
        populated field of that subtree is marked as well.

        Args:
            name: Python attribute name of the field.
        """
        self._check_field(name)
        self._defaulted_fields.add(name)
        value = getattr(self, name)
        if isinstance(value, SpecModel):
            value._mark_subtree_defaulted()

    def _mark_subtree_defaulted(self) -> None:
        for name in type(self).model_fields:
            if getattr(self, name) is not None:
                self.mark_defaulted(name)

    @property
    def defaulted_fields(self) -> frozenset[str]:
        """Return the names of fields filled in from defaults."""
        return frozenset(self._defaulted_fields)

    def to_document(self) -> dict[str, Any]:
        """Dump the node as a JSON-compatible mapping with wire names.

        Absent fields are omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def iter_defaulted_paths(node: SpecModel, prefix: str = "") -> Iterator[str]:
    """Yield dotted wire-name paths of every defaulted field in a tree.

    Args:
        node: Root of the tree to walk.
        prefix: Path of ``node`` itself, empty for the root.

    Yields:
        Paths such as ``"tls.defaultSecretName"``, parents before children.
    """
    for name, info in type(node).model_fields.items():
        key = info.alias or name
        path = f"{prefix}.{key}" if prefix else key
        if name in node.defaulted_fields:
            yield path
        value = getattr(node, name)
        if isinstance(value, SpecModel):
            yield from iter_defaulted_paths(value, path)


@runtime_checkable
class WithDefaults(Protocol):
    """A spec section that knows how to fill in its own defaults."""

    def apply_defaults(self) -> None: ...


class ValidableSpec(SpecModel):
    """A spec section exposing a validity hook.

    The default hook accepts everything; validation proper belongs to the
    caller that owns the spec.
    """

    def is_valid(self, context: "ValidationContext") -> bool:  # noqa: ARG002, UP037
        """Return whether this spec is valid, reporting issues to ``context``."""
        return True
