"""Copy engine: shallow copy of same-named, same-typed attributes.

Usage:
    @dataclass
    class PersonForm:
        name: str | None = None
        age: int | None = None

    @dataclass
    class PersonRow:
        name: str | None = None
        age: int | None = None
        notes: str | None = None

    copier = PropertyCopier(PersonForm, PersonRow)
    row = copier.copy(PersonForm(name="Ann", age=30))

    existing = PersonRow(name="Bob")
    copier.copy_into(
        PersonForm(name="Ann", age=30),
        existing,
        OverrideStatus.OVERRIDE_ONLY_IF_TARGET_PROPERTY_VALUE_IS_NULL,
    )
    # existing.name == "Bob", existing.age == 30
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from recordcopy.core.attributes import AttributeInfo, find_eligible, get_registry, is_fresh
from recordcopy.core.policy import CopyResult, OverrideStatus, write_always
from recordcopy.observable import ObservableList

if TYPE_CHECKING:
    from recordcopy.config import CopierSettings

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")


class PropertyCopier(Generic[S, T]):
    """Copies matching attribute values from S records into T records.

    Attributes are matched by exact name and exact declared type. Values are
    assigned as-is (shallow). Attributes are read according to the runtime
    type of each instance, so subclass sources contribute their extra
    attributes too.

    Args:
        source_type: Record class values are read from.
        target_type: Record class values are written to. Must be constructible
            without arguments.
        settings: Optional engine defaults (see recordcopy.config).

    Raises:
        TypeError: If source_type or target_type is not a class.
    """

    def __init__(
        self,
        source_type: type[S],
        target_type: type[T],
        *,
        settings: CopierSettings | None = None,
    ) -> None:
        for role, cls in (("source", source_type), ("target", target_type)):
            if not isinstance(cls, type):
                raise TypeError(f"PropertyCopier {role} type must be a class, got {cls!r}")
        self.source_type = source_type
        self.target_type = target_type
        self.default_policy = (
            settings.default_policy
            if settings is not None
            else OverrideStatus.OVERRIDE_ONLY_IF_TARGET_IS_NEW
        )
        self._cache_shapes = settings.cache_shapes if settings is not None else True

    def __repr__(self) -> str:
        return (
            f"PropertyCopier[{self.source_type.__qualname__}, {self.target_type.__qualname__}]"
        )

    # --- Helpers ---

    def new_target(self) -> T:
        """Construct a default target instance; constructor errors propagate."""
        return self.target_type()

    def _describe(self, cls: type) -> tuple[AttributeInfo, ...]:
        return get_registry().describe(cls, cache=self._cache_shapes)

    def is_fresh(self, target: T) -> bool:
        """Check whether target still equals a newly constructed target."""
        return is_fresh(target, self.new_target, self._describe)

    def _copy_attributes(
        self,
        source: S,
        target: T,
        gate: Callable[[Any], bool],
    ) -> bool:
        """Write every eligible source value into target.

        Args:
            source: Record to read from.
            target: Record to write to.
            gate: Per-attribute check on the target's current value.

        Returns:
            True if at least one attribute was written.

        Raises:
            AttributeError: If source is None.
        """
        if source is None:
            raise AttributeError(f"{self!r}: cannot copy from None")

        changed = False
        target_attributes = self._describe(type(target))

        for source_attribute in self._describe(type(source)):
            value = getattr(source, source_attribute.name)
            target_attribute = find_eligible(source_attribute, target_attributes)
            if target_attribute is None:
                continue
            if not gate(getattr(target, target_attribute.name)):
                continue
            setattr(target, target_attribute.name, value)
            changed = True

        return changed

    def _resolve_policy(self, policy: OverrideStatus | None) -> OverrideStatus:
        return self.default_policy if policy is None else policy

    # --- Single record ---

    def copy(self, source: S) -> T:
        """Copy source into a new target.

        Args:
            source: Record to read from.

        Returns:
            New target holding every eligible source value.
        """
        return self.copy_with_changes(source).target

    def copy_with_changes(self, source: S) -> CopyResult[T]:
        """Copy source into a new target and report whether anything was written.

        Args:
            source: Record to read from.

        Returns:
            CopyResult with the new target and the change flag.
        """
        target = self.new_target()
        changed = self._copy_attributes(source, target, write_always)
        return CopyResult(target=target, changed=changed)

    def copy_into(
        self,
        source: S,
        target: T | None,
        policy: OverrideStatus | None = None,
    ) -> T:
        """Copy source into an existing target, subject to an override policy.

        Args:
            source: Record to read from.
            target: Record to write to. A new one is constructed if None.
            policy: Override policy. Defaults to the engine's default policy
                (OVERRIDE_ONLY_IF_TARGET_IS_NEW unless configured otherwise).

        Returns:
            The target, updated or untouched depending on the policy.
        """
        return self.copy_into_with_changes(source, target, policy).target

    def copy_into_with_changes(
        self,
        source: S,
        target: T | None,
        policy: OverrideStatus | None = None,
    ) -> CopyResult[T]:
        """Copy source into an existing target and report whether anything was written.

        OVERRIDE_ONLY_IF_TARGET_IS_NEW checks freshness once and returns the
        target untouched if it was modified since construction. The other two
        policies check each eligible attribute's current target value instead.

        Args:
            source: Record to read from.
            target: Record to write to. A new one is constructed if None.
            policy: Override policy. Defaults to the engine's default policy.

        Returns:
            CopyResult with the target and the change flag.
        """
        if target is None:
            target = self.new_target()
        status = self._resolve_policy(policy)

        if status.checks_freshness and not self.is_fresh(target):
            logger.debug("%r: target %r is not fresh, nothing copied", self, target)
            return CopyResult(target=target, changed=False)

        changed = self._copy_attributes(source, target, status.get_gate())
        return CopyResult(target=target, changed=changed)

    # --- Bulk ---

    def _adapt_into(self, sources: Iterable[S], result: MutableSequence[T]) -> None:
        for source in sources:
            result.append(self.copy(source))

    def copy_list_to_observable(self, sources: Sequence[S]) -> ObservableList[T]:
        """Adapt a sequence of sources into a new ObservableList of targets.

        Order is preserved; each element is copied into its own new target.
        The first failing element aborts the whole call.

        Args:
            sources: Records to read from.

        Returns:
            New ObservableList with one target per source.
        """
        result: ObservableList[T] = ObservableList()
        self._adapt_into(sources, result)
        return result

    def copy_observable_to_list(self, sources: Sequence[S]) -> list[T]:
        """Adapt an ObservableList of sources into a new list of targets.

        Order is preserved; each element is copied into its own new target.
        The first failing element aborts the whole call.

        Args:
            sources: Records to read from.

        Returns:
            New list with one target per source.
        """
        result: list[T] = []
        self._adapt_into(sources, result)
        return result
