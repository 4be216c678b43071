"""Heuristic field classifier.

Turns the flat, unlabeled sequence of a traversal into zero or more
:class:`ClassifiedRecord` instances. Behaviour is driven entirely by a
:class:`DomainProfile`:

- a *boundary* predicate over elements starts a new record;
- an ordered chain of :class:`FieldRule` assigns each value to the first
  rule that accepts it and whose field is still unfilled;
- a record is emitted only if its required fields were filled and the
  optional validator accepts it.

The classifier is a two-state machine::

    NO_RECORD --value--> ACCUMULATING
    ACCUMULATING --value--> ACCUMULATING
    ACCUMULATING --boundary/finish--> NO_RECORD   (flush)
    NO_RECORD --boundary/finish--> NO_RECORD      (nothing to flush)

Results are best-effort. A value that satisfies no rule is appended to the
profile's catch-all field or dropped.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from ..logging import get_logger
from ..model.records import ClassifiedRecord
from ..model.snapshot import UIElementSnapshot

logger = get_logger(__name__)

ValuePredicate = Callable[[str], bool]
ElementPredicate = Callable[[UIElementSnapshot], bool]
RecordPredicate = Callable[[ClassifiedRecord], bool]
ValueSource = Callable[[UIElementSnapshot], Sequence[str | None]]


def _any_value(value: str) -> bool:
    return True


def _no_element(element: UIElementSnapshot) -> bool:
    return False


def node_value(element: UIElementSnapshot) -> Sequence[str | None]:
    """Default value source: the node's value attribute."""
    return (element.value,)


def value_or_title(element: UIElementSnapshot) -> Sequence[str | None]:
    """The node's value, falling back to its title."""
    return (element.value or element.title,)


def title_or_value(element: UIElementSnapshot) -> Sequence[str | None]:
    """The node's title, falling back to its value."""
    return (element.title or element.value,)


def role_in(*roles: str) -> ElementPredicate:
    """Boundary predicate matching exact roles."""
    accepted = frozenset(roles)

    def predicate(element: UIElementSnapshot) -> bool:
        return element.role in accepted

    return predicate


def role_contains(*fragments: str) -> ElementPredicate:
    """Boundary predicate matching roles containing any fragment (``"Row"`` matches ``AXOutlineRow``)."""

    def predicate(element: UIElementSnapshot) -> bool:
        return element.role is not None and any(f in element.role for f in fragments)

    return predicate


@dataclass(frozen=True)
class FieldRule:
    """One link of a field-guess chain.

    Attributes:
        field: Record field this rule fills
        predicate: Accepts or rejects a candidate value
        roles: If set, only values from elements with one of these roles match
        transform: Applied to the value before it is stored
        max_index: If set, only values at a position below this in the record match
        accumulate: Append every accepted value instead of keeping the first one
        separator: Joins accumulated values
    """

    field: str
    predicate: ValuePredicate = _any_value
    roles: frozenset[str] | None = None
    transform: Callable[[str], str] | None = None
    max_index: int | None = None
    accumulate: bool = False
    separator: str = " "

    def accepts(self, value: str, role: str | None, index: int) -> bool:
        if self.roles is not None and role not in self.roles:
            return False
        if self.max_index is not None and index >= self.max_index:
            return False
        return self.predicate(value)

    def store(self, record: ClassifiedRecord, value: str) -> bool:
        """Write ``value`` into ``record``; return False if the field is taken."""
        if self.transform is not None:
            value = self.transform(value)
        if self.accumulate:
            record.append(self.field, value, self.separator)
            return True
        return record.fill(self.field, value)


@dataclass(frozen=True)
class DomainProfile:
    """Configuration for one domain's classification.

    Attributes:
        name: Profile name, used in log events
        boundary: Element predicate that closes the current record
        rules: Ordered field-guess chain
        required_fields: Fields that must be non-empty for a record to be emitted
        validator: Extra record check applied at flush time
        catch_all: Field receiving values no rule accepted
        catch_all_separator: Joins values appended to ``catch_all``
        ignore: Values for which this returns True are discarded up front
        value_source: Extracts candidate values from an element
        skip_roleless: Ignore elements that report no role at all
        one_record_per_value: Flush after every accepted value
    """

    name: str
    boundary: ElementPredicate = _no_element
    rules: tuple[FieldRule, ...] = ()
    required_fields: tuple[str, ...] = ()
    validator: RecordPredicate | None = None
    catch_all: str | None = None
    catch_all_separator: str = " "
    ignore: ValuePredicate | None = None
    value_source: ValueSource = node_value
    skip_roleless: bool = True
    one_record_per_value: bool = False

    def is_complete(self, record: ClassifiedRecord) -> bool:
        """Check the required-field invariant and the validator."""
        if not all(record.is_filled(name) for name in self.required_fields):
            return False
        return self.validator is None or self.validator(record)


class ClassifierState(Enum):
    """Whether a record is currently open."""

    NO_RECORD = auto()
    ACCUMULATING = auto()


class RecordClassifier:
    """Incremental classifier over one input sequence.

    Feed it with :meth:`on_element` (or :meth:`on_boundary` and
    :meth:`on_value` directly), then call :meth:`finish` to obtain the
    emitted records. A classifier instance is single-use.
    """

    def __init__(self, profile: DomainProfile) -> None:
        self.profile = profile
        self.state = ClassifierState.NO_RECORD
        self._current: ClassifiedRecord | None = None
        self._records: list[ClassifiedRecord] = []
        self._dropped = 0

    @property
    def current(self) -> ClassifiedRecord | None:
        return self._current

    @property
    def records(self) -> list[ClassifiedRecord]:
        """Records emitted so far."""
        return list(self._records)

    def on_element(self, element: UIElementSnapshot) -> None:
        """Process one traversal node: boundary check, then its values."""
        if element.role is None and self.profile.skip_roleless:
            return

        if self.profile.boundary(element):
            self.on_boundary()

        for value in self.profile.value_source(element):
            self.on_value(value, element.role)

    def on_boundary(self) -> None:
        """Close the open record, emitting it if complete."""
        self._flush()

    def on_value(self, value: str | None, role: str | None = None) -> None:
        """Assign one value to the open record, opening one if needed."""
        if not value:
            return
        if self.profile.ignore is not None and self.profile.ignore(value):
            return

        if self._current is None:
            self._current = ClassifiedRecord()
            self.state = ClassifierState.ACCUMULATING

        record = self._current
        index = record.note_value()

        for rule in self.profile.rules:
            if not rule.accepts(value, role, index):
                continue
            if not rule.accumulate and record.is_filled(rule.field):
                continue
            if rule.store(record, value):
                break
        else:
            if self.profile.catch_all is not None:
                record.append(self.profile.catch_all, value, self.profile.catch_all_separator)

        if self.profile.one_record_per_value:
            self._flush()

    def finish(self) -> list[ClassifiedRecord]:
        """Flush the open record and return every emitted record."""
        self._flush()
        if self._dropped:
            logger.debug(
                "records_dropped",
                profile=self.profile.name,
                emitted=len(self._records),
                dropped=self._dropped,
            )
        return self.records

    def _flush(self) -> None:
        record = self._current
        self._current = None
        self.state = ClassifierState.NO_RECORD

        if record is None:
            return
        if not self.profile.is_complete(record):
            self._dropped += 1
            return

        self._records.append(record)
        logger.debug("record_emitted", profile=self.profile.name, fields=list(record))


def classify(elements: Iterable[UIElementSnapshot], profile: DomainProfile) -> list[ClassifiedRecord]:
    """Classify traversal output into records.

    Args:
        elements: Snapshots in traversal order
        profile: Domain configuration

    Returns:
        Emitted records in input order
    """
    classifier = RecordClassifier(profile)
    for element in elements:
        classifier.on_element(element)
    return classifier.finish()


def classify_values(values: Iterable[str], profile: DomainProfile) -> list[ClassifiedRecord]:
    """Classify bare values with no boundaries or roles.

    Used for "current item" views, where every visible value belongs to the
    same record.
    """
    classifier = RecordClassifier(profile)
    for value in values:
        classifier.on_value(value)
    return classifier.finish()
