from dataclasses import dataclass, fields
from typing import List, NamedTuple, Optional

from .exceptions import ConflictingFilters


class WordCountConstraint(NamedTuple):
    """A word count predicate: exact match ("eq") or strictly greater ("gt")."""
    op: str
    value: int

    @classmethod
    def exactly(cls, value):
        return cls("eq", value)

    @classmethod
    def more_than(cls, value):
        return cls("gt", value)

    def check(self, word_count: int) -> bool:
        if self.op == "gt":
            return word_count > self.value
        return word_count == self.value

    def as_json(self):
        if self.op == "eq":
            return self.value
        return {self.op: self.value}


@dataclass
class FilterSet:
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[WordCountConstraint] = None
    contains_character: Optional[str] = None

    @classmethod
    def from_params(cls, **params):
        """Build from already type-checked values; an int word_count means an exact match."""
        word_count = params.get("word_count")
        if isinstance(word_count, int) and not isinstance(word_count, bool):
            params["word_count"] = WordCountConstraint.exactly(word_count)
        return cls(**params).validate()

    def validate(self):
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ConflictingFilters(filters=self.as_dict())
        return self

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def as_dict(self):
        """Populated predicates only, in a JSON friendly shape."""
        result = {}
        for f in fields(self):
            val = getattr(self, f.name)
            if val is None:
                continue
            result[f.name] = val.as_json() if isinstance(val, WordCountConstraint) else val
        return result


class SelectionResult(NamedTuple):
    values: List[str]
    count: int
    records: list


def matches(filter_set: FilterSet, record) -> bool:
    """AND of every populated predicate; unset predicates don't constrain."""
    props = record.properties

    if filter_set.is_palindrome is not None and props.is_palindrome != filter_set.is_palindrome:
        return False
    if filter_set.word_count is not None and not filter_set.word_count.check(props.word_count):
        return False
    if (
        filter_set.contains_character is not None
        and filter_set.contains_character not in props.character_frequency_map
    ):
        return False
    if filter_set.min_length is not None and props.length < filter_set.min_length:
        return False
    if filter_set.max_length is not None and props.length > filter_set.max_length:
        return False
    return True


def select(store, filter_set: FilterSet) -> SelectionResult:
    records = [record for _, record in store.all() if matches(filter_set, record)]
    values = [record.value for record in records]
    return SelectionResult(values=values, count=len(values), records=records)
