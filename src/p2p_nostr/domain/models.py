"""Nostr event model (NIP-01 shape) with a typed view over its tags.

Wire form:
    {
      "id": "<hex>", "pubkey": "<hex>", "created_at": <epoch s>,
      "kind": <int>, "tags": [["name", "value", ...], ...],
      "content": "<text>", "sig": "<hex>"
    }

``id`` and ``sig`` are assigned by the signer; this module never computes them.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.p2p_common.datetime_utils import epoch_now


@dataclass(frozen=True)
class Tag:
    name: str
    values: tuple[str, ...] = ()

    @property
    def value(self) -> str | None:
        return self.values[0] if self.values else None

    @property
    def qualifier(self) -> str | None:
        """Second element after the value, e.g. the currency of a ``price`` tag."""
        return self.values[1] if len(self.values) > 1 else None

    def to_list(self) -> list[str]:
        return [self.name, *self.values]

    @classmethod
    def from_list(cls, raw: Iterable[str]) -> "Tag | None":
        items = list(raw)
        if not items:
            return None
        return cls(name=items[0], values=tuple(items[1:]))


class TagSet:
    """Ordered, append-only tag collection.

    Order matters for repeated names (``t`` topics); lookups by name
    return the first match.
    """

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._tags: list[Tag] = list(tags)

    def add(self, name: str, *values: str | None) -> "TagSet":
        kept = tuple(v for v in values if v is not None)
        if name:
            self._tags.append(Tag(name=name, values=kept))
        return self

    def first(self, name: str) -> Tag | None:
        for tag in self._tags:
            if tag.name == name:
                return tag
        return None

    def value(self, name: str) -> str | None:
        tag = self.first(name)
        return tag.value if tag is not None else None

    def values(self, name: str) -> list[str]:
        return [t.values[0] for t in self._tags if t.name == name and t.values]

    def to_wire(self) -> list[list[str]]:
        return [t.to_list() for t in self._tags]

    @classmethod
    def from_wire(cls, raw: Iterable[Iterable[str]]) -> "TagSet":
        tags = (Tag.from_list(item) for item in raw)
        return cls(t for t in tags if t is not None)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    pubkey: str
    created_at: int = Field(default_factory=epoch_now)
    kind: int
    tags: list[list[str]] = Field(default_factory=list)
    content: str = ""
    sig: str | None = None

    @field_validator("tags")
    @classmethod
    def drop_empty_tags(cls, v: list[list[str]]) -> list[list[str]]:
        return [tag for tag in v if tag]

    @field_validator("content", mode="before")
    @classmethod
    def none_content_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def tag_set(self) -> TagSet:
        return TagSet.from_wire(self.tags)

    def tag_value(self, name: str) -> str | None:
        return self.tag_set.value(name)

    def tag_values(self, name: str) -> list[str]:
        return self.tag_set.values(name)

    def with_identity(self, event_id: str, sig: str | None = None) -> "Event":
        """Copy carrying the id/signature assigned by an external signer."""
        return self.model_copy(update={"id": event_id, "sig": sig})

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, text: str | bytes) -> "Event":
        return cls.model_validate_json(text)

    def __str__(self) -> str:
        short_id = f"{self.id[:8]}..." if self.id else "null"
        short_pk = f"{self.pubkey[:8]}..." if self.pubkey else "null"
        return (
            f"Event(id={short_id}, pubkey={short_pk}, created_at={self.created_at}, "
            f"kind={self.kind}, tags={len(self.tags)}, content={len(self.content)} chars)"
        )
