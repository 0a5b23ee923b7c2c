"""Ledger schema: MetaItem, InfoItem, MetaKey and the Ledger mapping.

The persisted shape is a JSON object keyed by ``"<lang>.<path>"`` whose
values use camelCase fields (``srcLang``, ``srcValue``, ``distLang``,
``distValue``). Inside the package the ledger is keyed by ``MetaKey``
tuples so the language is never re-parsed out of a string.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, NamedTuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from langledger.content.paths import PATH_SEPARATOR
from langledger.errors import LedgerValidationError
from langledger.languages import LangCode, parse_lang


class MetaKey(NamedTuple):
    """Composite ledger key: target language plus display path."""

    lang: LangCode
    path: str

    def __str__(self) -> str:
        return f"{self.lang.value}{PATH_SEPARATOR}{self.path}"

    @classmethod
    def of(cls, lang: LangCode | str, path: str) -> MetaKey:
        return cls(parse_lang(lang), sys.intern(path))

    @classmethod
    def parse(cls, text: str) -> MetaKey:
        """Parse ``"<lang>.<path>"``.

        Raises:
            LedgerValidationError: On a missing path or unsupported language.
        """
        if not isinstance(text, str):
            raise LedgerValidationError("meta key must be a string", key=repr(text))
        lang, sep, path = text.partition(PATH_SEPARATOR)
        if not sep or not path:
            raise LedgerValidationError("meta key must look like '<lang>.<path>'", key=text)
        try:
            return cls.of(lang, path)
        except LedgerValidationError as e:
            raise LedgerValidationError(str(e), key=text) from None


class MetaItem(BaseModel):
    """Translation provenance for one (target language, path) pair."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    src_lang: LangCode = Field(alias="srcLang")
    src_value: str = Field(alias="srcValue")
    dist_lang: LangCode = Field(alias="distLang")
    dist_value: str | None = Field(default=None, alias="distValue")

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class InfoItem(MetaItem):
    """A MetaItem evaluated against the live source content."""

    current_src_value: str | None = Field(default=None, alias="currentSrcValue")
    actual: bool

    @field_validator("actual")
    @classmethod
    def actual_requires_translation(cls, v: bool, info: ValidationInfo) -> bool:
        if v and not info.data.get("dist_value"):
            raise ValueError("an entry without a translated value cannot be actual")
        return v


def has_signal(entry: Any) -> bool:
    """True when a stored entry records both a source and a translated value.

    Entries that are not mappings or MetaItems are kept so that validation
    reports them.
    """
    if isinstance(entry, MetaItem):
        return bool(entry.src_value) and entry.dist_value is not None
    if isinstance(entry, Mapping):
        return bool(entry.get("srcValue", entry.get("src_value"))) and (
            entry.get("distValue", entry.get("dist_value")) is not None
        )
    return True


def drop_signalless(meta: Ledger | Mapping[str, Any] | None) -> Ledger | Mapping[str, Any] | None:
    """Discard stored entries without a source or translated value.

    Raw mappings are filtered before any validation, so such entries never
    fail the schema check. Ledgers are already validated and pass through.
    """
    if meta is None or isinstance(meta, Ledger) or not isinstance(meta, Mapping):
        return meta
    return {key: entry for key, entry in meta.items() if has_signal(entry)}


def validate_entry(key: Any, entry: Any) -> tuple[MetaKey, MetaItem]:
    """Validate one raw ledger entry.

    Raises:
        LedgerValidationError: If the key or item is malformed, or the item's
            ``distLang`` disagrees with the key's language segment.
    """
    meta_key = key if isinstance(key, MetaKey) else MetaKey.parse(key)
    if isinstance(entry, MetaItem):
        item = entry
    else:
        try:
            item = MetaItem.model_validate(entry)
        except ValidationError as e:
            raise LedgerValidationError(
                f"invalid meta item: {e.errors(include_url=False)}", key=str(meta_key)
            ) from e
    if item.dist_lang != meta_key.lang:
        raise LedgerValidationError(
            f"distLang {item.dist_lang.value!r} does not match key language "
            f"{meta_key.lang.value!r}",
            key=str(meta_key),
        )
    return meta_key, item


class Ledger(Mapping[MetaKey, MetaItem]):
    """Immutable mapping from MetaKey to MetaItem.

    Updates return a new Ledger that shares the unchanged (frozen) items.
    """

    __slots__ = ("_items",)

    def __init__(
        self,
        items: Mapping[MetaKey, MetaItem] | Iterable[tuple[MetaKey, MetaItem]] | None = None,
    ) -> None:
        self._items: dict[MetaKey, MetaItem] = dict(items or {})

    # -- Mapping protocol --------------------------------------------------

    def __getitem__(self, key: MetaKey | str) -> MetaItem:
        if isinstance(key, str):
            key = MetaKey.parse(key)
        return self._items[key]

    def __iter__(self) -> Iterator[MetaKey]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            try:
                key = MetaKey.parse(key)
            except LedgerValidationError:
                return False
        return key in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ledger):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"Ledger({len(self._items)} entries)"

    # -- Boundary ----------------------------------------------------------

    @classmethod
    def from_meta(cls, meta: Ledger | Mapping[str, Any] | None) -> Ledger:
        """Validate a persisted ledger mapping.

        Raises:
            LedgerValidationError: On the first malformed entry.
        """
        if meta is None:
            return cls()
        if isinstance(meta, Ledger):
            return meta
        if not isinstance(meta, Mapping):
            raise LedgerValidationError("meta must be a mapping")
        return cls(validate_entry(key, entry) for key, entry in meta.items())

    def to_meta(self) -> dict[str, dict[str, Any]]:
        """Persisted form: ``{"<lang>.<path>": {camelCase fields}}``."""
        return {str(key): item.to_json_dict() for key, item in self._items.items()}

    # -- Updates -----------------------------------------------------------

    def with_items(self, updates: Mapping[MetaKey, MetaItem] | Iterable[tuple[MetaKey, MetaItem]]) -> Ledger:
        items = dict(self._items)
        items.update(updates)
        return Ledger(items)

    def merged(self, *others: Ledger) -> Ledger:
        """Combine ledgers; later ledgers win per key."""
        items = dict(self._items)
        for other in others:
            items.update(other._items)
        return Ledger(items)

    def for_lang(self, lang: LangCode | str) -> Ledger:
        lang = parse_lang(lang)
        return Ledger({k: v for k, v in self._items.items() if k.lang == lang})

    def without_lang(self, lang: LangCode | str) -> Ledger:
        lang = parse_lang(lang)
        return Ledger({k: v for k, v in self._items.items() if k.lang != lang})

    def langs(self) -> list[LangCode]:
        seen: list[LangCode] = []
        for key in self._items:
            if key.lang not in seen:
                seen.append(key.lang)
        return seen


Meta = Ledger
Info = dict[MetaKey, InfoItem]
