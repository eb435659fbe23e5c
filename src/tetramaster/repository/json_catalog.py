"""Card type catalogs, in memory or backed by a JSON file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter

from tetramaster.domain import models as dm
from tetramaster.domain.card_data import DEFAULT_CARD_TYPES
from tetramaster.schemas import CardTypeSchema


class UnknownCardTypeError(KeyError):
    """Raised when a catalog has no entry for the requested card type."""


class CardCatalog:
    """Read-only lookup of card types by id."""

    def __init__(self, card_types: Iterable[dm.CardType] = DEFAULT_CARD_TYPES) -> None:
        self._types: dict[dm.CardTypeID, dm.CardType] = {}
        for card_type in card_types:
            if card_type.id in self._types:
                raise ValueError(f"duplicate card type id {int(card_type.id)}")
            self._types[card_type.id] = card_type

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def get(self, type_id: int) -> dm.CardType:
        """Return the card type registered under ``type_id``."""

        try:
            return self._types[dm.CardTypeID(type_id)]
        except KeyError:
            raise UnknownCardTypeError(type_id) from None

    def list_types(self) -> list[dm.CardType]:
        """Return every card type ordered by id."""

        return sorted(self._types.values(), key=lambda card_type: int(card_type.id))


class JsonCardCatalog(CardCatalog):
    """Card catalog loaded from a JSON list of card type objects."""

    _adapter: TypeAdapter[list[CardTypeSchema]] = TypeAdapter(list[CardTypeSchema])

    def __init__(self, path: Path, card_types: Iterable[dm.CardType]) -> None:
        super().__init__(card_types)
        self.path = path

    @classmethod
    def load(cls, path: Path) -> JsonCardCatalog:
        """Read and validate a catalog file.

        Raises:
            pydantic.ValidationError: If an entry is malformed (e.g. a negative stat).
        """

        entries = cls._adapter.validate_json(path.read_bytes())
        return cls(path, [entry.to_domain() for entry in entries])

    @staticmethod
    def dump(card_types: Iterable[dm.CardType], path: Path) -> Path:
        """Write ``card_types`` to ``path`` in the format :meth:`load` reads."""

        schemas = [CardTypeSchema.from_domain(card_type) for card_type in card_types]
        path.write_bytes(JsonCardCatalog._adapter.dump_json(schemas, indent=2))
        return path
