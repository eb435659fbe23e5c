from .json_catalog import CardCatalog, JsonCardCatalog, UnknownCardTypeError

__all__ = ["CardCatalog", "JsonCardCatalog", "UnknownCardTypeError"]
