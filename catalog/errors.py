"""Exceptions raised by the recipe store."""


class CatalogError(Exception):
    """Base class for recipe catalog errors."""


class RecipeNotFound(CatalogError):
    """No recipe row matches the requested identifier."""

    def __init__(self, recipe_id: int) -> None:
        super().__init__(f"Recipe {recipe_id} not found")
        self.recipe_id = recipe_id


class StoreError(CatalogError):
    """
    A query against the store failed.

    ``public_message`` is safe to return to API clients; the underlying
    database exception is kept as ``__cause__`` and only ever logged.
    """

    def __init__(self, public_message: str) -> None:
        super().__init__(public_message)
        self.public_message = public_message
