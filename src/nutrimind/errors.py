"""Application error types."""

from uuid import UUID


class NutriMindError(Exception):
    """Base class for application errors."""


class MealAnalysisError(NutriMindError):
    """Raised when a meal description or photo could not be analyzed."""

    def __init__(self, message: str = "Failed to analyze input.") -> None:
        super().__init__(message)


class RecipeGenerationError(NutriMindError):
    """Raised when no recipe could be generated."""

    def __init__(self, message: str = "The Chef could not cook up a recipe.") -> None:
        super().__init__(message)


class EntryNotFoundError(NutriMindError):
    """Raised when a log entry id is not in the session."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(f"Log entry {entry_id} not found")
        self.entry_id = entry_id


class InventoryItemNotFoundError(NutriMindError):
    """Raised when an inventory item id is not in the session."""

    def __init__(self, item_id: UUID) -> None:
        super().__init__(f"Inventory item {item_id} not found")
        self.item_id = item_id
