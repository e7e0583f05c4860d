"""Recipe error types."""


class RecipeError(Exception):
    """Raised when a selector recipe document is malformed."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{path}: {message}")
