class ScannerError(Exception):
    """Base for scanner failures - carries a stable numeric code and a description"""

    code: int = 0
    description: str = "Scanner error."

    def __init__(self, description: str | None = None):
        if description is not None:
            self.description = description
        super().__init__(self.description)

    def __str__(self) -> str:
        return self.description


class WordDoesNotExist(ScannerError):
    """No previous/next word relative to the cursor"""

    code = 10
    description = "The requested word does not exist."


class PastBounds(ScannerError):
    """A move would leave the valid index range of the text"""

    code = 20
    description = "Attempting to move outside of the bounds."
