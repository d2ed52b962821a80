"""Contains exceptions raised by the GitHub client adapter."""


class PullRequestAlreadyExistsError(Exception):
    """Raised when GitHub refuses to create a pull request because one already exists."""

    def __init__(self, head: str, base: str, message: str) -> None:
        """Initializes the exception with the head and base of the rejected pull request."""
        super().__init__(f"A pull request already exists for {head} -> {base}: {message}")
        self.head = head
        self.base = base
