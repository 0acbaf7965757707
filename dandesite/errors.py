"""Errors reported while serving the about page and blog posts."""

from __future__ import annotations


class _ValueEquality:
    """Errors compare equal when they are of the same kind with the same message."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseException):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


# ===== About ===== #
class AboutError(_ValueEquality, Exception):
    """Base class for about page errors."""


class AboutNotFoundError(AboutError):
    def __init__(self) -> None:
        super().__init__("Post not found.")


class AboutServerError(AboutError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Server error: {message}.")


# ===== Post ===== #
class PostError(_ValueEquality, Exception):
    """Base class for blog post errors."""


class InvalidPostIdError(PostError):
    def __init__(self) -> None:
        super().__init__("Invalid post ID.")


class PostNotFoundError(PostError):
    def __init__(self) -> None:
        super().__init__("Post not found.")


class PostServerError(PostError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Server error: {message}.")