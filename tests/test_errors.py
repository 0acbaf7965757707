from dandesite.errors import (
    AboutError,
    AboutNotFoundError,
    AboutServerError,
    InvalidPostIdError,
    PostError,
    PostNotFoundError,
    PostServerError,
)


def test_about_messages():
    assert str(AboutNotFoundError()) == "Post not found."
    assert str(AboutServerError("disk")) == "Server error: disk."


def test_post_messages():
    assert str(InvalidPostIdError()) == "Invalid post ID."
    assert str(PostNotFoundError()) == "Post not found."
    assert str(PostServerError("disk")) == "Server error: disk."


def test_hierarchy_catches_variants():
    post_error = PostNotFoundError()
    assert isinstance(post_error, PostError)
    assert not isinstance(post_error, AboutError)
    assert str(post_error) == "Post not found."

    about_error = AboutServerError("x")
    assert isinstance(about_error, AboutError)
    assert not isinstance(about_error, PostError)
    assert str(about_error) == "Server error: x."
    assert about_error.message == "x"

    invalid_error = InvalidPostIdError()
    assert isinstance(invalid_error, PostError)
    assert str(invalid_error) == "Invalid post ID."


def test_equality_by_kind_and_message():
    assert PostServerError("a") == PostServerError("a")
    assert PostServerError("a") != PostServerError("b")
    assert PostNotFoundError() != AboutNotFoundError()
    assert hash(InvalidPostIdError()) == hash(InvalidPostIdError())


def test_server_error_keeps_message():
    assert PostServerError("timeout").message == "timeout"
    assert AboutServerError("timeout").message == "timeout"