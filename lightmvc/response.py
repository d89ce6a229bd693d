"""HTTP responses rendered to raw text."""

from __future__ import annotations

import enum

__all__ = ["ContentType", "Response"]

_NOT_FOUND_BODY = " ".join(
    [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        "<title>lightmvc</title>",
        "</head>",
        "<body>",
        '<h1 style="text-align: center;">404 Page Not Found</h1>',
        '<p style="text-align: center;">request not matched</p>',
        "</body>",
        "</html>",
    ]
)


class ContentType(enum.Enum):
    HTML = "text/html"
    JSON = "application/json"


def _message(status_line: str, header_lines: list[str], body: str) -> str:
    length = len(body.encode("utf-8"))
    head = "".join(f"{line}\r\n" for line in [status_line, *header_lines])
    return f"{head}Content-Length: {length}\r\n\r\n{body}\r\n"


class Response:
    """A response body with a status code and content type.

    The status line always carries the reason phrase ``OK``, whatever the code.
    """

    def __init__(self) -> None:
        self.code = 200
        self.content_type: ContentType | None = None
        self.body = ""

    def html(self, data: str) -> None:
        self.content_type = ContentType.HTML
        self.body = data

    def json(self, data: str) -> None:
        self.content_type = ContentType.JSON
        self.body = data

    def render(self) -> str:
        """The full HTTP message for this response."""
        headers = []
        if self.content_type is not None:
            headers.append(f"Content-Type: {self.content_type.value}; charset: utf-8")
        return _message(f"HTTP/1.1 {self.code} OK", headers, self.body)

    def page_not_found(self) -> str:
        """A fixed 404 page, independent of this response's own state."""
        return _message(
            "HTTP/1.1 404 Not Found",
            ["Content-Type: text/html; charset: UTF-8"],
            _NOT_FOUND_BODY,
        )