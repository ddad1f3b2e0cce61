"""Errors raised by the client and the error document returned by the API."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from http import HTTPStatus


class ApiError(Exception):
    """Base class for every error raised by the client."""


class RequestError(ApiError):
    """The HTTP request could not be sent or its body could not be read."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"Request error: {detail}")


class HttpError(ApiError):
    """The API answered with an error document instead of data."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"HTTP error: {_describe_status(status)} - {message}")


class UrlParseError(ApiError):
    """A request URL could not be built."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"URL parsing error: {detail}")


class DeserializeError(ApiError):
    """A response document did not have the expected shape."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"Deserialization error: {detail}")


class ParseError(ApiError):
    """A value could not be parsed into its typed form."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Parse error: {detail}")


def _describe_status(status: int) -> str:
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return str(status)


def _read_root(text: str) -> ET.Element:
    """Parse the first complete root element of ``text``, ignoring anything after it."""
    parser = ET.XMLPullParser(events=("start", "end"))
    depth = 0
    try:
        parser.feed(text)
        for event, element in parser.read_events():
            if event == "start":
                depth += 1
                continue
            depth -= 1
            if depth == 0:
                return element
        parser.close()
    except ET.ParseError as exc:
        raise DeserializeError(str(exc)) from exc
    raise DeserializeError("document has no root element")


def _parse_status(raw: str) -> int:
    value = raw.strip()
    if not value.isascii() or not value.isdigit():
        raise DeserializeError(f"invalid status code: {raw!r}")
    status = int(value)
    if not 100 <= status <= 999:
        raise DeserializeError(f"invalid status code: {raw!r}")
    return status


@dataclass(frozen=True)
class ResponseError:
    """An ``<error>`` document sent by the API in place of data."""

    status: int | None = None
    text: str | None = None

    @classmethod
    def from_xml(cls, text: str) -> ResponseError:
        """Read an error document; raise DeserializeError if ``text`` is not one."""
        root = _read_root(text)
        if root.tag != "error":
            raise DeserializeError(f"expected <error> element, found <{root.tag}>")
        raw_status = root.get("id")
        status = None if raw_status is None else _parse_status(raw_status)
        message = (root.text or "").strip() or None
        return cls(status=status, text=message)