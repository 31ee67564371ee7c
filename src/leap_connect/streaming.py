from __future__ import annotations

from collections.abc import Iterable, Iterator
import json
import logging

import httpx

from .errors import APIConnectionError
from .types.chat_completion import ChatChunkResponse

logger = logging.getLogger(__name__)

DATA_PREFIX = "data:"


def parse_chunk_line(line: str) -> ChatChunkResponse | None:
    """Decode one server-sent-event line into a chunk.

    Only blank lines and ``data:`` lines are considered; the text after the
    first ``data:`` must be a JSON chunk. Everything else, including the
    ``[DONE]`` sentinel and keep-alive comments, yields ``None``.
    """
    data = line.strip()
    if data and not data.startswith(DATA_PREFIX):
        return None
    payload = data.split(DATA_PREFIX, 1)[-1].strip()
    if not payload:
        return None
    try:
        return ChatChunkResponse.from_dict(json.loads(payload))
    except (ValueError, KeyError, TypeError, AttributeError):
        logger.debug("Skipping undecodable stream line: %.200s", payload)
        return None


def iter_chunks(lines: Iterable[str]) -> Iterator[ChatChunkResponse]:
    for line in lines:
        chunk = parse_chunk_line(line)
        if chunk is not None:
            yield chunk


class ChatStream:
    """Chunks of one streamed chat completion.

    Owns the open HTTP response: ``close()`` releases the connection whether
    or not iteration has started, and exhausting the stream or hitting a
    read error closes it too. Usable as a context manager::

        with client.chat_completion_stream(request) as stream:
            for chunk in stream:
                print(chunk.text, end="")
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self._chunks = iter_chunks(self._lines())

    def _lines(self) -> Iterator[str]:
        try:
            yield from self.response.iter_lines()
        except httpx.TransportError as exc:
            logger.warning("Stream from %s interrupted: %s", self.response.request.url, exc)
            raise APIConnectionError(f"Stream interrupted: {exc}") from exc

    def __iter__(self) -> ChatStream:
        return self

    def __next__(self) -> ChatChunkResponse:
        try:
            return next(self._chunks)
        except (StopIteration, APIConnectionError):
            self.close()
            raise

    def close(self) -> None:
        self._chunks.close()
        self.response.close()

    def __enter__(self) -> ChatStream:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
