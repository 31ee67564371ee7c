from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import ExitStack
from dataclasses import replace
import json
import logging
from pathlib import Path
import time
from typing import Any, TypeVar

import httpx

from .common import to_wire
from .config import DEFAULT_TIMEOUT, ClientConfig, resolve_endpoint
from .errors import APIConnectionError, APIError, APIStatusError, ResponseDecodeError
from .streaming import ChatStream
from .types.assistant import Assistant, AssistantFile, AssistantFileRequest, AssistantRequest
from .types.audio import (
    AudioSpeechRequest,
    AudioSpeechResponse,
    AudioTextResponse,
    AudioTranscriptionRequest,
    AudioTranslationRequest,
)
from .types.chat_completion import (
    ChatCompletionRequest,
    ChatCompletionResponse,
)
from .types.completion import CompletionRequest, CompletionResponse
from .types.edit import EditRequest, EditResponse
from .types.embedding import EmbeddingRequest, EmbeddingResponse
from .types.file import FileContent, FileListResponse, FileObject, FileUploadRequest
from .types.fine_tuning import CreateFineTuningJobRequest, FineTuningJob, FineTuningJobEvent
from .types.image import (
    ImageEditRequest,
    ImageGenerationRequest,
    ImageResponse,
    ImageVariationRequest,
)
from .types.message import CreateMessageRequest, Message, MessageFile, ModifyMessageRequest
from .types.moderation import CreateModerationRequest, ModerationResponse
from .types.run import (
    CreateRunRequest,
    CreateThreadAndRunRequest,
    ModifyRunRequest,
    Run,
    RunStep,
)
from .types.shared import DeletionStatus, ListPage
from .types.thread import CreateThreadRequest, ModifyThreadRequest, Thread

logger = logging.getLogger(__name__)

T = TypeVar("T")

ORGANIZATION_HEADER = "tupleleapai-organization"
BETA_HEADER = "tupleleapai-Beta"
BETA_VERSION = "assistants=v1"
BETA_PATH_PREFIXES = ("/assistants", "/threads")


def is_beta(path: str) -> bool:
    return path.startswith(BETA_PATH_PREFIXES)


def page_params(
    limit: int | None = None,
    order: str | None = None,
    after: str | None = None,
    before: str | None = None,
) -> dict[str, str | int]:
    params: dict[str, str | int] = {}
    if limit is not None:
        params["limit"] = limit
    if order is not None:
        params["order"] = order
    if after is not None:
        params["after"] = after
    if before is not None:
        params["before"] = before
    return params


def _error_message(body: str) -> str:
    """Pull ``error.message`` out of an OpenAI-style error body if present."""
    try:
        data = json.loads(body)
    except ValueError:
        return body
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
    return body


class Client:
    """Synchronous client for an OpenAI-compatible REST API.

    Each endpoint method performs exactly one HTTP exchange and returns a
    typed response carrying the response headers. Failures surface as
    :class:`~leap_connect.errors.APIError` subclasses; nothing is retried.

    Can be used as a context manager for explicit resource cleanup::

        with Client.from_env() as client:
            response = client.chat_completion(request)
    """

    def __init__(
        self,
        api_key: str,
        *,
        api_endpoint: str | None = None,
        organization: str | None = None,
        proxy: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_endpoint = resolve_endpoint(api_endpoint)
        self.organization = organization
        self.proxy = proxy
        self.timeout = timeout
        self._client = http_client or httpx.Client(timeout=timeout, proxy=proxy)

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, http_client: httpx.Client | None = None
    ) -> Client:
        return cls(
            config.api_key,
            api_endpoint=config.api_endpoint,
            organization=config.organization,
            proxy=config.proxy,
            timeout=config.timeout,
            http_client=http_client,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> Client:
        """Build a client from ``TUPLELEAP_AI_API_KEY`` and ``API_URL_V1``."""
        return cls.from_config(ClientConfig.from_env(**overrides))

    def close(self) -> None:
        """Close the underlying HTTP client and release connections."""
        self._client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def url(self, path: str) -> str:
        return f"{self.api_endpoint}{path}"

    def build_headers(
        self, path: str, *, stream: bool = False, json_body: bool = True
    ) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        # Multipart bodies need httpx to set their own boundary
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.organization:
            headers[ORGANIZATION_HEADER] = self.organization
        if is_beta(path):
            headers[BETA_HEADER] = BETA_VERSION
        if stream:
            headers["Accept"] = "text/event-stream"
        return headers

    def _check_status(self, response: httpx.Response) -> None:
        if not response.is_error:
            return
        body = response.text
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise APIStatusError(
                f"HTTP {response.status_code} from {response.request.url}: "
                f"{_error_message(body)}",
                status_code=response.status_code,
                body=body,
            ) from exc

    def _send(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        params: Mapping[str, str | int] | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        stream: bool = False,
    ) -> httpx.Response:
        """Perform one exchange and raise for transport or status failures.

        With ``stream=True`` the body is left unread on success; the caller
        owns the open response. Error bodies are always read so the raised
        :class:`APIStatusError` carries them.
        """
        url = self.url(path)
        headers = self.build_headers(path, stream=stream, json_body=files is None)
        request = self._client.build_request(
            method,
            url,
            json=json_body,
            params=params,
            data=data,
            files=files,
            headers=headers,
        )
        started = time.monotonic()
        try:
            response = self._client.send(request, stream=stream)
            if stream and response.is_error:
                try:
                    response.read()
                finally:
                    response.close()
        except httpx.TransportError as exc:
            raise APIConnectionError(f"{method} {url} failed: {exc}") from exc
        elapsed = time.monotonic() - started
        logger.debug(
            "HTTP %d %s %s in %.2fs", response.status_code, method, url, elapsed
        )
        self._check_status(response)
        return response

    def post(self, path: str, payload: Any) -> httpx.Response:
        return self._send("POST", path, json_body=to_wire(payload))

    def post_multipart(self, path: str, request: Any) -> httpx.Response:
        """POST ``request.form()`` with the local files of ``request.uploads()``."""
        with ExitStack() as stack:
            try:
                files = {
                    name: (upload.name, stack.enter_context(upload.open("rb")))
                    for name, upload in request.uploads().items()
                }
            except OSError as exc:
                raise APIError(f"Could not open upload for {path}: {exc}") from exc
            return self._send("POST", path, data=request.form(), files=files)

    def get(
        self, path: str, params: Mapping[str, str | int] | None = None
    ) -> httpx.Response:
        return self._send("GET", path, params=params or None)

    def delete(self, path: str) -> httpx.Response:
        return self._send("DELETE", path)

    def _decode(
        self, response: httpx.Response, parse: Callable[[dict[str, Any]], T]
    ) -> T:
        url = response.request.url
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"Malformed JSON response from {url}: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e
        try:
            result = parse(data)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ResponseDecodeError(
                f"Unexpected response structure from {url}: {e!r}",
                status_code=response.status_code,
                body=response.text,
            ) from e
        return replace(result, headers=dict(response.headers))

    def _page(
        self,
        response: httpx.Response,
        item: Callable[[dict[str, Any]], T],
    ) -> ListPage[T]:
        return self._decode(response, lambda data: ListPage.from_dict(data, item))

    # ------------------------------------------------------------------
    # Chat, completions, edits, embeddings, moderations
    # ------------------------------------------------------------------

    def chat_completion(self, req: ChatCompletionRequest) -> ChatCompletionResponse:
        res = self.post("/chat/completions", req)
        return self._decode(res, ChatCompletionResponse.from_dict)

    def chat_completion_stream(self, req: ChatCompletionRequest) -> ChatStream:
        """Send a streamed chat completion and iterate over its chunks.

        The request is sent and its status checked before this returns, so
        HTTP errors surface here rather than on first iteration. The returned
        :class:`ChatStream` closes the connection when exhausted or closed.
        """
        res = self._send(
            "POST", "/chat/completions", json_body=to_wire(req.with_stream(True)), stream=True
        )
        return ChatStream(res)

    def completion(self, req: CompletionRequest) -> CompletionResponse:
        res = self.post("/completions", req)
        return self._decode(res, CompletionResponse.from_dict)

    def edit(self, req: EditRequest) -> EditResponse:
        res = self.post("/edits", req)
        return self._decode(res, EditResponse.from_dict)

    def embedding(self, req: EmbeddingRequest) -> EmbeddingResponse:
        res = self.post("/embeddings", req)
        return self._decode(res, EmbeddingResponse.from_dict)

    def create_moderation(self, req: CreateModerationRequest) -> ModerationResponse:
        res = self.post("/moderations", req)
        return self._decode(res, ModerationResponse.from_dict)

    # ------------------------------------------------------------------
    # Images and audio
    # ------------------------------------------------------------------

    def image_generation(self, req: ImageGenerationRequest) -> ImageResponse:
        res = self.post("/images/generations", req)
        return self._decode(res, ImageResponse.from_dict)

    def image_edit(self, req: ImageEditRequest) -> ImageResponse:
        res = self.post_multipart("/images/edits", req)
        return self._decode(res, ImageResponse.from_dict)

    def image_variation(self, req: ImageVariationRequest) -> ImageResponse:
        res = self.post_multipart("/images/variations", req)
        return self._decode(res, ImageResponse.from_dict)

    def _audio_text(self, res: httpx.Response) -> AudioTextResponse:
        content_type = res.headers.get("content-type", "")
        if "json" in content_type:
            return self._decode(res, AudioTextResponse.from_dict)
        return AudioTextResponse(text=res.text, headers=dict(res.headers))

    def audio_transcription(self, req: AudioTranscriptionRequest) -> AudioTextResponse:
        return self._audio_text(self.post_multipart("/audio/transcriptions", req))

    def audio_translation(self, req: AudioTranslationRequest) -> AudioTextResponse:
        return self._audio_text(self.post_multipart("/audio/translations", req))

    def audio_speech(self, req: AudioSpeechRequest) -> AudioSpeechResponse:
        """Synthesize speech and write the audio bytes to ``req.output``."""
        res = self.post("/audio/speech", req)
        output = Path(req.output)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(res.content)
        except OSError as exc:
            raise APIError(f"Could not write speech to {output}: {exc}") from exc
        logger.debug("Wrote %d bytes of speech to %s", len(res.content), output)
        return AudioSpeechResponse(result=True, path=output, headers=dict(res.headers))

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def file_list(self) -> FileListResponse:
        return self._decode(self.get("/files"), FileListResponse.from_dict)

    def file_upload(self, req: FileUploadRequest) -> FileObject:
        res = self.post_multipart("/files", req)
        return self._decode(res, FileObject.from_dict)

    def file_delete(self, file_id: str) -> DeletionStatus:
        res = self.delete(f"/files/{file_id}")
        return self._decode(res, DeletionStatus.from_dict)

    def file_retrieve(self, file_id: str) -> FileObject:
        res = self.get(f"/files/{file_id}")
        return self._decode(res, FileObject.from_dict)

    def file_retrieve_content(self, file_id: str) -> FileContent:
        res = self.get(f"/files/{file_id}/content")
        return FileContent(content=res.content, headers=dict(res.headers))

    # ------------------------------------------------------------------
    # Fine-tuning
    # ------------------------------------------------------------------

    def create_fine_tuning_job(self, req: CreateFineTuningJobRequest) -> FineTuningJob:
        res = self.post("/fine_tuning/jobs", req)
        return self._decode(res, FineTuningJob.from_dict)

    def list_fine_tuning_jobs(
        self, *, limit: int | None = None, after: str | None = None
    ) -> ListPage[FineTuningJob]:
        res = self.get("/fine_tuning/jobs", page_params(limit=limit, after=after))
        return self._page(res, FineTuningJob.from_dict)

    def list_fine_tuning_job_events(
        self, job_id: str, *, limit: int | None = None, after: str | None = None
    ) -> ListPage[FineTuningJobEvent]:
        res = self.get(
            f"/fine_tuning/jobs/{job_id}/events", page_params(limit=limit, after=after)
        )
        return self._page(res, FineTuningJobEvent.from_dict)

    def retrieve_fine_tuning_job(self, job_id: str) -> FineTuningJob:
        res = self.get(f"/fine_tuning/jobs/{job_id}")
        return self._decode(res, FineTuningJob.from_dict)

    def cancel_fine_tuning_job(self, job_id: str) -> FineTuningJob:
        res = self.post(f"/fine_tuning/jobs/{job_id}/cancel", {})
        return self._decode(res, FineTuningJob.from_dict)

    # ------------------------------------------------------------------
    # Assistants (beta)
    # ------------------------------------------------------------------

    def create_assistant(self, req: AssistantRequest) -> Assistant:
        return self._decode(self.post("/assistants", req), Assistant.from_dict)

    def retrieve_assistant(self, assistant_id: str) -> Assistant:
        res = self.get(f"/assistants/{assistant_id}")
        return self._decode(res, Assistant.from_dict)

    def modify_assistant(self, assistant_id: str, req: AssistantRequest) -> Assistant:
        res = self.post(f"/assistants/{assistant_id}", req)
        return self._decode(res, Assistant.from_dict)

    def delete_assistant(self, assistant_id: str) -> DeletionStatus:
        res = self.delete(f"/assistants/{assistant_id}")
        return self._decode(res, DeletionStatus.from_dict)

    def list_assistants(
        self,
        limit: int | None = None,
        order: str | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> ListPage[Assistant]:
        res = self.get("/assistants", page_params(limit, order, after, before))
        return self._page(res, Assistant.from_dict)

    def create_assistant_file(
        self, assistant_id: str, req: AssistantFileRequest
    ) -> AssistantFile:
        res = self.post(f"/assistants/{assistant_id}/files", req)
        return self._decode(res, AssistantFile.from_dict)

    def retrieve_assistant_file(self, assistant_id: str, file_id: str) -> AssistantFile:
        res = self.get(f"/assistants/{assistant_id}/files/{file_id}")
        return self._decode(res, AssistantFile.from_dict)

    def delete_assistant_file(self, assistant_id: str, file_id: str) -> DeletionStatus:
        res = self.delete(f"/assistants/{assistant_id}/files/{file_id}")
        return self._decode(res, DeletionStatus.from_dict)

    def list_assistant_files(
        self,
        assistant_id: str,
        limit: int | None = None,
        order: str | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> ListPage[AssistantFile]:
        res = self.get(
            f"/assistants/{assistant_id}/files", page_params(limit, order, after, before)
        )
        return self._page(res, AssistantFile.from_dict)

    # ------------------------------------------------------------------
    # Threads and messages (beta)
    # ------------------------------------------------------------------

    def create_thread(self, req: CreateThreadRequest) -> Thread:
        return self._decode(self.post("/threads", req), Thread.from_dict)

    def retrieve_thread(self, thread_id: str) -> Thread:
        return self._decode(self.get(f"/threads/{thread_id}"), Thread.from_dict)

    def modify_thread(self, thread_id: str, req: ModifyThreadRequest) -> Thread:
        res = self.post(f"/threads/{thread_id}", req)
        return self._decode(res, Thread.from_dict)

    def delete_thread(self, thread_id: str) -> DeletionStatus:
        res = self.delete(f"/threads/{thread_id}")
        return self._decode(res, DeletionStatus.from_dict)

    def create_message(self, thread_id: str, req: CreateMessageRequest) -> Message:
        res = self.post(f"/threads/{thread_id}/messages", req)
        return self._decode(res, Message.from_dict)

    def retrieve_message(self, thread_id: str, message_id: str) -> Message:
        res = self.get(f"/threads/{thread_id}/messages/{message_id}")
        return self._decode(res, Message.from_dict)

    def modify_message(
        self, thread_id: str, message_id: str, req: ModifyMessageRequest
    ) -> Message:
        res = self.post(f"/threads/{thread_id}/messages/{message_id}", req)
        return self._decode(res, Message.from_dict)

    def list_messages(
        self,
        thread_id: str,
        limit: int | None = None,
        order: str | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> ListPage[Message]:
        res = self.get(
            f"/threads/{thread_id}/messages", page_params(limit, order, after, before)
        )
        return self._page(res, Message.from_dict)

    def retrieve_message_file(
        self, thread_id: str, message_id: str, file_id: str
    ) -> MessageFile:
        res = self.get(f"/threads/{thread_id}/messages/{message_id}/files/{file_id}")
        return self._decode(res, MessageFile.from_dict)

    def list_message_files(
        self,
        thread_id: str,
        message_id: str,
        limit: int | None = None,
        order: str | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> ListPage[MessageFile]:
        res = self.get(
            f"/threads/{thread_id}/messages/{message_id}/files",
            page_params(limit, order, after, before),
        )
        return self._page(res, MessageFile.from_dict)

    # ------------------------------------------------------------------
    # Runs (beta)
    # ------------------------------------------------------------------

    def create_run(self, thread_id: str, req: CreateRunRequest) -> Run:
        res = self.post(f"/threads/{thread_id}/runs", req)
        return self._decode(res, Run.from_dict)

    def retrieve_run(self, thread_id: str, run_id: str) -> Run:
        res = self.get(f"/threads/{thread_id}/runs/{run_id}")
        return self._decode(res, Run.from_dict)

    def modify_run(self, thread_id: str, run_id: str, req: ModifyRunRequest) -> Run:
        res = self.post(f"/threads/{thread_id}/runs/{run_id}", req)
        return self._decode(res, Run.from_dict)

    def list_runs(
        self,
        thread_id: str,
        limit: int | None = None,
        order: str | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> ListPage[Run]:
        res = self.get(
            f"/threads/{thread_id}/runs", page_params(limit, order, after, before)
        )
        return self._page(res, Run.from_dict)

    def cancel_run(self, thread_id: str, run_id: str) -> Run:
        res = self.post(f"/threads/{thread_id}/runs/{run_id}/cancel", ModifyRunRequest())
        return self._decode(res, Run.from_dict)

    def create_thread_and_run(self, req: CreateThreadAndRunRequest) -> Run:
        return self._decode(self.post("/threads/runs", req), Run.from_dict)

    def retrieve_run_step(self, thread_id: str, run_id: str, step_id: str) -> RunStep:
        res = self.get(f"/threads/{thread_id}/runs/{run_id}/steps/{step_id}")
        return self._decode(res, RunStep.from_dict)

    def list_run_steps(
        self,
        thread_id: str,
        run_id: str,
        limit: int | None = None,
        order: str | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> ListPage[RunStep]:
        res = self.get(
            f"/threads/{thread_id}/runs/{run_id}/steps",
            page_params(limit, order, after, before),
        )
        return self._page(res, RunStep.from_dict)
