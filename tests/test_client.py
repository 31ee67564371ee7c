"""Unit tests for the HTTP client."""

from __future__ import annotations

import json
from collections.abc import Callable
from unittest.mock import patch

import httpx
import pytest

from leap_connect import (
    APIConnectionError,
    APIError,
    APIStatusError,
    ChatCompletionMessage,
    ChatCompletionRequest,
    Client,
    ClientConfig,
    ResponseDecodeError,
)
from leap_connect.client import page_params
from leap_connect.common import MISTRAL, TEXT_EMBEDDING_3_SMALL
from leap_connect.config import DEFAULT_API_ENDPOINT
from leap_connect.types import (
    Assistant,
    AssistantFile,
    AssistantFileRequest,
    AssistantRequest,
    AudioSpeechRequest,
    AudioTranscriptionRequest,
    AudioTranslationRequest,
    CompletionRequest,
    CompletionResponse,
    CreateFineTuningJobRequest,
    CreateMessageRequest,
    CreateModerationRequest,
    CreateRunRequest,
    CreateThreadAndRunRequest,
    CreateThreadRequest,
    DeletionStatus,
    EditRequest,
    EditResponse,
    EmbeddingRequest,
    FileListResponse,
    FileObject,
    FileUploadRequest,
    FineTuningJob,
    ImageEditRequest,
    ImageGenerationRequest,
    ImageResponse,
    ImageVariationRequest,
    ListPage,
    Message,
    MessageFile,
    ModerationResponse,
    ModifyMessageRequest,
    ModifyRunRequest,
    ModifyThreadRequest,
    Run,
    RunStep,
    Thread,
    ThreadMessage,
)

REQUEST = ChatCompletionRequest(
    model=MISTRAL,
    messages=[ChatCompletionMessage.user("What is bitcoin?")],
)

CHAT_BODY = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": MISTRAL,
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "A cryptocurrency."},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 5, "completion_tokens": 3, "total_tokens": 8},
}


def _client(
    handler: Callable[[httpx.Request], httpx.Response], **kwargs
) -> Client:
    transport = httpx.MockTransport(handler)
    return Client(
        "sk-test",
        api_endpoint="http://api.test/v1",
        http_client=httpx.Client(transport=transport),
        **kwargs,
    )


class Recorder:
    """Handler that records requests and replays a fixed response."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


# ---------------------------------------------------------------------------
# Construction & configuration
# ---------------------------------------------------------------------------


class TestClientInit:
    def test_default_endpoint(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            with Client("sk-test") as client:
                assert client.api_endpoint == DEFAULT_API_ENDPOINT

    def test_env_endpoint(self) -> None:
        with patch.dict("os.environ", {"API_URL_V1": "http://env:9000/v1/"}):
            with Client("sk-test") as client:
                assert client.api_endpoint == "http://env:9000/v1"

    def test_explicit_endpoint_overrides_env(self) -> None:
        with patch.dict("os.environ", {"API_URL_V1": "http://env/v1"}):
            with Client("sk-test", api_endpoint="http://explicit/v1") as client:
                assert client.api_endpoint == "http://explicit/v1"

    def test_with_proxy(self) -> None:
        with Client("sk-test", proxy="http://proxy.local:8080") as client:
            assert client.proxy == "http://proxy.local:8080"

    def test_from_env(self) -> None:
        env = {
            "TUPLELEAP_AI_API_KEY": "sk-env",
            "API_URL_V1": "http://env/v1",
            "TUPLELEAP_AI_ORGANIZATION": "org-1",
        }
        with patch.dict("os.environ", env, clear=True):
            with Client.from_env() as client:
                assert client.api_key == "sk-env"
                assert client.api_endpoint == "http://env/v1"
                assert client.organization == "org-1"

    def test_from_config(self) -> None:
        config = ClientConfig(api_key="sk-cfg", api_endpoint="http://cfg/v1", timeout=5.0)
        with Client.from_config(config) as client:
            assert client.api_key == "sk-cfg"
            assert client.timeout == 5.0


class TestBuildHeaders:
    def test_auth_and_content_type(self) -> None:
        client = Client("sk-test", api_endpoint="http://x")
        headers = client.build_headers("/chat/completions")
        assert headers["Authorization"] == "Bearer sk-test"
        assert headers["Content-Type"] == "application/json"
        assert "tupleleapai-Beta" not in headers
        assert "tupleleapai-organization" not in headers
        client.close()

    def test_organization_header(self) -> None:
        client = Client("sk-test", api_endpoint="http://x", organization="org-42")
        assert client.build_headers("/files")["tupleleapai-organization"] == "org-42"
        client.close()

    @pytest.mark.parametrize("path", ["/assistants", "/threads/t1/runs", "/threads/runs"])
    def test_beta_header_on_assistant_paths(self, path: str) -> None:
        client = Client("sk-test", api_endpoint="http://x")
        assert client.build_headers(path)["tupleleapai-Beta"] == "assistants=v1"
        client.close()

    def test_stream_accept_header(self) -> None:
        client = Client("sk-test", api_endpoint="http://x")
        headers = client.build_headers("/chat/completions", stream=True)
        assert headers["Accept"] == "text/event-stream"
        client.close()

    def test_multipart_omits_content_type(self) -> None:
        client = Client("sk-test", api_endpoint="http://x")
        assert "Content-Type" not in client.build_headers("/files", json_body=False)
        client.close()


class TestPageParams:
    def test_only_set_values(self) -> None:
        assert page_params(limit=10, after="a1") == {"limit": 10, "after": "a1"}

    def test_empty(self) -> None:
        assert page_params() == {}


# ---------------------------------------------------------------------------
# Chat completion
# ---------------------------------------------------------------------------


class TestChatCompletion:
    def test_successful_request(self) -> None:
        recorder = Recorder(httpx.Response(200, json=CHAT_BODY))
        with _client(recorder) as client:
            result = client.chat_completion(REQUEST)
        assert result.text == "A cryptocurrency."
        assert result.choices[0].finish_reason == "stop"
        assert result.usage is not None
        assert result.usage.total_tokens == 8

    def test_wire_request(self) -> None:
        recorder = Recorder(httpx.Response(200, json=CHAT_BODY))
        with _client(recorder) as client:
            client.chat_completion(REQUEST)
        request = recorder.last
        assert request.method == "POST"
        assert str(request.url) == "http://api.test/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer sk-test"
        assert recorder.last_json() == {
            "model": MISTRAL,
            "messages": [{"role": "user", "content": "What is bitcoin?"}],
        }

    def test_response_headers_attached(self) -> None:
        response = httpx.Response(200, json=CHAT_BODY, headers={"x-request-id": "req-9"})
        with _client(Recorder(response)) as client:
            result = client.chat_completion(REQUEST)
        assert result.headers is not None
        assert result.headers["x-request-id"] == "req-9"

    def test_organization_sent(self) -> None:
        recorder = Recorder(httpx.Response(200, json=CHAT_BODY))
        with _client(recorder, organization="org-7") as client:
            client.chat_completion(REQUEST)
        assert recorder.last.headers["tupleleapai-organization"] == "org-7"


# ---------------------------------------------------------------------------
# Error surfacing
# ---------------------------------------------------------------------------


class TestErrors:
    def test_status_error(self) -> None:
        body = {"error": {"message": "invalid api key", "type": "auth"}}
        with _client(Recorder(httpx.Response(401, json=body))) as client:
            with pytest.raises(APIStatusError, match="invalid api key") as exc_info:
                client.chat_completion(REQUEST)
        assert exc_info.value.status_code == 401
        assert "invalid api key" in (exc_info.value.body or "")
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    def test_server_error_not_retried(self) -> None:
        recorder = Recorder(httpx.Response(503, text="overloaded"))
        with _client(recorder) as client:
            with pytest.raises(APIStatusError) as exc_info:
                client.chat_completion(REQUEST)
        assert exc_info.value.status_code == 503
        assert len(recorder.requests) == 1

    def test_connect_error(self) -> None:
        def handler(_: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused")

        with _client(handler) as client:
            with pytest.raises(APIConnectionError, match="connection refused"):
                client.chat_completion(REQUEST)

    def test_timeout(self) -> None:
        def handler(_: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out")

        with _client(handler) as client:
            with pytest.raises(APIConnectionError) as exc_info:
                client.chat_completion(REQUEST)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    def test_malformed_json(self) -> None:
        response = httpx.Response(
            200, content=b"not json", headers={"content-type": "application/json"}
        )
        with _client(Recorder(response)) as client:
            with pytest.raises(ResponseDecodeError, match="Malformed JSON"):
                client.chat_completion(REQUEST)

    def test_unexpected_structure(self) -> None:
        with _client(Recorder(httpx.Response(200, json={"unexpected": True}))) as client:
            with pytest.raises(ResponseDecodeError, match="Unexpected response structure"):
                client.chat_completion(REQUEST)


# ---------------------------------------------------------------------------
# Other endpoints
# ---------------------------------------------------------------------------


class TestEmbedding:
    def test_embedding(self) -> None:
        body = {
            "object": "list",
            "data": [
                {"object": "embedding", "embedding": [0.3, 0.4], "index": 1},
                {"object": "embedding", "embedding": [0.1, 0.2], "index": 0},
            ],
            "model": TEXT_EMBEDDING_3_SMALL,
            "usage": {"prompt_tokens": 2, "total_tokens": 2},
        }
        recorder = Recorder(httpx.Response(200, json=body))
        req = EmbeddingRequest(
            model=TEXT_EMBEDDING_3_SMALL, input=["story", "time"], dimensions=2
        )
        with _client(recorder) as client:
            result = client.embedding(req)
        assert recorder.last.url.path == "/v1/embeddings"
        assert recorder.last_json()["dimensions"] == 2
        assert result.vectors() == [[0.1, 0.2], [0.3, 0.4]]


class TestImages:
    BODY = {"created": 1, "data": [{"url": "https://img.test/1.png"}]}

    def test_edit_is_multipart_with_mask(self, tmp_path) -> None:
        image = tmp_path / "cat.png"
        mask = tmp_path / "mask.png"
        image.write_bytes(b"PNG-image")
        mask.write_bytes(b"PNG-mask")
        recorder = Recorder(httpx.Response(200, json=self.BODY))
        req = ImageEditRequest(image=image, prompt="add a hat", mask=mask, n=2)
        with _client(recorder) as client:
            result = client.image_edit(req)
        request = recorder.last
        assert request.url.path == "/v1/images/edits"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="image"; filename="cat.png"' in request.content
        assert b'name="mask"; filename="mask.png"' in request.content
        assert b"PNG-mask" in request.content
        assert b'name="prompt"' in request.content
        assert b"add a hat" in request.content
        assert result.data[0].url == "https://img.test/1.png"

    def test_edit_without_mask(self, tmp_path) -> None:
        image = tmp_path / "cat.png"
        image.write_bytes(b"PNG-image")
        recorder = Recorder(httpx.Response(200, json=self.BODY))
        with _client(recorder) as client:
            client.image_edit(ImageEditRequest(image=image, prompt="p"))
        assert b'name="mask"' not in recorder.last.content

    def test_variation_is_multipart(self, tmp_path) -> None:
        image = tmp_path / "cat.png"
        image.write_bytes(b"PNG-image")
        recorder = Recorder(httpx.Response(200, json=self.BODY))
        with _client(recorder) as client:
            result = client.image_variation(ImageVariationRequest(image=image, size="256x256"))
        request = recorder.last
        assert request.url.path == "/v1/images/variations"
        assert b'name="image"; filename="cat.png"' in request.content
        assert b"256x256" in request.content
        assert isinstance(result, ImageResponse)

    def test_missing_upload_file(self, tmp_path) -> None:
        recorder = Recorder(httpx.Response(200, json=self.BODY))
        req = ImageEditRequest(image=tmp_path / "missing.png", prompt="p")
        with _client(recorder) as client:
            with pytest.raises(APIError, match="Could not open upload") as exc_info:
                client.image_edit(req)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert recorder.requests == []


class TestFiles:
    def test_upload_is_multipart(self, tmp_path) -> None:
        data_file = tmp_path / "train.jsonl"
        data_file.write_text('{"prompt": "a"}\n', encoding="utf-8")
        body = {
            "id": "file-1",
            "object": "file",
            "bytes": 16,
            "created_at": 1,
            "filename": "train.jsonl",
            "purpose": "fine-tune",
        }
        recorder = Recorder(httpx.Response(200, json=body))
        with _client(recorder) as client:
            result = client.file_upload(FileUploadRequest(file=data_file, purpose="fine-tune"))
        request = recorder.last
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="purpose"' in request.content
        assert b"fine-tune" in request.content
        assert b'filename="train.jsonl"' in request.content
        assert result.id == "file-1"
        assert result.bytes == 16

    def test_delete(self) -> None:
        body = {"id": "file-1", "object": "file", "deleted": True}
        recorder = Recorder(httpx.Response(200, json=body))
        with _client(recorder) as client:
            result = client.file_delete("file-1")
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/v1/files/file-1"
        assert result.deleted is True

    def test_retrieve_content_is_raw(self) -> None:
        recorder = Recorder(httpx.Response(200, content=b'{"line": 1}\n{"line": 2}\n'))
        with _client(recorder) as client:
            result = client.file_retrieve_content("file-1")
        assert recorder.last.url.path == "/v1/files/file-1/content"
        assert result.text.splitlines() == ['{"line": 1}', '{"line": 2}']


class TestAudio:
    def test_speech_written_to_output(self, tmp_path) -> None:
        recorder = Recorder(httpx.Response(200, content=b"ID3-audio-bytes"))
        output = tmp_path / "nested" / "speech.mp3"
        req = AudioSpeechRequest(model="tts-1", input="hello", voice="alloy", output=output)
        with _client(recorder) as client:
            result = client.audio_speech(req)
        assert result.result is True
        assert output.read_bytes() == b"ID3-audio-bytes"
        assert "output" not in recorder.last_json()

    def test_transcription_plain_text(self, tmp_path) -> None:
        audio = tmp_path / "clip.mp3"
        audio.write_bytes(b"fake")
        recorder = Recorder(httpx.Response(200, text="hello world"))
        req = AudioTranscriptionRequest(file=audio, model="whisper-1", response_format="text")
        with _client(recorder) as client:
            result = client.audio_transcription(req)
        assert result.text == "hello world"
        assert b"whisper-1" in recorder.last.content

    def test_transcription_json(self, tmp_path) -> None:
        audio = tmp_path / "clip.mp3"
        audio.write_bytes(b"fake")
        recorder = Recorder(httpx.Response(200, json={"text": "bonjour"}))
        with _client(recorder) as client:
            result = client.audio_transcription(
                AudioTranscriptionRequest(file=audio, model="whisper-1")
            )
        assert result.text == "bonjour"

    def test_translation(self, tmp_path) -> None:
        audio = tmp_path / "clip.mp3"
        audio.write_bytes(b"fake")
        recorder = Recorder(httpx.Response(200, json={"text": "good morning"}))
        with _client(recorder) as client:
            result = client.audio_translation(
                AudioTranslationRequest(file=audio, model="whisper-1")
            )
        assert recorder.last.url.path == "/v1/audio/translations"
        assert b'filename="clip.mp3"' in recorder.last.content
        assert result.text == "good morning"


class TestFineTuning:
    def test_list_events(self) -> None:
        body = {
            "object": "list",
            "data": [
                {
                    "id": "ev-1",
                    "object": "fine_tuning.job.event",
                    "created_at": 1,
                    "level": "info",
                    "message": "Job started",
                }
            ],
            "has_more": False,
        }
        recorder = Recorder(httpx.Response(200, json=body))
        with _client(recorder) as client:
            page = client.list_fine_tuning_job_events("ftjob-1", limit=5)
        assert recorder.last.url.path == "/v1/fine_tuning/jobs/ftjob-1/events"
        assert recorder.last.url.params["limit"] == "5"
        assert [event.message for event in page] == ["Job started"]

    def test_cancel(self) -> None:
        body = {
            "id": "ftjob-1",
            "model": "m",
            "status": "cancelled",
            "created_at": 1,
            "training_file": "file-1",
        }
        recorder = Recorder(httpx.Response(200, json=body))
        with _client(recorder) as client:
            job = client.cancel_fine_tuning_job("ftjob-1")
        assert recorder.last.url.path == "/v1/fine_tuning/jobs/ftjob-1/cancel"
        assert job.status == "cancelled"


class TestAssistants:
    ASSISTANT = {
        "id": "asst-1",
        "object": "assistant",
        "created_at": 1,
        "model": MISTRAL,
        "name": "Helper",
        "tools": [{"type": "code_interpreter"}],
    }

    def test_create_sends_beta_header(self) -> None:
        recorder = Recorder(httpx.Response(200, json=self.ASSISTANT))
        with _client(recorder) as client:
            result = client.create_assistant(AssistantRequest(model=MISTRAL, name="Helper"))
        assert recorder.last.headers["tupleleapai-beta"] == "assistants=v1"
        assert recorder.last_json() == {"model": MISTRAL, "name": "Helper"}
        assert result.tools is not None
        assert result.tools[0].type == "code_interpreter"

    def test_list_pagination(self) -> None:
        body = {
            "object": "list",
            "data": [self.ASSISTANT],
            "first_id": "asst-1",
            "last_id": "asst-1",
            "has_more": True,
        }
        recorder = Recorder(httpx.Response(200, json=body))
        with _client(recorder) as client:
            page = client.list_assistants(limit=1, order="desc")
        params = recorder.last.url.params
        assert params["limit"] == "1"
        assert params["order"] == "desc"
        assert "after" not in params
        assert page.has_more is True
        assert len(page) == 1
        assert page.headers is not None


class TestThreadsAndRuns:
    RUN = {
        "id": "run-1",
        "object": "thread.run",
        "created_at": 1,
        "thread_id": "thread-1",
        "assistant_id": "asst-1",
        "status": "queued",
    }

    def test_create_thread(self) -> None:
        body = {"id": "thread-1", "object": "thread", "created_at": 1, "metadata": {}}
        recorder = Recorder(httpx.Response(200, json=body))
        req = CreateThreadRequest(messages=[ThreadMessage(content="hi")])
        with _client(recorder) as client:
            thread = client.create_thread(req)
        assert recorder.last_json() == {"messages": [{"content": "hi", "role": "user"}]}
        assert thread.id == "thread-1"

    def test_create_message(self) -> None:
        body = {
            "id": "msg-1",
            "object": "thread.message",
            "created_at": 1,
            "thread_id": "thread-1",
            "role": "user",
            "content": [{"type": "text", "text": {"value": "hi", "annotations": []}}],
        }
        recorder = Recorder(httpx.Response(200, json=body))
        with _client(recorder) as client:
            message = client.create_message("thread-1", CreateMessageRequest(content="hi"))
        assert recorder.last.url.path == "/v1/threads/thread-1/messages"
        assert message.text == "hi"

    def test_cancel_run_posts_empty_body(self) -> None:
        recorder = Recorder(httpx.Response(200, json={**self.RUN, "status": "cancelling"}))
        with _client(recorder) as client:
            run = client.cancel_run("thread-1", "run-1")
        assert recorder.last.url.path == "/v1/threads/thread-1/runs/run-1/cancel"
        assert recorder.last_json() == {}
        assert run.status == "cancelling"
        assert run.is_terminal is False

    def test_create_thread_and_run(self) -> None:
        recorder = Recorder(httpx.Response(200, json=self.RUN))
        req = CreateThreadAndRunRequest(
            assistant_id="asst-1",
            thread=CreateThreadRequest(messages=[ThreadMessage(content="go")]),
        )
        with _client(recorder) as client:
            run = client.create_thread_and_run(req)
        assert recorder.last.url.path == "/v1/threads/runs"
        assert recorder.last_json()["thread"]["messages"][0]["content"] == "go"
        assert run.thread_id == "thread-1"

    def test_list_run_steps(self) -> None:
        body = {
            "object": "list",
            "data": [
                {
                    "id": "step-1",
                    "object": "thread.run.step",
                    "created_at": 1,
                    "run_id": "run-1",
                    "thread_id": "thread-1",
                    "assistant_id": "asst-1",
                    "type": "message_creation",
                    "status": "completed",
                    "step_details": {"type": "message_creation"},
                }
            ],
            "has_more": False,
        }
        recorder = Recorder(httpx.Response(200, json=body))
        with _client(recorder) as client:
            page = client.list_run_steps("thread-1", "run-1", before="step-9")
        assert recorder.last.url.params["before"] == "step-9"
        assert page.data[0].status == "completed"


# ---------------------------------------------------------------------------
# Endpoint routing table
# ---------------------------------------------------------------------------

COMPLETION_BODY = {"id": "cmpl-1", "choices": [{"text": "x", "index": 0}]}
EDIT_BODY = {"object": "edit", "created": 1, "choices": [{"text": "x", "index": 0}]}
MODERATION_BODY = {"id": "modr-1", "model": "m", "results": [{"flagged": False}]}
IMAGE_BODY = {"created": 1, "data": [{"url": "https://img.test/1.png"}]}
FILE_BODY = {
    "id": "file-1",
    "bytes": 1,
    "created_at": 1,
    "filename": "f.jsonl",
    "purpose": "fine-tune",
}
JOB_BODY = {
    "id": "ftjob-1",
    "model": "m",
    "status": "queued",
    "created_at": 1,
    "training_file": "file-1",
}
ASSISTANT_BODY = {"id": "asst-1", "created_at": 1, "model": MISTRAL}
ASSISTANT_FILE_BODY = {"id": "file-1", "created_at": 1, "assistant_id": "asst-1"}
THREAD_BODY = {"id": "thread-1", "created_at": 1}
MESSAGE_BODY = {
    "id": "msg-1",
    "created_at": 1,
    "thread_id": "thread-1",
    "role": "user",
    "content": [],
}
MESSAGE_FILE_BODY = {"id": "file-1", "created_at": 1, "message_id": "msg-1"}
RUN_BODY = {
    "id": "run-1",
    "created_at": 1,
    "thread_id": "thread-1",
    "assistant_id": "asst-1",
    "status": "queued",
}
RUN_STEP_BODY = {
    "id": "step-1",
    "created_at": 1,
    "run_id": "run-1",
    "thread_id": "thread-1",
    "assistant_id": "asst-1",
    "type": "message_creation",
    "status": "completed",
}
DELETED_BODY = {"id": "x-1", "object": "deleted", "deleted": True}


def _page(item: dict) -> dict:
    return {"object": "list", "data": [item], "has_more": False}


ENDPOINTS = [
    pytest.param(
        lambda c: c.completion(CompletionRequest(model="m", prompt="hi")),
        "POST", "/v1/completions", COMPLETION_BODY, CompletionResponse,
        id="completion",
    ),
    pytest.param(
        lambda c: c.edit(EditRequest(model="m", instruction="fix", input="teh")),
        "POST", "/v1/edits", EDIT_BODY, EditResponse,
        id="edit",
    ),
    pytest.param(
        lambda c: c.create_moderation(CreateModerationRequest(input="hi")),
        "POST", "/v1/moderations", MODERATION_BODY, ModerationResponse,
        id="create_moderation",
    ),
    pytest.param(
        lambda c: c.image_generation(ImageGenerationRequest(prompt="a cat")),
        "POST", "/v1/images/generations", IMAGE_BODY, ImageResponse,
        id="image_generation",
    ),
    pytest.param(
        lambda c: c.file_list(),
        "GET", "/v1/files", _page(FILE_BODY), FileListResponse,
        id="file_list",
    ),
    pytest.param(
        lambda c: c.file_retrieve("file-1"),
        "GET", "/v1/files/file-1", FILE_BODY, FileObject,
        id="file_retrieve",
    ),
    pytest.param(
        lambda c: c.create_fine_tuning_job(
            CreateFineTuningJobRequest(model="m", training_file="file-1")
        ),
        "POST", "/v1/fine_tuning/jobs", JOB_BODY, FineTuningJob,
        id="create_fine_tuning_job",
    ),
    pytest.param(
        lambda c: c.list_fine_tuning_jobs(limit=2),
        "GET", "/v1/fine_tuning/jobs", _page(JOB_BODY), ListPage,
        id="list_fine_tuning_jobs",
    ),
    pytest.param(
        lambda c: c.retrieve_fine_tuning_job("ftjob-1"),
        "GET", "/v1/fine_tuning/jobs/ftjob-1", JOB_BODY, FineTuningJob,
        id="retrieve_fine_tuning_job",
    ),
    pytest.param(
        lambda c: c.retrieve_assistant("asst-1"),
        "GET", "/v1/assistants/asst-1", ASSISTANT_BODY, Assistant,
        id="retrieve_assistant",
    ),
    pytest.param(
        lambda c: c.modify_assistant("asst-1", AssistantRequest(model=MISTRAL, name="n")),
        "POST", "/v1/assistants/asst-1", ASSISTANT_BODY, Assistant,
        id="modify_assistant",
    ),
    pytest.param(
        lambda c: c.delete_assistant("asst-1"),
        "DELETE", "/v1/assistants/asst-1", DELETED_BODY, DeletionStatus,
        id="delete_assistant",
    ),
    pytest.param(
        lambda c: c.create_assistant_file("asst-1", AssistantFileRequest(file_id="file-1")),
        "POST", "/v1/assistants/asst-1/files", ASSISTANT_FILE_BODY, AssistantFile,
        id="create_assistant_file",
    ),
    pytest.param(
        lambda c: c.retrieve_assistant_file("asst-1", "file-1"),
        "GET", "/v1/assistants/asst-1/files/file-1", ASSISTANT_FILE_BODY, AssistantFile,
        id="retrieve_assistant_file",
    ),
    pytest.param(
        lambda c: c.delete_assistant_file("asst-1", "file-1"),
        "DELETE", "/v1/assistants/asst-1/files/file-1", DELETED_BODY, DeletionStatus,
        id="delete_assistant_file",
    ),
    pytest.param(
        lambda c: c.list_assistant_files("asst-1"),
        "GET", "/v1/assistants/asst-1/files", _page(ASSISTANT_FILE_BODY), ListPage,
        id="list_assistant_files",
    ),
    pytest.param(
        lambda c: c.retrieve_thread("thread-1"),
        "GET", "/v1/threads/thread-1", THREAD_BODY, Thread,
        id="retrieve_thread",
    ),
    pytest.param(
        lambda c: c.modify_thread("thread-1", ModifyThreadRequest(metadata={"k": "v"})),
        "POST", "/v1/threads/thread-1", THREAD_BODY, Thread,
        id="modify_thread",
    ),
    pytest.param(
        lambda c: c.delete_thread("thread-1"),
        "DELETE", "/v1/threads/thread-1", DELETED_BODY, DeletionStatus,
        id="delete_thread",
    ),
    pytest.param(
        lambda c: c.retrieve_message("thread-1", "msg-1"),
        "GET", "/v1/threads/thread-1/messages/msg-1", MESSAGE_BODY, Message,
        id="retrieve_message",
    ),
    pytest.param(
        lambda c: c.modify_message(
            "thread-1", "msg-1", ModifyMessageRequest(metadata={"k": "v"})
        ),
        "POST", "/v1/threads/thread-1/messages/msg-1", MESSAGE_BODY, Message,
        id="modify_message",
    ),
    pytest.param(
        lambda c: c.list_messages("thread-1", limit=10),
        "GET", "/v1/threads/thread-1/messages", _page(MESSAGE_BODY), ListPage,
        id="list_messages",
    ),
    pytest.param(
        lambda c: c.retrieve_message_file("thread-1", "msg-1", "file-1"),
        "GET", "/v1/threads/thread-1/messages/msg-1/files/file-1",
        MESSAGE_FILE_BODY, MessageFile,
        id="retrieve_message_file",
    ),
    pytest.param(
        lambda c: c.list_message_files("thread-1", "msg-1"),
        "GET", "/v1/threads/thread-1/messages/msg-1/files",
        _page(MESSAGE_FILE_BODY), ListPage,
        id="list_message_files",
    ),
    pytest.param(
        lambda c: c.create_run("thread-1", CreateRunRequest(assistant_id="asst-1")),
        "POST", "/v1/threads/thread-1/runs", RUN_BODY, Run,
        id="create_run",
    ),
    pytest.param(
        lambda c: c.retrieve_run("thread-1", "run-1"),
        "GET", "/v1/threads/thread-1/runs/run-1", RUN_BODY, Run,
        id="retrieve_run",
    ),
    pytest.param(
        lambda c: c.modify_run("thread-1", "run-1", ModifyRunRequest(metadata={"k": "v"})),
        "POST", "/v1/threads/thread-1/runs/run-1", RUN_BODY, Run,
        id="modify_run",
    ),
    pytest.param(
        lambda c: c.list_runs("thread-1", order="asc"),
        "GET", "/v1/threads/thread-1/runs", _page(RUN_BODY), ListPage,
        id="list_runs",
    ),
    pytest.param(
        lambda c: c.retrieve_run_step("thread-1", "run-1", "step-1"),
        "GET", "/v1/threads/thread-1/runs/run-1/steps/step-1", RUN_STEP_BODY, RunStep,
        id="retrieve_run_step",
    ),
]


class TestEndpointRouting:
    @pytest.mark.parametrize(("call", "method", "path", "body", "result_type"), ENDPOINTS)
    def test_request_and_decode(self, call, method, path, body, result_type) -> None:
        recorder = Recorder(httpx.Response(200, json=body, headers={"x-request-id": "r1"}))
        with _client(recorder) as client:
            result = call(client)

        request = recorder.last
        assert request.method == method
        assert request.url.path == path
        assert isinstance(result, result_type)
        assert result.headers is not None
        assert result.headers["x-request-id"] == "r1"

        is_beta_path = path.startswith(("/v1/assistants", "/v1/threads"))
        assert ("tupleleapai-beta" in request.headers) is is_beta_path
        if method == "POST":
            assert request.headers["content-type"] == "application/json"

    def test_list_items_are_decoded(self) -> None:
        recorder = Recorder(httpx.Response(200, json=_page(MESSAGE_BODY)))
        with _client(recorder) as client:
            page = client.list_messages("thread-1", after="msg-0")
        assert recorder.last.url.params["after"] == "msg-0"
        assert isinstance(page.data[0], Message)
        assert page.data[0].id == "msg-1"
