from .assistant import (
    Assistant,
    AssistantFile,
    AssistantFileRequest,
    AssistantRequest,
    AssistantTool,
)
from .audio import (
    AudioSpeechRequest,
    AudioSpeechResponse,
    AudioTextResponse,
    AudioTranscriptionRequest,
    AudioTranslationRequest,
)
from .chat_completion import (
    ChatChunkChoice,
    ChatChunkDelta,
    ChatChunkResponse,
    ChatCompletionChoice,
    ChatCompletionMessage,
    ChatCompletionMessageForResponse,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ContentPart,
    Function,
    FunctionParameters,
    ImageUrl,
    JSONSchema,
    Tool,
    ToolCall,
    ToolCallFunction,
    named_tool_choice,
)
from .completion import CompletionChoice, CompletionRequest, CompletionResponse
from .edit import EditChoice, EditRequest, EditResponse
from .embedding import EmbeddingData, EmbeddingRequest, EmbeddingResponse
from .file import FileContent, FileListResponse, FileObject, FileUploadRequest
from .fine_tuning import (
    CreateFineTuningJobRequest,
    FineTuningJob,
    FineTuningJobError,
    FineTuningJobEvent,
    Hyperparameters,
)
from .image import (
    ImageData,
    ImageEditRequest,
    ImageGenerationRequest,
    ImageResponse,
    ImageVariationRequest,
)
from .message import (
    CreateMessageRequest,
    Message,
    MessageContent,
    MessageFile,
    MessageText,
    ModifyMessageRequest,
)
from .moderation import CreateModerationRequest, ModerationResponse, ModerationResult
from .run import (
    CreateRunRequest,
    CreateThreadAndRunRequest,
    ModifyRunRequest,
    Run,
    RunStep,
)
from .shared import DeletionStatus, ListPage
from .thread import CreateThreadRequest, ModifyThreadRequest, Thread, ThreadMessage

__all__ = [
    "Assistant",
    "AssistantFile",
    "AssistantFileRequest",
    "AssistantRequest",
    "AssistantTool",
    "AudioSpeechRequest",
    "AudioSpeechResponse",
    "AudioTextResponse",
    "AudioTranscriptionRequest",
    "AudioTranslationRequest",
    "ChatChunkChoice",
    "ChatChunkDelta",
    "ChatChunkResponse",
    "ChatCompletionChoice",
    "ChatCompletionMessage",
    "ChatCompletionMessageForResponse",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ContentPart",
    "Function",
    "FunctionParameters",
    "ImageUrl",
    "JSONSchema",
    "Tool",
    "ToolCall",
    "ToolCallFunction",
    "named_tool_choice",
    "CompletionChoice",
    "CompletionRequest",
    "CompletionResponse",
    "EditChoice",
    "EditRequest",
    "EditResponse",
    "EmbeddingData",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "FileContent",
    "FileListResponse",
    "FileObject",
    "FileUploadRequest",
    "CreateFineTuningJobRequest",
    "FineTuningJob",
    "FineTuningJobError",
    "FineTuningJobEvent",
    "Hyperparameters",
    "ImageData",
    "ImageEditRequest",
    "ImageGenerationRequest",
    "ImageResponse",
    "ImageVariationRequest",
    "CreateMessageRequest",
    "Message",
    "MessageContent",
    "MessageFile",
    "MessageText",
    "ModifyMessageRequest",
    "CreateModerationRequest",
    "ModerationResponse",
    "ModerationResult",
    "CreateRunRequest",
    "CreateThreadAndRunRequest",
    "ModifyRunRequest",
    "Run",
    "RunStep",
    "DeletionStatus",
    "ListPage",
    "CreateThreadRequest",
    "ModifyThreadRequest",
    "Thread",
    "ThreadMessage",
]
