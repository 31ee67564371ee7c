"""Ask a question about an image using a multi-part user message."""

from leap_connect import ChatCompletionMessage, ChatCompletionRequest, Client, ContentPart
from leap_connect.common import MISTRAL

IMAGE_URL = "https://upload.wikimedia.org/wikipedia/commons/5/50/Bitcoin.png"


def main() -> None:
    req = ChatCompletionRequest(
        model=MISTRAL,
        messages=[
            ChatCompletionMessage.user(
                [
                    ContentPart.from_text("What's in this image?"),
                    ContentPart.from_image(IMAGE_URL),
                ]
            )
        ],
    )
    with Client.from_env() as client:
        print(client.chat_completion(req).text)


if __name__ == "__main__":
    main()
