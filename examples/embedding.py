"""Embed a short string with shortened (10-dimension) vectors."""

from leap_connect import Client
from leap_connect.common import TEXT_EMBEDDING_3_SMALL
from leap_connect.types import EmbeddingRequest


def main() -> None:
    req = EmbeddingRequest(model=TEXT_EMBEDDING_3_SMALL, input="story time", dimensions=10)
    with Client.from_env() as client:
        result = client.embedding(req)
    print(result.vectors())


if __name__ == "__main__":
    main()
