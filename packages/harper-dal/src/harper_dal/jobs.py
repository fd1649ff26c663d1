"""Job identifier extraction for bulk operations.

Bulk loads run asynchronously on the remote, which answers with a
human-readable status such as ``"Starting job with id 2fe2...9e69"``
instead of a structured field. The identifier is parsed out of that text.
"""

JOB_ID_NOT_FOUND = "not found"

_MARKER = "id"

# The marker is followed by one separator character before the identifier.
_OFFSET = len(_MARKER) + 1


class MessageJobIdExtractor:
    """Default `JobIdExtractor`.

    Takes everything from 3 characters past the first ``"id"`` to the end
    of the message. The first occurrence wins even inside another word
    (``"valid"``), and trailing text is kept. Both are known limitations
    of parsing free text.
    """

    __slots__ = ()

    def extract(self, message: str) -> str:
        i = message.find(_MARKER)
        if i == -1:
            return JOB_ID_NOT_FOUND
        return message[i + _OFFSET :]
