import json

import httpx


class FailingStream(httpx.AsyncByteStream):
    """Response stream that drops the connection mid-body."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset by peer")
        yield b""  # pragma: no cover


class AzureStubBuilder:
    """Factory for a deterministic Azure OpenAI endpoint backed by httpx.MockTransport."""

    def __init__(self):
        self.status_code = 200
        self.body = b"{}"
        self.error = None
        self.fail_read = False
        self.requests = []

    def set_json(self, payload, status_code=200):
        """Answer every call with a JSON body."""
        self.body = json.dumps(payload).encode()
        self.status_code = status_code
        return self

    def set_raw(self, body, status_code=200):
        """Answer every call with raw bytes."""
        self.body = body
        self.status_code = status_code
        return self

    def raise_on_send(self, error):
        """Fail every call at the transport level."""
        self.error = error
        return self

    def fail_on_read(self):
        """Send headers, then break while the body is read."""
        self.fail_read = True
        return self

    @property
    def call_count(self):
        return len(self.requests)

    def sent_json(self, call_num=0):
        """Decoded body of a recorded request."""
        return json.loads(self.requests[call_num].content)

    def _handle(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.fail_read:
            return httpx.Response(self.status_code, stream=FailingStream())
        return httpx.Response(
            self.status_code,
            content=self.body,
            headers={"Content-Type": "application/json"},
        )

    def build(self):
        """Build the httpx.AsyncClient."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))
