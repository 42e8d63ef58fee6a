from types import SimpleNamespace
import itertools


def function_call(name, arguments, call_id="call_1"):
    return SimpleNamespace(type="function_call", name=name, arguments=arguments, call_id=call_id)


def approval_request(request_id="mcpr_1", name="place_order"):
    return SimpleNamespace(type="mcp_approval_request", id=request_id, name=name, server_label="contosopizza")


def message(text, role="assistant"):
    return SimpleNamespace(
        type="message",
        role=role,
        content=[SimpleNamespace(type="output_text", text=text)],
    )


def response(*items, response_id="resp_1"):
    return SimpleNamespace(id=response_id, output=list(items))


class FakeResponses:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.replies.pop(0)


class FakeOpenAI:
    def __init__(self, replies=()):
        self.responses = FakeResponses(replies)
        self.conversations = SimpleNamespace(create=lambda: SimpleNamespace(id="conv_1"))
        self.uploaded = []
        ids = itertools.count(1)
        self.vector_stores = SimpleNamespace(
            create=lambda name: SimpleNamespace(id=f"vs_{next(ids)}", name=name),
            files=SimpleNamespace(upload_and_poll=self._upload),
        )

    def _upload(self, vector_store_id, file):
        self.uploaded.append((vector_store_id, file.name))


class FakeAgents:
    def __init__(self):
        self.created = []

    def create_version(self, agent_name, definition):
        self.created.append((agent_name, definition))
        return SimpleNamespace(name=agent_name, version="1")


class FakeProject:
    def __init__(self):
        self.agents = FakeAgents()
