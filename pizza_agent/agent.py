from contextlib import contextmanager
import json

from azure.identity import DefaultAzureCredential
from azure.ai.projects import AIProjectClient
from azure.ai.projects.models import PromptAgentDefinition
from openai.types.responses.response_input_param import FunctionCallOutput, McpApprovalResponse

from pizza_agent.logger import logger
from pizza_agent.tools import FUNCTIONS, build_tools

NO_REPLY = "no reply"


def call_function(name, arguments, functions=FUNCTIONS):
    func = functions.get(name)
    if func is None:
        logger.warning("Agent called unknown function %s", name)
        return {"error": f"Unknown function: {name}"}
    try:
        return {"result": func(**json.loads(arguments or "{}"))}
    except (TypeError, ValueError) as e:
        logger.warning("Function %s rejected arguments %s: %s", name, arguments, e)
        return {"error": str(e)}


def handle_tool_calls(response, functions=FUNCTIONS):
    """Handle function calls and MCP approvals."""
    inputs = []
    for item in response.output:
        if item.type == "function_call":
            output = call_function(item.name, item.arguments, functions)
            inputs.append(FunctionCallOutput(type="function_call_output", call_id=item.call_id,
            output=json.dumps(output)))
        elif item.type == "mcp_approval_request":
            logger.info("Approving MCP call %s on %s", item.name, item.server_label)
            inputs.append(McpApprovalResponse(type="mcp_approval_response", approve=True,
            approval_request_id=item.id))
    return inputs


def extract_reply(response):
    """Text of the last assistant message in the response, or NO_REPLY."""
    reply = None
    for item in response.output:
        if item.type == "message" and getattr(item, "role", None) == "assistant":
            reply = "".join(part.text for part in item.content if part.type == "output_text")
    return reply or NO_REPLY


@contextmanager
def connect(settings):
    """Project and OpenAI clients for the lifetime of one session."""
    with (
        DefaultAzureCredential() as credential,
        AIProjectClient(endpoint=settings.project_endpoint, credential=credential) as project_client,
        project_client.get_openai_client() as openai_client,
    ):
        yield project_client, openai_client


class PizzaAgent:
    """A Foundry prompt agent plus one conversation with it."""

    def __init__(self, project_client, openai_client, settings, functions=FUNCTIONS):
        self.project_client = project_client
        self.openai_client = openai_client
        self.settings = settings
        self.functions = functions
        self.agent = None
        self.conversation_id = None

    def create(self):
        self.agent = self.project_client.agents.create_version(
            agent_name=self.settings.agent_name,
            definition=PromptAgentDefinition(
                model=self.settings.model_deployment,
                instructions=self.settings.instructions,
                tools=build_tools(self.settings, self.openai_client),
            ),
        )
        logger.info("Agent ready: %s v%s", self.agent.name, self.agent.version)
        return self.agent

    def start_conversation(self):
        conversation = self.openai_client.conversations.create()
        self.conversation_id = conversation.id
        logger.info("Conversation created: %s", conversation.id)
        return conversation.id

    def _agent_reference(self):
        return {"agent": {"name": self.agent.name, "type": "agent_reference"}}

    def send(self, text):
        """Post one user message and return the agent's reply once all tool calls are done."""
        if self.agent is None:
            self.create()
        if self.conversation_id is None:
            self.start_conversation()

        response = self.openai_client.responses.create(
            conversation=self.conversation_id,
            input=text,
            extra_body=self._agent_reference(),
        )

        # Process tool calls until we get final text
        while (inputs := handle_tool_calls(response, self.functions)):
            logger.info("Processing %d tool call(s)...", len(inputs))
            response = self.openai_client.responses.create(
                input=inputs,
                previous_response_id=response.id,
                extra_body=self._agent_reference(),
            )

        return extract_reply(response)
