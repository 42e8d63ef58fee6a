from pathlib import Path

from azure.ai.projects.models import FileSearchTool, FunctionTool, MCPTool

from pizza_agent.estimator import Appetite, calculate_pizza_for_people
from pizza_agent.logger import logger

USER_ID_HEADER = "X-User-Id"

MCP_ALLOWED_TOOLS = [
    "get_pizzas", "get_pizza_by_id", "get_toppings", "get_topping_by_id",
    "get_topping_categories", "get_orders", "get_order_by_id", "place_order", "delete_order_by_id",
]

# Function registry
FUNCTIONS = {"calculate_pizza_for_people": calculate_pizza_for_people}


def pizza_calculator_tool():
    return FunctionTool(
        name="calculate_pizza_for_people",
        description="Calculate pizzas needed for a group",
        parameters={"type": "object", "properties": {
            "people_count": {"type": "integer", "description": "Number of people"},
            "appetite_level": {"type": "string", "enum": [a.value for a in Appetite], "description": "Appetite level"}
        }, "required": ["people_count", "appetite_level"], "additionalProperties": False},
        strict=True,
    )


def contoso_pizza_mcp_tool(settings):
    """MCP tool for the Contoso Pizza server; the caller identity rides along as a header."""
    kwargs = {}
    if settings.mcp_connection_id:
        kwargs["project_connection_id"] = settings.mcp_connection_id
    return MCPTool(
        server_label=settings.mcp_label,
        server_url=settings.mcp_url,
        headers={USER_ID_HEADER: settings.user_id},
        require_approval=settings.mcp_approval,
        allowed_tools=list(MCP_ALLOWED_TOOLS),
        **kwargs,
    )


def create_vector_store(openai_client, documents_dir: Path, name="pizza-vector-store"):
    """Upload every markdown file under documents_dir into a new vector store."""
    files = sorted(documents_dir.glob("*.md"))
    if not files:
        logger.warning("No markdown documents found in %s", documents_dir)
        return None
    vector_store = openai_client.vector_stores.create(name=name)
    for path in files:
        with open(path, "rb") as f:
            openai_client.vector_stores.files.upload_and_poll(vector_store_id=vector_store.id, file=f)
        logger.info("Uploaded %s to vector store %s", path.name, vector_store.id)
    return vector_store


def build_tools(settings, openai_client=None):
    """Tool list for the agent definition."""
    tools = []
    if settings.documents_dir is not None and openai_client is not None:
        vector_store = create_vector_store(openai_client, settings.documents_dir)
        if vector_store is not None:
            tools.append(FileSearchTool(vector_store_ids=[vector_store.id]))
    tools.append(pizza_calculator_tool())
    tools.append(contoso_pizza_mcp_tool(settings))
    return tools
