from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os

from dotenv import load_dotenv

from pizza_agent.exception import ConfigurationError

DEFAULT_AGENT_NAME = "contoso-pizza-agent"
DEFAULT_MCP_URL = "https://ca-pizza-mcp-sc6u2typoxngc.graypond-9d6dd29c.eastus2.azurecontainerapps.io/sse"
DEFAULT_MCP_LABEL = "contosopizza"
DEFAULT_USER_ID = "guest@contoso.com"
DEFAULT_SPEECH_LANGUAGE = "en-US"
DEFAULT_INSTRUCTIONS_FILE = Path(__file__).with_name("instructions.txt")


@dataclass(frozen=True)
class Settings:
    project_endpoint: str
    model_deployment: str
    agent_name: str = DEFAULT_AGENT_NAME
    mcp_url: str = DEFAULT_MCP_URL
    mcp_label: str = DEFAULT_MCP_LABEL
    mcp_connection_id: Optional[str] = None
    mcp_approval: str = "always"
    user_id: str = DEFAULT_USER_ID
    instructions_file: Path = DEFAULT_INSTRUCTIONS_FILE
    documents_dir: Optional[Path] = None
    speech_key: Optional[str] = None
    speech_region: Optional[str] = None
    speech_language: str = DEFAULT_SPEECH_LANGUAGE
    speech_voice: Optional[str] = None

    @property
    def instructions(self) -> str:
        return self.instructions_file.read_text(encoding="utf-8")

    @property
    def speech_enabled(self) -> bool:
        return bool(self.speech_key and self.speech_region)


def _required(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"Environment variable {name} is not set")
    return value


def _optional(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name, "").strip()
    return value or None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (after reading .env when env is not given)."""
    if env is None:
        load_dotenv()
        env = os.environ

    approval = _optional(env, "CONTOSO_PIZZA_MCP_APPROVAL") or "always"
    if approval not in ("always", "never"):
        raise ConfigurationError(f"CONTOSO_PIZZA_MCP_APPROVAL must be 'always' or 'never', got {approval!r}")

    instructions = _optional(env, "PIZZA_INSTRUCTIONS_FILE")
    documents = _optional(env, "PIZZA_DOCUMENTS_DIR")

    return Settings(
        project_endpoint=_required(env, "AZURE_AI_FOUNDRY_PROJECT_ENDPOINT"),
        model_deployment=_required(env, "AZURE_AI_FOUNDRY_MODEL_DEPLOYMENT_NAME"),
        agent_name=_optional(env, "AZURE_AI_FOUNDRY_AGENT_NAME") or DEFAULT_AGENT_NAME,
        mcp_url=_optional(env, "CONTOSO_PIZZA_MCP_URL") or DEFAULT_MCP_URL,
        mcp_label=_optional(env, "CONTOSO_PIZZA_MCP_LABEL") or DEFAULT_MCP_LABEL,
        mcp_connection_id=_optional(env, "CONTOSO_PIZZA_MCP_CONNECTION_ID"),
        mcp_approval=approval,
        user_id=_optional(env, "CONTOSO_PIZZA_USER_ID") or DEFAULT_USER_ID,
        instructions_file=Path(instructions) if instructions else DEFAULT_INSTRUCTIONS_FILE,
        documents_dir=Path(documents) if documents else None,
        speech_key=_optional(env, "AZURE_SPEECH_KEY"),
        speech_region=_optional(env, "AZURE_SPEECH_REGION"),
        speech_language=_optional(env, "AZURE_SPEECH_LANGUAGE") or DEFAULT_SPEECH_LANGUAGE,
        speech_voice=_optional(env, "AZURE_SPEECH_VOICE"),
    )
