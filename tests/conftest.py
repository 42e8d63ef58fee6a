import pytest

from pizza_agent.config import load_settings


@pytest.fixture
def settings():
    return load_settings({
        "AZURE_AI_FOUNDRY_PROJECT_ENDPOINT": "https://example.services.ai.azure.com/api/projects/pizza",
        "AZURE_AI_FOUNDRY_MODEL_DEPLOYMENT_NAME": "gpt-4o",
        "CONTOSO_PIZZA_USER_ID": "ada@contoso.com",
    })
