"""
Pytest configuration and shared fixtures.
"""

import importlib
import json
import os
import sys

import pytest

from src.content.models import CreationType, GenerationParams


@pytest.fixture(autouse=True, scope="function")
def reset_auth_module():
    """
    Reset auth module state before each test.

    This ensures tests run with API_AUTH_ENABLED=false by default,
    unless the test explicitly sets it otherwise.
    """
    # Store original values
    original_auth_enabled = os.environ.get("API_AUTH_ENABLED")
    original_api_key = os.environ.get("API_KEY")

    # Set defaults for tests (auth disabled)
    os.environ["API_AUTH_ENABLED"] = "false"

    yield

    # Restore original values
    if original_auth_enabled is not None:
        os.environ["API_AUTH_ENABLED"] = original_auth_enabled
    elif "API_AUTH_ENABLED" in os.environ:
        del os.environ["API_AUTH_ENABLED"]

    if original_api_key is not None:
        os.environ["API_KEY"] = original_api_key
    elif "API_KEY" in os.environ:
        del os.environ["API_KEY"]

    # Reload auth module (and the app built from it) to reset state
    try:
        import src.api.dependencies.auth as auth_module
        importlib.reload(auth_module)
        if "src.api.main" in sys.modules:
            importlib.reload(sys.modules["src.api.main"])
    except ImportError:
        pass


# =============================================================================
# Generation fixtures
# =============================================================================

TEST_CONFIG = {
    "api_key": "",
    "model": "gemini-2.5-flash",
    "temperature": 0.75,
    "content_temperature": 0.5,
}

DEFAULT_TITLES = ["Título 1", "Título 2", "Título 3", "Título 4", "Título 5"]
DEFAULT_TAGS = ["histórias bíblicas", "davi e golias", "fé"]


def classify_prompt(prompt: str) -> str:
    """Identify which builder produced a prompt."""
    if "image generation AI" in prompt:
        return "thumbnail"
    if "REGRA 3 (CONTAGEM DE CARACTERES)" in prompt:
        return "content"
    if "Ideia original:" in prompt:
        return "enhance"
    if "especialista em SEO para YouTube" in prompt:
        return "tags"
    if "sugestões de títulos" in prompt:
        return "titles"
    if "call to action" in prompt:
        return "cta"
    if "escreva uma descrição" in prompt:
        return "description"
    return "unknown"


class ScriptedClient:
    """
    Stand-in for GenerationClient returning canned outputs per prompt kind.

    contents is consumed one attempt at a time; the last entry repeats.
    fail_on names a prompt kind whose call raises error instead.
    """

    def __init__(
        self,
        contents=None,
        titles=None,
        tags=None,
        description="Descrição do vídeo.",
        cta="Inscreva-se no canal!",
        thumbnail="A dramatic scene with the text 'FÉ QUE VENCE'.",
        enhanced="Ideia aprimorada.",
        fail_on=None,
        error=None,
    ):
        self.contents = list(contents or ["a" * 1500])
        self.titles_raw = json.dumps(titles if titles is not None else DEFAULT_TITLES)
        self.tags_raw = json.dumps(tags if tags is not None else DEFAULT_TAGS)
        self.description = description
        self.cta = cta
        self.thumbnail = thumbnail
        self.enhanced = enhanced
        self.fail_on = fail_on
        self.error = error
        self.calls = []

    def calls_of(self, kind):
        return [call for call in self.calls if call["kind"] == kind]

    def _record(self, prompt, language, extra):
        kind = classify_prompt(prompt)
        self.calls.append({"kind": kind, "prompt": prompt, "language": language, **extra})
        if kind == self.fail_on:
            raise self.error
        return kind

    async def complete_text_async(self, prompt, language, overrides=None):
        kind = self._record(prompt, language, {"overrides": overrides})
        if kind == "content":
            return self.contents.pop(0) if len(self.contents) > 1 else self.contents[0]
        return {
            "description": self.description,
            "cta": self.cta,
            "thumbnail": self.thumbnail,
            "enhance": self.enhanced,
        }[kind]

    async def complete_structured_async(self, prompt, language, schema):
        kind = self._record(prompt, language, {"schema": schema})
        return {"titles": self.titles_raw, "tags": self.tags_raw}[kind]


@pytest.fixture
def store(tmp_path):
    """History store on a temporary SQLite file, with a saved API key."""
    from src.registry.history_store import HistoryStore

    history_store = HistoryStore(db_path=str(tmp_path / "studio.db"))
    history_store.save_api_key("test-gemini-key")
    yield history_store
    history_store.close()


@pytest.fixture
def story_params():
    return GenerationParams(
        creation_type=CreationType.STORY,
        main_prompt="Davi enfrenta Golias",
        character_count=1500,
        language="pt-BR",
        project_name="Canal Fé",
    )


@pytest.fixture
def prayer_params():
    return GenerationParams(
        creation_type=CreationType.PRAYER,
        main_prompt="Oração pela família",
        character_count=1000,
        language="es-ES",
    )


@pytest.fixture
def make_generator(store):
    """Build a ContentGenerator wired to a ScriptedClient."""
    from src.content.generator import ContentGenerator

    def _make(client=None, history_store=store, config=None):
        client = client or ScriptedClient()
        generator = ContentGenerator(
            history_store,
            client_factory=lambda **kwargs: client,
            config=dict(config or TEST_CONFIG),
        )
        return generator, client

    return _make
