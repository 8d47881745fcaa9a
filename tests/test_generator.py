"""
Tests for the content generator orchestration.

The provider is replaced by ScriptedClient (see conftest), so these tests
exercise the length loop, the metadata fan-out, history recording and
single-field regeneration without network access.
"""

from unittest.mock import MagicMock, patch

import pytest

from src.content.errors import (
    CommunicationError,
    GenerationFailedError,
    MissingApiKeyError,
    MissingInputError,
    QuotaExceededError,
)
from src.content.generator import (
    ENHANCE_MISSING_IDEA_MESSAGE,
    ContentGenerator,
    GenerationStatus,
    is_within_tolerance,
)
from src.content.models import GenerationParams, GenerationResult, RegenerationField

from conftest import TEST_CONFIG, ScriptedClient


def text_of(length: int) -> str:
    return "x" * length


class TestTolerance:
    """Tests for the tolerance window check."""

    def test_bounds_are_inclusive(self):
        assert is_within_tolerance(1000, 1500)
        assert is_within_tolerance(2000, 1500)
        assert not is_within_tolerance(999, 1500)
        assert not is_within_tolerance(2001, 1500)


class TestResolveApiKey:
    """Tests for credential resolution."""

    def test_saved_key_wins(self, store):
        generator = ContentGenerator(store, config={**TEST_CONFIG, "api_key": "env-key"})
        assert generator.resolve_api_key() == "test-gemini-key"

    def test_environment_fallback(self, store):
        store.remove_api_key()
        generator = ContentGenerator(store, config={**TEST_CONFIG, "api_key": "env-key"})
        assert generator.resolve_api_key() == "env-key"

    def test_no_key(self, store):
        store.remove_api_key()
        generator = ContentGenerator(store, config=dict(TEST_CONFIG))
        assert generator.resolve_api_key() == ""


class TestGenerateContent:
    """Tests for the length-convergence loop."""

    @pytest.mark.asyncio
    async def test_first_attempt_in_window(self, make_generator, story_params):
        """One call when the first attempt lands in the window."""
        generator, client = make_generator(ScriptedClient(contents=[text_of(1500)]))

        content = await generator.generate_content(story_params)

        assert len(content) == 1500
        assert len(client.calls_of("content")) == 1

    @pytest.mark.asyncio
    async def test_converges_on_third_attempt(self, make_generator, story_params):
        """Too long, then too short, then on target: three calls, third returned."""
        client = ScriptedClient(contents=["L" * 2500, "S" * 500, "O" * 1500])
        generator, _ = make_generator(client)

        content = await generator.generate_content(story_params)

        assert content == "O" * 1500
        calls = client.calls_of("content")
        assert len(calls) == 3
        assert "AVISO IMPORTANTE" not in calls[0]["prompt"]
        assert "muito longa (2500 caracteres)" in calls[1]["prompt"]
        assert "muito curta (500 caracteres)" in calls[2]["prompt"]

    @pytest.mark.asyncio
    async def test_returns_last_attempt_untruncated(self, make_generator, story_params):
        """No attempt converges: the last text is returned whole."""
        client = ScriptedClient(contents=[text_of(3000), text_of(2800), text_of(2600)])
        generator, _ = make_generator(client)

        with patch("src.content.generator.logger") as mock_logger:
            content = await generator.generate_content(story_params)

        assert len(content) == 2600
        assert len(client.calls_of("content")) == 3
        assert mock_logger.warning.called

    @pytest.mark.asyncio
    async def test_uses_content_temperature(self, make_generator, story_params):
        generator, client = make_generator()

        await generator.generate_content(story_params)

        assert client.calls_of("content")[0]["overrides"] == {"temperature": 0.5}

    @pytest.mark.asyncio
    async def test_modification_in_prompt(self, make_generator, story_params):
        generator, client = make_generator()

        await generator.generate_content(story_params, modification="mais dramático")

        assert "mais dramático" in client.calls_of("content")[0]["prompt"]


class TestMetadataGenerators:
    """Tests for titles, tags, CTA and thumbnail post-processing."""

    @pytest.mark.asyncio
    async def test_titles_capped_at_five(self, make_generator, story_params):
        client = ScriptedClient(titles=[f"Título {i}" for i in range(8)])
        generator, _ = make_generator(client)

        titles = await generator.generate_titles(story_params)

        assert titles == [f"Título {i}" for i in range(5)]

    @pytest.mark.asyncio
    async def test_titles_fallback_on_malformed_json(self, make_generator, story_params):
        client = ScriptedClient()
        client.titles_raw = "- Primeiro título\n- Segundo título\n"
        generator, _ = make_generator(client)

        titles = await generator.generate_titles(story_params)

        assert titles == ["Primeiro título", "Segundo título"]

    @pytest.mark.asyncio
    async def test_tags_respect_budget(self, make_generator, story_params):
        tags = ["a" * 200, "b" * 200, "c" * 150, "d" * 10]
        generator, _ = make_generator(ScriptedClient(tags=tags))

        result = await generator.generate_tags(story_params)

        assert result == ["a" * 200, "b" * 200]
        assert sum(len(tag) for tag in result) <= 500

    @pytest.mark.asyncio
    async def test_tags_fallback_on_comma_list(self, make_generator, story_params):
        client = ScriptedClient()
        client.tags_raw = "fé, bíblia , davi"
        generator, _ = make_generator(client)

        assert await generator.generate_tags(story_params) == ["fé", "bíblia", "davi"]

    @pytest.mark.asyncio
    async def test_cta_truncated(self, make_generator, story_params):
        long_cta = ("Inscreva-se agora. " * 40).strip()
        generator, _ = make_generator(ScriptedClient(cta=long_cta))

        cta = await generator.generate_cta(story_params)

        assert len(cta) <= 500
        assert cta.endswith(".")

    @pytest.mark.asyncio
    async def test_thumbnail_uses_pivot_language_and_teaser(self, make_generator, story_params):
        generator, client = make_generator()
        content = "Início da história. " + "y" * 600

        await generator.generate_thumbnail_prompt(story_params, content)

        call = client.calls_of("thumbnail")[0]
        assert call["language"] == "en-US"
        assert content[:300] in call["prompt"]
        assert content[:301] not in call["prompt"]


class TestGenerateAll:
    """Tests for the full pipeline."""

    @pytest.mark.asyncio
    async def test_success_records_history(self, make_generator, store, story_params):
        generator, client = make_generator()
        messages = []

        item = await generator.generate_all(story_params, on_status=messages.append)

        assert item.id == f"history-{item.timestamp}"
        assert item.params == story_params
        assert item.result.titles == ["Título 1", "Título 2", "Título 3", "Título 4", "Título 5"]
        assert item.result.description == "Descrição do vídeo."
        assert item.result.thumbnail_prompt.startswith("A dramatic scene")
        assert item.result.content_length == 1500
        assert store.list_items()[0].id == item.id
        assert generator.status == GenerationStatus.COMPLETE
        assert messages == [
            "Gerando história...",
            "Gerando metadados (títulos, descrição, etc.)...",
            "Gerando prompt para thumbnail...",
        ]

    @pytest.mark.asyncio
    async def test_runs_in_same_millisecond_get_distinct_ids(self, make_generator, store, story_params):
        generator, _ = make_generator()

        with patch("src.content.models.now_millis", return_value=7000):
            first = await generator.generate_all(story_params)
            second = await generator.generate_all(story_params)

        assert first.id == "history-7000"
        assert second.id == "history-7000-1"
        assert [item.id for item in store.list_items()] == ["history-7000-1", "history-7000"]

    @pytest.mark.asyncio
    async def test_prayer_status_message(self, make_generator, prayer_params):
        generator, _ = make_generator(ScriptedClient(contents=[text_of(1000)]))
        messages = []

        await generator.generate_all(prayer_params, on_status=messages.append)

        assert messages[0] == "Gerando oração..."

    @pytest.mark.asyncio
    async def test_thumbnail_follows_content(self, make_generator, story_params):
        generator, client = make_generator()

        await generator.generate_all(story_params)

        kinds = [call["kind"] for call in client.calls]
        assert kinds[0] == "content"
        assert kinds[-1] == "thumbnail"
        assert sorted(kinds[1:5]) == ["cta", "description", "tags", "titles"]

    @pytest.mark.asyncio
    async def test_empty_prompt_makes_no_calls(self, store):
        factory = MagicMock()
        generator = ContentGenerator(store, client_factory=factory, config=dict(TEST_CONFIG))

        with pytest.raises(MissingInputError) as exc_info:
            await generator.generate_all(GenerationParams(main_prompt=""))

        assert not isinstance(exc_info.value, MissingApiKeyError)
        factory.assert_not_called()
        assert store.list_items() == []

    @pytest.mark.asyncio
    async def test_missing_key_makes_no_calls(self, store, story_params):
        store.remove_api_key()
        factory = MagicMock()
        generator = ContentGenerator(store, client_factory=factory, config=dict(TEST_CONFIG))

        with pytest.raises(MissingApiKeyError):
            await generator.generate_all(story_params)

        factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_metadata_failure_keeps_partial_and_skips_history(
        self, make_generator, store, story_params
    ):
        client = ScriptedClient(fail_on="cta", error=QuotaExceededError())
        generator, _ = make_generator(client)

        with pytest.raises(GenerationFailedError) as exc_info:
            await generator.generate_all(story_params)

        error = exc_info.value
        assert isinstance(error.cause, QuotaExceededError)
        assert error.message == QuotaExceededError.default_message
        assert error.phase == GenerationStatus.GENERATING_METADATA.value
        assert error.partial.content_length == 1500
        assert error.partial.thumbnail_prompt == ""
        assert store.list_items() == []
        assert generator.status == GenerationStatus.FAILED
        assert client.calls_of("thumbnail") == []

    @pytest.mark.asyncio
    async def test_content_failure(self, make_generator, store, story_params):
        client = ScriptedClient(fail_on="content", error=CommunicationError())
        generator, _ = make_generator(client)

        with pytest.raises(GenerationFailedError) as exc_info:
            await generator.generate_all(story_params)

        assert exc_info.value.phase == GenerationStatus.GENERATING_CONTENT.value
        assert exc_info.value.partial == GenerationResult()
        assert store.list_items() == []

    @pytest.mark.asyncio
    async def test_new_runs_are_prepended(self, make_generator, store, story_params):
        generator, _ = make_generator()

        with patch("src.content.models.now_millis", side_effect=[1000, 2000]):
            first = await generator.generate_all(story_params)
            second = await generator.generate_all(story_params)

        assert [item.id for item in store.list_items()] == [second.id, first.id]


class TestRegenerateField:
    """Tests for single-field regeneration."""

    CURRENT = GenerationResult(
        titles=["Antigo"],
        description="Descrição antiga",
        tags=["antiga"],
        thumbnail_prompt="Old prompt",
        content="Conteúdo atual da história.",
        cta="CTA antiga",
    )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("target, attribute, expected", [
        (RegenerationField.DESCRIPTION, "description", "Descrição do vídeo."),
        (RegenerationField.CTA, "cta", "Inscreva-se no canal!"),
        (RegenerationField.TAGS, "tags", ["histórias bíblicas", "davi e golias", "fé"]),
    ])
    async def test_only_target_changes(self, make_generator, story_params, target, attribute, expected):
        generator, _ = make_generator()

        result = await generator.regenerate_field(target, story_params, self.CURRENT)

        assert getattr(result, attribute) == expected
        for name in ("titles", "description", "tags", "thumbnail_prompt", "content", "cta"):
            if name != attribute:
                assert getattr(result, name) == getattr(self.CURRENT, name)

    @pytest.mark.asyncio
    async def test_thumbnail_uses_current_content(self, make_generator, story_params):
        generator, client = make_generator()

        await generator.regenerate_field(
            RegenerationField.THUMBNAIL, story_params, self.CURRENT, "mais escuro"
        )

        prompt = client.calls_of("thumbnail")[0]["prompt"]
        assert self.CURRENT.content in prompt
        assert "mais escuro" in prompt

    @pytest.mark.asyncio
    async def test_content_runs_length_loop(self, make_generator, story_params):
        client = ScriptedClient(contents=[text_of(100), text_of(1600)])
        generator, _ = make_generator(client)

        result = await generator.regenerate_field(RegenerationField.CONTENT, story_params, self.CURRENT)

        assert result.content_length == 1600
        assert len(client.calls_of("content")) == 2
        assert result.titles == self.CURRENT.titles

    @pytest.mark.asyncio
    async def test_does_not_touch_history(self, make_generator, store, story_params):
        generator, _ = make_generator()

        await generator.regenerate_field(RegenerationField.TITLES, story_params, self.CURRENT)

        assert store.list_items() == []

    @pytest.mark.asyncio
    async def test_missing_key(self, store, story_params):
        store.remove_api_key()
        generator = ContentGenerator(store, client_factory=MagicMock(), config=dict(TEST_CONFIG))

        with pytest.raises(MissingApiKeyError):
            await generator.regenerate_field(RegenerationField.CTA, story_params, self.CURRENT)


class TestEnhancePrompt:
    """Tests for idea enhancement."""

    @pytest.mark.asyncio
    async def test_enhance(self, make_generator, story_params):
        generator, client = make_generator()

        enhanced = await generator.enhance_prompt(story_params)

        assert enhanced == "Ideia aprimorada."
        assert story_params.main_prompt in client.calls_of("enhance")[0]["prompt"]

    @pytest.mark.asyncio
    async def test_enhance_requires_idea(self, make_generator):
        generator, client = make_generator()

        with pytest.raises(MissingInputError) as exc_info:
            await generator.enhance_prompt(GenerationParams(main_prompt=""))

        assert exc_info.value.message == ENHANCE_MISSING_IDEA_MESSAGE
        assert client.calls == []
