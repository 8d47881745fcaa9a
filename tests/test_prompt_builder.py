"""
Tests for prompt_builder module.
"""

import pytest

from src.content.models import CreationType, GenerationParams
from src.content.prompt_builder import (
    build_content_prompt,
    build_cta_prompt,
    build_description_prompt,
    build_enhance_prompt,
    build_length_feedback,
    build_tags_prompt,
    build_thumbnail_prompt,
    build_titles_prompt,
)


@pytest.fixture
def story():
    return GenerationParams(
        creation_type=CreationType.STORY,
        main_prompt="Jonas no ventre do peixe",
        title_prompt="use números",
        description_prompt="inclua versículos",
        thumbnail_prompt="estilo aquarela",
        character_count=2000,
        language="en-US",
    )


@pytest.fixture
def prayer():
    return GenerationParams(
        creation_type=CreationType.PRAYER,
        main_prompt="Gratidão pela colheita",
        character_count=1200,
        language="de-DE",
    )


class TestBuildContentPrompt:
    """Tests for build_content_prompt function."""

    def test_story_rules(self, story):
        prompt = build_content_prompt(story)

        assert "Inglês Americano" in prompt
        assert "FIDELIDADE BÍBLICA" in prompt
        assert "aproximadamente 2000 caracteres" in prompt
        assert "+/- 500" in prompt
        assert 'crie a história bíblica com base no tema: "Jonas no ventre do peixe"' in prompt

    def test_prayer_rules(self, prayer):
        prompt = build_content_prompt(prayer)

        assert "Alemão" in prompt
        assert "PROFUNDIDADE E EXPANSÃO DA ORAÇÃO" in prompt
        assert "FIDELIDADE BÍBLICA" not in prompt
        assert "EXCLUSIVAMENTE o texto da oração" in prompt

    def test_modification(self, story):
        prompt = build_content_prompt(story, modification="final mais esperançoso")
        assert 'Instrução de modificação: "final mais esperançoso"' in prompt

    def test_no_modification_block(self, story):
        assert "Instrução de modificação" not in build_content_prompt(story)

    def test_unknown_language_defaults_to_portuguese(self):
        params = GenerationParams(main_prompt="Rute", language="xx-XX")
        assert "Português do Brasil" in build_content_prompt(params)

    def test_empty_prompt_is_echoed(self):
        prompt = build_content_prompt(GenerationParams(main_prompt=""))
        assert 'com base no tema: ""' in prompt


class TestBuildLengthFeedback:
    """Tests for retry feedback."""

    def test_too_short(self, story):
        feedback = build_length_feedback(story, 900)

        assert "muito curta (900 caracteres)" in feedback
        assert "aproximadamente 2000 caracteres" in feedback
        assert "a narrativa" in feedback

    def test_too_long(self, prayer):
        feedback = build_length_feedback(prayer, 4000)

        assert "muito longa (4000 caracteres)" in feedback
        assert "a oração" in feedback


class TestMetadataPrompts:
    """Tests for titles, description, tags and CTA prompts."""

    def test_titles(self, story):
        prompt = build_titles_prompt(story)

        assert "5 sugestões de títulos" in prompt
        assert 'Leve em consideração: "use números"' in prompt
        assert "Inglês Americano" in prompt

    def test_titles_modification_before_closing(self, story):
        prompt = build_titles_prompt(story, modification="mais curtos")

        assert prompt.index("mais curtos") < prompt.index("Gere os títulos no idioma")

    def test_description(self, story):
        prompt = build_description_prompt(story)

        assert "história bíblica" in prompt
        assert 'Leve em consideração: "inclua versículos"' in prompt

    def test_description_without_hint(self, prayer):
        assert "Leve em consideração" not in build_description_prompt(prayer)

    def test_tags_budget(self, story):
        prompt = build_tags_prompt(story)

        assert "inferior a 480 caracteres" in prompt
        assert "limite de 500 caracteres" in prompt
        assert "Long-tail" in prompt

    def test_cta(self, prayer):
        prompt = build_cta_prompt(prayer, modification="mencione a comunidade")

        assert "no máximo 500 caracteres" in prompt
        assert "para uma oração" in prompt
        assert 'Modifique com a instrução: "mencione a comunidade"' in prompt


class TestBuildThumbnailPrompt:
    """Tests for the English thumbnail prompt."""

    def test_teaser_is_first_300_chars(self, story):
        content = "c" * 299 + "Z" + "QQQQ"
        prompt = build_thumbnail_prompt(story, content)

        assert '"' + "c" * 299 + 'Z...".' in prompt
        assert "QQQQ" not in prompt

    def test_caption_rules(self, prayer):
        prompt = build_thumbnail_prompt(prayer, "")

        assert "IN ENGLISH" in prompt
        assert "3 to 5 words" in prompt
        assert "in the Alemão language" in prompt

    def test_style_and_modification(self, story):
        prompt = build_thumbnail_prompt(story, "texto", modification="cores frias")

        assert 'style preference to consider: "estilo aquarela"' in prompt
        assert 'Apply this modification to your generation: "cores frias"' in prompt


class TestBuildEnhancePrompt:
    """Tests for idea enhancement prompt."""

    def test_uses_main_prompt_only(self, story):
        prompt = build_enhance_prompt(story)

        assert 'Ideia original: "Jonas no ventre do peixe"' in prompt
        assert "use números" not in prompt
        assert "Inglês Americano" in prompt
