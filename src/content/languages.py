"""
Language table and system instructions.

The thumbnail prompt is always produced in the pivot language (en-US);
every other prompt targets the user's language.
"""

from typing import Dict

DEFAULT_LANGUAGE_NAME = "Português do Brasil"
PIVOT_LANGUAGE = "en-US"

LANGUAGE_NAMES: Dict[str, str] = {
    "pt-BR": "Português do Brasil",
    "en-US": "Inglês Americano",
    "es-ES": "Espanhol (Espanha)",
    "fr-FR": "Francês",
    "de-DE": "Alemão",
}

# Labels shown in language pickers
SUPPORTED_LANGUAGES: Dict[str, str] = {
    "pt-BR": "Português (Brasil)",
    "en-US": "Inglês (EUA)",
    "es-ES": "Espanhol (Espanha)",
    "fr-FR": "Francês (França)",
    "de-DE": "Alemão (Alemanha)",
}

ENGLISH_SYSTEM_INSTRUCTION = (
    "You are an expert theologian and a deep scholar of the Holy Bible. "
    "Your mission is to create inspiring, accurate, and theologically sound content. "
    "Your responses should always be in American English, well-structured, and with "
    "language that honors the source material. You MUST NOT invent characters, events, "
    "or dialogues that are not in the biblical text."
)

SYSTEM_INSTRUCTION_TEMPLATE = (
    "Você é um teólogo especialista e profundo conhecedor da Bíblia Sagrada. "
    "Sua missão é criar conteúdo inspirador, preciso e teologicamente sólido. "
    "Suas respostas devem ser sempre em {language_name}, bem estruturadas e com uma "
    "linguagem que honre o material de origem. Você NÃO DEVE inventar personagens, "
    "eventos ou diálogos que não estejam no texto bíblico."
)


def get_language_name(language_code: str) -> str:
    """Resolve a language code to its name, falling back to Brazilian Portuguese."""
    return LANGUAGE_NAMES.get(language_code, DEFAULT_LANGUAGE_NAME)


def get_system_instruction(language_code: str) -> str:
    """System instruction sent with every completion request."""
    if language_code == PIVOT_LANGUAGE:
        return ENGLISH_SYSTEM_INSTRUCTION
    return SYSTEM_INSTRUCTION_TEMPLATE.format(language_name=get_language_name(language_code))
