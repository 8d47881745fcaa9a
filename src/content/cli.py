"""
Content CLI - Command-line interface for content generation.

Usage:
    python -m src.content.cli run --prompt "Davi e Golias" --type story
    python -m src.content.cli regenerate history-1700000000000 --field cta
    python -m src.content.cli enhance --prompt "A fé de Rute"
    python -m src.content.cli history list
    python -m src.content.cli key save <API_KEY>
"""

import argparse
import asyncio
import json
import os
import sys

from src.infra.logging_config import setup_logging

from .errors import (
    ENHANCE_ERROR_PREFIX,
    REGENERATE_ERROR_PREFIX,
    GenerationError,
    GenerationFailedError,
)
from .languages import SUPPORTED_LANGUAGES
from .models import (
    DEFAULT_CHARACTER_COUNT,
    DEFAULT_LANGUAGE,
    MIN_CHARACTER_COUNT,
    CreationType,
    GenerationParams,
    GenerationResult,
    RegenerationField,
)

logger = setup_logging(os.getenv("LOG_LEVEL", "INFO"))


def _add_params_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--prompt", type=str, required=True, help="Main idea for the content")
    parser.add_argument(
        "--type",
        type=str,
        choices=[t.value for t in CreationType],
        default=CreationType.STORY.value,
        help="Content type (default: story)"
    )
    parser.add_argument("--project", type=str, default=None, help="Optional project name")
    parser.add_argument("--title-prompt", type=str, default="", help="Extra instructions for titles")
    parser.add_argument("--description-prompt", type=str, default="", help="Extra instructions for the description")
    parser.add_argument("--thumbnail-prompt", type=str, default="", help="Extra instructions for the thumbnail")
    parser.add_argument(
        "--chars",
        type=int,
        default=DEFAULT_CHARACTER_COUNT,
        help=f"Target content length in characters (>= {MIN_CHARACTER_COUNT}). Default: {DEFAULT_CHARACTER_COUNT}"
    )
    parser.add_argument(
        "--language",
        type=str,
        choices=list(SUPPORTED_LANGUAGES),
        default=DEFAULT_LANGUAGE,
        help=f"Output language (default: {DEFAULT_LANGUAGE})"
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model spec. Gemini model name (default from GEMINI_MODEL) or Claude model name"
    )


def _params_from_args(args) -> GenerationParams:
    return GenerationParams(
        creation_type=CreationType(args.type),
        main_prompt=args.prompt.strip(),
        title_prompt=args.title_prompt,
        description_prompt=args.description_prompt,
        thumbnail_prompt=args.thumbnail_prompt,
        character_count=args.chars,
        language=args.language,
        project_name=args.project,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scripture Content Studio CLI")
    parser.add_argument("--db", type=str, default=None, help="Store path (default: STORE_DB_PATH or data/studio.db)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Generate content and all metadata")
    _add_params_arguments(run_parser)
    run_parser.add_argument("--json", action="store_true", default=False, help="Print the history item as JSON")

    # regenerate command
    regen_parser = subparsers.add_parser("regenerate", help="Regenerate one field of a history item")
    regen_parser.add_argument("item_id", type=str, help="History item id (history-<epoch ms>)")
    regen_parser.add_argument(
        "--field",
        type=str,
        required=True,
        choices=[f.value for f in RegenerationField],
        help="Field to regenerate"
    )
    regen_parser.add_argument("--modification", type=str, default=None, help="One-off instruction for this field")
    regen_parser.add_argument("--model", type=str, default=None, help="Model spec")

    # enhance command
    enhance_parser = subparsers.add_parser("enhance", help="Expand an idea into a richer paragraph")
    _add_params_arguments(enhance_parser)

    # history command
    history_parser = subparsers.add_parser("history", help="Manage generation history")
    history_sub = history_parser.add_subparsers(dest="history_command")
    history_sub.add_parser("list", help="List history items, newest first")
    show_parser = history_sub.add_parser("show", help="Show one history item as JSON")
    show_parser.add_argument("item_id", type=str)
    delete_parser = history_sub.add_parser("delete", help="Delete one history item")
    delete_parser.add_argument("item_id", type=str)
    history_sub.add_parser("clear", help="Delete all history items")

    # key command
    key_parser = subparsers.add_parser("key", help="Manage the saved API key")
    key_sub = key_parser.add_subparsers(dest="key_command")
    save_parser = key_sub.add_parser("save", help="Save the API key")
    save_parser.add_argument("api_key", type=str)
    key_sub.add_parser("remove", help="Remove the saved API key")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "chars", MIN_CHARACTER_COUNT) < MIN_CHARACTER_COUNT:
        parser.error(f"--chars must be >= {MIN_CHARACTER_COUNT}")

    handlers = {
        "run": run_generation,
        "regenerate": run_regeneration,
        "enhance": run_enhance,
        "history": run_history,
        "key": run_key,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    from src.registry.history_store import close_store, init_store

    store = init_store(args.db)
    try:
        return handler(args, store)
    finally:
        close_store()


def run_generation(args, store) -> int:
    """Execute a full generation run and print the result summary."""
    from .generator import ContentGenerator

    params = _params_from_args(args)
    generator = ContentGenerator(store, model_spec=args.model)

    logger.info("=" * 80)
    logger.info("[CLI] Content Generation Started")
    logger.info(f"[CLI] Type: {params.creation_type.value}")
    logger.info(f"[CLI] Language: {params.language}")
    logger.info(f"[CLI] Target length: {params.character_count}")
    logger.info(f"[CLI] Model: {args.model or '(default Gemini)'}")
    logger.info("=" * 80)

    try:
        item = asyncio.run(generator.generate_all(params, on_status=print))
    except GenerationFailedError as e:
        print(f"\nStatus: FAILED ({e.phase})")
        print(f"Error: {e.message}")
        if e.partial.content:
            print(f"Partial content ({e.partial.content_length} chars) kept in output below.\n")
            print(e.partial.content)
        return 1
    except GenerationError as e:
        print(f"Error: {e.message}")
        return 1

    if args.json:
        print(json.dumps(item.to_dict(), ensure_ascii=False, indent=2))
        return 0

    _print_result(item.result)
    print(f"History ID: {item.id}")
    return 0


def run_regeneration(args, store) -> int:
    """Regenerate one field of a stored run. The stored item is left unchanged."""
    from .generator import ContentGenerator

    item = store.get_item(args.item_id)
    if item is None:
        print(f"History item not found: {args.item_id}")
        return 1

    generator = ContentGenerator(store, model_spec=args.model)
    target = RegenerationField(args.field)

    try:
        result = asyncio.run(
            generator.regenerate_field(target, item.params, item.result, args.modification)
        )
    except GenerationError as e:
        print(f"{REGENERATE_ERROR_PREFIX}{e.message}")
        return 1

    _print_result(result)
    return 0


def run_enhance(args, store) -> int:
    from .generator import ContentGenerator

    params = _params_from_args(args)
    generator = ContentGenerator(store, model_spec=args.model)

    try:
        enhanced = asyncio.run(generator.enhance_prompt(params))
    except GenerationError as e:
        print(f"{ENHANCE_ERROR_PREFIX}{e.message}")
        return 1

    print(enhanced)
    return 0


def run_history(args, store) -> int:
    if args.history_command == "list":
        items = store.list_items()
        if not items:
            print("No history items.")
        for item in items:
            name = item.params.project_name or item.params.main_prompt[:50]
            print(f"{item.id}  {item.params.creation_type.value:<6}  {item.params.language}  {name}")
        return 0

    if args.history_command == "show":
        item = store.get_item(args.item_id)
        if item is None:
            print(f"History item not found: {args.item_id}")
            return 1
        print(json.dumps(item.to_dict(), ensure_ascii=False, indent=2))
        return 0

    if args.history_command == "delete":
        if not store.delete_item(args.item_id):
            print(f"History item not found: {args.item_id}")
            return 1
        print(f"Deleted {args.item_id}")
        return 0

    if args.history_command == "clear":
        store.clear()
        print("History cleared")
        return 0

    print("Usage: history {list,show,delete,clear}")
    return 1


def run_key(args, store) -> int:
    if args.key_command == "save":
        if not args.api_key.strip():
            print("API key must not be empty")
            return 1
        store.save_api_key(args.api_key.strip())
        print("API key saved")
        return 0

    if args.key_command == "remove":
        store.remove_api_key()
        print("API key removed")
        return 0

    print("Usage: key {save,remove}")
    return 1


def _print_result(result: GenerationResult) -> None:
    print("\n" + "=" * 80)
    print("RESULT SUMMARY")
    print("=" * 80)

    print("Titles:")
    for title in result.titles:
        print(f"  - {title}")
    print(f"\nDescription:\n{result.description}")
    print(f"\nTags: {', '.join(result.tags)}")
    print(f"\nThumbnail prompt:\n{result.thumbnail_prompt}")
    print(f"\nContent ({result.content_length} chars):\n{result.content}")
    print(f"\nCTA:\n{result.cta}")
    print("=" * 80)


if __name__ == "__main__":
    sys.exit(main())
