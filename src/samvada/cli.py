# src/samvada/cli.py

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from openai import OpenAIError

from samvada.chat.ask import ask
from samvada.chat.create import create_chat
from samvada.chat.lint import lint_path
from samvada.chat.parser import parse_file
from samvada.chat.quick import quick, save_conversation
from samvada.config.credentials import load_env_files, resolve_api_key, save_api_key
from samvada.config.settings import get_config_dir, load_config
from samvada.errors import ChatError
from samvada.llms import LLMClient, LLMConfig, base_url_from_endpoint, create_llm_client
from samvada.log_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="samvada", description="Manage chat files")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also print log records to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a new chat file")
    create.add_argument("name", help="Name of the chat file")
    create.add_argument("--dir", help="Directory to create the file in")

    lint = subparsers.add_parser("lint", help="Lint a chat file or directory")
    lint.add_argument("path", help="Path to the file or directory")
    lint.add_argument(
        "--pattern", default="*", help="Glob for files to lint inside a directory"
    )

    ask_cmd = subparsers.add_parser("ask", help="Send a chat file to the model")
    ask_cmd.add_argument("file", help="Path to the chat file")
    ask_cmd.add_argument(
        "--api-key", help="Set your OpenAI API key (will be saved for future use)"
    )

    quick_cmd = subparsers.add_parser("quick", help="Quickly ask a question")
    quick_cmd.add_argument("question", nargs="?", help="The question to ask")
    quick_cmd.add_argument(
        "--api-key", help="Set your OpenAI API key (will be saved for future use)"
    )
    quick_cmd.add_argument(
        "--save-to-markdown",
        action="store_true",
        help="Save the conversation to a markdown file",
    )
    return parser


def _api_key(cli_key: str | None) -> str:
    config_dir = get_config_dir()
    if cli_key:
        save_api_key(cli_key, config_dir)
    return resolve_api_key(cli_key, load_env_files(Path.cwd(), config_dir), os.environ)


def _client(api_key: str, model: str, api_endpoint: str | None) -> LLMClient:
    return create_llm_client(
        LLMConfig(
            provider="openai",
            model=model,
            api_key=api_key,
            base_url=base_url_from_endpoint(api_endpoint),
        )
    )


def _read_question(question: str | None) -> str:
    if question is not None:
        return question
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def run_create(args: argparse.Namespace) -> int:
    path = create_chat(args.name, args.dir, config=load_config())
    print(f"Created {path}")
    return 0


def run_lint(args: argparse.Namespace) -> int:
    if not Path(args.path).exists():
        print("Error: Invalid path.", file=sys.stderr)
        return 1
    return 0 if lint_path(args.path, args.pattern) else 1


def run_ask(args: argparse.Namespace) -> int:
    setup_logging(args.file, verbose=args.verbose)
    logger.info("Starting processing for file: %s", args.file)

    config = load_config()
    api_key = _api_key(args.api_key)
    document = parse_file(args.file, defaults=config.frontmatter_defaults())
    client = _client(api_key, document.model or config.model, document.api_endpoint)

    response = asyncio.run(ask(document, client))
    print(f"Answer: {response.content}")
    return 0


def run_quick(args: argparse.Namespace) -> int:
    setup_logging(None, verbose=args.verbose)
    logger.info("Starting processing for quick question")

    config = load_config()
    api_key = _api_key(args.api_key)
    question = _read_question(args.question)
    client = _client(api_key, config.model, config.api_endpoint)

    response = asyncio.run(quick(question, client, config=config))
    print(f"\n{response.content}\n")

    if args.save_to_markdown:
        path = save_conversation(question, response, config=config)
        print(f"Saving conversation to: {path}")
    return 0


COMMANDS = {
    "create": run_create,
    "lint": run_lint,
    "ask": run_ask,
    "quick": run_quick,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose and args.command in ("create", "lint"):
        logging.basicConfig(level=logging.DEBUG)

    try:
        return COMMANDS[args.command](args)
    except (ChatError, OSError, OpenAIError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
