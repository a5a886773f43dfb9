#!/usr/bin/env python3
"""
ClipTrans - Main Entry Point

Watches the clipboard and, for every newly copied text, decides which
language it should be translated into.
"""
import sys
import os
import time
import logging
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

from config import ConfigStore
from cliptrans.constants import CLIPBOARD_POLL_INTERVAL, DETECTION_TIMEOUT
from cliptrans.core.clipboard import ClipboardManager, ClipboardMonitor
from cliptrans.core.detector import LangdetectDetector
from cliptrans.core.errors import WriteFailed
from cliptrans.core.language import Language, UnknownLanguageError
from cliptrans.core.last_selection import LastSelectionStore
from cliptrans.core.orchestrator import SelectionOrchestrator
from cliptrans.core.state import PreferenceState
from cliptrans.core.translation import TranslationError, build_translation_request
from cliptrans.utils.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliptrans",
        description="Pick the translation target language for copied text.",
    )
    parser.add_argument("--config-dir", help="Directory holding config.json and last_language.json")
    parser.add_argument("--once", action="store_true",
                        help="Resolve the current clipboard text once and exit")
    parser.add_argument("--set-target", metavar="LANG",
                        help="Set the current target language (code or name) and exit")
    parser.add_argument("--show-config", action="store_true",
                        help="Print the loaded preferences and exit")
    parser.add_argument("--interval", type=float, default=CLIPBOARD_POLL_INTERVAL,
                        help="Clipboard poll interval in seconds")
    parser.add_argument("--timeout", type=float, default=DETECTION_TIMEOUT,
                        help="Language detection timeout in seconds")
    return parser


def handle_text(orchestrator: SelectionOrchestrator, text: str):
    """Resolve the target for text and prepare the translation request."""
    target = orchestrator.resolve(text)
    try:
        request = build_translation_request(text, target, orchestrator.state.config)
    except TranslationError as e:
        logging.warning(str(e))
        return target, None

    logging.info(f"Selected text: {text[:50]}...")
    logging.info(f"Translating to {target} with {request.model_version} at {request.api_url}")
    if not request.api_key:
        logging.warning("No API key configured. Set TRANSLATOR_API_KEY in the environment or .env")
    return target, request


def show_config(state: PreferenceState) -> None:
    config, last = state.snapshot()
    print(f"Config file:          {state.config_store.config_path}")
    print(f"API URL:              {config.api_url}")
    print(f"Model:                {config.model_version}")
    print(f"Primary language:     {config.primary_language} ({config.primary_language.code})")
    print(f"Secondary language:   {config.secondary_language} ({config.secondary_language.code})")
    print(f"Selectable languages: {', '.join(lang.code for lang in config.selectable_languages)}")
    print(f"Last target:          {last} ({last.code})")


def main(argv=None):
    """Main entry point for ClipTrans."""
    args = build_parser().parse_args(argv)

    load_dotenv()
    setup_logging(args.config_dir)

    state = PreferenceState.load(ConfigStore(args.config_dir), LastSelectionStore(args.config_dir))

    if args.show_config:
        show_config(state)
        return 0

    if args.set_target:
        try:
            state.set_target_language(Language.parse(args.set_target))
        except (UnknownLanguageError, ValueError, WriteFailed) as e:
            logging.error(f"Could not set target language: {e}")
            return 1
        print(state.last_language.code)
        return 0

    detector = LangdetectDetector(Language.all_languages())
    orchestrator = SelectionOrchestrator(state, detector, detection_timeout=args.timeout)

    if args.once:
        text = ClipboardManager.get_text()
        if not text.strip():
            logging.warning("Clipboard text is empty.")
            return 1
        target, _ = handle_text(orchestrator, text)
        print(target.code)
        return 0

    monitor = ClipboardMonitor(lambda text: handle_text(orchestrator, text), interval=args.interval)
    monitor.prime()
    monitor.start()
    try:
        while monitor.is_running():
            time.sleep(0.5)
    except KeyboardInterrupt:
        logging.info("Stopping")
    finally:
        monitor.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
