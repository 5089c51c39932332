"""
Corpus loading and validation.
Reads the intent/FAQ corpus from a JSON file, or falls back to the bundled corpus.
"""
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
from pydantic import ValidationError
from sikshabot.core.config import settings
from sikshabot.core.logging_config import logger
from sikshabot.data.chatbot_data import CHATBOT_DATA
from sikshabot.models.corpus import Corpus
from sikshabot.utils.exceptions import CorpusLoadError, CorpusValidationError


def build_corpus(data: Dict[str, Any]) -> Corpus:
    """
    Validate a parsed corpus document.

    Args:
        data: Dict with `intents` and `faq` collections

    Returns:
        Immutable Corpus

    Raises:
        CorpusValidationError: If the document is malformed, including any
            intent with an empty responses list
    """
    if not isinstance(data, dict):
        raise CorpusValidationError("Corpus document must be a JSON object")

    missing = [key for key in ("intents", "faq") if key not in data]
    if missing:
        raise CorpusValidationError(f"Corpus document missing keys: {', '.join(missing)}")

    try:
        corpus = Corpus.model_validate(data)
    except ValidationError as e:
        raise CorpusValidationError(f"Invalid corpus: {e}") from e

    logger.info(f"[CorpusLoader] Loaded {len(corpus.intents)} intents and {len(corpus.faq)} FAQ entries")
    return corpus


def load_corpus(path: Optional[Union[str, Path]] = None) -> Corpus:
    """
    Load the chatbot corpus.

    Args:
        path: JSON corpus file; defaults to settings.corpus_path, then the bundled corpus

    Returns:
        Immutable Corpus

    Raises:
        CorpusLoadError: If the file cannot be read or is not valid JSON
        CorpusValidationError: If the document is structurally invalid
    """
    path = path or settings.corpus_path
    if not path:
        logger.info("[CorpusLoader] No corpus path configured, using bundled corpus")
        return build_corpus(CHATBOT_DATA)

    logger.info(f"[CorpusLoader] Reading corpus from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CorpusLoadError(f"Cannot read corpus file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CorpusLoadError(f"Corpus file {path} is not valid JSON: {e}") from e

    return build_corpus(data)
