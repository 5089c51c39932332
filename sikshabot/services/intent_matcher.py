"""
Rule-based intent/FAQ matcher.
Scores a chat message against a static corpus and picks a reply:
1. Best-scoring intent pattern above the intent threshold -> random response
2. Best-scoring FAQ question above the FAQ threshold -> fixed answer
3. Otherwise -> fallback reply
"""
import random
from typing import List, Optional, Tuple
from sikshabot.core.config import settings
from sikshabot.core.logging_config import logger
from sikshabot.models.corpus import Corpus, FAQEntry, Intent
from sikshabot.models.schemas import MatchResult, MatchSource
from sikshabot.services.text_similarity import normalize, similarity


FALLBACK_RESPONSE = (
    "I'm not sure I understand. Could you rephrase that? "
    "You can also contact support at support@sikshamantra.com for more help."
)

SUGGESTIONS = (
    "How do I register as a student?",
    "How to upload courses?",
    "How do meetings work?",
    "What is Siksha Mantra?",
    "How to post a request?",
)


class IntentMatcher:
    """Answers messages from an immutable corpus. Safe to share across requests."""

    def __init__(
        self,
        corpus: Corpus,
        rng: Optional[random.Random] = None,
        intent_threshold: Optional[float] = None,
        faq_threshold: Optional[float] = None
    ):
        """
        Args:
            corpus: Loaded corpus; never mutated by the matcher
            rng: Random source used for response selection (anything with `choice`)
            intent_threshold: Exclusive minimum score for an intent match
            faq_threshold: Exclusive minimum score for an FAQ match
        """
        self.corpus = corpus
        self.rng = rng if rng is not None else random.Random(settings.random_seed)
        self.intent_threshold = settings.intent_threshold if intent_threshold is None else intent_threshold
        self.faq_threshold = settings.faq_threshold if faq_threshold is None else faq_threshold

    def _best_intent(self, message: str) -> Tuple[Optional[Intent], float]:
        normalized_message = normalize(message)
        best_match = None
        best_score = 0.0

        for intent in self.corpus.intents:
            for pattern in intent.patterns:
                score = similarity(normalized_message, normalize(pattern))
                # Strict comparison: the earliest pattern keeps a tied maximum
                if score > best_score:
                    best_score = score
                    best_match = intent

        return best_match, best_score

    def _best_faq(self, message: str) -> Tuple[Optional[FAQEntry], float]:
        normalized_message = normalize(message)
        best_match = None
        best_score = 0.0

        for entry in self.corpus.faq:
            score = similarity(normalized_message, normalize(entry.question))
            if score > best_score:
                best_score = score
                best_match = entry

        return best_match, best_score

    def resolve_intent(self, message: str) -> Optional[Intent]:
        """Return the best-matching intent, or None if its score does not exceed the intent threshold."""
        intent, score = self._best_intent(message)
        return intent if score > self.intent_threshold else None

    def resolve_faq(self, message: str) -> Optional[FAQEntry]:
        """Return the best-matching FAQ entry, or None if its score does not exceed the FAQ threshold."""
        entry, score = self._best_faq(message)
        return entry if score > self.faq_threshold else None

    def match(self, message: str) -> MatchResult:
        """
        Resolve a message to a reply, recording which resolver produced it.

        Args:
            message: Raw user message (any string, including empty)

        Returns:
            MatchResult with reply text, source and winning score
        """
        intent, intent_score = self._best_intent(message)
        if intent is not None and intent_score > self.intent_threshold:
            response = self.rng.choice(intent.responses)
            logger.info(f"[IntentMatcher] Intent match tag={intent.tag} score={intent_score:.2f}")
            return MatchResult(
                response=response,
                source=MatchSource.INTENT,
                score=intent_score,
                intent_tag=intent.tag
            )

        entry, faq_score = self._best_faq(message)
        if entry is not None and faq_score > self.faq_threshold:
            logger.info(f"[IntentMatcher] FAQ match score={faq_score:.2f}: {entry.question[:60]}")
            return MatchResult(response=entry.answer, source=MatchSource.FAQ, score=faq_score)

        logger.info(
            f"[IntentMatcher] No match (intent={intent_score:.2f}, faq={faq_score:.2f}), using fallback"
        )
        return MatchResult(response=FALLBACK_RESPONSE, source=MatchSource.FALLBACK)

    def get_response(self, message: str) -> str:
        """Reply text for a message; always a string."""
        return self.match(message).response

    def get_suggestions(self) -> List[str]:
        """Example questions shown to users before they type."""
        return list(SUGGESTIONS)
