"""
Shared pytest fixtures: a small corpus and deterministic random sources.
"""
import pytest
from sikshabot.models.corpus import Corpus, FAQEntry, Intent
from sikshabot.services.intent_matcher import IntentMatcher


class LastChoice:
    """Random source stub that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


class FirstChoice:
    def choice(self, seq):
        return seq[0]


@pytest.fixture
def corpus():
    return Corpus(
        intents=(
            Intent(
                tag="register_student",
                patterns=("how do i register as a student", "student sign up"),
                responses=("Visit /register and choose Student.",)
            ),
            Intent(
                tag="greeting",
                patterns=("hello there", "good morning"),
                responses=("Hello!", "Hi there!", "Namaste!")
            ),
        ),
        faq=(
            FAQEntry(
                question="how do i reset my password",
                answer="Use the Forgot Password link on the login page."
            ),
            FAQEntry(
                question="what payment methods are accepted",
                answer="Payments are processed through eSewa."
            ),
        )
    )


@pytest.fixture
def last_choice():
    return LastChoice()


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def matcher(corpus, last_choice):
    return IntentMatcher(corpus, rng=last_choice)
