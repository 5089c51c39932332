"""
Tests for corpus loading and the empty-responses validation policy.
"""
import json
import pytest
from pydantic import ValidationError
from sikshabot.models.corpus import Intent
from sikshabot.services.corpus_loader import build_corpus, load_corpus
from sikshabot.services.intent_matcher import IntentMatcher
from sikshabot.utils.exceptions import ChatbotException, CorpusLoadError, CorpusValidationError


VALID_DOCUMENT = {
    "intents": [
        {
            "tag": "register_student",
            "patterns": ["how do i register as a student"],
            "responses": ["Visit /register and choose Student."]
        }
    ],
    "faq": [
        {"question": "how do i reset my password", "answer": "Use Forgot Password."}
    ]
}


def test_build_corpus_preserves_order_and_content():
    corpus = build_corpus(VALID_DOCUMENT)
    assert corpus.intents[0].tag == "register_student"
    assert corpus.intents[0].patterns == ("how do i register as a student",)
    assert corpus.faq[0].answer == "Use Forgot Password."


def test_intent_with_empty_responses_is_rejected():
    document = {
        "intents": [{"patterns": ["hello"], "responses": []}],
        "faq": []
    }
    with pytest.raises(CorpusValidationError):
        build_corpus(document)


def test_intent_model_requires_a_response():
    with pytest.raises(ValidationError):
        Intent(patterns=("hello",), responses=())


def test_missing_collection_is_rejected():
    with pytest.raises(CorpusValidationError, match="faq"):
        build_corpus({"intents": []})


def test_non_object_document_is_rejected():
    with pytest.raises(CorpusValidationError):
        build_corpus(["not", "a", "corpus"])


def test_corpus_is_immutable():
    corpus = build_corpus(VALID_DOCUMENT)
    with pytest.raises(ValidationError):
        corpus.intents = ()
    with pytest.raises(ValidationError):
        corpus.faq[0].answer = "changed"


def test_load_corpus_from_json_file(tmp_path):
    path = tmp_path / "corpus.json"
    path.write_text(json.dumps(VALID_DOCUMENT), encoding="utf-8")

    corpus = load_corpus(path)
    assert len(corpus.intents) == 1
    assert IntentMatcher(corpus).get_response("How do I register as a student?") == "Visit /register and choose Student."


def test_load_corpus_missing_file(tmp_path):
    with pytest.raises(CorpusLoadError):
        load_corpus(tmp_path / "missing.json")


def test_load_corpus_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CorpusLoadError):
        load_corpus(path)


def test_loader_errors_share_base_exception(tmp_path):
    with pytest.raises(ChatbotException):
        load_corpus(tmp_path / "missing.json")


def test_bundled_corpus_answers_every_suggestion():
    matcher = IntentMatcher(load_corpus())
    for suggestion in matcher.get_suggestions():
        assert matcher.resolve_intent(suggestion) is not None, suggestion


def test_bundled_corpus_intents_all_have_responses():
    corpus = load_corpus()
    assert corpus.intents
    assert corpus.faq
    assert all(intent.responses for intent in corpus.intents)
