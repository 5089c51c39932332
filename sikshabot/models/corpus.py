"""
Pydantic models for the chatbot corpus (intents and FAQ entries).
The corpus is loaded once and is read-only afterwards.
"""
from pydantic import BaseModel, Field
from typing import Optional, Tuple


class Intent(BaseModel):
    """A conversational purpose: example phrasings plus candidate replies."""
    tag: Optional[str] = Field(default=None, description="Optional label used in logs and API metadata")
    patterns: Tuple[str, ...] = Field(default=(), description="Example phrases a user might send")
    responses: Tuple[str, ...] = Field(..., min_length=1, description="Candidate replies, at least one")

    class Config:
        frozen = True


class FAQEntry(BaseModel):
    """A fixed question/answer pair consulted when no intent matches."""
    question: str = Field(..., description="Canonical question")
    answer: str = Field(..., description="Reply returned verbatim")

    class Config:
        frozen = True


class Corpus(BaseModel):
    """Intents and FAQ entries in declared order."""
    intents: Tuple[Intent, ...] = Field(default=(), description="Intents, scanned first")
    faq: Tuple[FAQEntry, ...] = Field(default=(), description="FAQ entries, scanned when no intent matches")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "intents": [
                    {
                        "tag": "register_student",
                        "patterns": ["how do i register as a student"],
                        "responses": ["Visit /register and choose Student."]
                    }
                ],
                "faq": [
                    {
                        "question": "what payment methods are accepted",
                        "answer": "Payments are processed through eSewa."
                    }
                ]
            }
        }

    @property
    def is_empty(self) -> bool:
        return not self.intents and not self.faq
