"""Dependency-free text processor standing in for a language model.

`SimpleTextProcessor` builds extractive summaries from word frequencies and
answers questions by returning context sentences that mention the
question's keywords. Module-level helpers delegate to a shared instance.
"""
import logging
import re
import string
from collections import Counter
from typing import Any, Dict, List

from configuration import SUMMARY_SENTENCES

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r'[.!?]+')
MIN_KEYWORD_LENGTH = 4
NO_ANSWER = "I couldn't find specific information in the documents to answer your question."
SUMMARY_FAILED = "Summary generation failed."


def split_sentences(text: str) -> List[str]:
    return [s for s in SENTENCE_SPLIT.split(text) if s.strip()]


class SimpleTextProcessor:
    model_name = "Simple Text Processor"

    def __init__(self, summary_sentences: int = SUMMARY_SENTENCES):
        self.summary_sentences = summary_sentences
        logger.info("Simple text processor initialized (no external model)")

    def _summarize(self, text: str) -> str:
        sentences = split_sentences(text)
        if not sentences:
            return ""

        word_freq = Counter(w for w in text.lower().split() if len(w) >= MIN_KEYWORD_LENGTH)

        scored = [
            (sentence.strip(), sum(word_freq.get(word, 0) for word in sentence.lower().split()))
            for sentence in sentences
        ]
        top = sorted(scored, key=lambda item: item[1], reverse=True)[:min(self.summary_sentences, len(sentences))]
        return '. '.join(sentence for sentence, _ in top) + '.'

    def generate_summary(self, text: str) -> str:
        """Pick the highest-scoring sentences by summed word frequency."""
        try:
            return self._summarize(text)
        except Exception as e:
            logger.error(f"Error generating summary: {e}")
            return SUMMARY_FAILED

    def answer_question(self, question: str, context: str) -> str:
        keywords = [
            word for word in (w.strip(string.punctuation) for w in question.lower().split())
            if len(word) >= MIN_KEYWORD_LENGTH
        ]

        relevant = [
            sentence.strip() for sentence in split_sentences(context)
            if any(word in sentence.lower() for word in keywords)
        ]
        if not relevant:
            return NO_ANSWER

        return ' '.join(f"{sentence}." for sentence in relevant[:2])

    def model_status(self) -> Dict[str, Any]:
        return {
            "available": True,
            "model": self.model_name,
            "response": "Hello, I am working correctly with basic text processing.",
        }


_processor = SimpleTextProcessor()


def generate_summary(text: str) -> str:
    return _processor.generate_summary(text)


def answer_question(question: str, context: str) -> str:
    return _processor.answer_question(question, context)


def model_status() -> Dict[str, Any]:
    return _processor.model_status()
