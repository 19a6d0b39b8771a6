"""
Question-answering prompt.

Grounded prompt template, the fixed fallback sentences the model is told to
use, and helpers for context assembly, token estimation and answer cleanup.

Dependencies: langchain_core
System role: Prompt construction for the answering pass
"""

import math
import re

from langchain_core.prompts import PromptTemplate

NO_CONTEXT_PLACEHOLDER = "No relevant context found in the provided document for this question."
ANSWER_NOT_FOUND = "The answer to this question is not found in the provided document."
OUT_OF_SCOPE = "This question is outside the scope of the provided document."
CONTEXT_SEPARATOR = "\n\n---\n\n"

# Rough chars-per-token ratio used for the input size warning
CHARS_PER_TOKEN = 4

_ENUMERATION_PREFIX = re.compile(r"^\d+\.\s*")

QA_TEMPLATE = """**Context from the document:**
---
{context}
---

**Your Task:**
You are an expert assistant. Your goal is to carefully read the provided "Context from the document" and accurately answer the user's question.

**Instructions:**
1. Your answer must be based **exclusively** on the information within the provided document context. Do not use any external knowledge.
2. Answer the question directly and concisely.
3. If the answer to the specific question is not found in the document, you **must** state: "{answer_not_found}"
4. If the question is completely unrelated to the document's content, you **must** state: "{out_of_scope}"

**Answer the following question based on the rules above:**
{question}
"""

QA_PROMPT = PromptTemplate.from_template(QA_TEMPLATE).partial(
    answer_not_found=ANSWER_NOT_FOUND,
    out_of_scope=OUT_OF_SCOPE,
)


def build_context(texts: list[str]) -> str:
    """Join retrieved chunk texts, or return the placeholder when there are none."""
    if not texts:
        return NO_CONTEXT_PLACEHOLDER
    return CONTEXT_SEPARATOR.join(texts)


def build_prompt(context_texts: list[str], question: str) -> str:
    """
    Render the grounded QA prompt.

    Args:
        context_texts: Retrieved chunk texts, best match first
        question: User question

    Returns:
        str: Prompt text ready for the chat model
    """
    return QA_PROMPT.format(context=build_context(context_texts), question=question)


def estimate_tokens(text: str) -> int:
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def clean_answer(text: str) -> str:
    """Trim the answer and drop a leading list enumeration such as "1. "."""
    return _ENUMERATION_PREFIX.sub("", text.strip(), count=1)
