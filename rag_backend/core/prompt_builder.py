"""
Prompt construction for retrieval-augmented answers.

Concatenates retrieved context into the generation prompt. When no context
is available the prompt tells the model to answer without inventing
context and to admit missing information.

Dependencies: None
System role: Prompt contract between retrieval and generation
"""

from collections.abc import Sequence

CONTEXT_SEPARATOR = "\n\n"

CONTEXT_PROMPT_TEMPLATE = (
    "Use the following context to answer the question:\n\n"
    "{context}\n\n"
    "Question: {question}"
)

NO_CONTEXT_PROMPT_TEMPLATE = (
    "Answer the question directly:\n\n"
    "{question}\n\n"
    "No reference documents are available for this question. Do not invent "
    "sources or context. If the question depends on specific documents, news "
    "or facts you cannot verify, say \"I don't have information about that\"."
)


def format_context(contexts: Sequence[str]) -> str:
    """Join context passages, skipping blank ones."""
    return CONTEXT_SEPARATOR.join(text.strip() for text in contexts if text and text.strip())


def build_prompt(question: str, contexts: Sequence[str]) -> str:
    """
    Build the generation prompt for a question.

    Args:
        question: User question
        contexts: Retrieved document texts, nearest first

    Returns:
        str: Prompt with context, or the no-context instruction prompt
    """
    context = format_context(contexts)
    if context:
        return CONTEXT_PROMPT_TEMPLATE.format(context=context, question=question)
    return NO_CONTEXT_PROMPT_TEMPLATE.format(question=question)
