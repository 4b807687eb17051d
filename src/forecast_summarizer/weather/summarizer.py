"""Turns simplified forecast periods into a prose summary with a chat model."""

from __future__ import annotations

from typing import Dict, List, Sequence

import openai
import structlog

from .errors import SummarizeError
from .models import FewShotExample, SimplifiedForecastPeriod, SimplifiedForecastPeriods
from .prompts import FEW_SHOT_EXAMPLE, SYSTEM_PROMPT

logger = structlog.get_logger(__name__)


def build_messages(
    periods: Sequence[SimplifiedForecastPeriod],
    example: FewShotExample = FEW_SHOT_EXAMPLE,
) -> List[Dict[str, str]]:
    """Return the system prompt, the few-shot pair and the request's periods as JSON."""
    query = SimplifiedForecastPeriods.dump_json(list(periods)).decode()
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": example.input},
        {"role": "assistant", "content": example.output},
        {"role": "user", "content": query},
    ]


class Summarizer:
    """Chat-completion client for an Ollama server's OpenAI-compatible API.

    The model's reply is returned verbatim; it is asked for a JSON object
    with a ``summary`` key but is not re-validated here.
    """

    def __init__(self, client: openai.AsyncOpenAI, model: str) -> None:
        self.client = client
        self.model = model

    @classmethod
    def connect(cls, base_url: str, model: str) -> "Summarizer":
        # Ollama ignores the key, the client just requires one
        return cls(openai.AsyncOpenAI(base_url=base_url, api_key="ollama"), model)

    async def summarize(self, periods: Sequence[SimplifiedForecastPeriod]) -> str:
        messages = build_messages(periods)
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            logger.error("chat completion failed", model=self.model, error=str(e))
            raise SummarizeError(SummarizeError.Kind.SERVICE_ERROR, str(e)) from e

        content = resp.choices[0].message.content if resp.choices else None
        if content is None:
            logger.error("chat completion returned no message", model=self.model)
            raise SummarizeError(SummarizeError.Kind.SERVICE_ERROR, "no message")
        return content
