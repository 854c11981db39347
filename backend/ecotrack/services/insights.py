"""
LLM-generated commentary for a dashboard.

The dashboard's monthly summaries are serialized to JSON and sent to the
Gemini generateContent endpoint. The reply is treated as opaque display text.
"""
import json
import logging
from typing import Optional, Sequence

import httpx

from ecotrack.config import settings
from ecotrack.schemas.dashboard import MonthSummary

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "You are a sustainability analyst for a facilities-management team.\n"
    "Review the monthly data for {label} below and reply with three short, "
    "practical insights covering trends, anomalies and savings opportunities. "
    "Plain text, no markdown tables.\n\n"
    "Data (JSON):\n{context}"
)


class InsightError(Exception):
    """The insight service failed or returned something unusable."""


class InsightNotConfigured(InsightError):
    """No API key configured."""


def build_context(months: Sequence[MonthSummary]) -> str:
    return json.dumps([m.model_dump(exclude_none=True) for m in months], ensure_ascii=False)


class InsightClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.insight_timeout
        self.transport = transport

    async def summarize(self, context: str, label: str) -> str:
        if not self.api_key:
            raise InsightNotConfigured("Insights are not configured (missing GEMINI_API_KEY)")

        url = f"{self.base_url}/{self.model}:generateContent"
        payload = {
            "contents": [
                {"parts": [{"text": PROMPT_TEMPLATE.format(label=label, context=context)}]}
            ]
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    url,
                    params={"key": self.api_key},
                    json=payload,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logger.error(f"Insight request for '{label}' failed: {e}")
            raise InsightError(f"Insight request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"Insight API returned {response.status_code} for '{label}'")
            raise InsightError(f"Insight API error: {response.status_code}")

        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise InsightError(f"Failed to parse insight response: {e}") from e

        if not isinstance(text, str):
            raise InsightError("Insight response text is not a string")

        return text.strip()

    async def summarize_months(self, months: Sequence[MonthSummary], label: str) -> str:
        return await self.summarize(build_context(months), label)
