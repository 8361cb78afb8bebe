"""AI business insights via a text-generation service."""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from google import genai
from google.genai import types

from bizanalytics.config import Settings
from bizanalytics.domain.entities import ComputedMetrics, Transaction

logger = logging.getLogger(__name__)

MAX_SAMPLE_TRANSACTIONS = 50

MISSING_API_KEY_MESSAGE = (
    "API Key is missing. Please configure the environment variable API_KEY "
    "to use AI insights."
)
FAILURE_MESSAGE = "Failed to generate insights at this time. Please try again later."
EMPTY_RESPONSE_MESSAGE = "No insights generated."

PROMPT_TEMPLATE = """
Act as a senior business analyst. Analyze the following financial data for a business operating in Pakistan.

**Context:**
- Currency: PKR (Pakistani Rupee)
- Market: Pakistan

Data Summary:
{data_summary}

Please provide a concise but impactful analysis covering:
1. **Profitability Analysis**: Are they making money? What is the trend?
2. **Cost Drivers**: What is eating up the budget? (Product vs Marketing vs Other).
3. **ROI Insight**: Is the marketing spend justified based on the Marketing ROI?
4. **Actionable Recommendations**: 3 bullet points on how to improve net profit in the local market context.

Format the output with Markdown headers and bullet points. Keep it professional and encouraging.
"""


@dataclass(frozen=True)
class InsightRequest:
    """One request to the text-generation service."""

    model: str
    prompt: str
    # Skip extended reasoning for a quicker answer
    fast_mode: bool = True


class InsightClient(ABC):
    """Sends an InsightRequest and returns the generated text."""

    @abstractmethod
    def generate(self, request: InsightRequest) -> Optional[str]:
        pass


class GeminiInsightClient(InsightClient):
    """InsightClient backed by the Google Gemini API."""

    def __init__(self, api_key: str):
        self._client = genai.Client(api_key=api_key)

    def generate(self, request: InsightRequest) -> Optional[str]:
        config = None
        if request.fast_mode:
            config = types.GenerateContentConfig(
                thinking_config=types.ThinkingConfig(thinking_budget=0)
            )
        response = self._client.models.generate_content(
            model=request.model,
            contents=request.prompt,
            config=config,
        )
        return response.text


def build_data_summary(
    transactions: Sequence[Transaction], metrics: ComputedMetrics
) -> str:
    """Serialize metrics and the first transactions as JSON for the prompt."""
    recent = transactions[:MAX_SAMPLE_TRANSACTIONS]
    return json.dumps(
        {
            "metrics": metrics.to_dict(),
            "recentSampleData": [txn.to_dict() for txn in recent],
        }
    )


def build_insight_prompt(
    transactions: Sequence[Transaction], metrics: ComputedMetrics
) -> str:
    """Return the analyst prompt for a transaction collection."""
    return PROMPT_TEMPLATE.format(data_summary=build_data_summary(transactions, metrics))


class InsightService:
    """Service requesting a written analysis of the current data."""

    def __init__(
        self,
        settings: Settings,
        client_factory: Callable[[str], InsightClient] = GeminiInsightClient,
    ):
        """Initialize insight service.

        Args:
            settings: Settings carrying the API key and model name
            client_factory: Builds a client from an API key
        """
        self.settings = settings
        self.client_factory = client_factory

    def build_request(
        self, transactions: Sequence[Transaction], metrics: ComputedMetrics
    ) -> InsightRequest:
        return InsightRequest(
            model=self.settings.model,
            prompt=build_insight_prompt(transactions, metrics),
        )

    def generate_business_insights(
        self, transactions: Sequence[Transaction], metrics: ComputedMetrics
    ) -> str:
        """Ask the text-generation service for a business analysis.

        Never raises: a missing API key and request failures both come back
        as explanatory text.

        Args:
            transactions: Current transactions; only the first 50 are sent
            metrics: Metrics computed from the same transactions

        Returns:
            Generated analysis, or a missing-key or failure message
        """
        if not self.settings.insights_enabled:
            logger.warning("Insights requested without API_KEY configured")
            return MISSING_API_KEY_MESSAGE

        request = self.build_request(transactions, metrics)
        logger.info(
            "Requesting insights from %s (%d transactions sent)",
            request.model,
            min(len(transactions), MAX_SAMPLE_TRANSACTIONS),
        )
        try:
            client = self.client_factory(self.settings.api_key)
            text = client.generate(request)
        except Exception:
            logger.exception("Error generating insights")
            return FAILURE_MESSAGE

        return text or EMPTY_RESPONSE_MESSAGE
