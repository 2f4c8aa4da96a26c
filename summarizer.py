import json
import logging

import requests

from errors import SummarizationError, SummarizationTimeout

logger = logging.getLogger(__name__)

PROMPT_PREAMBLE = "Summarize this business data:\n"


def build_prompt(records):
    """Compose the prompt sent to the model for a parsed dataset."""
    return PROMPT_PREAMBLE + json.dumps(records, indent=2, ensure_ascii=False)


class Summarizer:
    def __init__(self, config, http=requests):
        """
        Args:
            config (Config): Model, credential and timeout settings
            http: Object with a requests-style post(), the requests
                module by default
        """
        self.config = config
        self.http = http

        if not config.hf_api_key:
            logger.warning("HF_API_KEY is not set, summarization requests will likely be rejected")

        logger.info("Summarization initialized using model: %s", config.hf_model)

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.config.hf_api_key}",
            "Content-Type": "application/json",
        }

    def summarize(self, text):
        """
        Summarize text with the hosted inference API.

        Args:
            text (str): Text to summarize

        Returns:
            str: The summary_text of the first element of the response

        Raises:
            SummarizationTimeout: If the provider did not answer in time
            SummarizationError: On any other transport failure or if the
                response does not have the expected shape
        """
        try:
            response = self.http.post(
                self.config.model_url,
                json={"inputs": text},
                headers=self._headers(),
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
        except requests.Timeout as e:
            logger.error("Summarization timed out after %ss: %s", self.config.request_timeout, e)
            raise SummarizationTimeout(
                f"Summarization timed out after {self.config.request_timeout:g} seconds"
            ) from e
        except requests.RequestException as e:
            body = e.response.text if e.response is not None else None
            logger.error("Summarization error: %s", body or e)
            raise SummarizationError(f"Summarization failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            logger.error("Summarization provider returned a non-JSON body: %r", response.text[:200])
            raise SummarizationError("Summarization failed: provider returned invalid JSON") from e

        return self._extract_summary(result)

    @staticmethod
    def _extract_summary(result):
        if isinstance(result, list) and result and isinstance(result[0], dict):
            summary = result[0].get("summary_text")
            if isinstance(summary, str) and summary:
                return summary

        logger.error("Unexpected response from summarization provider: %r", result)
        raise SummarizationError("Unexpected response from summarization provider")
