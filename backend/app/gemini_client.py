from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, Optional
from .settings import Settings

logger = logging.getLogger(__name__)


class UnexpectedResponseError(RuntimeError):
	"""Gemini answered, but the body had no text payload we recognize."""


class GeminiClient:
	def __init__(
		self,
		api_key: Optional[str],
		*,
		model: str = "gemini-2.5-flash",
		provider: str = "ai_studio",
		vertex_region: str = "us-central1",
		vertex_project: Optional[str] = None,
		base_url: Optional[str] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		if not api_key:
			raise ValueError("GEMINI_API_KEY is not configured")
		self.api_key = api_key
		self.model = model
		self.provider = provider
		if self.provider == "vertex":
			project = vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint
			self.base_url = base_url or (
				f"https://{vertex_region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{vertex_region}/publishers/google/models/{self.model}:generateContent"
			)
		else:
			# Google AI Studio (Generative Language API)
			self.base_url = base_url or f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"
		self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

	@classmethod
	def from_settings(cls, settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GeminiClient":
		return cls(
			settings.gemini_api_key,
			model=settings.gemini_model,
			provider=settings.gemini_provider,
			vertex_region=settings.vertex_region,
			vertex_project=settings.vertex_project,
			timeout=settings.gemini_timeout_seconds,
			transport=transport,
		)

	async def generate(self, prompt: str) -> str:
		payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
		return await self._post_payload(payload)

	async def _post_payload(self, payload: Dict[str, Any]) -> str:
		# Key stays out of the URL so it never shows up in HTTPStatusError messages
		headers: Dict[str, str] = {"x-goog-api-key": self.api_key}
		logger.debug("POST %s (model=%s, provider=%s)", self.base_url, self.model, self.provider)
		r = await self._client.post(self.base_url, headers=headers, json=payload)
		r.raise_for_status()
		try:
			data = r.json()
			text = data["candidates"][0]["content"]["parts"][0]["text"]
		except (ValueError, KeyError, IndexError, TypeError) as err:
			raise UnexpectedResponseError(f"Unexpected Gemini response: {r.text}") from err
		if not isinstance(text, str):
			raise UnexpectedResponseError(f"Unexpected Gemini response: {r.text}")
		return text

	async def aclose(self) -> None:
		await self._client.aclose()
