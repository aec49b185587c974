import json
import unittest

import httpx

from backend.app.gemini_client import GeminiClient, UnexpectedResponseError
from backend.app.settings import Settings


def _ok(text):
	return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]})


class TestGeminiClient(unittest.IsolatedAsyncioTestCase):
	async def test_ai_studio_sends_key_in_header(self):
		seen = {}

		def handler(request: httpx.Request) -> httpx.Response:
			seen["url"] = request.url
			seen["headers"] = request.headers
			seen["body"] = json.loads(request.content)
			return _ok("hello")

		client = GeminiClient("secret", transport=httpx.MockTransport(handler))
		try:
			text = await client.generate("prompt text")
		finally:
			await client.aclose()

		self.assertEqual(text, "hello")
		self.assertEqual(seen["headers"]["x-goog-api-key"], "secret")
		self.assertNotIn("key", seen["url"].params)
		self.assertIn("gemini-2.5-flash:generateContent", seen["url"].path)
		self.assertEqual(seen["body"], {"contents": [{"parts": [{"text": "prompt text"}]}]})

	async def test_vertex_sends_key_in_header(self):
		seen = {}

		def handler(request: httpx.Request) -> httpx.Response:
			seen["url"] = request.url
			seen["headers"] = request.headers
			return _ok("hi")

		client = GeminiClient(
			"secret",
			provider="vertex",
			vertex_region="asia-northeast3",
			vertex_project="demo",
			transport=httpx.MockTransport(handler),
		)
		try:
			await client.generate("p")
		finally:
			await client.aclose()

		self.assertEqual(seen["headers"]["x-goog-api-key"], "secret")
		self.assertEqual(seen["url"].host, "asia-northeast3-aiplatform.googleapis.com")
		self.assertNotIn("key", seen["url"].params)

	async def test_http_error_status_raises(self):
		client = GeminiClient("secret", transport=httpx.MockTransport(lambda r: httpx.Response(503)))
		try:
			with self.assertRaises(httpx.HTTPStatusError):
				await client.generate("p")
		finally:
			await client.aclose()

	async def test_missing_text_raises_unexpected_response(self):
		body = {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]}
		client = GeminiClient("secret", transport=httpx.MockTransport(lambda r: httpx.Response(200, json=body)))
		try:
			with self.assertRaises(UnexpectedResponseError):
				await client.generate("p")
		finally:
			await client.aclose()

	async def test_non_string_text_raises_unexpected_response(self):
		client = GeminiClient("secret", transport=httpx.MockTransport(lambda r: _ok(42)))
		try:
			with self.assertRaises(UnexpectedResponseError):
				await client.generate("p")
		finally:
			await client.aclose()

	async def test_from_settings_copies_configuration(self):
		settings = Settings(GEMINI_API_KEY="k", GEMINI_MODEL="gemini-2.5-pro", GEMINI_PROVIDER="ai_studio")
		client = GeminiClient.from_settings(settings)
		try:
			self.assertEqual(client.api_key, "k")
			self.assertEqual(client.model, "gemini-2.5-pro")
			self.assertIn("gemini-2.5-pro", client.base_url)
		finally:
			await client.aclose()


class TestGeminiClientConfig(unittest.TestCase):
	def test_missing_key_is_rejected(self):
		with self.assertRaises(ValueError):
			GeminiClient(None)
		with self.assertRaises(ValueError):
			GeminiClient("")


if __name__ == "__main__":
	unittest.main()
