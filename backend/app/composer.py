"""
Prompt composition and the single Gemini call behind a formula analysis.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

import httpx

from .errors import ServiceError, UnknownServiceError
from .gemini_client import GeminiClient, UnexpectedResponseError
from .settings import get_settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], GeminiClient]


def default_client_factory() -> GeminiClient:
	# Settings are loaded per call; the key is never cached between requests
	return GeminiClient.from_settings(get_settings())


def build_prompt(grade: str, formula: str) -> str:
	# grade and formula are inserted as-is; nothing is escaped
	return (
		"너는 한국 학생들을 위한 친절하고 전문적인 수학 선생님이야.\n"
		f"현재 '{grade}' 학생이 다음 공식에 대해 질문했어:\n\n"
		f"`{formula}`\n\n"
		"아래 구조에 맞춰 한국어로, 마크다운 형식으로 답변해줘. 각 섹션 제목 앞에는 이모지를 꼭 붙여줘.\n\n"
		"### 📝 공식 이름\n"
		"이 공식의 정확한 이름을 알려줘. (예: 피타고라스의 정리)\n\n"
		"### 📖 설명\n"
		f"이 공식이 무엇을 의미하는지, 어떤 상황에서 사용되는지 '{grade}' 학생이 이해하기 쉽게 설명해줘.\n\n"
		"### 🧮 예시\n"
		"이 공식을 사용하여 문제를 해결하는 간단하고 단계별 예시를 보여줘. 숫자와 과정을 명확하게 보여줘.\n\n"
		"### 🔗 관련 개념\n"
		"학생이 함께 배우면 좋을 다른 관련 수학 개념들을 간략하게 언급해줘.\n\n"
		"전체적으로 학생에게 용기를 주는 친절한 말투를 사용해줘. "
		"예를 들어, \"이 공식은 처음엔 어려워 보일 수 있지만, 함께 차근차근 알아보면 금방 익숙해질 거예요!\" "
		"같은 문장으로 시작해봐."
	)


async def request_analysis(grade: str, formula: str, client_factory: Optional[ClientFactory] = None) -> str:
	"""Send one analysis request and return the generated text.

	A new client is built from ``client_factory`` for every call. Transport,
	HTTP status and configuration failures raise :class:`ServiceError` with the
	original exception attached; a reply without a text payload raises
	:class:`UnknownServiceError`. Anything else is logged and re-raised
	untouched.
	"""
	factory = client_factory or default_client_factory
	prompt = build_prompt(grade, formula)
	client: Optional[GeminiClient] = None
	try:
		client = factory()
		return await client.generate(prompt)
	except UnexpectedResponseError as err:
		logger.error("Error calling Gemini API: %s", err)
		raise UnknownServiceError(cause=err) from err
	except (httpx.HTTPError, ValueError) as err:
		logger.error("Error calling Gemini API: %r", err)
		raise ServiceError(err) from err
	except Exception as err:
		logger.error("Error calling Gemini API: %r", err)
		raise
	finally:
		if client is not None:
			await client.aclose()
