from __future__ import annotations
from typing import Optional


UNKNOWN_ERROR_MESSAGE = "API 호출 중 알 수 없는 오류가 발생했습니다."


class AnalysisError(Exception):
	"""Base class for failures while analyzing a formula."""


class ServiceError(AnalysisError):
	"""The Gemini call failed. The original exception is kept on ``cause``."""

	def __init__(self, cause: BaseException) -> None:
		super().__init__(str(cause) or cause.__class__.__name__)
		self.cause = cause


class UnknownServiceError(AnalysisError):
	def __init__(self, message: str = UNKNOWN_ERROR_MESSAGE, *, cause: Optional[BaseException] = None) -> None:
		super().__init__(message)
		self.cause = cause
