"""
State owner for the formula form: grade selection, formula text, and the
single in-flight analysis request.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Literal, Optional, Union

from .composer import ClientFactory, request_analysis
from .grades import DEFAULT_GRADE, is_grade_level
from .rendering import Block, render_result

logger = logging.getLogger(__name__)

EMPTY_FORMULA_MESSAGE = "분석할 공식을 입력해주세요."
ANALYSIS_FAILED_MESSAGE = "공식 분석 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요."
LOADING_MESSAGE = "AI가 공식을 분석하고 있습니다..."
EMPTY_PROMPT_MESSAGE = "궁금한 수학 공식을 입력하고 AI 분석을 시작하세요!"
SUBMIT_LABEL = "AI로 분석하기"
SUBMIT_LABEL_LOADING = "분석 중..."

Analyzer = Callable[[str, str, Optional[ClientFactory]], Awaitable[str]]
Phase = Literal["idle", "loading", "success", "failure"]


@dataclass(frozen=True)
class LoadingView:
	message: str = LOADING_MESSAGE
	kind: Literal["loading"] = "loading"


@dataclass(frozen=True)
class ErrorView:
	message: str
	kind: Literal["error"] = "error"


@dataclass(frozen=True)
class ResultView:
	blocks: list[Block] = field(default_factory=list)
	kind: Literal["result"] = "result"


@dataclass(frozen=True)
class EmptyView:
	message: str = EMPTY_PROMPT_MESSAGE
	kind: Literal["empty"] = "empty"


View = Union[LoadingView, ErrorView, ResultView, EmptyView]


class FormulaController:
	def __init__(
		self,
		*,
		grade: str = DEFAULT_GRADE,
		client_factory: Optional[ClientFactory] = None,
		analyze: Analyzer = request_analysis,
	) -> None:
		self.grade = DEFAULT_GRADE
		self.select_grade(grade)
		self.formula = ""
		self.result = ""
		self.error: Optional[str] = None
		self.loading = False
		# True when the current error came from a blank formula, not the service
		self.invalid_input = False
		self._client_factory = client_factory
		self._analyze = analyze

	def select_grade(self, grade: str) -> None:
		if not is_grade_level(grade):
			raise ValueError(f"unknown grade level: {grade!r}")
		self.grade = grade

	def set_formula(self, text: str) -> None:
		self.formula = text

	@property
	def can_submit(self) -> bool:
		return not self.loading and bool(self.formula.strip())

	@property
	def submit_label(self) -> str:
		return SUBMIT_LABEL_LOADING if self.loading else SUBMIT_LABEL

	@property
	def phase(self) -> Phase:
		if self.loading:
			return "loading"
		if self.error:
			return "failure"
		if self.result:
			return "success"
		return "idle"

	async def submit(self) -> None:
		if self.loading:
			# The submit control is disabled while a request is outstanding
			logger.debug("submit ignored: a request is already in flight")
			return
		if not self.formula.strip():
			self.error = EMPTY_FORMULA_MESSAGE
			self.invalid_input = True
			return

		self.error = None
		self.invalid_input = False
		self.result = ""
		self.loading = True
		try:
			self.result = await self._analyze(self.grade, self.formula, self._client_factory)
		except Exception:
			logger.exception("Formula analysis failed (grade=%s)", self.grade)
			self.error = ANALYSIS_FAILED_MESSAGE
			self.result = ""
		finally:
			self.loading = False

	def view(self) -> View:
		if self.loading:
			return LoadingView()
		if self.error:
			return ErrorView(self.error)
		if self.result:
			return ResultView(render_result(self.result))
		return EmptyView()
