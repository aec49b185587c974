from __future__ import annotations
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_validator

from ..composer import ClientFactory, default_client_factory
from ..controller import ErrorView, FormulaController, ResultView
from ..grades import DEFAULT_GRADE, GRADE_LEVELS, is_grade_level

router = APIRouter(prefix="/formula", tags=["formula"])


class AnalyzeRequest(BaseModel):
	grade: str = DEFAULT_GRADE
	formula: str

	@field_validator("grade")
	@classmethod
	def _known_grade(cls, value: str) -> str:
		if not is_grade_level(value):
			raise ValueError(f"grade must be one of: {', '.join(GRADE_LEVELS)}")
		return value


class BlockOut(BaseModel):
	kind: str
	text: str


class AnalyzeResponse(BaseModel):
	view: str
	message: Optional[str] = None
	blocks: List[BlockOut] = []


class GradesResponse(BaseModel):
	grades: List[str]
	default: str


def get_client_factory() -> ClientFactory:
	return default_client_factory


@router.get("/grades", response_model=GradesResponse)
def list_grades():
	return GradesResponse(grades=list(GRADE_LEVELS), default=DEFAULT_GRADE)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest, client_factory: ClientFactory = Depends(get_client_factory)):
	controller = FormulaController(grade=req.grade, client_factory=client_factory)
	controller.set_formula(req.formula)
	await controller.submit()

	view = controller.view()
	if isinstance(view, ResultView):
		body = AnalyzeResponse(view=view.kind, blocks=[BlockOut(**asdict(b)) for b in view.blocks])
		return body
	body = AnalyzeResponse(view=view.kind, message=getattr(view, "message", None))
	if isinstance(view, ErrorView):
		# Validation stays local; anything else means the Gemini call failed
		status_code = 400 if controller.invalid_input else 502
		return JSONResponse(status_code=status_code, content=body.model_dump())
	return body
