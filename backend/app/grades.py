GRADE_LEVELS: tuple[str, ...] = (
	"초등학교 1학년",
	"초등학교 2학년",
	"초등학교 3학년",
	"초등학교 4학년",
	"초등학교 5학년",
	"초등학교 6학년",
	"중학교 1학년",
	"중학교 2학년",
	"중학교 3학년",
	"고등학교 1학년",
	"고등학교 2학년",
	"고등학교 3학년",
)

# High school year 1
DEFAULT_GRADE = GRADE_LEVELS[9]


def is_grade_level(value: object) -> bool:
	return isinstance(value, str) and value in GRADE_LEVELS
