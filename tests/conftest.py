import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import exam_latex_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_latex_toolkit.core.models import (  # noqa: E402
    ChoiceOption,
    MediaImage,
    Paper,
    PaperSection,
    Question,
    QuestionContent,
    QuestionType,
    SectionItem,
    TikzCode,
)


# ─────────────────────────────────────────────────────────────────────────────
# Builders
# ─────────────────────────────────────────────────────────────────────────────

def build_question(
    qid: str = "q1",
    qtype: QuestionType = QuestionType.OTHER,
    stem: str = "",
    *,
    options=(),
    answer: str = "",
    fill_answers=(),
    solution_answers=(),
    solution: str = "",
    difficulty=None,
    source=None,
    images=(),
    tikz_codes=(),
) -> Question:
    """Build a Question with only the fields a test cares about."""
    return Question(
        id=qid,
        type=qtype,
        content=QuestionContent(
            stem=stem,
            options=tuple(options),
            answer=answer,
            fill_answers=tuple(fill_answers),
            solution_answers=tuple(solution_answers),
            solution=solution,
        ),
        difficulty=difficulty,
        source=source,
        images=tuple(images),
        tikz_codes=tuple(tikz_codes),
    )


def build_paper(*sections, name: str = "Quiz") -> Paper:
    """Build a Paper from (title, [questions]) pairs."""
    return Paper(
        id="p1",
        name=name,
        sections=tuple(
            PaperSection(title, tuple(SectionItem(q) for q in questions))
            for title, questions in sections
        ),
    )


def build_images(count: int, start_order: int = 0):
    return [
        MediaImage(id=f"img{i}", url=f"https://cdn.example/img{i}.png", order=start_order + i)
        for i in range(count)
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def choice_question() -> Question:
    """Choice question with two options, B correct."""
    return build_question(
        "c1",
        QuestionType.CHOICE,
        "1+1=\\choice",
        options=[ChoiceOption("1"), ChoiceOption("2", is_correct=True)],
        difficulty=1,
    )


@pytest.fixture
def fill_question() -> Question:
    return build_question(
        "f1",
        QuestionType.FILL,
        "2+2=\\fill",
        fill_answers=["4"],
        difficulty=2,
    )


@pytest.fixture
def solution_question() -> Question:
    return build_question(
        "s1",
        QuestionType.SOLUTION,
        "Solve \\subp first \\subp second",
        solution_answers=["\\subp 1", "\\subp 2"],
        difficulty=4,
        source="2023 Final",
    )


@pytest.fixture
def quiz_paper() -> Paper:
    """The 'Quiz' paper: one section 'A' with a single easy choice question."""
    question = build_question(
        "c1",
        QuestionType.CHOICE,
        "1+1=\\choice",
        options=[ChoiceOption("1"), ChoiceOption("2", is_correct=True)],
        difficulty=1,
    )
    return build_paper(("A", [question]), name="Quiz")


@pytest.fixture
def tikz_code() -> TikzCode:
    return TikzCode(id="t1", code="\\draw (0,0) -- (1,1);", order=0)


@pytest.fixture
def make_question():
    """Factory fixture: make_question(qid, qtype, stem, **fields)."""
    return build_question


@pytest.fixture
def make_paper():
    """Factory fixture: make_paper(("Title", [questions]), ..., name=...)."""
    return build_paper


@pytest.fixture
def make_images():
    """Factory fixture: make_images(count, start_order=0)."""
    return build_images
